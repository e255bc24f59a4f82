from chudpi.verify import extract_fractional_digits, pi_digits_spigot, reference_fractional_digits, verify_fractional_digits


PI_50 = "3.14159265358979323846264338327950288419716939937510"


def test_spigot_prefix():
    g = pi_digits_spigot()
    digits = "".join(str(next(g)) for _ in range(51))
    assert digits == PI_50.replace(".", "")


def test_reference_methods_agree():
    assert reference_fractional_digits(50, method="mpmath") == PI_50[2:]
    assert reference_fractional_digits(50, method="spigot") == PI_50[2:]


def test_extract_fractional_digits():
    assert extract_fractional_digits("3.1415") == "1415"
    assert extract_fractional_digits("3") == ""


def test_verify_ok():
    ok, kind = verify_fractional_digits(PI_50[2:], 1000)
    assert ok
    assert kind == "pi mpmath"


def test_verify_mismatch():
    ok, _ = verify_fractional_digits("14159265358979323840", 100, method="spigot")
    assert not ok


def test_verify_skipped():
    ok, kind = verify_fractional_digits("999", 0)
    assert ok
    assert kind == "verification skipped"
