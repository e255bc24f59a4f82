from click.testing import CliRunner

from chudpi.cli import main


PI_50 = "3.14159265358979323846264338327950288419716939937510"


def test_cli_prints_pi():
    result = CliRunner().invoke(main, ["-d", "50"])
    assert result.exit_code == 0
    assert result.stdout == PI_50 + "\n"


def test_cli_threads():
    result = CliRunner().invoke(main, ["-d", "50", "-t", "4"])
    assert result.exit_code == 0
    assert result.stdout == PI_50 + "\n"


def test_cli_stats_on_stderr():
    result = CliRunner().invoke(main, ["-d", "50", "-s", "-t", "2"])
    assert result.exit_code == 0
    assert result.stdout == PI_50 + "\n"
    assert "======= Stats =======" in result.stderr
    assert "Threads   : 2" in result.stderr
    assert "Decimals  : 50" in result.stderr
    assert "Stats" not in result.stdout


def test_cli_quiet():
    result = CliRunner().invoke(main, ["-d", "50", "-q"])
    assert result.exit_code == 0
    assert result.stdout == ""


def test_cli_quiet_with_stats():
    result = CliRunner().invoke(main, ["-d", "50", "-q", "-s"])
    assert result.exit_code == 0
    assert result.stdout == ""
    assert "Time      :" in result.stderr


def test_cli_default_digits():
    result = CliRunner().invoke(main, [])
    assert result.exit_code == 0
    value = result.stdout.strip()
    assert value.startswith(PI_50)
    assert len(value) == 1002


def test_cli_clamps_threads():
    result = CliRunner().invoke(main, ["-d", "20", "-t", "0", "-s"])
    assert result.exit_code == 0
    assert result.stdout == PI_50[:22] + "\n"
    assert "Threads   : 1" in result.stderr


def test_cli_rejects_negative_digits():
    result = CliRunner().invoke(main, ["-d", "-5"])
    assert result.exit_code == 2


def test_cli_verify():
    result = CliRunner().invoke(main, ["-d", "200", "-t", "3", "--verify"])
    assert result.exit_code == 0
    assert result.stdout.startswith(PI_50)


def test_cli_envvar_digits():
    result = CliRunner().invoke(main, [], env={"CHUDPI_DIGITS": "10"})
    assert result.exit_code == 0
    assert result.stdout == PI_50[:12] + "\n"


def test_cli_help():
    result = CliRunner().invoke(main, ["-h"])
    assert result.exit_code == 0
    assert "--digits" in result.stdout
    assert "Examples" in result.stdout
