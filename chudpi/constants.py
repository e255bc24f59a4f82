A = 13591409
B = 545140134
C = 640320
C3_OVER_24 = (C**3) // 24
SQRT_ARG = 10005
SCALE = 426880

DIGITS_PER_TERM = 14
TERM_MARGIN = 10
PRECISION_DIGIT_MARGIN = 100
BITS_PER_DIGIT = 4

DEFAULT_DIGITS = 1000
DEFAULT_THREADS = 1
DEFAULT_VERIFY_SAMPLES = 1000

EXECUTORS = ("thread", "process")
