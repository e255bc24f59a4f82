import logging

import click

from .chudnovsky import compute_pi
from .constants import DEFAULT_DIGITS, DEFAULT_THREADS, DEFAULT_VERIFY_SAMPLES, EXECUTORS
from .verify import extract_fractional_digits, verify_fractional_digits


logger = logging.getLogger(__name__)

_EPILOG = """\b
Examples:
  chudpi -d 5000                  5000 decimals
  chudpi -d 10000 -t 4            10000 decimals on 4 threads
  chudpi -d 1000 -s               print statistics
  chudpi -d 50000 -t 8 -s -q      statistics only
"""


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.command(
    epilog=_EPILOG,
    context_settings={"help_option_names": ["-h", "--help"], "auto_envvar_prefix": "CHUDPI"},
)
@click.option("-d", "--digits", default=DEFAULT_DIGITS, show_default=True, type=int, help="Decimals to compute.")
@click.option("-t", "--threads", default=DEFAULT_THREADS, show_default=True, type=int, help="Worker count.")
@click.option("-s", "--stats", is_flag=True, help="Print run statistics on stderr.")
@click.option("-q", "--quiet", is_flag=True, help="Do not print the value of pi.")
@click.option("-e", "--executor", type=click.Choice(EXECUTORS, case_sensitive=False), default="thread", show_default=True)
@click.option("--verify/--no-verify", default=False, show_default=True)
@click.option("--verify-samples", default=DEFAULT_VERIFY_SAMPLES, show_default=True, type=int)
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
def main(digits: int, threads: int, stats: bool, quiet: bool, executor: str, verify: bool, verify_samples: int, verbose: bool):
    """Compute the decimals of pi with the Chudnovsky series."""
    _setup_logging(verbose)
    if digits < 0:
        raise click.BadParameter("must be >= 0", param_hint="--digits")
    if threads < 1:
        logger.warning("thread count %d is below 1, using 1", threads)
        threads = 1
    result = compute_pi(digits, workers=threads, executor=executor.lower())
    if verify:
        ok, kind = verify_fractional_digits(extract_fractional_digits(result.value), verify_samples)
        if not ok:
            raise click.ClickException(f"verification failed ({kind})")
    if not quiet:
        click.echo(result.value)
    if stats:
        for line in result.stats.report():
            click.echo(line, err=True)
