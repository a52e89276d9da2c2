"""Command-line entry point: recover a secret from a JSON share record."""

import json
import logging
import sys

import click

from sharelock.errors import ReconstructionError
from sharelock.recovery import recover_record
from sharelock.shares import load_record

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INCONSISTENT = 2


def _configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level),
        format='[%(levelname)s][%(module)s][%(asctime)s] %(message)s',
    )


@click.command()
@click.argument("record", type=click.File("r"), default="-")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default="WARNING", show_default=True, envvar="SHARELOCK_LOG_LEVEL",
              help="Logging verbosity")
@click.option("--json", "as_json", is_flag=True,
              help="Print the result as a JSON object")
def main(record, log_level, as_json):
    """Reconstruct the secret in RECORD (a JSON file, '-' for stdin) and
    report shares that are inconsistent with it."""
    _configure_logging(log_level.upper())

    try:
        result = recover_record(load_record(record.read()))
    except (ReconstructionError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_ERROR)

    if as_json:
        click.echo(json.dumps({
            "secret": str(result.secret),
            "inconsistent": list(result.inconsistent),
        }))
    else:
        click.echo(f"Secret: {result.secret}")
        if result.ok:
            click.echo("All shares consistent.")
        else:
            ids = ", ".join(str(x) for x in result.inconsistent)
            click.echo(f"Inconsistent shares: {ids}")

    sys.exit(EXIT_OK if result.ok else EXIT_INCONSISTENT)


if __name__ == "__main__":
    main()
