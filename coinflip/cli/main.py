#!/usr/bin/env python3
"""
Coin Flip Simulator CLI

Runs the interactive menu on stdin/stdout:
- 1 : Generate coin flips
- 2 : Display flip results (paginated)
- 3 : Show pattern statistics
- 0 : Exit program

Configuration comes from COINFLIP_* environment variables (or a .env file).
"""

import sys
import click

from coinflip.config import ConfigError, load_config
from coinflip.console import Console, InputClosedError
from coinflip.core.setup import setup_logging, logger


@click.command()
@click.option(
    "-v", "--verbosity",
    count=True,
    help="Increase logging verbosity (-v=INFO, -vv=DEBUG, -vvv=TRACE)"
)
@click.option("--no-clear", is_flag=True, help="Never clear the terminal between menu rounds")
def cli(verbosity, no_clear):
    """
    Simulate fair coin flips and count runs of consecutive outcomes.

    Log records go to stderr; use -v, -vv, or -vvv to see them.
    """
    from coinflip.app import MenuLoop

    setup_logging(min(verbosity, 3))

    try:
        config = load_config()
    except ConfigError as e:
        raise click.ClickException(str(e))

    if config.log_dir is not None:
        setup_logging(min(verbosity, 3), config.log_dir)

    console = Console(clear_screen=config.clear_screen and not no_clear)
    loop = MenuLoop(console, config)

    try:
        loop.run()
    except MemoryError:
        logger.error("Could not allocate the flip sequence")
        console.error("Memory allocation error!")
        sys.exit(1)
    except InputClosedError as e:
        logger.warning(f"Exiting: {e}")
        sys.exit(1)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
