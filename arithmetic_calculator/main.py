"""
Main entrypoint of the interactive calculator.

This script:
- Starts a calculator session on standard input and output
- Exits with status 0 once the user types 'quit'
- Exits with status 1 if standard input ends or fails before that
"""

import argparse
import sys
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from arithmetic_calculator.common.errors import InputStreamError
from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.session.session import CalculatorSession


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    The calculator takes no options, so any unexpected field is rejected.
    """

    model_config = ConfigDict(extra="forbid")


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to sys.argv[1:]
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Interactive calculator evaluating 'number operator number' lines"
    )
    args = parser.parse_args(argv)
    return CliArgs(**vars(args))


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main function executed by the console script.
    """
    parse_args(argv)
    session = CalculatorSession()

    try:
        session.start()
    except InputStreamError as exc:
        logger.error(f"🔌❌ Cannot read input: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
