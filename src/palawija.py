"""Palawija - PHP version manager

    Installs PHP source releases under ~/.palawija, lists them, and switches
    the system PHP between compiled versions.

    Returns:
        int: Exit code
"""
import logging
import os
import sys

from args import parse_args
from cli_available import run_available
from cli_context import build_context
from cli_install import run_install
from cli_list import run_list
from cli_use import run_use, run_which
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from common.system import LocalSystem
from constants import Constants, ExitCodes
from errors import PalawijaError
from settings import load_settings

__version__ = Constants.VERSION

COMMANDS = {
    "install": run_install,
    "use": run_use,
    "list": run_list,
    "which": run_which,
    "available": run_available,
}


def main(argv=None, system=None):
    """Main function of the program."""
    logger = logging.getLogger(__name__)

    args = parse_args(argv)
    # Honor CLI --loglevel by passing it to centralized logger via env
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = str(args.LOG_LEVEL).upper()
    configure_logging(getattr(args, "LOG_FILE", None))

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli",
                                action=args.action),
        )

    try:
        ctx = build_context(load_settings(), system or LocalSystem())
        code = COMMANDS[args.action](args, ctx)
    except PalawijaError as exc:
        logger.error("%s", exc)
        if exc.hint:
            logger.error("\U0001F4A1 %s", exc.hint)
        code = ExitCodes.FAILURE

    if is_debug_enabled(logger):
        logger.debug(
            "CLI finished",
            extra=extra_context(event="function_exit", component="cli",
                                action=args.action, outcome=code.name.lower()),
        )
    sys.exit(code.value)


if __name__ == "__main__":
    main()
