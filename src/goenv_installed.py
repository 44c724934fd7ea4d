"""goenv-installed - display an installed Go version, resolving shortcuts.

    Returns:
        int: Exit code
"""
import logging
import sys

from constants import ExitCodes, Constants
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from common.command_client import CommandError, list_installed_versions, system_toolchain_present
from cli_config import ConfigError, load_runtime_config
from args import parse_args
from versioning.errors import ResolutionError, VersionNotInstalled
from versioning.resolver import VersionResolver

logger = logging.getLogger(__name__)


def _fail(message):
    sys.stderr.write(f"{Constants.PROG_NAME}: {message}\n")
    return ExitCodes.FAILURE.value


def print_completions():
    """Prints the completion candidates: keywords, then installed versions."""
    for candidate in Constants.COMPLETION_CANDIDATES:
        print(candidate)
    for version in list_installed_versions():
        print(version)


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL, args.LOG_FILE)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main")
        )

    try:
        load_runtime_config(args)
    except ConfigError as e:
        return _fail(str(e))

    try:
        if args.COMPLETE:
            print_completions()
            return ExitCodes.SUCCESS.value

        resolver = VersionResolver(
            list_installed_versions,
            system_toolchain_present,
            Constants.SUPPORTED_MAJORS,
        )
        version = resolver.resolve(args.version)
    except ResolutionError as e:
        sys.stderr.write(e.message(Constants.PROG_NAME) + "\n")
        if isinstance(e, VersionNotInstalled):
            sys.stderr.write(Constants.INSTALL_LIST_HINT + "\n")
        if is_debug_enabled(logger):
            logger.debug(
                "Resolution failed: %s",
                e,
                extra=extra_context(
                    event="decision",
                    component="cli",
                    action="main",
                    outcome="failure",
                    specifier=getattr(e, "specifier", None),
                )
            )
        return ExitCodes.FAILURE.value
    except CommandError as e:
        return _fail(str(e))

    print(version)
    if is_debug_enabled(logger):
        logger.debug(
            "CLI finished",
            extra=extra_context(event="function_exit", component="cli", action="main", outcome="success")
        )
    return ExitCodes.SUCCESS.value


if __name__ == "__main__":
    sys.exit(main())
