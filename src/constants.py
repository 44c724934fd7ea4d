"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FAILURE = 1


class SpecialVersions(Enum):
    """Specifier keywords that are not version numbers.

    Args:
        Enum (string): Keywords understood by the resolver.
    """

    LATEST = "latest"
    SYSTEM = "system"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    PROG_NAME = "goenv"
    DEFAULT_SPECIFIER = SpecialVersions.LATEST.value
    COMPLETION_CANDIDATES = [
        SpecialVersions.LATEST.value,
        SpecialVersions.SYSTEM.value,
    ]

    # Majors that bare shorthand specifiers ("23", "23rc1") are qualified with,
    # in priority order.
    SUPPORTED_MAJORS = ("1",)

    # Collaborator commands
    VERSIONS_COMMAND = ["goenv", "versions", "--bare"]
    SYSTEM_PROBE_COMMAND = ["goenv", "which", "go"]
    ACTIVE_VERSION_ENV = "GOENV_VERSION"
    COMMAND_TIMEOUT_SEC = 10

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
    DEFAULT_LOG_LEVEL = "WARNING"
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    INSTALL_LIST_HINT = "Run 'goenv install --list' to see available versions."

    # Environment variables
    ENV_DEBUG = "GOENV_DEBUG"
    ENV_LOG_LEVEL = "GOENV_INSTALLED_LOG_LEVEL"
    ENV_CONFIG = "GOENV_INSTALLED_CONFIG"
    ENV_SUPPORTED_MAJORS = "GOENV_INSTALLED_SUPPORTED_MAJORS"
    ENV_VERSIONS_COMMAND = "GOENV_INSTALLED_VERSIONS_COMMAND"
    ENV_PROBE_COMMAND = "GOENV_INSTALLED_PROBE_COMMAND"
    ENV_COMMAND_TIMEOUT = "GOENV_INSTALLED_COMMAND_TIMEOUT"
