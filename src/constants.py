"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FAILURE = 1


class Platform(Enum):
    """Activation mechanisms supported by the program.

    Args:
        Enum (string): Platform family, as used to pick an activator.
    """

    POSIX = "posix"
    WINDOWS = "windows"


class ReleaseBranches:  # pylint: disable=too-few-public-methods
    """Hand-maintained support table of PHP major.minor branches.

    Anything that is neither active nor LTS is considered end-of-life.
    """

    ACTIVE = ("8.3", "8.2")
    LTS = ("8.1",)


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    VERSION = "1.0.0"
    PROG = "palawija"

    RELEASES_URL = "https://www.php.net/releases/"
    DISTRIBUTIONS_URL = "https://www.php.net/distributions/"
    TARBALL_SUFFIX = ".tar.gz"
    DIR_PREFIX = "php-"

    REQUEST_TIMEOUT = 30  # Timeout in seconds for the releases page
    DOWNLOAD_TIMEOUT = 300  # Timeout in seconds for tarball downloads
    PROBE_TIMEOUT = 10  # Timeout in seconds for `php --version`
    DOWNLOAD_CHUNK_SIZE = 64 * 1024
    PROGRESS_STEP_PERCENT = 10

    INSTALL_DIR_NAME = ".palawija"
    WINDOWS_INSTALL_DIR_NAME = "palawija"
    GLOBAL_LINK_PATH = "/usr/local/bin/php"
    POSIX_BINARY = ("bin", "php")
    WINDOWS_BINARY = ("php.exe",)

    ENV_LOG_LEVEL = "PALAWIJA_LOG_LEVEL"
    ENV_ROOT = "PALAWIJA_ROOT"
    ENV_LINK = "PALAWIJA_LINK"

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
