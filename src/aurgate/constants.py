"""Constants used in the project."""

from enum import Enum


class SortMode(Enum):
    """Orderings available for AUR RPC results.

    Args:
        Enum (string): Sort modes understood by sort_aur_info.
    """

    ALPHABETICAL = "alphabetical"
    VOTES = "votes"


class Messages:  # pylint: disable=too-few-public-methods
    """Operator-facing message texts."""

    MUST_BE_ROOT = "You have to use `sudo` for that."
    TRUE_ROOT = "You should never build packages as the true root. Are you okay with this?"
    DB_LOCKED = (
        "The package database is locked. "
        "Press enter when it's unlocked to continue."
    )
    NOT_FOUND = "The following packages couldn't be found:"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    AUR_URL = "https://aur.archlinux.org"
    AUR_RPC_PATH = "/rpc/"
    AUR_RPC_VERSION = 5
    AUR_PKGBUILD_PATH = "/cgit/aur.git/plain/PKGBUILD"
    LOCK_FILE = "/var/lib/pacman/db.lck"
    PACMAN_BIN = "pacman"
    GIT_BIN = "git"
    DEVEL_SUFFIXES = ("-git", "-hg", "-svn", "-darcs", "-cvs", "-bzr")
    ROOT_USER = "root"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "AURGATE_LOG_LEVEL"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests
