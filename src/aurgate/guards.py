"""Guards for actions that need (or must avoid) root, or a free database."""

from __future__ import annotations

import os
from typing import Callable, TypeVar

from .common import output
from .constants import Constants, Messages
from .errors import MustBeRootError, TrueRootError
from .settings import Settings

T = TypeVar("T")


def sudo(settings: Settings, action: Callable[[], T]) -> T:
    """Run ``action`` only with root privileges (root or via sudo).

    Raises:
        MustBeRootError: Without privileges; ``action`` is not run.
    """
    if not settings.environment.has_root_priv:
        raise MustBeRootError()
    return action()


def true_root(settings: Settings, action: Callable[[], T]) -> T:
    """Refuse to run ``action`` as the true root without a build user.

    Raises:
        TrueRootError: Logged in as root and no other build user is set.
    """
    alternate_user = settings.build_user not in (None, Constants.ROOT_USER)
    if settings.environment.is_true_root and not alternate_user:
        raise TrueRootError()
    return action()


def check_db_lock(
    settings: Settings,
    lock_exists: Callable[[str], bool] = os.path.exists,
    wait: Callable[[], str] = input,
    emit: output.Emitter = output.warn,
) -> None:
    """Block until the package database lock file is gone.

    While the lock exists, warn and wait for a line of operator input before
    checking again. Any input counts as "retry".
    """
    while lock_exists(settings.lock_file):
        emit(settings, Messages.DB_LOCKED)
        wait()
