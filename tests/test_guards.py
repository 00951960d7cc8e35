"""Tests for privilege and lock guards."""

from unittest.mock import MagicMock

import pytest

from aurgate.constants import Messages
from aurgate.errors import MustBeRootError, PrivilegeError, TrueRootError
from aurgate.guards import check_db_lock, sudo, true_root
from aurgate.settings import Environment, Settings

ROOT = Environment(user="root")
SUDO = Environment(user="root", sudo_user="alice")
USER = Environment(user="alice")


class TestSudo:
    """Actions requiring root privileges."""

    @pytest.mark.parametrize("env", [ROOT, SUDO])
    def test_runs_with_privileges(self, env):
        action = MagicMock(return_value="done")
        assert sudo(Settings(environment=env), action) == "done"
        action.assert_called_once_with()

    def test_refuses_plain_user(self):
        action = MagicMock()
        with pytest.raises(MustBeRootError):
            sudo(Settings(environment=USER), action)
        action.assert_not_called()

    def test_is_a_privilege_error(self):
        with pytest.raises(PrivilegeError):
            sudo(Settings(environment=USER), lambda: None)


class TestTrueRoot:
    """Building must not happen as the true root."""

    def test_true_root_without_build_user_refused(self):
        action = MagicMock()
        with pytest.raises(TrueRootError):
            true_root(Settings(environment=ROOT), action)
        action.assert_not_called()

    def test_true_root_with_root_build_user_refused(self):
        with pytest.raises(TrueRootError):
            true_root(Settings(environment=ROOT, build_user="root"), lambda: None)

    def test_true_root_with_build_user_allowed(self):
        assert true_root(Settings(environment=ROOT, build_user="builder"), lambda: 1) == 1

    @pytest.mark.parametrize("env", [SUDO, USER])
    def test_non_true_root_allowed(self, env):
        assert true_root(Settings(environment=env), lambda: "ok") == "ok"


class TestCheckDbLock:
    """Operator-gated wait on the database lock file."""

    def test_waits_until_lock_gone(self):
        states = iter([True, True, False])
        emit = MagicMock()
        wait = MagicMock(return_value="")
        settings = Settings(lock_file="/tmp/db.lck")

        check_db_lock(settings, lock_exists=lambda path: next(states), wait=wait, emit=emit)

        assert emit.call_count == 2
        assert wait.call_count == 2
        emit.assert_called_with(settings, Messages.DB_LOCKED)

    def test_no_lock_returns_immediately(self, tmp_path):
        emit = MagicMock()
        wait = MagicMock()
        check_db_lock(Settings(lock_file=str(tmp_path / "db.lck")), wait=wait, emit=emit)
        emit.assert_not_called()
        wait.assert_not_called()

    def test_real_lock_file(self, tmp_path):
        lock = tmp_path / "db.lck"
        lock.write_text("")
        emit = MagicMock()

        def operator_input():
            lock.unlink()
            return "\n"

        check_db_lock(Settings(lock_file=str(lock)), wait=operator_input, emit=emit)
        assert emit.call_count == 1
