"""Runtime settings passed explicitly into every operation.

Settings are built once from defaults, an optional YAML file and the process
environment (highest precedence), then handed down by the caller. Nothing in
aurgate reads configuration from module globals.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from .constants import Constants

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Environment:
    """The identity the process runs under."""

    user: Optional[str] = None
    sudo_user: Optional[str] = None

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "Environment":
        env = os.environ if environ is None else environ
        return cls(user=env.get("USER") or None, sudo_user=env.get("SUDO_USER") or None)

    @property
    def is_true_root(self) -> bool:
        """Logged in as root rather than elevated through sudo."""
        return self.user == Constants.ROOT_USER and self.sudo_user is None

    @property
    def has_root_priv(self) -> bool:
        """Root directly, or running under sudo."""
        return self.user == Constants.ROOT_USER or self.sudo_user is not None


@dataclass(frozen=True)
class Settings:
    """Read-only configuration context."""

    environment: Environment = field(default_factory=Environment)
    build_user: Optional[str] = None
    lock_file: str = Constants.LOCK_FILE
    sort_alphabetically: bool = False
    pacman_flags: Tuple[str, ...] = ()
    aur_url: str = Constants.AUR_URL
    request_timeout: float = Constants.REQUEST_TIMEOUT


def _load_yaml_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load the settings mapping from a YAML file.

    Args:
        config_path: Path to a YAML file. An ``aurgate:`` section is used
            when present, otherwise the whole document.

    Returns:
        Settings mapping, empty when the file is missing or unreadable.
    """
    if not config_path:
        return {}

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to load config: %s", e)
        return {}

    if not isinstance(data, dict):
        return {}
    section = data.get("aurgate", data)
    return section if isinstance(section, dict) else {}


def _apply_mapping(settings: Settings, cfg: Mapping[str, Any]) -> Settings:
    changes: Dict[str, Any] = {}
    if cfg.get("build_user"):
        changes["build_user"] = str(cfg["build_user"])
    if cfg.get("lock_file"):
        changes["lock_file"] = str(cfg["lock_file"])
    if "sort_alphabetically" in cfg:
        value = cfg["sort_alphabetically"]
        changes["sort_alphabetically"] = (
            value if isinstance(value, bool) else str(value).strip().lower() in _TRUTHY
        )
    if cfg.get("pacman_flags"):
        flags = cfg["pacman_flags"]
        changes["pacman_flags"] = tuple(flags.split() if isinstance(flags, str) else map(str, flags))
    if cfg.get("aur_url"):
        changes["aur_url"] = str(cfg["aur_url"]).rstrip("/")
    if cfg.get("request_timeout") is not None:
        try:
            changes["request_timeout"] = float(cfg["request_timeout"])
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid request_timeout: %r", cfg["request_timeout"])
    return replace(settings, **changes) if changes else settings


def load_settings(
    config_path: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Build Settings from defaults, a YAML file and the environment.

    Precedence, lowest to highest: built-in defaults, the YAML file,
    AURGATE_* environment variables.
    """
    env = os.environ if environ is None else environ
    settings = Settings(environment=Environment.from_environ(env))
    settings = _apply_mapping(settings, _load_yaml_config(config_path))

    overrides = {
        "build_user": env.get("AURGATE_BUILD_USER"),
        "lock_file": env.get("AURGATE_LOCK_FILE"),
        "aur_url": env.get("AURGATE_AUR_URL"),
    }
    if env.get("AURGATE_SORT_ALPHABETICALLY") is not None:
        overrides["sort_alphabetically"] = env["AURGATE_SORT_ALPHABETICALLY"]
    return _apply_mapping(settings, {k: v for k, v in overrides.items() if v is not None})
