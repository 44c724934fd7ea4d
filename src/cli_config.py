"""Configuration overrides for runtime tunables.

Values are applied onto ``Constants`` in increasing precedence: YAML config
file, environment variables, then CLI flags. Invalid files raise
``ConfigError``; invalid environment values are logged and ignored.
"""

from __future__ import annotations

import logging
import os
import shlex
from typing import Any, Dict, List, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)

CONFIG_SECTION = "installed"


class ConfigError(ValueError):
    """Raised when a configuration file or value cannot be used."""


def _as_command(value: Any, key: str) -> List[str]:
    if isinstance(value, str):
        argv = shlex.split(value)
    elif isinstance(value, list) and all(isinstance(v, (str, int)) for v in value):
        argv = [str(v) for v in value]
    else:
        raise ConfigError(f"{key} must be a string or a list of strings")
    if not argv:
        raise ConfigError(f"{key} must not be empty")
    return argv


def _as_majors(value: Any, key: str) -> tuple:
    if isinstance(value, (str, int)):
        value = [value]
    if not isinstance(value, list) or not value:
        raise ConfigError(f"{key} must be a non-empty list of integers")
    majors = []
    for item in value:
        text = str(item).strip()
        if not text.isdigit():
            raise ConfigError(f"{key}: '{item}' is not a major version number")
        majors.append(text)
    return tuple(majors)


def _as_timeout(value: Any, key: str) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{key} must be a number") from exc
    if timeout <= 0:
        raise ConfigError(f"{key} must be positive")
    return timeout


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML mapping, unwrapping an optional ``installed:`` section."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping")
    section = data.get(CONFIG_SECTION, data)
    if not isinstance(section, dict):
        raise ConfigError(f"'{CONFIG_SECTION}' section in {path} must be a mapping")
    return section


def apply_config(cfg: Dict[str, Any]) -> None:
    """Validate config values and write them onto ``Constants``."""
    unknown = set(cfg) - {"supported_majors", "versions_command", "system_probe_command", "command_timeout"}
    for key in sorted(unknown):
        logger.warning("Ignoring unknown config key: %s", key)

    if "supported_majors" in cfg:
        Constants.SUPPORTED_MAJORS = _as_majors(cfg["supported_majors"], "supported_majors")
    if "versions_command" in cfg:
        Constants.VERSIONS_COMMAND = _as_command(cfg["versions_command"], "versions_command")
    if "system_probe_command" in cfg:
        Constants.SYSTEM_PROBE_COMMAND = _as_command(cfg["system_probe_command"], "system_probe_command")
    if "command_timeout" in cfg:
        Constants.COMMAND_TIMEOUT_SEC = _as_timeout(cfg["command_timeout"], "command_timeout")


def apply_env_overrides(environ: Optional[Dict[str, str]] = None) -> None:
    """Apply ``GOENV_INSTALLED_*`` environment overrides onto ``Constants``."""
    env = os.environ if environ is None else environ
    overrides = (
        (Constants.ENV_SUPPORTED_MAJORS, "SUPPORTED_MAJORS",
         lambda v, k: _as_majors([p for p in v.split(",") if p.strip()], k)),
        (Constants.ENV_VERSIONS_COMMAND, "VERSIONS_COMMAND", _as_command),
        (Constants.ENV_PROBE_COMMAND, "SYSTEM_PROBE_COMMAND", _as_command),
        (Constants.ENV_COMMAND_TIMEOUT, "COMMAND_TIMEOUT_SEC", _as_timeout),
    )
    for env_name, attr, convert in overrides:
        raw = env.get(env_name)
        if raw is None or not raw.strip():
            continue
        try:
            setattr(Constants, attr, convert(raw, env_name))
        except ConfigError as exc:
            logger.warning("Ignoring %s: %s", env_name, exc)


def apply_cli_overrides(args) -> None:
    """Apply CLI flags; these win over config file and environment."""
    majors = getattr(args, "SUPPORTED_MAJORS", None)
    if majors:
        Constants.SUPPORTED_MAJORS = _as_majors(list(majors), "--supported-major")


def load_runtime_config(args, environ: Optional[Dict[str, str]] = None) -> None:
    """Apply every configuration layer in precedence order."""
    env = os.environ if environ is None else environ
    config_path = getattr(args, "CONFIG", None)
    if config_path:
        apply_config(load_config(config_path))
    else:
        env_path = env.get(Constants.ENV_CONFIG)
        if env_path:
            if os.path.isfile(env_path):
                apply_config(load_config(env_path))
            else:
                logger.info("Config file from %s not found: %s", Constants.ENV_CONFIG, env_path)
    apply_env_overrides(env)
    apply_cli_overrides(args)
