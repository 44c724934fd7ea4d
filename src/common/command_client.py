"""Helpers for invoking the version-manager collaborator commands.

Encapsulates subprocess/timeout error handling for the two external queries
the resolver depends on: the installed-version lister and the system
toolchain probe. Commands are read from ``Constants`` at call time so
configuration overrides apply without re-importing this module.
"""
from __future__ import annotations

import logging
import os
import subprocess
from typing import Dict, List, Optional, Sequence

from constants import Constants, SpecialVersions
from common.logging_utils import extra_context, is_debug_enabled, Timer

logger = logging.getLogger(__name__)


class CommandError(RuntimeError):
    """Raised when a collaborator command cannot be run or fails outright."""


def run_command(
    argv: Sequence[str],
    *,
    context: str,
    env: Optional[Dict[str, str]] = None,
) -> subprocess.CompletedProcess:
    """Run ``argv`` capturing text output, with consistent errors and DEBUG traces.

    A non-zero exit status is returned to the caller, not raised; only a
    missing executable or a timeout raises ``CommandError``.
    """
    command = list(argv)
    if not command:
        raise CommandError(f"{context}: no command configured")
    display = " ".join(command)
    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "Command start",
                extra=extra_context(
                    event="command_start",
                    component="command_client",
                    action=context,
                    command=display,
                ),
            )
        try:
            proc = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=Constants.COMMAND_TIMEOUT_SEC,
                env=env,
                check=False,
            )
        except FileNotFoundError as exc:
            raise CommandError(f"{context}: command not found: {command[0]}") from exc
        except subprocess.TimeoutExpired as exc:
            raise CommandError(
                f"{context}: '{display}' timed out after {Constants.COMMAND_TIMEOUT_SEC} seconds"
            ) from exc
        except OSError as exc:
            raise CommandError(f"{context}: cannot run '{display}': {exc}") from exc

        if is_debug_enabled(logger):
            logger.debug(
                "Command finished",
                extra=extra_context(
                    event="command_exit",
                    component="command_client",
                    action=context,
                    outcome="success" if proc.returncode == 0 else "failure",
                    returncode=proc.returncode,
                    duration_ms=t.duration_ms(),
                    command=display,
                ),
            )
    return proc


def list_installed_versions() -> List[str]:
    """Return installed version strings in the lister's order.

    Blank lines are dropped and surrounding whitespace trimmed; the list is
    otherwise returned as-is (unsorted, possibly with duplicates).
    """
    proc = run_command(Constants.VERSIONS_COMMAND, context="list versions")
    if proc.returncode != 0:
        detail = (proc.stderr or "").strip() or f"exit status {proc.returncode}"
        raise CommandError(f"list versions: {detail}")
    versions = [line.strip() for line in (proc.stdout or "").splitlines()]
    return [v for v in versions if v]


def probe_system_toolchain() -> str:
    """Return the path of the system toolchain, or an empty string if absent.

    The probe runs with the active version forced to ``system`` so that the
    version manager only looks outside its own installations.
    """
    env = dict(os.environ)
    env[Constants.ACTIVE_VERSION_ENV] = SpecialVersions.SYSTEM.value
    proc = run_command(Constants.SYSTEM_PROBE_COMMAND, context="probe system", env=env)
    if proc.returncode != 0:
        return ""
    lines = (proc.stdout or "").strip().splitlines()
    return lines[0].strip() if lines else ""


def system_toolchain_present() -> bool:
    """Predicate form of ``probe_system_toolchain`` used by the resolver."""
    return bool(probe_system_toolchain())
