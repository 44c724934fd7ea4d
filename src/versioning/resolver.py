"""Installed-version resolver.

Resolution runs in fixed stages (system, latest, shorthand, minor, full),
each returning as soon as it finds a match; a stage without a match falls
through to the next one. Ordering is version-aware via ``parser.version_key``.
"""

import logging
from typing import Callable, Iterable, List, Optional, Sequence

from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants

from .errors import NoVersionsInstalled, SystemNotFound, VersionNotInstalled
from .models import InstalledSnapshot, ResolutionResult, Specifier, SpecifierKind
from .parser import build_snapshot, classify_specifier, latest_major_pattern, latest_minor_pattern

logger = logging.getLogger(__name__)


class VersionResolver:
    """Resolve specifiers against installed versions reported by collaborators.

    Args:
        list_versions: returns installed version strings (any order).
        system_present: returns True when a system toolchain is on the path.
        supported_majors: majors shorthand specifiers are qualified with, in
            priority order; defaults to ``Constants.SUPPORTED_MAJORS``.
    """

    def __init__(
        self,
        list_versions: Callable[[], Iterable[str]],
        system_present: Callable[[], bool],
        supported_majors: Optional[Sequence[str]] = None,
    ) -> None:
        self._list_versions = list_versions
        self._system_present = system_present
        if supported_majors is None:
            supported_majors = Constants.SUPPORTED_MAJORS
        self.supported_majors = tuple(str(m) for m in supported_majors)

    def fetch_candidates(self) -> InstalledSnapshot:
        """Query the lister once and sort its output into a snapshot."""
        return build_snapshot(self._list_versions())

    def resolve(self, raw: Optional[str]) -> str:
        """Return the installed version matching ``raw``.

        Raises:
            SystemNotFound, NoVersionsInstalled, VersionNotInstalled
        """
        return self.resolve_detailed(raw).resolved_version

    def resolve_detailed(self, raw: Optional[str]) -> ResolutionResult:
        """Like ``resolve`` but also report the stage that matched."""
        spec = classify_specifier(raw, default=Constants.DEFAULT_SPECIFIER)
        if spec.kind == SpecifierKind.SYSTEM:
            # The lister is not needed for "system".
            if not self._system_present():
                raise SystemNotFound()
            return ResolutionResult(spec.raw, spec.kind, "system", "system", 0)

        snapshot = self.fetch_candidates()
        result = self.pick(spec, snapshot)
        if is_debug_enabled(logger):
            logger.debug(
                "Resolved %s -> %s",
                spec.raw,
                result.resolved_version,
                extra=extra_context(
                    event="decision",
                    component="resolver",
                    action="resolve",
                    outcome="success",
                    kind=spec.kind.value,
                    stage=result.stage,
                    count=result.candidate_count,
                ),
            )
        return result

    def pick(self, spec: Specifier, snapshot: InstalledSnapshot) -> ResolutionResult:
        """Apply the resolution stages to an already-fetched snapshot."""
        count = len(snapshot)

        def found(version: str, stage: str) -> ResolutionResult:
            return ResolutionResult(spec.raw, spec.kind, version, stage, count)

        if spec.kind == SpecifierKind.LATEST:
            latest = snapshot.latest()
            if latest is None:
                raise NoVersionsInstalled()
            return found(latest, "latest")

        if spec.kind == SpecifierKind.SHORTHAND:
            for major in self.supported_majors:
                if spec.raw == major:
                    match = self._latest_major(major, snapshot)
                    stage = "latest-major"
                else:
                    match = self._latest_minor(f"{major}.{spec.raw}", snapshot)
                    stage = "latest-minor"
                if match is not None:
                    return found(match, stage)
                self._trace_fallthrough(spec, f"major {major}")

        if spec.kind == SpecifierKind.MINOR:
            match = self._latest_minor(spec.raw, snapshot)
            if match is not None:
                return found(match, "latest-minor")
            self._trace_fallthrough(spec, "minor")

        if spec.kind == SpecifierKind.FULL and spec.raw in snapshot:
            return found(spec.raw, "exact")

        raise VersionNotInstalled(spec.raw)

    @staticmethod
    def _latest_major(major: str, snapshot: InstalledSnapshot) -> Optional[str]:
        pattern = latest_major_pattern(major)
        return snapshot.latest_matching(lambda v: pattern.fullmatch(v) is not None)

    @staticmethod
    def _latest_minor(minor: str, snapshot: InstalledSnapshot) -> Optional[str]:
        pattern = latest_minor_pattern(minor)
        return snapshot.latest_matching(lambda v: pattern.fullmatch(v) is not None)

    @staticmethod
    def _trace_fallthrough(spec: Specifier, stage: str) -> None:
        if is_debug_enabled(logger):
            logger.debug(
                "No match for %s at stage %s",
                spec.raw,
                stage,
                extra=extra_context(
                    event="decision",
                    component="resolver",
                    action="pick",
                    outcome="fallthrough",
                    stage=stage,
                ),
            )


def resolve(
    specifier: Optional[str],
    installed_versions: Iterable[str],
    system_present: Callable[[], bool],
    supported_majors: Optional[Sequence[str]] = None,
) -> str:
    """Functional form of ``VersionResolver.resolve`` over a fixed version list."""
    versions: List[str] = list(installed_versions)
    return VersionResolver(lambda: versions, system_present, supported_majors).resolve(specifier)
