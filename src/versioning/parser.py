"""Specifier classification, version ordering and match patterns."""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Tuple

from packaging.version import InvalidVersion, Version

from .models import InstalledSnapshot, Specifier, SpecifierKind

logger = logging.getLogger(__name__)

SHORTHAND_RE = re.compile(r"\d+(rc\d+)?", re.ASCII)
MINOR_RE = re.compile(r"\d+\.\d+(rc\d+)?", re.ASCII)
FULL_RE = re.compile(r"\d+\.\d+\.\d+", re.ASCII)
RC_MINOR_RE = re.compile(r"(\d+\.\d+rc)\d+", re.ASCII)

VersionKey = Tuple[Tuple[int, ...], bool, Tuple]


def classify_specifier(raw: Optional[str], default: str = "latest") -> Specifier:
    """Classify trimmed input; patterns are tried in fixed priority order.

    Empty or missing input is treated as ``default``.
    """
    text = (raw or "").strip() or default
    if text == "system":
        return Specifier(raw=text, kind=SpecifierKind.SYSTEM)
    if text == "latest":
        return Specifier(raw=text, kind=SpecifierKind.LATEST)
    if SHORTHAND_RE.fullmatch(text):
        return Specifier(raw=text, kind=SpecifierKind.SHORTHAND)
    if MINOR_RE.fullmatch(text):
        return Specifier(raw=text, kind=SpecifierKind.MINOR)
    if FULL_RE.fullmatch(text):
        return Specifier(raw=text, kind=SpecifierKind.FULL)
    return Specifier(raw=text, kind=SpecifierKind.UNRECOGNIZED)


def version_key(raw: str) -> VersionKey:
    """Sort key ``(release, is_final, pre)`` for a version string.

    Release components compare numerically and a shorter release orders
    first (``1.23 < 1.23.0``). A pre-release orders before the final
    release with the same components (``1.23rc2 < 1.23``).

    Raises:
        InvalidVersion: if ``raw`` is not a parseable version.
    """
    parsed = Version(raw)
    pre = parsed.pre
    return parsed.release, pre is None, pre or ()


def sort_versions(versions: Iterable[str]) -> List[str]:
    """Return parseable versions in ascending version order.

    Unparseable entries are dropped; the sort is stable.
    """
    keyed = []
    for v in versions:
        try:
            keyed.append((version_key(v), v))
        except InvalidVersion:
            logger.debug("Skipping unparseable installed version %r", v)
            continue
    keyed.sort(key=lambda pair: pair[0])
    return [v for _, v in keyed]


def build_snapshot(versions: Iterable[str]) -> InstalledSnapshot:
    """Sort the lister output once into an immutable snapshot.

    Entries are trimmed so every stage sees the same string; blanks are dropped.
    """
    trimmed = (v.strip() for v in versions)
    return InstalledSnapshot(versions=tuple(sort_versions(v for v in trimmed if v)))


def latest_major_pattern(major: str) -> re.Pattern[str]:
    """Full ``major.minor.patch`` releases of one major; no rc, no partials."""
    return re.compile(rf"{re.escape(major)}\.\d+\.\d+", re.ASCII)


def latest_minor_pattern(minor: str) -> re.Pattern[str]:
    """Entries in the family of a minor or rc-qualified minor.

    ``1.23rc1`` selects the ``1.23rc`` family (``1.23rc``, ``1.23rc2``...);
    ``1.23`` selects ``1.23``, ``1.23.4`` and, by the same optional-dot
    rule, ``1.234``.
    """
    m = RC_MINOR_RE.fullmatch(minor)
    prefix = m.group(1) if m else minor
    return re.compile(rf"{re.escape(prefix)}\.?(\d+)?", re.ASCII)
