"""Semver drift classification for mismatch reports.

Purely informational: equality between sources is always exact string
comparison.
"""

from __future__ import annotations

from packaging.version import Version, InvalidVersion


def parse_version(v: str) -> Version | None:
    """Parse a version string, returning None on failure."""
    try:
        return Version(v)
    except InvalidVersion:
        # Try stripping leading 'v'
        if v[:1] in ("v", "V"):
            try:
                return Version(v[1:])
            except InvalidVersion:
                pass
    return None


def classify_drift(reference: str, value: str) -> str:
    """Describe how ``value`` relates to ``reference``.

    Returns e.g. "behind (patch)", "ahead (major)", "same release" when
    the two only differ textually, or "not comparable".
    """
    ref = parse_version(reference)
    cur = parse_version(value)

    if ref is None or cur is None:
        return "not comparable"
    if ref == cur:
        return "same release"

    direction = "behind" if cur < ref else "ahead"
    low, high = (cur, ref) if cur < ref else (ref, cur)
    if high.major != low.major:
        level = "major"
    elif high.minor != low.minor:
        level = "minor"
    else:
        level = "patch"
    return f"{direction} ({level})"
