"""Semantic version comparison."""

import semver


def _clean(version: str) -> str:
    # Loose form accepted by runtimes, e.g. " v0.0.560" or "=1.2.3"
    return version.strip().lstrip("=v").strip()


def is_at_least(version: str, threshold: str) -> bool:
    """Return True when ``version`` >= ``threshold`` by semver precedence.

    An empty ``version`` means the version is unknown and is treated as
    lower than any threshold. A leading ``v`` or ``=`` is ignored.

    Raises:
        ValueError: If a non-empty version is not valid semver.
    """
    if not version or not version.strip():
        return False
    return semver.Version.parse(_clean(version)) >= semver.Version.parse(_clean(threshold))
