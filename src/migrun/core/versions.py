"""Date-coded version identifiers.

Versions are ``YYYY-MM-DD`` strings. Because every real identifier has the
same fixed width, plain string ordering is chronological ordering, so no
date parsing happens here. The empty string stands for "no version" and
sorts before everything else.
"""

import re

VERSION_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")

NO_VERSION = ""


def extract_version(name: str) -> str:
    """Extract the first YYYY-MM-DD substring from a migration name.

    Args:
        name: Identifying name of a migration unit.

    Returns:
        The version string, or "" if the name carries no date.
    """
    match = VERSION_PATTERN.search(name)
    return match.group(0) if match else NO_VERSION


def is_valid_version(value: str) -> bool:
    """Check that a value is exactly one YYYY-MM-DD identifier."""
    return VERSION_PATTERN.fullmatch(value) is not None


def compare(a: str, b: str) -> int:
    """Compare two versions.

    Returns:
        -1 if a sorts before b, 0 if equal, 1 if after.
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def is_newer_than(candidate: str, baseline: str) -> bool:
    """Check whether candidate is strictly newer than baseline."""
    return compare(candidate, baseline) > 0
