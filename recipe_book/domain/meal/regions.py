"""
Region flags.

Static table from TheMealDB area names to flag emoji.
Areas not listed have no flag.
"""

from __future__ import annotations

from typing import Optional

AREA_FLAGS: dict[str, str] = {
    "British": "\U0001F1EC\U0001F1E7",
    "Canadian": "\U0001F1E8\U0001F1E6",
    "Tunisian": "\U0001F1F9\U0001F1F3",
    "American": "\U0001F1FA\U0001F1F8",
    "Croatian": "\U0001F1ED\U0001F1F7",
    "Russian": "\U0001F1F7\U0001F1FA",
    "Portuguese": "\U0001F1F5\U0001F1F9",
    "French": "\U0001F1EB\U0001F1F7",
    "Italian": "\U0001F1EE\U0001F1F9",
    "Malaysian": "\U0001F1F2\U0001F1FE",
    "Polish": "\U0001F1F5\U0001F1F1",
    "Greek": "\U0001F1EC\U0001F1F7",
}


def flag_for_area(area: str) -> Optional[str]:
    """Return the flag for an area, or None if the area is unknown.

    Matching is exact and case-sensitive.

    Example:
        >>> flag_for_area("Atlantis") is None
        True
    """
    return AREA_FLAGS.get(area)
