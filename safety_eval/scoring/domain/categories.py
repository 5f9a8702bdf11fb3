"""Safety category extraction from free text and structured fields."""

import re

type CategorySet = frozenset[str]

_CATEGORY_PATTERN = re.compile(r"s\d+", re.IGNORECASE)


def extract_categories(text: str) -> CategorySet:
    """Return every ``S<digits>`` token found in *text*, uppercased.

    Matches are case-insensitive and non-overlapping; repeated categories
    collapse into a single entry.
    """
    return frozenset(match.upper() for match in _CATEGORY_PATTERN.findall(text))


def parse_categories(value: str | list[str] | None) -> CategorySet:
    """Split a comma-separated category field into a set of trimmed tokens.

    Tokens are kept as written (no case normalisation). A list value is
    treated as already split.
    """
    if not value:
        return frozenset()
    pieces = value if isinstance(value, list) else str(value).split(",")
    return frozenset(
        stripped for piece in pieces if (stripped := str(piece).strip())
    )
