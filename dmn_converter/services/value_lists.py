"""
Parsing of enumerated allowed-value lists such as '"AAA","BBB"'.
"""

from typing import Iterable, Optional

from dmn_converter.models.dmn import ValueList


def split_value_list(text: str) -> list[str]:
    """Split on commas outside double quotes; strip one layer of quotes per item."""
    tokens: list[str] = []
    current: list[str] = []
    in_quotes = False
    for ch in text:
        if ch == '"':
            in_quotes = not in_quotes
        if ch == "," and not in_quotes:
            tokens.append("".join(current))
            current = []
            continue
        current.append(ch)
    tokens.append("".join(current))

    values = []
    for token in tokens:
        token = token.strip()
        if len(token) >= 2 and token.startswith('"') and token.endswith('"'):
            token = token[1:-1]
        values.append(token)
    return values


def parse_value_list(text: Optional[str]) -> Optional[ValueList]:
    """
    Parse a comma-separated, quote-delimited literal list.

    Returns None when no list is declared (absent or blank text), so callers can
    tell "no enumeration" apart from an enumeration.
    """
    if text is None or not text.strip():
        return None
    return ValueList(text=text, values=split_value_list(text))


def value_list_from_entries(entries: Iterable[str]) -> Optional[ValueList]:
    """Build a ValueList from items stored as a JSON array."""
    values = list(entries)
    if not values:
        return None
    return ValueList(text=",".join(f'"{v}"' for v in values), values=values)
