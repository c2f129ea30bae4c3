"""US state name and code normalization."""

from types import MappingProxyType
from typing import Optional

STATE_CODES = MappingProxyType(
    {
        "alabama": "al", "alaska": "ak", "arizona": "az", "arkansas": "ar",
        "california": "ca", "colorado": "co", "connecticut": "ct", "delaware": "de",
        "florida": "fl", "georgia": "ga", "hawaii": "hi", "idaho": "id",
        "illinois": "il", "indiana": "in", "iowa": "ia", "kansas": "ks",
        "kentucky": "ky", "louisiana": "la", "maine": "me", "maryland": "md",
        "massachusetts": "ma", "michigan": "mi", "minnesota": "mn",
        "mississippi": "ms", "missouri": "mo", "montana": "mt", "nebraska": "ne",
        "nevada": "nv", "new hampshire": "nh", "new jersey": "nj",
        "new mexico": "nm", "new york": "ny", "north carolina": "nc",
        "north dakota": "nd", "ohio": "oh", "oklahoma": "ok", "oregon": "or",
        "pennsylvania": "pa", "rhode island": "ri", "south carolina": "sc",
        "south dakota": "sd", "tennessee": "tn", "texas": "tx", "utah": "ut",
        "vermont": "vt", "virginia": "va", "washington": "wa",
        "west virginia": "wv", "wisconsin": "wi", "wyoming": "wy",
    }
)

STATE_NAMES = MappingProxyType({code: name for name, code in STATE_CODES.items()})


def to_code(state: Optional[str]) -> str:
    """
    Normalize a state name or code to a lowercase two-letter code.

    Unknown values are returned lowercased and trimmed rather than rejected.

    Examples:
        >>> to_code(" New York ")
        'ny'
        >>> to_code("IL")
        'il'
    """
    if not state:
        return ""
    lowered = state.lower().strip()
    return STATE_CODES.get(lowered, lowered)


def to_full_name(state: Optional[str]) -> str:
    """
    Expand a two-letter code to its title-cased state name.

    Anything that is not a known code comes back exactly as given, so the
    result can be matched against free-text restriction strings.

    Examples:
        >>> to_full_name("nh")
        'New Hampshire'
        >>> to_full_name("Ontario")
        'Ontario'
    """
    if not state:
        return ""
    name = STATE_NAMES.get(state.lower().strip())
    if name is None:
        return state
    return " ".join(word.capitalize() for word in name.split(" "))
