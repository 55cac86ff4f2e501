"""
Business rules for Taxonomy Guard.

These functions encode parsing and normalization rules shared by the graph,
the resolver and the row validator.
They are pure functions with no side effects.
"""

import math
import re
from datetime import date, datetime
from typing import Any, Iterable, List, Optional, Set, Union

from rapidfuzz import fuzz, process, utils

from config.constants import (
    AFFIRMATIVE_VALUES,
    AGE_SENTINEL,
    BROADCAST_SUBTYPES,
    CHANNEL_DIGITAL,
    CHANNEL_TV,
    DATE_FORMATS,
    MAX_LISTED_OPTIONS,
    MEDIA_SEPARATORS,
    NEGATIVE_VALUES,
    OPTIONAL_DEMO_SUBTYPES,
    PM_TYPE_COMBINATIONS,
    REACH_REQUIRED_SUBTYPES,
    SUGGESTION_SCORE_CUTOFF,
)
from .models import is_blank, to_text


def normalize_name(name: Any) -> str:
    """
    Normalize a taxonomy name for comparison.

    Reference data casing is inconsistent, so every name comparison
    goes through trim + casefold.

    Examples:
        "  Brand (Institutional) " -> "brand (institutional)"
        None -> ""
    """
    return to_text(name).casefold()


def names_equal(a: Any, b: Any) -> bool:
    """Case-insensitive name equality. Blank names never match."""
    left = normalize_name(a)
    return bool(left) and left == normalize_name(b)


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a numeric cell.

    Thousands-separator commas are stripped before parsing. "nan" and
    "inf" are not numbers in a plan cell.

    Returns:
        float, or None when blank

    Raises:
        ValueError: If value is not numeric
    """
    if is_blank(value):
        return None
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        number = float(str(value).strip().replace(",", ""))
    if not math.isfinite(number):
        raise ValueError(f"Not a finite number: {value!r}")
    return number


def parse_percentage(value: Any) -> Optional[float]:
    """
    Parse a percentage cell ("56%", "56", "56.5 %").

    Returns:
        float in the 0-100 scale as typed, or None when blank

    Raises:
        ValueError: If value is not numeric
    """
    if is_blank(value):
        return None
    if isinstance(value, str):
        value = value.replace("%", "")
    return parse_number(value)


def parse_age(value: Any) -> Optional[Union[float, str]]:
    """
    Parse an age cell.

    The literal "+" means open-ended (no upper bound) and is returned as-is;
    whether it is allowed depends on the field (see validator).

    Returns:
        float age, AGE_SENTINEL, or None when blank

    Raises:
        ValueError: If value is neither numeric nor the sentinel
    """
    text = to_text(value)
    if not text:
        return None
    if text == AGE_SENTINEL:
        return AGE_SENTINEL
    age = parse_number(text)
    if age < 0:
        raise ValueError(f"Age cannot be negative: {text}")
    return age


def parse_flag(value: Any) -> Optional[bool]:
    """
    Parse a Yes/No cell.

    Returns:
        True/False, or None when blank

    Raises:
        ValueError: If value is not a recognized yes/no word
    """
    if isinstance(value, bool):
        return value
    text = normalize_name(value)
    if not text:
        return None
    if text in AFFIRMATIVE_VALUES:
        return True
    if text in NEGATIVE_VALUES:
        return False
    raise ValueError(f"Not a yes/no value: {to_text(value)!r}")


def parse_date(value: Any) -> Optional[date]:
    """
    Parse a date cell.

    Accepts date/datetime objects (including pandas Timestamps) and the
    template formats: YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY, DD-Mon-YY.

    Returns:
        date, or None when blank

    Raises:
        ValueError: If no format matches
    """
    if is_blank(value):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = to_text(value)
    # Spreadsheet exports sometimes append a midnight time component
    text = re.sub(r"[ T]00:00(:00)?$", "", text)
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Unrecognized date: {text!r}")


def split_media(value: Any) -> List[str]:
    """
    Split a Media cell into channel tokens.

    Examples:
        "TV + Digital" -> ["TV", "Digital"]
        "Traditional" -> ["Traditional"]
    """
    text = to_text(value)
    if not text:
        return []
    return [token.strip() for token in re.split(MEDIA_SEPARATORS, text) if token.strip()]


def row_channels(
    media: Any,
    media_subtype: Any,
    digital_subtypes: Iterable[str] = (),
) -> Set[str]:
    """
    Determine which channels (TV / Digital) a row carries.

    TV is present when a media token is "TV" or the subtype is a TV subtype.
    Digital is present when a media token is "Digital" or the subtype is one
    of the reference data's digital subtypes.

    Args:
        media: Media cell (may list several channels)
        media_subtype: Media Subtype cell
        digital_subtypes: Subtype names registered under Digital media

    Returns:
        Subset of {CHANNEL_TV, CHANNEL_DIGITAL}
    """
    tokens = {normalize_name(t) for t in split_media(media)}
    subtype = normalize_name(media_subtype)
    digital = {normalize_name(s) for s in digital_subtypes}

    channels = set()
    if normalize_name(CHANNEL_TV) in tokens or is_tv_subtype(subtype):
        channels.add(CHANNEL_TV)
    if normalize_name(CHANNEL_DIGITAL) in tokens or (subtype and subtype in digital):
        channels.add(CHANNEL_DIGITAL)
    return channels


def is_tv_subtype(media_subtype: Any) -> bool:
    """Check if subtype is a television subtype ("Open TV", "Connected TV")."""
    subtype = normalize_name(media_subtype)
    return bool(re.search(r"\btv\b", subtype)) or "television" in subtype


def is_broadcast_subtype(media_subtype: Any) -> bool:
    """Check if subtype carries real demographic targeting (TV demo required)."""
    subtype = normalize_name(media_subtype)
    return any(subtype == normalize_name(s) for s in BROADCAST_SUBTYPES)


def is_optional_demo_subtype(media_subtype: Any) -> bool:
    """Check if subtype is traditional media where TV demo fields are optional."""
    subtype = normalize_name(media_subtype)
    return any(subtype == normalize_name(s) for s in OPTIONAL_DEMO_SUBTYPES)


def is_reach_required_subtype(media_subtype: Any) -> bool:
    """Check if subtype needs Total R1+ (Open TV and out-of-home)."""
    subtype = normalize_name(media_subtype)
    return bool(subtype) and any(normalize_name(s) in subtype for s in REACH_REQUIRED_SUBTYPES)


def allowed_pm_types(media_subtype: Any) -> List[str]:
    """
    PM Types accepted for a media subtype.

    Subtypes are matched by keyword ("Paid Search" matches "Search"), first
    match wins.

    Returns:
        Allowed PM Type names, or [] when the subtype has no restriction
    """
    subtype = normalize_name(media_subtype)
    if not subtype:
        return []
    for keyword, pm_types in PM_TYPE_COMBINATIONS:
        if normalize_name(keyword) in subtype:
            return list(pm_types)
    return []


def closest_name(value: Any, choices: Iterable[str]) -> Optional[str]:
    """
    Find the closest known name for an unknown one.

    Uses rapidfuzz weighted ratio on normalized strings.

    Args:
        value: Name that was not found
        choices: Known display names

    Returns:
        Best match above SUGGESTION_SCORE_CUTOFF, or None
    """
    query = to_text(value)
    options = list(choices)
    if not query or not options:
        return None

    match = process.extractOne(
        query,
        options,
        scorer=fuzz.WRatio,
        processor=utils.default_process,
        score_cutoff=SUGGESTION_SCORE_CUTOFF,
    )
    return match[0] if match else None


def format_options(names: Iterable[str], limit: int = MAX_LISTED_OPTIONS) -> str:
    """
    Format valid options for a corrective message.

    Examples:
        ["Aloe", "Milk"] -> "Aloe, Milk"
        7 names with limit 5 -> "A, B, C, D, E..."
        [] -> "none"
    """
    options = sorted(set(names), key=str.casefold)
    if not options:
        return "none"
    listed = ", ".join(options[:limit])
    return listed + ("..." if len(options) > limit else "")
