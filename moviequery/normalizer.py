"""Shape single-record OMDb payloads into normalized records."""
import re
import warnings
from datetime import date, datetime
from typing import Any, Callable, Mapping

from .errors import FieldCoercionWarning
from .transport import ERROR_FIELD, RESPONSE_FIELD, is_missing


DATE_FORMAT = "%d %b %Y"  # "15 Dec 1978"

_INT_PATTERN = re.compile(r"\d+")


def snake_case(key: str) -> str:
    """Convert an OMDb key to snake_case ('imdbID' -> 'imdb_id')."""
    key = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", key)
    key = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", key)
    return key.lower()


def start_year(display_year: Any) -> int | None:
    """
    Leading integer embedded in a display-year string.

    "1993-1997" -> 1993, "2015-" -> 2015, "" -> None
    """
    if not isinstance(display_year, str):
        return display_year if isinstance(display_year, int) else None
    match = _INT_PATTERN.search(display_year)
    return int(match.group()) if match else None


def split_list_field(value: str | None) -> list[str]:
    """Split a comma-joined field such as genre or actors into a list."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def parse_int(text: str) -> int:
    """Integer from strings such as '136 min', '1,234' or '$134,218,018'."""
    cleaned = text.replace(",", "")
    match = _INT_PATTERN.search(cleaned)
    if not match:
        raise ValueError(f"no digits in {text!r}")
    return int(match.group())


def parse_float(text: str) -> float:
    return float(text.replace(",", "").strip())


def parse_date(text: str) -> date:
    return datetime.strptime(text.strip(), DATE_FORMAT).date()


# Coercions keyed by snake_case field name
NUMERIC_FIELDS: dict[str, Callable[[str], Any]] = {
    "runtime": parse_int,
    "metascore": parse_int,
    "imdb_rating": parse_float,
    "imdb_votes": parse_int,
    "box_office": parse_int,
    "total_seasons": parse_int,
}

DATE_FIELDS: dict[str, Callable[[str], Any]] = {
    "released": parse_date,
    "dvd": parse_date,
}

# Comma-joined fields exposed as lists
LIST_FIELDS = ("genre", "director", "writer", "actors", "language", "country")

# Envelope fields that say nothing about the record itself
_ENVELOPE_FIELDS = {RESPONSE_FIELD, ERROR_FIELD}


def coerce_field(name: str, value: Any, parser: Callable[[str], Any]) -> Any:
    """
    Run ``parser`` on a raw value.

    Missing tokens become None. An unparseable value also becomes None and
    issues a FieldCoercionWarning.
    """
    if is_missing(value):
        return None
    if not isinstance(value, str):
        return value
    try:
        return parser(value)
    except ValueError:
        warnings.warn(
            f"Could not parse field {name!r} from {value!r}; leaving it empty",
            FieldCoercionWarning,
            stacklevel=2,
        )
        return None


def shape_fields(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Rename keys to snake_case, drop the envelope and fold missing values to None."""
    record: dict[str, Any] = {}
    for key, value in raw.items():
        if key in _ENVELOPE_FIELDS:
            continue
        record[snake_case(key)] = None if is_missing(value) else value
    return record


class RecordNormalizer:
    """Turns one lookup-mode payload into a record dict."""

    def normalize(self, raw: Mapping[str, Any]) -> dict[str, Any]:
        """
        Coerce numeric and date fields, split credit and genre lists and
        derive ``start_year``.

        All input fields are kept; ``year`` is preserved verbatim since series
        and games legitimately report ranges like "2015-".
        """
        record = shape_fields(raw)

        ratings = record.get("ratings")
        if isinstance(ratings, list):
            record["ratings"] = [
                {snake_case(k): v for k, v in entry.items()} if isinstance(entry, dict) else entry
                for entry in ratings
            ]

        for name, parser in NUMERIC_FIELDS.items():
            if name in record:
                record[name] = coerce_field(name, record[name], parser)
        for name, parser in DATE_FIELDS.items():
            if name in record:
                record[name] = coerce_field(name, record[name], parser)
        for name in LIST_FIELDS:
            if isinstance(record.get(name), str):
                record[name] = split_list_field(record[name])

        record["start_year"] = start_year(record.get("year"))
        return record
