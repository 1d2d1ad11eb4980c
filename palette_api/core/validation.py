"""
Request validation and message formatting shared by the project and palette
services.

Required fields are described as an ordered tuple of (field name, accessor)
pairs. The order matters: error messages cite only the first missing field.
"""
from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Sequence, Tuple

Accessor = Callable[[Mapping[str, Any]], Any]
FieldSpec = Tuple[str, Accessor]

# Largest value a 32-bit INTEGER primary key can hold.
MAX_ID = 2**31 - 1


def _key(name: str) -> Accessor:
    return lambda record: record.get(name)


PROJECT_FIELDS: Tuple[FieldSpec, ...] = (
    ("name", _key("name")),
)

PALETTE_UPDATE_FIELDS: Tuple[FieldSpec, ...] = (
    ("name", _key("name")),
    ("color1", _key("color1")),
    ("color2", _key("color2")),
    ("color3", _key("color3")),
    ("color4", _key("color4")),
    ("color5", _key("color5")),
)

PALETTE_CREATE_FIELDS: Tuple[FieldSpec, ...] = PALETTE_UPDATE_FIELDS + (
    ("project_id", _key("project_id")),
)

PALETTE_FORMAT = (
    "Expected format: { name: <String>, color1: <String>, color2: <String>, "
    "color3: <String>, color4: <String>, color5: <String>, project_id: <Number>}."
)

PROJECT_NAME_MISSING = "No project name provided"
PROJECT_RENAME_MISSING = "Please provide a name."
PROJECT_NAME_NOT_TEXT = "Project name must be a string."


# PUBLIC_INTERFACE
def first_missing_field(record: Optional[Mapping[str, Any]], fields: Sequence[FieldSpec]) -> Optional[str]:
    """
    Return the name of the first field whose value is missing or falsy, or
    None when every field is present.
    """
    record = record or {}
    for name, accessor in fields:
        if not accessor(record):
            return name
    return None


# PUBLIC_INTERFACE
def first_non_text_field(record: Mapping[str, Any], fields: Sequence[FieldSpec]) -> Optional[str]:
    """Return the name of the first field whose value is not a string, or None."""
    for name, accessor in fields:
        if not isinstance(accessor(record), str):
            return name
    return None


# PUBLIC_INTERFACE
def missing_palette_field_message(field: str) -> str:
    """Message for a palette payload lacking `field`."""
    return f"{PALETTE_FORMAT} You're missing a {field} property."


def palette_field_not_text_message(field: str) -> str:
    return f"{PALETTE_FORMAT} The {field} property must be a string."


# PUBLIC_INTERFACE
def parse_id(raw: Any) -> Optional[int]:
    """
    Interpret an opaque identifier.

    Returns the integer id for a plain decimal string (or int) within the
    storage range, otherwise None. None never matches a row.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and raw.strip().isdigit() and raw.strip().isascii():
        value = int(raw.strip())
    else:
        return None
    if value < 1 or value > MAX_ID:
        return None
    return value


def project_not_found(project_id: Any, *, terminal_period: bool = True) -> str:
    suffix = "." if terminal_period else ""
    return f"No matching project found with id {project_id}{suffix}"


def palette_not_found(palette_id: Any, *, terminal_period: bool = True) -> str:
    suffix = "." if terminal_period else ""
    return f"No matching palette found with id {palette_id}{suffix}"


def project_palettes_not_found(project_id: Any) -> str:
    return f"No matching palettes found with project id {project_id}."


def project_name_conflict(name: str) -> str:
    return f"Project name {name} already exists."


def palette_name_conflict(name: str, project_id: Any) -> str:
    return f"Conflict. palette name {name} already exists in project id {project_id}."


def no_matching(resource: str) -> str:
    return f"No matching {resource} found."
