"""Name handling for sections and components.

Registry names double as file stems, so they are checked before they are
interpolated into URLs or joined onto the target directory.
"""

from __future__ import annotations

_FORBIDDEN_CHARS = ("/", "\\", "\x00")


def ensure_safe_name(name: str) -> str:
    """Return *name* stripped, or raise ``ValueError`` if it is not a safe file stem."""
    if not isinstance(name, str):
        raise ValueError(f"name must be a string, got {type(name).__name__}")
    stripped = name.strip()
    if not stripped:
        raise ValueError("name must not be empty")
    for ch in _FORBIDDEN_CHARS:
        if ch in stripped:
            raise ValueError(f"name {name!r} contains a path separator")
    if ".." in stripped or stripped == ".":
        raise ValueError(f"name {name!r} contains a relative path segment")
    return stripped


def normalize_section_name(name: str) -> str:
    """Lower-case *name*, then upper-case its first letter.

    >>> normalize_section_name("imageTEXT")
    'Imagetext'
    """
    return name.strip().lower().capitalize()
