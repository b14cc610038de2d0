"""
Token path utilities - building, parsing, and simplifying access paths.

Paths use JavaScript access syntax because they are emitted into generated
UI code: identifiers use dot notation, everything else uses brackets
(e.g., theme.colors['primary-500']).
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from chuk_mcp_tokens.constants import THEME_ROOT

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

# One path segment: an identifier after an optional dot, or a bracket access
_SEGMENT = re.compile(
    r"""
    \.?(?P<ident>[^.\[\]]+)                        # foo / .foo
    | \[\s*'(?P<single>(?:[^'\\]|\\.)*)'\s*\]      # ['foo']
    | \[\s*"(?P<double>(?:[^"\\]|\\.)*)"\s*\]      # ["foo"]
    | \[\s*(?P<bare>[^\]]*?)\s*\]                  # [0]
    """,
    re.VERBOSE,
)


def is_identifier(key: str) -> bool:
    """Check if a key can be accessed with dot notation."""
    return bool(_IDENTIFIER.match(key))


def format_segment(key: str) -> str:
    """Format a single key as an access suffix ('.key' or "['key']")."""
    if is_identifier(key):
        return f".{key}"
    escaped = key.replace("\\", "\\\\").replace("'", "\\'")
    return f"['{escaped}']"


def child_path(parent: str, key: str) -> str:
    """
    Build the path of a child key.

    Args:
        parent: Parent path (may be empty)
        key: Child key

    Returns:
        Combined path using dot or bracket notation
    """
    segment = format_segment(str(key))
    if not parent:
        return segment[1:] if segment.startswith(".") else segment
    return parent + segment


def split_path(path: str) -> list[str]:
    """
    Split a path into its raw keys.

    Handles dot segments and quoted or bare bracket segments;
    empty dot segments (a..b) are dropped.
    """
    keys: list[str] = []
    pos = 0
    while pos < len(path):
        if path[pos] == ".":
            pos += 1
            continue
        match = _SEGMENT.match(path, pos)
        if match is None:
            # Unbalanced bracket - keep the remainder as one key
            keys.append(path[pos:])
            break
        if match.group("ident") is not None:
            keys.append(match.group("ident"))
        elif match.group("single") is not None:
            keys.append(_unescape(match.group("single")))
        elif match.group("double") is not None:
            keys.append(_unescape(match.group("double")))
        else:
            keys.append(match.group("bare"))
        pos = match.end()
    return keys


def join_path(keys: Iterable[str]) -> str:
    """Render keys back into a canonical access path."""
    path = ""
    for key in keys:
        path = child_path(path, key)
    return path


def last_segment(path: str) -> str:
    """Get the final key of a path ('' for an empty path)."""
    keys = split_path(path)
    return keys[-1] if keys else ""


def simplify_path(raw_path: str, denylist: Iterable[str]) -> str:
    """
    Normalize a raw token path into a canonical theme-rooted reference.

    Steps, in order:
    1. A leading 'tokens' segment becomes 'theme'
    2. 'theme' is prefixed when absent
    3. Every later segment found in the denylist (case-insensitive) is removed

    The result always starts with 'theme' and is stable under re-simplification.

    Args:
        raw_path: Path as registered during extraction
        denylist: Wrapper segment names to strip (masterPalette, tokens, ...)

    Returns:
        Canonical path, e.g. 'tokens.palette.color.primary' -> 'theme.color.primary'
    """
    denied = {name.lower() for name in denylist}
    keys = split_path(raw_path)

    if keys and keys[0] == "tokens":
        keys[0] = THEME_ROOT
    if not keys or keys[0] != THEME_ROOT:
        keys.insert(0, THEME_ROOT)

    kept = [keys[0]] + [key for key in keys[1:] if key.lower() not in denied]
    return join_path(kept)


def ends_with_segment(path: str, names: Iterable[str]) -> bool:
    """Check (case-insensitively) whether the last key of a path is one of names."""
    last = last_segment(path).lower()
    return any(last == name.lower() for name in names)


def _unescape(text: str) -> str:
    return re.sub(r"\\(.)", r"\1", text)
