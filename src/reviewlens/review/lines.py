"""Single-line classification for cosmetic-change detection.

Pure functions, no state. Comment detection is a lexical prefix check, not a
parser: anything outside the fixed prefix list is treated as code.
"""

from __future__ import annotations

NOISE_PREFIXES: tuple[str, ...] = (
    "//",  # C, C++, JS, TS, Rust, Go, Java
    "#",  # Python, Ruby, Shell, YAML
    "--",  # SQL, Lua, Haskell
    ";",  # Lisp, Assembly, INI
    "*",  # block comment continuation, JSDoc
    "/*",
    "*/",
    "'",  # VB
    '"""',
    "'''",
    "<!--",
    "-->",
)


def is_noise_line(line: str) -> bool:
    """True if the line is blank or starts with a known comment marker."""
    trimmed = line.strip()
    if not trimmed:
        return True
    if trimmed.startswith(NOISE_PREFIXES):
        return True
    # Batch files: REM in any case
    return trimmed.lower().startswith("rem ")


def normalize(s: str) -> str:
    """Drop every whitespace character."""
    return "".join(ch for ch in s if not ch.isspace())


def differs_only_in_whitespace(a: str, b: str) -> bool:
    return normalize(a) == normalize(b)


def differs_only_in_indentation(a: str, b: str) -> bool:
    return a != b and a.lstrip() == b.lstrip()


def differs_only_in_trailing_whitespace(a: str, b: str) -> bool:
    return a != b and a.rstrip() == b.rstrip()


def differs_only_in_case(a: str, b: str) -> bool:
    return a != b and a.lower() == b.lower()


def is_cosmetic_pair(old: str, new: str) -> bool:
    """True if a removed/added line pair carries no semantic change."""
    return (
        (is_noise_line(old) and is_noise_line(new))
        or differs_only_in_whitespace(old, new)
        or differs_only_in_indentation(old, new)
        or differs_only_in_trailing_whitespace(old, new)
        or differs_only_in_case(old, new)
    )
