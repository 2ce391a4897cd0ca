"""Core utilities shared by the note and scale grammars.

Line Handling:
- Splitting of raw text into lines, accepting LF and CRLF terminators
- Comment line detection with the '!' marker
- Extraction of the first whitespace-delimited token of a line

Numeric Parsing:
- Strict parsing of unsigned decimal integers (ASCII digits, optional '+')

Logging:
- Opt-in logging configuration for applications embedding the library
"""

import logging
from typing import List, Optional

import consts

# --- Logging system ---

def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """Setup logging for applications using the SCL packages.

    Args:
        level: Name of the logging level (e.g. "DEBUG", "INFO")
        log_file: Optional path of a log file; logs go to stderr when omitted
    """
    if log_file:
        handlers: List[logging.Handler] = [logging.FileHandler(log_file, encoding='utf-8')]
    else:
        handlers = [logging.StreamHandler()]

    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )

# --- Line handling ---

def split_lines(text: str) -> List[str]:
    """Split text into lines; a trailing '\\r' on each line is part of the terminator.

    A final line break does not open an extra empty line, so "a\\nb\\n" and
    "a\\nb" both give ["a", "b"], and "" gives [].
    """
    lines = text.split(consts.LINE_BREAK)
    if lines[-1] == "":
        lines.pop()
    return [ln[:-1] if ln.endswith(consts.CARRIAGE_RETURN) else ln for ln in lines]


def is_comment(line: str) -> bool:
    """Check whether a line is a comment line."""
    return line.startswith(consts.COMMENT_MARKER)


def first_token(line: str) -> Optional[str]:
    """Return the first whitespace-delimited token, or None for a blank line."""
    parts = line.split(None, 1)
    return parts[0] if parts else None

# --- Numeric parsing ---

def parse_unsigned(text: str) -> int:
    """Parse a non-negative decimal integer.

    Raises:
        ValueError: if text is not made of ASCII digits with an optional leading '+'
    """
    if not consts.UNSIGNED_PATTERN.fullmatch(text):
        raise ValueError(f"'{text}' is not a valid unsigned integer")
    return int(text)
