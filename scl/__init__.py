"""Reading and writing of Scala scale files (.scl).

The .scl format (Huygens-Fokker) is line oriented:

- Lines starting with '!' are comments and may appear anywhere
- The first non-comment line is the description, kept verbatim
- The second non-comment line is the number of notes
- Every following non-comment line holds one note; only the first token
  counts, trailing text on the line is ignored

Parsing:
- All-or-nothing: the first structural or note error aborts the parse
- Errors derive from ScaleParseError (a ValueError) and name the failing
  stage, with note index and 1-based line number where relevant
- The declared count must match the notes actually read

Writing:
- Canonical layout: description, count, one note per line
- The count is recomputed from the notes; comments are never written
- Every line, the last one included, ends with a line break
"""
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

import consts
import utils
from notes import InvalidNote, Note, format_note, parse_note

logger = logging.getLogger(__name__)


# --- Errors ---

class ScaleParseError(ValueError):
    """Base error for a scale document that cannot be read."""

    stage = "document"


class MissingDescription(ScaleParseError):
    stage = "description"

    def __init__(self):
        super().__init__("couldn't read description line")


class MissingCount(ScaleParseError):
    stage = "count"

    def __init__(self):
        super().__init__("couldn't read number of notes line")


class InvalidCount(ScaleParseError):
    stage = "count"

    def __init__(self, line: str, line_number: int):
        self.line = line
        self.line_number = line_number
        super().__init__(f"invalid number of notes '{line}' (line {line_number})")


class MissingNoteToken(ScaleParseError):
    """A note line is blank, or the text ended before the declared notes."""

    stage = "note"

    def __init__(self, index: int, line_number: Optional[int]):
        self.index = index
        self.line_number = line_number
        where = f"line {line_number}" if line_number is not None else "end of text"
        super().__init__(f"no note #{index + 1} on {where}")


class NoteError(ScaleParseError):
    """A note token failed to parse; the note error is kept in `inner`."""

    stage = "note"

    def __init__(self, index: int, line_number: int, inner: InvalidNote):
        self.index = index
        self.line_number = line_number
        self.inner = inner
        super().__init__(f"note #{index + 1} (line {line_number}): {inner}")


class CountMismatch(ScaleParseError):
    stage = "count"

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"number of notes doesn't match: declared {expected}, found {actual}")


class MissingNotes(MissingNoteToken, CountMismatch):
    """Fewer note lines than declared: both a missing note and a count mismatch."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        self.index = actual
        self.line_number = None
        ScaleParseError.__init__(
            self, f"no note #{actual + 1} on end of text: declared {expected}, found {actual}")


class InvalidDescription(ValueError):
    """Description spanning more than one line."""


# --- Document model ---

@dataclass(frozen=True, eq=False)
class Scale:
    """Description plus ordered notes; the note count is len(notes)."""

    description: str
    notes: Tuple[Note, ...] = ()

    def __post_init__(self) -> None:
        if consts.LINE_BREAK in self.description:
            raise InvalidDescription(f"description must be a single line: {self.description!r}")
        object.__setattr__(self, "notes", tuple(self.notes))

    def __eq__(self, other):
        if not isinstance(other, Scale):
            return NotImplemented
        return (self.description == other.description
                and len(self.notes) == len(other.notes)
                and all(a == b for a, b in zip(self.notes, other.notes)))

    def __hash__(self):
        return hash((self.description, self.notes))

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes)

    def __str__(self) -> str:
        return format_scale(self)


# --- Parsing ---

def _structural_lines(text: str) -> List[Tuple[int, str]]:
    """Non-comment lines paired with their 1-based line number."""
    return [(n, ln) for n, ln in enumerate(utils.split_lines(text), start=1)
            if not utils.is_comment(ln)]


def _parse_count(line: str, line_number: int) -> int:
    try:
        return utils.parse_unsigned(line.strip())
    except ValueError:
        raise InvalidCount(line.strip(), line_number) from None


def _parse_notes(lines: Iterable[Tuple[int, str]]) -> List[Note]:
    out: List[Note] = []
    for index, (line_number, line) in enumerate(lines):
        token = utils.first_token(line)
        if token is None:
            raise MissingNoteToken(index, line_number)
        try:
            out.append(parse_note(token))
        except InvalidNote as e:
            raise NoteError(index, line_number, e) from e
    return out


def parse_scale(text: str) -> Scale:
    """Parse the text of a .scl file into a Scale.

    Raises:
        ScaleParseError: one of MissingDescription, MissingCount, InvalidCount,
            MissingNoteToken, NoteError or CountMismatch
    """
    lines = _structural_lines(text)
    try:
        if not lines:
            raise MissingDescription()
        description = lines[0][1]

        if len(lines) < 2:
            raise MissingCount()
        count = _parse_count(lines[1][1], lines[1][0])

        parsed = _parse_notes(lines[2:])
        if len(parsed) < count:
            raise MissingNotes(count, len(parsed))
        if len(parsed) != count:
            raise CountMismatch(count, len(parsed))
        scale = Scale(description, tuple(parsed))
    except ScaleParseError as e:
        logger.debug("scale rejected at %s stage: %s", e.stage, e)
        raise

    logger.debug("parsed scale '%s' with %d notes", description, count)
    return scale


# --- Writing ---

def format_scale(scale: Scale) -> str:
    """Render a Scale in canonical .scl layout (no comments)."""
    lines = [scale.description, str(len(scale.notes))]
    lines.extend(format_note(n) for n in scale.notes)
    return consts.LINE_BREAK.join(lines) + consts.LINE_BREAK
