"""Note values of a scale and their textual encoding.

A note is the pitch of one scale degree relative to the base note (1/1).
It is stored in exactly one of two representations:

- Cents: a signed float offset, 100 cents to the equal-tempered semitone and
  1200 to the octave. No range restriction is applied.
- Ratio: an exact frequency multiplier held in lowest terms, strictly
  positive, with unsigned 32 bit numerator and denominator.

Token Grammar:
- A token containing '.' is a cents value ("76.049", "0.", ".5", "1200.")
- Any other token is a ratio "num[/den]"; a bare integer means num/1

Output is normalized: ratios are always written with their denominator
("2/1", never "2") and cents use the shortest repr that reads back to the
same float. The two representations never compare equal to each other,
even when they describe the same pitch.
"""

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Union

import consts
import utils


class InvalidNote(ValueError):
    """Base error for a note token that cannot be read."""

    kind = "note"

    def __init__(self, token: str, reason: str):
        self.token = token
        self.reason = reason
        super().__init__(f"invalid {self.kind} value '{token}': {reason}")


class InvalidCents(InvalidNote):
    kind = "cents"


class InvalidRatio(InvalidNote):
    kind = "ratio"


@dataclass(frozen=True, eq=False)
class Cents:
    """Pitch offset in cents."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    # Float semantics: NaN never equals itself
    def __eq__(self, other):
        if not isinstance(other, Cents):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash((Cents, self.value))

    def __str__(self) -> str:
        return format_note(self)


@dataclass(frozen=True)
class Ratio:
    """Frequency ratio in lowest terms.

    Construction reduces the pair, so Ratio(10, 8) == Ratio(5, 4), and raises
    InvalidRatio for zero denominators, negative or non-integer components,
    non-positive values and components wider than 32 bits.
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        num, den = self.numerator, self.denominator
        token = f"{num}{consts.RATIO_SEPARATOR}{den}"
        for comp in (num, den):
            if isinstance(comp, bool) or not isinstance(comp, int):
                raise InvalidRatio(token, "components must be integers")
            if comp < 0:
                raise InvalidRatio(token, "components must be non-negative")
        if den == 0:
            raise InvalidRatio(token, "zero denominator")
        if num == 0:
            raise InvalidRatio(token, "ratio must be strictly positive")

        reduced = Fraction(num, den)
        if max(reduced.numerator, reduced.denominator) > consts.RATIO_COMPONENT_MAX:
            raise InvalidRatio(token, f"components exceed {consts.RATIO_COMPONENT_BITS} bits")
        object.__setattr__(self, "numerator", reduced.numerator)
        object.__setattr__(self, "denominator", reduced.denominator)

    @classmethod
    def from_fraction(cls, value: Fraction) -> "Ratio":
        """Build a ratio from a Fraction (negative or zero values are rejected)."""
        return cls(value.numerator, value.denominator)

    @property
    def fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def __str__(self) -> str:
        return format_note(self)


Note = Union[Cents, Ratio]


# --- Parsing ---

def _parse_cents(token: str) -> Cents:
    if not consts.CENTS_PATTERN.fullmatch(token):
        raise InvalidCents(token, "not a decimal number")
    return Cents(float(token))


def _parse_ratio(token: str) -> Ratio:
    num_str, sep, den_str = token.partition(consts.RATIO_SEPARATOR)
    if not sep:
        den_str = "1"
    try:
        num = utils.parse_unsigned(num_str)
        den = utils.parse_unsigned(den_str)
    except ValueError:
        raise InvalidRatio(token, "components must be unsigned integers") from None

    if max(num, den) > consts.RATIO_COMPONENT_MAX:
        raise InvalidRatio(token, f"components exceed {consts.RATIO_COMPONENT_BITS} bits")
    try:
        return Ratio(num, den)
    except InvalidRatio as e:
        raise InvalidRatio(token, e.reason) from None


def parse_note(token: str) -> Note:
    """Parse a single note token (no surrounding whitespace).

    Raises:
        InvalidCents: the token contains '.' but is not a decimal number
        InvalidRatio: the token is not a valid strictly positive num[/den]
    """
    if consts.CENTS_MARKER in token:
        return _parse_cents(token)
    return _parse_ratio(token)


# --- Formatting ---

def _format_cents(value: float) -> str:
    text = repr(value)
    if not math.isfinite(value) or consts.CENTS_MARKER in text:
        return text
    # repr may drop the dot ("1e+16"); without it the token would read as a ratio
    mantissa, sep, exponent = text.partition("e")
    return f"{mantissa}.0{sep}{exponent}"


def format_note(note: Note) -> str:
    """Render a note as its canonical token."""
    if isinstance(note, Cents):
        return _format_cents(note.value)
    if isinstance(note, Ratio):
        return f"{note.numerator}{consts.RATIO_SEPARATOR}{note.denominator}"
    raise TypeError(f"expected Cents or Ratio, got {type(note).__name__}")
