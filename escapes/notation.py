"""Escape notation definitions."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple
import re

from escapes.constants import (
    MAX_CODE_POINT,
    HIGH_SURROGATE_MIN,
    LOW_SURROGATE_MIN,
)


class EscapeNotation(IntEnum):
    """Enumeration of the escape notations accepted by the decoder."""

    BRACED = 0x00               # \u{H..H}
    FIXED_WIDTH = 0x01          # \uHHHH
    SURROGATE_PAIR = 0x02       # high then low surrogate, either notation per half


@dataclass(frozen=True)
class EscapeMatch:
    """A single escape sequence found in a string."""

    notation: EscapeNotation
    digits: str
    span: Tuple[int, int]
    text: str
    low_digits: Optional[str] = None

    @classmethod
    def from_match(cls, match: 're.Match') -> 'EscapeMatch':
        """
        Build an EscapeMatch from a match of ESCAPE_PATTERN.

        Args:
            match: Regex match produced by ESCAPE_PATTERN

        Returns:
            EscapeMatch tagged with the notation that matched
        """
        if match.group('braced') is not None:
            return cls(EscapeNotation.BRACED, match.group('braced'), match.span(), match.group(0))
        high = match.group('high_braced') or match.group('high_fixed')
        if high is not None:
            return cls(
                EscapeNotation.SURROGATE_PAIR,
                high,
                match.span(),
                match.group(0),
                low_digits=match.group('low_braced') or match.group('low_fixed'),
            )
        return cls(EscapeNotation.FIXED_WIDTH, match.group('fixed'), match.span(), match.group(0))

    @property
    def code_point(self) -> int:
        """Numeric code point encoded by this escape."""
        value = int(self.digits, 16)
        if self.notation is EscapeNotation.SURROGATE_PAIR:
            low = int(self.low_digits, 16)
            return 0x10000 + ((value - HIGH_SURROGATE_MIN) << 10) + (low - LOW_SURROGATE_MIN)
        return value

    @property
    def is_valid(self) -> bool:
        """
        True when the escape names a code point chr() accepts.

        Lone surrogates count as valid: the encoder writes them for strings
        such as os.fsdecode() output, and they must decode back unchanged.
        """
        return self.code_point <= MAX_CODE_POINT

    @property
    def position(self) -> int:
        return self.span[0]
