"""Unicode escape encoding and decoding functions."""

from typing import Iterator

from escapes.constants import (
    MAX_ASCII,
    BRACED_ESCAPE_FORMAT,
    ESCAPE_PATTERN,
    ERRORS_KEEP,
    ERRORS_STRICT,
    ERROR_POLICIES,
)
from escapes.notation import EscapeMatch
from escapes.utils.exceptions import MalformedEscapeError
from escapes.utils.logging import get_logger

logger = get_logger(__name__)


def is_ascii(character: str) -> bool:
    """
    Check whether a single code point is in the ASCII range.

    Args:
        character: A string holding exactly one code point

    Returns:
        True if the code point is 0-127, False otherwise

    Raises:
        ValueError: If character is not exactly one code point long
    """
    if len(character) != 1:
        raise ValueError(
            f"Expected exactly one code point, got {len(character)}: {character!r}"
        )
    return ord(character) <= MAX_ASCII


def encode_unicode_escapes(text: str) -> str:
    """
    Encode every non-ASCII code point of text as a braced escape.

    Iterating a str yields whole code points, so characters outside the
    BMP become one escape, e.g. '\\U0001f600' -> '\\u{1f600}'.

    Args:
        text: Any Unicode string

    Returns:
        Printable ASCII string, e.g. 'Hello, \\u{e42}\\u{e25}\\u{e01}'
    """
    return ''.join(
        character if is_ascii(character) else BRACED_ESCAPE_FORMAT.format(ord(character))
        for character in text
    )


def iter_escapes(text: str) -> Iterator[EscapeMatch]:
    """
    Yield every escape sequence found in text, left to right.

    Malformed escapes are yielded too; check EscapeMatch.is_valid.
    """
    for match in ESCAPE_PATTERN.finditer(text):
        yield EscapeMatch.from_match(match)


def decode_unicode_escapes(text: str, errors: str = ERRORS_KEEP) -> str:
    """
    Replace braced and fixed-width escapes with the characters they name.

    A high surrogate escape directly followed by a low surrogate escape,
    in either notation, decodes to the single combined code point.

    Args:
        text: String possibly containing \\u{H..H} or \\uHHHH escapes
        errors: 'keep' leaves malformed escapes as they are,
                'strict' raises MalformedEscapeError

    Returns:
        Decoded string; text outside escapes is copied unchanged

    Raises:
        MalformedEscapeError: On a malformed escape with errors='strict'
        ValueError: If errors is not a known policy
    """
    if errors not in ERROR_POLICIES:
        raise ValueError(f"Unknown errors policy: {errors!r}")

    def replace(match) -> str:
        escape = EscapeMatch.from_match(match)
        if escape.is_valid:
            return chr(escape.code_point)
        if errors == ERRORS_STRICT:
            raise MalformedEscapeError(escape.text, escape.position)
        logger.debug(f"Keeping malformed escape {escape.text!r} at {escape.position}")
        return escape.text

    return ESCAPE_PATTERN.sub(replace, text)
