"""Encoding of non-ASCII text as \\u{...} escapes, and decoding back."""

import logging

from escapes.constants import ERRORS_KEEP, ERRORS_STRICT, ESCAPE_PATTERN
from escapes.notation import EscapeNotation, EscapeMatch
from escapes.encoding import (
    is_ascii,
    encode_unicode_escapes,
    decode_unicode_escapes,
    iter_escapes,
)
from escapes.codec import UnicodeEscapeCodec

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'ERRORS_KEEP',
    'ERRORS_STRICT',
    'ESCAPE_PATTERN',
    'EscapeNotation',
    'EscapeMatch',
    'is_ascii',
    'encode_unicode_escapes',
    'decode_unicode_escapes',
    'iter_escapes',
    'UnicodeEscapeCodec',
]
