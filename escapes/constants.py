"""Escape notation constants.

These define the textual wire format. Changing them breaks decoding of
text that was encoded by earlier versions.
"""

import re

# Highest code point passed through unchanged by the encoder
MAX_ASCII = 0x7F

# Highest Unicode scalar value
MAX_CODE_POINT = 0x10FFFF

# First UTF-16 high and low surrogates, used to join escaped surrogate pairs
HIGH_SURROGATE_MIN = 0xD800
LOW_SURROGATE_MIN = 0xDC00

# Format used by the encoder: lowercase hex, no leading zeros
BRACED_ESCAPE_FORMAT = '\\u{{{:x}}}'

# Alternatives are tried left to right at each position:
#   1. surrogate pair:  high then low surrogate, each half braced or fixed-width
#   2. braced:          \u{H..H}       (1-6 hex digits)
#   3. fixed-width:     \uHHHH         (exactly 4 hex digits)
ESCAPE_PATTERN = re.compile(
    r'\\u(?:\{0{0,2}(?P<high_braced>d[89ab][0-9a-f]{2})\}|(?P<high_fixed>d[89ab][0-9a-f]{2}))'
    r'\\u(?:\{0{0,2}(?P<low_braced>d[c-f][0-9a-f]{2})\}|(?P<low_fixed>d[c-f][0-9a-f]{2}))'
    r'|\\u\{(?P<braced>[0-9a-f]{1,6})\}'
    r'|\\u(?P<fixed>[0-9a-f]{4})',
    re.IGNORECASE,
)

# Policies for escapes that name a value above MAX_CODE_POINT
ERRORS_KEEP = 'keep'
ERRORS_STRICT = 'strict'
ERROR_POLICIES = (ERRORS_KEEP, ERRORS_STRICT)
