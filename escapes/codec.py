"""Codec object bound to a configuration."""

from typing import Optional

from escapes.config.settings import CodecConfig
from escapes.encoding import encode_unicode_escapes, decode_unicode_escapes


class UnicodeEscapeCodec:
    """Encoder/decoder pair using a configured malformed-escape policy."""

    def __init__(self, config: Optional[CodecConfig] = None):
        """
        Initialize codec.

        Args:
            config: Codec configuration; defaults are used when omitted

        Raises:
            ConfigurationError: If config is invalid
        """
        self.config = config or CodecConfig()
        self.config.validate()

    @classmethod
    def from_config(cls, config: CodecConfig) -> 'UnicodeEscapeCodec':
        return cls(config)

    def encode(self, text: str) -> str:
        return encode_unicode_escapes(text)

    def decode(self, text: str) -> str:
        return decode_unicode_escapes(text, errors=self.config.errors)
