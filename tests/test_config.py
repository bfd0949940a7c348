"""Tests for configuration loading and the configured codec."""

from pathlib import Path

import pytest

from escapes import UnicodeEscapeCodec
from escapes.config.settings import CodecConfig, LoggingConfig, Config, load_env_file
from escapes.utils.exceptions import ConfigurationError, MalformedEscapeError


class TestConfig:

    def test_codec_defaults(self, monkeypatch):
        monkeypatch.delenv('ESCAPES_ERRORS', raising=False)
        config = Config()
        codec_config = config.load_codec_config()
        assert codec_config.errors == 'keep'
        assert config.codec is codec_config

    def test_codec_from_env(self, monkeypatch):
        monkeypatch.setenv('ESCAPES_ERRORS', ' Strict ')
        assert Config().load_codec_config().errors == 'strict'

    def test_codec_invalid_env(self, monkeypatch):
        monkeypatch.setenv('ESCAPES_ERRORS', 'replace')
        with pytest.raises(ConfigurationError):
            Config().load_codec_config()

    def test_logging_from_env(self, monkeypatch):
        monkeypatch.setenv('LOG_LEVEL', 'debug')
        config = Config()
        assert config.load_logging_config().level == 'debug'
        assert config.logging.level == 'debug'

    def test_env_file_found_from_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("ESCAPES_ERRORS=strict\n")
        nested = tmp_path / "nested"
        nested.mkdir()
        monkeypatch.chdir(nested)
        monkeypatch.setenv('ESCAPES_ERRORS', 'keep')
        monkeypatch.delenv('ESCAPES_ERRORS')
        assert Path(load_env_file()).resolve() == (tmp_path / ".env").resolve()
        assert Config().load_codec_config().errors == 'strict'

    def test_env_file_does_not_override_environment(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("ESCAPES_ERRORS=strict\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv('ESCAPES_ERRORS', 'keep')
        load_env_file()
        assert Config().load_codec_config().errors == 'keep'

    def test_logging_invalid_level(self):
        with pytest.raises(ConfigurationError):
            LoggingConfig(level='LOUD').validate()


class TestUnicodeEscapeCodec:

    def test_defaults(self):
        codec = UnicodeEscapeCodec()
        assert codec.encode("naïve") == "na\\u{ef}ve"
        assert codec.decode("na\\u{ef}ve") == "naïve"
        assert codec.decode("\\u{110000}") == "\\u{110000}"

    def test_strict_config(self):
        codec = UnicodeEscapeCodec.from_config(CodecConfig(errors='strict'))
        with pytest.raises(MalformedEscapeError):
            codec.decode("\\u{110000}")

    def test_invalid_config_rejected(self):
        with pytest.raises(ConfigurationError):
            UnicodeEscapeCodec(CodecConfig(errors='ignore'))
