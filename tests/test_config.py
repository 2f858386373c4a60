"""Tests for wren.config — HeadersConfig frozen dataclass."""

import pytest

from wren.config import DEFAULT_CONFIG, HeadersConfig
from wren.errors import ConfigurationError


class TestHeadersConfig:
    def test_defaults(self) -> None:
        cfg = HeadersConfig()

        assert cfg.case_mode == "preserve"
        assert cfg.validate_names is True
        assert cfg == DEFAULT_CONFIG

    def test_override(self) -> None:
        cfg = HeadersConfig(case_mode="canonical", validate_names=False)

        assert cfg.case_mode == "canonical"
        assert cfg.validate_names is False

    def test_frozen(self) -> None:
        cfg = HeadersConfig()

        with pytest.raises(AttributeError):
            cfg.case_mode = "lower"  # type: ignore[misc]

    def test_unknown_case_mode_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="case_mode"):
            HeadersConfig(case_mode="upper")
