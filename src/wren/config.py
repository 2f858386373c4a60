"""Header container configuration.

HeadersConfig is a frozen dataclass — immutable after creation, shared by
every ``Headers`` built with it, no string-key dict lookups.
"""

from dataclasses import dataclass

from wren.errors import ConfigurationError

CASE_MODES = frozenset({"preserve", "lower", "canonical"})


@dataclass(frozen=True, slots=True)
class HeadersConfig:
    """Configuration for ``Headers`` instances. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = HeadersConfig(case_mode="canonical")
    """

    # Display casing of header names: "preserve" keeps the first-seen
    # spelling, "lower" lowercases, "canonical" title-cases per segment.
    case_mode: str = "preserve"

    # Reject names that are not RFC 9110 tokens
    validate_names: bool = True

    def __post_init__(self) -> None:
        if self.case_mode not in CASE_MODES:
            msg = f"case_mode must be one of {sorted(CASE_MODES)}, got {self.case_mode!r}"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = HeadersConfig()
