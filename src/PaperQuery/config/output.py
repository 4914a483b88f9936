"""Output domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from PaperQuery.config.common import expect_str, get_optional_value, get_section

ALLOWED_FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration."""

    format: str = "text"


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load output domain config from raw mapping.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "output")
    return OutputConfig(
        format=expect_str(get_optional_value(section, "format", "text"), "output.format").strip().lower(),
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints.

    Raises:
        ValueError: If the format is unknown.
    """
    if config.format not in ALLOWED_FORMATS:
        raise ValueError(f"output.format must be one of {list(ALLOWED_FORMATS)}")
