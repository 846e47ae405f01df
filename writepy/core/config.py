"""Configuration loading and validation."""

import argparse
import json
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from writepy.core.types import IssueCategory
from writepy.utils.constants import Constants
from writepy.utils.helpers import expand_file_path


class Config(BaseModel):
    """Runtime configuration for the engine and the command line."""

    model_config = ConfigDict(extra="forbid")

    # Engine
    debounce_ms: int = Field(default=Constants.DEBOUNCE_DELAY_MS, ge=0)
    max_history: int = Field(default=Constants.MAX_HISTORY_SIZE, ge=1)
    max_dismissed_patterns: int = Field(default=Constants.MAX_DISMISSED_PATTERNS, ge=1)

    # Command line
    inputs: list[str] = Field(default_factory=list)
    output: str | None = None
    format: Literal["text", "json"] = "text"
    dismiss: list[str] = Field(default_factory=list)
    categories: list[IssueCategory] = Field(default_factory=list)

    # Flags
    verbose: bool = False
    debug: bool = False

    @field_validator("dismiss", mode="before")
    @classmethod
    def parse_string_list(cls, value: Any) -> Any:
        """Accept a comma-separated string where a list of ``rule:text`` keys is expected."""
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator("output", mode="after")
    @classmethod
    def expand_output(cls, value: str | None) -> str | None:
        """Expand ``~`` in the report directory."""
        return expand_file_path(value)

    @model_validator(mode="after")
    def validate_cross_fields(self) -> "Config":
        """Validate fields that depend on each other."""
        for key in self.dismiss:
            rule, sep, text = key.partition(Constants.DISMISSED_KEY_SEPARATOR)
            if not sep or not rule or not text:
                raise ValueError(f"Dismissal '{key}' must have the form rule:text")
        if self.debug and not self.verbose:
            # debug output implies verbose output
            self.verbose = True
        return self


def _read_json_config(config_path: str) -> dict[str, Any]:
    path = Path(expand_file_path(config_path) or config_path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {path} must contain a JSON object")
    return data


def load_config(
    config_path: str | None,
    args: argparse.Namespace | None = None,
    parser: argparse.ArgumentParser | None = None,
) -> Config:
    """Build a Config from an optional JSON file and CLI arguments.

    CLI arguments override JSON values; arguments left at ``None`` (or an empty
    list) keep the JSON or default value.

    Args:
        config_path: Path to a JSON configuration file, or None
        args: Parsed command-line arguments
        parser: Parser used to report errors; without one errors are raised

    Returns:
        Validated configuration
    """
    values: dict[str, Any] = {}
    try:
        if config_path:
            values.update(_read_json_config(config_path))

        if args is not None:
            for key, value in vars(args).items():
                if key == "config" or key not in Config.model_fields:
                    continue
                if value is None or value == [] or value is False:
                    continue
                values[key] = value

        return Config(**values)
    except (OSError, ValueError, ValidationError) as e:
        if parser is None:
            raise
        parser.error(f"Invalid configuration: {e}")
        raise  # parser.error exits; kept for type checkers
