"""
Configuration management for Responsive Text.

Provides centralized configuration using Pydantic for validation and
environment variable support. Supports responsive.yaml for per-project
settings.
"""

from pathlib import Path
from typing import Optional, Tuple, Type

from pydantic import Field, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)


# Defaults carried over from the original command-line tool
DEFAULT_OUTPUT_PATH = Path("responsive.html")
DEFAULT_LEVELS = 10
DEFAULT_MIN_WIDTH = 200
DEFAULT_MAX_WIDTH = 800

# There must be sufficient variation in salience values. This ought to be
# DEFAULT_LEVELS * the smallest meaningful difference between saliences.
MINIMUM_SENSITIVITY = 0.001

# Per-project settings file, looked up in the working directory
CONFIG_FILE_NAME = "responsive.yaml"


class Config(BaseSettings):
    """
    Application configuration with environment variable support.

    Configuration can be provided via (highest priority first):
    1. Keyword arguments (the CLI passes its flags this way)
    2. Environment variables (prefixed with RESPONSIVE_TEXT_)
    3. .env file
    4. responsive.yaml
    5. Default values

    The instance is frozen: it is loaded once at process start and passed
    read-only into the pipeline.

    Example:
        export RESPONSIVE_TEXT_LEVELS=12
        export RESPONSIVE_TEXT_CLAMP_TIERS=true
    """

    model_config = SettingsConfigDict(
        env_prefix="RESPONSIVE_TEXT_",
        env_file=".env",
        env_file_encoding="utf-8",
        yaml_file=CONFIG_FILE_NAME,
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Output
    output_path: Path = Field(
        default=DEFAULT_OUTPUT_PATH,
        description="Path of the HTML page to write"
    )
    page_title: str = Field(
        default="",
        description="Contents of the <title> element"
    )

    # Tiering
    levels: int = Field(
        default=DEFAULT_LEVELS,
        ge=1,
        description="Number of visibility tiers requested (granularity)"
    )
    minimum_sensitivity: float = Field(
        default=MINIMUM_SENSITIVITY,
        gt=0.0,
        description="Smallest score range that can be sliced into tiers"
    )
    clamp_tiers: bool = Field(
        default=False,
        description="Clamp the maximum score into the top tier instead of one past it"
    )

    # Width span
    min_width: int = Field(
        default=DEFAULT_MIN_WIDTH,
        ge=0,
        description="Viewport width showing almost nothing"
    )
    max_width: int = Field(
        default=DEFAULT_MAX_WIDTH,
        description="Viewport width showing everything"
    )
    width_unit: str = Field(
        default="px",
        description="CSS length unit appended to media query widths"
    )

    # Text normalization
    escape_html: bool = Field(
        default=True,
        description="Escape markup-significant characters in content"
    )
    fix_newlines: bool = Field(
        default=True,
        description="Convert embedded newlines into <br> markers"
    )

    # Input
    csv_delimiter: str = Field(
        default=",",
        min_length=1,
        max_length=1,
        description="Field delimiter of the input file"
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding of the input and output files"
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Log level for the responsive_text logger"
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional file receiving a copy of the log"
    )

    @model_validator(mode="after")
    def check_width_span(self) -> "Config":
        if self.min_width >= self.max_width:
            raise ValueError(
                f"min_width ({self.min_width}) must be less than "
                f"max_width ({self.max_width})"
            )
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def get_config(**overrides) -> Config:
    """
    Get the application configuration instance.

    Merges settings from environment variables, .env file and
    responsive.yaml (if present). Overrides whose value is None are
    dropped so that unset CLI flags fall through to the other sources.

    Args:
        **overrides: Explicit field values (highest priority)

    Returns:
        Config: Application configuration

    Raises:
        pydantic.ValidationError: If the merged settings are invalid
    """
    explicit = {key: value for key, value in overrides.items() if value is not None}
    return Config(**explicit)
