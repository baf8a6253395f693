"""Configuration management for widgetmatch using pydantic-settings.

Holds the geometric tolerances used by row inference together with logging
and operator behaviour. Values can be overridden through ``WIDGETMATCH_``
environment variables or a ``.env`` file.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigurationError


class WidgetMatchSettings(BaseSettings):
    """Main configuration settings for widgetmatch."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="WIDGETMATCH_",
        case_sensitive=False,
        extra="ignore",
    )

    # Geometry settings
    alignment_tolerance: int = Field(
        3, ge=1, description="Components whose y differs by less than this share a row"
    )
    adjacency_min_gap: int = Field(
        -3, description="Exclusive lower bound of the horizontal gap between adjacent columns"
    )
    adjacency_max_gap: int = Field(
        15, description="Exclusive upper bound of the horizontal gap between adjacent columns"
    )
    table_cell_threshold: int = Field(
        2, description="Stacked fields are table cells when |dy| - height is below this"
    )
    row_band_tolerance: int = Field(
        3, ge=1, description="Vertical band used when scoping a search to one row"
    )

    # Row resolution settings
    row_search_table_fields_only: bool = Field(
        False, description="Only consider table cells (in traversal order) when matching row column values"
    )
    strict_row_match: bool = Field(
        False, description="Fail instead of picking the first row when several rows match"
    )

    # Operator settings
    commit_key: str | None = Field(
        "TAB", description="Key pressed after setting a text field value (None disables)"
    )
    location_width: int = Field(8, ge=1, description="Pad width of the location column in listings")

    # Logging settings
    debug_mode: bool = Field(False, description="Enable debug logging with readable output")
    log_level: str = Field("INFO", description="Default log level")
    log_file: Path | None = Field(None, description="Optional log file path")

    def validate_gaps(self) -> None:
        """Validate that the adjacency gap bounds form a non-empty interval."""
        if self.adjacency_min_gap >= self.adjacency_max_gap - 1:
            raise ConfigurationError(
                f"adjacency gap interval ({self.adjacency_min_gap}, {self.adjacency_max_gap}) "
                "contains no integer offsets",
                setting="adjacency_min_gap",
            )

    def model_post_init(self, __context) -> None:
        """Post-initialization validation."""
        self.validate_gaps()


# Singleton instance
_settings: WidgetMatchSettings | None = None


def get_settings() -> WidgetMatchSettings:
    """Get the singleton settings instance.

    Returns:
        WidgetMatchSettings instance
    """
    global _settings

    if _settings is None:
        _settings = WidgetMatchSettings()

    return _settings


def configure(**overrides) -> WidgetMatchSettings:
    """Replace the singleton with settings built from explicit overrides.

    Args:
        **overrides: Field values taking precedence over the environment

    Returns:
        The new settings instance
    """
    global _settings
    _settings = WidgetMatchSettings(**overrides)
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
