"""Configuration settings for the csquares package.

This module defines the configuration settings for the codec, the command line
interface and the map viewer. It uses Pydantic's BaseSettings for environment
variable management.
"""

from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from csquares.resolution import MAX_DECIMALS


class CodecSettings(BaseModel):
    """Defaults applied when a caller does not choose a precision.

    Attributes:
        default_decimals: Number of sub-degree decimal places resolved by default.
    """

    default_decimals: int = Field(
        1,
        ge=0,
        le=MAX_DECIMALS,
        description="Sub-degree decimal places resolved when none are requested",
    )


class ViewerSettings(BaseModel):
    """Settings for the interactive map viewer.

    Attributes:
        default_latitude: Latitude shown when the viewer first opens.
        default_longitude: Longitude shown when the viewer first opens.
        zoom_start: Initial folium zoom level.
    """

    default_latitude: float = Field(-42.8, ge=-90.0, le=90.0, description="Initial latitude")
    default_longitude: float = Field(147.3, ge=-180.0, le=180.0, description="Initial longitude")
    zoom_start: int = Field(6, ge=0, le=20, description="Initial map zoom level")


class LoggingSettings(BaseModel):
    """Logging configuration settings.

    Attributes:
        level: The logging level (e.g., INFO, DEBUG).
        format: The log message format string.
    """

    level: str = Field("INFO", description="Logging level")
    format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format",
    )


class Settings(BaseSettings):
    """Global package settings.

    Values are read from environment variables prefixed with ``CSQUARES_``;
    nested fields use ``__``, e.g. ``CSQUARES_CODEC__DEFAULT_DECIMALS=3``.

    Attributes:
        codec: Codec defaults.
        viewer: Map viewer settings.
        logging: Logging configuration settings.
    """

    codec: CodecSettings = Field(default_factory=CodecSettings)
    viewer: ViewerSettings = Field(default_factory=ViewerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_prefix="CSQUARES_",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of the settings.

    Returns:
        The global Settings instance.
    """
    return Settings()
