"""Application configuration with pydantic-settings + TOML."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict, TomlConfigSettingsSource

from signavatar.poses.loader import bundled_catalog_path


def _default_config_dir() -> Path:
    return Path.home() / ".signavatar"


def _default_catalog_source() -> str:
    return str(bundled_catalog_path())


class CatalogSettings(BaseSettings):
    """Where the pose catalog is fetched from."""

    model_config = SettingsConfigDict(env_prefix="SIGNAVATAR_CATALOG_")

    source: str = Field(default_factory=_default_catalog_source)
    timeout: float = Field(default=10.0, gt=0)


class AnimationSettings(BaseSettings):
    """Interpolation and scheduling parameters."""

    model_config = SettingsConfigDict(env_prefix="SIGNAVATAR_ANIMATION_")

    speed: float = Field(default=0.05, gt=0, le=1)
    fps: int = Field(default=60, gt=0, le=240)
    snapshot_on_retarget: bool = False


class RenderSettings(BaseSettings):
    """Stick-figure styling and output surface size."""

    model_config = SettingsConfigDict(env_prefix="SIGNAVATAR_RENDER_")

    max_size: int = Field(default=400, gt=0)
    line_width: int = Field(default=3, gt=0)
    head_radius: int = Field(default=20, gt=0)
    joint_radius: int = Field(default=4, ge=0)
    primary_color: str = "#667eea"
    secondary_color: str = "#764ba2"
    background: str = "#ffffff"


class AppConfig(BaseSettings):
    """Root application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SIGNAVATAR_",
        env_nested_delimiter="__",
    )

    config_dir: Path = Field(default_factory=_default_config_dir)
    log_level: str = "WARNING"
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    animation: AnimationSettings = Field(default_factory=AnimationSettings)
    render: RenderSettings = Field(default_factory=RenderSettings)

    @classmethod
    def settings_customise_sources(cls, settings_cls, **kwargs):  # type: ignore[override]
        toml_path = _default_config_dir() / "config.toml"
        sources = (
            kwargs.get("init_settings"),
            kwargs.get("env_settings"),
        )
        if toml_path.exists():
            sources = (*sources, TomlConfigSettingsSource(settings_cls, toml_file=toml_path))
        return (*sources, kwargs.get("dotenv_settings"), kwargs.get("file_secret_settings"))


def load_config() -> AppConfig:
    """Load application config from the environment and ``config.toml``."""
    return AppConfig()
