"""Root settings model for cascade configuration."""

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from cascade.config.models.cache import CacheConfig
from cascade.config.models.resolution import ResolutionConfig

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "console"]

# TOML values picked up by the settings source below
_toml_config: dict[str, Any] = {}


def set_toml_config(config: dict[str, Any]) -> None:
    """Set the TOML configuration to be used by Settings."""
    global _toml_config
    _toml_config = config


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source that reads from the loaded TOML configuration."""

    def get_field_value(
        self, field: Any, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        value = _toml_config.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        return _toml_config.copy()


class Settings(BaseSettings):
    """Root configuration object.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml (base configuration)
    3. config/{CASCADE_ENV}.toml (environment overrides)
    4. CASCADE_* environment variables (runtime overrides)
    """

    model_config = SettingsConfigDict(
        env_prefix="CASCADE_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: LogLevel = Field(default="INFO", description="Logging level")
    log_format: LogFormat = Field(default="json", description="Log renderer")
    redact_pii: bool = Field(default=True, description="Mask secrets in log output")

    cache: CacheConfig = Field(
        default_factory=CacheConfig,
        description="Cache backend configuration",
    )
    resolution: ResolutionConfig = Field(
        default_factory=ResolutionConfig,
        description="Resolution and registry configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Priority order (highest to lowest): init, CASCADE_* env, TOML, defaults."""
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )
