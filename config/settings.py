from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


class BotSettings(BaseSettings):
    # `token` and `prefix` are the key names used by older config.json files
    discord_token: str = Field(
        ..., validation_alias=AliasChoices("discord_token", "token"), description="Discord bot token"
    )

    bot_prefix: str = Field(
        default="!", validation_alias=AliasChoices("bot_prefix", "prefix"), description="Command prefix"
    )
    bot_name: str = Field(default="pod-bot", description="Name used in startup logs")
    environment: str = Field(default="development", description="Environment")
    log_level: str = Field(default="INFO", description="Logging level")

    # Cooldown applied to commands that don't declare their own, in seconds
    default_cooldown: float = Field(default=3.0, ge=0, description="Default command cooldown")

    # Plugin configuration
    enabled_plugins: list[str] = Field(
        default=["general", "help"],
        description="Plugins to load at startup, in order",
    )

    # Development settings
    debug: bool = Field(default=False, description="Enable debug mode")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        json_file="config.json",
        json_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("bot_prefix")
    @classmethod
    def _prefix_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("bot_prefix must not be empty")
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Local config.json sits below the environment so deployments can override it
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            JsonConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def load_settings(**overrides) -> BotSettings:
    """Build a fresh settings object from the environment, .env and config.json."""
    return BotSettings(**overrides)
