from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """CLI defaults loaded from ``TREE_BUILDER_*`` environment variables.

    The library functions never read these; they take an explicit TreeConfig.
    """

    model_config = SettingsConfigDict(
        env_prefix="TREE_BUILDER_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    log_level: str = "WARNING"
    indent: int = 2
    max_depth: int | None = None


def get_settings() -> Settings:
    return Settings()
