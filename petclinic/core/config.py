"""Module: config."""

from pydantic_settings import BaseSettings, SettingsConfigDict


# Centralized runtime configuration loaded from environment variables.
class Settings(BaseSettings):
    # SQLAlchemy connection string for the clinic database.
    database_url: str
    app_name: str = "PetClinic"
    log_level: str = "INFO"
    # Insert pet types, specialties and vets when the app starts.
    seed_on_startup: bool = True
    # Echo SQL statements issued by the engine (local debugging only).
    sql_echo: bool = False

    # Also load values from a local .env file.
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


# Global settings instance imported by app modules at runtime.
settings = Settings()
