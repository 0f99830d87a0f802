from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "mealplan-units"
    env: str = "local"

    log_level: str = "INFO"

    # Log a warning for every recipe line whose unit is not in the catalog.
    # Set WARN_ON_UNKNOWN_UNITS=false in .env to silence noisy imports.
    warn_on_unknown_units: bool = True

    class Config:
        env_file = ".env"


settings = Settings()
