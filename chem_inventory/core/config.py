from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application settings
    app_name: str = "ICSA Chemical Inventory"
    debug: bool = False
    testing: bool = False
    log_level: str = "INFO"

    # CORS settings
    allowed_origins: list[str] = ["*"]

    # Inventory settings
    seed_samples: bool = True  # Load the three sample chemicals on startup
    id_prefix: str = "CHEM"

    # Rate limit for creating chemicals (slowapi syntax)
    create_rate_limit: str = "30/minute"

    class Config:
        env_file = ".env"


settings = Settings()
