from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    app_name: str = "Deal Room"
    debug: bool = False
    log_level: str = "INFO"
    cors_allow_origins: list[str] = ["*"]

    # Deal submission form
    # Occupancy assumed when the form leaves it blank
    deal_form_default_occupancy: str = "rental"


settings = Settings()
