from pydantic_settings import BaseSettings

from staychill.schemas.location import Language


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    backend_base_url: str
    stripe_publishable_key: str = ""
    stripe_secret_key: str = ""
    default_language: Language = Language.en
    http_timeout: float = 30.0
    max_payment_sessions: int = 1000
    log_level: str = "INFO"
