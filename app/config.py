from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    supabase_url: str
    supabase_service_role_key: str
    fetch_timeout: float = 30.0
    log_level: str = "INFO"
