# hrms/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):
    # MongoDB settings
    MONGODB_URI: str = "mongodb://127.0.0.1/go-hrms"
    MONGODB_DB_NAME: str = "go-hrms"
    EMPLOYEE_COLLECTION: str = "employee"

    # Upper bound, in seconds, for every single database operation
    OPERATION_TIMEOUT: float = 10.0

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    RELOAD: bool = False
    LOG_LEVEL: str = "info"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

@lru_cache()
def get_settings():
    return Settings()
