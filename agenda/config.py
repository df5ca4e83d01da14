from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreBackend(Enum):
    HTTP = "http"
    MEMORY = "memory"


class BackendConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="AGENDA_BACKEND_", env_file=".env", extra="ignore")

    api_url: str = "http://localhost:8000/api"
    token: str = ""
    timeout: float = 10.0
    adapter: StoreBackend = StoreBackend.MEMORY
    fallback_to_memory: bool = True


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="AGENDA_", env_file=".env", extra="ignore")

    clinic_timezone: str = "America/New_York"
    strict_transitions: bool = False
    backend: BackendConfig = Field(default_factory=lambda: BackendConfig())
