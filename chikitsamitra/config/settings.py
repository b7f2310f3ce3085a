# chikitsamitra/config/settings.py

from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    api_version: str = "1.0.0"
    api_title: str = "ChikitsaMitra Health Assistant"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = False
    log_level: str = "info"

    # Directory source: "apps_script" calls the spreadsheet web-app directly,
    # "proxy" goes through a proxy exposing the /api/* surface.
    directory_transport: Literal["apps_script", "proxy"] = "apps_script"
    apps_script_exec_url: str = ""
    apps_script_api_key: Optional[str] = None
    proxy_base_url: str = "http://127.0.0.1:5000"
    http_timeout_seconds: float = 10.0

    bookings_key: str = "cm_bookings_v1"
    mirrored_bookings_key: str = "cm_bookings_server_v1"

    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_password: Optional[str] = None
    redis_db: int = 0
    redis_max_connections: int = 20
    redis_socket_timeout: int = 5
    redis_socket_connect_timeout: int = 5

    booking_window_days: int = 30
    faq_min_query_length: int = 2

    verification_ttl_minutes: int = 30
    verification_max_sessions: int = 1000

    deepgram_api_key: Optional[str] = None
    speech_language: str = "en-US"
    tts_model: str = "aura-asteria-en"
    stt_model: str = "nova-2"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra='ignore'
    )


settings = Settings()
