import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


@dataclass
class Settings:
    # API Ayarları
    api_base_url: str = os.getenv("LUMINA_API_URL", "http://localhost:5000")
    books_path: str = os.getenv("LUMINA_BOOKS_PATH", "/books")
    # Boş bırakılırsa istemci zaman aşımı uygulamaz
    api_timeout: Optional[float] = _optional_float("LUMINA_API_TIMEOUT")

    # Arayüz Ayarları
    toast_seconds: float = float(os.getenv("LUMINA_TOAST_SECONDS", "3"))

    # Uygulama Ayarları
    app_name: str = os.getenv("APP_NAME", "LuminaBooks")
    log_level: str = os.getenv("LUMINA_LOG_LEVEL", "WARNING")


settings = Settings()
