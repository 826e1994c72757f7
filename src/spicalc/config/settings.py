from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    grade_points: str = os.getenv("SPI_GRADE_POINTS", "")
    grade_scale_max: float = float(os.getenv("SPI_GRADE_SCALE_MAX", "10"))
    enable_cpi: bool = _flag("SPI_ENABLE_CPI", "1")

    web_mode: bool = _flag("SPI_WEB", "0")
    port: int = int(os.getenv("PORT", "8550"))
    api_host: str = os.getenv("SPI_API_HOST", "127.0.0.1")
    api_port: int = int(os.getenv("SPI_API_PORT", "8000"))

    cors_allowed_origins: tuple[str, ...] = _split_csv(
        os.getenv("SPI_CORS_ALLOWED_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")
    )
    log_level: str = os.getenv("SPI_LOG_LEVEL", "INFO").upper()


settings = Settings()
