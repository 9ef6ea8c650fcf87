from pathlib import Path
from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ── App ─────────────────────────────────────
    APP_NAME: str = "AEO Scanner API"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    DEBUG: bool = False
    PORT: int = 3000
    CORS_ORIGINS: List[str] = ["*"]

    # ── Scanning ────────────────────────────────
    SCAN_TIMEOUT_SECONDS: float = 30.0
    SCAN_MAX_REDIRECTS: int = 5
    SCAN_USER_AGENT: str = "Mozilla/5.0 (compatible; BirminghamAI-AEO-Scanner/1.0)"

    # ── Recommendations ─────────────────────────
    MAX_RECOMMENDATIONS: int = 5
    LEARN_MORE_URL: str = "https://birminghamai.org/aeo-guide"

    # ── Logging ─────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_FILE_NAME: str = "aeo_scanner.log"

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent.parent.parent / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
