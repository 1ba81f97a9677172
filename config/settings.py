"""Application settings and configuration."""
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _optional_int(name: str) -> Optional[int]:
    value = int(os.getenv(name, '0') or 0)
    return value if value > 0 else None


class Settings:
    """
    ─── OPENDOTA QUOTA ──────────────────────────────────────────────────
    The free tier allows roughly 60 requests per minute. Every call goes
    through a single FIFO gateway, so a 250 ms spacing keeps bursts well
    under the quota while a page load of ~50 match details still finishes
    in a reasonable time.

    A 429 is never surfaced: the gateway waits THROTTLE_PENALTY_MS and
    re-issues the same request. MAX_THROTTLE_RETRIES = 0 keeps the retry
    unbounded; any positive value caps it.
    ──────────────────────────────────────────────────────────────────────
    """

    OPENDOTA_BASE_URL: str = os.getenv('OPENDOTA_BASE_URL', 'https://api.opendota.com/api')
    OPENDOTA_API_KEY:  str = os.getenv('OPENDOTA_API_KEY', '')

    # ── Request gateway ───────────────────────────────────────────────────
    MIN_REQUEST_INTERVAL_MS: int           = int(os.getenv('MIN_REQUEST_INTERVAL_MS', '250'))
    THROTTLE_PENALTY_MS:     int           = int(os.getenv('THROTTLE_PENALTY_MS', '5000'))
    MAX_THROTTLE_RETRIES:    Optional[int] = _optional_int('MAX_THROTTLE_RETRIES')

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT: float = float(os.getenv('REQUEST_TIMEOUT', '30'))

    # ── Aggregation ────────────────────────────────────────────────────────
    RECENT_MATCHES_LIMIT:   int = int(os.getenv('RECENT_MATCHES_LIMIT', '50'))
    BEST_COMBO_MIN_MATCHES: int = int(os.getenv('BEST_COMBO_MIN_MATCHES', '2'))

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    LOG_DIR:  Path = Path(os.getenv('LOG_DIR', str(BASE_DIR / 'data' / 'logs')))

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls) -> None:
        if not cls.OPENDOTA_BASE_URL.startswith(('http://', 'https://')):
            raise ValueError("OPENDOTA_BASE_URL must be an http(s) URL")
        if cls.MIN_REQUEST_INTERVAL_MS < 0:
            raise ValueError("MIN_REQUEST_INTERVAL_MS must not be negative")
        if cls.THROTTLE_PENALTY_MS <= cls.MIN_REQUEST_INTERVAL_MS:
            raise ValueError("THROTTLE_PENALTY_MS must be longer than MIN_REQUEST_INTERVAL_MS")

    @classmethod
    def create_directories(cls) -> None:
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
