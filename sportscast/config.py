import os
from dataclasses import dataclass
from dotenv import load_dotenv

from sportscast.errors import MissingCredentialError


load_dotenv()

DEFAULT_PORT = 3001
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TIMEOUT_SECONDS = 30.0


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    try:
        return int(raw)
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class Settings:
    openai_api_key: str
    openai_model: str = DEFAULT_MODEL
    temperature: float = 0.0
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from the process environment (and `.env`).

        Raises MissingCredentialError when OPENAI_API_KEY is absent.
        """
        api_key = os.getenv("OPENAI_API_KEY", "").strip()
        if not api_key:
            raise MissingCredentialError("OPENAI_API_KEY is not defined")
        return cls(
            openai_api_key=api_key,
            openai_model=os.getenv("OPENAI_MODEL", "").strip() or DEFAULT_MODEL,
            timeout_seconds=_float_env("FORECAST_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
            port=_int_env("PORT", DEFAULT_PORT),
        )


_CACHED_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _CACHED_SETTINGS
    if _CACHED_SETTINGS is None:
        _CACHED_SETTINGS = Settings.from_env()
    return _CACHED_SETTINGS
