import os
from dataclasses import dataclass, field


def _env_bool(name: str, default: bool = False) -> bool:
    val = (os.getenv(name) or "").strip().lower()
    if not val:
        return default
    return val in {"1", "true", "yes", "y", "on"}


def _env_str(name: str, default: str = "") -> str:
    return (os.getenv(name) or default).strip()


def _env_float(name: str, default: float) -> float:
    val = (os.getenv(name) or "").strip()
    if not val:
        return default
    try:
        return float(val)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {val!r}") from None


def _from_env(fn, *args):
    # Read when the instance is built, not when the module is imported,
    # so env changes made by conftest or monkeypatch are picked up.
    return field(default_factory=lambda: fn(*args))


@dataclass(frozen=True)
class Settings:
    # Landing page of the site under test
    base_url: str = _from_env(_env_str, "THEFORK_URL", "https://www.thefork.com")

    browser: str = _from_env(lambda: _env_str("BROWSER", "chrome").lower())
    headless: bool = _from_env(_env_bool, "HEADLESS", False)
    implicit_wait: float = _from_env(_env_float, "IMPLICIT_WAIT", 10)
    page_load_timeout: float = _from_env(_env_float, "PAGE_LOAD_TIMEOUT", 30)

    log_level: str = _from_env(lambda: _env_str("LOG_LEVEL", "INFO").upper())

    # Customer account used by the login scenarios
    user_email: str = _from_env(_env_str, "THEFORK_USER_EMAIL")
    user_password: str = _from_env(_env_str, "THEFORK_USER_PASSWORD")

    run_e2e: bool = _from_env(_env_bool, "RUN_E2E", False)

    @property
    def has_credentials(self) -> bool:
        return bool(self.user_email and self.user_password)


def get_settings() -> Settings:
    return Settings()
