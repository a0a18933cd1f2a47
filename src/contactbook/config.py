"""Environment-based settings. Values come from the process env, optionally seeded by a .env file."""

import os
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_UNDO_WINDOW_MS = 5000
DEFAULT_NOTIFICATION_MS = 5000


def _repo_root() -> Path:
    """Return repo root (parent of src)."""
    return Path(__file__).resolve().parent.parent.parent


def load_environment() -> Path | None:
    """Load .env from repo root, else from CWD. Returns the file used, if any."""
    for path in (_repo_root() / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            return path
    return None


def _int_setting(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer number of milliseconds, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def get_undo_window_ms() -> int:
    return _int_setting("CONTACTBOOK_UNDO_WINDOW_MS", DEFAULT_UNDO_WINDOW_MS)


def get_notification_ms() -> int:
    return _int_setting("CONTACTBOOK_NOTIFICATION_MS", DEFAULT_NOTIFICATION_MS)


def get_seed_path() -> Path | None:
    """Seed file from CONTACTBOOK_SEED_PATH, or None when unset."""
    path = os.environ.get("CONTACTBOOK_SEED_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return None


def get_phone_region() -> str | None:
    """Default region for displaying numbers without a country code (e.g. "US")."""
    return os.environ.get("CONTACTBOOK_PHONE_REGION", "").strip().upper() or None
