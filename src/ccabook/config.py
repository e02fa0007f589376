"""Settings read from the environment (and .env at the repo root or cwd)."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_REPO_ROOT = Path(__file__).resolve().parent.parent.parent

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def load_env() -> Path | None:
    """Load the first .env found (repo root, then cwd). Returns its path, if any."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            return path
    return None


@dataclass(frozen=True)
class Settings:
    data_path: Path = Path("data") / "addressbook.json"
    prefs_path: Path = Path("preferences.json")
    log_level: str = "INFO"
    phone_region: str | None = "SG"

    @classmethod
    def from_env(cls) -> "Settings":
        level = os.environ.get("CCABOOK_LOG_LEVEL", "INFO").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {level}")
        return cls(
            data_path=Path(
                os.environ.get("CCABOOK_DATA_PATH", str(cls.data_path)).strip()
            ),
            prefs_path=Path(
                os.environ.get("CCABOOK_PREFS_PATH", str(cls.prefs_path)).strip()
            ),
            log_level=level,
            phone_region=os.environ.get("CCABOOK_PHONE_REGION", "SG").strip().upper()
            or None,
        )


def configure_logging(level: str) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=getattr(logging, level))
