from dataclasses import dataclass
import os
from pathlib import Path

from dotenv import load_dotenv


load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    data_dir: str = os.getenv("STUDYPLANNER_DATA_DIR", "data")
    storage_file: str = os.getenv("STUDYPLANNER_STORAGE_FILE", "local_storage.json")
    key_prefix: str = os.getenv("STUDYPLANNER_KEY_PREFIX", "studyplanner")

    web_mode: bool = _env_flag("STUDYPLANNER_WEB")
    port: int = int(os.getenv("PORT", "8550"))

    log_level: str = os.getenv("STUDYPLANNER_LOG_LEVEL", "INFO")
    log_dir: str = os.getenv("STUDYPLANNER_LOG_DIR", "")

    @property
    def storage_path(self) -> Path:
        return Path(self.data_dir) / self.storage_file

    @property
    def log_path(self) -> Path:
        return Path(self.log_dir) if self.log_dir else Path(self.data_dir) / "logs"

    def storage_key(self, name: str) -> str:
        return f"{self.key_prefix}-{name}"


settings = Settings()
