from dataclasses import dataclass, field
from typing import Optional

from studyplanner.config.settings import settings
from studyplanner.services.storage import LocalStorage
from studyplanner.services.ticker import Ticker


@dataclass
class AppState:
    storage: LocalStorage = field(default_factory=lambda: LocalStorage(settings.storage_path))
    route: str = "/"
    ticker: Optional[Ticker] = None

    def stop_ticker(self) -> None:
        if self.ticker is not None:
            self.ticker.cancel()
            self.ticker = None
