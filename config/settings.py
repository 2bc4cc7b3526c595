from __future__ import annotations
from pathlib import Path

APP_TITLE = "Trading"
APP_VERSION = "2.1.0"

# Dollar risk spread across the point move
RISK_BUDGET: float = 500.0

HISTORY_LIMIT: int = 10
HISTORY_KEY = "trading_calc_history"

STORAGE_PATH: Path = Path.home() / ".trading_calc" / "storage.json"
