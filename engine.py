# engine.py
# Calculator session (no page UI). Holds form state + history and exposes the user actions.

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from config.instruments import DEFAULT_MODE, Mode
from data.history import CalculationRecord, HistoryStore
from errors import InvalidInput
from sizing.calculator import calculate, format_result, parse_point

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CalculatorSession:
    """
    One per browser session. The page reads the attributes and calls the
    action methods; nothing here touches Streamlit.
    """

    def __init__(self, store: HistoryStore, clock: Callable[[], datetime] = _utcnow):
        self.store = store
        self.clock = clock
        self.mode: Mode = DEFAULT_MODE
        self.point_text: str = ""
        self.result: Optional[float] = None
        self.copied: bool = False
        if not store.loaded:
            store.load()

    # -------------------------
    # Actions
    # -------------------------
    def select_mode(self, mode: Mode) -> None:
        self.mode = Mode(mode)
        self.result = None

    def set_point_text(self, text: str) -> None:
        self.point_text = text or ""

    @property
    def can_calculate(self) -> bool:
        return bool(self.point_text)

    def calculate(self) -> Optional[float]:
        """Returns the new result, or None when the point text is rejected."""
        try:
            value = calculate(self.mode, self.point_text)
        except InvalidInput as e:
            logger.info("No result: %s", e)
            return None

        self.result = value
        self.store.record(CalculationRecord(
            mode=self.mode,
            point=parse_point(self.point_text),
            result=value,
            created_at=self.clock(),
        ))
        self.copied = False
        return value

    def copy_last_result(self) -> Optional[str]:
        if self.result is None:
            return None
        self.copied = True
        return format_result(self.result)

    def dismiss_copied(self) -> None:
        """Copy feedback only lasts for the run that performed the copy."""
        self.copied = False

    def clear_history(self) -> None:
        self.store.clear()

    # -------------------------
    # Views
    # -------------------------
    @property
    def display_result(self) -> Optional[str]:
        return None if self.result is None else format_result(self.result)

    @property
    def history(self):
        return self.store.records
