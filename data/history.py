# data/history.py - capped, newest-first calculation log persisted to one storage slot

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from config.instruments import Mode
from config.settings import HISTORY_KEY, HISTORY_LIMIT
from errors import PersistenceCorrupt
from sizing.calculator import format_result

logger = logging.getLogger(__name__)

RECORD_FIELDS = ("mode", "point", "result", "timestamp")


@dataclass(frozen=True)
class CalculationRecord:
    mode: Mode
    point: float
    result: float
    created_at: datetime


def _record_to_dict(rec: CalculationRecord) -> dict:
    return {
        "mode": rec.mode.label,
        "point": rec.point,
        "result": rec.result,
        "timestamp": rec.created_at.isoformat(),
    }


def _is_number(x) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _record_from_dict(item) -> CalculationRecord:
    if not isinstance(item, dict):
        raise PersistenceCorrupt(f"history item is not an object: {item!r}")
    missing = [k for k in RECORD_FIELDS if k not in item]
    if missing:
        raise PersistenceCorrupt(f"history item missing {missing}")

    try:
        mode = Mode.from_label(item["mode"])
    except ValueError:
        raise PersistenceCorrupt(f"unknown mode {item['mode']!r}") from None

    if not _is_number(item["point"]) or not _is_number(item["result"]):
        raise PersistenceCorrupt("point/result must be numbers")

    ts = item["timestamp"]
    if not isinstance(ts, str):
        raise PersistenceCorrupt(f"timestamp is not a string: {ts!r}")
    # browser-written payloads end in "Z"
    if ts.endswith("Z"):
        ts = ts[:-1] + "+00:00"
    try:
        created_at = datetime.fromisoformat(ts)
    except ValueError:
        raise PersistenceCorrupt(f"bad timestamp {item['timestamp']!r}") from None

    return CalculationRecord(
        mode=mode,
        point=float(item["point"]),
        result=float(item["result"]),
        created_at=created_at,
    )


def encode_history(records: Sequence[CalculationRecord]) -> str:
    return json.dumps([_record_to_dict(r) for r in records])


def decode_history(payload: str) -> List[CalculationRecord]:
    """
    Inverse of encode_history. Raises PersistenceCorrupt on anything that is
    not a JSON list of well-formed record objects.
    """
    try:
        data = json.loads(payload)
    except (TypeError, ValueError) as e:
        raise PersistenceCorrupt(f"history is not valid JSON: {e}") from None
    if not isinstance(data, list):
        raise PersistenceCorrupt("history is not a list")
    return [_record_from_dict(item) for item in data]


class HistoryStore:
    """
    Owns the in-memory history and its storage slot.

    Must be loaded once before use. record() and clear() write through to
    storage before returning.
    """

    def __init__(self, storage, key: str = HISTORY_KEY, limit: int = HISTORY_LIMIT):
        self.storage = storage
        self.key = key
        self.limit = int(limit)
        self._records: Optional[List[CalculationRecord]] = None

    @property
    def loaded(self) -> bool:
        return self._records is not None

    def _require_loaded(self) -> List[CalculationRecord]:
        if self._records is None:
            raise RuntimeError("HistoryStore.load() must be called first")
        return self._records

    def load(self) -> List[CalculationRecord]:
        if self._records is not None:
            raise RuntimeError("HistoryStore is already loaded")

        payload = self.storage.get_item(self.key)
        if payload is None:
            records: List[CalculationRecord] = []
        else:
            try:
                records = decode_history(payload)[: self.limit]
            except PersistenceCorrupt as e:
                # discard and start over; the next write replaces the slot
                logger.warning("Discarding stored history under %r: %s", self.key, e)
                records = []

        self._records = records
        logger.info("Loaded %d history entries", len(records))
        return list(records)

    @property
    def records(self) -> Tuple[CalculationRecord, ...]:
        return tuple(self._require_loaded())

    @property
    def latest(self) -> Optional[CalculationRecord]:
        recs = self._require_loaded()
        return recs[0] if recs else None

    def __len__(self) -> int:
        return len(self._require_loaded())

    def record(self, entry: CalculationRecord) -> None:
        recs = self._require_loaded()
        updated = ([entry] + recs)[: self.limit]
        # memory only changes once the write went through
        self.storage.set_item(self.key, encode_history(updated))
        self._records = updated
        logger.debug("Recorded %s point=%s result=%s", entry.mode.label, entry.point, entry.result)

    def clear(self) -> None:
        self._require_loaded()
        self.storage.remove_item(self.key)
        self._records = []
        logger.info("History cleared")


def history_frame(records: Sequence[CalculationRecord]) -> pd.DataFrame:
    """Table for the Recent Activity list (newest first)."""
    rows = [{
        "Mode": r.mode.label,
        "Time": r.created_at.astimezone().strftime("%H:%M"),
        "Point": r.point,
        "Result": format_result(r.result),
    } for r in records]
    return pd.DataFrame(rows, columns=["Mode", "Time", "Point", "Result"])
