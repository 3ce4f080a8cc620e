"""
Mission persistence codec and id generation

Wire format: records joined by ';', each record 'id|title|done' with done as
'true' or 'false'. Delimiters are not escaped, so titles containing '|' or ';'
are refused before they reach the codec.
"""
import logging
import threading
import time
from typing import Callable, List, Optional

from hardman.exceptions import ValidationError
from hardman.models.mission import Mission

logger = logging.getLogger(__name__)

RECORD_SEPARATOR = ";"
FIELD_SEPARATOR = "|"
RESERVED_CHARACTERS = (RECORD_SEPARATOR, FIELD_SEPARATOR)


def has_reserved_characters(title: str) -> bool:
    """Title would break the wire format"""
    return any(c in title for c in RESERVED_CHARACTERS)


def encode_missions(missions: List[Mission]) -> str:
    """Serialize missions to the single-string wire format"""
    records = []
    for m in missions:
        if has_reserved_characters(m.title):
            raise ValidationError(
                message="Mission titles cannot contain ';' or '|'",
                field="title",
                value=m.title,
            )
        records.append(f"{m.id}{FIELD_SEPARATOR}{m.title}{FIELD_SEPARATOR}{'true' if m.done else 'false'}")
    return RECORD_SEPARATOR.join(records)


def _parse_record(record: str) -> Mission:
    parts = record.split(FIELD_SEPARATOR)
    if len(parts) != 3:
        raise ValueError(f"expected 3 fields, got {len(parts)}")
    raw_id, title, raw_done = parts
    done = raw_done.strip().lower()
    if done not in ("true", "false"):
        raise ValueError(f"invalid done flag {raw_done!r}")
    return Mission(id=int(raw_id), title=title, done=done == "true")


def decode_missions(raw: Optional[object]) -> List[Mission]:
    """
    Deserialize missions from the wire format

    Missing, blank or malformed values decode to an empty list.
    """
    if raw is None or not isinstance(raw, str) or not raw.strip():
        return []

    try:
        missions = [
            _parse_record(record)
            for record in raw.split(RECORD_SEPARATOR)
            if record.strip()
        ]
    except ValueError as e:
        logger.warning(f"Discarding malformed stored missions: {e}")
        return []

    if len({m.id for m in missions}) != len(missions):
        logger.warning("Discarding stored missions with duplicate ids")
        return []
    return missions


class MissionIdGenerator:
    """
    Strictly increasing mission ids

    Ids are millisecond timestamps scaled by 1000 plus a counter, bumped past
    the last issued id so repeated calls inside one millisecond stay unique.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def seed(self, existing_ids) -> None:
        """Never issue an id at or below ids already in use"""
        with self._lock:
            self._last = max([self._last, *existing_ids])

    def next_id(self) -> int:
        with self._lock:
            candidate = int(self._clock() * 1000) * 1000
            self._last = max(candidate, self._last + 1)
            return self._last

    __call__ = next_id
