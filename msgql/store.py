from dataclasses import dataclass
from threading import Lock
from typing import Dict, Optional


@dataclass(frozen=True)
class Record:
    content: Optional[str] = None
    author: Optional[str] = None


class RecordStore:
    """In-memory ``id -> Record`` storage living as long as the process.

    Records are frozen, so handing one out never exposes a reference that
    could change what is stored.
    """

    def __init__(self) -> None:
        self._records: Dict[str, Record] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, id: str) -> bool:
        return self.contains(id)

    def get(self, id: str) -> Optional[Record]:
        return self._records.get(id)

    def contains(self, id: str) -> bool:
        return self.get(id) is not None

    def put(self, id: str, record: Record) -> None:
        with self._lock:
            self._records[id] = record

    def replace(self, id: str, record: Record) -> Optional[Record]:
        """Overwrite the record at ``id`` only if one is already there.

        Returns the previous record, or ``None`` when ``id`` is unknown, in
        which case nothing is written.
        """
        with self._lock:
            previous = self._records.get(id)
            if previous is not None:
                self._records[id] = record
            return previous

    def put_new(self, id: str, record: Record) -> bool:
        with self._lock:
            if id in self._records:
                return False
            self._records[id] = record
            return True
