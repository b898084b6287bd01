"""
In‑memory record store.

This module replaces a database for the portfolio: every resource type
lives in its own keyed collection held in process memory.  A
``RecordCollection`` stores many records keyed by an integer id that it
assigns itself; a ``SingletonRecord`` holds at most one record with the
fixed id ``1``.  ``PortfolioStore`` bundles one container per resource
type and is created once per application by ``create_app``.

Records are plain dictionaries of snake_case field names.  Every value
handed out is a deep copy, so callers can never mutate stored state
behind the store's back.  All state is lost when the process exits.
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Dict, Iterable, List, Optional

from . import seed

Record = Dict[str, Any]

logger = logging.getLogger(__name__)


class RecordCollection:
    """Keyed store for a multi‑valued resource type.

    Ids are assigned from a counter that only ever moves forward, so an
    id is never handed out twice, even after the record holding it has
    been deleted.  Mutations are serialized by a lock.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._records: Dict[int, Record] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def load(self, records: Iterable[Record]) -> None:
        """Insert records that already carry an ``id``.

        The counter is moved past the highest id loaded so later
        creations cannot collide with loaded records.
        """
        with self._lock:
            for record in records:
                record_id = int(record["id"])
                self._records[record_id] = copy.deepcopy(record)
                self._next_id = max(self._next_id, record_id + 1)

    def list(self) -> List[Record]:
        """Return all records in insertion order."""
        with self._lock:
            return [copy.deepcopy(record) for record in self._records.values()]

    def get(self, record_id: int) -> Optional[Record]:
        with self._lock:
            record = self._records.get(record_id)
            return copy.deepcopy(record) if record is not None else None

    def create(self, fields: Record) -> Record:
        """Store ``fields`` under the next unused id and return the new record."""
        with self._lock:
            record_id = self._next_id
            self._next_id += 1
            record = {**copy.deepcopy(fields), "id": record_id}
            self._records[record_id] = record
            return copy.deepcopy(record)

    def update(self, record_id: int, fields: Record) -> Optional[Record]:
        """Replace every field of an existing record.

        Returns ``None`` and leaves the collection untouched when no
        record has ``record_id``.
        """
        with self._lock:
            if record_id not in self._records:
                return None
            record = {**copy.deepcopy(fields), "id": record_id}
            self._records[record_id] = record
            return copy.deepcopy(record)

    def delete(self, record_id: int) -> bool:
        """Remove a record.  Returns ``False`` if it did not exist."""
        with self._lock:
            return self._records.pop(record_id, None) is not None


class SingletonRecord:
    """Holder for a resource type with at most one record (id ``1``)."""

    RECORD_ID = 1

    def __init__(self, name: str) -> None:
        self.name = name
        self._record: Optional[Record] = None
        self._lock = threading.Lock()

    def load(self, record: Record) -> None:
        self.update(record)

    def get(self) -> Optional[Record]:
        with self._lock:
            return copy.deepcopy(self._record) if self._record is not None else None

    def update(self, fields: Record) -> Record:
        """Replace the record wholesale.  Always succeeds."""
        with self._lock:
            self._record = {**copy.deepcopy(fields), "id": self.RECORD_ID}
            return copy.deepcopy(self._record)


class PortfolioStore:
    """All portfolio data for one running application."""

    def __init__(self) -> None:
        self.profile = SingletonRecord("profile")
        self.contact = SingletonRecord("contact")
        self.projects = RecordCollection("project")
        self.educations = RecordCollection("education")
        self.skills = RecordCollection("skill")
        self.experiences = RecordCollection("experience")
        self.achievements = RecordCollection("achievement")
        self.messages = RecordCollection("message")

    @classmethod
    def seeded(cls) -> "PortfolioStore":
        """Return a store pre‑loaded with the sample portfolio."""
        store = cls()
        store.profile.load(seed.PROFILE)
        store.contact.load(seed.CONTACT)
        store.projects.load(seed.PROJECTS)
        store.educations.load(seed.EDUCATIONS)
        store.skills.load(seed.SKILLS)
        store.experiences.load(seed.EXPERIENCES)
        store.achievements.load(seed.ACHIEVEMENTS)
        logger.info(
            "Seeded store with %d projects, %d educations, %d skills, %d experiences, %d achievements",
            len(store.projects),
            len(store.educations),
            len(store.skills),
            len(store.experiences),
            len(store.achievements),
        )
        return store
