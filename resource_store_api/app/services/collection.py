"""
Generic in‑memory collection of JSON records.

``ResourceCollection`` implements the CRUD operations shared by every
resource family: an ordered list of ``dict`` records addressed by an
integer ``id``.  Subclasses name the resource, list the fields a
create/replace payload must carry and build the canonical record via
``build``.

Every operation holds the collection's lock for its whole
find‑and‑mutate sequence, so handlers running on a thread pool never
observe a half‑applied change.  Records handed out are copies; the
only way to change stored state is through the methods below.
"""

import logging
import threading
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..core.errors import MissingFieldsError, ResourceNotFoundError


Record = Dict[str, Any]


def is_present(value: Any) -> bool:
    """Return ``True`` if ``value`` counts as supplied in a JSON payload.

    ``null``, ``false``, ``0`` and ``""`` are missing.  Arrays and
    objects are present even when empty.
    """
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


class ResourceCollection:
    """Ordered, lock‑protected list of records for one resource family."""

    #: Plural name used in URLs (``/api/<resource_name>``).
    resource_name: str = ""
    #: Singular label used in error messages (``"<label> not found"``).
    label: str = ""
    #: Fields that must be present on create and replace.
    required_fields: Tuple[str, ...] = ()

    def __init__(self, records: Optional[Iterable[Record]] = None) -> None:
        self._lock = threading.Lock()
        self._records: List[Record] = [dict(record) for record in records or ()]
        self.logger = logging.getLogger(f"{__name__}.{self.resource_name or 'resource'}")

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------
    @property
    def not_found_message(self) -> str:
        return f"{self.label} not found"

    @property
    def missing_fields_message(self) -> str:
        return f"{' and '.join(self.required_fields).capitalize()} are required"

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------
    def build(self, entity_id: int, payload: Record, current: Optional[Record] = None) -> Record:
        """Return the canonical record for ``payload``.

        ``current`` is the record being replaced, or ``None`` on create.
        Only the fields returned here survive; anything else in the
        payload is discarded.
        """
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Internal helpers (call with the lock held)
    # ------------------------------------------------------------------
    def _index_of(self, entity_id: Optional[int]) -> int:
        if entity_id is not None:
            for index, record in enumerate(self._records):
                if record.get("id") == entity_id:
                    return index
        self.logger.debug("No %s with id %r", self.label.lower(), entity_id)
        raise ResourceNotFoundError(self.not_found_message)

    def _check_required(self, payload: Record) -> None:
        if not all(is_present(payload.get(name)) for name in self.required_fields):
            raise MissingFieldsError(self.missing_fields_message)

    def _next_id(self) -> int:
        # max + 1, so a deleted maximum id is handed out again.
        ids = [record["id"] for record in self._records if isinstance(record.get("id"), int)]
        return max(ids) + 1 if ids else 1

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------
    def list(self) -> List[Record]:
        """Return all records in insertion order."""
        with self._lock:
            return [dict(record) for record in self._records]

    def get(self, entity_id: Optional[int]) -> Record:
        """Return the first record whose id equals ``entity_id``.

        Raises
        ------
        ResourceNotFoundError
            If no record matches (``None`` never matches).
        """
        with self._lock:
            return dict(self._records[self._index_of(entity_id)])

    def create(self, payload: Record) -> Record:
        """Validate ``payload``, assign the next id and append the record."""
        with self._lock:
            self._check_required(payload)
            record = self.build(self._next_id(), payload)
            self._records.append(record)
        self.logger.info("Created %s %s", self.label.lower(), record["id"])
        return dict(record)

    def replace(self, entity_id: Optional[int], payload: Record) -> Record:
        """Replace a record in place with the canonical form of ``payload``.

        Existence is checked before the payload, so a missing record
        wins over a bad payload.
        """
        with self._lock:
            index = self._index_of(entity_id)
            self._check_required(payload)
            current = self._records[index]
            record = self.build(current["id"], payload, current)
            self._records[index] = record
        self.logger.info("Replaced %s %s", self.label.lower(), record["id"])
        return dict(record)

    def update(self, entity_id: Optional[int], payload: Record) -> Record:
        """Shallow‑merge ``payload`` over a record, keeping its id."""
        with self._lock:
            index = self._index_of(entity_id)
            current = self._records[index]
            if "id" in payload and payload["id"] != current["id"]:
                self.logger.debug(
                    "Ignoring id %r in update of %s %s", payload["id"], self.label.lower(), current["id"]
                )
            record = {**current, **payload, "id": current["id"]}
            self._records[index] = record
        self.logger.info("Updated %s %s", self.label.lower(), record["id"])
        return dict(record)

    def delete(self, entity_id: Optional[int]) -> None:
        """Remove the first record with ``entity_id``."""
        with self._lock:
            index = self._index_of(entity_id)
            del self._records[index]
        self.logger.info("Deleted %s %s", self.label.lower(), entity_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
