"""
Inventory Store

In-memory, ordered store of chemical records with change notification.
"""

import enum
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from chem_inventory.models.chemical import SAMPLE_CHEMICALS, ChemicalRecord

logger = logging.getLogger(__name__)


class ChangeAction(str, enum.Enum):
    ADD = "add"
    REMOVE = "remove"


@dataclass(frozen=True)
class InventoryChange:
    """Event passed to change listeners after a mutation."""
    action: ChangeAction
    record_id: str
    affected: int


ChangeListener = Callable[[InventoryChange], None]


class InventoryStore:
    """
    Holds the chemical records for the lifetime of the application.

    Mutations are serialised by a lock; every read returns a copied list so
    callers can iterate while other callers mutate the store. Listeners are
    notified synchronously after each mutation, outside the lock.
    """

    def __init__(self, records: Optional[Iterable[ChemicalRecord]] = None):
        self._items: List[ChemicalRecord] = list(records or [])
        self._listeners: List[ChangeListener] = []
        self._lock = threading.RLock()

    @classmethod
    def with_samples(cls) -> "InventoryStore":
        """Create a store pre-loaded with the sample chemicals."""
        return cls(record.model_copy(deep=True) for record in SAMPLE_CHEMICALS)

    @property
    def items(self) -> List[ChemicalRecord]:
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def add(self, record: ChemicalRecord) -> None:
        """Append a record. Identifiers are not checked for uniqueness."""
        with self._lock:
            self._items.append(record)
        self._notify(InventoryChange(ChangeAction.ADD, record.id, 1))

    def remove(self, record_id: str) -> int:
        """Remove every record with the given id and return how many went."""
        with self._lock:
            kept = [item for item in self._items if item.id != record_id]
            removed = len(self._items) - len(kept)
            self._items = kept
        self._notify(InventoryChange(ChangeAction.REMOVE, record_id, removed))
        return removed

    def search(self, query: str) -> List[ChemicalRecord]:
        """Case-insensitive substring match on name, symbol, category and id."""
        items = self.items
        if not query:
            return items

        q = query.lower()
        return [
            item for item in items
            if q in item.name.lower()
            or q in item.symbol.lower()
            or q in item.category.lower()
            or q in item.id.lower()
        ]

    def categories(self) -> List[str]:
        return sorted({item.category for item in self.items})

    def filter_by_category(self, category: str) -> List[ChemicalRecord]:
        return [item for item in self.items if item.category == category]

    def get_by_id(self, record_id: str) -> Optional[ChemicalRecord]:
        """Return the first record with the given id, or None."""
        return next((item for item in self.items if item.id == record_id), None)

    def on_change(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a listener and return a function that unregisters it."""
        with self._lock:
            self._listeners.append(listener)

        subscribed = True

        def unsubscribe() -> None:
            nonlocal subscribed
            with self._lock:
                if subscribed:
                    self._listeners.remove(listener)
                    subscribed = False

        return unsubscribe

    def _notify(self, change: InventoryChange) -> None:
        with self._lock:
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(change)
            except Exception:
                logger.exception(
                    f"Inventory listener {listener!r} failed on {change.action.value} of {change.record_id}")
