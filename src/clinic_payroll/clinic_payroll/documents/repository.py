from __future__ import annotations

from typing import Any, Optional, Protocol


class DocumentStore(Protocol):
    """Whole-document key-value persistence.

    ``save`` replaces the stored document entirely. Backends raise
    ``StorageError`` when the underlying read or write fails.
    """

    def load(self, key: str) -> Optional[dict[str, Any]]:
        raise NotImplementedError

    def save(self, key: str, value: dict[str, Any]) -> None:
        raise NotImplementedError
