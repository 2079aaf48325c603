from abc import ABC, abstractmethod
from typing import Any


class DraftStoragePort(ABC):
    """Durable key-value storage backing the draft form store."""

    @abstractmethod
    def read(self, key: str) -> dict[str, Any] | None:
        """Return the stored payload, or None if nothing is stored."""
        ...

    @abstractmethod
    def write(self, key: str, value: dict[str, Any]) -> None:
        """Replace the stored payload."""
        ...

    @abstractmethod
    def clear(self, key: str) -> None:
        """Remove the stored payload (no-op if absent)."""
        ...
