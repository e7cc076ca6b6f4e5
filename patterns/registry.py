"""In-memory registry of named prototype templates."""

import threading
from typing import Dict, List

from patterns.errors import NotFoundError
from patterns.observability import get_logger
from patterns.prototype import Prototype


class PrototypeRegistry:
    """Stores templates by key and hands out independent clones of them."""

    def __init__(self) -> None:
        self._prototypes: Dict[str, Prototype] = {}
        self._lock = threading.Lock()
        self._logger = get_logger("patterns.registry")

    def add_prototype(self, key: str, template: Prototype) -> None:
        """
        Store template under key, replacing any previous entry.
        The registry keeps a reference; templates are treated as read-only once registered.
        """
        if not isinstance(template, Prototype):
            raise TypeError(f"{type(template).__name__} has no clone() method")
        with self._lock:
            replaced = key in self._prototypes
            self._prototypes[key] = template
        self._logger.info(
            "prototype_added",
            extra={
                "key": key,
                "template_type": type(template).__name__,
                "replaced": replaced,
            },
        )

    def get_prototype(self, key: str) -> Prototype:
        """Return a fresh clone of the template under key. Raises NotFoundError if key is absent."""
        with self._lock:
            template = self._prototypes.get(key)
        if template is None:
            raise NotFoundError(key)
        clone = template.clone()
        self._logger.info(
            "prototype_cloned",
            extra={"key": key, "template_type": type(template).__name__},
        )
        return clone

    def remove_prototype(self, key: str) -> None:
        """Drop the template under key. Raises NotFoundError if key is absent."""
        with self._lock:
            if key not in self._prototypes:
                raise NotFoundError(key)
            del self._prototypes[key]
        self._logger.info("prototype_removed", extra={"key": key})

    def keys(self) -> List[str]:
        """Registered keys, in insertion order."""
        with self._lock:
            return list(self._prototypes)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._prototypes

    def __len__(self) -> int:
        with self._lock:
            return len(self._prototypes)

    def __repr__(self) -> str:
        return f"PrototypeRegistry(keys={self.keys()!r})"
