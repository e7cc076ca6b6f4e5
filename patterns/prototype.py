"""Clone capability shared by every template type held in a PrototypeRegistry."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Prototype(Protocol):
    """Anything with a clone() returning an independent copy of itself."""

    def clone(self) -> "Prototype":
        ...
