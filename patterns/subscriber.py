"""Abstract Subscriber with a weak back-reference to its channel."""

import weakref
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from patterns.observability import get_logger

if TYPE_CHECKING:
    from patterns.channel import Channel


class Subscriber(ABC):
    """Abstract base class for observers notified by a Channel."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._channel_ref: Optional["weakref.ReferenceType[Channel]"] = None
        self._logger = get_logger(f"patterns.subscriber.{name}")

    @property
    def name(self) -> str:
        return self._name

    @property
    def channel(self) -> Optional["Channel"]:
        """The channel this subscriber is attached to, or None (also None once it has been collected)."""
        if self._channel_ref is None:
            return None
        return self._channel_ref()

    def subscribe_to_channel(self, channel: "Channel") -> None:
        """
        Attach to a channel and register with it.
        Leaves any previously attached channel first; attaching again to a channel it is still registered with does nothing.
        """
        current = self.channel
        if current is channel:
            if any(sub is self for sub in channel.subscribers):
                return
            # removed directly via Channel.unsubscribe; the back-reference is stale
            self._channel_ref = None
        elif current is not None:
            self.unsubscribe_from_channel()
        channel.subscribe(self)
        self._channel_ref = weakref.ref(channel)
        self.on_subscribe(channel)

    def unsubscribe_from_channel(self) -> bool:
        """Leave the attached channel. Returns False if not attached to a live channel."""
        current = self.channel
        if current is None:
            self._channel_ref = None
            return False
        current.unsubscribe(self)
        self._channel_ref = None
        self.on_unsubscribe(current)
        return True

    @abstractmethod
    def on_notify(self, channel: "Channel") -> None:
        """React to a publish. Reads channel state at call time. Must be implemented by subclasses."""
        pass

    def deliver(self, channel: "Channel") -> None:
        """Called by Channel.notify_subscribers(); default implementation calls on_notify."""
        self.on_notify(channel)

    def on_subscribe(self, channel: "Channel") -> None:
        """Called when this subscriber attaches to a channel (for observability)."""
        self._logger.info(
            "attached",
            extra={"channel": channel.name, "subscriber": self._name},
        )

    def on_unsubscribe(self, channel: "Channel") -> None:
        """Called when this subscriber leaves a channel (for observability)."""
        self._logger.info(
            "detached",
            extra={"channel": channel.name, "subscriber": self._name},
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r})"
