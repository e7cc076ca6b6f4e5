"""Channel class: the subject that publishes items to its subscribers (in-memory only)."""

import threading
from typing import TYPE_CHECKING, Any, List, Optional

from patterns.errors import InvalidStateError
from patterns.observability import get_logger

if TYPE_CHECKING:
    from patterns.subscriber import Subscriber


class Channel:
    """Named subject; holds the latest published item and an ordered list of subscribers."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._latest_item: Optional[Any] = None
        self._subscribers: List["Subscriber"] = []
        self._notifications_delivered: int = 0
        self._lock = threading.Lock()
        # per-thread flag: set while that thread runs a notification pass
        self._local = threading.local()
        self._logger = get_logger(f"patterns.channel.{name}")

    @property
    def name(self) -> str:
        return self._name

    @property
    def latest_item(self) -> Optional[Any]:
        return self._latest_item

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    @property
    def subscribers(self) -> List["Subscriber"]:
        """Return a copy of the subscriber list, in subscription order."""
        with self._lock:
            return list(self._subscribers)

    @property
    def notifications_delivered(self) -> int:
        return self._notifications_delivered

    def _check_not_notifying(self, operation: str) -> None:
        if getattr(self._local, "notifying", False):
            raise InvalidStateError(self._name, operation)

    def subscribe(self, subscriber: "Subscriber") -> None:
        """Append a subscriber. Adding the same subscriber twice means two notifications per publish."""
        self._check_not_notifying("subscribe")
        with self._lock:
            self._subscribers.append(subscriber)
        self._logger.info(
            "subscribed",
            extra={"channel": self._name, "subscriber": subscriber.name},
        )

    def unsubscribe(self, subscriber: "Subscriber") -> bool:
        """Remove the first matching entry. Returns False if the subscriber was not registered."""
        self._check_not_notifying("unsubscribe")
        with self._lock:
            try:
                self._subscribers.remove(subscriber)
            except ValueError:
                return False
        self._logger.info(
            "unsubscribed",
            extra={"channel": self._name, "subscriber": subscriber.name},
        )
        return True

    def publish(self, item: Any) -> None:
        """Set the latest item, then notify every subscriber in order before returning."""
        self._check_not_notifying("publish")
        self._latest_item = item
        self._logger.info("published", extra={"channel": self._name, "item": item})
        self.notify_subscribers()

    def notify_subscribers(self) -> None:
        """Notify all current subscribers of the latest item.

        The subscriber list is copied under the lock and notified without holding it.
        An exception from a subscriber is logged and re-raised; later subscribers
        are not notified.
        """
        self._check_not_notifying("notify subscribers")
        with self._lock:
            subscribers = list(self._subscribers)
        self._logger.info(
            "notifying",
            extra={"channel": self._name, "subscriber_count": len(subscribers)},
        )
        self._local.notifying = True
        try:
            for subscriber in subscribers:
                try:
                    subscriber.deliver(self)
                except Exception as e:
                    self._logger.exception(
                        "notify_failed",
                        extra={
                            "channel": self._name,
                            "subscriber": subscriber.name,
                            "error": str(e),
                        },
                    )
                    raise
                self._notifications_delivered += 1
        finally:
            self._local.notifying = False

    def __repr__(self) -> str:
        return f"Channel(name={self._name!r}, subscribers={len(self._subscribers)})"
