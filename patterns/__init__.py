"""Observer (channel/subscriber) and prototype (clone registry) patterns, in-memory only."""

from patterns.errors import PatternError, NotFoundError, InvalidStateError
from patterns.channel import Channel
from patterns.subscriber import Subscriber
from patterns.channel_subscriber import ChannelSubscriber
from patterns.prototype import Prototype
from patterns.shapes import Circle, Rectangle
from patterns.registry import PrototypeRegistry

__all__ = [
    "PatternError",
    "NotFoundError",
    "InvalidStateError",
    "Channel",
    "Subscriber",
    "ChannelSubscriber",
    "Prototype",
    "Circle",
    "Rectangle",
    "PrototypeRegistry",
]
