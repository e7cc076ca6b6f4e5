import pytest

from patterns import Channel, PrototypeRegistry
from patterns.subscriber import Subscriber


class RecordingSubscriber(Subscriber):
    """Records (subscriber name, channel name, item) for every notification."""

    def __init__(self, name, log):
        super().__init__(name)
        self.log = log

    def on_notify(self, channel):
        self.log.append((self.name, channel.name, channel.latest_item))


@pytest.fixture(autouse=True)
def no_dotenv_level(monkeypatch):
    monkeypatch.delenv("PATTERNS_LOG_LEVEL", raising=False)


@pytest.fixture
def notifications():
    return []


@pytest.fixture
def make_subscriber(notifications):
    def _make(name):
        return RecordingSubscriber(name, notifications)
    return _make


@pytest.fixture
def channel():
    return Channel("Nemo")


@pytest.fixture
def registry():
    return PrototypeRegistry()
