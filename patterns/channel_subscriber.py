"""Concrete Subscriber that announces new uploads on stdout."""

from patterns.channel import Channel
from patterns.subscriber import Subscriber


class ChannelSubscriber(Subscriber):
    """Prints an upload notice for each item its channel publishes."""

    def format_notice(self, channel: Channel) -> str:
        return (
            f'{self.name}, a new video titled "{channel.latest_item}" '
            f"has been uploaded to {channel.name}."
        )

    def on_notify(self, channel: Channel) -> None:
        print(self.format_notice(channel))
        self._logger.info(
            "notified",
            extra={"channel": channel.name, "subscriber": self.name},
        )
