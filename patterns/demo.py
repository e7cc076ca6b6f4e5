"""Command-line demonstrations of the observer and prototype components."""

import argparse
import sys
from typing import List, Optional

from patterns.channel import Channel
from patterns.channel_subscriber import ChannelSubscriber
from patterns.errors import PatternError
from patterns.observability import get_logger
from patterns.registry import PrototypeRegistry
from patterns.shapes import Circle, Rectangle

logger = get_logger("patterns.demo")


def run_observer_demo() -> Channel:
    channel = Channel("Nemo")

    first = ChannelSubscriber("Siddiqur")
    second = ChannelSubscriber("Rahman")
    first.subscribe_to_channel(channel)
    second.subscribe_to_channel(channel)

    channel.publish("Observer Pattern Explained")
    channel.publish("Prototype Pattern Tutorial")
    return channel


def run_prototype_demo() -> PrototypeRegistry:
    registry = PrototypeRegistry()
    registry.add_prototype("Large Red Circle", Circle(5, "Red"))
    registry.add_prototype("Large Blue Rectangle", Rectangle(10, 20, "Blue"))

    cloned_circle = registry.get_prototype("Large Red Circle")
    cloned_rectangle = registry.get_prototype("Large Blue Rectangle")
    print(cloned_circle)
    print(cloned_rectangle)

    # the stored template must not see this
    cloned_circle.radius = 7
    cloned_circle.color = "Green"
    print(cloned_circle)

    print(registry.get_prototype("Large Red Circle"))
    return registry


DEMOS = {
    "observer": run_observer_demo,
    "prototype": run_prototype_demo,
}


def _run(name: str) -> int:
    try:
        DEMOS[name]()
    except PatternError as e:
        logger.error("demo_failed: %s", e, extra={"demo": name, "error": str(e)})
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="patterns",
        description="Run an observer or prototype pattern demonstration.",
    )
    parser.add_argument("demo", choices=sorted(DEMOS), help="which demonstration to run")
    args = parser.parse_args(argv)
    return _run(args.demo)


def observer_main() -> int:
    """Console entry point: observer-demo."""
    return _run("observer")


def prototype_main() -> int:
    """Console entry point: prototype-demo."""
    return _run("prototype")


if __name__ == "__main__":
    sys.exit(main())
