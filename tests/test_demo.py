"""
Tests for the command-line demonstrations.
"""

import logging
from unittest.mock import patch

import pytest

from patterns import NotFoundError
from patterns.demo import main, observer_main, prototype_main


OBSERVER_OUTPUT = [
    'Siddiqur, a new video titled "Observer Pattern Explained" has been uploaded to Nemo.',
    'Rahman, a new video titled "Observer Pattern Explained" has been uploaded to Nemo.',
    'Siddiqur, a new video titled "Prototype Pattern Tutorial" has been uploaded to Nemo.',
    'Rahman, a new video titled "Prototype Pattern Tutorial" has been uploaded to Nemo.',
]

PROTOTYPE_OUTPUT = [
    "Circle{radius=5, color='Red'}",
    "Rectangle{width=10, height=20, color='Blue'}",
    "Circle{radius=7, color='Green'}",
    "Circle{radius=5, color='Red'}",
]


class TestDemos:
    def test_observer_demo(self, capsys):
        assert observer_main() == 0
        assert capsys.readouterr().out.splitlines() == OBSERVER_OUTPUT

    def test_prototype_demo(self, capsys):
        assert prototype_main() == 0
        assert capsys.readouterr().out.splitlines() == PROTOTYPE_OUTPUT

    @pytest.mark.parametrize(
        "demo, expected",
        [("observer", OBSERVER_OUTPUT), ("prototype", PROTOTYPE_OUTPUT)],
    )
    def test_main_dispatch(self, capsys, demo, expected):
        assert main([demo]) == 0
        assert capsys.readouterr().out.splitlines() == expected

    def test_unknown_demo_exits_with_usage_error(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["singleton"])
        assert excinfo.value.code == 2

    def test_pattern_error_reported_once_through_logger(self, capsys, caplog):
        def failing():
            raise NotFoundError("Large Red Circle")

        with patch.dict("patterns.demo.DEMOS", {"prototype": failing}):
            with caplog.at_level(logging.ERROR, logger="patterns.demo"):
                assert prototype_main() == 1
        failures = [r for r in caplog.records if r.getMessage().startswith("demo_failed")]
        assert len(failures) == 1
        assert "Large Red Circle" in failures[0].getMessage()
        assert capsys.readouterr().out == ""
