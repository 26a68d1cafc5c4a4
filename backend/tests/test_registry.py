"""
Tests for strategies.registry.
"""

import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from snakebrain.strategies import registry  # noqa: E402
from snakebrain.strategies.registry import (  # noqa: E402
    resolve, get_info, list_strategies, STRATEGIES, AVAILABLE_STRATEGIES, DEFAULT_STRATEGY,
)
from snakebrain.strategies import RandomStrategy, OpportunistStrategy, HungryStrategy  # noqa: E402


class TestResolve:
    """Tests for resolve()."""

    @pytest.mark.parametrize("name, expected", [
        ("random", RandomStrategy),
        ("opportunist", OpportunistStrategy),
        ("hungry", HungryStrategy),
    ])
    def test_known_names(self, name, expected):
        assert isinstance(resolve(name), expected)

    def test_names_are_case_and_whitespace_insensitive(self):
        assert resolve(" Hungry ") is STRATEGIES["hungry"]

    def test_returns_shared_instances(self):
        assert resolve("random") is resolve("random")

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_missing_name_uses_default(self, name):
        assert resolve(name) is STRATEGIES[DEFAULT_STRATEGY]

    def test_unknown_name_uses_default_and_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger=registry.__name__):
            strategy = resolve("kamikaze")
        assert isinstance(strategy, OpportunistStrategy)
        assert "kamikaze" in caplog.text

    def test_default_is_opportunist(self):
        assert DEFAULT_STRATEGY == "opportunist"


class TestRegistryMetadata:
    """Tests for get_info() and list_strategies()."""

    def test_available_strategies(self):
        assert AVAILABLE_STRATEGIES == ["random", "opportunist", "hungry"]

    def test_list_strategies_has_description_per_key(self):
        listed = list_strategies()
        assert [item["key"] for item in listed] == AVAILABLE_STRATEGIES
        assert all(item["description"] for item in listed)

    def test_get_info_matches_strategy(self):
        assert get_info("opportunist").to_dict() == {
            "apiversion": "1",
            "author": "efrenfuentes",
            "color": "#c47ee0",
            "head": "silly",
            "tail": "mlh-gene",
        }
        assert get_info("random").color == "#5095c7"

    def test_get_info_for_unknown_name_is_default(self):
        assert get_info("nope") == get_info(DEFAULT_STRATEGY)
