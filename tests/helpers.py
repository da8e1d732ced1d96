"""Shared test doubles for the penguins test suite."""

from __future__ import annotations

from types import SimpleNamespace

from penguins.config import DEFAULTS


class ScriptedRandom:
    """Stands in for random.Random, returning the given values in a cycle."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


def make_config(**overrides) -> SimpleNamespace:
    """Config namespace built from the defaults, as load_config() would."""
    settings = dict(DEFAULTS)
    settings.update(overrides)
    return SimpleNamespace(**settings)
