"""
Shared fixtures for the tests of the genetic algorithm.
"""
# noinspection PyPackageRequirements
import pytest


class RandomStub:
    """Scripted random source: returns the given numbers in a repeating cycle, regardless of the requested range."""

    def __init__(self, *numbers: int) -> None:
        self.numbers = numbers
        self.calls = []
        self._position = 0

    def randint(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        value = self.numbers[self._position]
        self._position = (self._position + 1) % len(self.numbers)
        return value


@pytest.fixture
def random_stub():
    """Factory of scripted random sources."""
    return RandomStub
