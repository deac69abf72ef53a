"""
Sources of randomness for the genetic algorithm.

Every draw of the algorithm goes through a `RandomSource`, i.e. any object with a `randint(low, high)`-method. This
allows to replace the default, `numpy`-based source by a scripted one to reproduce the genetic operations.
"""
import typing

import numpy as np


class RandomSource(typing.Protocol):
    """Capability of drawing a single integer from an inclusive range."""

    def randint(self, low: int, high: int) -> int:
        """Draw an integer from [`low`, `high`].

        :param low: lower bound (inclusive)
        :param high: upper bound (inclusive)

        :type low: int
        :type high: int

        :return: random integer
        :rtype: int
        """
        ...


class NumpyRandom:
    """Random source based on `numpy`'s random generator."""

    def __init__(self, seed: int = None) -> None:
        """
        :param seed: random seed, defaults to None
        :type seed: int, optional
        """
        self.seed = seed
        self._generator = np.random.default_rng(seed)

    def randint(self, low: int, high: int) -> int:
        return int(self._generator.integers(low, high, endpoint=True))

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(seed={self.seed})'


def default_random_source(seed: int = None) -> RandomSource:
    """Create a new default random source. Each caller receives its own generator.

    :param seed: random seed, defaults to None
    :type seed: int, optional

    :return: random source
    :rtype: RandomSource
    """
    return NumpyRandom(seed)
