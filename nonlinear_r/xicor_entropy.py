"""
Random sources for breaking ties in x.

Passing a seeded numpy Generator makes xi reproducible; otherwise a generator is seeded
from the wall clock and repeated calls may break ties differently.
"""

import time
from typing import Optional, Union

import numpy as np

RandomSource = Optional[Union[int, np.random.SeedSequence, np.random.Generator]]


def time_seed() -> int:
    return time.time_ns()


def time_seeded_rng() -> np.random.Generator:
    """
    Builds a generator seeded from the current time, in nanoseconds

    :return: numpy random generator
    """
    return np.random.default_rng(time_seed())


def resolve_rng(rng: RandomSource = None) -> np.random.Generator:
    """
    Turns the user's random source into a numpy generator

    :param rng: None (seed from the clock), an int seed, a SeedSequence, or a Generator.
        A Generator is returned unchanged, so its state advances with every call that uses it
    :return: numpy random generator
    """
    if rng is None:
        return time_seeded_rng()
    return np.random.default_rng(rng)
