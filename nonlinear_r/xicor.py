"""

** Paper **
Title: A NEW COEFFICIENT OF CORRELATION
Author: SOURAV CHATTERJEE
URL: https://arxiv.org/pdf/1909.10140.pdf

** Python Code **
Author: Ricardo Lemos
Date: Jan 9, 2022
Copyright: Apache 2.0
"""

import logging
from typing import Any, Iterable, Sequence, Tuple

import numpy as np
import numpy.typing as npt
import pandas as pd

from xicor_entropy import RandomSource, resolve_rng
from xicor_ordering import Compare, Ordering, Point, as_points

logger = logging.getLogger(__name__)

Observations = Iterable[Sequence[Any]]


def xicor_core(observations: Observations, ordering: Ordering, rng: np.random.Generator) -> float:
    """
    Computes Sourav Chatterjee's xi correlation of y on x, for any ordered domains.
    From Chatterjee's (2021) abstract:

    Is it possible to define a coefficient of correlation which is
    (a) as simple as the classical coefficients like Pearson’s correlation or Spearman’s
    correlation, and yet
    (b) consistently estimates some simple and interpretable measure of the degree of dependence
    between the variables, which is 0 if and only if the variables are independent and 1 if and
    only if one is a measurable function of the other, and
    (c) has a simple asymptotic theory under the hypothesis of independence, like the classical
    coefficients?
    This article answers this question in the affirmative, by producing such a coefficient.
    No assumptions are needed on the distributions of the variables.

    Observations are copied and sorted by y; ties in y share their rank counts. The y-sorted
    observations are then ordered by x, and every run of tied x values is shuffled with `rng`,
    so the same generator state and the same input order always give the same result.

    :param observations: iterable of (x, y) pairs; not modified
    :param ordering: comparators for the x and y domains
    :param rng: numpy generator used to break ties in x; its state advances.
        Required; use the `xicor_*` entry points for seeds or a clock-seeded generator
    :return: xi statistic (float); nan when there are fewer than two observations
    :raises TypeError: if `rng` is not a numpy Generator

    Reference:
        [1] Chatterjee S (2021). A new coefficient of correlation. JASA 116:536, 2009-2022, DOI: 10.1080/01621459.2020.1758115
    """
    if not isinstance(rng, np.random.Generator):
        raise TypeError('rng must be a numpy Generator, got ' + type(rng).__name__)

    points = sorted(as_points(observations), key=ordering.y_key())
    if len(points) < 2:
        logger.debug("xi is undefined for %d observation(s); returning nan", len(points))

    r, l = _get_rank_counts(points, ordering)
    perm = _get_x_permutation(points, ordering)
    num_shuffled = _shuffle_ties(points, perm, ordering, rng)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("xi over %d observations: %d distinct y values, %d tied x runs shuffled",
                     len(points), len(np.unique(r)), num_shuffled)
    return _finish(perm, r, l)


def xicor_float(observations: Observations, rng: RandomSource = None) -> float:
    """
    Xi correlation for numeric x and y, compared as floats

    :param observations: iterable of (x, y) pairs of numbers
    :param rng: random source for breaking ties in x (see `xicor_entropy.resolve_rng`)
    :return: xi statistic
    """
    return xicor_core(observations, Ordering.numeric(), resolve_rng(rng))


def xicor_ordered(observations: Observations, rng: RandomSource = None) -> float:
    """
    Xi correlation for x and y with a built-in order (numbers, strings, ...);
    x and y may be of different types
    """
    return xicor_core(observations, Ordering.natural(), resolve_rng(rng))


def xicor_fn(observations: Observations, compare: Compare, rng: RandomSource = None) -> float:
    """
    Xi correlation with a single comparator for both coordinates

    :param observations: iterable of (x, y) pairs, x and y from the same domain
    :param compare: returns <0, 0, >0 as a <, ==, > b
    :param rng: random source for breaking ties in x
    :return: xi statistic
    """
    return xicor_core(observations, Ordering.shared(compare), resolve_rng(rng))


def xicor_mixed(
        observations: Observations,
        compare_x: Compare,
        compare_y: Compare,
        rng: RandomSource = None
) -> float:
    """
    Xi correlation with independent comparators for x and y

    :param observations: iterable of (x, y) pairs
    :param compare_x: comparator for the x domain
    :param compare_y: comparator for the y domain
    :param rng: random source for breaking ties in x
    :return: xi statistic
    """
    return xicor_core(observations, Ordering.mixed(compare_x, compare_y), resolve_rng(rng))


def xicor(x: npt.ArrayLike, y: npt.ArrayLike, rng: RandomSource = None) -> float:
    """
    Xi correlation of two numeric samples

    :param x: sample of predictor variable (1D array, float)
    :param y: sample of response variable (1D array, float, same length as x)
    :param rng: random source for breaking ties in x
    :return: xi statistic (float)
    """
    x = np.asarray(x)
    y = np.asarray(y)
    _check_inputs(x, y)
    return xicor_float(zip(x, y), rng)


def xicor_frame(df: pd.DataFrame, x_name: str, y_name: str, rng: RandomSource = None) -> float:
    """
    Xi correlation of column `y_name` on column `x_name`

    :param df: pandas dataframe holding both columns
    :param x_name: name of the predictor column
    :param y_name: name of the response column
    :param rng: random source for breaking ties in x
    :return: xi statistic (float)
    """
    return xicor(df[x_name].to_numpy(), df[y_name].to_numpy(), rng)


###############################################
# Auxiliary functions #########################
###############################################

def _check_inputs(x: npt.NDArray, y: npt.NDArray) -> None:
    if x.ndim != 1 or y.ndim != 1:
        raise ValueError('expected two 1D arrays, got dimensions ' +
                         str(x.ndim) + ' and ' + str(y.ndim))
    if len(x) != len(y):
        raise ValueError('the two arrays have different lengths: ' +
                         str(len(x)) + ' vs ' + str(len(y)))


def _get_rank_counts(
        points: Sequence[Point],
        ordering: Ordering
) -> Tuple[npt.NDArray[np.int64], npt.NDArray[np.int64]]:
    """
    For points sorted by y, counts r[i] = #{j: y[j] <= y[i]} and l[i] = #{j: y[j] >= y[i]}

    :param points: points sorted by y
    :param ordering: comparators; only the y comparator is used
    :return: arrays r and l, in the order of `points`
    """
    n = len(points)
    r = np.empty(n, dtype=np.int64)
    l = np.empty(n, dtype=np.int64)
    start = 0
    # i == n closes the last run
    for i in range(1, n + 1):
        if i < n and ordering.same_y(points[start], points[i]):
            continue
        r[start:i] = i
        l[start:i] = n - start
        start = i
    return r, l


def _get_x_permutation(points: Sequence[Point], ordering: Ordering) -> npt.NDArray[np.int64]:
    # stable, so tied x keep their y order until _shuffle_ties
    x_key = ordering.x_key()
    order = sorted(range(len(points)), key=lambda i: x_key(points[i]))
    return np.array(order, dtype=np.int64)


def _shuffle_ties(
        points: Sequence[Point],
        perm: npt.NDArray[np.int64],
        ordering: Ordering,
        rng: np.random.Generator
) -> int:
    """
    Shuffles, in place, each run of `perm` whose points have equal x

    :param points: points sorted by y
    :param perm: indices of `points` sorted by x
    :param ordering: comparators; only the x comparator is used
    :param rng: numpy generator
    :return: number of runs shuffled
    """
    n = len(perm)
    start = 0
    num_shuffled = 0
    for i in range(1, n + 1):
        if i < n and ordering.same_x(points[perm[start]], points[perm[i]]):
            continue
        if i - start > 1:
            # slice is a view, so this shuffles perm itself
            rng.shuffle(perm[start:i])
            num_shuffled += 1
        start = i
    return num_shuffled


def _get_numerator(perm: npt.NDArray[np.int64], r: npt.NDArray[np.int64]) -> float:
    return len(perm) * float(np.sum(np.abs(np.diff(r[perm]))))


def _get_denominator(l: npt.NDArray[np.int64]) -> float:
    return 2 * float(np.sum(l * (len(l) - l)))


def _finish(perm: npt.NDArray[np.int64], r: npt.NDArray[np.int64], l: npt.NDArray[np.int64]) -> float:
    numerator = _get_numerator(perm, r)
    denominator = _get_denominator(l)
    # 0 / 0 when n < 2 or y is constant
    with np.errstate(divide='ignore', invalid='ignore'):
        xi = 1 - np.divide(numerator, denominator)
    return float(xi)
