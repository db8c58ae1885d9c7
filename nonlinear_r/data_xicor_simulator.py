from typing import List

import numpy as np
import pandas as pd

from xicor_ordering import Point


def get_line_data(num_points: int, dx: float) -> pd.DataFrame:
    """
    Simulates `num_points` points on a straight line, with y increasing by one per point

    :param num_points: number of points
    :param dx: step in x between consecutive points
    :return: pandas dataframe with columns x = dx * i and y = i
    """
    i = np.arange(num_points, dtype=float)
    return pd.DataFrame({'x': dx * i, 'y': i})


def fuzz(df: pd.DataFrame, radius: float, rng: np.random.Generator) -> pd.DataFrame:
    """
    Adds independent uniform noise in [-radius, radius) to x and y

    :param df: dataframe with columns x and y
    :param radius: noise half-width
    :param rng: numpy generator
    :return: new dataframe
    """
    n = len(df)
    out = df.copy()
    out['x'] = out['x'] + radius * (2 * rng.random(n) - 1)
    out['y'] = out['y'] + radius * (2 * rng.random(n) - 1)
    return out


def add_sine(df: pd.DataFrame, cycles: float, amplitude: float) -> pd.DataFrame:
    """
    Adds `cycles` full periods of a sine wave of height `amplitude` to y, along the row order
    """
    n = len(df)
    theta = cycles * 2 * np.pi * np.arange(n) / n
    out = df.copy()
    out['y'] = out['y'] + amplitude * np.sin(theta)
    return out


def _step(values: np.ndarray) -> np.ndarray:
    # every complete group of four takes the value of its first member
    out = values.copy()
    num_groups = len(out) // 4
    for g in range(num_groups):
        out[4 * g + 1: 4 * g + 4] = out[4 * g]
    return out


def step_x(df: pd.DataFrame) -> pd.DataFrame:
    out = df.copy()
    out['x'] = _step(out['x'].to_numpy())
    return out


def step_y(df: pd.DataFrame) -> pd.DataFrame:
    out = df.copy()
    out['y'] = _step(out['y'].to_numpy())
    return out


def to_points(df: pd.DataFrame, x_name: str = 'x', y_name: str = 'y') -> List[Point]:
    return [Point(x, y) for x, y in zip(df[x_name].tolist(), df[y_name].tolist())]
