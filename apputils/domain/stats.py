"""Incremental statistics for streams of observations."""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Union

import numpy as np


def update_running_mean(mean_so_far: float, count_so_far: int, new_value: float) -> float:
    """
    Fold one new observation into a running mean.

    `count_so_far` is the number of observations already in `mean_so_far`.
    The count is converted to the mean's own type, so single precision means
    (e.g. numpy.float32) stay single precision.
    See https://math.stackexchange.com/questions/106700/incremental-averaging
    """
    if count_so_far < 0:
        raise ValueError(f"Observation count must be non-negative, got {count_so_far}")
    return mean_so_far + (new_value - mean_so_far) / (type(mean_so_far)(count_so_far) + 1)


def mean(values: Sequence[float]) -> Optional[Union[float, np.float32]]:
    """
    The arithmetic mean of the values, or None if there are none.
    Single precision input gives a numpy.float32 mean, anything else a float.
    """
    if len(values) == 0:
        return None

    array = np.asarray(values)
    result = array.mean()
    if array.dtype == np.float32:
        return result
    return float(result)


@dataclass
class RunningMean:
    """A mean maintained one observation at a time without keeping history."""
    value: float = 0.0
    count: int = 0

    def add(self, observation: float) -> float:
        """Fold in one observation and return the updated mean."""
        self.value = update_running_mean(self.value, self.count, observation)
        self.count += 1
        return self.value

    def extend(self, observations: Iterable[float]) -> float:
        """Fold in several observations in order."""
        for observation in observations:
            self.add(observation)
        return self.value

    def reset(self):
        """Forget all observations."""
        self.value = 0.0
        self.count = 0
