# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Baseline differencing of two GPS time series

The position of a station relative to a reference (baseline) station is
obtained at the epochs the two series share. Positions are differenced and
covariances summed, the two stations being treated as independent.
"""

import logging

import numpy as np
from numba import njit

from ..core.exceptions import FrameError
from .dataset import GpsDataset

logger = logging.getLogger(__name__)


@njit(cache=True)
def match_epochs(times, base_times):
    """Pair rows of two ascending time columns with exactly equal times

    The baseline is scanned forward only: the search for row i starts just
    after the baseline row matched for the previous row, and starts at the
    baseline row equal to ``times[0]`` (or row 0) for the first.

    Parameters
    ----------
    times : np.ndarray
        Ascending times of the observed series, shape (N,)
    base_times : np.ndarray
        Ascending times of the baseline series, shape (M,)

    Returns
    -------
    rows, base_rows : np.ndarray
        Matched row indices into ``times`` and ``base_times``
    """
    n = times.shape[0]
    m = base_times.shape[0]
    rows = np.empty(n, dtype=np.int64)
    base_rows = np.empty(n, dtype=np.int64)
    count = 0

    k = 0
    for j in range(m):
        if times[0] == base_times[j]:
            k = j

    for i in range(n):
        for j in range(k, m):
            if times[i] == base_times[j]:
                rows[count] = i
                base_rows[count] = j
                count += 1
                k = j + 1
                break

    return rows[:count], base_rows[:count]


def difference(data: GpsDataset, baseline: GpsDataset) -> GpsDataset:
    """Position of ``data`` relative to ``baseline`` at their common epochs

    Both series must be sorted by ascending time; this is not checked and
    unsorted input gives a wrong alignment. Rows of ``data`` without an
    equal baseline time are dropped. For each matched pair the result holds
    ``data`` time and rank, the position difference, the covariance sum
    and the length of the position difference.

    If either series starts with a NaN time, or no epoch is shared, the
    result is a single row of NaN.

    Parameters
    ----------
    data : GpsDataset
        Observed series
    baseline : GpsDataset
        Reference series, in the same frame

    Returns
    -------
    GpsDataset
        New dataset in the frame of ``data``

    Raises
    ------
    FrameError
        If the two datasets are in different frames
    """
    if data.frame is not baseline.frame:
        raise FrameError(
            f"Cannot difference a {data.frame.name} dataset against a {baseline.frame.name} baseline"
        )

    if np.isnan(data.times[0]) or np.isnan(baseline.times[0]):
        return GpsDataset.nan(frame=data.frame)

    rows, base_rows = match_epochs(data.times, baseline.times)
    if rows.size == 0:
        logger.warning("No common epochs between data (%d rows) and baseline (%d rows)",
                       data.observations(), baseline.observations())
        return GpsDataset.nan(frame=data.frame)

    xyz = data.xyz[rows] - baseline.xyz[base_rows]
    covariance = data.covariance[rows] + baseline.covariance[base_rows]
    lengths = np.sqrt(np.sum(xyz * xyz, axis=1))

    logger.debug("Baseline differencing kept %d of %d rows", rows.size, data.observations())
    return GpsDataset(data.times[rows], data.ranks[rows], xyz, covariance, lengths,
                      frame=data.frame)


__all__ = ['difference', 'match_epochs']
