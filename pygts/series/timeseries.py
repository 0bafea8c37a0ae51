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


"""ENU time series for plotting clients"""

from typing import Optional

import numpy as np
import pandas as pd

from ..coordinate.transforms import xyz2llh
from .dataset import GpsDataset

TIME_SERIES_COLUMNS = ['j2ksec', 'rank', 'east', 'north', 'up', 'length']


def to_time_series(data: GpsDataset, baseline: Optional[GpsDataset] = None) -> np.ndarray:
    """Position time series in the local frame of the station

    The ENU origin is the first position of ``data`` before any baseline is
    applied. When a baseline is given, ``data`` is first differenced against
    it at their common epochs.

    Parameters
    ----------
    data : GpsDataset
        ECEF series; it is not modified
    baseline : GpsDataset, optional
        ECEF reference series

    Returns
    -------
    np.ndarray
        (N, 6) array of j2ksec, rank, east, north, up, length
    """
    x, y, z = data.origin()
    lon, lat, _ = xyz2llh(x, y, z)

    series = data.baselined(baseline) if baseline is not None else data.copy()
    series.to_enu(lon, lat)
    return np.column_stack([series.times, series.ranks, series.xyz, series.lengths])


def to_dataframe(data: GpsDataset, baseline: Optional[GpsDataset] = None) -> pd.DataFrame:
    """:func:`to_time_series` as a DataFrame with named columns"""
    return pd.DataFrame(to_time_series(data, baseline), columns=TIME_SERIES_COLUMNS)


__all__ = ['TIME_SERIES_COLUMNS', 'to_dataframe', 'to_time_series']
