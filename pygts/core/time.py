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


"""j2ksec time helpers

Times throughout pygts are j2ksec: floating point seconds since
2000-01-01 12:00:00 UTC.
"""

from datetime import datetime, timezone
from typing import Union

import numpy as np

J2K_EPOCH = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def datetime_to_j2ksec(dt: datetime) -> float:
    """Convert a datetime to j2ksec

    Naive datetimes are taken to be UTC.

    Parameters
    ----------
    dt : datetime
        Time to convert

    Returns
    -------
    float
        Seconds since the j2ksec epoch
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return (dt - J2K_EPOCH).total_seconds()


def j2ksec_to_datetime(j2ksec: float) -> datetime:
    """Convert j2ksec to a UTC datetime"""
    if np.isnan(j2ksec):
        raise ValueError("Cannot convert NaN j2ksec to datetime")
    return datetime.fromtimestamp(J2K_EPOCH.timestamp() + float(j2ksec), tz=timezone.utc)


def j2ksec_array(times: Union[list, np.ndarray]) -> np.ndarray:
    """Convert a sequence of datetimes (or j2ksec floats) to a j2ksec array"""
    return np.array([
        datetime_to_j2ksec(t) if isinstance(t, datetime) else float(t)
        for t in times
    ], dtype=np.float64)


__all__ = ['J2K_EPOCH', 'datetime_to_j2ksec', 'j2ksec_to_datetime', 'j2ksec_array']
