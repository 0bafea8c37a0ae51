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


"""Core data structures for GPS position time series"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

import numpy as np

from .constants import RECORD_FIELDS, REQUIRED_FIELDS
from .exceptions import FormatError


class Frame(Enum):
    """Coordinate frame of a dataset's position and covariance columns.

    Attributes
    ----------
    ECEF : int
        Earth-Centered, Earth-Fixed cartesian coordinates
    ENU : int
        Local East-North-Up coordinates about some origin
    """
    ECEF = 1
    ENU = 2


@dataclass
class Observation:
    """A single time-stamped GPS position with its covariance.

    Attributes
    ----------
    time : float
        Observation time in j2ksec
    rank : float
        Quality/priority tag (integer valued, stored as float)
    x, y, z : float
        Position in meters
    sxx, syy, szz, sxy, sxz, syz : float
        Upper triangle of the symmetric 3x3 position covariance (m^2)
    length : float
        Distance from a reference point (m), NaN when not known

    Notes
    -----
    When ``length`` is NaN the dataset derives it from the first observation
    of the series.
    """
    time: float
    rank: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    sxx: float = 0.0
    syy: float = 0.0
    szz: float = 0.0
    sxy: float = 0.0
    sxz: float = 0.0
    syz: float = 0.0
    length: float = np.nan

    @property
    def position(self) -> np.ndarray:
        """Position as a 3-vector"""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @property
    def packed_covariance(self) -> np.ndarray:
        """Covariance as (xx, yy, zz, xy, xz, yz)"""
        return np.array([self.sxx, self.syy, self.szz, self.sxy, self.sxz, self.syz],
                        dtype=np.float64)

    def covariance_matrix(self) -> np.ndarray:
        """Full symmetric 3x3 covariance matrix"""
        return np.array([
            [self.sxx, self.sxy, self.sxz],
            [self.sxy, self.syy, self.syz],
            [self.sxz, self.syz, self.szz],
        ], dtype=np.float64)

    def as_row(self) -> np.ndarray:
        """Values in binary record order (time, rank, xyz, covariance, length)"""
        return np.array([getattr(self, name) for name in RECORD_FIELDS], dtype=np.float64)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> 'Observation':
        """Build an observation from a mapping of record fields.

        Parameters
        ----------
        record : Mapping[str, Any]
            Must contain time, rank, x, y, z, sxx, syy, szz, sxy, sxz, syz;
            ``length`` is optional.

        Returns
        -------
        Observation
        """
        missing = [name for name in REQUIRED_FIELDS if name not in record]
        if missing:
            raise FormatError(f"Observation record is missing fields: {', '.join(missing)}")
        values = {name: float(record[name]) for name in REQUIRED_FIELDS}
        length = record.get('length')
        values['length'] = np.nan if length is None else float(length)
        return cls(**values)

    @classmethod
    def nan(cls) -> 'Observation':
        """The 'no usable data' observation with every field NaN"""
        return cls(*([np.nan] * len(RECORD_FIELDS)))


__all__ = ['Frame', 'Observation']
