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


"""Column-matrix storage of a GPS position time series"""

import logging
from typing import Any, Iterable, Mapping, Optional, Union

import numpy as np
import pandas as pd

from ..core.data_structures import Frame, Observation
from ..core.exceptions import FrameError
from ..coordinate.transforms import covariance_to_enu, unpack_covariance, xyz_to_enu

logger = logging.getLogger(__name__)


class GpsDataset:
    """GPS positions stored as parallel columns.

    The data are held in five arrays sharing row indexing: an (N,) time
    column, an (N,) rank column, an (N, 3) position column, an (N, 6) packed
    covariance column (xx, yy, zz, xy, xz, yz) and an (N,) length column,
    where N >= 1 is the number of observations.

    Rows are expected in ascending time order. Frame conversion and baseline
    differencing rewrite the columns in place; use :meth:`copy` (or the
    copy-returning :meth:`enu` and :meth:`baselined`) to keep the original.

    Parameters
    ----------
    times : array_like
        Observation times in j2ksec, shape (N,)
    ranks : array_like
        Rank tags, shape (N,)
    xyz : array_like
        Positions in meters, shape (N, 3)
    covariance : array_like
        Packed covariances, shape (N, 6)
    lengths : array_like, optional
        Lengths, shape (N,). Derived from the first position when omitted.
    frame : Frame
        Coordinate frame of ``xyz`` and ``covariance``
    """

    def __init__(self, times, ranks, xyz, covariance, lengths=None, frame: Frame = Frame.ECEF):
        self.frame = frame
        self.set_data(times, ranks, xyz, covariance, lengths)

    @classmethod
    def from_observations(cls, observations: Iterable[Observation],
                          frame: Frame = Frame.ECEF) -> 'GpsDataset':
        """Build a dataset from an ordered sequence of observations.

        Whether lengths are taken from the observations is decided once from
        the first observation: if its length is set, every row's length is
        used as given; otherwise every length is the distance from the first
        observation's position.

        Parameters
        ----------
        observations : Iterable[Observation]
            Time-ordered, non-empty
        frame : Frame
            Frame of the positions

        Returns
        -------
        GpsDataset
        """
        observations = list(observations)
        if not observations:
            raise ValueError("Cannot build a dataset from an empty observation sequence")

        rows = np.array([obs.as_row() for obs in observations], dtype=np.float64)
        has_len = not np.isnan(observations[0].length)
        lengths = rows[:, 11] if has_len else None
        return cls(rows[:, 0], rows[:, 1], rows[:, 2:5], rows[:, 5:11], lengths, frame=frame)

    @classmethod
    def from_records(cls, records: Union[pd.DataFrame, Iterable[Mapping[str, Any]]],
                     frame: Frame = Frame.ECEF) -> 'GpsDataset':
        """Build a dataset from observation records (mappings or a DataFrame)"""
        if isinstance(records, pd.DataFrame):
            records = records.to_dict('records')
        return cls.from_observations((Observation.from_record(r) for r in records), frame=frame)

    @classmethod
    def nan(cls, frame: Frame = Frame.ECEF) -> 'GpsDataset':
        """Single-row dataset with every field NaN, meaning 'no usable data'"""
        return cls.from_observations([Observation.nan()], frame=frame)

    @classmethod
    def from_binary(cls, buffer: bytes, frame: Frame = Frame.ECEF) -> 'GpsDataset':
        """Decode a dataset from its binary representation

        The frame is not part of the encoding. Pass ``frame=Frame.ENU`` for
        buffers written after ``to_enu``.
        """
        from ..io.binary import decode
        return decode(buffer, frame=frame)

    def to_binary(self) -> bytes:
        """Binary representation, 4 + 96 * N bytes"""
        from ..io.binary import encode
        return encode(self)

    def set_data(self, times, ranks, xyz, covariance, lengths=None):
        """Replace every column at once.

        The dataset keeps its own copy of each column, so datasets built from
        the same arrays never share storage.

        Raises
        ------
        ValueError
            If the columns are empty or their shapes disagree
        """
        times = np.array(times, dtype=np.float64, order='C')
        ranks = np.array(ranks, dtype=np.float64, order='C')
        xyz = np.array(xyz, dtype=np.float64, order='C')
        covariance = np.array(covariance, dtype=np.float64, order='C')

        n = times.shape[0] if times.ndim == 1 else -1
        if n < 1:
            raise ValueError("Time column must be one-dimensional with at least one row")
        if ranks.shape != (n,):
            raise ValueError(f"Rank column must have shape ({n},), got {ranks.shape}")
        if xyz.shape != (n, 3):
            raise ValueError(f"Position column must have shape ({n}, 3), got {xyz.shape}")
        if covariance.shape != (n, 6):
            raise ValueError(f"Covariance column must have shape ({n}, 6), got {covariance.shape}")

        if lengths is None:
            lengths = np.linalg.norm(xyz - xyz[0], axis=1)
        else:
            lengths = np.array(lengths, dtype=np.float64, order='C')
            if lengths.shape != (n,):
                raise ValueError(f"Length column must have shape ({n},), got {lengths.shape}")

        self._times = times
        self._ranks = ranks
        self._xyz = xyz
        self._covariance = covariance
        self._lengths = lengths

    @property
    def times(self) -> np.ndarray:
        """Time column (j2ksec), not a copy"""
        return self._times

    @property
    def ranks(self) -> np.ndarray:
        """Rank column, not a copy"""
        return self._ranks

    @property
    def xyz(self) -> np.ndarray:
        """(N, 3) position column, not a copy"""
        return self._xyz

    @property
    def covariance(self) -> np.ndarray:
        """(N, 6) packed covariance column, not a copy"""
        return self._covariance

    @property
    def lengths(self) -> np.ndarray:
        """Length column, not a copy"""
        return self._lengths

    def observations(self) -> int:
        """Number of observations"""
        return self._times.shape[0]

    def __len__(self) -> int:
        return self.observations()

    def __repr__(self) -> str:
        return f"GpsDataset(observations={self.observations()}, frame={self.frame.name})"

    def copy(self) -> 'GpsDataset':
        """Independent copy of every column"""
        return GpsDataset(self._times, self._ranks, self._xyz, self._covariance,
                          self._lengths, frame=self.frame)

    def adjust_time(self, adj: float):
        """Add ``adj`` seconds to every time (time zone management)"""
        self._times += adj

    def origin(self) -> np.ndarray:
        """First position"""
        return self._xyz[0].copy()

    def first_observation(self) -> Observation:
        """First row as an Observation"""
        sxx, syy, szz, sxy, sxz, syz = self._covariance[0]
        x, y, z = self._xyz[0]
        return Observation(time=float(self._times[0]), rank=float(self._ranks[0]),
                           x=float(x), y=float(y), z=float(z),
                           sxx=float(sxx), syy=float(syy), szz=float(szz),
                           sxy=float(sxy), sxz=float(sxz), syz=float(syz),
                           length=float(self._lengths[0]))

    def to_enu(self, lon: float, lat: float):
        """Convert positions and covariances from ECEF to ENU in place.

        Every row is rotated into the local frame at the origin (lon, lat),
        covariances are propagated as R C R^T. Lengths are not changed.

        Parameters
        ----------
        lon, lat : float
            Origin longitude and latitude in degrees

        Raises
        ------
        FrameError
            If the dataset is already in ENU
        """
        if self.frame is Frame.ENU:
            raise FrameError("Dataset is already in the ENU frame")

        enu = xyz_to_enu(self._xyz, lon, lat)
        cov = covariance_to_enu(self._covariance, lon, lat)
        self._xyz[:] = enu
        self._covariance[:] = cov
        self.frame = Frame.ENU
        logger.debug("Converted %d observations to ENU at lon=%.6f lat=%.6f",
                     self.observations(), lon, lat)

    def enu(self, lon: float, lat: float) -> 'GpsDataset':
        """ENU copy of this dataset; this dataset is left unchanged"""
        result = self.copy()
        result.to_enu(lon, lat)
        return result

    def apply_baseline(self, baseline: 'GpsDataset'):
        """Replace this dataset with its difference against ``baseline``.

        See :func:`pygts.series.baseline.difference`.
        """
        from .baseline import difference
        result = difference(self, baseline)
        self.set_data(result.times, result.ranks, result.xyz, result.covariance, result.lengths)

    def baselined(self, baseline: 'GpsDataset') -> 'GpsDataset':
        """Difference against ``baseline`` as a new dataset"""
        from .baseline import difference
        return difference(self, baseline)

    def velocity_kernel(self):
        """Velocity design matrix, see :func:`pygts.series.kernels.velocity_kernel`"""
        from .kernels import velocity_kernel
        return velocity_kernel(self._times)

    def displacement_kernel(self, dt: float):
        """Displacement design matrix, see :func:`pygts.series.kernels.displacement_kernel`"""
        from .kernels import displacement_kernel
        return displacement_kernel(self._times, dt)

    def detrended_displacement_kernel(self, dt: float):
        """Detrended displacement design matrix, see
        :func:`pygts.series.kernels.detrended_displacement_kernel`"""
        from .kernels import detrended_displacement_kernel
        return detrended_displacement_kernel(self._times, dt)

    def dump(self) -> str:
        """Row-by-row text rendering for diagnostics.

        Each row gives the time, the rank, the position and length, then the
        full symmetric covariance matrix on three lines.
        """
        lines = []
        full = unpack_covariance(self._covariance)
        for i in range(self.observations()):
            lines.append(f"{self._times[i]} {self._ranks[i]}")
            x, y, z = self._xyz[i]
            lines.append(f"\t{x} {y} {z} {self._lengths[i]}")
            for row in full[i]:
                lines.append("\t\t" + " ".join(str(v) for v in row))
        return "\n".join(lines)

    def output(self, log: Optional[logging.Logger] = None):
        """Write :meth:`dump` to a logger at DEBUG level"""
        log = log or logger
        if not log.isEnabledFor(logging.DEBUG):
            return
        for line in self.dump().splitlines():
            log.debug(line)


__all__ = ['GpsDataset']
