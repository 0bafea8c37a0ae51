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


"""ECEF to local East-North-Up conversion of positions and covariances"""

from typing import Tuple

import numpy as np

from ..core.constants import (
    COV_XX, COV_XY, COV_XZ, COV_YY, COV_YZ, COV_ZZ, FE_WGS84, RE_WGS84
)

# (row, column) of each packed covariance term
_PACKED_CELLS = {
    COV_XX: (0, 0), COV_YY: (1, 1), COV_ZZ: (2, 2),
    COV_XY: (0, 1), COV_XZ: (0, 2), COV_YZ: (1, 2),
}


def xyz2llh(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert ECEF coordinates to geodetic longitude, latitude and height

    Parameters
    ----------
    x, y, z : float
        ECEF coordinates in meters

    Returns
    -------
    tuple of float
        (lon, lat, height): longitude and latitude in degrees, height above
        the WGS84 ellipsoid in meters

    Notes
    -----
    Iterates on the ellipsoidal z offset (RTKLIB ``ecef2pos`` form), which
    stays finite on the polar axis where p = sqrt(x^2 + y^2) is zero.

    Examples
    --------
    >>> lon, lat, h = xyz2llh(6378137.0, 0.0, 0.0)
    >>> round(lon, 6), round(lat, 6), round(h, 3)
    (0.0, 0.0, 0.0)
    """
    e2 = FE_WGS84 * (2.0 - FE_WGS84)

    p2 = x**2 + y**2
    zk = z
    v = RE_WGS84

    for _ in range(20):
        r = np.sqrt(p2 + zk**2)
        sinp = zk / r if r > 0.0 else 0.0
        v = RE_WGS84 / np.sqrt(1.0 - e2 * sinp**2)
        z_next = z + v * e2 * sinp
        converged = abs(z_next - zk) < 1e-9
        zk = z_next
        if converged:
            break

    lon = np.arctan2(y, x)
    lat = np.arctan2(zk, np.sqrt(p2))
    h = np.sqrt(p2 + zk**2) - v

    return float(np.degrees(lon)), float(np.degrees(lat)), float(h)


def enu_rotation(lon: float, lat: float) -> np.ndarray:
    """Rotation matrix from ECEF to ENU at an origin

    Parameters
    ----------
    lon, lat : float
        Origin longitude and latitude in degrees

    Returns
    -------
    np.ndarray
        3x3 matrix R whose rows are the east, north and up unit vectors
        expressed in ECEF
    """
    s1 = np.sin(np.radians(lon))
    c1 = np.cos(np.radians(lon))
    s2 = np.sin(np.radians(lat))
    c2 = np.cos(np.radians(lat))

    return np.array([
        [-s1, c1, 0.0],
        [-s2 * c1, -s2 * s1, c2],
        [c2 * c1, c2 * s1, s2]
    ])


def unpack_covariance(packed: np.ndarray) -> np.ndarray:
    """Expand packed (N, 6) covariances (xx, yy, zz, xy, xz, yz) to (N, 3, 3)"""
    packed = np.atleast_2d(packed)
    full = np.empty((packed.shape[0], 3, 3), dtype=np.float64)
    for k, (i, j) in _PACKED_CELLS.items():
        full[:, i, j] = packed[:, k]
        full[:, j, i] = packed[:, k]
    return full


def pack_covariance(full: np.ndarray) -> np.ndarray:
    """Pack (N, 3, 3) symmetric covariances into (N, 6) upper triangles"""
    packed = np.empty((full.shape[0], 6), dtype=np.float64)
    for k, (i, j) in _PACKED_CELLS.items():
        packed[:, k] = full[:, i, j]
    return packed


def xyz_to_enu(xyz: np.ndarray, lon: float, lat: float) -> np.ndarray:
    """Rotate (N, 3) ECEF positions into the ENU frame at (lon, lat)

    No origin is subtracted; each row is rotated as a vector.
    """
    R = enu_rotation(lon, lat)
    return np.asarray(xyz, dtype=np.float64) @ R.T


def covariance_to_enu(covariance: np.ndarray, lon: float, lat: float) -> np.ndarray:
    """Propagate packed (N, 6) ECEF covariances into the ENU frame

    Each row is transformed as C' = R C R^T, R being ``enu_rotation(lon, lat)``.

    Parameters
    ----------
    covariance : np.ndarray
        Packed covariances (xx, yy, zz, xy, xz, yz), shape (N, 6)
    lon, lat : float
        Origin longitude and latitude in degrees

    Returns
    -------
    np.ndarray
        Packed ENU covariances (ee, nn, uu, en, eu, nu), shape (N, 6)
    """
    R = enu_rotation(lon, lat)
    full = unpack_covariance(np.asarray(covariance, dtype=np.float64))
    rotated = np.einsum('ij,njk,lk->nil', R, full, R)
    return pack_covariance(rotated)


__all__ = [
    'covariance_to_enu',
    'enu_rotation',
    'pack_covariance',
    'unpack_covariance',
    'xyz2llh',
    'xyz_to_enu',
]
