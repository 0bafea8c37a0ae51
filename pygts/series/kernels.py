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


"""Design (kernel) matrices for weighted least-squares models of a time series

Every kernel is a vertical stack of N row blocks, one per observation, each
row block being a horizontal run of 3x3 blocks that are either the zero
block, the identity or the identity scaled by a time factor. Since every
block is a scalar multiple of I3, a kernel is built as ``kron(A, I3)`` from
its N x k matrix of scalars ``A``.
"""

import numpy as np
from scipy import sparse

from ..core.constants import DAYS_PER_YEAR, I3X3, SECONDS_PER_DAY, SECONDS_PER_YEAR


def compose_blocks(coefficients: np.ndarray) -> sparse.csr_matrix:
    """Expand an N x k coefficient matrix into a 3N x 3k block matrix

    Block (i, j) of the result is ``coefficients[i, j] * I3``.
    """
    coefficients = np.atleast_2d(np.asarray(coefficients, dtype=np.float64))
    return sparse.kron(sparse.csr_matrix(coefficients), sparse.csr_matrix(I3X3), format='csr')


def velocity_kernel(times: np.ndarray) -> sparse.csr_matrix:
    """Kernel for modeling a constant velocity

    Row block i is ``[dt_i * I3, I3]`` with dt_i the time since the first
    observation in years of 31557600 s, so that
    ``position_i = velocity * dt_i + position_0``.

    Parameters
    ----------
    times : np.ndarray
        Ascending observation times (j2ksec), shape (N,)

    Returns
    -------
    scipy.sparse.csr_matrix
        Shape (3N, 6)
    """
    times = np.asarray(times, dtype=np.float64)
    ta = (times - times[0]) / SECONDS_PER_YEAR
    return compose_blocks(np.column_stack([ta, np.ones_like(ta)]))


def displacement_kernel(times: np.ndarray, dt: float) -> sparse.csr_matrix:
    """Kernel for modeling a step displacement at time ``dt``

    Row block i is ``[Z, I3]`` before ``dt``, ``[I3, I3]`` after it and
    ``[Z, Z]`` for an observation exactly at ``dt``, which therefore does not
    constrain the solution.

    Parameters
    ----------
    times : np.ndarray
        Observation times (j2ksec), shape (N,)
    dt : float
        Displacement time (j2ksec)

    Returns
    -------
    scipy.sparse.csr_matrix
        Shape (3N, 6)
    """
    times = np.asarray(times, dtype=np.float64)
    step = np.where(times < dt, 0.0, 1.0)
    offset = np.ones_like(step)
    at_step = times == dt
    step[at_step] = 0.0
    offset[at_step] = 0.0
    return compose_blocks(np.column_stack([step, offset]))


def detrended_displacement_kernel(times: np.ndarray, dt: float) -> sparse.csr_matrix:
    """Kernel for modeling a step displacement at ``dt`` on top of a linear trend

    Row block i is ``[step_i * I3, dt_i * I3, I3]`` where step_i is 0 before
    ``dt`` and 1 from ``dt`` on, and dt_i is the time since the first
    observation in years of 86400 * 365.25 s.

    Parameters
    ----------
    times : np.ndarray
        Ascending observation times (j2ksec), shape (N,)
    dt : float
        Displacement time (j2ksec)

    Returns
    -------
    scipy.sparse.csr_matrix
        Shape (3N, 9)
    """
    times = np.asarray(times, dtype=np.float64)
    step = np.where(times < dt, 0.0, 1.0)
    ta = (times - times[0]) / (SECONDS_PER_DAY * DAYS_PER_YEAR)
    return compose_blocks(np.column_stack([step, ta, np.ones_like(ta)]))


__all__ = [
    'compose_blocks',
    'detrended_displacement_kernel',
    'displacement_kernel',
    'velocity_kernel',
]
