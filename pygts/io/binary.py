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


"""Fixed-layout binary encoding of GPS datasets

Layout (big-endian, no version field)::

    int32       N
    N records of 12 float64:
        time, rank, x, y, z, sxx, syy, szz, sxy, sxz, syz, length

A dataset of N rows takes exactly 4 + 96 * N bytes.
"""

import logging
from typing import Union

import numpy as np

from ..core.constants import HEADER_BYTES, ROW_BYTES, ROW_DOUBLES
from ..core.data_structures import Frame
from ..core.exceptions import FormatError
from ..series.dataset import GpsDataset

logger = logging.getLogger(__name__)

_HEADER_DTYPE = np.dtype('>i4')
_ROW_DTYPE = np.dtype('>f8')


def encoded_size(rows: int) -> int:
    """Number of bytes used to encode ``rows`` observations"""
    return HEADER_BYTES + ROW_BYTES * rows


def encode(data: GpsDataset) -> bytes:
    """Encode a dataset to bytes

    Parameters
    ----------
    data : GpsDataset
        Dataset to encode

    Returns
    -------
    bytes
        4 + 96 * N bytes
    """
    rows = data.observations()
    table = np.empty((rows, ROW_DOUBLES), dtype=_ROW_DTYPE)
    table[:, 0] = data.times
    table[:, 1] = data.ranks
    table[:, 2:5] = data.xyz
    table[:, 5:11] = data.covariance
    table[:, 11] = data.lengths

    header = np.array([rows], dtype=_HEADER_DTYPE)
    logger.debug("Encoded %d observations (%d bytes)", rows, encoded_size(rows))
    return header.tobytes() + table.tobytes()


def decode(buffer: Union[bytes, bytearray, memoryview], frame: Frame = Frame.ECEF) -> GpsDataset:
    """Decode a dataset from bytes

    Parameters
    ----------
    buffer : bytes-like
        Encoded dataset; bytes past the last record are ignored
    frame : Frame
        Frame to assign to the decoded positions. The encoding does not store
        the frame, so a buffer written from ENU data must be decoded with
        ``frame=Frame.ENU``; otherwise a later ``to_enu`` rotates it twice.

    Returns
    -------
    GpsDataset

    Raises
    ------
    FormatError
        If the buffer is shorter than its header or declared records, or
        declares no rows
    """
    buffer = memoryview(buffer).cast('B')
    if len(buffer) < HEADER_BYTES:
        raise FormatError(f"Buffer of {len(buffer)} bytes is too short for the row count")

    rows = int(np.frombuffer(buffer, dtype=_HEADER_DTYPE, count=1)[0])
    if rows <= 0:
        raise FormatError(f"Invalid row count {rows}")

    size = encoded_size(rows)
    if len(buffer) < size:
        raise FormatError(f"Buffer of {len(buffer)} bytes is too short for {rows} rows ({size} bytes)")
    if len(buffer) > size:
        logger.debug("Ignoring %d trailing bytes after %d rows", len(buffer) - size, rows)

    table = np.frombuffer(buffer, dtype=_ROW_DTYPE, count=rows * ROW_DOUBLES, offset=HEADER_BYTES)
    table = table.reshape(rows, ROW_DOUBLES).astype(np.float64)

    return GpsDataset(table[:, 0], table[:, 1], table[:, 2:5], table[:, 5:11], table[:, 11],
                      frame=frame)


__all__ = ['decode', 'encode', 'encoded_size']
