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


"""Constants for GPS position time series"""

import numpy as np

# WGS84 ellipsoid
RE_WGS84 = 6378137.0           # earth semimajor axis (m)
FE_WGS84 = 1.0 / 298.257223563 # earth flattening

# Time
SECONDS_PER_DAY = 86400
DAYS_PER_YEAR = 365.25
SECONDS_PER_YEAR = 31557600    # julian year used by the velocity model (s)

# Binary record layout
HEADER_BYTES = 4               # signed row count
ROW_DOUBLES = 12               # time, rank, x, y, z, 6 covariance terms, length
ROW_BYTES = ROW_DOUBLES * 8

# Packed covariance column order
COV_XX, COV_YY, COV_ZZ, COV_XY, COV_XZ, COV_YZ = range(6)

# Observation record fields in storage order
RECORD_FIELDS = ('time', 'rank', 'x', 'y', 'z',
                 'sxx', 'syy', 'szz', 'sxy', 'sxz', 'syz', 'length')
REQUIRED_FIELDS = RECORD_FIELDS[:-1]

# Read-only 3x3 block shared by the kernel builders
I3X3 = np.identity(3)
I3X3.setflags(write=False)

__all__ = [
    'RE_WGS84', 'FE_WGS84',
    'SECONDS_PER_DAY', 'DAYS_PER_YEAR', 'SECONDS_PER_YEAR',
    'HEADER_BYTES', 'ROW_DOUBLES', 'ROW_BYTES',
    'COV_XX', 'COV_YY', 'COV_ZZ', 'COV_XY', 'COV_XZ', 'COV_YZ',
    'RECORD_FIELDS', 'REQUIRED_FIELDS',
    'I3X3',
]
