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


"""Coordinate transformation utilities

- ECEF to geodetic longitude/latitude/height (``xyz2llh``)
- ECEF to local East-North-Up rotation of positions and covariances
"""

from .transforms import (
    covariance_to_enu,
    enu_rotation,
    pack_covariance,
    unpack_covariance,
    xyz2llh,
    xyz_to_enu,
)

__all__ = [
    'covariance_to_enu',
    'enu_rotation',
    'pack_covariance',
    'unpack_covariance',
    'xyz2llh',
    'xyz_to_enu',
]
