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


"""GPS position time series

- **Dataset**: column storage of observations (:class:`GpsDataset`)
- **Baselines**: differencing against a reference station
- **Kernels**: design matrices for velocity and displacement models
- **Time series**: ENU export for plotting
"""

from .baseline import difference, match_epochs
from .dataset import GpsDataset
from .kernels import (
    compose_blocks,
    detrended_displacement_kernel,
    displacement_kernel,
    velocity_kernel,
)
from .timeseries import TIME_SERIES_COLUMNS, to_dataframe, to_time_series

__all__ = [
    'GpsDataset',
    'TIME_SERIES_COLUMNS',
    'compose_blocks',
    'detrended_displacement_kernel',
    'difference',
    'displacement_kernel',
    'match_epochs',
    'to_dataframe',
    'to_time_series',
    'velocity_kernel',
]
