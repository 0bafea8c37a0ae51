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


"""
pygts - GPS position time series

A Python library for holding GPS station positions as column matrices,
converting them to local East-North-Up coordinates with full covariance
propagation, differencing against a baseline station, building design
matrices for velocity and displacement least-squares models, and
persisting datasets in a fixed binary layout.
"""

__version__ = "1.0.0"
__author__ = "pygts Development Team"
__title__ = "pygts"
__description__ = "GPS position time series: ENU conversion, baselines and least-squares kernels"

from .core import *
from .coordinate import *
from .series import *
from .io import *
