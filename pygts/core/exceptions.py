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


"""Exceptions raised by pygts"""


class PygtsError(Exception):
    """Base class for pygts errors"""


class FormatError(PygtsError, ValueError):
    """Raised when encoded or tabular input does not have the expected layout"""


class FrameError(PygtsError):
    """Raised when a dataset is used in the wrong coordinate frame

    Examples are converting an ENU dataset to ENU a second time, or
    differencing an ECEF dataset against an ENU baseline.
    """
