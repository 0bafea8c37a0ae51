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


"""Core definitions: constants, observation and frame types, errors, j2ksec time."""

from .constants import *
from .data_structures import *
from .exceptions import FormatError, FrameError, PygtsError
from .time import *

from . import constants, data_structures, time

__all__ = (constants.__all__ + data_structures.__all__ + time.__all__
           + ['FormatError', 'FrameError', 'PygtsError'])
