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


"""Reading observation tables exported by import pipelines"""

import logging
from pathlib import Path
from typing import Union

import numpy as np
import pandas as pd

from ..core.constants import RECORD_FIELDS, REQUIRED_FIELDS
from ..core.data_structures import Frame
from ..core.exceptions import FormatError
from ..series.dataset import GpsDataset

logger = logging.getLogger(__name__)


def read_observation_table(path: Union[str, Path], frame: Frame = Frame.ECEF,
                           **read_csv_kwargs) -> GpsDataset:
    """Read a CSV table of observations into a dataset

    The table needs the columns time, rank, x, y, z, sxx, syy, szz, sxy, sxz
    and syz; a ``length`` column is optional. Rows are sorted by time.

    Parameters
    ----------
    path : str or Path
        CSV file
    frame : Frame
        Frame of the positions in the file
    **read_csv_kwargs
        Passed on to :func:`pandas.read_csv`

    Returns
    -------
    GpsDataset

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    FormatError
        If required columns are missing or the table has no rows
    """
    table_path = Path(path)
    if not table_path.exists():
        raise FileNotFoundError(f"Observation table not found: {table_path}")

    df = pd.read_csv(table_path, **read_csv_kwargs)
    df.columns = [str(c).strip().lower() for c in df.columns]

    missing = [name for name in REQUIRED_FIELDS if name not in df.columns]
    if missing:
        raise FormatError(f"{table_path} is missing columns: {', '.join(missing)}")
    if df.empty:
        raise FormatError(f"No observations in {table_path}")

    if 'length' not in df.columns:
        df['length'] = np.nan

    df = df[list(RECORD_FIELDS)].astype(np.float64)
    df = df.sort_values('time', kind='mergesort').reset_index(drop=True)
    logger.debug("Read %d observations from %s", len(df), table_path)

    return GpsDataset.from_records(df, frame=frame)


__all__ = ['read_observation_table']
