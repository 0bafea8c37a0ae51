#!/usr/bin/env python3
"""Test suite for the CSV observation table reader"""

import unittest
import os
import tempfile
import numpy as np
import pandas as pd

from pygts.core.exceptions import FormatError
from pygts.io.table_reader import read_observation_table


class TestObservationTable(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.csv_file = os.path.join(self.test_dir, "observations.csv")
        self.table = pd.DataFrame({
            'time': [86400.0, 0.0, 172800.0],
            'rank': [1, 1, 2],
            'x': [2.0, 1.0, 4.0],
            'y': [0.0, 0.0, 0.0],
            'z': [0.0, 0.0, 0.0],
            'sxx': [1e-4, 1e-4, 1e-4],
            'syy': [1e-4, 1e-4, 1e-4],
            'szz': [4e-4, 4e-4, 4e-4],
            'sxy': [0.0, 0.0, 0.0],
            'sxz': [0.0, 0.0, 0.0],
            'syz': [0.0, 0.0, 0.0],
        })
        self.table.to_csv(self.csv_file, index=False)

    def tearDown(self):
        for name in os.listdir(self.test_dir):
            os.remove(os.path.join(self.test_dir, name))
        os.rmdir(self.test_dir)

    def test_read_sorted(self):
        ds = read_observation_table(self.csv_file)
        self.assertEqual(len(ds), 3)
        np.testing.assert_array_equal(ds.times, [0.0, 86400.0, 172800.0])
        np.testing.assert_array_equal(ds.xyz[:, 0], [1.0, 2.0, 4.0])
        np.testing.assert_array_equal(ds.lengths, [0.0, 1.0, 3.0])

    def test_read_with_length(self):
        self.table['length'] = [10.0, 20.0, 30.0]
        self.table.to_csv(self.csv_file, index=False)
        ds = read_observation_table(self.csv_file)
        np.testing.assert_array_equal(ds.lengths, [20.0, 10.0, 30.0])

    def test_missing_column(self):
        self.table.drop(columns=['syz']).to_csv(self.csv_file, index=False)
        with self.assertRaises(FormatError):
            read_observation_table(self.csv_file)

    def test_empty_table(self):
        self.table.iloc[0:0].to_csv(self.csv_file, index=False)
        with self.assertRaises(FormatError):
            read_observation_table(self.csv_file)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            read_observation_table(os.path.join(self.test_dir, "missing.csv"))


if __name__ == '__main__':
    unittest.main()
