#!/usr/bin/env python3
"""Test suite for baseline differencing"""

import unittest
import numpy as np
from pygts.core.data_structures import Frame
from pygts.core.exceptions import FrameError
from pygts.series.baseline import difference, match_epochs
from pygts.series.dataset import GpsDataset


def make_dataset(times, xyz, cov=None, ranks=None):
    times = np.asarray(times, dtype=float)
    n = len(times)
    if cov is None:
        cov = np.zeros((n, 6))
    if ranks is None:
        ranks = np.ones(n)
    return GpsDataset(times, ranks, np.asarray(xyz, dtype=float), np.asarray(cov, dtype=float))


class TestDifference(unittest.TestCase):

    def setUp(self):
        self.times = [0.0, 86400.0, 172800.0]
        self.data = make_dataset(
            self.times,
            [[10.0, 20.0, 30.0], [11.0, 22.0, 33.0], [13.0, 24.0, 35.0]],
            cov=[[1e-4, 2e-4, 3e-4, 1e-5, 2e-5, 3e-5]] * 3,
            ranks=[1, 2, 1],
        )
        self.baseline = make_dataset(
            self.times,
            [[1.0, 2.0, 3.0], [1.0, 2.0, 3.0], [2.0, 2.0, 3.0]],
        )

    def test_identical_grid_zero_baseline_covariance(self):
        result = difference(self.data, self.baseline)

        self.assertEqual(len(result), 3)
        np.testing.assert_array_equal(result.times, self.data.times)
        np.testing.assert_array_equal(result.xyz, self.data.xyz - self.baseline.xyz)
        np.testing.assert_array_equal(result.covariance, self.data.covariance)
        np.testing.assert_array_equal(result.ranks, [1.0, 2.0, 1.0])
        np.testing.assert_allclose(result.lengths, np.linalg.norm(result.xyz, axis=1))

    def test_covariances_are_summed(self):
        result = difference(self.data, self.data)
        np.testing.assert_array_equal(result.xyz, np.zeros((3, 3)))
        np.testing.assert_array_equal(result.covariance, 2 * self.data.covariance)
        np.testing.assert_array_equal(result.lengths, np.zeros(3))

    def test_nan_baseline(self):
        result = difference(self.data, GpsDataset.nan())
        self.assertEqual(len(result), 1)
        self.assertTrue(np.isnan(result.times[0]))
        self.assertTrue(np.isnan(result.ranks[0]))
        self.assertTrue(np.all(np.isnan(result.xyz)))
        self.assertTrue(np.all(np.isnan(result.covariance)))
        self.assertTrue(np.isnan(result.lengths[0]))

    def test_nan_data(self):
        result = difference(GpsDataset.nan(), self.baseline)
        self.assertEqual(len(result), 1)
        self.assertTrue(np.all(np.isnan(result.xyz)))

    def test_unmatched_rows_dropped(self):
        data = make_dataset([0.0, 1.0, 2.0, 3.0], np.arange(12.0).reshape(4, 3))
        baseline = make_dataset([0.0, 2.0, 3.0], np.zeros((3, 3)))
        result = difference(data, baseline)
        np.testing.assert_array_equal(result.times, [0.0, 2.0, 3.0])
        np.testing.assert_array_equal(result.xyz, data.xyz[[0, 2, 3]])

    def test_data_starts_inside_baseline(self):
        data = make_dataset([2.0, 3.0], [[5.0, 5.0, 5.0], [6.0, 6.0, 6.0]])
        baseline = make_dataset([0.0, 1.0, 2.0, 3.0], np.arange(12.0).reshape(4, 3))
        result = difference(data, baseline)
        np.testing.assert_array_equal(result.times, [2.0, 3.0])
        np.testing.assert_array_equal(result.xyz, [[-1.0, -2.0, -3.0], [-3.0, -4.0, -5.0]])

    def test_first_time_missing_from_baseline(self):
        data = make_dataset([5.0, 6.0, 7.0], np.ones((3, 3)))
        baseline = make_dataset([0.0, 6.0, 7.0], np.zeros((3, 3)))
        result = difference(data, baseline)
        np.testing.assert_array_equal(result.times, [6.0, 7.0])

    def test_no_backtracking(self):
        # out of order input: the scan never moves back in the baseline
        data = make_dataset([0.0, 2.0, 1.0], np.ones((3, 3)))
        baseline = make_dataset([0.0, 1.0, 2.0], np.zeros((3, 3)))
        result = difference(data, baseline)
        np.testing.assert_array_equal(result.times, [0.0, 2.0])

    def test_no_common_epochs(self):
        data = make_dataset([0.0, 1.0], np.ones((2, 3)))
        baseline = make_dataset([10.0, 11.0], np.zeros((2, 3)))
        with self.assertLogs('pygts.series.baseline', level='WARNING'):
            result = difference(data, baseline)
        self.assertEqual(len(result), 1)
        self.assertTrue(np.isnan(result.times[0]))

    def test_frame_mismatch(self):
        enu = self.baseline.enu(0.0, 0.0)
        with self.assertRaises(FrameError):
            difference(self.data, enu)

    def test_result_frame(self):
        result = difference(self.data.enu(0.0, 0.0), self.baseline.enu(0.0, 0.0))
        self.assertEqual(result.frame, Frame.ENU)


class TestApplyBaseline(unittest.TestCase):

    def setUp(self):
        self.data = make_dataset([0.0, 1.0, 2.0], [[3.0, 4.0, 0.0]] * 3)
        self.baseline = make_dataset([1.0, 2.0], [[0.0, 0.0, 0.0]] * 2)

    def test_apply_baseline_in_place(self):
        self.data.apply_baseline(self.baseline)
        self.assertEqual(len(self.data), 2)
        np.testing.assert_array_equal(self.data.times, [1.0, 2.0])
        np.testing.assert_array_equal(self.data.lengths, [5.0, 5.0])

    def test_baselined_copy(self):
        result = self.data.baselined(self.baseline)
        self.assertEqual(len(result), 2)
        self.assertEqual(len(self.data), 3)


class TestMatchEpochs(unittest.TestCase):

    def test_indices(self):
        rows, base_rows = match_epochs(np.array([1.0, 2.0, 4.0, 5.0]),
                                       np.array([0.0, 1.0, 2.0, 3.0, 5.0]))
        np.testing.assert_array_equal(rows, [0, 1, 3])
        np.testing.assert_array_equal(base_rows, [1, 2, 4])

    def test_no_match(self):
        rows, base_rows = match_epochs(np.array([1.0]), np.array([2.0]))
        self.assertEqual(rows.size, 0)
        self.assertEqual(base_rows.size, 0)


if __name__ == '__main__':
    unittest.main()
