#!/usr/bin/env python3
"""Test suite for the binary dataset codec"""

import unittest
import struct
import numpy as np
from pygts.core.data_structures import Frame, Observation
from pygts.core.exceptions import FormatError, FrameError
from pygts.io.binary import decode, encode, encoded_size
from pygts.series.dataset import GpsDataset


class TestBinaryCodec(unittest.TestCase):

    def setUp(self):
        rng = np.random.default_rng(7)
        n = 4
        self.data = GpsDataset(
            times=np.arange(n) * 86400.0 + 5.5e8,
            ranks=np.array([1.0, 2.0, 1.0, 3.0]),
            xyz=rng.normal(scale=6e6, size=(n, 3)),
            covariance=rng.normal(scale=1e-4, size=(n, 6)),
        )

    def test_encoded_size(self):
        blob = encode(self.data)
        self.assertEqual(len(blob), 4 + 96 * 4)
        self.assertEqual(encoded_size(4), len(blob))

    def test_layout(self):
        blob = encode(self.data)
        self.assertEqual(struct.unpack('>i', blob[:4])[0], 4)
        row = struct.unpack('>12d', blob[4:100])
        self.assertEqual(row[0], self.data.times[0])
        self.assertEqual(row[1], self.data.ranks[0])
        self.assertEqual(row[2:5], tuple(self.data.xyz[0]))
        self.assertEqual(row[5:11], tuple(self.data.covariance[0]))
        self.assertEqual(row[11], self.data.lengths[0])

    def test_round_trip(self):
        restored = decode(encode(self.data))
        self.assertEqual(len(restored), len(self.data))
        np.testing.assert_array_equal(restored.times, self.data.times)
        np.testing.assert_array_equal(restored.ranks, self.data.ranks)
        np.testing.assert_array_equal(restored.xyz, self.data.xyz)
        np.testing.assert_array_equal(restored.covariance, self.data.covariance)
        np.testing.assert_array_equal(restored.lengths, self.data.lengths)

    def test_bytes_round_trip(self):
        blob = encode(self.data)
        self.assertEqual(encode(decode(blob)), blob)

    def test_nan_round_trip(self):
        restored = decode(encode(GpsDataset.nan()))
        self.assertEqual(len(restored), 1)
        self.assertTrue(np.isnan(restored.times[0]))
        self.assertTrue(np.all(np.isnan(restored.covariance)))

    def test_decoded_columns_are_writable(self):
        restored = decode(bytearray(encode(self.data)))
        restored.adjust_time(1.0)
        restored.to_enu(10.0, 10.0)
        np.testing.assert_array_equal(restored.times, self.data.times + 1.0)

    def test_frame(self):
        self.assertEqual(decode(encode(self.data)).frame, Frame.ECEF)
        self.assertEqual(decode(encode(self.data), frame=Frame.ENU).frame, Frame.ENU)

    def test_enu_buffer_keeps_frame_when_given(self):
        enu = self.data.enu(-155.2, 19.4)
        blob = encode(enu)

        restored = decode(blob, frame=Frame.ENU)
        self.assertEqual(restored.frame, Frame.ENU)
        with self.assertRaises(FrameError):
            restored.to_enu(-155.2, 19.4)
        np.testing.assert_array_equal(restored.xyz, enu.xyz)

        restored = GpsDataset.from_binary(blob, frame=Frame.ENU)
        with self.assertRaises(FrameError):
            restored.to_enu(-155.2, 19.4)

        # the frame is not encoded, so the default is ECEF
        self.assertEqual(decode(blob).frame, Frame.ECEF)

    def test_truncated(self):
        blob = encode(self.data)
        for size in (0, 3, 4, 99, len(blob) - 1):
            with self.assertRaises(FormatError):
                decode(blob[:size])

    def test_invalid_row_count(self):
        with self.assertRaises(FormatError):
            decode(struct.pack('>i', 0))
        with self.assertRaises(FormatError):
            decode(struct.pack('>i', -2) + b'\x00' * 192)

    def test_format_error_is_value_error(self):
        with self.assertRaises(ValueError):
            decode(b'\x00\x00')

    def test_trailing_bytes_ignored(self):
        blob = encode(self.data)
        restored = decode(blob + b'\x01\x02\x03')
        self.assertEqual(encode(restored), blob)

    def test_dataset_methods(self):
        ds = GpsDataset.from_observations([Observation(time=1.0, rank=1, x=1.0, y=2.0, z=3.0,
                                                       length=9.0)])
        blob = ds.to_binary()
        self.assertEqual(len(blob), 100)
        restored = GpsDataset.from_binary(blob)
        self.assertEqual(restored.first_observation(), ds.first_observation())


if __name__ == '__main__':
    unittest.main()
