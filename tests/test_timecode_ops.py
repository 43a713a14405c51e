# Copyright 2016 Autodesk, Inc. All rights reserved.
#
# Use of this software is subject to the terms of the Autodesk license agreement
# provided at the time of installation or download, or which otherwise accompanies
# this software in either electronic or hard copy form.
#
import unittest
from fractions import Fraction

import vtc
from vtc import Timecode, Comparison


def _tc(value, rate=vtc.F24):
    return Timecode.from_timecode(value, rate)


class TestTimecodeOps(unittest.TestCase):

    def setUp(self):
        # (left, right, expected)
        self._add_map = [
            ("01:00:00:00", "01:00:00:00", "02:00:00:00"),
            ("01:00:00:00", "00:00:00:01", "01:00:00:01"),
            ("01:00:00:00", "-00:30:00:00", "00:30:00:00"),
            ("00:00:00:00", "00:00:00:00", "00:00:00:00"),
            ("-01:00:00:00", "00:30:00:00", "-00:30:00:00"),
        ]
        self._sub_map = [
            ("01:00:00:00", "01:00:00:00", "00:00:00:00"),
            ("01:00:00:00", "00:00:00:01", "00:59:59:23"),
            ("01:00:00:00", "-00:30:00:00", "01:30:00:00"),
            ("00:00:00:00", "01:00:00:00", "-01:00:00:00"),
        ]
        # (timecode, scalar, expected)
        self._mul_map = [
            ("01:00:00:00", 2, "02:00:00:00"),
            ("01:00:00:00", Fraction(3, 2), "01:30:00:00"),
            ("01:00:00:00", 0, "00:00:00:00"),
            ("00:00:00:00", 10, "00:00:00:00"),
            ("01:00:00:00", -1, "-01:00:00:00"),
            ("01:00:00:00", "1/2", "00:30:00:00"),
        ]
        # (timecode, scalar, expected dividend, expected remainder)
        self._divmod_map = [
            ("01:00:00:00", 2, "00:30:00:00", "00:00:00:00"),
            ("01:00:00:01", 2, "00:30:00:00", "00:00:00:01"),
            ("01:00:00:00", 4, "00:15:00:00", "00:00:00:00"),
            ("01:00:00:03", 4, "00:15:00:00", "00:00:00:03"),
            ("01:00:00:04", Fraction(3, 2), "00:40:00:02", "00:00:00:01"),
            # Floor division.
            ("-00:00:00:05", 2, "-00:00:00:03", "00:00:00:01"),
        ]

    def test_add(self):
        for left, right, expected in self._add_map:
            result = _tc(left).add(_tc(right))
            self.assertEqual(result.to_timecode(), expected)
            self.assertEqual((_tc(left) + _tc(right)).to_timecode(), expected)
            self.assertEqual(result.rate, vtc.F24)

    def test_sub(self):
        for left, right, expected in self._sub_map:
            self.assertEqual(_tc(left).sub(_tc(right)).to_timecode(), expected)
            self.assertEqual((_tc(left) - _tc(right)).to_timecode(), expected)

    def test_add_sub_inverse(self):
        for left, right, _ in self._add_map + self._sub_map:
            left_tc = _tc(left)
            right_tc = _tc(right)
            self.assertEqual((left_tc + right_tc) - right_tc, left_tc)
            self.assertEqual((left_tc - right_tc) + right_tc, left_tc)

    def test_frame_operands(self):
        tc = _tc("01:00:00:00")
        self.assertEqual((tc + 1).to_timecode(), "01:00:00:01")
        self.assertEqual((1 + tc).to_timecode(), "01:00:00:01")
        self.assertEqual((tc - 1).to_timecode(), "00:59:59:23")
        self.assertEqual((24 - tc).to_timecode(), "-00:59:59:00")
        self.assertEqual(tc.add(24).to_timecode(), "01:00:01:00")
        self.assertEqual(tc.sub(-24).to_timecode(), "01:00:01:00")

    def test_mixed_rates(self):
        # Real world seconds are added, then rounded to the left rate.
        result = _tc("01:00:00:00") + _tc("01:00:00:00", vtc.F23_98)
        self.assertEqual(result.rate, vtc.F24)
        self.assertEqual(result.frames, 172886)
        result = _tc("01:00:00:00", vtc.F23_98) - _tc("00:00:01:00")
        self.assertEqual(result.rate, vtc.F23_98)
        # 3602.6 seconds is not a whole number of 23.98 frames.
        self.assertEqual(result.frames, 86376)
        self.assertEqual(result.seconds, Fraction(86376 * 1001, 24000))

    def test_mul(self):
        for value, scalar, expected in self._mul_map:
            self.assertEqual(_tc(value).mul(scalar).to_timecode(), expected)
            if not isinstance(scalar, str):
                self.assertEqual((_tc(value) * scalar).to_timecode(), expected)
                self.assertEqual((scalar * _tc(value)).to_timecode(), expected)

    def test_mul_rounding(self):
        # Results always land on a frame.
        tc = _tc("00:00:00:01") * Fraction(1, 3)
        self.assertEqual(tc.frames, 0)
        tc = _tc("00:00:00:01") * Fraction(1, 2)
        self.assertEqual(tc.frames, 1)
        tc = _tc("00:00:00:03") * 0.5
        self.assertEqual(tc.frames, 2)

    def test_divmod(self):
        for value, scalar, dividend, remainder in self._divmod_map:
            result = _tc(value).divmod(scalar)
            self.assertEqual(
                (result[0].to_timecode(), result[1].to_timecode()), (dividend, remainder)
            )
            result = divmod(_tc(value), scalar)
            self.assertEqual(
                (result[0].to_timecode(), result[1].to_timecode()), (dividend, remainder)
            )
            self.assertEqual(_tc(value).div(scalar).to_timecode(), dividend)
            self.assertEqual((_tc(value) // scalar).to_timecode(), dividend)
            self.assertEqual(_tc(value).mod(scalar).to_timecode(), remainder)
            self.assertEqual((_tc(value) % scalar).to_timecode(), remainder)

    def test_divmod_identity(self):
        values = ["01:00:00:00", "01:00:00:01", "17:23:13:02", "-00:00:00:05", "00:00:00:00"]
        for value in values:
            for scalar in [1, 2, 3, 7, 24, -2]:
                tc = _tc(value)
                dividend, remainder = tc.divmod(scalar)
                self.assertEqual(dividend * scalar + remainder, tc)

    def test_divmod_by_zero(self):
        with self.assertRaises(ZeroDivisionError):
            _tc("01:00:00:00").divmod(0)
        with self.assertRaises(ZeroDivisionError):
            _tc("01:00:00:00") // 0

    def test_scenario(self):
        tc = _tc("17:23:13:02", vtc.F23_98)
        self.assertEqual(str(tc + _tc("01:00:00:00", vtc.F23_98)), "18:23:13:02 @ 23.98 NTSC NDF")
        self.assertEqual(
            str(_tc("18:23:13:02", vtc.F23_98) - _tc("01:00:00:00", vtc.F23_98)),
            "17:23:13:02 @ 23.98 NTSC NDF",
        )
        self.assertEqual(str(tc * 2), "34:46:26:04 @ 23.98 NTSC NDF")
        dividend, remainder = divmod(tc, Fraction(3, 2))
        self.assertEqual(str(dividend), "11:35:28:17 @ 23.98 NTSC NDF")
        self.assertEqual(str(remainder), "00:00:00:01 @ 23.98 NTSC NDF")
        self.assertEqual(str(-tc), "-17:23:13:02 @ 23.98 NTSC NDF")

    def test_neg_abs(self):
        tc = _tc("01:00:00:00")
        self.assertEqual((-tc).to_timecode(), "-01:00:00:00")
        self.assertEqual(tc.neg().to_timecode(), "-01:00:00:00")
        self.assertEqual((-(-tc)).to_timecode(), "01:00:00:00")
        self.assertTrue((-tc).is_negative)
        self.assertEqual(abs(tc).to_timecode(), "01:00:00:00")
        self.assertEqual(abs(-tc).to_timecode(), "01:00:00:00")
        self.assertEqual((-tc).abs().to_timecode(), "01:00:00:00")
        zero = _tc("00:00:00:00")
        self.assertFalse((-zero).is_negative)
        self.assertEqual((-zero).to_timecode(), "00:00:00:00")

    def test_rebase(self):
        tc = _tc("01:00:00:00").rebase(vtc.F48)
        self.assertEqual(tc.to_timecode(), "00:30:00:00")
        self.assertEqual(tc.rate, vtc.F48)
        self.assertEqual(tc.frames, 86400)
        tc = Timecode.from_timecode("01:00:00:00", vtc.Framerate(120, vtc.NTSC.NON_DROP))
        self.assertEqual(str(tc), "01:00:00:00 @ 119.88 NTSC NDF")
        self.assertEqual(str(tc.rebase(vtc.F59_94_NDF)), "02:00:00:00 @ 59.94 NTSC NDF")
        # The frame count is kept, not the displayed timecode.
        tc = Timecode.from_frames(17982, vtc.F29_97_DF)
        self.assertEqual(tc.rebase(vtc.F29_97_NDF).to_timecode(), "00:09:59:12")

    def test_compare(self):
        one_hour = _tc("01:00:00:00")
        # (other, expected)
        cases = [
            ("00:59:59:24", Comparison.EQ),
            ("02:00:00:00", Comparison.LT),
            ("01:00:00:01", Comparison.LT),
            ("00:59:59:23", Comparison.GT),
            ("-01:00:00:00", Comparison.GT),
        ]
        for other, expected in cases:
            self.assertIs(one_hour.compare(_tc(other)), expected)
        # NTSC playback is slower, the same timecode is later in real time.
        self.assertIs(
            _tc("01:00:00:00", vtc.F23_98).compare(one_hour), Comparison.GT
        )
        self.assertEqual(str(Comparison.GT), "GT")
        with self.assertRaises(TypeError):
            one_hour.compare(86400)

    def test_rich_comparisons(self):
        one_hour = _tc("01:00:00:00")
        self.assertTrue(one_hour == _tc("00:59:59:24"))
        self.assertTrue(one_hour == Timecode.from_timecode("00:30:00:00", vtc.F48).rebase(vtc.F24))
        self.assertTrue(one_hour < _tc("01:00:00:01"))
        self.assertTrue(one_hour <= _tc("01:00:00:00"))
        self.assertTrue(one_hour > _tc("00:59:59:23"))
        self.assertTrue(one_hour != _tc("00:59:59:23"))
        self.assertFalse(one_hour == 86400)
        with self.assertRaises(TypeError):
            one_hour < 86400
        values = [_tc("02:00:00:00"), _tc("-01:00:00:00"), one_hour]
        self.assertEqual(
            [tc.to_timecode() for tc in sorted(values)],
            ["-01:00:00:00", "01:00:00:00", "02:00:00:00"],
        )

    def test_hash(self):
        # Same real world seconds, same hash.
        timecodes = {_tc("01:00:00:00"): "one hour"}
        self.assertEqual(timecodes[Timecode.from_seconds(3600, vtc.F48)], "one hour")
        self.assertEqual(len({_tc("01:00:00:00"), _tc("00:59:59:24")}), 1)

    def test_unsupported_operands(self):
        tc = _tc("01:00:00:00")
        with self.assertRaises(TypeError):
            tc + 1.5
        with self.assertRaises(TypeError):
            tc - "00:00:00:01"
        with self.assertRaises(TypeError):
            tc + True
        with self.assertRaises(TypeError):
            tc * tc
        with self.assertRaises(TypeError):
            tc * "2"
        with self.assertRaises(TypeError):
            tc // tc
        with self.assertRaises(TypeError):
            1.5 - tc
