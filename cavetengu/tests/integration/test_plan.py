#
# CaveTengu - cave dive gas planning library.
#
# Copyright (C) 2025-2026 by CaveTengu Team
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#


"""
CaveTengu dive plan integration tests.
"""

import itertools

import cavetengu
from cavetengu import StandingData, StageEntry, Segment, SegmentType, \
    Scenario

import unittest


def _plan(*segments):
    return [
        Segment('s{}'.format(k), t, depth, distance, stage_id=stage_id)
        for k, (t, depth, distance, stage_id)
        in enumerate(segments, 1)
    ]

SWIM = SegmentType.SWIM
TURNAROUND = SegmentType.TURNAROUND, 0, 0, None
RECALCULATION = SegmentType.RECALCULATION, 0, 0, None


class PlanTest(unittest.TestCase):
    """
    Abstract class for all dive plan test cases.
    """
    def _calculate(self, segments, **kw):
        return cavetengu.calculate(StandingData(**kw), segments)


    def _fix(self, segments, calc, index):
        return cavetengu.fix_distance(
            segments, calc.segments, calc.usable_back_gas_rounded,
            calc.bottom_gas_volume, index
        )



class ExitTestCase(PlanTest):
    """
    Gas to exit at recalculation segment tests.
    """
    def test_recalc_at_exit_side_passage(self):
        """
        Test zero gas to exit at recalculation at the exit with side passage
        """
        segments = _plan(
            (SWIM, 10, 100, None),
            TURNAROUND,
            (SWIM, 10, 100, None),
            RECALCULATION,
            (SWIM, 10, 50, None),
            TURNAROUND,
            (SWIM, 10, 50, None),
        )
        calc = self._calculate(segments)
        recalc = calc.segments[3].recalculation

        self.assertIsNotNone(recalc)
        self.assertEqual(0, recalc.back_gas_to_exit_liters)
        self.assertEqual(0, recalc.back_gas_to_exit_bar)
        self.assertEqual(0, calc.segments[-1].distance_from_exit)


    def test_recalc_at_exit(self):
        """
        Test zero gas to exit at recalculation at the exit
        """
        segments = _plan(
            (SWIM, 10, 100, None),
            TURNAROUND,
            (SWIM, 10, 100, None),
            RECALCULATION,
        )
        calc = self._calculate(segments)
        recalc = calc.segments[3].recalculation

        self.assertIsNotNone(recalc)
        self.assertEqual(0, recalc.back_gas_to_exit_liters)
        self.assertEqual(0, recalc.back_gas_to_exit_bar)


    def test_recalc_partway(self):
        """
        Test gas to exit at recalculation partway back
        """
        segments = _plan(
            (SWIM, 10, 100, None),
            TURNAROUND,
            (SWIM, 10, 50, None),
            RECALCULATION,
            (SWIM, 10, 50, None),
            TURNAROUND,
            (SWIM, 10, 50, None),
        )
        calc = self._calculate(segments)
        recalc = calc.segments[3].recalculation

        # 50m / 10m/min == 5min at 2 ATA
        self.assertAlmostEqual(200, recalc.back_gas_to_exit_liters)
        self.assertAlmostEqual(200 / 22, recalc.back_gas_to_exit_bar)
        self.assertEqual(50, calc.segments[3].distance_from_exit)


    def test_asymmetric(self):
        """
        Test distance and gas from exit for partial swim back
        """
        for depth, k in itertools.product((6, 15, 30), (10, 35, 70)):
            segments = _plan(
                (SWIM, depth, 100, None),
                TURNAROUND,
                (SWIM, depth, 100 - k, None),
            )
            calc = self._calculate(segments)
            r = calc.segments[-1]

            msg = 'depth={}, k={}'.format(depth, k)
            self.assertAlmostEqual(k, r.distance_from_exit, msg=msg)
            expected = 20 * (depth / 10 + 1) * k / 10
            self.assertAlmostEqual(expected, r.gas_from_exit, msg=msg)


    def test_symmetric(self):
        """
        Test zero distance and gas from exit for out and back swims
        """
        segments = _plan(
            (SWIM, 10, 100, None),
            (SegmentType.JUMP_LEFT, 0, 0, None),
            (SWIM, 20, 80, None),
            TURNAROUND,
            (SWIM, 20, 80, None),
            (SegmentType.JUMP_RIGHT, 0, 0, None),
            (SWIM, 10, 100, None),
        )
        calc = self._calculate(segments)
        r = calc.segments[-1]

        self.assertEqual(0, r.distance_from_exit)
        self.assertEqual(0, r.time_from_exit)
        self.assertEqual(0, r.gas_from_exit)



class TurnPressureTestCase(PlanTest):
    """
    Turn pressure integration tests.
    """
    def test_turn_pressure(self):
        """
        Test turn pressure for various fill pressures and conservatism
        """
        data = [
            (220, 0, 150),
            (200, 0, 140),
            (232, 0, 160),
            (220, 5, 160),
            (300, 0, 200),
        ]
        for fill, conservatism, expected in data:
            calc = self._calculate(
                [], bottom_gas_fill_pressure=fill, conservatism=conservatism
            )
            msg = 'fill={}, conservatism={}'.format(fill, conservatism)
            self.assertEqual(expected, calc.turn_pressure, msg)


    def test_recalc_overrides(self):
        """
        Test recalculation turn pressure overrides back gas turn pressure
        """
        segments = _plan(
            (SWIM, 20, 200, None),
            TURNAROUND,
            (SWIM, 20, 200, None),
            RECALCULATION,
            (SWIM, 20, 50, None),
        )
        calc = self._calculate(segments)
        r = calc.segments[-1]

        self.assertLess(r.remaining_back_gas_bar, calc.turn_pressure)
        self.assertEqual(90, r.turn_pressure)
        self.assertFalse(r.turn_warning)



class FixDistanceTestCase(PlanTest):
    """
    Swim distance fix integration tests.
    """
    def test_fix_after_recalc(self):
        """
        Test fixing side passage swim distance after recalculation
        """
        segments = _plan(
            (SWIM, 20, 200, None),
            TURNAROUND,
            (SWIM, 20, 200, None),
            RECALCULATION,
            (SWIM, 20, 500, None),
        )
        calc = self._calculate(segments)
        self.assertTrue(calc.segments[4].turn_warning)

        fixed = self._fix(segments, calc, 4)
        self.assertIsNotNone(fixed)
        self.assertGreater(fixed, 0)

        segments[4] = segments[4]._replace(distance=fixed)
        calc = self._calculate(segments)
        self.assertFalse(calc.segments[4].turn_warning)


    def test_fix(self):
        """
        Test fixing swim distance without recalculation
        """
        segments = _plan((SWIM, 20, 500, None))
        calc = self._calculate(segments)
        self.assertTrue(calc.segments[0].turn_warning)

        fixed = self._fix(segments, calc, 0)
        self.assertIsNotNone(fixed)
        self.assertGreater(fixed, 0)

        segments[0] = segments[0]._replace(distance=fixed)
        calc = self._calculate(segments)
        self.assertFalse(calc.segments[0].turn_warning)


    def test_fix_kill_stage(self):
        """
        Test fixing side passage swim distance with kill-stage
        """
        stage = StageEntry('stg1', 'alu80', 200, False)
        segments = _plan(
            (SWIM, 10, 100, None),
            (SegmentType.STAGE, 0, 0, 'stg1'),
            TURNAROUND,
            (SWIM, 10, 100, None),
            (SegmentType.STAGE, 0, 0, 'stg1'),
            RECALCULATION,
            (SWIM, 10, 500, None),
        )
        calc = self._calculate(segments, stages=(stage,))

        recalc = calc.segments[5].recalculation
        self.assertEqual(Scenario.KILL_STAGE, recalc.scenario)
        self.assertTrue(recalc.possible)
        self.assertTrue(calc.segments[6].turn_warning)

        fixed = self._fix(segments, calc, 6)
        self.assertIsNotNone(fixed)
        self.assertGreater(fixed, 0)

        segments[6] = segments[6]._replace(distance=fixed)
        calc = self._calculate(segments, stages=(stage,))
        self.assertFalse(calc.segments[6].turn_warning)


    def test_kill_stage_no_false_breach(self):
        """
        Test kill-stage turn pressure is not above back gas pressure
        """
        stage = StageEntry('stg1', 'alu80', 200, False)
        segments = _plan(
            (SWIM, 10, 100, None),
            (SegmentType.STAGE, 0, 0, 'stg1'),
            TURNAROUND,
            (SWIM, 10, 100, None),
            (SegmentType.STAGE, 0, 0, 'stg1'),
            RECALCULATION,
            (SegmentType.TURN_LEFT, 0, 0, None),
        )
        calc = self._calculate(segments, stages=(stage,))
        r6, r7 = calc.segments[5:]

        diff = r6.remaining_back_gas_bar - r6.recalculation.recalc_turn_pressure
        self.assertTrue(0 <= diff < 10, diff)
        self.assertFalse(r7.turn_warning)


    def test_kill_stage_side_passage(self):
        """
        Test side passage swim on kill-stage keeps back gas pressure
        """
        stage = StageEntry('stg1', 'alu80', 200, False)
        segments = _plan(
            (SWIM, 10, 100, None),
            (SegmentType.STAGE, 0, 0, 'stg1'),
            TURNAROUND,
            (SWIM, 10, 100, None),
            (SegmentType.STAGE, 0, 0, 'stg1'),
            RECALCULATION,
            (SWIM, 10, 100, None),
        )
        calc = self._calculate(segments, stages=(stage,))
        r6, r7 = calc.segments[5:]

        self.assertEqual(Scenario.KILL_STAGE, r6.recalculation.scenario)
        diff = r6.remaining_back_gas_bar - r7.remaining_back_gas_bar
        self.assertLess(abs(diff), 1)
        self.assertEqual(('stg1',), r7.breathed_stage_ids)
        self.assertFalse(r7.breathed_back_gas)
        self.assertFalse(r7.turn_warning)


    def test_fix_not_swim(self):
        """
        Test fixing distance of non-swim segment
        """
        segments = _plan(TURNAROUND)
        calc = self._calculate(segments)
        self.assertIsNone(self._fix(segments, calc, 0))


# vim: sw=4:et:ai
