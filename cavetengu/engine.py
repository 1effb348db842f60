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
CaveTengu dive plan engine.

The engine walks the list of dive segments once and calculates gas
consumed by a diver for each segment

- time of a segment is calculated from distance and swim speed (swim),
  fixed jump time (jumps) or stage standing time (stage drop-off and
  pick-up)
- gas consumed is `scr * ATA * time`, where `ATA = depth / 10 + 1`
- stages are breathed first, in order of standing data stage list, until
  a stage reaches its drop pressure
- remaining gas is breathed from back gas

The engine results are then processed by dive direction tracker, which
evaluates turn pressure warnings and side passage re-entries.

.. seealso:: :func:`cavetengu.tracker.track`
"""

import logging

from .model import SegmentType, StageState, SegmentResult, DropAdvice, \
    DiveCalculation, bottom_gas_volume, stage_volume, next_way_back
from .calc import eq_gas, eq_swim_time, to_bar, ceil_pressure, \
    floor_pressure, stage_available
from .tracker import track
from . import const

logger = logging.getLogger(__name__)


class Engine(object):
    """
    CaveTengu dive plan engine.

    The engine does not keep any state between calculations, so one
    engine can be used to calculate many dive plans for the same standing
    data.

    :var standing_data: Standing data of a dive plan.
    :var bottom_gas_volume: Back gas tank internal volume [l].
    :var jump_time: Time of a jump between lines [min].
    """
    def __init__(self, standing_data):
        """
        Create dive plan engine.

        :param standing_data: Standing data of a dive plan.
        """
        super().__init__()
        self.standing_data = standing_data
        self.bottom_gas_volume = bottom_gas_volume(
            standing_data.bottom_gas_type
        )
        self.jump_time = const.JUMP_TIME


    def _stage_states(self):
        """
        Create initial state of all stages.
        """
        return [
            StageState(
                s.id, s.tank_type, stage_volume(s.tank_type),
                s.fill_pressure, s.fill_pressure,
                s.fill_pressure / 2 + const.STAGE_DROP_MARGIN, False,
            )
            for s in self.standing_data.stages
        ]


    def _stage_reservation(self, states):
        """
        Calculate back gas reserved for stages.

        For each stage with back gas reservation enabled, the gas, which
        can be breathed from the stage before it is dropped, is reserved.

        :param states: Initial stage states.
        """
        stages = zip(self.standing_data.stages, states)
        return sum(
            max(0, (s.initial_pressure - s.drop_pressure) * s.volume)
            for entry, s in stages if entry.reserve_in_back_gas
        )


    def _drop_markers(self, segments):
        """
        Find stages with explicit stage drop-off segment.

        :param segments: List of dive segments.
        """
        markers = set()
        way_back = False
        for segment in segments:
            if segment.type == SegmentType.STAGE and not way_back:
                markers.add(segment.stage_id)
            way_back = next_way_back(segment, way_back)
        return markers


    def _segment_time(self, segment, depth):
        """
        Calculate time and effective depth of a dive segment.

        A tuple `(time, depth)` is returned.

        :param segment: Dive segment.
        :param depth: Current depth [m].
        """
        if segment.type == SegmentType.SWIM:
            speed = self.standing_data.swim_speed
            return eq_swim_time(segment.distance, speed), segment.depth
        elif segment.type in SegmentType.JUMPS:
            return self.jump_time, depth
        elif segment.type == SegmentType.STAGE:
            return self.standing_data.stage_standing_time, depth
        else:
            return 0, depth


    def _drop_advice(self, segment, stage_id, consumed, demand):
        """
        Create stage drop-off advice.

        :param segment: Dive segment, during which stage is dropped.
        :param stage_id: Id of dropped stage.
        :param consumed: Gas consumed during the segment before the drop [l].
        :param demand: Gas consumed during the whole segment [l].
        """
        split = None
        if segment.type == SegmentType.SWIM and demand > 0:
            split = round(consumed / demand * segment.distance)
        advice = DropAdvice(segment.id, stage_id, split)
        if __debug__:
            logger.debug('stage drop advice: {}'.format(advice))
        return advice


    def _exhaust_stage(self, states, k, markers):
        """
        Handle stage, which reached its drop pressure.

        The stage is dropped, unless it is picked up already or there is
        explicit stage drop-off segment for the stage.

        Return true if the stage is dropped.

        :param states: Stage states.
        :param k: Index of the stage.
        :param markers: Ids of stages having explicit drop-off segment.
        """
        s = states[k]
        if s.drop_pressure <= 0 or s.id in markers:
            return False
        states[k] = s._replace(dropped=True)
        return True


    def _breathe_stages(self, segment, demand, states, markers, advice):
        """
        Breathe gas from stages.

        A tuple is returned

        - gas, which still has to be breathed from back gas [l]
        - ids of stages breathed
        - ids of stages dropped

        :param segment: Dive segment.
        :param demand: Gas consumed during the segment [l].
        :param states: Stage states, modified in place.
        :param markers: Ids of stages having explicit drop-off segment.
        :param advice: List of stage drop-off advices, modified in place.
        """
        remaining = demand
        breathed = []
        dropped = []
        for k, s in enumerate(states):
            if remaining <= 0:
                break
            if s.dropped or s.volume <= 0:
                continue

            available = stage_available(s)
            if remaining < available:
                states[k] = s._replace(
                    current_pressure=s.current_pressure - remaining / s.volume
                )
                breathed.append(s.id)
                remaining = 0
                continue

            if available > 0:
                remaining -= available
                states[k] = s._replace(current_pressure=s.drop_pressure)
                breathed.append(s.id)

            if self._exhaust_stage(states, k, markers):
                dropped.append(s.id)
                advice.append(self._drop_advice(
                    segment, s.id, demand - remaining, demand
                ))

        return remaining, breathed, dropped


    def _stage_event(self, segment, states, way_back):
        """
        Drop or pick up a stage.

        The stage is dropped when swimming into the cave and picked up on
        the way back. A stage picked up can be breathed empty.

        Ids of dropped stages are returned.

        :param segment: Stage dive segment.
        :param states: Stage states, modified in place.
        :param way_back: True if diver swims out of the cave.
        """
        found = [k for k, s in enumerate(states) if s.id == segment.stage_id]
        if not found:
            logger.warning(
                'segment {}: stage {} not found, ignored'
                .format(segment.id, segment.stage_id)
            )
            return []

        k = found[0]
        s = states[k]
        if not way_back and not s.dropped:
            states[k] = s._replace(dropped=True)
            if __debug__:
                logger.debug('segment {}: stage {} dropped'.format(
                    segment.id, s.id
                ))
            return [s.id]
        elif way_back and s.dropped:
            states[k] = s._replace(dropped=False, drop_pressure=0)
            if __debug__:
                logger.debug('segment {}: stage {} picked up'.format(
                    segment.id, s.id
                ))
        return []


    def _usable_gas(self, states):
        """
        Calculate back gas limits using rule of thirds.

        A tuple is returned

        - total back gas [l]
        - stage reservation [l]
        - effective back gas [l]
        - usable back gas [l]
        - usable back gas rounded down to 10 bar equivalent [l]
        - turn pressure rounded up to 10 bar [bar]

        :param states: Initial stage states.
        """
        sd = self.standing_data
        volume = self.bottom_gas_volume

        total = volume * sd.bottom_gas_fill_pressure
        reservation = self._stage_reservation(states)
        effective = total - reservation
        usable = max(0, effective / 3 - sd.conservatism * volume)

        usable_bar = to_bar(usable, volume)
        rounded = floor_pressure(usable_bar) * volume
        turn_pressure = 0
        if volume > 0:
            turn_pressure = ceil_pressure(
                sd.bottom_gas_fill_pressure - usable_bar
            )
        return total, reservation, effective, usable, rounded, turn_pressure


    def _simulate(self, segments, turn_pressure, advice):
        """
        Calculate gas consumption for each dive segment.

        Dive segment results are generated. The turn warning and distance
        from exit data is not calculated.

        :param segments: List of dive segments.
        :param turn_pressure: Back gas turn pressure [bar].
        :param advice: List of stage drop-off advices, modified in place.
        """
        sd = self.standing_data
        volume = self.bottom_gas_volume

        states = self._stage_states()
        markers = self._drop_markers(segments)

        back_gas = volume * sd.bottom_gas_fill_pressure
        back_gas_used = 0
        consumed = 0
        running_time = 0
        time_depth = 0
        depth = 0
        way_back = False

        for segment in segments:
            time, depth = self._segment_time(segment, depth)
            demand = eq_gas(sd.scr, depth, time)

            if segment.type == SegmentType.STAGE:
                # diver is stationary and off the stage being handled
                dropped = self._stage_event(segment, states, way_back)
                remaining = demand
                breathed = []
            else:
                remaining, breathed, dropped = self._breathe_stages(
                    segment, demand, states, markers, advice
                )

            back_gas -= remaining
            back_gas_used += remaining
            consumed += demand

            running_time += time
            time_depth += time * depth
            avg_depth = time_depth / running_time if running_time > 0 else 0

            way_back = next_way_back(segment, way_back)

            yield SegmentResult(
                segment.id, time, depth, demand, running_time, avg_depth,
                back_gas, to_bar(back_gas, volume), tuple(states),
                tuple(dropped), tuple(breathed), remaining > 0, back_gas_used,
                consumed, turn_pressure, False, way_back, 0, 0, 0, None,
            )


    def calculate(self, segments):
        """
        Calculate dive plan for list of dive segments.

        :param segments: List of dive segments.
        """
        segments = list(segments)
        states = self._stage_states()
        total, reservation, effective, usable, rounded, turn_pressure = \
            self._usable_gas(states)

        if __debug__:
            logger.debug(
                'back gas {}l, reservation {}l, usable {}l, turn pressure'
                ' {}bar'.format(total, reservation, usable, turn_pressure)
            )

        advice = []
        results = list(self._simulate(segments, turn_pressure, advice))
        results = track(segments, results, turn_pressure, self.bottom_gas_volume)

        return DiveCalculation(
            results, total, reservation, effective, usable, rounded,
            turn_pressure, self.bottom_gas_volume, advice,
        )


# vim: sw=4:et:ai
