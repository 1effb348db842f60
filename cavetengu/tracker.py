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
Dive direction and side passage re-entry tracker.

The tracker processes complete list of dive segment results calculated
by the engine. It

- tracks dive direction, which is changed by turnaround segment and set
  to swim into the cave by recalculation segment
- tracks distance, swim time and gas required to reach the exit
- evaluates re-entry of a side passage at each recalculation segment
- sets turn pressure warnings using back gas turn pressure or, after
  recalculation and until next turnaround, recalculation turn pressure

Side Passage Re-entry
---------------------
Re-entry of a side passage is evaluated for one of the scenarios

kill-stage
    A diver carries a stage with gas. The side passage is swum on the
    stage, which can be breathed empty. The re-entry is possible if a
    diver can exit the cave on back gas keeping half of it in reserve.
    Back gas should not be breathed, so recalculation turn pressure is
    current back gas pressure rounded down to 10 bar.
back gas re-entry
    The side passage is swum on back gas. Gas of dropped stages and gas
    required to exit the cave (twice) are reserved, then a third of the
    rest is available for the re-entry.
"""

import logging

from .model import SegmentType, Scenario, RecalculationResult, \
    next_way_back, stage_label
from .calc import to_bar, ceil_pressure, floor_pressure, stage_available
from . import const

logger = logging.getLogger(__name__)


def is_breach(pressure, turn_pressure, way_back):
    """
    Check if back gas pressure breaches turn pressure.

    Turn pressure can be breached only when swimming into the cave.

    :param pressure: Back gas pressure [bar].
    :param turn_pressure: Turn pressure [bar].
    :param way_back: True if diver swims out of the cave.
    """
    return not way_back and turn_pressure > 0 \
        and turn_pressure - pressure > const.EPSILON


def reentry(result, gas_to_exit, volume):
    """
    Evaluate re-entry of a side passage.

    :param result: Dive segment result of recalculation segment.
    :param gas_to_exit: Gas required to exit the cave [l].
    :param volume: Back gas tank internal volume [l].
    """
    remaining = result.remaining_back_gas_liters
    pressure = result.remaining_back_gas_bar
    to_exit_bar = to_bar(gas_to_exit, volume)

    carried = [
        (k, s) for k, s in enumerate(result.stage_states, 1)
        if not s.dropped and stage_available(s) > 0
    ]
    if carried:
        k, s = carried[0]
        stage_gas = stage_available(s)
        stage_bar = to_bar(stage_gas, s.volume)
        available_bar = floor_pressure(stage_bar)
        return RecalculationResult(
            gas_to_exit + stage_gas <= remaining / 2,
            Scenario.KILL_STAGE,
            available_bar * s.volume,
            available_bar,
            stage_label(k, s.tank_type),
            s.volume,
            gas_to_exit,
            to_exit_bar,
            floor_pressure(pressure),
            stage_remaining_liters=stage_gas,
            stage_remaining_bar=stage_bar,
        )

    reservation = sum(
        s.current_pressure * s.volume for s in result.stage_states
        if s.dropped and s.current_pressure > 0
    )
    budget = (remaining - reservation - 2 * gas_to_exit) / 3
    budget_bar = max(0, floor_pressure(to_bar(budget, volume)))
    return RecalculationResult(
        budget_bar > 0,
        Scenario.BACK_GAS,
        budget_bar * volume,
        budget_bar,
        'Back Gas',
        volume,
        gas_to_exit,
        to_exit_bar,
        ceil_pressure(pressure - budget_bar),
        stage_reservation_liters=reservation if reservation > 0 else None,
    )


def track(segments, results, turn_pressure, volume):
    """
    Track dive direction and evaluate side passage re-entries.

    New list of dive segment results is returned.

    Distance, time and gas from the exit are running net values. A swim
    out of the cave subtracts the gas consumed at its own depth. When
    a swim out of the cave is planned at different depth than the swim
    into the cave, the gas from the exit is not the gas required to swim
    the remaining distance at the depth of the swim into the cave.

    :param segments: List of dive segments.
    :param results: List of dive segment results calculated by the engine.
    :param turn_pressure: Back gas turn pressure [bar].
    :param volume: Back gas tank internal volume [l].
    """
    way_back = False
    recalc_turn_pressure = None
    distance = 0
    time = 0
    gas = 0

    tracked = []
    for segment, result in zip(segments, results):
        way_back = next_way_back(segment, way_back)

        if segment.type == SegmentType.SWIM \
                or segment.type in SegmentType.JUMPS:
            sign = -1 if way_back else 1
            distance += sign * segment.distance
            time += sign * result.time
            gas += sign * result.gas_consumed

        recalculation = None
        if segment.type == SegmentType.TURNAROUND:
            recalc_turn_pressure = None
        elif segment.type == SegmentType.RECALCULATION:
            recalculation = reentry(result, max(0, gas), volume)
            recalc_turn_pressure = recalculation.recalc_turn_pressure
            if __debug__:
                logger.debug('segment {}: {}'.format(
                    segment.id, recalculation
                ))

        active = turn_pressure
        if recalc_turn_pressure is not None:
            active = recalc_turn_pressure

        warning = segment.type != SegmentType.RECALCULATION \
            and is_breach(result.remaining_back_gas_bar, active, way_back)

        tracked.append(result._replace(
            turn_pressure=active,
            turn_warning=warning,
            is_way_back=way_back,
            distance_from_exit=max(0, distance),
            time_from_exit=max(0, time),
            gas_from_exit=max(0, gas),
            recalculation=recalculation,
        ))
    return tracked


# vim: sw=4:et:ai
