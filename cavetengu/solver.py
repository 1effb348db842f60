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
Swim distance solver.

When a swim segment breaches turn pressure, the solver finds maximum
distance of the swim, which keeps back gas within the turn pressure.

The gas consumed during a swim is proportional to its distance, so the
distance is

    distance * available / consumed

where `consumed` is gas consumed during the swim from all sources and
`available` is gas available at the start of the swim

- gas in the stages carried by a diver, down to their drop pressure
- back gas down to recalculation turn pressure, if recalculation is
  active
- otherwise, usable back gas minus back gas already used
"""

import logging
import math

from .model import SegmentType
from .calc import stage_available

logger = logging.getLogger(__name__)


def _recalc_turn_pressure(segments, results, index):
    """
    Find recalculation turn pressure active for a segment.

    Null is returned if no recalculation is active.

    :param segments: List of dive segments.
    :param results: List of dive segment results.
    :param index: Index of the segment.
    """
    turn_pressure = None
    for segment, result in zip(segments[:index], results[:index]):
        if segment.type == SegmentType.TURNAROUND:
            turn_pressure = None
        elif segment.type == SegmentType.RECALCULATION \
                and result.recalculation is not None:
            turn_pressure = result.recalculation.recalc_turn_pressure
    return turn_pressure


def _start_state(results, index):
    """
    Get gas state at the start of a segment.

    A tuple is returned

    - gas consumed from all sources [l]
    - back gas used [l]
    - remaining back gas [l]
    - stage states

    :param results: List of dive segment results.
    :param index: Index of the segment.
    """
    if index > 0:
        prev = results[index - 1]
        return (
            prev.consumed_total, prev.back_gas_used_total,
            prev.remaining_back_gas_liters, prev.stage_states,
        )

    # start of a dive, stages are full and carried by a diver
    result = results[0]
    states = tuple(
        s._replace(current_pressure=s.initial_pressure, dropped=False)
        for s in result.stage_states
    )
    remaining = result.remaining_back_gas_liters + result.back_gas_used_total
    return 0, 0, remaining, states


def fix_distance(segments, results, usable_budget, tank_volume, index):
    """
    Calculate maximum distance of a swim segment, which does not breach
    turn pressure.

    Null is returned for non-swim segments and for swims, which consume no
    gas. Zero is returned if no gas is available for the swim.

    :param segments: List of dive segments.
    :param results: List of dive segment results.
    :param usable_budget: Usable back gas rounded down to 10 bar
        equivalent [l].
    :param tank_volume: Back gas tank internal volume [l].
    :param index: Index of the swim segment.
    """
    if not 0 <= index < min(len(segments), len(results)):
        return None

    segment = segments[index]
    if segment.type != SegmentType.SWIM:
        return None

    result = results[index]
    consumed_before, used_before, remaining_before, states = \
        _start_state(results, index)

    consumed = result.consumed_total - consumed_before
    if consumed <= 0:
        return None

    turn_pressure = _recalc_turn_pressure(segments, results, index)
    if turn_pressure is not None:
        back_gas = remaining_before - turn_pressure * tank_volume
    else:
        back_gas = min(
            usable_budget - used_before,
            remaining_before - result.turn_pressure * tank_volume,
        )

    stage_gas = sum(stage_available(s) for s in states if not s.dropped)
    available = max(0, back_gas) + stage_gas

    if __debug__:
        logger.debug(
            'segment {}: consumed {}l, back gas available {}l, stage gas'
            ' available {}l'.format(segment.id, consumed, back_gas, stage_gas)
        )

    if available <= 0:
        return 0
    return math.floor(segment.distance * available / consumed)


# vim: sw=4:et:ai
