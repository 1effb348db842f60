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
CaveTengu data model.

The standing data and the list of segments are the input of a dive plan
calculation. Both are immutable during the calculation. The calculation
produces a dive segment result for each segment.

The model can be converted from and to dictionaries, i.e. to store it in
JSON format. The dictionary keys are compatible with dive plans saved by
the cave planner web application.
"""

from collections import namedtuple

from .error import ConfigError
from . import const


class SegmentType(object):
    """
    Dive segment type enumeration.

    SWIM
        Swim at an average depth for a distance.
    TURN_LEFT, TURN_RIGHT
        Navigation marker at a line junction, takes no time.
    JUMP_LEFT, JUMP_RIGHT
        Jump to another line, takes fixed amount of time at current
        depth.
    STAGE
        Stage drop-off when swimming into the cave, stage pick-up when
        swimming out.
    TURNAROUND
        Change of swim direction.
    RECALCULATION
        Re-entry into a passage on the way out, i.e. a side passage.
    """
    SWIM = 'swim'
    TURN_LEFT = 't-left'
    TURN_RIGHT = 't-right'
    JUMP_LEFT = 'jump-left'
    JUMP_RIGHT = 'jump-right'
    STAGE = 'stage-drop'
    TURNAROUND = 'turnaround'
    RECALCULATION = 'recalculation'

    ALL = (
        SWIM, TURN_LEFT, TURN_RIGHT, JUMP_LEFT, JUMP_RIGHT, STAGE,
        TURNAROUND, RECALCULATION,
    )
    JUMPS = (JUMP_LEFT, JUMP_RIGHT)


class Scenario(object):
    """
    Re-entry scenario enumeration.

    KILL_STAGE
        Side passage is swum on a carried stage, which can be breathed
        empty.
    BACK_GAS
        Side passage is swum on back gas reserve.
    """
    KILL_STAGE = 'kill-stage'
    BACK_GAS = 'backgas-reentry'


StageEntry = namedtuple(
    'StageEntry', 'id tank_type fill_pressure reserve_in_back_gas'
)
StageEntry.__new__.__defaults__ = (const.DEFAULT_STAGE_TANK_TYPE, 0, False)
StageEntry.__doc__ = """
Stage tank configuration.

:var id: Stage id.
:var tank_type: Stage tank type, i.e. `alu80`.
:var fill_pressure: Stage fill pressure [bar].
:var reserve_in_back_gas: Reserve the stage gas, which can be breathed
    before the stage is dropped, in back gas.
"""

StandingData = namedtuple(
    'StandingData',
    'scr swim_speed bottom_gas_type bottom_gas_fill_pressure conservatism'
    ' stage_standing_time stages'
)
StandingData.__new__.__defaults__ = (
    const.DEFAULT_SCR, const.DEFAULT_SWIM_SPEED, const.DEFAULT_BOTTOM_GAS_TYPE,
    const.DEFAULT_FILL_PRESSURE, const.DEFAULT_CONSERVATISM,
    const.DEFAULT_STAGE_STANDING_TIME, (),
)
StandingData.__doc__ = """
Standing data of a dive plan.

:var scr: Surface consumption rate [l/min/ATA].
:var swim_speed: Swim speed [m/min].
:var bottom_gas_type: Back gas tank type, i.e. `2x80`.
:var bottom_gas_fill_pressure: Back gas fill pressure [bar].
:var conservatism: Pressure deducted from usable back gas [bar].
:var stage_standing_time: Time spent at each stage drop-off and pick-up
    [min].
:var stages: Collection of stage tanks configuration.
"""

Segment = namedtuple('Segment', 'id type depth distance stage_id note')
Segment.__new__.__defaults__ = (0, 0, None, None)
Segment.__doc__ = """
Dive segment.

:var id: Segment id, unique within dive plan.
:var type: Segment type, see :class:`SegmentType`.
:var depth: Average depth of a swim [m].
:var distance: Distance of a swim [m].
:var stage_id: Id of a stage for stage segment.
:var note: Free text note.
"""

StageState = namedtuple(
    'StageState',
    'id tank_type volume initial_pressure current_pressure drop_pressure'
    ' dropped'
)
StageState.__doc__ = """
Stage tank state during dive plan calculation.

Drop pressure is set to zero when a stage is picked up, so it can be
breathed empty.

:var id: Stage id.
:var tank_type: Stage tank type.
:var volume: Stage tank internal volume [l].
:var initial_pressure: Stage fill pressure [bar].
:var current_pressure: Stage pressure [bar].
:var drop_pressure: Pressure at which stage is dropped [bar].
:var dropped: True if the stage is not carried by a diver.
"""

RecalculationResult = namedtuple(
    'RecalculationResult',
    'possible scenario available_gas_liters available_gas_bar'
    ' gas_source_label gas_source_volume back_gas_to_exit_liters'
    ' back_gas_to_exit_bar recalc_turn_pressure stage_remaining_liters'
    ' stage_remaining_bar stage_reservation_liters'
)
RecalculationResult.__new__.__defaults__ = (None, None, None)
RecalculationResult.__doc__ = """
Result of side passage re-entry evaluation.

:var possible: True if the re-entry is possible.
:var scenario: Re-entry scenario, see :class:`Scenario`.
:var available_gas_liters: Gas available for re-entry [l], rounded.
:var available_gas_bar: Gas available for re-entry [bar], rounded down
    to 10 bar.
:var gas_source_label: Label of the gas source, i.e. `S1 Alu80 (11L)`.
:var gas_source_volume: Internal volume of the gas source tank [l].
:var back_gas_to_exit_liters: Back gas required to exit the cave [l].
:var back_gas_to_exit_bar: Back gas required to exit the cave [bar].
:var recalc_turn_pressure: Back gas turn pressure used for the re-entry
    [bar].
:var stage_remaining_liters: Kill-stage only, gas in the stage [l].
:var stage_remaining_bar: Kill-stage only, stage pressure available [bar].
:var stage_reservation_liters: Back gas re-entry only, gas reserved for
    dropped stages [l].
"""

SegmentResult = namedtuple(
    'SegmentResult',
    'segment_id time depth gas_consumed running_time running_avg_depth'
    ' remaining_back_gas_liters remaining_back_gas_bar stage_states'
    ' stage_dropped_ids breathed_stage_ids breathed_back_gas'
    ' back_gas_used_total consumed_total turn_pressure turn_warning'
    ' is_way_back distance_from_exit time_from_exit gas_from_exit'
    ' recalculation'
)
SegmentResult.__doc__ = """
Dive segment calculation result.

:var segment_id: Segment id.
:var time: Time of the segment [min].
:var depth: Effective depth of the segment [m].
:var gas_consumed: Gas consumed during the segment [l].
:var running_time: Dive time at the end of the segment [min].
:var running_avg_depth: Average dive depth at the end of the segment [m].
:var remaining_back_gas_liters: Remaining back gas [l].
:var remaining_back_gas_bar: Remaining back gas [bar].
:var stage_states: Stage states at the end of the segment.
:var stage_dropped_ids: Ids of stages dropped during the segment.
:var breathed_stage_ids: Ids of stages breathed during the segment.
:var breathed_back_gas: True if back gas was breathed during the segment.
:var back_gas_used_total: Back gas used since start of the dive [l].
:var consumed_total: Gas used from all sources since start of the dive
    [l].
:var turn_pressure: Back gas turn pressure in force for the segment [bar].
:var turn_warning: True if the segment breaches the turn pressure.
:var is_way_back: True if diver swims out of the cave.
:var distance_from_exit: Distance from the exit [m].
:var time_from_exit: Swim time from the exit [min].
:var gas_from_exit: Gas required to reach the exit [l].
:var recalculation: Re-entry evaluation for recalculation segment, null
    otherwise.
"""

DropAdvice = namedtuple('DropAdvice', 'segment_id stage_id split_distance')
DropAdvice.__new__.__defaults__ = (None,)
DropAdvice.__doc__ = """
Stage drop-off advice for a stage dropped without stage segment.

A stage segment should be inserted after the segment. If split distance
is set, then the swim segment should be split at the distance first.

:var segment_id: Segment id.
:var stage_id: Stage id.
:var split_distance: Distance of a swim, at which the stage is dropped
    [m].
"""

DiveCalculation = namedtuple(
    'DiveCalculation',
    'segments total_back_gas stage_reservation effective_back_gas'
    ' usable_back_gas usable_back_gas_rounded turn_pressure'
    ' bottom_gas_volume drop_advice'
)
DiveCalculation.__doc__ = """
Dive plan calculation result.

:var segments: List of dive segment results.
:var total_back_gas: Back gas at the start of a dive [l].
:var stage_reservation: Back gas reserved for stages [l].
:var effective_back_gas: Back gas without stage reservation [l].
:var usable_back_gas: Usable back gas (rule of thirds) [l].
:var usable_back_gas_rounded: Usable back gas rounded down to 10 bar
    equivalent [l].
:var turn_pressure: Back gas turn pressure [bar].
:var bottom_gas_volume: Back gas tank internal volume [l].
:var drop_advice: List of stage drop-off advices.
"""


def bottom_gas_volume(tank_type):
    """
    Get back gas tank internal volume.

    :param tank_type: Back gas tank type.
    """
    return const.BOTTOM_GAS_TYPES.get(
        tank_type, const.BOTTOM_GAS_TYPES[const.DEFAULT_BOTTOM_GAS_TYPE]
    )


def stage_volume(tank_type):
    """
    Get stage tank internal volume.

    :param tank_type: Stage tank type.
    """
    return const.STAGE_TANK_TYPES.get(
        tank_type, const.STAGE_TANK_TYPES[const.DEFAULT_STAGE_TANK_TYPE]
    )


def stage_label(no, tank_type):
    """
    Create stage label, i.e. `S1 Alu80 (11L)`.

    :param no: Stage number, starting with 1.
    :param tank_type: Stage tank type.
    """
    label = const.STAGE_TANK_LABELS.get(tank_type, tank_type)
    return 'S{} {}'.format(no, label)


def next_way_back(segment, way_back):
    """
    Determine swim direction after a segment.

    Turnaround changes the direction, recalculation always starts swim
    into the cave.

    :param segment: Dive segment.
    :param way_back: True if diver swims out of the cave before the segment.
    """
    if segment.type == SegmentType.TURNAROUND:
        return not way_back
    elif segment.type == SegmentType.RECALCULATION:
        return False
    return way_back


def standing_data_from_dict(data):
    """
    Create standing data from a dictionary.

    `ConfigError` is raised on invalid data.

    :param data: Dictionary with standing data.
    """
    if not isinstance(data, dict):
        raise ConfigError('Standing data is not a dictionary')
    try:
        stages = tuple(
            StageEntry(
                str(s['id']),
                s.get('tankType', const.DEFAULT_STAGE_TANK_TYPE),
                float(s['fillPressure']),
                bool(s.get('reserveInBackGas', False)),
            )
            for s in data.get('stages', ())
        )
        return StandingData(
            float(data['scr']),
            float(data['swimSpeed']),
            data.get('bottomGasType', const.DEFAULT_BOTTOM_GAS_TYPE),
            float(data['bottomGasFillPressure']),
            float(data.get('conservatism', const.DEFAULT_CONSERVATISM)),
            float(data.get(
                'stageStandingTime', const.DEFAULT_STAGE_STANDING_TIME
            )),
            stages,
        )
    except (KeyError, TypeError, ValueError) as ex:
        raise ConfigError('Invalid standing data: {}'.format(ex)) from ex


def standing_data_to_dict(data):
    """
    Convert standing data into a dictionary.

    :param data: Standing data.
    """
    return {
        'scr': data.scr,
        'swimSpeed': data.swim_speed,
        'bottomGasType': data.bottom_gas_type,
        'bottomGasFillPressure': data.bottom_gas_fill_pressure,
        'conservatism': data.conservatism,
        'stageStandingTime': data.stage_standing_time,
        'stages': [
            {
                'id': s.id,
                'tankType': s.tank_type,
                'fillPressure': s.fill_pressure,
                'reserveInBackGas': s.reserve_in_back_gas,
            }
            for s in data.stages
        ],
    }


def segment_from_dict(data):
    """
    Create dive segment from a dictionary.

    `ConfigError` is raised on invalid data, i.e. unknown segment type.

    :param data: Dictionary with segment data.
    """
    if not isinstance(data, dict):
        raise ConfigError('Segment is not a dictionary')

    seg_type = data.get('type')
    if seg_type not in SegmentType.ALL:
        raise ConfigError('Unknown segment type: {}'.format(seg_type))

    try:
        return Segment(
            str(data['id']),
            seg_type,
            float(data.get('avgDepth', 0)),
            float(data.get('distance', 0)),
            data.get('stageId'),
            data.get('note'),
        )
    except (KeyError, TypeError, ValueError) as ex:
        raise ConfigError('Invalid segment: {}'.format(ex)) from ex


def segment_to_dict(segment):
    """
    Convert dive segment into a dictionary.

    :param segment: Dive segment.
    """
    data = {
        'id': segment.id,
        'type': segment.type,
        'avgDepth': segment.depth,
        'distance': segment.distance,
    }
    if segment.stage_id is not None:
        data['stageId'] = segment.stage_id
    if segment.note is not None:
        data['note'] = segment.note
    return data


# vim: sw=4:et:ai
