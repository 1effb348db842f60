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
Basic Usage
-----------

The CaveTengu cave dive gas planning library exports its main API via
``cavetengu`` module.

A dive plan is calculated for standing data and a list of dive segments.
Standing data describes a diver (consumption rate, swim speed) and gas
configuration (back gas and stages). The following example calculates
a dive plan for a swim into a cave for 100 meters, a turnaround and swim
back for 50 meters, where a diver wants to explore a side passage::

    >>> import cavetengu
    >>> from cavetengu import StandingData, Segment, SegmentType
    >>> segments = [
    ...     Segment('s1', SegmentType.SWIM, 10, 100),
    ...     Segment('s2', SegmentType.TURNAROUND),
    ...     Segment('s3', SegmentType.SWIM, 10, 50),
    ...     Segment('s4', SegmentType.RECALCULATION),
    ... ]
    >>> calc = cavetengu.calculate(StandingData(), segments)

The default standing data is 20l/min surface consumption rate, 10m/min
swim speed and twin 80cft tanks (22l) filled to 220 bar. Using rule of
thirds, the back gas turn pressure is::

    >>> calc.turn_pressure
    150

The dive plan calculation contains result for each dive segment::

    >>> for r in calc.segments:
    ...     print(r.segment_id, r.time, round(r.remaining_back_gas_bar, 1), r.is_way_back)
    s1 10.0 201.8 False
    s2 0 201.8 True
    s3 5.0 192.7 True
    s4 0 192.7 False

At recalculation segment, the side passage re-entry is evaluated. The
diver is 50 meters from the exit and needs 200 liters of back gas to
reach it. The side passage can be swum on back gas until turn pressure of
150 bar::

    >>> recalc = calc.segments[-1].recalculation
    >>> recalc.scenario, recalc.possible
    ('backgas-reentry', True)
    >>> recalc.back_gas_to_exit_liters
    200.0
    >>> recalc.available_gas_bar, recalc.recalc_turn_pressure
    (50, 150)

Fixing Swim Distance
--------------------
If a swim breaches turn pressure, maximum distance of the swim can be
calculated with :func:`fix_distance` function::

    >>> segments = [Segment('s1', SegmentType.SWIM, 20, 500)]
    >>> calc = cavetengu.calculate(StandingData(), segments)
    >>> calc.segments[0].turn_warning
    True
    >>> cavetengu.fix_distance(
    ...     segments, calc.segments, calc.usable_back_gas_rounded,
    ...     calc.bottom_gas_volume, 0
    ... )
    256

"""

from .engine import Engine
from .model import StandingData, StageEntry, Segment, SegmentType, Scenario
from .solver import fix_distance

__version__ = '0.1.0'


def create(standing_data):
    """
    Create dive plan engine.

    :param standing_data: Standing data of a dive plan.
    """
    return Engine(standing_data)


def calculate(standing_data, segments):
    """
    Calculate dive plan.

    Usage

    >>> import cavetengu
    >>> data = cavetengu.StandingData(scr=15)
    >>> segments = [cavetengu.Segment('s1', 'swim', 15, 200)]
    >>> calc = cavetengu.calculate(data, segments)
    >>> calc.segments[0].gas_consumed
    750.0

    :param standing_data: Standing data of a dive plan.
    :param segments: List of dive segments.
    """
    return create(standing_data).calculate(segments)


__all__ = [
    'create', 'calculate', 'fix_distance', 'Engine', 'StandingData',
    'StageEntry', 'Segment', 'SegmentType', 'Scenario',
]

# vim: sw=4:et:ai
