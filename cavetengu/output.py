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
CaveTengu output functions.

Dive plan can be saved in a CSV file, one row per dive segment, i.e. to
print a dive slate.
"""

import csv

HEADER = [
    'segment_id', 'time', 'depth', 'gas_consumed', 'running_time',
    'running_avg_depth', 'back_gas_liters', 'back_gas_bar', 'stages',
    'turn_pressure', 'turn_warning', 'way_back', 'distance_from_exit',
    'time_from_exit', 'gas_from_exit', 'recalc_scenario', 'recalc_possible',
    'recalc_turn_pressure',
]


def format_stages(states):
    """
    Format stage states as text, i.e. `s1:150.0 s2:dropped`.

    :param states: Stage states.
    """
    return ' '.join(
        '{}:{}'.format(s.id, 'dropped' if s.dropped else
            '{:.1f}'.format(s.current_pressure))
        for s in states
    )


def write_csv(f, calc):
    """
    Write dive plan calculation into a CSV file.

    :param f: File object.
    :param calc: Dive plan calculation.
    """
    fcsv = csv.writer(f)
    fcsv.writerow(HEADER)

    for r in calc.segments:
        row = [
            r.segment_id, r.time, r.depth, r.gas_consumed, r.running_time,
            r.running_avg_depth, r.remaining_back_gas_liters,
            r.remaining_back_gas_bar, format_stages(r.stage_states),
            r.turn_pressure, r.turn_warning, r.is_way_back,
            r.distance_from_exit, r.time_from_exit, r.gas_from_exit,
        ]
        recalc = r.recalculation
        if recalc:
            row.extend([
                recalc.scenario, recalc.possible, recalc.recalc_turn_pressure
            ])
        else:
            row.extend(['', '', ''])
        fcsv.writerow(row)


# vim: sw=4:et:ai
