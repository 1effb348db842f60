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
Gas consumption equations and pressure rounding.

Gas volume is expressed in free liters, i.e. volume of gas at surface
pressure. Tank pressure is expressed in bars.
"""

import math

from . import const


def eq_ata(depth):
    """
    Calculate absolute pressure at depth [ATA].

    :param depth: Depth [m].
    """
    return depth / const.METERS_PER_ATA + 1


def eq_gas(scr, depth, time):
    """
    Calculate gas consumed at depth.

    :param scr: Surface consumption rate [l/min/ATA].
    :param depth: Depth [m].
    :param time: Time spent at depth [min].
    """
    return scr * eq_ata(depth) * time


def eq_swim_time(distance, speed):
    """
    Calculate time of a swim.

    Zero is returned for non-positive swim speed.

    :param distance: Swim distance [m].
    :param speed: Swim speed [m/min].
    """
    return distance / speed if speed > 0 else 0


def to_bar(liters, volume):
    """
    Convert gas volume into tank pressure.

    Zero is returned for non-positive tank volume.

    :param liters: Gas volume [l].
    :param volume: Tank internal volume [l].
    """
    return liters / volume if volume > 0 else 0


def ceil_pressure(pressure):
    """
    Round pressure up to multiply of 10 bar.

    :param pressure: Pressure [bar].
    """
    v = round(pressure / const.PRESSURE_STEP, const.SCALE)
    return math.ceil(v) * const.PRESSURE_STEP


def floor_pressure(pressure):
    """
    Round pressure down to multiply of 10 bar.

    :param pressure: Pressure [bar].
    """
    v = round(pressure / const.PRESSURE_STEP, const.SCALE)
    return math.floor(v) * const.PRESSURE_STEP


def stage_available(state):
    """
    Calculate stage gas, which can be breathed before the stage is
    dropped [l].

    :param state: Stage state.
    """
    return max(0, (state.current_pressure - state.drop_pressure) * state.volume)


# vim: sw=4:et:ai
