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
CaveTengu constants and planner defaults.
"""

# 10m of water column is one additional atmosphere
METERS_PER_ATA = 10

# stage is dropped at half of its fill pressure plus margin [bar]
STAGE_DROP_MARGIN = 15

# jump between lines takes fixed amount of time [min]
JUMP_TIME = 2

# pressure rounding step [bar]
PRESSURE_STEP = 10

EPSILON = 10 ** -10
SCALE = 10

# tank internal volume [l] by tank type
BOTTOM_GAS_TYPES = {
    '2x80': 22,
    'd12': 24,
}
STAGE_TANK_TYPES = {
    'alu80': 11,
    'alu40': 5.5,
}
STAGE_TANK_LABELS = {
    'alu80': 'Alu80 (11L)',
    'alu40': 'Alu40 (5.5L)',
}
DEFAULT_BOTTOM_GAS_TYPE = '2x80'
DEFAULT_STAGE_TANK_TYPE = 'alu80'

DEFAULT_SCR = 20
DEFAULT_SWIM_SPEED = 10
DEFAULT_FILL_PRESSURE = 220
DEFAULT_CONSERVATISM = 0
DEFAULT_STAGE_STANDING_TIME = 2

# vim: sw=4:et:ai
