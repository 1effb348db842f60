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
Dive plan storage.

Standing data and list of dive segments are stored in JSON files. The
file names and JSON format are compatible with the keys and values used
by the cave planner web application, so its exported data can be loaded
directly.

Missing or corrupted data is never an error, null is loaded instead, i.e.

    >>> store = standing_data_store('/nonexistent')
    >>> store.load() is None
    True
"""

import json
import logging
import os.path

from .model import standing_data_from_dict, standing_data_to_dict, \
    segment_from_dict, segment_to_dict
from .error import ConfigError

logger = logging.getLogger(__name__)

STANDING_DATA_KEY = 'cave-planner-standing-data'
SEGMENTS_KEY = 'cave-planner-sections'


class Store(object):
    """
    Key-value store keeping a value in a JSON file.

    :var path: Path of the JSON file.
    :var decode: Function converting JSON data into a value.
    :var encode: Function converting a value into JSON data.
    """
    def __init__(self, path, decode, encode):
        """
        Create store.

        :param path: Path of the JSON file.
        :param decode: Function converting JSON data into a value.
        :param encode: Function converting a value into JSON data.
        """
        self.path = path
        self.decode = decode
        self.encode = encode


    def load(self):
        """
        Load value from the store.

        Null is returned if there is no value or the value cannot be read.
        """
        if not os.path.exists(self.path):
            return None

        try:
            with open(self.path) as f:
                data = json.load(f)
            if data is None:
                return None
            return self.decode(data)
        except (OSError, ValueError, TypeError, KeyError, ConfigError) as ex:
            logger.warning('cannot load {}: {}'.format(self.path, ex))
            return None


    def save(self, value):
        """
        Save value in the store.

        :param value: Value to save.
        """
        data = self.encode(value)
        with open(self.path, 'w') as f:
            json.dump(data, f)
        if __debug__:
            logger.debug('saved {}'.format(self.path))


def _decode_segments(data):
    if not isinstance(data, list):
        raise ConfigError('Segment list is not a list')
    return [segment_from_dict(v) for v in data]


def _encode_segments(segments):
    return [segment_to_dict(s) for s in segments]


def standing_data_store(directory):
    """
    Create store for standing data.

    :param directory: Directory of the JSON file.
    """
    path = os.path.join(directory, STANDING_DATA_KEY + '.json')
    return Store(path, standing_data_from_dict, standing_data_to_dict)


def segments_store(directory):
    """
    Create store for list of dive segments.

    :param directory: Directory of the JSON file.
    """
    path = os.path.join(directory, SEGMENTS_KEY + '.json')
    return Store(path, _decode_segments, _encode_segments)


# vim: sw=4:et:ai
