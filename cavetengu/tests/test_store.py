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
Tests for dive plan storage.
"""

import json
import os.path
import tempfile

from cavetengu.model import StandingData, StageEntry, Segment, SegmentType
from cavetengu.store import Store, standing_data_store, segments_store, \
    STANDING_DATA_KEY, SEGMENTS_KEY

from .tools import _swim, _marker, _stage

import unittest
from unittest import mock


class StoreTestCase(unittest.TestCase):
    """
    Dive plan storage tests.
    """
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.directory = self.tmp.name


    def tearDown(self):
        self.tmp.cleanup()


    def _write(self, key, content):
        path = os.path.join(self.directory, key + '.json')
        with open(path, 'w') as f:
            f.write(content)


    def test_load_missing(self):
        """
        Test loading missing data
        """
        self.assertIsNone(standing_data_store(self.directory).load())
        self.assertIsNone(segments_store(self.directory).load())


    def test_standing_data(self):
        """
        Test saving and loading standing data
        """
        stage = StageEntry('stg1', 'alu40', 180, True)
        data = StandingData(
            scr=18, swim_speed=12, bottom_gas_type='d12', stages=(stage,)
        )
        store = standing_data_store(self.directory)
        store.save(data)
        self.assertEqual(data, store.load())


    def test_standing_data_format(self):
        """
        Test standing data file format
        """
        store = standing_data_store(self.directory)
        store.save(StandingData())

        path = os.path.join(self.directory, STANDING_DATA_KEY + '.json')
        self.assertEqual(path, store.path)
        with open(path) as f:
            data = json.load(f)
        self.assertEqual(10, data['swimSpeed'])
        self.assertEqual('2x80', data['bottomGasType'])
        self.assertEqual([], data['stages'])


    def test_segments(self):
        """
        Test saving and loading list of dive segments
        """
        segments = [
            _swim('s1', 10, 100),
            _stage('s2', 'stg1'),
            _marker('s3', SegmentType.TURNAROUND),
            Segment('s4', SegmentType.SWIM, 12, 80, note='restriction'),
        ]
        store = segments_store(self.directory)
        store.save(segments)
        self.assertEqual(segments, store.load())


    def test_segments_web_data(self):
        """
        Test loading list of dive segments saved by web application
        """
        self._write(
            SEGMENTS_KEY,
            '[{"id": "a1", "type": "swim", "avgDepth": 15, "distance": 120},'
            ' {"id": "a2", "type": "jump-left", "avgDepth": 0,'
            ' "distance": 0}]'
        )
        segments = segments_store(self.directory).load()
        self.assertEqual(2, len(segments))
        self.assertEqual(Segment('a1', 'swim', 15, 120), segments[0])
        self.assertEqual(SegmentType.JUMP_LEFT, segments[1].type)


    def test_load_null(self):
        """
        Test loading null data
        """
        self._write(STANDING_DATA_KEY, 'null')
        self.assertIsNone(standing_data_store(self.directory).load())


    @mock.patch('cavetengu.store.logger')
    def test_load_corrupted(self, logger):
        """
        Test loading corrupted data
        """
        self._write(STANDING_DATA_KEY, '{"scr": 20, ')
        self.assertIsNone(standing_data_store(self.directory).load())
        self.assertTrue(logger.warning.called)


    @mock.patch('cavetengu.store.logger')
    def test_load_invalid(self, logger):
        """
        Test loading invalid data
        """
        self._write(STANDING_DATA_KEY, '{"scr": "fast"}')
        self.assertIsNone(standing_data_store(self.directory).load())

        self._write(SEGMENTS_KEY, '{"id": "s1"}')
        self.assertIsNone(segments_store(self.directory).load())

        self._write(SEGMENTS_KEY, '[{"id": "s1", "type": "dive"}]')
        self.assertIsNone(segments_store(self.directory).load())

        self.assertEqual(3, logger.warning.call_count)


    def test_custom_store(self):
        """
        Test store with custom value conversion
        """
        path = os.path.join(self.directory, 'note.json')
        store = Store(path, lambda v: v['text'], lambda v: {'text': v})
        store.save('main line')
        self.assertEqual('main line', store.load())


# vim: sw=4:et:ai
