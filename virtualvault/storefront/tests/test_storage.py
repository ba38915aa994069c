"""
Unit tests for key/value storages (storage.py).
"""

import json
import tempfile
from pathlib import Path

from django.contrib.sessions.backends.db import SessionStore
from django.test import SimpleTestCase, TestCase

from storefront.storage import MemoryStorage, JsonFileStorage, SessionStorage


class MemoryStorageTests(SimpleTestCase):

    def test_missing_key_is_none(self):
        self.assertIsNone(MemoryStorage().get_item('cart'))

    def test_values_are_strings(self):
        storage = MemoryStorage()
        storage.set_item('n', 5)
        self.assertEqual(storage.get_item('n'), '5')

    def test_remove_and_clear(self):
        storage = MemoryStorage({'a': '1', 'b': '2'})
        storage.remove_item('a')
        storage.remove_item('missing')
        self.assertEqual(storage.keys(), ['b'])
        storage.clear()
        self.assertEqual(len(storage), 0)


class JsonFileStorageTests(SimpleTestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.path = Path(self.tmpdir.name) / 'state' / 'storage.json'

    def test_missing_file_is_empty(self):
        storage = JsonFileStorage(self.path)
        self.assertIsNone(storage.get_item('auth'))
        self.assertFalse(self.path.exists())

    def test_survives_reopen(self):
        JsonFileStorage(self.path).set_item('cart', '[{"_id": 1}]')

        reopened = JsonFileStorage(self.path)
        self.assertEqual(reopened.get_item('cart'), '[{"_id": 1}]')
        self.assertEqual(json.loads(self.path.read_text(encoding='utf-8')), {'cart': '[{"_id": 1}]'})

    def test_remove_is_flushed(self):
        storage = JsonFileStorage(self.path)
        storage.set_item('auth', '{}')
        storage.remove_item('auth')
        self.assertIsNone(JsonFileStorage(self.path).get_item('auth'))

    def test_rejects_non_object_file(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text('[1, 2]', encoding='utf-8')
        with self.assertRaises(ValueError):
            JsonFileStorage(self.path)


class SessionStorageTests(TestCase):

    def test_values_are_prefixed_and_session_modified(self):
        session = SessionStore()
        storage = SessionStorage(session)

        storage.set_item('cart', '[]')
        self.assertEqual(session['storage:cart'], '[]')
        self.assertTrue(session.modified)
        self.assertEqual(storage.get_item('cart'), '[]')

    def test_clear_keeps_other_session_keys(self):
        session = SessionStore()
        session['_auth_user_id'] = '1'
        storage = SessionStorage(session)
        storage.set_item('cart', '[]')

        storage.clear()
        self.assertIsNone(storage.get_item('cart'))
        self.assertEqual(session['_auth_user_id'], '1')

    def test_remove_missing_key(self):
        storage = SessionStorage(SessionStore())
        storage.remove_item('cart')
        self.assertIsNone(storage.get_item('cart'))
