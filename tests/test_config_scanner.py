"""
test_config_scanner.py - Tests for launch config discovery
"""

import unittest
from unittest.mock import patch
import sys
import os
import tempfile
import time

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from detection import config_scanner

def write_file(directory, filename, content="name: x\n", age_seconds=0):
    path = os.path.join(directory, filename)
    with open(path, 'w') as f:
        f.write(content)
    mtime = time.time() - age_seconds
    os.utime(path, (mtime, mtime))
    return path

class TestConfigScanner(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.launch_dir = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def test_missing_directory_is_empty(self):
        missing = os.path.join(self.launch_dir, "does-not-exist")
        self.assertEqual(config_scanner.scan_configs(missing), [])
        self.assertEqual(config_scanner.find_temp_configs(missing), [])

    def test_classifies_and_filters(self):
        write_file(self.launch_dir, "temp1.yaml")
        write_file(self.launch_dir, "work.yaml")
        write_file(self.launch_dir, ".hidden.yaml")
        write_file(self.launch_dir, "notes.txt")
        write_file(self.launch_dir, "work.yaml.backup.20240101_000000")
        os.mkdir(os.path.join(self.launch_dir, "folder.yaml"))

        configs = config_scanner.scan_configs(self.launch_dir)

        self.assertEqual([c['name'] for c in configs], ["temp1", "work"])
        self.assertTrue(configs[0]['is_temp'])
        self.assertFalse(configs[1]['is_temp'])
        self.assertEqual(configs[1]['path'], os.path.join(self.launch_dir, "work.yaml"))

    def test_temp_and_named_split(self):
        write_file(self.launch_dir, "temp1.yaml")
        write_file(self.launch_dir, "temp2.yaml")
        write_file(self.launch_dir, "work.yaml")
        write_file(self.launch_dir, "home.yaml")

        temps = config_scanner.find_temp_configs(self.launch_dir)
        named = config_scanner.find_named_configs(self.launch_dir)

        self.assertEqual([c['name'] for c in temps], ["temp1", "temp2"])
        self.assertEqual([c['name'] for c in named], ["home", "work"])

    def test_sorted_by_full_filename(self):
        write_file(self.launch_dir, "a.yaml")
        write_file(self.launch_dir, "a-b.yaml")

        named = config_scanner.find_named_configs(self.launch_dir)

        # "-" sorts before "."
        self.assertEqual([c['name'] for c in named], ["a-b", "a"])

    def test_custom_temp_prefix(self):
        write_file(self.launch_dir, "draft-a.yaml")
        write_file(self.launch_dir, "temp1.yaml")

        temps = config_scanner.find_temp_configs(self.launch_dir, temp_prefix="draft")

        self.assertEqual([c['name'] for c in temps], ["draft-a"])

    def test_latest_temp_is_newest(self):
        write_file(self.launch_dir, "temp1.yaml", age_seconds=3600)
        write_file(self.launch_dir, "temp2.yaml", age_seconds=60)
        write_file(self.launch_dir, "work.yaml")

        latest = config_scanner.latest_config(config_scanner.find_temp_configs(self.launch_dir))

        self.assertEqual(latest['name'], "temp2")

    def test_latest_of_empty_is_none(self):
        self.assertIsNone(config_scanner.latest_config([]))

    @patch('pwd.getpwuid')
    def test_launch_dir_from_user_entry(self, mock_getpwuid):
        mock_getpwuid.return_value.pw_dir = "/home/alice"

        self.assertEqual(
            config_scanner.get_launch_dir(),
            os.path.join("/home/alice", ".warp", "launch_configurations")
        )

    @patch('pwd.getpwuid', side_effect=KeyError("no such user"))
    def test_launch_dir_falls_back_to_env(self, mock_getpwuid):
        with patch.dict(os.environ, {"HOME": "/env/home"}):
            self.assertEqual(
                config_scanner.get_launch_dir(),
                os.path.join("/env/home", ".warp", "launch_configurations")
            )

if __name__ == '__main__':
    unittest.main()
