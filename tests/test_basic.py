"""
test_basic.py - Basic functionality tests for logic modules
"""

import unittest
import sys
import os
from datetime import datetime

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core import constants
from operations import updater
from safety import backup_manager
from ui import prompts

class TestBasics(unittest.TestCase):
    def test_config_name(self):
        self.assertEqual(constants.config_name("work.yaml"), "work")
        self.assertEqual(constants.config_name("temp-dev.yaml"), "temp-dev")
        self.assertEqual(constants.config_name("notes.txt"), "notes.txt")

    def test_temp_and_backup_names(self):
        self.assertTrue(constants.is_temp_name("temp1.yaml"))
        self.assertTrue(constants.is_temp_name("temporary.yaml"))
        self.assertFalse(constants.is_temp_name("work-temp.yaml"))
        self.assertTrue(constants.is_temp_name("draft1.yaml", "draft"))
        self.assertTrue(constants.is_backup_name("work.yaml.backup.20240101_120000"))
        self.assertFalse(constants.is_backup_name("backup.yaml"))

    def test_backup_path_format(self):
        path = backup_manager.backup_path_for("/x/work.yaml", datetime(2024, 3, 5, 7, 8, 9))
        self.assertEqual(path, "/x/work.yaml.backup.20240305_070809")

    def test_rewrite_name_first_line_only(self):
        content = "---\nname: temp-1\nwindows:\n  - name: tab\nname: again\n"
        result = updater.rewrite_name(content, "work")
        self.assertEqual(result, "---\nname: work\nwindows:\n  - name: tab\nname: again\n")

    def test_rewrite_name_ignores_indented_keys(self):
        content = "windows:\n  name: nested\n"
        self.assertEqual(updater.rewrite_name(content, "work"), content)

    def test_rewrite_name_without_trailing_newline(self):
        self.assertEqual(updater.rewrite_name("name: temp", "work"), "name: work")

    def test_rewrite_name_keeps_crlf_on_other_lines(self):
        content = "name: temp\r\nactive_window_index: 0\r\n"
        result = updater.rewrite_name(content, "work")
        self.assertEqual(result, "name: work\nactive_window_index: 0\r\n")

    def test_parse_selection(self):
        self.assertEqual(prompts.parse_selection("1", 3), 0)
        self.assertEqual(prompts.parse_selection(" 3 \n", 3), 2)
        self.assertIsNone(prompts.parse_selection("0", 3))
        self.assertIsNone(prompts.parse_selection("4", 3))
        self.assertIsNone(prompts.parse_selection("-1", 3))
        self.assertIsNone(prompts.parse_selection("abc", 3))
        self.assertIsNone(prompts.parse_selection("", 3))

    def test_parse_selection_rejects_loose_integers(self):
        self.assertEqual(prompts.parse_selection("+2", 3), 1)
        self.assertIsNone(prompts.parse_selection("1_0", 20))
        self.assertIsNone(prompts.parse_selection("\u0661", 3))
        self.assertIsNone(prompts.parse_selection("\uff12", 3))
        self.assertIsNone(prompts.parse_selection("1 2", 20))

if __name__ == '__main__':
    unittest.main()
