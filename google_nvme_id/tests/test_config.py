# This file is part of google-nvme-id.
#
# Copyright 2026 Canonical Ltd.
#
# google-nvme-id is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3,
# as published by the Free Software Foundation.
#
# google-nvme-id is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with google-nvme-id.  If not, see <http://www.gnu.org/licenses/>.

import unittest

from google_nvme_id.config import (
    DEFAULT_BY_ID_DIR,
    DEFAULT_NVME_CLI,
    get_config,
    parse_timeout,
)
from google_nvme_id.errors import UsageError


class TestParseTimeout(unittest.TestCase):

    def test_seconds(self):
        self.assertEqual(parse_timeout("30"), 30)

    def test_int(self):
        self.assertEqual(parse_timeout(10), 10)

    def test_disabled(self):
        self.assertIsNone(parse_timeout("0"))

    def test_negative(self):
        with self.assertRaises(UsageError):
            parse_timeout("-1")

    def test_garbage(self):
        with self.assertRaises(UsageError):
            parse_timeout("soon")


class TestGetConfig(unittest.TestCase):

    def test_defaults(self):
        config = get_config({})
        self.assertEqual(config.nvme_cli, DEFAULT_NVME_CLI)
        self.assertEqual(config.timeout, 10)
        self.assertEqual(config.by_id_dir, DEFAULT_BY_ID_DIR)

    def test_environment(self):
        config = get_config({
            "GOOGLE_NVME_ID_NVME_CLI": "/opt/bin/nvme",
            "GOOGLE_NVME_ID_TIMEOUT": "0",
            "GOOGLE_NVME_ID_BY_ID_DIR": "/tmp/by-id",
        })
        self.assertEqual(config.nvme_cli, "/opt/bin/nvme")
        self.assertIsNone(config.timeout)
        self.assertEqual(config.by_id_dir, "/tmp/by-id")

    def test_timeout_argument_overrides_environment(self):
        config = get_config({"GOOGLE_NVME_ID_TIMEOUT": "bad"}, timeout="5")
        self.assertEqual(config.timeout, 5)

    def test_invalid_timeout_argument(self):
        with self.assertRaises(UsageError):
            get_config({}, timeout="bad")
