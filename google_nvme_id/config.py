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
"""
google_nvme_id.config
=====================

Runtime configuration, taken from the environment so that udev rules can
tune the helper without changing its command line.
"""

import os
from collections import namedtuple

from google_nvme_id.errors import UsageError

NVME_CLI_VAR = "GOOGLE_NVME_ID_NVME_CLI"
TIMEOUT_VAR = "GOOGLE_NVME_ID_TIMEOUT"
BY_ID_DIR_VAR = "GOOGLE_NVME_ID_BY_ID_DIR"

DEFAULT_NVME_CLI = "nvme"
DEFAULT_TIMEOUT = 10
DEFAULT_BY_ID_DIR = "/dev/disk/by-id"

Config = namedtuple("Config", ["nvme_cli", "timeout", "by_id_dir"])


def parse_timeout(value):
    """
    Convert a timeout setting to seconds.

    Returns None (no timeout) for ``0``; negative or non-numeric values raise
    UsageError.
    """
    try:
        timeout = int(value)
    except (TypeError, ValueError):
        raise UsageError("Invalid timeout value: {!r}".format(value))
    if timeout < 0:
        raise UsageError("Timeout must not be negative: {}".format(timeout))
    return timeout or None


def get_config(environ=None, timeout=None):
    """
    Build the Config from ``environ`` (``os.environ`` by default).

    A ``timeout`` given by the caller replaces the environment setting, which
    is then not looked at.
    """
    if environ is None:
        environ = os.environ
    if timeout is None:
        timeout = environ.get(TIMEOUT_VAR, DEFAULT_TIMEOUT)
    return Config(
        nvme_cli=environ.get(NVME_CLI_VAR) or DEFAULT_NVME_CLI,
        timeout=parse_timeout(timeout),
        by_id_dir=environ.get(BY_ID_DIR_VAR) or DEFAULT_BY_ID_DIR,
    )
