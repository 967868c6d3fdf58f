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
google_nvme_id.actions
======================

What to do with a resolved DiskIdentity: print it as udev properties or
create the matching symlink.
"""

import logging
import os

from google_nvme_id.parsers.devpath import get_partition_number

logger = logging.getLogger(__name__)

SYMLINK_PREFIX = "google-"


def format_udev_properties(identity):
    """Return the lines imported by udev's IMPORT{program}."""
    return [
        "ID_SERIAL_SHORT={}".format(identity.short_serial),
        "ID_SERIAL={}".format(identity.serial),
    ]


def print_udev_properties(identity):
    for line in format_udev_properties(identity):
        print(line)


def get_symlink_path(identity, device_path, by_id_dir):
    """Return where the by-id symlink to device_path goes."""
    name = SYMLINK_PREFIX + identity.short_serial
    partition_number = get_partition_number(device_path)
    if partition_number is not None:
        name += "-part{}".format(partition_number)
    return os.path.join(by_id_dir, name)


def create_symlink(identity, device_path, by_id_dir):
    """
    Create the by-id symlink of device_path.

    Failures are logged and reported through the return value only: an
    existing link or a read-only /dev must not fail the udev rule.
    """
    link = get_symlink_path(identity, device_path, by_id_dir)
    try:
        os.symlink(device_path, link)
    except OSError as exc:
        logger.warning("Unable to create symlink %s: %s", link, exc)
        return False
    logger.debug("Created symlink %s -> %s", link, device_path)
    return True
