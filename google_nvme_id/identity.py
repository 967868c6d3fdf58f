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
google_nvme_id.identity
=======================

Resolution of the stable serial of an NVMe disk.

The short serial is what udev exports as ``ID_SERIAL_SHORT`` and what ends
up in ``/dev/disk/by-id/google-<short serial>``. The full serial
(``ID_SERIAL``) prefixes it with a tag naming the kind of disk.
"""

import logging
from collections import namedtuple

from google_nvme_id.errors import NamespaceNotFound, UnrecognizedController
from google_nvme_id.heuristics.nvme import DiskClass, classify_controller
from google_nvme_id.parsers.devpath import (
    get_controller_number,
    get_namespace_number,
)

logger = logging.getLogger(__name__)

PERSISTENT_DISK_PREFIX = "Google_PersistentDisk_"
EPHEMERAL_DISK_PREFIX = "Google_EphemeralDisk_"
LOCAL_SSD_NAME = "local-nvme-ssd-{}"


# Resolved identity of one device
DiskIdentity = namedtuple(
    "DiskIdentity", ["short_serial", "serial", "disk_class"])


def resolve_persistent_disk(device_path, read_device_name):
    """
    Identify a persistent disk.

    :param read_device_name: callable returning the device name reported in
        the namespace metadata of device_path. Its errors are propagated.
    """
    short_serial = read_device_name(device_path)
    return DiskIdentity(
        short_serial,
        PERSISTENT_DISK_PREFIX + short_serial,
        DiskClass.PERSISTENT_DISK,
    )


def resolve_local_ssd(controller_model, device_path):
    """
    Identify a local SSD.

    Namespaces are numbered from 1 on every controller; controller N's
    namespaces are laid out starting at index N so that the resulting names
    are unique across controllers. Deployed symlinks depend on this
    arithmetic.
    """
    controller_number = get_controller_number(controller_model)
    namespace_number = get_namespace_number(device_path)
    if namespace_number is None:
        raise NamespaceNotFound(
            "Unable to find the namespace number of {}".format(device_path))
    index = controller_number + namespace_number - 1
    short_serial = LOCAL_SSD_NAME.format(index)
    return DiskIdentity(
        short_serial,
        EPHEMERAL_DISK_PREFIX + short_serial,
        DiskClass.LOCAL_SSD,
    )


def identify_device(device_path, nvme_cli):
    """
    Query the controller of device_path and resolve its identity.

    :param nvme_cli: a google_nvme_id.nvme_cli.NvmeCli
    """
    controller = nvme_cli.id_ctrl(device_path)
    disk_class = classify_controller(controller.text)
    logger.debug("%s: %r classified as %s",
                 device_path, controller, disk_class.value)
    if disk_class is DiskClass.PERSISTENT_DISK:
        return resolve_persistent_disk(
            device_path, nvme_cli.read_device_name)
    if disk_class is DiskClass.LOCAL_SSD:
        return resolve_local_ssd(controller.vendor_strings, device_path)
    raise UnrecognizedController(
        "Device {} is not a recognized NVMe device".format(device_path))
