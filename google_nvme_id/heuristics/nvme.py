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
google_nvme_id.heuristics.nvme
==============================

Classification of NVMe controllers exposed by the Compute Engine hypervisor.
"""

import enum
import re

PERSISTENT_DISK_MARKER = "nvme_card-pd"
LOCAL_SSD_RE = re.compile(r"nvme_card[0-9]*")


class DiskClass(enum.Enum):
    PERSISTENT_DISK = "persistent-disk"
    LOCAL_SSD = "local-ssd"
    UNKNOWN = "unknown"


def classify_controller(text):
    """
    Guess the kind of disk behind a controller from its id-ctrl output.

    Persistent disks report ``nvme_card-pd``; local SSDs report
    ``nvme_card`` optionally followed by the controller number. The
    persistent disk marker also matches the local SSD pattern so it has to be
    checked first.
    """
    if PERSISTENT_DISK_MARKER in text:
        return DiskClass.PERSISTENT_DISK
    if LOCAL_SSD_RE.search(text):
        return DiskClass.LOCAL_SSD
    return DiskClass.UNKNOWN
