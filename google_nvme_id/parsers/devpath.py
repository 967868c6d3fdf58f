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
:mod:`google_nvme_id.parsers.devpath` -- fields encoded in NVMe names
=====================================================================

Kernel NVMe block device nodes are named ``nvme<ctrl>n<namespace>`` with an
optional ``p<partition>`` suffix. The hypervisor reports local SSD
controllers with a model of ``nvme_card`` followed by the controller number.
"""

import re

NAMESPACE_RE = re.compile(r".*nvme[0-9]+n([0-9]+)")
PARTITION_RE = re.compile(r".*nvme[0-9]+n[0-9]+p([0-9]+)$")
CONTROLLER_RE = re.compile(r"nvme_card([0-9]*)")


def get_namespace_number(device_path):
    """
    Return the namespace number of ``device_path``, or None.

    >>> get_namespace_number("/dev/nvme0n2")
    2
    """
    match = NAMESPACE_RE.match(device_path)
    if match:
        return int(match.group(1))
    return None


def get_partition_number(device_path):
    """
    Return the partition number of ``device_path``, or None when it names a
    whole namespace.
    """
    match = PARTITION_RE.match(device_path)
    if match:
        return int(match.group(1))
    return None


def get_controller_number(model):
    """
    Return the controller number carried by a ``nvme_card<N>`` model.

    The first occurrence that has digits wins. A bare ``nvme_card`` (older
    hypervisors) or no match at all gives 0.
    """
    for digits in CONTROLLER_RE.findall(model):
        if digits:
            return int(digits)
    return 0
