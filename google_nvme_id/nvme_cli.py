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
google_nvme_id.nvme_cli
=======================

Thin wrapper around the ``nvme`` admin utility (nvme-cli) and the reader of
the device name that the hypervisor stores in the identify-namespace page.

Every query is attempted exactly once. A bounded timeout may be set so that
a hung device does not stall udev forever.
"""

import logging
import os
import re
import shutil
import subprocess

from google_nvme_id.errors import (
    DeviceNameEmpty,
    MetadataEmpty,
    MetadataUnavailable,
    NotAnNvmeDevice,
    ToolUnavailable,
)
from google_nvme_id.parsers.id_ctrl import parse_id_ctrl_output

logger = logging.getLogger(__name__)

# The hypervisor stores a JSON document in the vendor specific area of the
# identify-namespace data structure, which starts at byte 384.
VENDOR_EXTENSION_OFFSET = 384
DEVICE_NAME_RE = re.compile(r'"device_name":[ \t]*"([A-Za-z0-9._-]+)"')

EXTRA_SEARCH_PATH = "/usr/sbin"


def find_nvme_cli(name="nvme"):
    """
    Return the absolute path of the nvme utility.

    Bare names are looked up on PATH and in /usr/sbin, which is often missing
    from the PATH of unprivileged users.
    """
    path = os.environ.get("PATH", os.defpath)
    found = shutil.which(name, path=os.pathsep.join([path, EXTRA_SEARCH_PATH]))
    if found is None:
        raise ToolUnavailable(
            "The nvme utility ({}) was not found. You may need to run with "
            "sudo or install nvme-cli.".format(name))
    return found


def parse_device_name(raw):
    """
    Extract the device name from a raw identify-namespace page.

    :param raw: bytes returned by ``nvme id-ns -b``
    :raises MetadataEmpty: the vendor extension region holds nothing
    :raises DeviceNameEmpty: there is no usable ``device_name`` value
    """
    region = raw[VENDOR_EXTENSION_OFFSET:].replace(b"\0", b"")
    text = region.decode("ascii", errors="ignore")
    if not text.strip():
        raise MetadataEmpty(
            "NVMe Vendor Extension disk information not present")
    match = DEVICE_NAME_RE.search(text)
    if not match:
        raise DeviceNameEmpty("Empty name")
    return match.group(1)


def log_failure(command, exc):
    """Log a failed query together with what the tool wrote to stderr."""
    stderr = getattr(exc, "stderr", None) or b""
    if isinstance(stderr, bytes):
        stderr = stderr.decode("utf-8", errors="replace")
    logger.debug("%s failed: %s %s", command, exc, stderr.strip())


class NvmeCli:
    """
    Runs queries against a device with the nvme utility.

    :param path: path of the nvme binary, see find_nvme_cli()
    :param timeout: seconds allowed for each query, None to wait forever
    """

    def __init__(self, path, timeout=None):
        self.path = path
        self.timeout = timeout

    def _run(self, *args):
        cmd = [self.path] + list(args)
        logger.debug("Running %s", " ".join(cmd))
        return subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=True,
            timeout=self.timeout,
        ).stdout

    def id_ctrl(self, device_path):
        """Return the ControllerIdentity of the controller of device_path."""
        try:
            output = self._run("id-ctrl", device_path)
        except (subprocess.SubprocessError, OSError) as exc:
            log_failure("id-ctrl", exc)
            raise NotAnNvmeDevice(
                "Passed device was not an NVMe device. (You may need to run "
                "this script as root?)") from exc
        return parse_id_ctrl_output(output.decode("utf-8", errors="replace"))

    def id_ns(self, device_path):
        """Return the raw identify-namespace page of device_path."""
        try:
            return self._run("id-ns", "-b", device_path)
        except (subprocess.SubprocessError, OSError) as exc:
            log_failure("id-ns", exc)
            raise MetadataUnavailable(
                "Unable to read the namespace data of {}".format(
                    device_path)) from exc

    def read_device_name(self, device_path):
        """Return the persistent disk name reported for device_path."""
        return parse_device_name(self.id_ns(device_path))
