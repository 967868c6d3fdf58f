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
google_nvme_id.errors
=====================

Exceptions raised while identifying a device. Every error is fatal for the
invocation; the command line front-end turns them into exit status 1.
"""


class NvmeIdError(Exception):
    """Base class for all identification errors."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class UsageError(NvmeIdError):
    """Missing or invalid arguments or configuration."""


class ToolUnavailable(NvmeIdError):
    """The nvme admin utility is not installed or not executable."""


class NotAnNvmeDevice(NvmeIdError):
    """The identify-controller query against the device failed."""


class UnrecognizedController(NvmeIdError):
    """The controller is neither a persistent disk nor a local SSD."""


class NamespaceNotFound(NvmeIdError):
    """A local SSD device path carries no namespace number."""


class MetadataError(NvmeIdError):
    """Common base for the persistent disk metadata failures."""


class MetadataUnavailable(MetadataError):
    """The identify-namespace query failed."""


class MetadataEmpty(MetadataError):
    """The vendor extension region of the namespace page is empty."""


class DeviceNameEmpty(MetadataError):
    """No usable ``device_name`` in the vendor extension region."""
