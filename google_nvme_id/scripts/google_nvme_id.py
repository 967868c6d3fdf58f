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
google_nvme_id.scripts.google_nvme_id
=====================================

udev helper for Compute Engine NVMe disks. Prints ``ID_SERIAL_SHORT`` and
``ID_SERIAL`` for the given device, or with ``-s`` creates its
``/dev/disk/by-id/google-*`` symlink.
"""

import argparse
import logging
import sys

from google_nvme_id import __version__
from google_nvme_id.actions import create_symlink, print_udev_properties
from google_nvme_id.config import get_config
from google_nvme_id.errors import NvmeIdError
from google_nvme_id.identity import identify_device
from google_nvme_id.nvme_cli import NvmeCli, find_nvme_cli

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s]: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


class UdevHelperArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors exit with status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        print("{}: error: {}. Use -h for full usage.".format(
            self.prog, message), file=sys.stderr)
        raise SystemExit(1)


def parse_args(argv=None):
    parser = UdevHelperArgumentParser(
        prog="google_nvme_id",
        description="Print the udev serial properties of a Google Compute "
        "Engine NVMe disk, or create its /dev/disk/by-id symlink.")
    parser.add_argument(
        "-d", "--device", dest="device_path", metavar="DEVICE_PATH",
        help="Path to the NVMe controller or namespace device node")
    parser.add_argument(
        "-s", "--symlink", action="store_true",
        help="Create the /dev/disk/by-id symlink instead of printing the "
        "udev properties")
    parser.add_argument(
        "--nvme-cli", metavar="PATH",
        help="nvme utility to use (default: $GOOGLE_NVME_ID_NVME_CLI or nvme)")
    parser.add_argument(
        "--timeout", metavar="SECONDS",
        help="Seconds allowed for each nvme query, 0 for no limit "
        "(default: $GOOGLE_NVME_ID_TIMEOUT or 10)")
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log the queries and decisions made")
    parser.add_argument(
        "--version", action="version", version=__version__)
    return parser.parse_args(argv)


def run(args):
    """Identify args.device_path and apply the requested action."""
    config = get_config(timeout=args.timeout)
    nvme_cli = NvmeCli(
        find_nvme_cli(args.nvme_cli or config.nvme_cli), config.timeout)
    identity = identify_device(args.device_path, nvme_cli)
    if args.symlink:
        create_symlink(identity, args.device_path, config.by_id_dir)
    else:
        print_udev_properties(identity)


def main(argv=None):
    args = parse_args(argv)
    if not args.device_path:
        raise SystemExit(
            "Device path (-d) argument required. Use -h for full usage.")
    logging.basicConfig(
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr)
    try:
        run(args)
    except NvmeIdError as exc:
        logger.error(exc.message)
        raise SystemExit(1)
    return 0


if __name__ == "__main__":
    sys.exit(main())
