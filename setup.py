#!/usr/bin/env python3
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

import os

from setuptools import setup, find_packages

base_dir = os.path.dirname(__file__)

# Load the README.rst file relative to the setup file
with open(os.path.join(base_dir, "README.rst"), encoding="UTF-8") as stream:
    long_description = stream.read()

setup(
    name="google-nvme-id",
    version="1.0.0",
    packages=find_packages(include=["google_nvme_id", "google_nvme_id.*"]),
    test_suite='google_nvme_id.tests.test_suite',
    license="GPLv3",
    description="Stable udev names for Google Compute Engine NVMe disks",
    long_description=long_description,
    python_requires=">=3.6",
    install_requires=[
        'pyparsing >= 3.0.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            "google_nvme_id=google_nvme_id.scripts.google_nvme_id:main",
        ],
    },
)
