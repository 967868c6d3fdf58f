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
:mod:`google_nvme_id.tests` -- auxiliary test loaders for google-nvme-id
========================================================================
"""

from inspect import getabsfile
from unittest.loader import defaultTestLoader
import os

import google_nvme_id


def load_unit_tests():
    """
    Load all unit tests and return a TestSuite object
    """
    # Discover all unit tests. By simple convention those are kept in
    # python modules that start with the word 'test_' .
    package_dir = os.path.dirname(getabsfile(google_nvme_id))
    return defaultTestLoader.discover(
        package_dir, top_level_dir=os.path.dirname(package_dir))


def test_suite():
    """
    Test suite function used by setuptools test loader.

    See setup.py setup(test_suite=...) for a matching entry
    """
    return load_unit_tests()
