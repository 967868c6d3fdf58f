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
google_nvme_id.heuristics
=========================

Guesswork about devices based on the strings the hypervisor puts into the
NVMe identify data.
"""
