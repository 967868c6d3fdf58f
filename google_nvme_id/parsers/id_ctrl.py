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
:mod:`google_nvme_id.parsers.id_ctrl` -- ``nvme id-ctrl`` parser
================================================================

Parser for the human readable output of ``nvme id-ctrl``::

    NVME Identify Controller:
    vid       : 0x1ae0
    ssvid     : 0x1ae0
    sn        : nvme_card-pd
    mn        : nvme_card-pd
    ...
    ps    0 : mp:0.00W operational enlat:0 exlat:0 rrt:0 rrl:0
              rwt:0 rwl:0 idle_power:- active_power:-

Only the flat ``FIELD-NAME ':' VALUE`` records are kept. The header, power
state descriptors and their continuation lines are ignored. The raw text is
kept as well because device classification looks at the whole output.
"""

from collections import OrderedDict

import pyparsing as p


FIELD_NAME = p.Word(p.alphanums + "_")

Field = (
    FIELD_NAME("name") + p.Suppress(":") + p.rest_of_line("value")
)


class ControllerIdentity:
    """
    Output of an identify-controller query.

    :ivar text: the raw output
    :ivar fields: OrderedDict of field name to (stripped) value
    """

    def __init__(self, text, fields=None):
        self.text = text
        self.fields = fields if fields is not None else OrderedDict()

    def __repr__(self):
        return "{}(model={!r}, serial={!r})".format(
            type(self).__name__, self.model, self.serial)

    @property
    def model(self):
        """Model number (``mn``) or None if the field was not reported."""
        return self.fields.get("mn")

    @property
    def serial(self):
        """Serial number (``sn``) or None if the field was not reported."""
        return self.fields.get("sn")

    @property
    def vendor_strings(self):
        """
        Text to look for the hypervisor's ``nvme_card`` marker in.

        This is the serial and model numbers when they were parsed, the raw
        output otherwise.
        """
        strings = [s for s in (self.serial, self.model) if s]
        if strings:
            return " ".join(strings)
        return self.text


def parse_field(line):
    """Return a (name, value) pair for ``line`` or None if it has no field."""
    # Continuation lines are indented
    if not line or line[0].isspace():
        return None
    try:
        tokens = Field.parse_string(line, parse_all=True)
    except p.ParseException:
        return None
    return tokens["name"], tokens.get("value", "").strip()


def parse_id_ctrl_output(text):
    """Parse the output of ``nvme id-ctrl`` into a ControllerIdentity."""
    fields = OrderedDict()
    for line in text.splitlines():
        field = parse_field(line)
        if field is None:
            continue
        name, value = field
        # Keep the first occurrence, vendor specific dumps may repeat names
        fields.setdefault(name, value)
    return ControllerIdentity(text, fields)
