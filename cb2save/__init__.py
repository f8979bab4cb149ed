#!/usr/bin/env python3
# vim: set expandtab tabstop=4 shiftwidth=4:

# Copyright (C) 2026 The cb2save developers
#
# cb2save is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>

__version__ = '0.1.0'

# Process-wide debug switch.  When enabled, field descriptors report the
# offsets they resolve to on stderr.
_debug = False


def set_debug(debug=True):
    """
    Enables (or disables) offset debugging output
    """
    global _debug
    _debug = debug


def is_debug():
    return _debug
