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

import pytest

from cb2save import set_debug
from cb2save.savegame import CrashBandicoot2SaveData

from .savedata import build_save


@pytest.fixture
def save_bytes():
    return build_save()


@pytest.fixture
def save(save_bytes):
    return CrashBandicoot2SaveData(save_bytes)


@pytest.fixture
def debug():
    set_debug()
    yield
    set_debug(False)
