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

from cb2save.psx import PsxSaveData
from cb2save.errors import InvalidLengthError, NullInputError

from .savedata import build_save


@pytest.fixture
def psx():
    return PsxSaveData(build_save())


def test_construction_errors():
    with pytest.raises(InvalidLengthError):
        PsxSaveData(b'')
    with pytest.raises(NullInputError):
        PsxSaveData(None)


def test_title_field_is_trimmed(psx):
    assert psx.get_title_field() == 'BESCES-00967CRASH2'


def test_raw_title_field(psx):
    raw = psx.get_raw_title_field()
    assert len(raw) == 20
    assert raw == b'BESCES-00967CRASH2\x00\x00'


def test_other_games_are_fine_here():
    psx = PsxSaveData(build_save(title=b'BASLUS-00000TEST'))
    assert psx.get_title_field() == 'BASLUS-00000TEST'


def test_save_title(psx):
    assert psx.get_save_title() == 'CRASH2'


def test_icon_info(psx):
    assert psx.get_icon_frame_count() == 1
    palette = psx.get_icon_palette()
    assert len(palette) == 16
    assert palette[0] == (0, 0, 0, 0)
    assert palette[1] == (255, 0, 0, 255)
    assert palette[2] == (0, 0, 255, 255)


def test_icon_pixels(psx):
    pixels = psx.get_icon_pixels()
    assert len(pixels) == 256
    assert pixels[:3] == [1, 2, 0]


@pytest.mark.parametrize('frame', [-1, 1, 2])
def test_missing_icon_frame(psx, frame):
    with pytest.raises(ValueError):
        psx.get_icon_pixels(frame)


def test_export_icon(psx, tmp_path):
    Image = pytest.importorskip('PIL.Image')
    filename = tmp_path / 'icon.png'
    psx.export_icon(filename)
    with Image.open(filename) as im:
        assert im.size == (16, 16)
        im = im.convert('RGBA')
        assert im.getpixel((0, 0)) == (255, 0, 0, 255)
        assert im.getpixel((1, 0)) == (0, 0, 255, 255)
        assert im.getpixel((2, 0))[3] == 0


def test_copies_out(psx):
    stream = psx.get_stream()
    stream.write(b'\xFF'*32)
    data = bytearray(psx.to_bytes())
    data[0x0A] = 0
    assert psx.get_title_field() == 'BESCES-00967CRASH2'
