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

import io
import unicodedata

from .datafile import SaveBuffer, UInt8, UInt16

try:
    from PIL import Image
    has_image_support = True
except ModuleNotFoundError:
    has_image_support = False

# Data common to every PlayStation save in the single-save (.MCS) format,
# regardless of the game which wrote it.  The file is the 128-byte memory
# card directory frame, followed by the 8192-byte save block.  The first
# part of the save block is the title frame (magic, icon info, a Shift-JIS
# title and the icon palette), followed by one or more 16x16 icon frames.
# Everything after that is up to the game.


class PsxSaveData():
    """
    Generic accessor for a single-save file.  Owns a `SaveBuffer` and knows
    about the fields which every game's save will have.  Game-specific
    classes wrap one of these rather than subclassing it.
    """

    # Directory frame
    TITLE_FIELD_OFFSET = 0x0A
    TITLE_FIELD_LENGTH = 20

    # Title frame, inside the save block
    ICON_FLAG_OFFSET = 0x82
    SAVE_TITLE_OFFSET = 0x84
    SAVE_TITLE_LENGTH = 64
    PALETTE_OFFSET = 0xE0
    PALETTE_COLORS = 16

    # Icon frames
    ICON_OFFSET = 0x100
    ICON_W = 16
    ICON_H = 16
    ICON_FRAME_BYTES = 0x80

    def __init__(self, data):
        """
        `data` can be a bytes-like object or a readable binary file object.
        Either way, it's copied in, and never touched again.
        """
        self.buffer = SaveBuffer(data)

    def get_raw_title_field(self):
        """
        Returns the directory-frame title field (the product code plus a
        game-specific identifier), as raw NUL-padded bytes.
        """
        return self.buffer.read_at(PsxSaveData.TITLE_FIELD_OFFSET, PsxSaveData.TITLE_FIELD_LENGTH)

    def get_title_field(self):
        """
        Returns the directory-frame title field as a string, without its
        NUL padding.
        """
        raw = self.get_raw_title_field().rstrip(b'\x00')
        return raw.decode('ascii', errors='replace')

    def get_save_title(self):
        """
        Returns the title shown in the console's memory card manager.  This is
        stored as Shift-JIS, usually with full-width characters, so we
        normalize it back down into plain ASCII where possible.
        """
        raw = self.buffer.read_at(PsxSaveData.SAVE_TITLE_OFFSET, PsxSaveData.SAVE_TITLE_LENGTH)
        raw = raw.split(b'\x00', 1)[0]
        return unicodedata.normalize('NFKC', raw.decode('shift_jis', errors='replace')).strip()

    def get_icon_frame_count(self):
        """
        The number of animation frames in the save icon.  The display flag
        is 0x11, 0x12 or 0x13 for one, two, or three frames.
        """
        return self.buffer.read_num(PsxSaveData.ICON_FLAG_OFFSET, UInt8) & 0x0F

    def get_icon_palette(self):
        """
        Returns the 16-color icon palette as a list of RGBA tuples.  Colors
        are 15-bit BGR; a value of exactly zero is transparent.
        """
        palette = []
        for idx in range(PsxSaveData.PALETTE_COLORS):
            color = self.buffer.read_num(PsxSaveData.PALETTE_OFFSET + idx*2, UInt16)
            if color == 0:
                palette.append((0, 0, 0, 0))
                continue
            rgb = []
            for shift in (0, 5, 10):
                component = (color >> shift) & 0x1F
                rgb.append((component << 3) | (component >> 2))
            palette.append((*rgb, 255))
        return palette

    def get_icon_pixels(self, frame=0):
        """
        Returns the palette indexes for the given icon frame, as a flat
        list in row order.  Each byte stores two pixels; the low nibble
        is the leftmost one.
        """
        num_frames = self.get_icon_frame_count()
        if frame < 0 or frame >= num_frames:
            raise ValueError(f'Icon frame {frame} is not available (icon has {num_frames} frame(s))')
        raw = self.buffer.read_at(
                PsxSaveData.ICON_OFFSET + frame*PsxSaveData.ICON_FRAME_BYTES,
                PsxSaveData.ICON_FRAME_BYTES,
                )
        pixels = []
        for byte in raw:
            pixels.append(byte & 0x0F)
            pixels.append(byte >> 4)
        return pixels

    def export_icon(self, filename, frame=0):
        """
        Exports an icon frame to the filename `filename`.  The format should
        be dynamically decided by Pillow based on the filename extension,
        though it'll need to support an alpha channel for the transparent
        color to survive (PNG is the obvious choice).
        """
        global has_image_support
        if not has_image_support:
            raise RuntimeError('Pillow module does not seem to be available; export_icon is not usable')
        palette = self.get_icon_palette()
        pixels = self.get_icon_pixels(frame)
        im = Image.new(
                'RGBA',
                (PsxSaveData.ICON_W, PsxSaveData.ICON_H),
                )
        im.putdata([palette[idx] for idx in pixels])
        im.save(filename)

    def to_bytes(self):
        """
        Returns a copy of the full save data
        """
        return self.buffer.export()

    def get_stream(self):
        """
        Returns a copy of the full save data as a new in-memory stream
        """
        return io.BytesIO(self.to_bytes())
