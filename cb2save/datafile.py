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

import sys
import enum
import struct
import collections

from . import is_debug
from .errors import NullInputError, InvalidLengthError, OutOfBoundsError, \
        NameTooLongError, InvalidNameError, InvalidEnumValueError

# "Generic" data processing for PlayStation single-save files.  The buffer
# itself is a plain in-memory `bytearray` of a fixed size, and everything
# we know about lives in small descriptor objects which only remember
# *where* a field is (offset, width, optional bitmask, optional per-slot
# stride).  The descriptors never hold on to values themselves; every get
# goes straight to the buffer, and every set goes straight back into it,
# so there's never any cached state to get out of sync.

# 8192 bytes (one memory card block) plus the 128-byte directory frame
SAVE_DATA_LENGTH = 8320


class Bounds(enum.Enum):
    """
    Types of bounds that we'll check for
    """

    NONE = enum.auto()
    SIGNED = enum.auto()
    UNSIGNED = enum.auto()


# Low-level datatypes we'll be reading from the save file
NumType = collections.namedtuple('NumType', ['num_bytes', 'struct_char', 'bounds'])
UInt8 =  NumType(1, 'B', Bounds.UNSIGNED)
UInt16 = NumType(2, 'H', Bounds.UNSIGNED)
UInt32 = NumType(4, 'I', Bounds.UNSIGNED)
Int32 =  NumType(4, 'i', Bounds.SIGNED)

# A single flag living inside a span of flag bytes: `flag` is the bitmask,
# `offset` is the byte offset relative to the start of the span.
Bits = collections.namedtuple('Bits', ['flag', 'offset'])


def num_type_limits(num_type):
    """
    Returns a `(min_value, max_value)` tuple for the given `NumType`.  Either
    can be `None` if the type isn't bounded.
    """
    match num_type.bounds:
        case Bounds.SIGNED:
            return (-(2**((num_type.num_bytes*8)-1)), 2**((num_type.num_bytes*8)-1)-1)
        case Bounds.UNSIGNED:
            return (0, 2**(num_type.num_bytes*8)-1)
        case _:
            return (None, None)


class SaveBuffer():
    """
    Owns the raw save data.  The data passed in is copied on the way in, and
    `export()` hands out a copy on the way out, so nothing outside of this
    object can ever alter (or be altered by) our buffer.

    `data` can either be a bytes-like object, or a readable binary file
    object, which will be read in full.  The result must be exactly `length`
    bytes.
    """

    def __init__(self, data, /, length=SAVE_DATA_LENGTH):
        if data is None:
            raise NullInputError('save data must be provided')
        if hasattr(data, 'read'):
            data = data.read()
        self.length = length
        if len(data) != self.length:
            raise InvalidLengthError(f'The size of Single Save Format files (.MCS) must be {self.length} bytes')
        self._data = bytearray(data)

    def __len__(self):
        return len(self._data)

    def _check_span(self, offset, width):
        """
        Makes sure that `width` bytes starting at `offset` are inside our buffer
        """
        if offset < 0 or width < 0 or offset + width > self.length:
            raise OutOfBoundsError(f'{width} byte(s) at 0x{offset:X} would exceed the {self.length}-byte buffer')

    def read_at(self, offset, width):
        """
        Returns `width` bytes starting at `offset`
        """
        self._check_span(offset, width)
        return bytes(self._data[offset:offset+width])

    def write_at(self, offset, data):
        """
        Overwrites our buffer in-place with `data`, starting at `offset`
        """
        self._check_span(offset, len(data))
        self._data[offset:offset+len(data)] = data

    def read_num(self, offset, num_type):
        """
        Reads a little-endian number described by `num_type` at `offset`
        """
        self._check_span(offset, num_type.num_bytes)
        return struct.unpack_from(f'<{num_type.struct_char}', self._data, offset)[0]

    def write_num(self, offset, num_type, value):
        """
        Writes a little-endian number described by `num_type` at `offset`.
        Will raise a `ValueError` if the value doesn't fit in the type.
        """
        min_value, max_value = num_type_limits(num_type)
        if min_value is not None and value < min_value:
            raise ValueError(f'Minimum value is {min_value}')
        if max_value is not None and value > max_value:
            raise ValueError(f'Maximum value is {max_value}')
        self._check_span(offset, num_type.num_bytes)
        struct.pack_into(f'<{num_type.struct_char}', self._data, offset, value)

    def export(self):
        """
        Returns a full, independent copy of our data
        """
        return bytes(self._data)


class LabelEnum(enum.Enum):
    """
    A custom Enum class which, in addition to the usual `value`, also has
    a `label` field intended to be shown to the user in implementing UIs.
    """

    def __new__(cls, value, label):
        obj = object.__new__(cls)
        obj._value_ = value
        obj.label = label
        return obj

    def __lt__(self, other):
        """
        Sort by our numeric value; the games' own ordering is more useful
        than an alphabetical one for levels and bosses.
        """
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.value < other.value

    def __str__(self):
        """
        String representation will be the label, not the value
        """
        return self.label

    @classmethod
    def from_value(cls, value):
        """
        Returns the enum member for `value` if there is one, or `value`
        itself otherwise.  The game is happy to store bytes which aren't
        part of the enum, so we shouldn't choke on them.
        """
        try:
            return cls(value)
        except ValueError:
            return value


class Field():
    """
    Base descriptor class which just knows where data is.  `offset` is the
    absolute offset of the data (for slot-based data, the offset inside
    slot 1).  If `stride` is passed in, the field is repeated once per slot,
    `stride` bytes apart, and `resolve()` needs a 1-based slot number.

    Slot numbers are *not* validated here; the implementing save classes
    are expected to have done that already.
    """

    def __init__(self, debug_label, offset, /, stride=None):
        self.debug_label = debug_label
        self.offset = offset
        self.stride = stride

    def resolve(self, slot=None, extra=0):
        """
        Returns the absolute offset for this field in the given `slot`,
        plus an `extra` relative offset (used by flag spans).
        """
        if self.stride is None:
            offset = self.offset + extra
        else:
            offset = self.offset + self.stride*(slot-1) + extra

        # If we've been told to go into debug mode, show our offsets
        if is_debug():
            report = [f'0x{offset:X} absolute']
            if self.stride is not None:
                slot_base = self.stride*(slot-1)
                report.append(f'0x{offset-slot_base:X} in Slot 1 layout')
                label = f'{self.debug_label} (Slot {slot})'
            else:
                label = self.debug_label
            print('- {}:\t{}'.format(
                label,
                ",\t".join(report),
                ), file=sys.stderr)

        return offset


class NumField(Field):
    """
    A single number in the save.  `num_type` should be a `NumType` object
    describing the on-disk format.
    """

    def __init__(self, debug_label, offset, num_type, /, stride=None):
        super().__init__(debug_label, offset, stride=stride)
        self.num_type = num_type

    def get(self, buf, slot=None):
        return buf.read_num(self.resolve(slot), self.num_type)

    def set(self, buf, value, slot=None):
        buf.write_num(self.resolve(slot), self.num_type, value)


class ChoiceField(NumField):
    """
    Numeric data which is (at least theoretically) constrained to a set of
    known data, defined via a `LabelEnum` class whose values are the numeric
    save data.

    This class does *not* force the value to be a member of the specified
    choices; arbitrary numeric values can be written (and will be read back
    as plain ints).
    """

    def __init__(self, debug_label, offset, num_type, choices, /, stride=None):
        super().__init__(debug_label, offset, num_type, stride=stride)
        self.choices = choices

    def get(self, buf, slot=None):
        return self.choices.from_value(super().get(buf, slot))

    def set(self, buf, value, slot=None):
        if isinstance(value, self.choices):
            value = value.value
        elif isinstance(value, enum.Enum):
            raise InvalidEnumValueError(f'{self.debug_label} must be a {self.choices.__name__}, not {value!r}')
        super().set(buf, value, slot)


class FlagSpan(Field):
    """
    A run of `num_bytes` bytes whose individual bits are independent
    flags.  Flags are addressed with a `Bits` tuple (bitmask plus offset
    relative to the start of the span).  Several unrelated flags routinely
    share one byte, so presence is always tested against the mask, and
    setting a flag only ever touches the masked bits.
    """

    def __init__(self, debug_label, offset, num_bytes, /, stride=None):
        super().__init__(debug_label, offset, stride=stride)
        self.num_bytes = num_bytes

    def _flag_offset(self, bits, slot):
        if bits.offset < 0 or bits.offset >= self.num_bytes:
            raise OutOfBoundsError(f'{self.debug_label} is only {self.num_bytes} byte(s) long')
        return self.resolve(slot, bits.offset)

    def get(self, buf, bits, slot=None):
        """
        Returns `True` if the flag described by `bits` is set
        """
        offset = self._flag_offset(bits, slot)
        return buf.read_num(offset, UInt8) & bits.flag != 0

    def set(self, buf, bits, enabled, slot=None):
        """
        Sets or clears just the bits in `bits.flag`, leaving the rest of the
        byte alone
        """
        offset = self._flag_offset(bits, slot)
        value = buf.read_num(offset, UInt8)
        if enabled:
            value |= bits.flag
        else:
            value &= ~bits.flag
        buf.write_num(offset, UInt8, value & 0xFF)


class FlagField(FlagSpan):
    """
    A single flag at a fixed location (one-byte span, fixed bitmask)
    """

    def __init__(self, debug_label, offset, flag, /, stride=None):
        super().__init__(debug_label, offset, 1, stride=stride)
        self.bits = Bits(flag, 0)

    def get(self, buf, slot=None):
        return super().get(buf, self.bits, slot)

    def set(self, buf, enabled, slot=None):
        super().set(buf, self.bits, enabled, slot)


class TextField(Field):
    """
    Fixed-width ASCII text, NUL-terminated if it's shorter than the field.
    Some games don't map their font onto ASCII exactly; `translate` is a
    dict of `{character: stored character}` substitutions applied when
    writing (and reversed when reading).
    """

    def __init__(self, debug_label, offset, num_bytes, /, stride=None, translate=None):
        super().__init__(debug_label, offset, stride=stride)
        self.num_bytes = num_bytes
        if translate is None:
            translate = {}
        self.to_stored = str.maketrans(translate)
        self.reserved = set(translate.values()) - set(translate)
        self.from_stored = str.maketrans({v: k for k, v in translate.items()})

    def get(self, buf, slot=None):
        raw = buf.read_at(self.resolve(slot), self.num_bytes)
        raw = raw.split(b'\x00', 1)[0]
        return raw.decode('ascii', errors='replace').translate(self.from_stored)

    def set(self, buf, value, slot=None):
        if value is None:
            raise NullInputError(f'{self.debug_label} must be provided')
        if len(value) > self.num_bytes:
            raise NameTooLongError(f'{self.debug_label} can be at most {self.num_bytes} characters')
        for char in value:
            if not ' ' <= char <= '~' or char in self.reserved:
                raise InvalidNameError(f'{self.debug_label} cannot contain {char!r}')
        raw = value.translate(self.to_stored).encode('ascii')
        buf.write_at(self.resolve(slot), raw.ljust(self.num_bytes, b'\x00'))
