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

# Exceptions raised while reading or editing save data.  Each one also
# inherits from the closest builtin so that callers which only care about
# "bad value" vs. "bad index" can keep catching ValueError / IndexError.


class SaveDataError(Exception):
    """
    Base class for everything this package raises on purpose
    """


class NullInputError(SaveDataError, TypeError):
    """
    A required buffer or string argument was `None`
    """


class InvalidLengthError(SaveDataError, ValueError):
    """
    The supplied buffer isn't the exact size of a single-save file
    """


class OutOfBoundsError(SaveDataError, IndexError):
    """
    A read or write would run off the end of the buffer
    """


class UnsupportedTitleError(SaveDataError, ValueError):
    """
    The save's title field doesn't identify the game/region we support
    """


class LevelOutOfRangeError(SaveDataError, IndexError):
    pass


class BossOutOfRangeError(SaveDataError, IndexError):
    pass


class SlotOutOfRangeError(SaveDataError, IndexError):
    pass


class FeatureNotInLevelError(SaveDataError, ValueError):
    """
    The level number is valid, but the level doesn't have the requested
    collectible or exit
    """


class NoCrystalInLevelError(FeatureNotInLevelError):
    pass


class NoSecondGemInLevelError(FeatureNotInLevelError):
    pass


class NoSecretExitInLevelError(FeatureNotInLevelError):
    pass


class InvalidEnumValueError(SaveDataError, ValueError):
    pass


class NameTooLongError(SaveDataError, ValueError):
    pass


class InvalidNameError(SaveDataError, ValueError):
    """
    A name contains a character which the game has no glyph for
    """


class UnsupportedVolumeError(SaveDataError, ValueError):
    """
    A volume which isn't one of the percentages the game can display, or a
    stored volume which can't be mapped back to one
    """
