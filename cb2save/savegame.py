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

import struct
import collections

from .datafile import UInt8, UInt32, Int32, Bits, \
        NumField, ChoiceField, FlagSpan, FlagField, TextField, \
        LabelEnum
from .psx import PsxSaveData
from .errors import InvalidLengthError, UnsupportedTitleError, \
        LevelOutOfRangeError, BossOutOfRangeError, SlotOutOfRangeError, \
        NoCrystalInLevelError, NoSecondGemInLevelError, NoSecretExitInLevelError, \
        InvalidEnumValueError, UnsupportedVolumeError

# Crash Bandicoot 2 (European release) savegame descriptions / format
#
# The game keeps four save slots inside a single memory card block.  Each
# slot is 676 bytes long, and the first one starts at 0x180, right after
# the (single) icon frame.  All offsets below are for slot 1; the slot
# stride takes care of the others.  There's just one checksum for the
# whole thing, stored inside slot 1's area, which covers all four slots.

# Only this product code is known to match the layout below
REQUIRED_SERIAL = b'BESCES-00967'

NUM_SLOTS = 4
SLOT_STRIDE = 676

NUM_LEVELS = 27
NUM_BOSSES = 5

# The "last played level" field can also point at the five boss stages
# and the intro stage
NUM_EXTENDED_LEVELS = 33

CHECKSUM_SEED = 0x12345678
CHECKSUM_WINDOW_OFFSET = 0x180
CHECKSUM_WINDOW_WORDS = 0x2A4
CHECKSUM_SKIP_WORD = 9

# The game's internal volume runs from 0 to 256 in steps of 4; these are
# the percentages shown to the player for each of those 65 steps.
VOLUME_LEVELS = (
    0, 2, 3, 5, 6, 8, 9, 11, 13, 14, 16, 17, 19, 20, 22, 23,
    25, 27, 28, 30, 31, 33, 34, 36, 38, 39, 41, 42, 44, 45, 47, 48,
    50, 52, 53, 55, 56, 58, 59, 61, 63, 64, 66, 67, 69, 70, 72, 73,
    75, 77, 78, 80, 81, 83, 84, 86, 88, 89, 91, 92, 94, 95, 97, 98,
    100,
    )
VOLUME_STEP = 4


class Level(LabelEnum):
    """
    The regular levels, numbered in warp room order
    """

    TURTLE_WOODS =    (1, 'Turtle Woods')
    SNOW_GO =         (2, 'Snow Go')
    HANG_EIGHT =      (3, 'Hang Eight')
    THE_PITS =        (4, 'The Pits')
    CRASH_DASH =      (5, 'Crash Dash')
    SNOW_BIZ =        (6, 'Snow Biz')
    AIR_CRASH =       (7, 'Air Crash')
    BEAR_IT =         (8, 'Bear It')
    CRASH_CRUSH =     (9, 'Crash Crush')
    THE_EEL_DEAL =    (10, 'The Eel Deal')
    PLANT_FOOD =      (11, 'Plant Food')
    SEWER_OR_LATER =  (12, 'Sewer or Later')
    BEAR_DOWN =       (13, 'Bear Down')
    ROAD_TO_RUIN =    (14, 'Road to Ruin')
    UN_BEARABLE =     (15, 'Un-Bearable')
    HANGIN_OUT =      (16, "Hangin' Out")
    DIGGIN_IT =       (17, "Diggin' It")
    COLD_HARD_CRASH = (18, 'Cold Hard Crash')
    RUINATION =       (19, 'Ruination')
    BEE_HAVING =      (20, 'Bee-Having')
    PISTON_IT_AWAY =  (21, 'Piston It Away')
    ROCK_IT =         (22, 'Rock It')
    NIGHT_FIGHT =     (23, 'Night Fight')
    PACK_ATTACK =     (24, 'Pack Attack')
    SPACED_OUT =      (25, 'Spaced Out')
    TOTALLY_BEAR =    (26, 'Totally Bear')
    TOTALLY_FLY =     (27, 'Totally Fly')


class Boss(LabelEnum):
    """
    Boss fights, one at the top of each warp room
    """

    RIPPER_ROO =      (1, 'Ripper Roo')
    KOMODO_BROTHERS = (2, 'Komodo Brothers')
    TINY_TIGER =      (3, 'Tiny Tiger')
    N_GIN =           (4, 'Dr. N. Gin')
    NEO_CORTEX =      (5, 'Dr. Neo Cortex')


class GemType(LabelEnum):
    """
    The two kinds of gem a level can award
    """

    ALL_BOXES_GEM = (1, 'All-Boxes Gem')
    SECOND_GEM =    (2, 'Second Gem')


class Language(LabelEnum):

    ENGLISH = (0, 'English')
    SPANISH = (1, 'Spanish')
    FRENCH =  (2, 'French')
    GERMAN =  (3, 'German')
    ITALIAN = (4, 'Italian')


class AudioType(LabelEnum):

    STEREO = (0, 'Stereo')
    MONO =   (1, 'Mono')


class ChecksumPolicy(LabelEnum):
    """
    What to do with the stored checksum when the save data is exported
    """

    AUTO_CORRECT =    (1, 'Recompute on export')
    PRESERVE_STORED = (2, 'Export stored value as-is')


# Per-level data.  `bits` is the level's flag within the progress, crystal
# and all-boxes gem spans (the same relative position in all three).
# `second_gem` and `secret_exit` are `None` for levels which don't have one.
LevelInfo = collections.namedtuple('LevelInfo', ['bits', 'crystal', 'second_gem', 'secret_exit'])

LEVELS = {
    Level.TURTLE_WOODS:    LevelInfo(Bits(0x02, 0), True,  Bits(0x01, 5), None),
    Level.SNOW_GO:         LevelInfo(Bits(0x04, 0), True,  Bits(0x02, 5), None),
    Level.HANG_EIGHT:      LevelInfo(Bits(0x08, 0), True,  Bits(0x04, 5), None),
    Level.THE_PITS:        LevelInfo(Bits(0x10, 0), True,  None,          None),
    Level.CRASH_DASH:      LevelInfo(Bits(0x20, 0), True,  None,          None),
    Level.SNOW_BIZ:        LevelInfo(Bits(0x80, 0), True,  None,          None),
    Level.AIR_CRASH:       LevelInfo(Bits(0x01, 1), True,  Bits(0x08, 5), Bits(0x01, 0)),
    Level.BEAR_IT:         LevelInfo(Bits(0x02, 1), True,  None,          None),
    Level.CRASH_CRUSH:     LevelInfo(Bits(0x04, 1), True,  None,          None),
    Level.THE_EEL_DEAL:    LevelInfo(Bits(0x08, 1), True,  Bits(0x10, 5), None),
    Level.PLANT_FOOD:      LevelInfo(Bits(0x20, 1), True,  Bits(0x20, 5), None),
    Level.SEWER_OR_LATER:  LevelInfo(Bits(0x40, 1), True,  Bits(0x40, 5), None),
    Level.BEAR_DOWN:       LevelInfo(Bits(0x80, 1), True,  None,          Bits(0x02, 0)),
    Level.ROAD_TO_RUIN:    LevelInfo(Bits(0x01, 2), True,  Bits(0x80, 5), None),
    Level.UN_BEARABLE:     LevelInfo(Bits(0x02, 2), True,  None,          Bits(0x04, 0)),
    Level.HANGIN_OUT:      LevelInfo(Bits(0x08, 2), True,  None,          Bits(0x08, 0)),
    Level.DIGGIN_IT:       LevelInfo(Bits(0x10, 2), True,  Bits(0x01, 6), Bits(0x10, 0)),
    Level.COLD_HARD_CRASH: LevelInfo(Bits(0x20, 2), True,  Bits(0x02, 6), None),
    Level.RUINATION:       LevelInfo(Bits(0x40, 2), True,  Bits(0x04, 6), None),
    Level.BEE_HAVING:      LevelInfo(Bits(0x80, 2), True,  Bits(0x08, 6), None),
    Level.PISTON_IT_AWAY:  LevelInfo(Bits(0x02, 3), True,  Bits(0x10, 6), None),
    Level.ROCK_IT:         LevelInfo(Bits(0x04, 3), True,  None,          None),
    Level.NIGHT_FIGHT:     LevelInfo(Bits(0x08, 3), True,  Bits(0x20, 6), None),
    Level.PACK_ATTACK:     LevelInfo(Bits(0x10, 3), True,  None,          None),
    Level.SPACED_OUT:      LevelInfo(Bits(0x20, 3), True,  Bits(0x40, 6), None),
    Level.TOTALLY_BEAR:    LevelInfo(Bits(0x80, 3), False, None,          None),
    Level.TOTALLY_FLY:     LevelInfo(Bits(0x01, 4), False, None,          None),
    }

# Boss flags live in the progress span, in between the warp rooms' levels
BOSSES = {
    Boss.RIPPER_ROO:      Bits(0x40, 0),
    Boss.KOMODO_BROTHERS: Bits(0x10, 1),
    Boss.TINY_TIGER:      Bits(0x04, 2),
    Boss.N_GIN:           Bits(0x01, 3),
    Boss.NEO_CORTEX:      Bits(0x40, 3),
    }


def _is_index(value):
    """
    Level, boss and slot numbers must be real ints (and not bools)
    """
    return isinstance(value, int) and not isinstance(value, bool)


def validate_level(level, include_extra=False):
    """
    Makes sure `level` is a valid level number (or `Level`), and returns it
    as a plain int.  With `include_extra`, the boss and intro stages are
    accepted as well.
    """
    if isinstance(level, Level):
        level = level.value
    max_level = NUM_EXTENDED_LEVELS if include_extra else NUM_LEVELS
    if not _is_index(level) or level < 1 or level > max_level:
        raise LevelOutOfRangeError(f'Level must be between 1 and {max_level} (got {level})')
    return level


def validate_crystal_level(level):
    level = validate_level(level)
    if not LEVELS[Level(level)].crystal:
        raise NoCrystalInLevelError(f'Level {level} does not have a crystal')
    return level


def validate_boss(boss):
    if isinstance(boss, Boss):
        boss = boss.value
    if not _is_index(boss) or boss < 1 or boss > NUM_BOSSES:
        raise BossOutOfRangeError(f'Boss must be between 1 and {NUM_BOSSES} (got {boss})')
    return boss


def validate_slot(slot):
    if not _is_index(slot) or slot < 1 or slot > NUM_SLOTS:
        raise SlotOutOfRangeError(f'Slot must be between 1 and {NUM_SLOTS} (got {slot})')
    return slot


def validate_gem_type(gem_type):
    """
    Accepts a `GemType` or its numeric value; anything else is an error
    """
    if isinstance(gem_type, GemType):
        return gem_type
    try:
        return GemType(gem_type)
    except ValueError:
        raise InvalidEnumValueError(f'Unknown gem type: {gem_type!r}') from None


def slot_offset(base, slot):
    """
    Absolute offset of a slot-relative field whose slot 1 offset is `base`
    """
    return base + SLOT_STRIDE*(validate_slot(slot)-1)


def compute_checksum(data):
    """
    Computes the checksum for the full save data `data`.  This is a plain
    32-bit sum of the little-endian words in the slot area, starting from a
    fixed seed.  The word holding the checksum itself is skipped.
    """
    end = CHECKSUM_WINDOW_OFFSET + CHECKSUM_WINDOW_WORDS*4
    if len(data) < end:
        raise InvalidLengthError(f'Checksum window needs at least {end} bytes of data')
    total = CHECKSUM_SEED
    window = bytes(data[CHECKSUM_WINDOW_OFFSET:end])
    for idx, (word,) in enumerate(struct.iter_unpack('<I', window)):
        if idx == CHECKSUM_SKIP_WORD:
            continue
        total = (total + word) & 0xFFFFFFFF
    return total


def last_played_label(value):
    """
    Human-readable name for a "last played level" value
    """
    if 1 <= value <= NUM_LEVELS:
        return Level(value).label
    elif NUM_LEVELS < value <= NUM_LEVELS + NUM_BOSSES:
        return f'{Boss(value-NUM_LEVELS).label} (boss stage)'
    elif value == NUM_EXTENDED_LEVELS:
        return 'Intro'
    else:
        return f'Unknown ({value})'


class CrashBandicoot2SaveData():
    """
    Crash Bandicoot 2 save data.  Wraps a generic `PsxSaveData` object (which
    owns the actual bytes), and gives get/set access to everything we know
    about in the four save slots.  Every slot-based method takes a 1-based
    `slot` argument, defaulting to the first slot.

    Nothing in here updates the checksum as a side effect of editing.  The
    checksum is only recomputed when the data is exported via `to_bytes()`
    or `get_stream()`, and only if `checksum_policy` is
    `ChecksumPolicy.AUTO_CORRECT` (the default).  Use
    `ChecksumPolicy.PRESERVE_STORED` to export whatever's been set with
    `set_checksum()`, right or wrong.

    Instances aren't thread-safe; flag updates are read-modify-write.
    """

    # The field table.  Offsets are for slot 1.
    SLOT_EMPTY =     NumField('Slot Empty', 0x184, UInt8, stride=SLOT_STRIDE)
    LAST_LEVEL =     NumField('Last Played Level', 0x188, Int32, stride=SLOT_STRIDE)
    USERNAME =       TextField('Username', 0x18C, 8, stride=SLOT_STRIDE, translate={' ': '['})
    CHECKSUM =       NumField('Checksum', 0x1A4, UInt32)
    LIVES =          NumField('Lives', 0x1AC, Int32, stride=SLOT_STRIDE)
    WUMPA_FRUITS =   NumField('Wumpa Fruits', 0x1B0, Int32, stride=SLOT_STRIDE)
    AKU_AKU_MASKS =  NumField('Aku Aku Masks', 0x1B4, Int32, stride=SLOT_STRIDE)
    SECRETS =        FlagSpan('Secrets', 0x1B8, 1, stride=SLOT_STRIDE)
    POLAR_TRICK =    FlagField('Polar Trick', 0x1B8, 0x20, stride=SLOT_STRIDE)
    PROGRESS =       FlagSpan('Progress', 0x1BC, 5, stride=SLOT_STRIDE)
    CRYSTALS =       FlagSpan('Crystals', 0x1C4, 5, stride=SLOT_STRIDE)
    GEMS =           FlagSpan('Gems', 0x1CC, 8, stride=SLOT_STRIDE)
    AUDIO_TYPE =     ChoiceField('Audio Type', 0x1D4, UInt8, AudioType, stride=SLOT_STRIDE)
    EFFECTS_VOLUME = NumField('Effects Volume', 0x1D8, Int32, stride=SLOT_STRIDE)
    MUSIC_VOLUME =   NumField('Music Volume', 0x1DC, Int32, stride=SLOT_STRIDE)
    LANGUAGE =       ChoiceField('Language', 0x3FD, UInt8, Language, stride=SLOT_STRIDE)
    SCREEN_OFFSET =  NumField('Screen Offset', 0x41C, Int32, stride=SLOT_STRIDE)

    def __init__(self, data, checksum_policy=ChecksumPolicy.AUTO_CORRECT):
        """
        `data` can be a bytes-like object or a readable binary file object;
        it gets copied, and the original is never modified.  Will raise an
        `UnsupportedTitleError` if the save isn't from the European release.
        """
        self.header = PsxSaveData(data)
        self.buffer = self.header.buffer
        if not self.header.get_raw_title_field().startswith(REQUIRED_SERIAL):
            raise UnsupportedTitleError(
                    'Only the European version of Crash Bandicoot 2 ({}) is supported'.format(
                        REQUIRED_SERIAL.decode('ascii'),
                        ))
        self._checksum_policy = ChecksumPolicy(checksum_policy)

    @property
    def checksum_policy(self):
        return self._checksum_policy

    def get_title_field(self):
        return self.header.get_title_field()

    ###
    ### Checksum
    ###

    def compute_checksum(self):
        """
        Computes what the checksum *should* be for the current data
        """
        return compute_checksum(self.buffer.export())

    def get_checksum(self):
        """
        Returns the checksum currently stored in the save
        """
        return self.CHECKSUM.get(self.buffer)

    def set_checksum(self, checksum):
        """
        Stores `checksum` without checking it against the data
        """
        self.CHECKSUM.set(self.buffer, checksum)

    def is_checksum_valid(self):
        return self.get_checksum() == self.compute_checksum()

    def _apply_checksum_policy(self):
        if self._checksum_policy == ChecksumPolicy.AUTO_CORRECT:
            self.set_checksum(self.compute_checksum())

    def to_bytes(self):
        """
        Returns a copy of the save data, fixing the checksum first if our
        policy says to
        """
        self._apply_checksum_policy()
        return self.buffer.export()

    def get_stream(self):
        """
        Like `to_bytes()`, but wrapped in a new in-memory stream
        """
        self._apply_checksum_policy()
        return self.header.get_stream()

    ###
    ### Level / boss flags
    ###

    def get_progress_status(self, level, slot=1):
        """
        Returns whether `level` has been traversed
        """
        level = validate_level(level)
        validate_slot(slot)
        return self.PROGRESS.get(self.buffer, LEVELS[Level(level)].bits, slot)

    def set_progress_status(self, level, traversed, slot=1):
        level = validate_level(level)
        validate_slot(slot)
        self.PROGRESS.set(self.buffer, LEVELS[Level(level)].bits, traversed, slot)

    def get_crystal_status(self, level, slot=1):
        level = validate_crystal_level(level)
        validate_slot(slot)
        return self.CRYSTALS.get(self.buffer, LEVELS[Level(level)].bits, slot)

    def set_crystal_status(self, level, collected, slot=1):
        level = validate_crystal_level(level)
        validate_slot(slot)
        self.CRYSTALS.set(self.buffer, LEVELS[Level(level)].bits, collected, slot)

    def _gem_bits(self, level, gem_type):
        """
        Returns the gem flag for the given level and gem type, raising
        `NoSecondGemInLevelError` for levels without a second gem
        """
        level = validate_level(level)
        gem_type = validate_gem_type(gem_type)
        info = LEVELS[Level(level)]
        if gem_type == GemType.ALL_BOXES_GEM:
            return info.bits
        if info.second_gem is None:
            raise NoSecondGemInLevelError(f'Level {level} does not have a second gem')
        return info.second_gem

    def get_gem_status(self, level, gem_type, slot=1):
        bits = self._gem_bits(level, gem_type)
        validate_slot(slot)
        return self.GEMS.get(self.buffer, bits, slot)

    def set_gem_status(self, level, gem_type, collected, slot=1):
        bits = self._gem_bits(level, gem_type)
        validate_slot(slot)
        self.GEMS.set(self.buffer, bits, collected, slot)

    def _secret_exit_bits(self, level):
        level = validate_level(level)
        bits = LEVELS[Level(level)].secret_exit
        if bits is None:
            raise NoSecretExitInLevelError(f'Level {level} does not have a secret exit')
        return bits

    def get_secret_exit_status(self, level, slot=1):
        bits = self._secret_exit_bits(level)
        validate_slot(slot)
        return self.SECRETS.get(self.buffer, bits, slot)

    def set_secret_exit_status(self, level, found, slot=1):
        bits = self._secret_exit_bits(level)
        validate_slot(slot)
        self.SECRETS.set(self.buffer, bits, found, slot)

    def get_boss_status(self, boss, slot=1):
        """
        Returns whether `boss` has been defeated
        """
        boss = validate_boss(boss)
        validate_slot(slot)
        return self.PROGRESS.get(self.buffer, BOSSES[Boss(boss)], slot)

    def set_boss_status(self, boss, defeated, slot=1):
        boss = validate_boss(boss)
        validate_slot(slot)
        self.PROGRESS.set(self.buffer, BOSSES[Boss(boss)], defeated, slot)

    def get_polar_trick_status(self, slot=1):
        validate_slot(slot)
        return self.POLAR_TRICK.get(self.buffer, slot)

    def set_polar_trick_status(self, performed, slot=1):
        validate_slot(slot)
        self.POLAR_TRICK.set(self.buffer, performed, slot)

    def count_progress(self, slot=1):
        return sum(self.get_progress_status(level, slot) for level in Level)

    def count_crystals(self, slot=1):
        return sum(self.get_crystal_status(level, slot) for level in Level if LEVELS[level].crystal)

    def count_gems(self, slot=1):
        """
        Total number of gems collected, of both types
        """
        total = 0
        for level, info in LEVELS.items():
            total += self.get_gem_status(level, GemType.ALL_BOXES_GEM, slot)
            if info.second_gem is not None:
                total += self.get_gem_status(level, GemType.SECOND_GEM, slot)
        return total

    ###
    ### Numeric data
    ###

    def _get_field(self, field, slot):
        validate_slot(slot)
        return field.get(self.buffer, slot)

    def _set_field(self, field, value, slot):
        validate_slot(slot)
        field.set(self.buffer, value, slot)

    def get_aku_aku_masks(self, slot=1):
        return self._get_field(self.AKU_AKU_MASKS, slot)

    def set_aku_aku_masks(self, masks, slot=1):
        self._set_field(self.AKU_AKU_MASKS, masks, slot)

    def get_lives(self, slot=1):
        return self._get_field(self.LIVES, slot)

    def set_lives(self, lives, slot=1):
        self._set_field(self.LIVES, lives, slot)

    def get_wumpa_fruits(self, slot=1):
        return self._get_field(self.WUMPA_FRUITS, slot)

    def set_wumpa_fruits(self, fruits, slot=1):
        self._set_field(self.WUMPA_FRUITS, fruits, slot)

    def get_screen_offset(self, slot=1):
        """
        Horizontal screen offset, as set in the options menu (signed)
        """
        return self._get_field(self.SCREEN_OFFSET, slot)

    def set_screen_offset(self, screen_offset, slot=1):
        self._set_field(self.SCREEN_OFFSET, screen_offset, slot)

    def get_last_played_level(self, slot=1):
        return self._get_field(self.LAST_LEVEL, slot)

    def set_last_played_level(self, level, slot=1):
        level = validate_level(level, include_extra=True)
        self._set_field(self.LAST_LEVEL, level, slot)

    def is_slot_empty(self, slot=1):
        return self._get_field(self.SLOT_EMPTY, slot) == 1

    def set_slot_empty(self, empty, slot=1):
        self._set_field(self.SLOT_EMPTY, 1 if empty else 0, slot)

    ###
    ### Settings
    ###

    def get_language(self, slot=1):
        """
        Returns a `Language`, or the raw byte if it isn't one we know
        """
        return self._get_field(self.LANGUAGE, slot)

    def set_language(self, language, slot=1):
        self._set_field(self.LANGUAGE, language, slot)

    def get_audio_type(self, slot=1):
        """
        Returns an `AudioType`, or the raw byte if it isn't one we know
        """
        return self._get_field(self.AUDIO_TYPE, slot)

    def set_audio_type(self, audio_type, slot=1):
        self._set_field(self.AUDIO_TYPE, audio_type, slot)

    def _get_volume(self, field, slot):
        raw = self._get_field(field, slot)
        index, remainder = divmod(raw, VOLUME_STEP)
        if remainder != 0 or index < 0 or index >= len(VOLUME_LEVELS):
            raise UnsupportedVolumeError(f'Stored {field.debug_label} value {raw} does not map to a known volume')
        return VOLUME_LEVELS[index]

    def _set_volume(self, field, volume, slot):
        validate_slot(slot)
        if isinstance(volume, bool) or volume not in VOLUME_LEVELS:
            raise UnsupportedVolumeError(f'{field.debug_label} must be one of: {", ".join(str(v) for v in VOLUME_LEVELS)}')
        self._set_field(field, VOLUME_LEVELS.index(volume)*VOLUME_STEP, slot)

    def get_effects_volume(self, slot=1):
        """
        Sound effects volume, as a percentage
        """
        return self._get_volume(self.EFFECTS_VOLUME, slot)

    def set_effects_volume(self, volume, slot=1):
        """
        Sets the sound effects volume.  `volume` must be one of the
        percentages in `VOLUME_LEVELS`.
        """
        self._set_volume(self.EFFECTS_VOLUME, volume, slot)

    def get_music_volume(self, slot=1):
        return self._get_volume(self.MUSIC_VOLUME, slot)

    def set_music_volume(self, volume, slot=1):
        self._set_volume(self.MUSIC_VOLUME, volume, slot)

    def get_username(self, slot=1):
        return self._get_field(self.USERNAME, slot)

    def set_username(self, username, slot=1):
        """
        Sets the player name.  Names can be up to eight characters; the
        game's font puts its space glyph where ASCII has `[`, which the
        field translation takes care of.  Anything outside of printable
        ASCII, or a literal `[`, raises `InvalidNameError`.
        """
        self._set_field(self.USERNAME, username, slot)
