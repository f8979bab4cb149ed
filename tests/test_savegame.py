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
import struct

import pytest

from cb2save.savegame import CrashBandicoot2SaveData, ChecksumPolicy, \
        Level, Boss, GemType, Language, AudioType, LEVELS, BOSSES, VOLUME_LEVELS, \
        compute_checksum, validate_level, validate_crystal_level, validate_boss, \
        validate_slot, validate_gem_type, slot_offset, last_played_label
from cb2save.errors import InvalidLengthError, NullInputError, UnsupportedTitleError, \
        LevelOutOfRangeError, BossOutOfRangeError, SlotOutOfRangeError, \
        NoCrystalInLevelError, NoSecondGemInLevelError, NoSecretExitInLevelError, \
        InvalidEnumValueError, NameTooLongError, InvalidNameError, UnsupportedVolumeError

from .savedata import build_save, reference_checksum, SLOT_STRIDE

ALL_LEVELS = list(range(1, 28))
CRYSTAL_LEVELS = list(range(1, 26))
SECOND_GEM_LEVELS = [1, 2, 3, 7, 10, 11, 12, 14, 17, 18, 19, 20, 21, 23, 25]
NO_SECOND_GEM_LEVELS = [4, 5, 6, 8, 9, 13, 15, 16, 22, 24, 26, 27]
SECRET_EXIT_LEVELS = [7, 13, 15, 16, 17]
ALL_BOSSES = list(range(1, 6))


def flag_states(save, slot=1):
    """
    Snapshot of every flag we know about in the given slot
    """
    states = {}
    for level in ALL_LEVELS:
        states[('progress', level)] = save.get_progress_status(level, slot)
        states[('gem', level)] = save.get_gem_status(level, GemType.ALL_BOXES_GEM, slot)
    for level in CRYSTAL_LEVELS:
        states[('crystal', level)] = save.get_crystal_status(level, slot)
    for level in SECOND_GEM_LEVELS:
        states[('second_gem', level)] = save.get_gem_status(level, GemType.SECOND_GEM, slot)
    for level in SECRET_EXIT_LEVELS:
        states[('secret_exit', level)] = save.get_secret_exit_status(level, slot)
    for boss in ALL_BOSSES:
        states[('boss', boss)] = save.get_boss_status(boss, slot)
    states[('polar', None)] = save.get_polar_trick_status(slot)
    return states


def set_flag(save, kind, ident, state, slot=1):
    match kind:
        case 'progress':
            save.set_progress_status(ident, state, slot)
        case 'gem':
            save.set_gem_status(ident, GemType.ALL_BOXES_GEM, state, slot)
        case 'crystal':
            save.set_crystal_status(ident, state, slot)
        case 'second_gem':
            save.set_gem_status(ident, GemType.SECOND_GEM, state, slot)
        case 'secret_exit':
            save.set_secret_exit_status(ident, state, slot)
        case 'boss':
            save.set_boss_status(ident, state, slot)
        case 'polar':
            save.set_polar_trick_status(state, slot)


ALL_FLAGS = list(flag_states(CrashBandicoot2SaveData(build_save())).keys())


###
### Construction
###

def test_none_rejected():
    with pytest.raises(NullInputError):
        CrashBandicoot2SaveData(None)


@pytest.mark.parametrize('length', [0, 8319, 8321])
def test_wrong_length_rejected(length):
    with pytest.raises(InvalidLengthError) as excinfo:
        CrashBandicoot2SaveData(bytes(length))
    assert str(excinfo.value).startswith('The size of Single Save Format files')


@pytest.mark.parametrize('title', [
    b'BASCUS-94154CRASH2',
    b'BESCES-00344CRASH2',
    b'BESCES-0096',
    b'',
    ])
def test_wrong_title_rejected(title):
    with pytest.raises(UnsupportedTitleError) as excinfo:
        CrashBandicoot2SaveData(build_save(title=title))
    assert str(excinfo.value).startswith('Only the European version of Crash Bandicoot 2')


def test_file_object(save_bytes):
    save = CrashBandicoot2SaveData(io.BytesIO(save_bytes))
    assert save.get_aku_aku_masks() == 2
    assert save.get_title_field() == 'BESCES-00967CRASH2'


###
### Copy isolation
###

def test_callers_cant_interfere_with_stream(save):
    stream = save.get_stream()
    stream.seek(0)
    stream.write(bytes(8320))
    exported = bytearray(save.to_bytes())
    exported[0x1B4] = 99
    assert save.get_aku_aku_masks() == 2
    assert save.get_checksum() == reference_checksum(build_save())


def test_original_data_is_not_changed(save_bytes):
    source = bytearray(save_bytes)
    save = CrashBandicoot2SaveData(source)
    save.set_aku_aku_masks(1)
    save.set_checksum(515)
    save.to_bytes()
    assert bytes(source) == save_bytes
    source[0x1B4] = 3
    assert save.get_aku_aku_masks() == 1


###
### Checksum
###

def test_get_checksum(save):
    assert save.get_checksum() == reference_checksum(build_save())


def test_compute_checksum_matches_stored(save):
    assert save.compute_checksum() == save.get_checksum()
    assert save.compute_checksum() == save.compute_checksum()
    assert save.is_checksum_valid()


def test_checksum_of_empty_window():
    data = bytearray(8320)
    assert compute_checksum(data) == 0x12345678


def test_checksum_skips_its_own_word():
    data = bytearray(8320)
    struct.pack_into('<I', data, 0x1A4, 0xDEADBEEF)
    assert compute_checksum(data) == 0x12345678


def test_checksum_window_edges():
    data = bytearray(8320)
    struct.pack_into('<I', data, 0x180, 1)
    struct.pack_into('<I', data, 0xC0C, 2)
    # Just outside the window on both ends
    struct.pack_into('<I', data, 0x17C, 0x100)
    struct.pack_into('<I', data, 0xC10, 0x200)
    assert compute_checksum(data) == 0x1234567B


def test_checksum_wraps():
    data = bytearray(8320)
    struct.pack_into('<I', data, 0x180, 0xFFFFFFFF)
    struct.pack_into('<I', data, 0x184, 0xEDCBA989)
    assert compute_checksum(data) == 0


def test_checksum_needs_the_whole_window():
    with pytest.raises(InvalidLengthError):
        compute_checksum(bytes(0xC00))


@pytest.mark.parametrize('checksum', [0, 7, 0xA14DC582, 0xFFFFFFFF])
def test_set_checksum(save, checksum):
    save.set_checksum(checksum)
    assert save.get_checksum() == checksum


@pytest.mark.parametrize('checksum', [-1, 2**32])
def test_set_checksum_bounds(save, checksum):
    with pytest.raises(ValueError):
        save.set_checksum(checksum)


def test_checksum_goes_stale(save):
    save.set_lives(99)
    assert not save.is_checksum_valid()


def test_auto_correct_on_export(save):
    assert save.checksum_policy == ChecksumPolicy.AUTO_CORRECT
    save.set_checksum(491)
    save.set_lives(5)
    data = save.to_bytes()
    assert save.get_checksum() != 491
    assert save.get_checksum() == save.compute_checksum()
    assert struct.unpack_from('<I', data, 0x1A4)[0] == reference_checksum(data)


def test_auto_correct_on_stream(save):
    save.set_checksum(491)
    data = save.get_stream().read()
    assert save.get_checksum() == save.compute_checksum()
    assert struct.unpack_from('<I', data, 0x1A4)[0] == reference_checksum(data)


def test_preserve_stored_on_export(save_bytes):
    save = CrashBandicoot2SaveData(save_bytes, checksum_policy=ChecksumPolicy.PRESERVE_STORED)
    save.set_checksum(491)
    data = save.to_bytes()
    assert save.get_checksum() == 491
    assert struct.unpack_from('<I', data, 0x1A4)[0] == 491
    assert struct.unpack_from('<I', save.get_stream().read(), 0x1A4)[0] == 491


def test_policy_is_read_only(save):
    with pytest.raises(AttributeError):
        save.checksum_policy = ChecksumPolicy.PRESERVE_STORED


###
### Validation helpers
###

def test_validation_helpers():
    assert validate_level(1) == 1
    assert validate_level(Level.TOTALLY_FLY) == 27
    assert validate_level(33, include_extra=True) == 33
    assert validate_crystal_level(25) == 25
    assert validate_boss(Boss.NEO_CORTEX) == 5
    assert validate_slot(4) == 4
    assert validate_gem_type(2) is GemType.SECOND_GEM
    assert slot_offset(0x1B4, 1) == 0x1B4
    assert slot_offset(0x1B4, 4) == 0x1B4 + 3*676


@pytest.mark.parametrize('level', [-1, 0, 28, 1.5, True, '1', Boss.RIPPER_ROO])
def test_level_out_of_range(level):
    with pytest.raises(LevelOutOfRangeError):
        validate_level(level)


@pytest.mark.parametrize('level', [0, 34])
def test_extended_level_out_of_range(level):
    with pytest.raises(LevelOutOfRangeError):
        validate_level(level, include_extra=True)


def test_slot_offset_validates():
    with pytest.raises(SlotOutOfRangeError):
        slot_offset(0x1B4, 5)


###
### Level / boss flags
###

def test_reference_progress(save):
    assert save.get_progress_status(1)
    for level in range(2, 28):
        assert not save.get_progress_status(level)


def test_reference_crystals(save):
    assert save.get_crystal_status(1)
    for level in range(2, 26):
        assert not save.get_crystal_status(level)


def test_reference_gems(save):
    for level in ALL_LEVELS:
        assert not save.get_gem_status(level, GemType.ALL_BOXES_GEM)
    for level in SECOND_GEM_LEVELS:
        assert not save.get_gem_status(level, GemType.SECOND_GEM)


def test_reference_counts(save):
    assert save.count_progress() == 1
    assert save.count_crystals() == 1
    assert save.count_gems() == 0


@pytest.mark.parametrize('flag', ALL_FLAGS)
@pytest.mark.parametrize('state', [True, False])
def test_flag_round_trip(save, flag, state):
    kind, ident = flag
    for start in (True, False):
        set_flag(save, kind, ident, not start)
        before = flag_states(save)
        set_flag(save, kind, ident, state)
        after = flag_states(save)
        assert after[flag] == state
        del before[flag]
        del after[flag]
        assert before == after


def test_flags_in_all_other_positions_survive(save):
    for flag in ALL_FLAGS:
        set_flag(save, *flag, True)
    set_flag(save, 'progress', 8, False)
    states = flag_states(save)
    assert not states[('progress', 8)]
    assert all(state for flag, state in states.items() if flag != ('progress', 8))


def test_flag_on_remains_on(save):
    save.set_progress_status(1, True)
    save.set_crystal_status(1, True)
    assert save.get_progress_status(1)
    assert save.get_crystal_status(1)


def test_flag_off_remains_off(save):
    save.set_progress_status(2, False)
    save.set_crystal_status(2, False)
    save.set_gem_status(2, GemType.ALL_BOXES_GEM, False)
    save.set_gem_status(2, GemType.SECOND_GEM, False)
    assert not save.get_progress_status(2)
    assert not save.get_crystal_status(2)
    assert not save.get_gem_status(2, GemType.ALL_BOXES_GEM)
    assert not save.get_gem_status(2, GemType.SECOND_GEM)


def test_unknown_bits_are_preserved(save_bytes):
    data = bytearray(save_bytes)
    # Bit 0 of the progress span isn't mapped to anything
    data[0x1BC] |= 0x01
    save = CrashBandicoot2SaveData(data)
    save.set_progress_status(1, False)
    save.set_boss_status(1, True)
    assert save.to_bytes()[0x1BC] == 0x41


def test_flag_storage(save):
    save.set_progress_status(Level.AIR_CRASH, True)
    save.set_boss_status(Boss.KOMODO_BROTHERS, True)
    save.set_gem_status(Level.SPACED_OUT, GemType.SECOND_GEM, True)
    save.set_secret_exit_status(Level.UN_BEARABLE, True)
    save.set_polar_trick_status(True)
    data = save.to_bytes()
    assert data[0x1BD] == 0x11
    assert data[0x1D2] == 0x40
    assert data[0x1B8] == 0x24


def test_tables_are_complete():
    assert set(LEVELS) == set(Level)
    assert set(BOSSES) == set(Boss)
    assert [l.value for l in Level if LEVELS[l].second_gem is not None] == SECOND_GEM_LEVELS
    assert [l.value for l in Level if LEVELS[l].secret_exit is not None] == SECRET_EXIT_LEVELS
    assert [l.value for l in Level if LEVELS[l].crystal] == CRYSTAL_LEVELS


def test_no_two_progress_flags_collide():
    bits = [info.bits for info in LEVELS.values()] + list(BOSSES.values())
    assert len(set(bits)) == len(bits)


@pytest.mark.parametrize('level', [-1, 0, 28, 1.5])
def test_level_methods_reject_bad_levels(save, level):
    for call in [
            lambda: save.get_progress_status(level),
            lambda: save.set_progress_status(level, True),
            lambda: save.get_crystal_status(level),
            lambda: save.set_crystal_status(level, True),
            lambda: save.get_gem_status(level, GemType.ALL_BOXES_GEM),
            lambda: save.set_gem_status(level, GemType.ALL_BOXES_GEM, True),
            lambda: save.get_secret_exit_status(level),
            lambda: save.set_secret_exit_status(level, True),
            ]:
        with pytest.raises(LevelOutOfRangeError):
            call()


@pytest.mark.parametrize('level', [26, 27])
def test_no_crystal(save, level):
    with pytest.raises(NoCrystalInLevelError):
        save.get_crystal_status(level)
    with pytest.raises(NoCrystalInLevelError):
        save.set_crystal_status(level, True)


@pytest.mark.parametrize('level', NO_SECOND_GEM_LEVELS)
def test_no_second_gem(save, level):
    before = save.to_bytes()
    with pytest.raises(NoSecondGemInLevelError):
        save.get_gem_status(level, GemType.SECOND_GEM)
    with pytest.raises(NoSecondGemInLevelError):
        save.set_gem_status(level, GemType.SECOND_GEM, True)
    assert save.to_bytes() == before


@pytest.mark.parametrize('level', [l for l in ALL_LEVELS if l not in SECRET_EXIT_LEVELS])
def test_no_secret_exit(save, level):
    with pytest.raises(NoSecretExitInLevelError):
        save.get_secret_exit_status(level)
    with pytest.raises(NoSecretExitInLevelError):
        save.set_secret_exit_status(level, True)


@pytest.mark.parametrize('gem_type', [0, 3, 'gem', None])
def test_invalid_gem_type(save, gem_type):
    with pytest.raises(InvalidEnumValueError):
        save.get_gem_status(1, gem_type)
    with pytest.raises(InvalidEnumValueError):
        save.set_gem_status(1, gem_type, True)


def test_gem_type_by_value(save):
    save.set_gem_status(10, 2, True)
    assert save.get_gem_status(10, GemType.SECOND_GEM)
    assert not save.get_gem_status(10, 1)


@pytest.mark.parametrize('boss', [-1, 0, 6, 1.5, True, Level.TURTLE_WOODS])
def test_bad_boss(save, boss):
    with pytest.raises(BossOutOfRangeError):
        save.get_boss_status(boss)
    with pytest.raises(BossOutOfRangeError):
        save.set_boss_status(boss, True)


###
### Slots
###

SLOT_CALLS = [
    lambda save, slot: save.get_progress_status(1, slot),
    lambda save, slot: save.set_progress_status(1, True, slot),
    lambda save, slot: save.get_crystal_status(1, slot),
    lambda save, slot: save.get_gem_status(1, GemType.SECOND_GEM, slot),
    lambda save, slot: save.set_secret_exit_status(7, True, slot),
    lambda save, slot: save.get_boss_status(1, slot),
    lambda save, slot: save.set_polar_trick_status(True, slot),
    lambda save, slot: save.get_aku_aku_masks(slot),
    lambda save, slot: save.set_lives(3, slot),
    lambda save, slot: save.get_wumpa_fruits(slot),
    lambda save, slot: save.set_screen_offset(1, slot),
    lambda save, slot: save.get_last_played_level(slot),
    lambda save, slot: save.set_username('A', slot),
    lambda save, slot: save.get_language(slot),
    lambda save, slot: save.set_audio_type(AudioType.MONO, slot),
    lambda save, slot: save.set_effects_volume(50, slot),
    lambda save, slot: save.get_music_volume(slot),
    lambda save, slot: save.is_slot_empty(slot),
    lambda save, slot: save.get_username(slot),
    lambda save, slot: save.set_language(Language.FRENCH, slot),
    lambda save, slot: save.get_audio_type(slot),
    lambda save, slot: save.set_music_volume(50, slot),
    lambda save, slot: save.get_effects_volume(slot),
    lambda save, slot: save.set_slot_empty(True, slot),
    lambda save, slot: save.get_screen_offset(slot),
    lambda save, slot: save.set_wumpa_fruits(10, slot),
    lambda save, slot: save.set_aku_aku_masks(1, slot),
    lambda save, slot: save.set_last_played_level(2, slot),
    lambda save, slot: save.get_secret_exit_status(7, slot),
    lambda save, slot: save.set_crystal_status(1, True, slot),
    lambda save, slot: save.set_gem_status(1, GemType.ALL_BOXES_GEM, True, slot),
    lambda save, slot: save.set_boss_status(Boss.TINY_TIGER, True, slot),
    ]


@pytest.mark.parametrize('slot', [-1, 0, 5, 1.5, True])
@pytest.mark.parametrize('call', SLOT_CALLS)
def test_bad_slot(save, slot, call):
    before = save.to_bytes()
    with pytest.raises(SlotOutOfRangeError):
        call(save, slot)
    assert save.to_bytes() == before


@pytest.mark.parametrize('slot', [1, 2, 3, 4])
def test_slot_independence(save, slot):
    before = {other: flag_states(save, other) for other in range(1, 5) if other != slot}
    masks = {other: save.get_aku_aku_masks(other) for other in range(1, 5) if other != slot}
    for flag in ALL_FLAGS:
        set_flag(save, *flag, True, slot)
    save.set_aku_aku_masks(77, slot)
    save.set_username('SLOT', slot)
    save.set_music_volume(100, slot)
    for other in before:
        assert flag_states(save, other) == before[other]
        assert save.get_aku_aku_masks(other) == masks[other]
        assert save.get_username(other) != 'SLOT'
    assert save.get_aku_aku_masks(slot) == 77


def test_slot_stride(save):
    save.set_lives(42, 3)
    data = save.to_bytes()
    assert struct.unpack_from('<i', data, 0x1AC + 2*SLOT_STRIDE)[0] == 42


def test_slot_empty(save):
    assert not save.is_slot_empty(1)
    assert save.is_slot_empty(2)
    save.set_slot_empty(True, 1)
    save.set_slot_empty(False, 4)
    assert save.is_slot_empty(1)
    assert not save.is_slot_empty(4)


###
### Numeric data
###

def test_reference_numbers(save):
    assert save.get_aku_aku_masks() == 2
    assert save.get_lives() == 4
    assert save.get_wumpa_fruits() == 17
    assert save.get_last_played_level() == 1
    assert save.get_screen_offset() == 0


@pytest.mark.parametrize('masks', [-1, 0, 1, 2, 3, 4])
def test_set_aku_aku_masks(save, masks):
    save.set_aku_aku_masks(masks)
    assert save.get_aku_aku_masks() == masks


def test_numbers(save):
    save.set_lives(99)
    save.set_wumpa_fruits(12345)
    save.set_screen_offset(-8)
    assert save.get_lives() == 99
    assert save.get_wumpa_fruits() == 12345
    assert save.get_screen_offset() == -8


def test_number_bounds(save):
    with pytest.raises(ValueError):
        save.set_lives(2**31)
    assert save.get_lives() == 4


@pytest.mark.parametrize('level', [1, 27, 28, 33])
def test_last_played_level(save, level):
    save.set_last_played_level(level)
    assert save.get_last_played_level() == level


@pytest.mark.parametrize('level', [0, 34])
def test_last_played_level_range(save, level):
    with pytest.raises(LevelOutOfRangeError):
        save.set_last_played_level(level)
    assert save.get_last_played_level() == 1


def test_last_played_labels():
    assert last_played_label(1) == 'Turtle Woods'
    assert last_played_label(28) == 'Ripper Roo (boss stage)'
    assert last_played_label(33) == 'Intro'
    assert last_played_label(40) == 'Unknown (40)'


###
### Settings
###

def test_language(save):
    assert save.get_language() is Language.ENGLISH
    save.set_language(Language.ITALIAN, 2)
    assert save.get_language(2) is Language.ITALIAN
    assert save.to_bytes()[0x3FD + SLOT_STRIDE] == 4


def test_unknown_language_is_kept(save):
    save.set_language(9)
    assert save.get_language() == 9


def test_language_rejects_other_enums(save):
    before = save.to_bytes()
    with pytest.raises(InvalidEnumValueError):
        save.set_language(AudioType.MONO)
    with pytest.raises(InvalidEnumValueError):
        save.set_audio_type(Language.FRENCH)
    assert save.to_bytes() == before


def test_audio_type(save):
    assert save.get_audio_type() is AudioType.STEREO
    save.set_audio_type(AudioType.MONO)
    assert save.get_audio_type() is AudioType.MONO
    save.set_audio_type(0)
    assert save.get_audio_type() is AudioType.STEREO


def test_reference_volumes(save):
    assert save.get_effects_volume() == 100
    assert save.get_music_volume() == 50


def test_volume_table():
    assert len(VOLUME_LEVELS) == 65
    assert VOLUME_LEVELS[0] == 0
    assert VOLUME_LEVELS[-1] == 100
    assert list(VOLUME_LEVELS) == sorted(set(VOLUME_LEVELS))


@pytest.mark.parametrize('volume', VOLUME_LEVELS)
def test_volume_round_trip(save, volume):
    save.set_effects_volume(volume)
    save.set_music_volume(volume)
    assert save.get_effects_volume() == volume
    assert save.get_music_volume() == volume


def test_volume_storage(save):
    save.set_music_volume(2)
    assert struct.unpack_from('<i', save.to_bytes(), 0x1DC)[0] == 4


@pytest.mark.parametrize('volume', [-2, 1, 4, 51, 101, True])
def test_unsupported_volume(save, volume):
    with pytest.raises(UnsupportedVolumeError):
        save.set_effects_volume(volume)
    with pytest.raises(UnsupportedVolumeError):
        save.set_music_volume(volume)
    assert save.get_effects_volume() == 100
    assert save.get_music_volume() == 50


@pytest.mark.parametrize('raw', [-4, 2, 260, 1024])
def test_stored_volume_out_of_table(save_bytes, raw):
    data = bytearray(save_bytes)
    struct.pack_into('<i', data, 0x1D8, raw)
    save = CrashBandicoot2SaveData(data)
    with pytest.raises(UnsupportedVolumeError):
        save.get_effects_volume()


###
### Username
###

def test_reference_username(save):
    assert save.get_username() == 'CRASH'
    assert save.get_username(2) == ''


def test_username_with_space(save):
    save.set_username('MR CRASH')
    assert save.get_username() == 'MR CRASH'
    assert save.to_bytes()[0x18C:0x194] == b'MR[CRASH'


def test_username_full_length(save):
    save.set_username('BANDICOO')
    assert save.get_username() == 'BANDICOO'


def test_username_shorter_is_terminated(save):
    save.set_username('COCO')
    assert save.to_bytes()[0x18C:0x194] == b'COCO\x00\x00\x00\x00'
    assert save.get_username() == 'COCO'


def test_username_too_long(save):
    before = save.to_bytes()
    with pytest.raises(NameTooLongError):
        save.set_username('BANDICOOT')
    assert save.to_bytes() == before


@pytest.mark.parametrize('username', ['A[B', 'CRASH\u00c9', 'NUL\x00'])
def test_username_unstorable_characters(save, username):
    before = save.to_bytes()
    with pytest.raises(InvalidNameError):
        save.set_username(username)
    assert save.to_bytes() == before
    assert save.get_username() == 'CRASH'


def test_username_none(save):
    with pytest.raises(NullInputError):
        save.set_username(None)
    assert save.get_username() == 'CRASH'


def test_username_slot_stride(save):
    save.set_username('TAWNA', 4)
    assert save.to_bytes()[0x18C + 3*SLOT_STRIDE:0x191 + 3*SLOT_STRIDE] == b'TAWNA'


def test_debug_offsets(save, debug, capsys):
    save.get_aku_aku_masks(2)
    err = capsys.readouterr().err
    assert 'Aku Aku Masks (Slot 2)' in err
    assert f'0x{0x1B4 + SLOT_STRIDE:X} absolute' in err
