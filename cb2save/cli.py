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

import os
import enum
import math
import argparse
from . import __version__, set_debug
from .errors import NameTooLongError, InvalidNameError
from .psx import has_image_support
from .savegame import CrashBandicoot2SaveData, ChecksumPolicy, \
        Level, Boss, GemType, Language, AudioType, \
        LEVELS, VOLUME_LEVELS, NUM_SLOTS, last_played_label


def _enum_type(kwargs, action_name):
    """
    Pulls the `type` argument out of an argparse action's kwargs, making
    sure it's an Enum
    """
    enum_type = kwargs.pop('type', None)
    if enum_type is None or not issubclass(enum_type, enum.Enum):
        raise TypeError(f'type must be an Enum when using {action_name}')
    return enum_type


class EnumSetAction(argparse.Action):
    """
    Argparse Action which collects Enum members into a set, one per use of
    the option, with an extra `all` choice.  `choices` may be given as a
    subset of the enum, for things which only some levels have (crystals,
    second gems, secret exits).
    """

    def __init__(self, **kwargs):
        self._enum = _enum_type(kwargs, 'EnumSetAction')
        self._members = tuple(kwargs.get('choices', self._enum))
        kwargs['choices'] = tuple(e.name.lower() for e in self._members) + ('all',)
        super().__init__(**kwargs)

    def __call__(self, parser, namespace, this_value, option_string):
        arg_value = getattr(namespace, self.dest)
        if not isinstance(arg_value, set):
            arg_value = set()
        if this_value == 'all':
            arg_value.update(self._members)
        else:
            arg_value.add(self._enum[this_value.upper()])
        setattr(namespace, self.dest, arg_value)


class EnumChoiceAction(argparse.Action):
    """
    Argparse Action which stores a single Enum member, chosen by its
    lowercased name
    """

    def __init__(self, **kwargs):
        self._enum = _enum_type(kwargs, 'EnumChoiceAction')
        kwargs['choices'] = tuple(e.name.lower() for e in self._enum)
        super().__init__(**kwargs)

    def __call__(self, parser, namespace, this_value, option_string):
        setattr(namespace, self.dest, self._enum[this_value.upper()])


def delete_common_set_items(set1, set2):
    """
    Drops anything mentioned in both an enable and a disable set, so that
    `--foo-enable all --foo-disable bar` style combinations don't
    flip-flop.
    """
    if set1 is None or set2 is None:
        return
    common = set1 & set2
    set1 -= common
    set2 -= common


def check_file_overwrite(args, filename):
    """
    Returns `True` if it's okay to write to `filename`: either it doesn't
    exist yet, `--force` was given, or the user confirmed the overwrite.
    """
    if not os.path.exists(filename):
        return True
    if args.force:
        print('NOTICE: Overwriting existing file!')
        return True
    response = input(f'WARNING: Filename "{filename}" already exists.  Overwrite? (y/N)> ')
    return response.strip().lower().startswith('y')


def print_columns(data, *, columns=None, max_width=79, indent='   ', prefix='- '):
    """
    Prints a list of items, laid out in columns (filled top to bottom).
    Without an explicit `columns`, uses as many as will fit in `max_width`.
    """
    if not data:
        return
    items = [f'{prefix}{item}' for item in data]
    width = max(len(item) for item in items) + 2
    if columns is None:
        columns = max(1, (max_width - len(indent) + 2) // width)
    rows = math.ceil(len(items)/columns)
    for row in range(rows):
        line = ''.join(item.ljust(width) for item in items[row::rows])
        print(f'{indent}{line}'.rstrip())


def volume_arg(value):
    """
    Argparse type for volume percentages; only values the game can actually
    display are allowed
    """
    try:
        volume = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'{value} is not a number')
    if volume not in VOLUME_LEVELS:
        raise argparse.ArgumentTypeError(f'{volume} is not a valid volume; closest valid values are: {", ".join(str(v) for v in nearest_volumes(volume))}')
    return volume


def nearest_volumes(volume):
    """
    Returns the two valid volumes closest to `volume`
    """
    return sorted(sorted(VOLUME_LEVELS, key=lambda v: abs(v-volume))[:2])


def process_flags(label, slot_label, enable, disable, getter, setter):
    """
    Applies a pair of enable/disable sets to one kind of flag.  `getter` and
    `setter` are called with the enum member (and the new state, for the
    setter).  Returns `True` if anything changed.
    """
    changed = False
    if disable:
        for item in sorted(disable):
            if getter(item):
                print(f'{slot_label}: Clearing {label}: {item}')
                setter(item, False)
                changed = True
    if enable:
        for item in sorted(enable):
            if not getter(item):
                print(f'{slot_label}: Setting {label}: {item}')
                setter(item, True)
                changed = True
    return changed


def show_slot_info(save, slot, args, columns):
    """
    Prints out everything we know about the given slot
    """
    slot_label = f'Slot {slot}'
    print('')
    print(slot_label)
    print('-'*len(slot_label))
    if save.is_slot_empty(slot):
        print(' - Slot is marked as empty')
        if not args.verbose:
            return
    print(f' - Name: {save.get_username(slot)}')
    print(f' - Last Played Level: {last_played_label(save.get_last_played_level(slot))}')
    print(f' - Lives: {save.get_lives(slot)}')
    print(f' - Wumpa Fruits: {save.get_wumpa_fruits(slot)}')
    print(f' - Aku Aku Masks: {save.get_aku_aku_masks(slot)}')
    print(f' - Levels Traversed: {save.count_progress(slot)}/{len(Level)}')
    print(f' - Crystals: {save.count_crystals(slot)}')
    print(f' - Gems: {save.count_gems(slot)}')

    bosses = [boss for boss in Boss if save.get_boss_status(boss, slot)]
    if bosses:
        print(f' - Bosses Defeated: {len(bosses)}/{len(Boss)}')
        print_columns(bosses, columns=columns)
    exits = [level for level, info in LEVELS.items()
            if info.secret_exit is not None and save.get_secret_exit_status(level, slot)]
    if exits:
        print(f' - Secret Exits Found: {len(exits)}')
        print_columns(exits, columns=columns)
    if save.get_polar_trick_status(slot):
        print(' - Polar trick performed')

    if args.verbose:
        for label, getter in [
                ('Missing Levels', lambda level: save.get_progress_status(level, slot)),
                ('Missing Crystals', lambda level: not LEVELS[level].crystal or save.get_crystal_status(level, slot)),
                ('Missing All-Boxes Gems', lambda level: save.get_gem_status(level, GemType.ALL_BOXES_GEM, slot)),
                ('Missing Second Gems', lambda level: LEVELS[level].second_gem is None
                        or save.get_gem_status(level, GemType.SECOND_GEM, slot)),
                ]:
            missing = [level for level in Level if not getter(level)]
            if missing:
                print(f' - {label}:')
                print_columns(missing, columns=columns)

    print(' - Settings:')
    print(f'   - Language: {save.get_language(slot)}')
    print(f'   - Audio: {save.get_audio_type(slot)}')
    for label, getter in [
            ('Effects Volume', save.get_effects_volume),
            ('Music Volume', save.get_music_volume),
            ]:
        # Don't let one weird value stop the whole info display
        try:
            print(f'   - {label}: {getter(slot)}%')
        except ValueError as e:
            print(f'   - {label}: {e}')
    print(f'   - Screen Offset: {save.get_screen_offset(slot)}')


def main():
    """
    Main CLI app.  Returns `True` if a file was saved out, or `False`
    otherwise.
    """

    parser = argparse.ArgumentParser(
            description=f'CLI Crash Bandicoot 2 (PAL) Savegame Editor v{__version__}',
            )

    ###
    ### Control options
    ###

    control = parser.add_argument_group('Control Arguments', 'General control of the editing process')

    control.add_argument('-i', '--info',
            action='store_true',
            help='Show known information about the save',
            )

    control.add_argument('-v', '--verbose',
            action='store_true',
            help='Include more information in the info view, including missing items',
            )

    control.add_argument('-d', '--debug',
            action='store_true',
            help="""
                Show debugging output, which will show the offsets (both absolute and relative to
                the first slot) for all data we access.  This info will be written to stderr.
                """,
            )

    control.add_argument('-1', '--single-column',
            dest='single_column',
            action='store_true',
            help='Force info output to use one item per line, rather than columns',
            )

    control.add_argument('--fix', '--fix-checksum',
            action='store_true',
            dest='fix_checksum',
            help='Update the savegame checksum, even if no other edit actions have been specified.',
            )

    control.add_argument('--invalid-checksum',
            action='store_true',
            help='Write an intentionally-incorrect checksum to the savefile',
            )

    control.add_argument('-s', '--slot',
            choices=list(range(NUM_SLOTS+1)),
            type=int,
            help='Operate on the specified slot (specify 0 for "all slots")',
            )

    control.add_argument('--export-icon',
            type=str,
            metavar='FILENAME',
            help='Export the save icon to an image file (PNG recommended)',
            )

    control.add_argument('-f', '--force',
            action='store_true',
            help='When exporting the icon, do not prompt to confirm overwriting a file',
            )

    ###
    ### Player
    ###

    player = parser.add_argument_group('Player', 'Options to modify player state')

    player.add_argument('--username', '--name',
            type=str,
            dest='username',
            help='Sets the player name (up to eight characters)',
            )

    player.add_argument('--lives',
            type=int,
            help='Sets the number of lives',
            )

    player.add_argument('--wumpa',
            type=int,
            help='Sets the number of Wumpa fruits',
            )

    player.add_argument('--masks',
            type=int,
            help='Sets the number of Aku Aku masks',
            )

    player.add_argument('--last-level',
            type=int,
            help='Sets the last-played level (1-27 for levels, 28-32 for boss stages, 33 for the intro)',
            )

    slot_state = player.add_mutually_exclusive_group()

    slot_state.add_argument('--slot-empty',
            action='store_true',
            help='Mark the slot as empty',
            )

    slot_state.add_argument('--slot-used',
            action='store_true',
            help='Mark the slot as used',
            )

    ###
    ### Progress
    ###

    progress = parser.add_argument_group('Progress', 'Options to modify level and collectible progress')

    progress.add_argument('--progress-enable',
            type=Level,
            action=EnumSetAction,
            help="Mark a level as traversed.  Can be specified more than once, or use 'all'",
            )

    progress.add_argument('--progress-disable',
            type=Level,
            action=EnumSetAction,
            help="Mark a level as untraversed.  Can be specified more than once, or use 'all'",
            )

    crystal_levels = [level for level in Level if LEVELS[level].crystal]

    progress.add_argument('--crystal-enable',
            type=Level,
            action=EnumSetAction,
            choices=crystal_levels,
            help="Collect a level's crystal.  Can be specified more than once, or use 'all'",
            )

    progress.add_argument('--crystal-disable',
            type=Level,
            action=EnumSetAction,
            choices=crystal_levels,
            help="Remove a level's crystal.  Can be specified more than once, or use 'all'",
            )

    progress.add_argument('--gem-enable',
            type=Level,
            action=EnumSetAction,
            help="Collect a level's all-boxes gem.  Can be specified more than once, or use 'all'",
            )

    progress.add_argument('--gem-disable',
            type=Level,
            action=EnumSetAction,
            help="Remove a level's all-boxes gem.  Can be specified more than once, or use 'all'",
            )

    second_gem_levels = [level for level in Level if LEVELS[level].second_gem is not None]

    progress.add_argument('--second-gem-enable',
            type=Level,
            action=EnumSetAction,
            choices=second_gem_levels,
            help="Collect a level's second gem.  Can be specified more than once, or use 'all'",
            )

    progress.add_argument('--second-gem-disable',
            type=Level,
            action=EnumSetAction,
            choices=second_gem_levels,
            help="Remove a level's second gem.  Can be specified more than once, or use 'all'",
            )

    secret_exit_levels = [level for level in Level if LEVELS[level].secret_exit is not None]

    progress.add_argument('--secret-exit-enable',
            type=Level,
            action=EnumSetAction,
            choices=secret_exit_levels,
            help="Mark a level's secret exit as found.  Can be specified more than once, or use 'all'",
            )

    progress.add_argument('--secret-exit-disable',
            type=Level,
            action=EnumSetAction,
            choices=secret_exit_levels,
            help="Mark a level's secret exit as not found.  Can be specified more than once, or use 'all'",
            )

    progress.add_argument('--boss-enable',
            type=Boss,
            action=EnumSetAction,
            help="Mark a boss as defeated.  Can be specified more than once, or use 'all'",
            )

    progress.add_argument('--boss-disable',
            type=Boss,
            action=EnumSetAction,
            help="Mark a boss as undefeated.  Can be specified more than once, or use 'all'",
            )

    polar = progress.add_mutually_exclusive_group()

    polar.add_argument('--polar-trick-enable',
            action='store_true',
            help='Mark the polar trick as performed',
            )

    polar.add_argument('--polar-trick-disable',
            action='store_true',
            help='Mark the polar trick as not performed',
            )

    ###
    ### Settings
    ###

    settings = parser.add_argument_group('Settings', 'Options to modify game settings')

    settings.add_argument('--language',
            type=Language,
            action=EnumChoiceAction,
            help='Sets the game language',
            )

    settings.add_argument('--audio',
            type=AudioType,
            action=EnumChoiceAction,
            help='Sets the audio output type',
            )

    settings.add_argument('--effects-volume',
            type=volume_arg,
            metavar='PERCENT',
            help='Sets the sound effects volume (only values the game can display are accepted)',
            )

    settings.add_argument('--music-volume',
            type=volume_arg,
            metavar='PERCENT',
            help='Sets the music volume (only values the game can display are accepted)',
            )

    settings.add_argument('--screen-offset',
            type=int,
            help='Sets the horizontal screen offset',
            )

    parser.add_argument('filename',
            nargs=1,
            type=str,
            help='Savefile to open',
            )

    # Parse args and massage 'em a bit
    args = parser.parse_args()
    args.filename = args.filename[0]
    if args.slot is None:
        slots = []
    elif args.slot == 0:
        slots = list(range(1, NUM_SLOTS+1))
    else:
        slots = [args.slot]
    delete_common_set_items(args.progress_enable, args.progress_disable)
    delete_common_set_items(args.crystal_enable, args.crystal_disable)
    delete_common_set_items(args.gem_enable, args.gem_disable)
    delete_common_set_items(args.second_gem_enable, args.second_gem_disable)
    delete_common_set_items(args.secret_exit_enable, args.secret_exit_disable)
    delete_common_set_items(args.boss_enable, args.boss_disable)

    # Figure out if we're restricting column output
    if args.single_column:
        columns = 1
    else:
        columns = None

    # Set our debug flag if we've been told to
    if args.debug:
        set_debug()

    # Find out if we have anything to do
    do_slot_actions = any([
            args.username is not None,
            args.lives is not None,
            args.wumpa is not None,
            args.masks is not None,
            args.last_level is not None,
            args.slot_empty,
            args.slot_used,
            args.progress_enable,
            args.progress_disable,
            args.crystal_enable,
            args.crystal_disable,
            args.gem_enable,
            args.gem_disable,
            args.second_gem_enable,
            args.second_gem_disable,
            args.secret_exit_enable,
            args.secret_exit_disable,
            args.boss_enable,
            args.boss_disable,
            args.polar_trick_enable,
            args.polar_trick_disable,
            args.language is not None,
            args.audio is not None,
            args.effects_volume is not None,
            args.music_volume is not None,
            args.screen_offset is not None,
            ])
    if do_slot_actions and not slots:
        parser.error('Slot-specific actions were specified, but no slot was chosen with -s/--slot')

    # Load in the data.  We always preserve the stored checksum here and
    # decide what to do with it ourselves, right before saving.
    with open(args.filename, 'rb') as df:
        save = CrashBandicoot2SaveData(df, checksum_policy=ChecksumPolicy.PRESERVE_STORED)
    do_save = args.fix_checksum or args.invalid_checksum

    if args.info:
        print(f'Title Field: {save.get_title_field()}')
        print(f'Save Title: {save.header.get_save_title()}')
        stored = save.get_checksum()
        computed = save.compute_checksum()
        if stored == computed:
            print(f'Checksum: 0x{stored:08X}')
        else:
            print(f'Checksum: 0x{stored:08X} (INVALID, should be 0x{computed:08X})')

    for slot in slots:
        slot_label = f'Slot {slot}'

        if args.info:
            show_slot_info(save, slot, args, columns)
            if do_slot_actions:
                print('')

        ###
        ### Player
        ###

        if args.username is not None:
            print(f'{slot_label}: Updating name to: {args.username}')
            try:
                save.set_username(args.username, slot)
            except (NameTooLongError, InvalidNameError) as e:
                parser.error(str(e))
            do_save = True

        if args.lives is not None:
            print(f'{slot_label}: Updating lives to: {args.lives}')
            save.set_lives(args.lives, slot)
            do_save = True

        if args.wumpa is not None:
            print(f'{slot_label}: Updating Wumpa fruit count to: {args.wumpa}')
            save.set_wumpa_fruits(args.wumpa, slot)
            do_save = True

        if args.masks is not None:
            print(f'{slot_label}: Updating Aku Aku mask count to: {args.masks}')
            save.set_aku_aku_masks(args.masks, slot)
            do_save = True

        if args.last_level is not None:
            print(f'{slot_label}: Updating last-played level to: {last_played_label(args.last_level)}')
            save.set_last_played_level(args.last_level, slot)
            do_save = True

        if args.slot_empty and not save.is_slot_empty(slot):
            print(f'{slot_label}: Marking slot as empty')
            save.set_slot_empty(True, slot)
            do_save = True

        if args.slot_used and save.is_slot_empty(slot):
            print(f'{slot_label}: Marking slot as used')
            save.set_slot_empty(False, slot)
            do_save = True

        ###
        ### Progress
        ###

        if process_flags('level traversed', slot_label,
                args.progress_enable, args.progress_disable,
                lambda level: save.get_progress_status(level, slot),
                lambda level, state: save.set_progress_status(level, state, slot),
                ):
            do_save = True

        if process_flags('crystal', slot_label,
                args.crystal_enable, args.crystal_disable,
                lambda level: save.get_crystal_status(level, slot),
                lambda level, state: save.set_crystal_status(level, state, slot),
                ):
            do_save = True

        if process_flags('all-boxes gem', slot_label,
                args.gem_enable, args.gem_disable,
                lambda level: save.get_gem_status(level, GemType.ALL_BOXES_GEM, slot),
                lambda level, state: save.set_gem_status(level, GemType.ALL_BOXES_GEM, state, slot),
                ):
            do_save = True

        if process_flags('second gem', slot_label,
                args.second_gem_enable, args.second_gem_disable,
                lambda level: save.get_gem_status(level, GemType.SECOND_GEM, slot),
                lambda level, state: save.set_gem_status(level, GemType.SECOND_GEM, state, slot),
                ):
            do_save = True

        if process_flags('secret exit', slot_label,
                args.secret_exit_enable, args.secret_exit_disable,
                lambda level: save.get_secret_exit_status(level, slot),
                lambda level, state: save.set_secret_exit_status(level, state, slot),
                ):
            do_save = True

        if process_flags('boss defeated', slot_label,
                args.boss_enable, args.boss_disable,
                lambda boss: save.get_boss_status(boss, slot),
                lambda boss, state: save.set_boss_status(boss, state, slot),
                ):
            do_save = True

        if args.polar_trick_enable and not save.get_polar_trick_status(slot):
            print(f'{slot_label}: Marking polar trick as performed')
            save.set_polar_trick_status(True, slot)
            do_save = True

        if args.polar_trick_disable and save.get_polar_trick_status(slot):
            print(f'{slot_label}: Marking polar trick as not performed')
            save.set_polar_trick_status(False, slot)
            do_save = True

        ###
        ### Settings
        ###

        if args.language is not None:
            print(f'{slot_label}: Setting language to: {args.language}')
            save.set_language(args.language, slot)
            do_save = True

        if args.audio is not None:
            print(f'{slot_label}: Setting audio type to: {args.audio}')
            save.set_audio_type(args.audio, slot)
            do_save = True

        if args.effects_volume is not None:
            print(f'{slot_label}: Setting effects volume to: {args.effects_volume}%')
            save.set_effects_volume(args.effects_volume, slot)
            do_save = True

        if args.music_volume is not None:
            print(f'{slot_label}: Setting music volume to: {args.music_volume}%')
            save.set_music_volume(args.music_volume, slot)
            do_save = True

        if args.screen_offset is not None:
            print(f'{slot_label}: Setting screen offset to: {args.screen_offset}')
            save.set_screen_offset(args.screen_offset, slot)
            do_save = True

    # Icon export doesn't alter the save
    if args.export_icon:
        if not has_image_support:
            print('NOTICE: Pillow is not available, so the icon cannot be exported')
        else:
            print(f'Exporting save icon to: {args.export_icon}')
            if check_file_overwrite(args, args.export_icon):
                save.header.export_icon(args.export_icon)
                print('Icon exported!')
            else:
                print('NOTICE: Icon NOT exported')

    if args.info:
        print('')

    # Write out, if we did anything which needs that
    if do_save:
        if args.invalid_checksum:
            print('NOTICE: Intentionally writing an invalid checksum.  The game will')
            print('        refuse to load this save!')
            save.set_checksum(save.compute_checksum() ^ 0xFFFFFFFF)
        else:
            save.set_checksum(save.compute_checksum())
        with open(args.filename, 'wb') as df:
            df.write(save.to_bytes())
        print(f'Wrote changes!  New checksum: 0x{save.get_checksum():08X}')
        return True
    else:
        if do_slot_actions:
            print('No file modifications were necessary!')
        return False


if __name__ == '__main__':
    main()
