# -*- coding: utf-8 -*-
#
# This file is part of libvirt-enum.
#
# libvirt-enum is free software: you can redistribute it and/or modify it under the terms of the
# GNU General Public License as published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# libvirt-enum is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without
# even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with libvirt-enum.  If
# not, see <http://www.gnu.org/licenses/>.

import argparse
import configparser
import logging
import sys

from libvirtenum.conn import LibVirtConnection
from libvirtenum.constants import ENUMS
from libvirtenum.error import LibVirtEnumError
from libvirtenum.error import UnknownEnumError

from virshenum import settings

log = logging.getLogger(__name__)


def raw_int(value):
    return int(value, 0)


def get_parser():
    parser = argparse.ArgumentParser(
        prog='virsh-enum', description="Inspect libvirt enumeration values.")
    parser.add_argument('-v', '--verbose', default=0, action="count",
                        help="Verbose output. Can be given up to three times to increase verbosity.")
    parser.add_argument('-s', '--section', default='DEFAULT',
                        help="Use different section in config file (Default: %(default)s).")
    parser.add_argument('-c', '--config', default=settings.CONFIG_FILE,
                        help="Configuration file to read (Default: %(default)s).")
    parser.add_argument('--uri', help="libvirt connection URI.")
    parser.add_argument('--strict', action='store_true', default=None,
                        help="Fail on values this version does not know about.")

    commands = parser.add_subparsers(dest='command', metavar='command')
    commands.required = True

    list_parser = commands.add_parser('list', help="List all known values of an enumeration.")
    list_parser.add_argument('enum', choices=sorted(ENUMS), metavar='enum',
                             help="One of: %s" % ', '.join(sorted(ENUMS)))

    decode_parser = commands.add_parser('decode', help="Render raw values of an enumeration.")
    decode_parser.add_argument('enum', choices=sorted(ENUMS), metavar='enum',
                               help="One of: %s" % ', '.join(sorted(ENUMS)))
    decode_parser.add_argument('raw', type=raw_int, nargs='+', help="Raw integer values.")

    commands.add_parser('pools', help="Show the state of all storage pools.")
    commands.add_parser('domains', help="Show the state of all domains.")
    commands.add_parser('secrets', help="Show the usage type of all secrets.")
    return parser


def configure(args):
    config = configparser.ConfigParser(defaults={
        'uri': '',
        'strict': 'no',
    })
    config.read(args.config)
    if args.section != 'DEFAULT' and not config.has_section(args.section):
        log.error('Error: %s: no section "%s"', args.config, args.section)
        sys.exit(1)

    settings.URI = args.uri or config.get(args.section, 'uri') or None
    if args.strict is None:
        settings.STRICT = config.getboolean(args.section, 'strict')
    else:
        settings.STRICT = args.strict


def render(value):
    if settings.STRICT:
        try:
            value.to_known()
        except UnknownEnumError as e:
            log.error('Error: %s', e)
            sys.exit(1)
    return str(value)


def list_enum(args):
    for member in ENUMS[args.enum]:
        print('%s\t%s' % (member.to_raw(), member))


def decode(args):
    enum_type = ENUMS[args.enum]
    for raw in args.raw:
        try:
            value = enum_type.ext(raw)
        except OverflowError as e:
            log.error('Error: %s', e)
            sys.exit(1)
        print(render(value))


def show_states(args):
    try:
        conn = LibVirtConnection(settings.URI)
        if args.command == 'pools':
            states = conn.getPoolStates()
        elif args.command == 'secrets':
            states = conn.getSecretUsageTypes()
        else:
            states = conn.getDomainStates()
    except LibVirtEnumError as e:
        log.error('Error: %s', e)
        sys.exit(1)

    for name in sorted(states):
        print('%s\t%s' % (name, render(states[name])))


COMMANDS = {
    'list': list_enum,
    'decode': decode,
    'pools': show_states,
    'domains': show_states,
    'secrets': show_states,
}


def main(argv=None):
    args = get_parser().parse_args(argv)

    # configure logging
    logging.basicConfig(
        format='[%(asctime)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        level=logging.ERROR - (args.verbose * 10 if args.verbose <= 3 else 30)
    )

    configure(args)
    log.debug('Using URI %s (strict: %s)', settings.URI, settings.STRICT)
    COMMANDS[args.command](args)


if __name__ == '__main__':
    main()
