# Copyright (C) 2022 randkit contributors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import argparse
import os

from datetime import timedelta

import confuse
from flatdict import FlatDict

from randkit.common.logger import logger

ACTIONS = ["int", "range", "float", "jitter", "string"]


class FullPath(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, os.path.abspath(os.path.expanduser(values)))


def parse_positive_int(string):
    try:
        value = int(string)
    except ValueError:
        raise argparse.ArgumentTypeError("'%s' is not an integer." % string)
    if value <= 0:
        raise argparse.ArgumentTypeError("'%s' must be > 0." % string)
    return value


def parse_non_negative_int(string):
    try:
        value = int(string)
    except ValueError:
        raise argparse.ArgumentTypeError("'%s' is not an integer." % string)
    if value < 0:
        raise argparse.ArgumentTypeError("'%s' must be >= 0." % string)
    return value


# timedelta resolution and range
MIN_DURATION = 1e-6
MAX_DURATION = timedelta.max.total_seconds()


def parse_duration(string):
    try:
        value = float(string)
    except ValueError:
        raise argparse.ArgumentTypeError("'%s' is not a number." % string)
    if not MIN_DURATION <= value <= MAX_DURATION:
        raise argparse.ArgumentTypeError("'%s' must be within [%g, %g] seconds." % (string, MIN_DURATION, MAX_DURATION))
    return value


def config_debug():
    return 'RANDKIT_CONFIG_DEBUG' in os.environ


# General startup options
def add_args_general(parser):
    parser.add_argument('-h', '--help', action='help',
                        help='show this help message and exit')
    parser.add_argument('-v', '--verbose', required=False, action='store_true', default=False,
                        help='enable verbose output')
    parser.add_argument('-q', '--quiet', help='only print warnings and errors to console',
                        required=False, action='store_true', default=False)
    parser.add_argument('--log-file', metavar='<file>', action=FullPath, required=False, default=None,
                        help='append log output to <file>')
    parser.add_argument('--debug', help='enable max logging verbosity',
                        action='store_true', default=False)
    parser.add_argument('-n', '--iterations', metavar='<n>', type=parse_positive_int, default=1,
                        help='number of values to generate (default: 1)')


# Generator options
def add_args_generator(parser):

    action_help = '<int>\t\tinteger in [0, bound)\n' \
                  '<range>\t\tinteger in [min, max)\n' \
                  '<float>\t\tfloat in [0.0, 1.0)\n' \
                  '<jitter>\tduration (seconds) altered by up to +-factor\n' \
                  '<string>\trandom string of length symbols from alphabet\n'

    parser.add_argument('--action', required=False, metavar='<cmd>', choices=ACTIONS,
                        default='string', help=action_help)
    parser.add_argument('--bound', metavar='<n>', type=parse_positive_int, default=100,
                        help='exclusive upper bound for <int>')
    parser.add_argument('--min', metavar='<n>', type=int, default=0,
                        help='inclusive lower bound for <range>')
    parser.add_argument('--max', metavar='<n>', type=int, default=100,
                        help='exclusive upper bound for <range>')
    parser.add_argument('--duration', metavar='<sec>', type=parse_duration, default=1.0,
                        help='base duration in seconds for <jitter>')
    parser.add_argument('--factor', metavar='<f>', type=float, default=0.2,
                        help='max jitter factor, <= 0 selects the default (0.2)')
    parser.add_argument('--length', metavar='<n>', type=parse_non_negative_int, default=16,
                        help='length of <string> output')
    parser.add_argument('--alphabet', metavar='<str>', type=str, default='alphanum',
                        help="symbols for <string>, or one of 'alphanum', 'digits'")


class ConfigArgsParser():

    def _base_parser(self):
        short_usage = '%(prog)s --action <cmd> [options]'
        return argparse.ArgumentParser(usage=short_usage, add_help=False, fromfile_prefix_chars='@',
                                       formatter_class=argparse.RawTextHelpFormatter)

    def _parse_with_config(self, parser, argv=None):

        config = confuse.Configuration('randkit', modname='randkit')

        # check default config search paths
        config.read(defaults=True, user=True)

        # local / working directory config
        local_config = os.path.join(os.getcwd(), 'randkit.yaml')
        if os.path.exists(local_config):
            config.set_file(local_config, base_for_paths=True)

        # ENV based config
        if 'RANDKIT_CONFIG' in os.environ:
            config.set_file(os.environ['RANDKIT_CONFIG'], base_for_paths=True)

        # merge all configs into a flat dictionary, delimiter = ':'
        config_values = FlatDict(config.flatten())
        if config_debug():
            logger.info("Options picked up from config: %s" % str(config_values))

        # adopt defaults into parser, fixup 'required' and file/path fields
        for action in parser._actions:
            if action.dest in config_values:
                try:
                    if isinstance(action, FullPath):
                        action.default = config[action.dest].as_filename()
                    elif action.type is str:
                        action.default = config[action.dest].as_str()
                    elif action.type is not None:
                        action.default = action.type(str(config[action.dest].get()))
                    else:
                        action.default = config[action.dest].get()
                except (confuse.ConfigError, argparse.ArgumentTypeError, ValueError) as e:
                    parser.error("invalid config value for '%s': %s" % (action.dest, e))
                action.required = False
                config_values.pop(action.dest)

        # remove options not defined in argparse
        for option in list(config_values.keys()):
            if config_debug():
                logger.warn("Dropping unrecognized option '%s'." % option)
            config_values.pop(option)

        args = parser.parse_args(argv)

        if config_debug():
            logger.info("Final parsed args: %s" % repr(args))
        return args

    def parse_options(self, argv=None):

        parser = self._base_parser()

        general = parser.add_argument_group('General options')
        add_args_general(general)

        generator = parser.add_argument_group('Generator options')
        add_args_generator(generator)

        return self._parse_with_config(parser, argv)
