# Copyright (C) 2015 Renê de Souza Pinto
# Copyright (C) 2020 randbin contributors
#
# SPDX-License-Identifier: GPL-3.0-or-later

import argparse
import os

import confuse
from confuse.util import config_dirs
from flatdict import FlatDict

from randbin_fuzzer.common.logger import logger


class FullPath(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, os.path.abspath(os.path.expanduser(values)))


def parse_percent(string):
    try:
        value = int(string)
    except ValueError:
        raise argparse.ArgumentTypeError("'%s' is not an integer percentage." % string)
    if value <= 0:
        raise argparse.ArgumentTypeError("Percentage should be greater than 0.")
    return value


# General startup options
def add_args_general(parser):
    parser.add_argument('-h', '--help', action='help',
                        help='show this help message and exit')
    parser.add_argument('-v', '--verbose', required=False, action='store_true', default=False,
                        help='trace every mutated byte')
    parser.add_argument('-q', '--quiet', help='only print warnings and errors to console',
                        required=False, action='store_true', default=False)
    parser.add_argument('-l', '--log', metavar='<file>', action=FullPath, required=False, default=None,
                        help='append log output to <file>')

# Mutation options
def add_args_mutate(parser):
    parser.add_argument('-f', '--file', metavar='<file>', action=FullPath, required=True,
                        help='input file')
    parser.add_argument('-o', '--outdir', metavar='<dir>', action=FullPath, required=True,
                        help='output directory destination')
    parser.add_argument('-p', '--percent', metavar='<n>', type=parse_percent, required=False, default=1,
                        help='percentage of mutations (default: 1)')


# user config lookup without creating the confuse config dir
def user_config_file(appname='randbin', filename='config.yaml'):
    env_var = appname.upper() + 'DIR'
    if env_var in os.environ:
        appdirs = [os.path.expanduser(os.environ[env_var])]
    else:
        appdirs = [os.path.join(confdir, appname) for confdir in config_dirs()]

    for appdir in appdirs:
        path = os.path.join(appdir, filename)
        if os.path.isfile(path):
            return path
    return None


class ConfigArgsParser():

    def _base_parser(self):
        short_usage = '%(prog)s -f <file> -o <dir> [-p <n>] [options]'
        return argparse.ArgumentParser(usage=short_usage, add_help=False, fromfile_prefix_chars='@')

    def _parse_with_config(self, parser, argv=None):

        config = confuse.Configuration('randbin', modname='randbin_fuzzer', read=False)

        # packaged defaults, then user config if present
        config.read(defaults=True, user=False)
        user_config = user_config_file()
        if user_config:
            config.set_file(user_config, base_for_paths=True)

        # local / workdir config
        workdir_config = os.path.join(os.getcwd(), 'randbin.yaml')
        if os.path.exists(workdir_config):
            config.set_file(workdir_config, base_for_paths=True)

        # ENV based config
        if 'RANDBIN_CONFIG' in os.environ:
            config.set_file(os.environ['RANDBIN_CONFIG'], base_for_paths=True)

        # merge all configs into a flat dictionary, delimiter = ':'
        config_values = FlatDict(config.flatten())
        if 'RANDBIN_CONFIG_DEBUG' in os.environ:
            logger.info("Options picked up from config: %s" % str(config_values))

        # adopt defaults into parser, fixup 'required' and path fields
        for action in parser._actions:
            if action.dest in config_values:
                if isinstance(action, FullPath):
                    action.default = config[action.dest].as_filename()
                elif action.type == parse_percent:
                    try:
                        action.default = parse_percent(str(config[action.dest].get()))
                    except argparse.ArgumentTypeError as e:
                        parser.error("config option '%s': %s" % (action.dest, e))
                else:
                    action.default = config[action.dest].get()
                action.required = False
                config_values.pop(action.dest)

        # remove options not defined in argparse
        for option in list(config_values.keys()):
            if 'RANDBIN_CONFIG_DEBUG' in os.environ:
                logger.warn("Dropping unrecognized option '%s'." % option)
            config_values.pop(option)

        args = parser.parse_args(argv)

        if 'RANDBIN_CONFIG_DEBUG' in os.environ:
            logger.info("Final parsed args: %s" % repr(args))
        return args

    def parse_mutate_options(self, argv=None):

        parser = self._base_parser()

        general = parser.add_argument_group('General options')
        add_args_general(general)

        mutate = parser.add_argument_group('Mutation options')
        add_args_mutate(mutate)

        return self._parse_with_config(parser, argv)
