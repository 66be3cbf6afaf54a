#!/usr/bin/env python

import configparser
import os
import sys

here = os.path.abspath(os.path.dirname(__file__))
config_fn = os.path.join(here, "config.ini")

if not os.path.isfile(config_fn):
    raise Exception("Configuration file \"%s\" does not exist"%config_fn)

# NOTE: using RawConfigParser to prevent interpolation (the logging sections
# contain format strings such as "%(asctime)s")
config = configparser.RawConfigParser()
config.optionxform = str # case sensitive loading of config
config.read(config_fn)

def add_parser_arguments(parser):
    parser.add_argument("option", nargs = "?",
            help = "set or get configuration option. \
Format is <section>.<key>=<value>")
    return parser

def split_option(s):
    """Split "<section>.<key>" into section and key."""
    fields = s.split(".", 1)
    if len(fields) != 2 or not fields[0] or not fields[1]:
        raise ValueError("Option \"%s\" not of the form <section>.<key>"%s)
    return fields[0], fields[1]

def save_config():
    with open(config_fn, 'w') as f:
        f.write("# pqueue configuration\n")
        config.write(f)

def prog_config(args):
    if args.option is None:
        config.write(sys.stdout)
    else:
        if "=" in args.option: # Assign value to option
            location, value = args.option.split("=", 1)
            section, option = split_option(location)
            config.set(section, option, value)
            save_config()
        else: # Get option value
            section, option = split_option(args.option)
            print(config.get(section, option))

def get(*args, **kwargs):
    return config.get(*args, **kwargs)
