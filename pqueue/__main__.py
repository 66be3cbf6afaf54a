import logging
import logging.config
import sys
from sys import stdout
import argparse

from pqueue import __version__
from pqueue import config

# NOTE: logger should not be used until after logging has been initialised.
logger = logging.getLogger(__name__)

def handle_uncaught_exception(exc_type, exc_value, exc_traceback):
    logger.critical('Uncaught exception', exc_info = (exc_type, exc_value,
        exc_traceback))

def init_logging(debug = False, verbose = False):
    logging.config.fileConfig(config.config_fn,
            disable_existing_loggers = False)
    if debug:
        logging.root.setLevel(logging.DEBUG)
        logging.root.debug("log level set to DEBUG")
    if verbose:
        logging.root.addHandler(logging.StreamHandler(stdout,))
        logging.root.info("Writing log statements to stdout")

def add_logging_arguments(parser):
    parser.add_argument("--debug", action = "store_true",
            help = "Set logging level to DEBUG")
    parser.add_argument("-v", "--verbose", action = "store_true",
            help = "Output log statements to stdout")
    return parser

def parse_cmdline(argv = None):
    from pqueue import sort
    from pqueue import topk

    # top-level parser
    parser = argparse.ArgumentParser(prog = "pqueue")

    subparsers = parser.add_subparsers(dest = "program")
    subparsers.required = True

    # Add Config program
    parser_Config = subparsers.add_parser("Config",
            help = "Configure pqueue")
    parser_Config = config.add_parser_arguments(parser_Config)
    parser_Config.set_defaults(func = config.prog_config, debug = False,
            verbose = False)

    # Add sort program
    parser_sort = subparsers.add_parser("sort",
            help = "Sort values using a heap")
    parser_sort = add_logging_arguments(
            sort.add_parser_arguments(parser_sort))
    parser_sort.set_defaults(func = sort.prog_sort)

    # Add topk program
    parser_topk = subparsers.add_parser("topk",
            help = "Select the K largest (or smallest) values")
    parser_topk = add_logging_arguments(
            topk.add_parser_arguments(parser_topk))
    parser_topk.set_defaults(func = topk.prog_topk)

    if argv is None:
        argv = sys.argv[1:]
    if len(argv) == 0:
        print("pqueue version %s"%__version__)
        parser.print_help()
        sys.exit(1)
    return parser.parse_args(argv)

def main(argv = None):
    args = parse_cmdline(argv)
    init_logging(args.debug, args.verbose)
    # Make sure exceptions are logged, even when not caught
    sys.excepthook = handle_uncaught_exception
    args.func(args)

if __name__ == '__main__':
    main()
