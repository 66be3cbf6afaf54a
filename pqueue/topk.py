#!/usr/bin/env python
# Description: Selects the K largest (or smallest) values from a stream of
# values, keeping at most K values in memory.

import logging
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

import sys
from sys import stdout, stdin

from pqueue.util import top_k, bottom_k, read_values, str2bool
from pqueue import config

def add_parser_arguments(parser):
    parser.add_argument('-k', type = int,
            help = 'Number of values to select (default: [Defaults] k)')
    parser.add_argument('-i', '--input',
            help = 'Input file with whitespace separated values \
(default: stdin)')
    parser.add_argument('-o', '--output',
            help = 'Output file, one value per line (default: stdout)')
    parser.add_argument('--smallest', action = 'store_true',
            help = 'Select the smallest rather than the largest values')
    parser.add_argument('--strings', action = 'store_true', default = None,
            help = 'Compare values as strings rather than numbers')
    return parser

def prog_topk(args):
    k = int(config.get('Defaults', 'k')) if args.k is None else args.k
    strings = args.strings
    if strings is None:
        strings = str2bool(config.get('Defaults', 'strings'))
    if k < 0:
        logger.error("k should be >= 0 (got %s)"%k)
        sys.exit(1)

    infile = stdin if args.input is None else open(args.input, 'r')
    outfile = stdout if args.output is None else open(args.output, 'w')
    try:
        try:
            values = read_values(infile, numeric = not strings)
        except ValueError as e:
            logger.error(str(e))
            sys.exit(1)
        select = bottom_k if args.smallest else top_k
        logger.info("Selecting %s out of %s values"%(k, len(values)))
        for value in select(values, k):
            outfile.write('%s\n'%value)
    finally:
        if infile is not stdin:
            infile.close()
        if outfile is not stdout:
            outfile.close()

def main():
    import argparse
    parser = argparse.ArgumentParser()
    add_parser_arguments(parser)
    args = parser.parse_args()

    prog_topk(args)

if __name__ == '__main__':
    main()
