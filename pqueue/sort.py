#!/usr/bin/env python
# Description: Sorts values read from a file (or stdin) using the heap.

import logging
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

import sys
from sys import stdout, stdin

from pqueue.heap import reverse_comparator
from pqueue.util import heapsort, read_values, str2bool
from pqueue import config

def add_parser_arguments(parser):
    parser.add_argument('-i', '--input',
            help = 'Input file with whitespace separated values \
(default: stdin)')
    parser.add_argument('-o', '--output',
            help = 'Output file, one value per line (default: stdout)')
    parser.add_argument('-r', '--reverse', action = 'store_true',
            default = None,
            help = 'Sort in descending order')
    parser.add_argument('--strings', action = 'store_true', default = None,
            help = 'Compare values as strings rather than numbers')
    return parser

def get_comparator(reverse):
    return reverse_comparator() if reverse else None

def prog_sort(args):
    reverse = args.reverse
    if reverse is None:
        reverse = config.get('Defaults', 'order') == 'descending'
    strings = args.strings
    if strings is None:
        strings = str2bool(config.get('Defaults', 'strings'))

    infile = stdin if args.input is None else open(args.input, 'r')
    outfile = stdout if args.output is None else open(args.output, 'w')
    try:
        try:
            values = read_values(infile, numeric = not strings)
        except ValueError as e:
            logger.error(str(e))
            sys.exit(1)
        logger.info("Sorting %s values"%len(values))
        for value in heapsort(values, get_comparator(reverse)):
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

    prog_sort(args)

if __name__ == '__main__':
    main()
