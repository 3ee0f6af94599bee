#!/usr/bin/env python3


"""Prints the edit distance between two strings and the edit operations that
turn the first into the second."""


import argparse
import editmatrix
import logging
import sys


from typing import List, Optional


def main(argv: Optional[List[str]]=None) -> int:
    arg_parser = argparse.ArgumentParser(description=__doc__)
    arg_parser.add_argument('source', help='string to start from')
    arg_parser.add_argument('target', help='string to arrive at')
    arg_parser.add_argument('--insert-cost', type=int,
            default=editmatrix.INSERT_COST, help='cost of inserting a character')
    arg_parser.add_argument('--remove-cost', type=int,
            default=editmatrix.REMOVE_COST, help='cost of removing a character')
    arg_parser.add_argument('--swap-cost', type=int,
            default=editmatrix.SWAP_COST, help='cost of swapping a character')
    arg_parser.add_argument('-d', '--distance-only', action='store_true',
            help='print only the distance, not the operations')
    arg_parser.add_argument('-v', '--verbose', action='count', default=0,
            help='Verbosity. Give once for progress, twice for debugging.')
    args = arg_parser.parse_args(argv)
    if args.verbose == 1:
        logging.basicConfig(level=logging.INFO)
    elif args.verbose >= 2:
        logging.basicConfig(level=logging.DEBUG)
    try:
        costs = editmatrix.Costs(args.insert_cost, args.remove_cost,
                args.swap_cost)
    except editmatrix.InvalidCostConfig as e:
        arg_parser.error(str(e))
    logging.info('Costs: %s', costs)
    matrix = editmatrix.build(args.source, args.target, costs)
    logging.debug('Matrix:\n%s', editmatrix.pp_matrix(matrix))
    print(matrix.distance())
    if not args.distance_only:
        for op in matrix.operations():
            print(op)
    return 0


if __name__ == '__main__':
    sys.exit(main())
