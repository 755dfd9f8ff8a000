#!/usr/bin/env python
#
# Quick manual run of the linked list operations:
#  - create a chain from the first value and append the rest
#  - print its size and contents
#  - look a value up, remove one, destroy the chain
#  - report nodes that were not given back
#

import argparse
import logging
import sys

from .allocator import NodeAllocator
from .linked_list import create, append, size, to_array, find, remove, destroy, format_chain
from .log import get_log, setup_log


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
            description='Exercise the integer linked list operations one by one.')
    parser.add_argument('-l', '--values', dest='values', nargs='+', type=int,
            default=[1, 2, 3], help='Initial values. The first one is created, \
            the others appended. [Default: 1 2 3]')
    parser.add_argument('-f', '--find', dest='find', type=int, default=2,
            help='Value to look up [Default: 2]')
    parser.add_argument('-r', '--remove', dest='remove', type=int, default=None,
            help='Value to remove [Default: the head value]')
    parser.add_argument('--limit', dest='limit', type=int, default=None,
            help='Maximum number of live nodes, allocations beyond it fail.')
    parser.add_argument('-v', '--verbose', action='count', default=0)
    return parser.parse_args(argv)


def main(argv=None):
    opts = parse_args(argv)

    loglevel = max(logging.DEBUG, logging.WARNING - opts.verbose*10)
    setup_log(level=loglevel)
    logger = get_log('demo')
    logger.debug('Logging started at level %d', loglevel)

    allocator = NodeAllocator(limit=opts.limit)
    print('Quick manual test of linked list functions')

    lst = create(opts.values[0], allocator=allocator)
    if lst is None:
        print('create failed')
        return 1
    for v in opts.values[1:]:
        append(lst, v, allocator=allocator)
    logger.info('Chain %s', format_chain(lst))
    print('size = %d' % size(lst))

    arr = to_array(lst)
    if arr is not None:
        print('array: ' + ' '.join(str(v) for v in arr))

    print('find %d: %s' % (opts.find, 'not found' if find(lst, opts.find) is None else 'found'))

    value = opts.values[0] if opts.remove is None else opts.remove
    lst = remove(lst, value, allocator=allocator)
    print('after remove %d, size = %d' % (value, size(lst)))

    destroy(lst, allocator=allocator)
    print('leaked nodes = %d' % allocator.live)
    return 0


if __name__ == '__main__':
    sys.exit(main())
