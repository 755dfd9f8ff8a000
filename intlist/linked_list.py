"""
Singly linked list of integers addressed by its head node.

There is no list object: a chain is handed around as its first Node, and None
stands for the empty list. Size and tail are computed by walking the chain.
Nodes come from a NodeAllocator; allocation failure never raises, it shows up
as a None result (create, from_array) or as a no-op (append).
"""

import operator

import numpy as np

from .allocator import DEFAULT_ALLOCATOR
from .log import get_log


INT_MIN, INT_MAX = int(np.iinfo(np.int64).min), int(np.iinfo(np.int64).max)


def _as_int(value):
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError('Only integers can be stored, got %r.' % (value,)) from None
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError('Value %d is outside the int64 range.' % value)
    return value


def head(head):
    '''return the head of the chain, i.e. the handle itself'''
    return head


def tail(head):
    '''return the last node of the chain, None for an empty chain'''
    if head is None:
        return None
    current = head
    while current.next is not None:
        current = current.next
    return current


def size(head):
    '''number of nodes reachable from head'''
    count, current = 0, head
    while current is not None:
        count, current = count+1, current.next
    return count


def find(head, value):
    '''return the first node holding value, None if not present'''
    value = _as_int(value)
    current = head
    while current is not None:
        if current.data == value:
            return current
        current = current.next
    return None


def to_array(head):
    """
    Copy the chain into a new 1-d int64 numpy array, head to tail.

    Returns None for an empty chain.
    """
    n = size(head)
    if n == 0:
        return None
    out = np.empty(n, dtype=np.int64)
    current, i = head, 0
    while current is not None:
        out[i] = current.data
        current, i = current.next, i+1
    return out


def create(value, allocator=None):
    """
    Create a single-node chain holding value.

    Returns None if the node cannot be allocated.
    """
    value = _as_int(value)
    if allocator is None:
        allocator = DEFAULT_ALLOCATOR
    return allocator.allocate(value)


def destroy(head, allocator=None):
    """
    Release every node of the chain.

    Neither head nor any node taken from the chain may be used afterwards.
    """
    if allocator is None:
        allocator = DEFAULT_ALLOCATOR
    current = head
    while current is not None:
        if not allocator.owns(current):
            raise ValueError('Node %r is not owned by this allocator.' % (current,))
        current = current.next
    count, current = 0, head
    while current is not None:
        next = current.next
        allocator.release(current)
        count, current = count+1, next
    if count:
        get_log('linked_list').debug('Destroyed chain of %d nodes.', count)


def append(head, value, allocator=None):
    """
    Link a new node holding value after the tail of the chain.

    head must not be None: there is no way to hand a new head back to the
    caller, so appending to an empty chain does nothing. Nothing happens
    either when the node cannot be allocated.
    """
    if head is None:
        return
    node = create(value, allocator=allocator)
    if node is None:
        get_log('linked_list').debug('Append of %r dropped, allocation failed.', value)
        return
    tail(head).next = node


def from_array(values, allocator=None):
    """
    Build a chain holding values in order.

    Parameters:
    ===========
    values: sequence of int (list, tuple, numpy array, ...) or None

    Returns:
    ========
    The head of the new chain. None if values is None or empty, or if any
    node cannot be allocated; in the latter case the nodes allocated so far
    are released again.
    """
    if values is None:
        return None
    values = [_as_int(v) for v in values]
    if not values:
        return None
    if allocator is None:
        allocator = DEFAULT_ALLOCATOR
    first = last = None
    for v in values:
        node = allocator.allocate(v)
        if node is None:
            get_log('linked_list').debug('Building chain of %d failed at node %d, rolling back.',
                    len(values), size(first))
            destroy(first, allocator=allocator)
            return None
        if first is None:
            first = node
        else:
            last.next = node
        last = node
    return first


def remove(head, value, allocator=None):
    """
    Remove the first node holding value and release it.

    Returns the head of the resulting chain, which is a different node when
    the original head was removed, and None when the chain becomes empty.
    """
    value = _as_int(value)
    if head is None:
        return None
    if allocator is None:
        allocator = DEFAULT_ALLOCATOR
    if head.data == value:
        new_head = head.next
        allocator.release(head)
        return new_head
    prev, current = head, head.next
    while current is not None:
        if current.data == value:
            next = current.next
            allocator.release(current)
            prev.next = next
            return head
        prev, current = current, current.next
    return head


def format_chain(head):
    '''converting the chain to a string, "1->2->3"'''
    parts, current = [], head
    while current is not None:
        parts.append(str(current.data))
        current = current.next
    return '->'.join(parts)
