__all__ = ['Node', 'NodeAllocator', 'DEFAULT_ALLOCATOR',
           'head', 'tail', 'size', 'find', 'to_array', 'create', 'destroy',
           'append', 'from_array', 'remove', 'format_chain']

from .node import Node
from .allocator import NodeAllocator, DEFAULT_ALLOCATOR
from .linked_list import head, tail, size, find, to_array, create, destroy, \
    append, from_array, remove, format_chain
