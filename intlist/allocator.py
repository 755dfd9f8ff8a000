from .node import Node
from .log import get_log


class NodeAllocator:
    """
    Hand out and take back chain nodes, keeping track of the live ones.

    Every node produced by allocate() has to be given back through release()
    exactly once; `live` is then zero for a program that does not leak.
    """

    def __init__(self, limit=None):
        """
        Parameters:
        ===========
        limit: int or None
            Maximum number of nodes alive at the same time. Allocation beyond
            it fails (allocate returns None). None means no limit.
        """
        if limit is not None and limit < 0:
            raise ValueError('Allocation limit has to be non-negative, got %r.' % limit)
        self.limit = limit
        self.reset()


    def reset(self):
        '''forget all bookkeeping, nodes handed out so far are not owned any more'''
        self._live = set()
        self.allocated = 0
        self.released = 0


    @property
    def live(self):
        return len(self._live)


    def owns(self, node):
        return node in self._live


    def allocate(self, data):
        """
        Return a new node holding data, or None if the limit is exhausted.
        """
        if self.limit is not None and len(self._live) >= self.limit:
            get_log('allocator').debug('Allocation of %r refused, %d nodes live (limit %d).',
                    data, len(self._live), self.limit)
            return None
        node = Node(data)
        self._live.add(node)
        self.allocated += 1
        return node


    def release(self, node):
        """
        Take back a node. Its successor link is cleared.
        """
        if node not in self._live:
            raise ValueError('Node %r is not owned by this allocator.' % (node,))
        self._live.remove(node)
        node.next = None
        self.released += 1


DEFAULT_ALLOCATOR = NodeAllocator()
