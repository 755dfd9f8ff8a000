class Node:
    '''A single link of an integer chain. The chain is addressed by its first node, None is the empty list.'''

    __slots__ = ['data', 'next'] #memory efficient

    def __init__(self, data, next=None):
        self.data, self.next = data, next


    def __repr__(self):
        return 'Node(%r)' % (self.data,)
