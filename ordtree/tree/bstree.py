from ..exception import TreeInvariantError

class BSTreeNode(object):
    """A node of an unbalanced binary search tree."""

    __slots__ = ('key', 'left', 'right', 'parent')

    def __init__(self, k, nil=None):
        self.key = k

        self.left = nil
        self.right = nil
        self.parent = nil

    def __repr__(self):
        return "BSTreeNode({0!r})".format(self.key)

class BSTree(object):
    """Unbalanced binary search tree of integer keys with parent links.

    Equal keys are allowed and always descend to the right. Absent
    relations point to the sentinel self.nil, which never leaves the tree:
    all public methods return None where a node is absent.
    """

    def __init__(self, node_type=BSTreeNode):
        self.node_type = node_type
        self.nil = self.node_type(k=None)
        self.nil.left = self.nil.right = self.nil.parent = self.nil
        self.root = self.nil
        self._size = 0

    def __len__(self):
        return self._size

    def __contains__(self, k):
        return self.contains(k)

    def __iter__(self):
        return self.inorder()

    def size(self):
        """Returns the number of nodes stored in the tree.

        Time complexity: O(1)"""
        return self._size

    def is_empty(self):
        return self.root is self.nil

    def contains(self, k):
        return self.find(k) is not None

    exists = contains

    def find(self, k):
        """Finds a node with key k. Returns None if k is not found.

        Time complexity: O(h)"""
        x = self.root
        while x is not self.nil and k != x.key:
            if k < x.key:
                x = x.left
            else:
                x = x.right
        return x if x is not self.nil else None

    def insert(self, k):
        """Insert a new node with key k. Duplicates go to the right.

        Returns the new node.
        Time complexity: O(h)"""
        new = self.node_type(k=k, nil=self.nil)
        y = self.nil
        x = self.root
        while x is not self.nil:
            y = x
            if new.key < x.key:
                x = x.left
            else:
                x = x.right

        new.parent = y
        if y is self.nil:
            self.root = new
        elif new.key < y.key:
            y.left = new
        else:
            y.right = new
        self._size += 1
        return new

    def deletekey(self, k):
        """Delete one node holding key k, if there is one.

        Returns the excised node or None."""
        node = self.find(k)
        if node is not None:
            node = self.delete(node)
        return node

    def delete(self, node):
        """Delete node from the tree.

        A node with two children keeps its place and receives the key of
        its successor, which is excised instead.
        Returns the excised node.
        Time complexity: O(h)"""
        if node.left is self.nil or node.right is self.nil:
            y = node
        else:
            y = self.minimum(node.right)

        if y.left is not self.nil:
            x = y.left
        else:
            x = y.right

        if x is not self.nil:
            x.parent = y.parent

        if y.parent is self.nil:
            self.root = x
        elif y is y.parent.left:
            y.parent.left = x
        else:
            y.parent.right = x

        if y is not node:
            node.key = y.key

        y.left = y.right = y.parent = self.nil
        self._size -= 1
        return y

    def minimum(self, x=None):
        """Finds the node with the minimal key in the subtree rooted at x

        Returns None if tree is empty
        Time complexity: O(h)"""
        if x is None:
            x = self.root
        if x is self.nil:
            return None

        while x.left is not self.nil:
            x = x.left
        return x

    def maximum(self, x=None):
        """Finds the node with the maximum key in the subtree rooted at x

        Time complexity: O(h)"""
        if x is None:
            x = self.root
        if x is self.nil:
            return None

        while x.right is not self.nil:
            x = x.right
        return x

    def successor(self, x):
        """Finds the successor of node x in sorted order

        Time complexity: O(h)"""
        if x.right is not self.nil:
            return self.minimum(x.right)
        y = x.parent
        while y is not self.nil and x is y.right:
            x = y
            y = y.parent
        return y if y is not self.nil else None

    def predecessor(self, x):
        """Finds the predecessor of node x in sorted order

        Time complexity: O(h)"""
        if x.left is not self.nil:
            return self.maximum(x.left)
        y = x.parent
        while y is not self.nil and x is y.left:
            x = y
            y = y.parent
        return y if y is not self.nil else None

    def inorder(self):
        """Yields all keys in sorted order (left, node, right).

        Time complexity: O(n)
        """
        stack = []
        x = self.root
        while stack or x is not self.nil:
            if x is not self.nil:
                stack.append(x)
                x = x.left
            else:
                x = stack.pop()
                yield x.key
                x = x.right

    def preorder(self):
        """Yields all keys in pre-order (node, left, right).

        Time complexity: O(n)
        """
        if self.root is self.nil:
            return
        stack = [self.root]
        while stack:
            x = stack.pop()
            yield x.key
            if x.right is not self.nil:
                stack.append(x.right)
            if x.left is not self.nil:
                stack.append(x.left)

    def height(self):
        """Number of nodes on the longest root-to-leaf path."""
        h = 0
        if self.root is self.nil:
            return h
        level = [self.root]
        while level:
            h += 1
            level = [c for x in level for c in (x.left, x.right)
                     if c is not self.nil]
        return h

    def check(self):
        """Verify the structural invariants of the tree.

        Raises TreeInvariantError on the first violation found.
        Time complexity: O(n)"""
        if self.root is self.nil:
            if self._size != 0:
                raise TreeInvariantError("empty tree reports size ",
                        self._size)
            return
        if self.root.parent is not self.nil:
            raise TreeInvariantError("root has a parent")

        count = 0
        seen = set()
        # (node, lower bound inclusive, upper bound exclusive)
        stack = [(self.root, None, None)]
        while stack:
            x, lo, hi = stack.pop()
            if id(x) in seen:
                raise TreeInvariantError("cycle at key ", x.key)
            seen.add(id(x))
            count += 1
            if lo is not None and x.key < lo:
                raise TreeInvariantError("key ", x.key,
                        " in right subtree of ", lo)
            if hi is not None and not x.key < hi:
                raise TreeInvariantError("key ", x.key,
                        " in left subtree of ", hi)
            for child, bounds in ((x.left, (lo, x.key)),
                                  (x.right, (x.key, hi))):
                if child is self.nil:
                    continue
                if child.parent is not x:
                    raise TreeInvariantError("broken parent link at key ",
                            child.key)
                stack.append((child,) + bounds)

        if count != self._size:
            raise TreeInvariantError("tree holds ", count,
                    " nodes but reports size ", self._size)
