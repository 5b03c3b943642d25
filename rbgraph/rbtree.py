import collections
import enum
import logging
from typing import Iterator, Optional

from .errors import (
    DuplicateValueError,
    InvalidRotationError,
    MissingValueError,
    NullValueError,
)

logger = logging.getLogger(__name__)


class Direction(enum.IntEnum):
    ROOT = -1
    LEFT = 0
    RIGHT = 1


class Colour(enum.Enum):
    BLACK = 0
    RED = 1
    # reserved for deletion rebalancing, never assigned
    DOUBLE_BLACK = 2


class Node:

    def __init__(self, value):
        self.parent: Optional[Node] = None
        self.right: Optional[Node] = None
        self.left: Optional[Node] = None
        self.colour = Colour.RED
        self.value = value

    def get_child(self, direction: Direction):
        if direction == Direction.LEFT:
            return self.left
        return self.right

    def set_child(self, direction: Direction, node: Optional["Node"]):
        if direction == Direction.LEFT:
            self.left = node
        else:
            self.right = node

    def get_direction(self) -> Direction:
        if self.parent is None:
            return Direction.ROOT
        return Direction.LEFT if self is self.parent.left else Direction.RIGHT

    def is_right_child(self) -> bool:
        return self.get_direction() == Direction.RIGHT

    def __repr__(self):
        return f"Node({self.value!r}, {self.colour.name})"


class RedBlackTree:
    """Ordered, duplicate-free collection kept balanced on insertion.

    Values only need to support ``<`` and ``>`` against each other. Removal
    splices nodes out without rebalancing, so after a removal the tree keeps
    its ordering but may lose the red-black colouring invariants.
    """

    def __init__(self):
        self.root: Optional[Node] = None
        self._size = 0

    def size(self) -> int:
        return self._size

    def __len__(self):
        return self.size()

    def is_empty(self):
        return not self.root

    def insert(self, value) -> bool:
        """Adds value to the tree and restores the red-black invariants

        Args:
            value: element to store, comparable with the stored elements

        Raises:
            NullValueError: if value is None
            DuplicateValueError: if an equal value is already stored

        Returns:
            bool: True once the value has been inserted
        """
        if value is None:
            raise NullValueError("RedBlackTree cannot store None")

        parent = None
        direction = Direction.ROOT
        child = self.root
        while child is not None:
            parent = child
            if value < parent.value:
                direction = Direction.LEFT
            elif value > parent.value:
                direction = Direction.RIGHT
            else:
                raise DuplicateValueError(f"RedBlackTree already contains {value!r}")
            child = parent.get_child(direction)

        node = Node(value)
        node.parent = parent
        if parent is None:
            self.root = node
        else:
            parent.set_child(direction, node)
        self._size += 1
        logger.debug("inserted %r under %r", value, parent)

        self._enforce_after_insert(node)
        self.root.colour = Colour.BLACK
        return True

    def rotate(self, child: Node, parent: Node):
        """Swaps the levels of child and parent, keeping the tree ordered

        A right child is rotated left over its parent, a left child right.
        Colours are left untouched.

        Raises:
            InvalidRotationError: if child is not a direct child of parent
        """
        if (child is None or parent is None or child.parent is not parent
                or (child is not parent.left and child is not parent.right)):
            raise InvalidRotationError("parent and child are not related")
        # the parent moves down on the side opposite the child
        return self._rotate_subtree(parent, Direction(1 - child.get_direction()))

    def _enforce_after_insert(self, node: Node):
        while True:
            parent = node.parent
            # a node at the root only needs to be black
            if parent is None:
                node.colour = Colour.BLACK
                return

            # no red-red edge between node and its parent, nothing to fix
            if node.colour == Colour.BLACK or parent.colour == Colour.BLACK:
                return

            grandparent = parent.parent
            if grandparent is None:
                # red root, only reachable if colours were changed by hand
                parent.colour = Colour.BLACK
                return

            direction = parent.get_direction()
            uncle = grandparent.get_child(Direction(1 - direction))

            # red uncle: push the blackness of the grandparent down a level
            # and continue two steps up the tree
            if uncle is not None and uncle.colour == Colour.RED:
                logger.debug("recolouring around %r", grandparent)
                parent.colour = Colour.BLACK
                uncle.colour = Colour.BLACK
                grandparent.colour = Colour.RED
                node = grandparent
                continue

            if node.is_right_child() != parent.is_right_child():
                # node sits between parent and grandparent, lift it above both
                logger.debug("double rotation of %r over %r", node, grandparent)
                self.rotate(node, parent)
                self.rotate(node, grandparent)
                node.colour = Colour.BLACK
                grandparent.colour = Colour.RED
            else:
                logger.debug("single rotation of %r over %r", parent, grandparent)
                self.rotate(parent, grandparent)
                parent.colour = Colour.BLACK
                grandparent.colour = Colour.RED
                node = parent

    def contains(self, value) -> bool:
        return self.find_node(value) is not None

    def __contains__(self, value):
        return self.contains(value)

    def find_node(self, value) -> Optional[Node]:
        """Returns the node holding value, or None"""
        if value is None:
            raise NullValueError("RedBlackTree cannot store None")
        node = self.root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def smallest(self, node: Node = None) -> Optional[Node]:
        """Returns the leftmost node of the subtree rooted at node, or None if
        there is no such subtree"""
        node = node or self.root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node

    def remove(self, value) -> bool:
        """Removes value from the tree without rebalancing

        Ordering is preserved, but the colouring of the remaining nodes is not
        repaired, so the black-height of some paths may differ afterwards.

        Raises:
            NullValueError: if value is None
            MissingValueError: if value is not stored in the tree
        """
        if value is None:
            raise NullValueError("RedBlackTree cannot store None")

        node = self.find_node(value)
        if node is None:
            raise MissingValueError(f"{value!r} is not in the tree and cannot be removed")

        # node has 2 non-null children: take the value of the next largest
        # node, the leftmost child of the right subtree, and splice that out
        if node.left is not None and node.right is not None:
            successor = self.smallest(node.right)
            node.value = successor.value
            self._replace(successor, successor.right)
        else:
            self._replace(node, node.left or node.right)

        self._size -= 1
        logger.debug("removed %r", value)
        return True

    def _replace(self, node: Node, replacement: Optional[Node]):
        parent = node.parent
        if replacement is not None:
            replacement.parent = parent
        if parent is None:
            self.root = replacement
        else:
            parent.set_child(node.get_direction(), replacement)
        node.parent = node.left = node.right = None

    def _rotate_subtree(self, sub: Node, direction: Direction):
        sub_parent = sub.parent
        new_root = sub.get_child(Direction(1 - direction))
        new_child = new_root.get_child(direction)

        sub.set_child(Direction(1 - direction), new_child)

        if new_child is not None:
            new_child.parent = sub

        new_root.set_child(direction, sub)

        new_root.parent = sub_parent
        sub.parent = new_root
        if sub_parent is not None:
            d = Direction.RIGHT if sub is sub_parent.right else Direction.LEFT
            sub_parent.set_child(d, new_root)
        else:
            self.root = new_root

        return new_root

    def clear(self):
        self.root = None
        self._size = 0

    def in_order(self) -> Iterator:
        stack = []
        node = self.root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                yield node.value
                node = node.right

    def __iter__(self):
        return self.in_order()

    def level_order(self) -> Iterator:
        if self.root is None:
            return
        queue = collections.deque([self.root])
        while queue:
            node = queue.popleft()
            yield node.value
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def to_in_order_string(self) -> str:
        return "[ " + ", ".join(str(v) for v in self.in_order()) + " ]"

    def to_level_order_string(self) -> str:
        return "[ " + ", ".join(str(v) for v in self.level_order()) + " ]"

    def __str__(self):
        return (f"level order: {self.to_level_order_string()}\n"
                f"in order: {self.to_in_order_string()}")

    def height(self, node: Node) -> int:
        if node is None:
            return -1
        return 1 + max(self.height(node.left), self.height(node.right))

    def pprint(self, node: Node, depth=0):
        if node is None:
            return "\t" * depth + "|_ null\n"
        # recursively draw a tree
        direction = node.get_direction()
        return ("\t" * depth + f"|_ {direction.name} | {node.value}: {node.colour.name}\n"
                + self.pprint(node.left, depth + 1)
                + self.pprint(node.right, depth + 1))
