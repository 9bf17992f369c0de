"""Classic data structures: LRU cache, min-stack, trie and tree codecs."""

from __future__ import annotations

from collections import OrderedDict, deque
from collections.abc import Iterator
from dataclasses import dataclass, field

from algokit.nodes import TreeNode

_NIL = "nil"
_PAIRS = {"(": ")", "[": "]", "{": "}"}


class LRUCache:
    """A fixed-capacity cache that evicts the least recently used key."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: OrderedDict[int, int] = OrderedDict()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def get(self, key: int) -> int:
        """Return the value for ``key`` and mark it recently used, or -1 if absent."""
        if key not in self._items:
            return -1
        self._items.move_to_end(key)
        return self._items[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry when full."""
        if key in self._items:
            self._items[key] = value
            self._items.move_to_end(key)
            return
        if len(self._items) >= self.capacity:
            self._items.popitem(last=False)
        self._items[key] = value


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        current = min(val, self._entries[-1][1]) if self._entries else val
        self._entries.append((val, current))

    def pop(self) -> None:
        """Remove the top element; raise IndexError when empty."""
        if not self._entries:
            raise IndexError("pop from empty stack")
        self._entries.pop()

    def top(self) -> int:
        """Return the top element; raise IndexError when empty."""
        if not self._entries:
            raise IndexError("top of empty stack")
        return self._entries[-1][0]

    def get_min(self) -> int:
        """Return the smallest element; raise IndexError when empty."""
        if not self._entries:
            raise IndexError("minimum of empty stack")
        return self._entries[-1][1]


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_end: bool = False


class Trie:
    """A prefix tree of words."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def _find(self, text: str) -> _TrieNode | None:
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Tell whether ``word`` was inserted."""
        node = self._find(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Tell whether some inserted word begins with ``prefix``."""
        return self._find(prefix) is not None


def _parse_value(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"invalid node value {token!r}") from None


class Codec:
    """Serialise binary trees to comma-separated preorder text and back."""

    def serialize(self, root: TreeNode | None) -> str:
        """Encode ``root`` in preorder, writing ``nil`` for missing children."""
        return ",".join(self._tokens(root))

    def _tokens(self, root: TreeNode | None) -> Iterator[str]:
        stack: list[TreeNode | None] = [root]
        while stack:
            node = stack.pop()
            if node is None:
                yield _NIL
                continue
            yield str(node.val)
            stack.append(node.right)
            stack.append(node.left)

    def deserialize(self, data: str) -> TreeNode | None:
        """Decode text produced by :meth:`serialize`."""
        tokens = iter(data.split(","))

        def decode() -> TreeNode | None:
            token = next(tokens, None)
            if token is None:
                raise ValueError("serialized tree ended unexpectedly")
            if token == _NIL:
                return None
            node = TreeNode(_parse_value(token))
            node.left = decode()
            node.right = decode()
            return node

        root = decode()
        if next(tokens, None) is not None:
            raise ValueError("trailing data after serialized tree")
        return root


def bfs_serialize(root: TreeNode | None) -> str:
    """Encode a tree level by level; every entry is followed by a comma."""
    if root is None:
        return _NIL
    parts = []
    queue: deque[TreeNode | None] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            parts.append(_NIL + ",")
            continue
        parts.append(f"{node.val},")
        queue.append(node.left)
        queue.append(node.right)
    return "".join(parts)


def bfs_deserialize(data: str) -> TreeNode | None:
    """Decode text produced by :func:`bfs_serialize`."""
    if data == _NIL:
        return None
    tokens = data.split(",")
    while tokens and tokens[-1] in (_NIL, ""):
        tokens.pop()
    if not tokens:
        raise ValueError("serialized tree holds no root")
    root = TreeNode(_parse_value(tokens[0]))
    queue = deque([root])
    rest = iter(tokens[1:])
    while queue:
        node = queue.popleft()
        left = next(rest, None)
        if left is None:
            break
        if left != _NIL:
            node.left = TreeNode(_parse_value(left))
            queue.append(node.left)
        right = next(rest, None)
        if right is None:
            break
        if right != _NIL:
            node.right = TreeNode(_parse_value(right))
            queue.append(node.right)
    return root


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order."""
    stack: list[str] = []
    for ch in s:
        if stack and _PAIRS.get(stack[-1]) == ch:
            stack.pop()
        else:
            stack.append(ch)
    return not stack