import numpy as np
from abc import ABC, abstractmethod
from typing import Optional, Tuple, List, Iterator, Union
from .operators import NodeType


def _same_value(a, b) -> bool:
  """Operand values match exactly: NaN matches NaN, 0.0 differs from -0.0"""
  if np.isnan(a) and np.isnan(b):
    return True
  return bool(a == b) and bool(np.signbit(a) == np.signbit(b))


class Node(ABC):
  """Base node of a strict binary expression tree.

  Nodes are built bottom-up and never mutated afterwards, so size and hash
  are cached on first use. Every whole-tree walk here uses an explicit
  stack so tree height is not bounded by the recursion limit.
  """

  __slots__ = ('_hash_cache', '_size_cache')

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None

  def _post_order(self) -> Iterator['Node']:
    stack: List[Tuple['Node', bool]] = [(self, False)]
    while stack:
      node, expanded = stack.pop()
      if expanded:
        yield node
        continue
      stack.append((node, True))
      # Pushed in reverse so the left child is processed first
      for child in reversed(node.children()):
        stack.append((child, False))

  def accept(self, operation) -> None:
    """Run `operation` over the subtree rooted here in post-order.

    Left subtree, then right subtree, then the node itself. Every node gets
    exactly one callback. Absent children are skipped.
    """
    for node in self._post_order():
      node._dispatch(operation)

  @abstractmethod
  def _dispatch(self, operation) -> None:
    pass

  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    """Present children, left to right"""
    pass

  @abstractmethod
  def _child_slots(self) -> Tuple[Optional['Node'], ...]:
    """Children including absent ones, left to right"""
    pass

  @abstractmethod
  def _same_payload(self, other: 'Node') -> bool:
    pass

  def size(self) -> int:
    """Number of nodes in this subtree"""
    if self._size_cache is None:
      self._size_cache = self._compute_size()
    return self._size_cache

  def _compute_size(self) -> int:
    count = 0
    stack = [self]
    while stack:
      node = stack.pop()
      count += 1
      stack.extend(node.children())
    return count

  def structurally_equal(self, other) -> bool:
    """Same variants, same symbols and values, same shape"""
    stack = [(self, other)]
    while stack:
      a, b = stack.pop()
      if a is b:
        continue
      if a is None or b is None or type(a) is not type(b):
        return False
      if not a._same_payload(b):
        return False
      stack.extend(zip(a._child_slots(), b._child_slots()))
    return True

  def __hash__(self) -> int:
    if self._hash_cache is None:
      # Children come first, so _compute_hash only ever reads cached hashes
      for node in self._post_order():
        if node._hash_cache is None:
          node._hash_cache = node._compute_hash()
    return self._hash_cache

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  @abstractmethod
  def _repr_parts(self) -> List[Union[str, 'Node', None]]:
    pass

  def __repr__(self) -> str:
    parts = []
    stack: List[Union[str, Node, None]] = [self]
    while stack:
      item = stack.pop()
      if isinstance(item, str):
        parts.append(item)
      elif item is None:
        parts.append("None")
      else:
        stack.extend(reversed(item._repr_parts()))
    return "".join(parts)


class OperandNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: float):
    super().__init__()
    self.value = value

  def _dispatch(self, operation) -> None:
    operation.visit_operand(self)

  def children(self) -> Tuple[Node, ...]:
    return ()

  def _child_slots(self) -> Tuple[Optional[Node], ...]:
    return ()

  def _same_payload(self, other: Node) -> bool:
    return _same_value(self.value, other.value)

  def _compute_size(self) -> int:
    return 1

  def _compute_hash(self) -> int:
    # hash(nan) is identity based; all NaN operands must hash alike
    if np.isnan(self.value):
      return hash((NodeType.OPERAND, 'nan'))
    return hash((NodeType.OPERAND, self.value))

  def _repr_parts(self) -> List[Union[str, Node, None]]:
    return [f"OperandNode({self.value!r})"]


class OperatorNode(Node):
  __slots__ = ('symbol', 'left', 'right')

  def __init__(self, symbol: str, left: Optional[Node] = None, right: Optional[Node] = None):
    super().__init__()
    self.symbol = symbol
    self.left = left
    self.right = right

  def _dispatch(self, operation) -> None:
    operation.visit_operator(self)

  def children(self) -> Tuple[Node, ...]:
    return tuple(child for child in (self.left, self.right) if child is not None)

  def _child_slots(self) -> Tuple[Optional[Node], ...]:
    return (self.left, self.right)

  def _same_payload(self, other: Node) -> bool:
    return self.symbol == other.symbol

  def is_complete(self) -> bool:
    return self.left is not None and self.right is not None

  def _compute_hash(self) -> int:
    return hash((NodeType.OPERATOR, self.symbol, hash(self.left), hash(self.right)))

  def _repr_parts(self) -> List[Union[str, Node, None]]:
    return [f"OperatorNode({self.symbol!r}, ", self.left, ", ", self.right, ")"]
