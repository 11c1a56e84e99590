import sympy as sp
from typing import Optional
from .core.node import Node
from .operations import (
  Operation, run, PostfixRenderOperation, EvaluateOperation,
  InfixRenderOperation, SympyOperation
)
from .utils.tree_utils import calculate_tree_depth


class Expression:
  """Expression tree root with cached renderings"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    self.root = root
    self._string_cache: Optional[str] = None

  def apply(self, operation: Operation):
    return run(self.root, operation)

  def to_postfix(self) -> str:
    return self.apply(PostfixRenderOperation())

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.apply(InfixRenderOperation())
    return self._string_cache

  def evaluate(self) -> float:
    operation = EvaluateOperation()
    self.root.accept(operation)
    return operation.value()

  def to_sympy(self) -> sp.Expr:
    return self.apply(SympyOperation())

  def size(self) -> int:
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def __str__(self) -> str:
    return self.to_string()

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    if hash(self) != hash(other):
      return False
    return self.root.structurally_equal(other.root)
