from typing import List
from .base import Operation


class InfixRenderOperation(Operation):
  """Fully parenthesised infix text, e.g. "(2.000 + (10.300 - 4.700))".

  A missing child renders as "?".
  """

  __slots__ = ('_parts',)

  def __init__(self):
    self._parts: List[str] = []

  def visit_operand(self, node) -> None:
    self._parts.append(f"{node.value:.3f}")

  def visit_operator(self, node) -> None:
    right = self._parts.pop() if node.right is not None else "?"
    left = self._parts.pop() if node.left is not None else "?"
    self._parts.append(f"({left} {node.symbol} {right})")

  def result(self) -> str:
    return self._parts[-1] if self._parts else ""
