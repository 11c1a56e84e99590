from typing import List
from .base import Operation


def format_operand(value) -> str:
  """C-style %f rendering: six decimals, nan/inf for non-finite values"""
  return f"{value:f}"


class PostfixRenderOperation(Operation):
  """Renders the tree in postfix notation, one space after every token"""

  __slots__ = ('_tokens',)

  def __init__(self):
    self._tokens: List[str] = []

  def visit_operand(self, node) -> None:
    self._tokens.append(format_operand(node.value) + " ")

  def visit_operator(self, node) -> None:
    self._tokens.append(f"{node.symbol} ")

  def result(self) -> str:
    # Trailing space after the last token is kept
    return "".join(self._tokens)
