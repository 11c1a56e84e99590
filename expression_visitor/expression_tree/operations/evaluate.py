from typing import List
from .base import Operation
from .postfix import format_operand
from ..core.operators import BINARY_OP_MAP, apply_binary_op
from ...errors import UnderflowError, UnknownOperatorError, EmptyResultError
from ...logging_system import log_debug


class EvaluateOperation(Operation):
  """Evaluates the tree numerically with a value stack.

  Post-order pushes the left operand before the right one, so the first
  value popped for an operator is its right-hand side.
  """

  __slots__ = ('_stack',)

  def __init__(self):
    self._stack: List[float] = []

  @property
  def depth(self) -> int:
    return len(self._stack)

  def visit_operand(self, node) -> None:
    self._stack.append(float(node.value))

  def visit_operator(self, node) -> None:
    op_type = BINARY_OP_MAP.get(node.symbol)
    if op_type is None:
      log_debug(f"evaluation hit unsupported operator {node.symbol!r}")
      raise UnknownOperatorError(node.symbol)
    if len(self._stack) < 2:
      log_debug(f"evaluation underflow at '{node.symbol}' with {len(self._stack)} value(s)")
      raise UnderflowError(node.symbol, len(self._stack))

    a = self._stack.pop()
    b = self._stack.pop()
    self._stack.append(float(apply_binary_op(b, a, int(op_type))))

  def value(self) -> float:
    """Top of the stack, without popping"""
    if not self._stack:
      log_debug("evaluation result requested from an empty stack")
      raise EmptyResultError()
    return self._stack[-1]

  def result(self) -> str:
    return format_operand(self.value())
