import sympy as sp
from typing import List
from .base import Operation
from ..core.operators import is_supported_operator
from ...errors import UnderflowError, UnknownOperatorError, EmptyResultError
from ...logging_system import log_debug


class SympyOperation(Operation):
  """Builds the equivalent sympy expression.

  Leaves become sp.Float; subtraction is expressed as an Add of the negated
  right-hand side, as sympy represents it internally.
  """

  __slots__ = ('_exprs',)

  def __init__(self):
    self._exprs: List[sp.Expr] = []

  def visit_operand(self, node) -> None:
    self._exprs.append(sp.Float(node.value))

  def visit_operator(self, node) -> None:
    if not is_supported_operator(node.symbol):
      log_debug(f"sympy conversion hit unsupported operator {node.symbol!r}")
      raise UnknownOperatorError(node.symbol)
    if len(self._exprs) < 2:
      log_debug(f"sympy conversion underflow at '{node.symbol}' with {len(self._exprs)} expression(s)")
      raise UnderflowError(node.symbol, len(self._exprs))

    right = self._exprs.pop()
    left = self._exprs.pop()
    if node.symbol == '+':
      self._exprs.append(sp.Add(left, right))
    else:
      self._exprs.append(sp.Add(left, sp.Mul(-1, right)))

  def result(self) -> sp.Expr:
    if not self._exprs:
      log_debug("sympy conversion has no expression to return")
      raise EmptyResultError()
    return self._exprs[-1]
