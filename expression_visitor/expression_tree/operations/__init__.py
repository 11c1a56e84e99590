"""Pluggable tree-consuming operations."""

from .base import Operation, run
from .postfix import PostfixRenderOperation, format_operand
from .evaluate import EvaluateOperation
from .infix import InfixRenderOperation
from .sympy_builder import SympyOperation

__all__ = [
    'Operation', 'run',
    'PostfixRenderOperation', 'format_operand',
    'EvaluateOperation', 'InfixRenderOperation', 'SympyOperation'
]
