"""Expression Visitor Package

Binary arithmetic expression trees with interchangeable post-order
operations (postfix rendering, numeric evaluation, and more).
"""

from .expression_tree import (
  Expression, Node, OperandNode, OperatorNode,
  Operation, run, PostfixRenderOperation, EvaluateOperation,
  InfixRenderOperation, SympyOperation, ExpressionValidator
)
from .errors import (
  ExpressionTreeError, UnderflowError, UnknownOperatorError, EmptyResultError
)
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "OperandNode", "OperatorNode",
  "Operation", "run", "PostfixRenderOperation", "EvaluateOperation",
  "InfixRenderOperation", "SympyOperation", "ExpressionValidator",
  "ExpressionTreeError", "UnderflowError", "UnknownOperatorError", "EmptyResultError",
  "LogLevel", "configure_logging", "get_logger", "set_log_level"
]
