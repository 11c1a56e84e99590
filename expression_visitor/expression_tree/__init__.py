"""Expression Tree Module

Binary expression trees and the operations that consume them.
"""

from .expression import Expression
from .core.node import Node, OperandNode, OperatorNode
from .core.operators import (
    NodeType, OpType, BINARY_OP_MAP, apply_binary_op, is_supported_operator
)
from .operations import (
    Operation, run, PostfixRenderOperation, EvaluateOperation,
    InfixRenderOperation, SympyOperation, format_operand
)
from .utils import ExpressionValidator

__all__ = [
    "Expression",
    "Node", "OperandNode", "OperatorNode",
    "NodeType", "OpType", "BINARY_OP_MAP", "apply_binary_op", "is_supported_operator",
    "Operation", "run", "PostfixRenderOperation", "EvaluateOperation",
    "InfixRenderOperation", "SympyOperation", "format_operand",
    "ExpressionValidator"
]
