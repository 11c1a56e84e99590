"""Core expression tree components."""

from .node import Node, OperandNode, OperatorNode
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, apply_binary_op, is_supported_operator
)

__all__ = [
    'Node', 'OperandNode', 'OperatorNode',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'apply_binary_op', 'is_supported_operator'
]
