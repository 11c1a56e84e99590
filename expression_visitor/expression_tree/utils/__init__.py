"""Utilities for expression trees."""

from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type,
    find_nodes_by_operator, get_operands, get_operators
)
from .validator import ExpressionValidator

__all__ = [
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type',
    'find_nodes_by_operator', 'get_operands', 'get_operators',
    'ExpressionValidator'
]
