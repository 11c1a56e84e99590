"""
Tree Utility Functions

Traversal and analysis helpers for expression trees. Absent children of
degenerate operator nodes are skipped everywhere.
"""

from typing import List, Type
from collections import deque

from ..core.node import Node, OperandNode, OperatorNode
from ..operations.base import Operation


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default), 'depth_first' (pre-order)
            or 'post_order'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    elif traversal_order == 'post_order':
        return _post_order_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Pre-order, iterative"""
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)
        stack.extend(reversed(current_node.children()))

    return all_nodes


class _NodeCollector(Operation):
    """Operation that records nodes in the order accept() visits them"""

    def __init__(self):
        self.nodes: List[Node] = []

    def visit_operand(self, node):
        self.nodes.append(node)

    def visit_operator(self, node):
        self.nodes.append(node)

    def result(self):
        return self.nodes


def _post_order_traversal(node: Node) -> List[Node]:
    collector = _NodeCollector()
    node.accept(collector)
    return collector.result()


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    max_depth = 0
    stack = [(node, 1)]
    while stack:
        current_node, depth = stack.pop()
        max_depth = max(max_depth, depth)
        for child in current_node.children():
            stack.append((child, depth + 1))
    return max_depth


def find_nodes_by_type(node: Node, node_type: Type[Node]) -> List[Node]:
    """All nodes that are instances of node_type, breadth-first"""
    return [n for n in get_all_nodes(node) if isinstance(n, node_type)]


def find_nodes_by_operator(node: Node, symbol: str) -> List[OperatorNode]:
    """All operator nodes carrying the given symbol, breadth-first"""
    return [n for n in get_operators(node) if n.symbol == symbol]


def get_operands(node: Node) -> List[OperandNode]:
    return find_nodes_by_type(node, OperandNode)


def get_operators(node: Node) -> List[OperatorNode]:
    return find_nodes_by_type(node, OperatorNode)
