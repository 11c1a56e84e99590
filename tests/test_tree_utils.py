import pytest

from expression_visitor import OperandNode, OperatorNode, ExpressionValidator
from expression_visitor.expression_tree.utils import (
  get_all_nodes, calculate_tree_depth, find_nodes_by_operator,
  get_operands, get_operators
)


def _values(nodes):
  return [n.value if isinstance(n, OperandNode) else n.symbol for n in nodes]


def test_traversal_orders(demo_tree):
  assert _values(get_all_nodes(demo_tree)) == ['+', 2.0, '-', 10.3, 4.7]
  assert _values(get_all_nodes(demo_tree, 'depth_first')) == ['+', 2.0, '-', 10.3, 4.7]
  assert _values(get_all_nodes(demo_tree, 'post_order')) == [2.0, 10.3, 4.7, '-', '+']


def test_breadth_first_differs_from_depth_first():
  tree = OperatorNode(
    '+',
    OperatorNode('-', OperandNode(1.0), OperandNode(2.0)),
    OperandNode(3.0)
  )
  assert _values(get_all_nodes(tree)) == ['+', '-', 3.0, 1.0, 2.0]
  assert _values(get_all_nodes(tree, 'depth_first')) == ['+', '-', 1.0, 2.0, 3.0]


def test_invalid_traversal_order(demo_tree):
  with pytest.raises(ValueError):
    get_all_nodes(demo_tree, 'sideways')


def test_depth_and_lookups(demo_tree):
  assert calculate_tree_depth(demo_tree) == 3
  assert calculate_tree_depth(OperandNode(1.0)) == 1
  assert calculate_tree_depth(OperatorNode('+')) == 1
  assert len(get_operands(demo_tree)) == 3
  assert len(get_operators(demo_tree)) == 2
  assert [n.symbol for n in find_nodes_by_operator(demo_tree, '-')] == ['-']


def test_validator_accepts_well_formed_tree(demo_tree):
  assert ExpressionValidator.is_valid_expression(demo_tree)
  assert ExpressionValidator.find_problems(demo_tree) == []


def test_validator_reports_problems():
  tree = OperatorNode('*', OperandNode(1.0), OperatorNode('+', None, OperandNode(2.0)))
  problems = ExpressionValidator.find_problems(tree)
  assert problems == [
    "unsupported operator symbol: '*'",
    "operator '+' is missing its left child",
  ]
  assert not ExpressionValidator.is_valid_expression(tree)


def test_validator_finite_check():
  tree = OperatorNode('+', OperandNode(float('nan')), OperandNode(1.0))
  assert ExpressionValidator.is_valid_expression(tree)
  assert not ExpressionValidator.is_valid_expression(tree, check_finite=True)
