import pytest

from expression_visitor import OperandNode, OperatorNode


@pytest.fixture
def demo_tree():
  """+(2.0, -(10.3, 4.7))"""
  return OperatorNode(
    '+',
    OperandNode(2.0),
    OperatorNode('-', OperandNode(10.3), OperandNode(4.7))
  )
