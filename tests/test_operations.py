import numpy as np
import pytest
import sympy as sp

from expression_visitor import (
  OperandNode, OperatorNode, Operation, run,
  PostfixRenderOperation, EvaluateOperation, InfixRenderOperation, SympyOperation,
  UnderflowError, UnknownOperatorError, EmptyResultError, ExpressionTreeError
)
from expression_visitor.expression_tree import format_operand


def test_demo_postfix(demo_tree):
  assert run(demo_tree, PostfixRenderOperation()) == "2.000000 10.300000 4.700000 - + "


def test_demo_evaluation(demo_tree):
  op = EvaluateOperation()
  demo_tree.accept(op)
  assert op.result() == "7.600000"
  assert np.isclose(op.value(), 7.6)
  assert op.depth == 1


@pytest.mark.parametrize("value, expected", [
  (0.0, "0.000000 "),
  (-1.5, "-1.500000 "),
  (1e20, "100000000000000000000.000000 "),
  (1e-7, "0.000000 "),
  (float('inf'), "inf "),
  (float('-inf'), "-inf "),
  (float('nan'), "nan "),
])
def test_single_operand_postfix(value, expected):
  assert run(OperandNode(value), PostfixRenderOperation()) == expected


def test_format_operand_matches_c_style():
  assert format_operand(2.0) == "2.000000"
  assert format_operand(3) == "3.000000"


@pytest.mark.parametrize("symbol, a, b, expected", [
  ('+', 2.0, 3.0, 5.0),
  ('-', 2.0, 3.0, -1.0),
  ('-', 10.3, 4.7, 10.3 - 4.7),
  ('+', -0.25, 0.25, 0.0),
])
def test_binary_evaluation(symbol, a, b, expected):
  op = EvaluateOperation()
  OperatorNode(symbol, OperandNode(a), OperandNode(b)).accept(op)
  assert op.value() == expected


def test_evaluation_propagates_non_finite_values():
  op = EvaluateOperation()
  OperatorNode('+', OperandNode(float('nan')), OperandNode(1.0)).accept(op)
  assert np.isnan(op.value())
  assert op.result() == "nan"

  op = EvaluateOperation()
  OperatorNode('-', OperandNode(float('inf')), OperandNode(1.0)).accept(op)
  assert op.value() == float('inf')


def test_evaluation_matches_postfix_stack_semantics():
  # (1 - 2) - (3 - 4) = 0
  tree = OperatorNode(
    '-',
    OperatorNode('-', OperandNode(1.0), OperandNode(2.0)),
    OperatorNode('-', OperandNode(3.0), OperandNode(4.0))
  )
  assert run(tree, PostfixRenderOperation()) == \
    "1.000000 2.000000 - 3.000000 4.000000 - - "
  op = EvaluateOperation()
  tree.accept(op)
  assert op.value() == 0.0


def test_result_is_idempotent(demo_tree):
  postfix = PostfixRenderOperation()
  demo_tree.accept(postfix)
  assert postfix.result() == postfix.result()

  evaluation = EvaluateOperation()
  demo_tree.accept(evaluation)
  assert evaluation.result() == evaluation.result()
  assert evaluation.depth == 1


def test_unknown_operator_fails_without_touching_stack():
  tree = OperatorNode('*', OperandNode(2.0), OperandNode(3.0))
  op = EvaluateOperation()
  with pytest.raises(UnknownOperatorError) as exc_info:
    tree.accept(op)
  assert exc_info.value.symbol == '*'
  assert op.depth == 2
  assert op.value() == 3.0


def test_underflow_on_missing_operand():
  tree = OperatorNode('+', OperandNode(2.0), None)
  op = EvaluateOperation()
  with pytest.raises(UnderflowError) as exc_info:
    tree.accept(op)
  assert exc_info.value.available == 1
  assert op.depth == 1


def test_empty_result_errors():
  op = EvaluateOperation()
  with pytest.raises(EmptyResultError):
    op.result()
  with pytest.raises(EmptyResultError):
    op.value()


def test_error_kinds_share_base():
  for error_type in (UnderflowError, UnknownOperatorError, EmptyResultError):
    assert issubclass(error_type, ExpressionTreeError)


def test_postfix_is_total_over_degenerate_trees():
  tree = OperatorNode('?', OperatorNode('+'), OperandNode(1.0))
  assert run(tree, PostfixRenderOperation()) == "+ 1.000000 ? "


def test_infix_rendering(demo_tree):
  assert run(demo_tree, InfixRenderOperation()) == "(2.000 + (10.300 - 4.700))"
  assert run(OperatorNode('-', None, OperandNode(1.0)), InfixRenderOperation()) == "(? - 1.000)"


def test_sympy_operation(demo_tree):
  expr = run(demo_tree, SympyOperation())
  assert isinstance(expr, sp.Expr)
  assert np.isclose(float(expr), 7.6)

  with pytest.raises(UnknownOperatorError):
    run(OperatorNode('/', OperandNode(1.0), OperandNode(2.0)), SympyOperation())
  with pytest.raises(UnderflowError):
    run(OperatorNode('+', OperandNode(1.0)), SympyOperation())


def test_new_operation_without_touching_nodes(demo_tree):
  class CountOperation(Operation):
    def __init__(self):
      self.operands = 0
      self.operators = 0

    def visit_operand(self, node):
      self.operands += 1

    def visit_operator(self, node):
      self.operators += 1

    def result(self):
      return (self.operands, self.operators)

  assert run(demo_tree, CountOperation()) == (3, 2)


def test_operation_is_abstract():
  with pytest.raises(TypeError):
    Operation()
