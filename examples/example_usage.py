import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from expression_visitor import (
  Expression, OperandNode, OperatorNode, Operation, run,
  ExpressionValidator, UnknownOperatorError, LogLevel, configure_logging
)


class OperandSumOperation(Operation):
  """Sums every operand value, ignoring the operators"""

  def __init__(self):
    self.total = 0.0

  def visit_operand(self, node):
    self.total += node.value

  def visit_operator(self, node):
    pass

  def result(self):
    return self.total


def main():
  configure_logging(LogLevel.VERBOSE)

  # (1.5 + 2.5) - (4.0 - 0.5)
  expr = Expression(OperatorNode(
    '-',
    OperatorNode('+', OperandNode(1.5), OperandNode(2.5)),
    OperatorNode('-', OperandNode(4.0), OperandNode(0.5))
  ))

  print(f"Infix:   {expr}")
  print(f"Postfix: {expr.to_postfix()}")
  print(f"Value:   {expr.evaluate()}")
  print(f"SymPy:   {expr.to_sympy()}")
  print(f"Operand sum: {run(expr.root, OperandSumOperation())}")

  bad = OperatorNode('*', OperandNode(2.0), OperandNode(3.0))
  print(f"Problems: {ExpressionValidator.find_problems(bad)}")
  try:
    Expression(bad).evaluate()
  except UnknownOperatorError as e:
    print(f"Evaluation failed: {e}")


if __name__ == "__main__":
  main()
