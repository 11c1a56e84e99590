"""Demo: build +(2.0, -(10.3, 4.7)) and print its postfix form and value."""

from .expression_tree import (
  OperatorNode, OperandNode, PostfixRenderOperation, EvaluateOperation
)


def build_demo_tree() -> OperatorNode:
  return OperatorNode(
    '+',
    OperandNode(2.0),
    OperatorNode('-', OperandNode(10.3), OperandNode(4.7))
  )


def main():
  root = build_demo_tree()

  postfix = PostfixRenderOperation()
  root.accept(postfix)
  print(postfix.result())

  evaluation = EvaluateOperation()
  root.accept(evaluation)
  print(evaluation.result())


if __name__ == "__main__":
  main()
