from abc import ABC, abstractmethod


class Operation(ABC):
  """A pluggable consumer of an expression tree.

  `Node.accept` calls `visit_operand` / `visit_operator` once per node in
  post-order; an operator's callback always fires after both of its
  children's. The callbacks are the only places an operation mutates its
  state. `result()` must be idempotent.
  """

  @abstractmethod
  def visit_operand(self, node) -> None:
    pass

  @abstractmethod
  def visit_operator(self, node) -> None:
    pass

  @abstractmethod
  def result(self):
    pass


def run(root, operation: Operation):
  """Traverse `root` with `operation` and return its result"""
  root.accept(operation)
  return operation.result()
