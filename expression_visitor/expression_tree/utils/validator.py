import numpy as np
from typing import List
from ..core.node import Node, OperandNode, OperatorNode
from ..core.operators import is_supported_operator
from .tree_utils import get_all_nodes


class ExpressionValidator:
  """Well-formedness checks for trees built by hand.

  A well-formed tree has both children on every operator node and only
  supported operator symbols. Traversal itself tolerates missing children;
  evaluation does not. Non-finite operand values are legal and only
  reported when check_finite is set.
  """

  @staticmethod
  def is_valid_expression(node: Node, check_finite: bool = False) -> bool:
    return not ExpressionValidator.find_problems(node, check_finite=check_finite)

  @staticmethod
  def find_problems(node: Node, check_finite: bool = False) -> List[str]:
    problems = []
    for current in get_all_nodes(node, traversal_order='depth_first'):
      if isinstance(current, OperandNode):
        if check_finite and not np.isfinite(current.value):
          problems.append(f"operand value {current.value!r} is not finite")
        continue

      if isinstance(current, OperatorNode):
        if not current.is_complete():
          if current.left is None:
            problems.append(f"operator '{current.symbol}' is missing its left child")
          if current.right is None:
            problems.append(f"operator '{current.symbol}' is missing its right child")
        if not is_supported_operator(current.symbol):
          problems.append(f"unsupported operator symbol: {current.symbol!r}")
    return problems
