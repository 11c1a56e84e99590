import numba
from enum import IntEnum

class NodeType(IntEnum):
  OPERAND = 0
  OPERATOR = 1

class OpType(IntEnum):
  ADD = 0
  SUB = 1

# Supported binary operator symbols
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB}


def is_supported_operator(symbol) -> bool:
  return symbol in BINARY_OP_MAP


# No fastmath: NaN and infinity must pass through unchanged
@numba.njit(cache=True)
def apply_binary_op(left, right, op_type):
  if op_type == 0:
    return left + right
  elif op_type == 1:
    return left - right
  return left
