"""Error kinds raised while consuming expression trees."""


class ExpressionTreeError(Exception):
  """Base class for all expression tree failures"""


class UnderflowError(ExpressionTreeError):
  """An operator needed two values but the evaluation stack held fewer"""

  def __init__(self, symbol: str, available: int):
    super().__init__(f"operator '{symbol}' needs 2 operands, stack has {available}")
    self.symbol = symbol
    self.available = available


class UnknownOperatorError(ExpressionTreeError):
  """An operator node carries a symbol outside the supported set"""

  def __init__(self, symbol):
    super().__init__(f"unsupported operator symbol: {symbol!r}")
    self.symbol = symbol


class EmptyResultError(ExpressionTreeError):
  """result() was requested from an evaluation with nothing on its stack"""

  def __init__(self):
    super().__init__("evaluation stack is empty, no result available")
