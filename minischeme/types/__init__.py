from minischeme.types.symbol import Symbol
from minischeme.types.lambda_fn import Lambda
from minischeme.types.environment import Environment

__all__ = ["Symbol", "Lambda", "Environment"]
