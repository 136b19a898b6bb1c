from skewgen.types.base_int_enum import BaseIntEnum
from skewgen.types.random_variable_type import RandomVariableType

__all__ = [
    RandomVariableType,
    BaseIntEnum,
]
