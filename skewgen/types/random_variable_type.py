from skewgen.types.base_int_enum import BaseIntEnum


class RandomVariableType(BaseIntEnum):
    ZIPF = 1
    SKEWED_LATEST = 2
