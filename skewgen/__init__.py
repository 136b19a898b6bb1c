from skewgen.errors import InvalidParameterError, RangeExhaustedError
from skewgen.random_variable import (
    BaseRankSkewedGenerator,
    RandomVariableRegistry,
    SkewedLatestGenerator,
    ZipfGenerator,
)

__all__ = [
    BaseRankSkewedGenerator,
    InvalidParameterError,
    RandomVariableRegistry,
    RangeExhaustedError,
    SkewedLatestGenerator,
    ZipfGenerator,
]
