from skewgen.random_variable.base_rank_skewed_generator import (
    BaseRankSkewedGenerator,
)
from skewgen.random_variable.random_variable_registry import RandomVariableRegistry
from skewgen.random_variable.skewed_latest_generator import SkewedLatestGenerator
from skewgen.random_variable.zipf_generator import ZipfGenerator

__all__ = [
    BaseRankSkewedGenerator,
    RandomVariableRegistry,
    SkewedLatestGenerator,
    ZipfGenerator,
]
