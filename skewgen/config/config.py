from dataclasses import dataclass, field
from typing import Optional

from skewgen.config.base_poly_config import BasePolyConfig
from skewgen.constants import DEFAULT_MAX, DEFAULT_MIN, DEFAULT_THETA
from skewgen.types import RandomVariableType


@dataclass
class BaseRandomVariableConfig(BasePolyConfig):
    seed: int = field(
        default=42,
        metadata={"help": "Seed for the uniform random source."},
    )
    min: int = field(
        default=DEFAULT_MIN,
        metadata={"help": "Smallest value the generator can return."},
    )
    max: int = field(
        default=DEFAULT_MAX,
        metadata={"help": "Initial largest value the generator can return."},
    )
    theta: float = field(
        default=DEFAULT_THETA,
        metadata={"help": "Skew exponent of the Zipf distribution."},
    )
    limit: Optional[int] = field(
        default=None,
        metadata={
            "help": "Largest value max may grow to. Defaults to the uint64 ceiling."
        },
    )


@dataclass
class ZipfGeneratorConfig(BaseRandomVariableConfig):
    @staticmethod
    def get_type():
        return RandomVariableType.ZIPF


@dataclass
class SkewedLatestGeneratorConfig(BaseRandomVariableConfig):
    @staticmethod
    def get_type():
        return RandomVariableType.SKEWED_LATEST
