from skewgen.random_variable.skewed_latest_generator import SkewedLatestGenerator
from skewgen.random_variable.zipf_generator import ZipfGenerator
from skewgen.types import RandomVariableType
from skewgen.utils.base_registry import BaseRegistry


class RandomVariableRegistry(BaseRegistry):
    _key_class = RandomVariableType


RandomVariableRegistry.register(
    RandomVariableType.ZIPF, ZipfGenerator.create_from_config
)
RandomVariableRegistry.register(
    RandomVariableType.SKEWED_LATEST, SkewedLatestGenerator.create_from_config
)
