import threading
from typing import Callable, Optional

from skewgen.config import SkewedLatestGeneratorConfig
from skewgen.constants import DEFAULT_MAX, DEFAULT_MIN, DEFAULT_THETA, MAX_UINT64
from skewgen.errors import InvalidParameterError
from skewgen.logger import init_logger
from skewgen.random_variable.base_rank_skewed_generator import (
    BaseRankSkewedGenerator,
)
from skewgen.random_variable.zipf_generator import ZipfGenerator
from skewgen.utils.random import create_rng

logger = init_logger(__name__)

RankGeneratorFactory = Callable[..., BaseRankSkewedGenerator]


class SkewedLatestGenerator:
    """Draws values in [min, max], skewed towards max by a Zipf distribution.

    Models a growing key space where the most recently inserted keys are the
    hottest: ``inc_max`` appends a new key at ``max + 1`` and ``next`` favours
    keys close to the current ``max``.

    The rank generator is built over [0, max - min] and its draws are
    subtracted from ``max``. Both ``max`` and the rank generator live behind a
    single lock, so readers never see one updated without the other.
    """

    def __init__(
        self,
        rng,
        min: int,
        max: int,
        theta: float,
        limit: Optional[int] = None,
        rank_generator_factory: RankGeneratorFactory = ZipfGenerator,
    ) -> None:
        if limit is None:
            limit = MAX_UINT64

        if max < min:
            raise InvalidParameterError(f"min {min} > max {max}")
        if min < 0 or limit > MAX_UINT64:
            raise InvalidParameterError(
                f"[min, limit] = [{min}, {limit}] is outside [0, {MAX_UINT64}]"
            )

        self._min = min
        self._lock = threading.Lock()
        self._skew = rank_generator_factory(
            rng, 0, max - min, theta, limit=limit - min
        )
        self._max = max

        logger.debug(
            f"Created skewed latest generator over [{min}, {max}] with theta {theta}"
        )

    @classmethod
    def create_default(cls, rng) -> "SkewedLatestGenerator":
        return cls(rng, DEFAULT_MIN, DEFAULT_MAX, DEFAULT_THETA)

    @classmethod
    def create_from_config(
        cls, config: SkewedLatestGeneratorConfig
    ) -> "SkewedLatestGenerator":
        return cls(
            create_rng(config.seed),
            config.min,
            config.max,
            config.theta,
            limit=config.limit,
        )

    @property
    def min(self) -> int:
        return self._min

    def get_max(self) -> int:
        """Read-only snapshot of max; it may grow as soon as the lock is released."""
        with self._lock:
            return self._max

    def inc_max(self) -> None:
        with self._lock:
            # max only moves once the rank generator has grown
            self._skew.inc_max()
            self._max += 1

    def next(self) -> int:
        with self._lock:
            return self._max - self._skew.next()
