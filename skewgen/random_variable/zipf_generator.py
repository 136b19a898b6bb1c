import math
import threading
from typing import Optional

import numpy as np

from skewgen.config import ZipfGeneratorConfig
from skewgen.constants import (
    DEFAULT_MAX,
    DEFAULT_THETA,
    DEFAULT_ZETA_N,
    MAX_UINT64,
    ZETA_CHUNK_SIZE,
)
from skewgen.errors import InvalidParameterError, RangeExhaustedError
from skewgen.logger import init_logger
from skewgen.random_variable.base_rank_skewed_generator import (
    BaseRankSkewedGenerator,
)
from skewgen.utils.random import create_rng

logger = init_logger(__name__)


def compute_zeta_incrementally(
    old_count: int, count: int, theta: float, zeta: float
) -> float:
    """Extends ``zeta = zeta(old_count, theta)`` to ``zeta(count, theta)``."""
    if count < old_count:
        raise ValueError(f"Cannot shrink zeta from {old_count} to {count} terms")

    for start in range(old_count + 1, count + 1, ZETA_CHUNK_SIZE):
        end = min(start + ZETA_CHUNK_SIZE, count + 1)
        terms = np.arange(start, end, dtype=np.float64)
        zeta += float(np.sum(np.power(terms, -theta)))

    return zeta


def compute_zeta_from_scratch(count: int, theta: float) -> float:
    if count == DEFAULT_MAX and theta == DEFAULT_THETA:
        return DEFAULT_ZETA_N

    return compute_zeta_incrementally(0, count, theta, 0.0)


class ZipfGenerator(BaseRankSkewedGenerator):
    """Zipf distributed integers over [min, max], ``min`` being the most probable.

    Uses the rejection-free algorithm from "Quickly Generating Billion-Record
    Synthetic Databases" (Gray et al., SIGMOD 1994), as popularized by YCSB.
    Unlike a closed-form sampler, ``max`` can be grown one value at a time
    without recomputing zeta from scratch, which is how a growing key space
    keeps its skew.

    Large theta values are only usable over narrow ranges: once zeta of the
    range cannot be told apart from zeta(2) in float64 (theta above roughly
    33), construction raises ``InvalidParameterError`` and growth past two
    items raises ``RangeExhaustedError``.

    ``rng`` is any uniform source exposing ``random()`` in [0, 1), e.g. a
    ``numpy.random.Generator`` or ``random.Random``.
    """

    def __init__(
        self,
        rng,
        min: int,
        max: int,
        theta: float,
        limit: Optional[int] = None,
    ) -> None:
        if limit is None:
            limit = MAX_UINT64

        if min < 0 or max > MAX_UINT64:
            raise InvalidParameterError(
                f"[min, max] = [{min}, {max}] is outside [0, {MAX_UINT64}]"
            )
        if min > max:
            raise InvalidParameterError(f"min {min} > max {max}")
        if theta < 0.0 or theta == 1.0:
            raise InvalidParameterError(f"theta must be >= 0 and != 1, got {theta}")
        if limit < max or limit > MAX_UINT64:
            raise InvalidParameterError(
                f"limit {limit} must lie in [max, {MAX_UINT64}] with max = {max}"
            )

        self._rng = rng
        self._min = min
        self._theta = theta
        self._limit = limit

        self._alpha = 1.0 / (1.0 - theta)
        self._zeta_2 = compute_zeta_from_scratch(2, theta)
        self._half_pow_theta = 1.0 + math.pow(0.5, theta)

        # guards _max, _zeta_n, _eta and the draws from _rng
        self._lock = threading.Lock()
        self._max = max
        self._zeta_n = compute_zeta_from_scratch(self._num_items(max), theta)
        self._eta = self._compute_eta(self._num_items(max), self._zeta_n)
        if self._eta is None:
            raise InvalidParameterError(
                f"theta {theta} is too large for a range of {self._num_items(max)} items"
            )

        logger.debug(
            f"Created Zipf generator over [{min}, {max}] with theta {theta}, "
            f"zeta_n {self._zeta_n}, limit {limit}"
        )

    @classmethod
    def create_from_config(cls, config: ZipfGeneratorConfig) -> "ZipfGenerator":
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

    @property
    def theta(self) -> float:
        return self._theta

    @property
    def limit(self) -> int:
        return self._limit

    def get_max(self) -> int:
        with self._lock:
            return self._max

    def _num_items(self, max: int) -> int:
        return max + 1 - self._min

    def _compute_eta(self, num_items: int, zeta_n: float) -> Optional[float]:
        """Returns None when eta is not representable as a float for this range.

        That happens for large theta: zeta_n rounds to zeta_2 once the terms
        past the second fall below float precision, and (2 / n) ** (1 - theta)
        overflows for wide ranges.
        """
        # with two items or fewer every draw resolves before eta is needed
        if num_items <= 2:
            return 0.0
        if zeta_n <= self._zeta_2:
            return None

        try:
            scale = math.pow(2.0 / num_items, 1.0 - self._theta)
        except OverflowError:
            return None

        eta = (1.0 - scale) / (1.0 - self._zeta_2 / zeta_n)
        return eta if math.isfinite(eta) else None

    def inc_max(self) -> None:
        with self._lock:
            if self._max >= self._limit:
                raise RangeExhaustedError(
                    f"Cannot grow max beyond limit {self._limit}"
                )

            num_items = self._num_items(self._max + 1)
            zeta_n = compute_zeta_incrementally(
                num_items - 1, num_items, self._theta, self._zeta_n
            )
            eta = self._compute_eta(num_items, zeta_n)
            if eta is None:
                raise RangeExhaustedError(
                    f"Cannot grow to {num_items} items with theta {self._theta}"
                )

            self._zeta_n = zeta_n
            self._eta = eta
            self._max += 1

    def next(self) -> int:
        with self._lock:
            u = self._rng.random()
            uz = u * self._zeta_n

            if uz < 1.0:
                return self._min

            if uz < self._half_pow_theta:
                return self._min + 1

            spread = self._num_items(self._max)
            offset = int(
                spread * math.pow(self._eta * u - self._eta + 1.0, self._alpha)
            )
            return self._min + min(offset, self._max - self._min)
