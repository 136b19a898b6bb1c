from abc import ABC, abstractmethod


class BaseRankSkewedGenerator(ABC):
    """Draws integers in [min, max] where smaller values are more probable.

    Implementations must support growing ``max`` by one through ``inc_max``
    and must leave their state untouched when growth fails.
    """

    @property
    @abstractmethod
    def min(self) -> int:
        pass

    @property
    @abstractmethod
    def theta(self) -> float:
        pass

    @abstractmethod
    def get_max(self) -> int:
        pass

    @abstractmethod
    def inc_max(self) -> None:
        pass

    @abstractmethod
    def next(self) -> int:
        pass
