import numpy as np


def create_rng(seed=42) -> np.random.Generator:
    return np.random.default_rng(seed)
