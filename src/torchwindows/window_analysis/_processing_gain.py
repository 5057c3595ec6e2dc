from torch import Tensor

from ._equivalent_noise_bandwidth import equivalent_noise_bandwidth


def processing_gain(window: Tensor) -> Tensor:
    """Processing gain of a window: the reciprocal of its ENBW."""
    return 1 / equivalent_noise_bandwidth(window)
