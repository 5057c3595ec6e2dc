from torch import Tensor


def coherent_gain(window: Tensor) -> Tensor:
    """Coherent gain of a window: the mean of its samples."""
    return window.mean()
