from typing import List, Optional

import torch
from torch import Tensor

from ._window_registry import Parameters, WindowRegistry

DEFAULT_REGISTRY = WindowRegistry()


def window(
    n: int,
    name: str = "hamming",
    params: Parameters = None,
    periodic: bool = False,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Generate the samples of a named window.

    Shorthand for ``DEFAULT_REGISTRY.resolve``. See
    :meth:`WindowRegistry.resolve` for the parameters.

    Examples
    --------
    >>> window(4, "hamming")
    tensor([0.0800, 0.7700, 0.7700, 0.0800], dtype=torch.float64)
    >>> window(10, "tukey", 0.5).shape
    torch.Size([10])
    """
    return DEFAULT_REGISTRY.resolve(
        n, name, params, periodic, dtype=dtype, device=device
    )


def list_windows(pattern: Optional[str] = None) -> List[str]:
    """List window names, optionally filtered by a regular expression."""
    return DEFAULT_REGISTRY.list_windows(pattern)
