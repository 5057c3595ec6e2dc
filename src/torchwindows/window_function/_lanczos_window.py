import math
from typing import Optional

import torch
from torch import Tensor

from ._sampling import arity_checked, linspace, sample_count


@arity_checked
def lanczos_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Lanczos (sinc) window function.

    Mathematical Definition
    -----------------------
        w[k] = sin(x_k) / x_k

    where x_k are n points evenly spaced from -pi through pi. When the
    grid has an odd number of points its midpoint is x = 0, where the
    window takes its limiting value 1.

    Parameters
    ----------
    n : int
        Number of points in the output window. Must be positive.
    periodic : bool, optional
        If True, return the periodic window for spectral analysis.
    dtype : torch.dtype, optional
        The desired data type of the returned tensor. Default float64.
    device : torch.device, optional
        The desired device of the returned tensor.

    Returns
    -------
    Tensor
        A 1-D tensor of size (n,) containing the window values.
    """
    steps = sample_count("lanczos_window", n, periodic)

    x = math.pi * linspace(-1.0, 1.0, steps, dtype, device)

    w = torch.sin(x) / x

    if steps % 2:
        w[steps // 2] = 1.0

    return w[:n]
