from typing import Optional

import torch
from torch import Tensor

from ._sampling import arity_checked, linspace, sample_count


@arity_checked
def cauchy_window(
    n: int,
    alpha: float,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Cauchy window function.

    Also known as the Abel or Poisson window.

    Mathematical Definition
    -----------------------
        w[k] = 1 / (1 + (alpha * x_k)^2)

    where x_k are n points evenly spaced from -1 through 1.

    Parameters
    ----------
    n : int
        Number of points in the output window. Must be positive.
    alpha : float
        Shape parameter. Larger values give a narrower window.
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
    steps = sample_count("cauchy_window", n, periodic)

    x = linspace(-1.0, 1.0, steps, dtype, device)

    return (1 / (1 + (x * float(alpha)) ** 2))[:n]
