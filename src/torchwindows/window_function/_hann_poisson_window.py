import math
from typing import Optional

import torch
from torch import Tensor

from ._sampling import arity_checked, linspace, sample_count


@arity_checked
def hann_poisson_window(
    n: int,
    alpha: float,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Hann-Poisson window function.

    The product of a Hann window and a Poisson window.

    Mathematical Definition
    -----------------------
        w[k] = 0.5 * (1 + cos(pi x_k)) * exp(-alpha * |x_k|)

    where x_k are n points evenly spaced from -1 through 1.

    Parameters
    ----------
    n : int
        Number of points in the output window. Must be positive.
    alpha : float
        Decay rate of the Poisson factor.
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
    steps = sample_count("hann_poisson_window", n, periodic)

    x = linspace(-1.0, 1.0, steps, dtype, device)
    v = linspace(-math.pi, math.pi, steps, dtype, device)

    w = 0.5 * (1 + torch.cos(v)) * torch.exp(-float(alpha) * torch.abs(x))

    return w[:n]
