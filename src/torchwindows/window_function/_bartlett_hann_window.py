import math
from typing import Optional

import torch
from torch import Tensor

from ._sampling import arity_checked, linspace, sample_count


@arity_checked
def bartlett_hann_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Bartlett-Hann window function.

    Computes a (modified) Bartlett-Hann window of length n, a combination
    of the Bartlett and Hann windows.

    Mathematical Definition
    -----------------------
        w[k] = 0.62 - 0.48 * |u_k| + 0.38 * cos(v_k)

    where u_k are n points evenly spaced from -1/2 through 1/2 and v_k
    are n points evenly spaced from -pi through pi.

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
    steps = sample_count("bartlett_hann_window", n, periodic)

    u = linspace(-0.5, 0.5, steps, dtype, device)
    v = linspace(-math.pi, math.pi, steps, dtype, device)

    return (0.62 - 0.48 * torch.abs(u) + 0.38 * torch.cos(v))[:n]
