import math
from typing import Optional

import torch
from torch import Tensor

from ._sampling import arity_checked, linspace, sample_count


@arity_checked
def cos_alpha_window(
    n: int,
    alpha: float,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Power-of-cosine window function.

    Mathematical Definition
    -----------------------
        w[k] = sin(t_k)^alpha

    where t_k are n points evenly spaced from 0 through pi.

    Special Cases
    -------------
    - alpha = 0: rectangular window
    - alpha = 1: cosine window
    - alpha = 2: Hann window

    Parameters
    ----------
    n : int
        Number of points in the output window. Must be positive.
    alpha : float
        Exponent applied to the sine.
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
    steps = sample_count("cos_alpha_window", n, periodic)

    t = linspace(0.0, math.pi, steps, dtype, device)

    return torch.pow(torch.sin(t), float(alpha))[:n]
