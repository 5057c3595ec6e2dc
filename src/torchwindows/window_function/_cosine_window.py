import math
from typing import Optional

import torch
from torch import Tensor

from ._sampling import arity_checked, linspace, sample_count


@arity_checked
def cosine_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Cosine (sine) window function.

    Mathematical Definition
    -----------------------
        w[k] = sin(t_k)

    where t_k are n points evenly spaced from 0 through pi.

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

    See Also
    --------
    cos_alpha_window : Powers of this window.
    """
    steps = sample_count("cosine_window", n, periodic)

    return torch.sin(linspace(0.0, math.pi, steps, dtype, device))[:n]
