from typing import Optional

import torch
from torch import Tensor

from ._sampling import DEFAULT_DTYPE, arity_checked, sample_count


@arity_checked
def rectangular_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Rectangular (Dirichlet, boxcar) window function.

    All samples are 1. The symmetric and periodic forms are identical;
    ``periodic`` is accepted so the window can be used wherever the
    other windows are.

    Parameters
    ----------
    n : int
        Number of points in the output window. Must be positive.
    periodic : bool, optional
        Accepted for symmetry with the other windows. Has no effect.
    dtype : torch.dtype, optional
        The desired data type of the returned tensor. Default float64.
    device : torch.device, optional
        The desired device of the returned tensor.

    Returns
    -------
    Tensor
        A 1-D tensor of size (n,) of ones.
    """
    sample_count("rectangular_window", n, periodic)

    return torch.ones(n, dtype=dtype or DEFAULT_DTYPE, device=device)
