import math
from typing import Optional

import torch
from torch import Tensor

from ._sampling import arity_checked, linspace, sample_count


@arity_checked
def hann_matlab_window(
    n: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Hann window function as computed by Matlab's ``hanning``.

    Equivalent to the Hann window of n + 2 points with its two endpoints,
    which are both zero, removed. No periodic form is defined.

    Mathematical Definition
    -----------------------
        w[k] = 0.5 - 0.5 * cos(t_k)

    where t_k are n points evenly spaced from 2 pi / (n + 1) through
    2 pi n / (n + 1).

    Parameters
    ----------
    n : int
        Number of points in the output window. Must be positive.
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
    hann_window : Hann window including the zero endpoints.
    """
    steps = sample_count("hann_matlab_window", n)

    t = linspace(
        2 * math.pi / (n + 1),
        2 * math.pi * n / (n + 1),
        steps,
        dtype,
        device,
    )

    return 0.5 - 0.5 * torch.cos(t)
