from typing import Optional

import torch
from torch import Tensor

from ._cosine_sum_window import cosine_sum_window
from ._sampling import arity_checked


@arity_checked
def hamming_gen_window(
    n: int,
    a: float,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    General Hamming window function.

    Mathematical Definition
    -----------------------
        w[k] = a - (1 - a) * cos(2 * pi * k / (n - 1))

    Special Cases
    -------------
    - a = 0.5: Hann window
    - a = 0.54: Hamming window

    Parameters
    ----------
    n : int
        Number of points in the output window. Must be positive.
    a : float
        The constant term of the cosine sum.
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
    a = float(a)

    return cosine_sum_window(
        "hamming_gen_window",
        n,
        (a, 1 - a),
        periodic=periodic,
        dtype=dtype,
        device=device,
    )
