from typing import Optional

import torch
from torch import Tensor

from ._cosine_sum_window import cosine_sum_window
from ._sampling import arity_checked

BLACKMAN_HARRIS4_COEFFICIENTS = (0.35875, 0.48829, 0.14128, 0.01168)


@arity_checked
def blackman_harris4_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Minimum (sidelobe) four term Blackman-Harris window function.

    Mathematical Definition
    -----------------------
        w[k] = a0 - a1 cos(2 pi k / (n-1)) + a2 cos(4 pi k / (n-1))
                  - a3 cos(6 pi k / (n-1))

    with a0 = 0.35875, a1 = 0.48829, a2 = 0.14128, a3 = 0.01168.

    Properties
    ----------
    - Side lobe level: -92 dB

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
    return cosine_sum_window(
        "blackman_harris4_window",
        n,
        BLACKMAN_HARRIS4_COEFFICIENTS,
        periodic=periodic,
        dtype=dtype,
        device=device,
    )
