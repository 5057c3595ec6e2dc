from typing import Optional

import torch
from torch import Tensor

from ._cosine_sum_window import cosine_sum_window
from ._sampling import arity_checked

FLATTOP_COEFFICIENTS = (
    0.21557895,
    0.41663158,
    0.277263158,
    0.083578947,
    0.006947368,
)


@arity_checked
def flattop_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Flat top window function.

    Five term Blackman-Harris family window with a very flat main lobe,
    used when the amplitude of a sinusoid must be measured accurately.
    The window takes small negative values near its ends.

    Mathematical Definition
    -----------------------
        w[k] = sum_{j=0}^{4} (-1)^j a_j cos(2 pi j k / (n - 1))

    with a0 = 0.21557895, a1 = 0.41663158, a2 = 0.277263158,
    a3 = 0.083578947, a4 = 0.006947368.

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
        "flattop_window",
        n,
        FLATTOP_COEFFICIENTS,
        periodic=periodic,
        dtype=dtype,
        device=device,
    )
