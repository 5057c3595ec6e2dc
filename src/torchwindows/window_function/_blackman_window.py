from typing import Optional

import torch
from torch import Tensor

from ._cosine_sum_window import cosine_sum_window
from ._sampling import arity_checked

BLACKMAN_COEFFICIENTS = (0.42, 0.5, 0.08)


@arity_checked
def blackman_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    'Classic' Blackman window function.

    Computes a Blackman window of length n, a three-term member of the
    Blackman-Harris family.

    Mathematical Definition
    -----------------------
    The symmetric Blackman window is defined as:

        w[k] = 0.42 - 0.5 * cos(2 * pi * k / (n - 1))
                    + 0.08 * cos(4 * pi * k / (n - 1))

    Properties
    ----------
    - Side lobe level: -58 dB
    - Side lobe fall-off: -18 dB per octave

    Parameters
    ----------
    n : int
        Number of points in the output window. Must be positive.
    periodic : bool, optional
        If True, return the periodic window for spectral analysis.
        Default False.
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
    blackman_ex_window : Blackman window with the 'exact' coefficients.
    blackman_gen_window : Single parameter Blackman family.
    """
    return cosine_sum_window(
        "blackman_window",
        n,
        BLACKMAN_COEFFICIENTS,
        periodic=periodic,
        dtype=dtype,
        device=device,
    )
