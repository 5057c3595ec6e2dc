from typing import Optional

import torch
from torch import Tensor

from ._cosine_sum_window import cosine_sum_window
from ._sampling import arity_checked

NUTTALL1_COEFFICIENTS = (0.355768, 0.487396, 0.144232, 0.012604)


@arity_checked
def nuttall1_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Nuttall (v1) window function.

    A window also referred to as the Nuttall window, with coefficients
    a0 = 0.355768, a1 = 0.487396, a2 = 0.144232, a3 = 0.012604, as used
    by ``nuttallwin`` in Octave and Matlab.
    """
    return cosine_sum_window(
        "nuttall1_window",
        n,
        NUTTALL1_COEFFICIENTS,
        periodic=periodic,
        dtype=dtype,
        device=device,
    )
