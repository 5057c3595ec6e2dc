from typing import Optional

import torch
from torch import Tensor

from ._cosine_sum_window import cosine_sum_window
from ._sampling import arity_checked

BLACKMAN_EX_COEFFICIENTS = (
    0.426590713671539,
    0.496560619088564,
    0.0768486672398968,
)


@arity_checked
def blackman_ex_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    'Exact' Blackman window function.

    The Blackman window with coefficients a0 = 7938/18608,
    a1 = 9240/18608, a2 = 1430/18608, which place zeros at the third and
    fourth side lobes. See :func:`blackman_window` for the parameters.
    """
    return cosine_sum_window(
        "blackman_ex_window",
        n,
        BLACKMAN_EX_COEFFICIENTS,
        periodic=periodic,
        dtype=dtype,
        device=device,
    )
