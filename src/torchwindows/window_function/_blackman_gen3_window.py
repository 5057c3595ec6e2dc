from typing import Optional

import torch
from torch import Tensor

from ._cosine_sum_window import cosine_sum_window
from ._sampling import arity_checked


@arity_checked
def blackman_gen3_window(
    n: int,
    a0: float,
    a1: float,
    a2: float,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    General form of the three-term Blackman family window.

    The coefficients are those of the multiple-angle cosine sum

        w[k] = a0 - a1 cos(t_k) + a2 cos(2 t_k) - ...

    with t_k evenly spaced over [0, 2 pi].
    """
    return cosine_sum_window(
        "blackman_gen3_window",
        n,
        (a0, a1, a2),
        periodic=periodic,
        dtype=dtype,
        device=device,
    )
