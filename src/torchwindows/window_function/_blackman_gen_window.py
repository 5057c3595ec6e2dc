from typing import Optional

import torch
from torch import Tensor

from ._cosine_sum_window import cosine_power_window
from ._sampling import arity_checked


@arity_checked
def blackman_gen_window(
    n: int,
    alpha: float,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    General classic Blackman window function.

    A single parameter family of the three-term Blackman window. In
    powers of c = cos(2 pi k / (n - 1)):

        w[k] = (0.5 - alpha) - 0.5 c + alpha c^2

    alpha = 0.16 gives the classic Blackman window.
    """
    alpha = float(alpha)

    return cosine_power_window(
        "blackman_gen_window",
        n,
        (0.5 - alpha, -0.5, alpha),
        periodic=periodic,
        dtype=dtype,
        device=device,
    )
