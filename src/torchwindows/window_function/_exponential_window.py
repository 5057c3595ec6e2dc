from typing import Optional

import torch
from torch import Tensor

from ._sampling import arity_checked, linspace, sample_count


@arity_checked
def exponential_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Exponential window function.

    Mathematical Definition
    -----------------------
        w[k] = 2^(1 - |x_k|) - 1

    where x_k are n points evenly spaced from -1 through 1. The window
    is 1 at the center and 0 at the endpoints of the symmetric form.
    """
    steps = sample_count("exponential_window", n, periodic)

    x = linspace(-1.0, 1.0, steps, dtype, device)

    return (torch.pow(2.0, 1 - torch.abs(x)) - 1)[:n]
