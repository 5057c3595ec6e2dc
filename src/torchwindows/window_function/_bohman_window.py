import math
from typing import Optional

import torch
from torch import Tensor

from ._sampling import arity_checked, linspace, sample_count


@arity_checked
def bohman_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Bohman window function.

    The convolution of two half-period cosine lobes.

    Mathematical Definition
    -----------------------
        w[k] = (1 - |x_k|) cos(pi |x_k|) + sin(pi |x_k|) / pi

    where x_k are n points evenly spaced from -1 through 1.
    """
    steps = sample_count("bohman_window", n, periodic)

    x = torch.abs(linspace(-1.0, 1.0, steps, dtype, device))

    w = (1 - x) * torch.cos(math.pi * x) + torch.sin(math.pi * x) / math.pi

    return w[:n]
