from typing import Optional

import torch
from torch import Tensor

from ._cosine_sum_window import cosine_sum_window
from ._sampling import arity_checked

BLACKMAN_BNH_COEFFICIENTS = (0.4243801, 0.4973406, 0.0782793)


@arity_checked
def blackman_bnh_window(
    n: int,
    *,
    periodic: bool = False,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Blackman-Harris (bnh) window function.

    An improved version of the three-term Blackman-Harris window given by
    Nuttall, with coefficients a0 = 0.4243801, a1 = 0.4973406,
    a2 = 0.0782793.

    References
    ----------
    .. [1] A. H. Nuttall, "Some windows with very good sidelobe behavior,"
           IEEE Transactions on Acoustics, Speech, and Signal Processing,
           vol. 29, no. 1, pp. 84-91, 1981.
    """
    return cosine_sum_window(
        "blackman_bnh_window",
        n,
        BLACKMAN_BNH_COEFFICIENTS,
        periodic=periodic,
        dtype=dtype,
        device=device,
    )
