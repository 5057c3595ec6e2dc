from typing import Tuple

from torchwindows._exceptions import ArityError
from torchwindows.polynomial._cosine_multiple_to_power import (
    MAXIMUM_COEFFICIENTS,
)


def cosine_power_to_multiple(*coefficients: float) -> Tuple[float, ...]:
    """
    Convert power-of-cosine coefficients to multiple-angle cosine coefficients.

    This is the inverse of :func:`cosine_multiple_to_power`. It converts
    the coefficients of

        c0 + c1 cos(t) + c2 cos(t)^2 + c3 cos(t)^3 + ...

    to the coefficients of

        a0 - a1 cos(t) + a2 cos(2t) - a3 cos(3t) + ...

    Notes
    -----
    With the missing trailing c_k set to zero, the intermediate values

        t0 = 32 c0 + 16 c2 + 12 c4 + 10 c6
        t1 = 32 c1 + 24 c3 + 20 c5
        t2 = 16 c2 + 16 c4 + 15 c6
        t3 = 8 c3 + 10 c5
        t4 = 4 c4 + 6 c6
        t5 = 2 c5
        t6 = c6

    give a_k = t_k / 32 for even k and a_k = -t_k / 32 for odd k.

    Raises
    ------
    ArityError
        If more than 7 coefficients are given.
    """
    count = len(coefficients)

    if count > MAXIMUM_COEFFICIENTS:
        raise ArityError(
            f"cosine_power_to_multiple: at most {MAXIMUM_COEFFICIENTS} "
            f"coefficients expected, got {count}"
        )

    c = [float(value) for value in coefficients]
    c.extend([0.0] * (MAXIMUM_COEFFICIENTS - count))

    t = (
        10 * c[6] + 12 * c[4] + 16 * c[2] + 32 * c[0],
        20 * c[5] + 24 * c[3] + 32 * c[1],
        15 * c[6] + 16 * c[4] + 16 * c[2],
        10 * c[5] + 8 * c[3],
        6 * c[6] + 4 * c[4],
        2 * c[5],
        c[6],
    )

    return tuple(
        value / (32 if k % 2 == 0 else -32)
        for k, value in enumerate(t[:count])
    )
