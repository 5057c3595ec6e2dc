from typing import Tuple

from torchwindows._exceptions import ArityError

MAXIMUM_COEFFICIENTS = 7


def cosine_multiple_to_power(*coefficients: float) -> Tuple[float, ...]:
    """
    Convert multiple-angle cosine coefficients to power-of-cosine coefficients.

    Blackman-Harris family windows are usually written as a sum of cosines
    of integer multiples of an angle. The same window can be written as a
    polynomial in the cosine of that angle, which replaces the evaluation
    of several cosines with multiplications (Horner's method).

    Mathematical Definition
    -----------------------
    Converts the coefficients of

        a0 - a1 cos(t) + a2 cos(2t) - a3 cos(3t) + ...

    to the coefficients of

        c0 + c1 cos(t) + c2 cos(t)^2 + c3 cos(t)^3 + ...

    using the fixed relations (missing trailing a_k are zero):

        c0 = a0 - a2 + a4 - a6
        c1 = -a1 + 3 a3 - 5 a5
        c2 = 2 a2 - 8 a4 + 18 a6
        c3 = -4 a3 + 20 a5
        c4 = 8 a4 - 48 a6
        c5 = -16 a5
        c6 = 32 a6

    Parameters
    ----------
    *coefficients : float
        Between 0 and 7 coefficients a0, a1, ...

    Returns
    -------
    tuple of float
        The power-of-cosine coefficients, as many as were given.

    Raises
    ------
    ArityError
        If more than 7 coefficients are given.

    See Also
    --------
    cosine_power_to_multiple : The inverse conversion.

    Examples
    --------
    >>> cosine_multiple_to_power(0.5, 0.5)
    (0.5, -0.5)
    """
    count = len(coefficients)

    if count > MAXIMUM_COEFFICIENTS:
        raise ArityError(
            f"cosine_multiple_to_power: at most {MAXIMUM_COEFFICIENTS} "
            f"coefficients expected, got {count}"
        )

    a = [float(value) for value in coefficients]
    a.extend([0.0] * (MAXIMUM_COEFFICIENTS - count))

    c = (
        -a[6] + a[4] - a[2] + a[0],
        -5 * a[5] + 3 * a[3] - a[1],
        18 * a[6] - 8 * a[4] + 2 * a[2],
        20 * a[5] - 4 * a[3],
        8 * a[4] - 48 * a[6],
        -16 * a[5],
        32 * a[6],
    )

    return c[:count]
