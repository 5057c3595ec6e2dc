from ._chebyshev_polynomial import chebyshev_polynomial
from ._cosine_multiple_to_power import cosine_multiple_to_power
from ._cosine_power_to_multiple import cosine_power_to_multiple

__all__ = [
    "chebyshev_polynomial",
    "cosine_multiple_to_power",
    "cosine_power_to_multiple",
]
