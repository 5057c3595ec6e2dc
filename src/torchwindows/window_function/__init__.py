from ._bartlett_hann_window import bartlett_hann_window
from ._bartlett_window import bartlett_window
from ._blackman_bnh_window import blackman_bnh_window
from ._blackman_ex_window import blackman_ex_window
from ._blackman_gen3_window import blackman_gen3_window
from ._blackman_gen4_window import blackman_gen4_window
from ._blackman_gen5_window import blackman_gen5_window
from ._blackman_gen_window import blackman_gen_window
from ._blackman_harris4_window import blackman_harris4_window
from ._blackman_harris_window import blackman_harris_window
from ._blackman_nuttall_window import blackman_nuttall_window
from ._blackman_window import blackman_window
from ._bohman_window import bohman_window
from ._cauchy_window import cauchy_window
from ._chebyshev_window import chebyshev_window
from ._cos_alpha_window import cos_alpha_window
from ._cosine_sum_window import cosine_power_window, cosine_sum_window
from ._cosine_window import cosine_window
from ._discrete_prolate_spheroidal_sequence_window import (
    discrete_prolate_spheroidal_sequence_window,
)
from ._exponential_window import exponential_window
from ._flattop_window import flattop_window
from ._gaussian_window import gaussian_window
from ._hamming_ex_window import hamming_ex_window
from ._hamming_gen_window import hamming_gen_window
from ._hamming_window import hamming_window
from ._hann_matlab_window import hann_matlab_window
from ._hann_poisson_window import hann_poisson_window
from ._hann_window import hann_window
from ._kaiser_window import kaiser_window
from ._lanczos_window import lanczos_window
from ._nuttall1_window import nuttall1_window
from ._nuttall_window import nuttall_window
from ._parzen_octave_window import parzen_octave_window
from ._parzen_window import parzen_window
from ._poisson_window import poisson_window
from ._rectangular_window import rectangular_window
from ._triangular_window import triangular_window
from ._tukey_window import tukey_window
from ._welch_window import welch_window

__all__ = [
    "bartlett_hann_window",
    "bartlett_window",
    "blackman_bnh_window",
    "blackman_ex_window",
    "blackman_gen3_window",
    "blackman_gen4_window",
    "blackman_gen5_window",
    "blackman_gen_window",
    "blackman_harris4_window",
    "blackman_harris_window",
    "blackman_nuttall_window",
    "blackman_window",
    "bohman_window",
    "cauchy_window",
    "chebyshev_window",
    "cos_alpha_window",
    "cosine_power_window",
    "cosine_sum_window",
    "cosine_window",
    "discrete_prolate_spheroidal_sequence_window",
    "exponential_window",
    "flattop_window",
    "gaussian_window",
    "hamming_ex_window",
    "hamming_gen_window",
    "hamming_window",
    "hann_matlab_window",
    "hann_poisson_window",
    "hann_window",
    "kaiser_window",
    "lanczos_window",
    "nuttall1_window",
    "nuttall_window",
    "parzen_octave_window",
    "parzen_window",
    "poisson_window",
    "rectangular_window",
    "triangular_window",
    "tukey_window",
    "welch_window",
]
