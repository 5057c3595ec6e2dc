from types import MappingProxyType
from typing import Mapping

from torchwindows.window_function import (
    bartlett_hann_window,
    bartlett_window,
    blackman_bnh_window,
    blackman_ex_window,
    blackman_gen3_window,
    blackman_gen4_window,
    blackman_gen5_window,
    blackman_gen_window,
    blackman_harris4_window,
    blackman_harris_window,
    blackman_nuttall_window,
    blackman_window,
    bohman_window,
    cauchy_window,
    chebyshev_window,
    cos_alpha_window,
    cosine_window,
    discrete_prolate_spheroidal_sequence_window,
    exponential_window,
    flattop_window,
    gaussian_window,
    hamming_ex_window,
    hamming_gen_window,
    hamming_window,
    hann_matlab_window,
    hann_poisson_window,
    hann_window,
    kaiser_window,
    lanczos_window,
    nuttall1_window,
    nuttall_window,
    parzen_octave_window,
    parzen_window,
    poisson_window,
    rectangular_window,
    triangular_window,
    tukey_window,
    welch_window,
)

from ._window_definition import WindowDefinition

_DEFINITIONS = (
    WindowDefinition(
        "bartlett",
        bartlett_window,
        aliases=("fejer",),
    ),
    WindowDefinition(
        "bartlett_hann",
        bartlett_hann_window,
        aliases=("Modified Bartlett-Hann",),
        display_name="Bartlett-Hann",
    ),
    WindowDefinition(
        "blackman",
        blackman_window,
        display_name="'classic' Blackman",
    ),
    WindowDefinition(
        "blackman_bnh",
        blackman_bnh_window,
        display_name="Blackman-Harris (bnh)",
        description=(
            "An improved version of the 3-term Blackman-Harris window "
            "given by Nuttall (Ref 2, p. 89)."
        ),
    ),
    WindowDefinition(
        "blackman_ex",
        blackman_ex_window,
        display_name="'exact' Blackman",
    ),
    WindowDefinition(
        "blackman_gen",
        blackman_gen_window,
        parameters=("alpha",),
        display_name="General classic Blackman",
        description="A single parameter family of the 3-term Blackman window.",
    ),
    WindowDefinition(
        "blackman_gen3",
        blackman_gen3_window,
        parameters=("a0", "a1", "a2"),
        description="The general form of the Blackman family.",
    ),
    WindowDefinition(
        "blackman_gen4",
        blackman_gen4_window,
        parameters=("a0", "a1", "a2", "a3"),
        description="The general 4-term Blackman-Harris window.",
    ),
    WindowDefinition(
        "blackman_gen5",
        blackman_gen5_window,
        parameters=("a0", "a1", "a2", "a3", "a4"),
        description="The general 5-term Blackman-Harris window.",
    ),
    WindowDefinition(
        "blackman_harris",
        blackman_harris_window,
        aliases=("Minimum three term (sample) Blackman-Harris",),
        display_name="Blackman-Harris",
    ),
    WindowDefinition(
        "blackman_harris4",
        blackman_harris4_window,
        aliases=("Blackman-Harris",),
        display_name="minimum (sidelobe) four term Blackman-Harris",
    ),
    WindowDefinition(
        "blackman_nuttall",
        blackman_nuttall_window,
        display_name="Blackman-Nuttall",
    ),
    WindowDefinition(
        "bohman",
        bohman_window,
    ),
    WindowDefinition(
        "cauchy",
        cauchy_window,
        parameters=("alpha",),
        aliases=("Abel", "Poisson"),
    ),
    WindowDefinition(
        "chebyshev",
        chebyshev_window,
        parameters=("at",),
        aliases=("Dolph-Chebyshev",),
        periodic=False,
    ),
    WindowDefinition(
        "cos_alpha",
        cos_alpha_window,
        parameters=("alpha",),
        aliases=("Power-of-cosine",),
    ),
    WindowDefinition(
        "cosine",
        cosine_window,
        aliases=("sine",),
    ),
    WindowDefinition(
        "dpss",
        discrete_prolate_spheroidal_sequence_window,
        parameters=("beta",),
        aliases=("sleppian",),
        display_name="Digital Prolate Spheroidal Sequence (DPSS)",
        capability="eigh",
    ),
    WindowDefinition(
        "exponential",
        exponential_window,
    ),
    WindowDefinition(
        "flattop",
        flattop_window,
        display_name="flat top",
    ),
    WindowDefinition(
        "gaussian",
        gaussian_window,
        parameters=("beta",),
        aliases=("Weierstrass",),
    ),
    WindowDefinition(
        "hamming",
        hamming_window,
    ),
    WindowDefinition(
        "hamming_ex",
        hamming_ex_window,
        display_name="'exact' Hamming",
    ),
    WindowDefinition(
        "hamming_gen",
        hamming_gen_window,
        parameters=("a",),
        display_name="general Hamming",
    ),
    WindowDefinition(
        "hann",
        hann_window,
        aliases=("hanning",),
    ),
    WindowDefinition(
        "hann_matlab",
        hann_matlab_window,
        display_name="Hann (matlab)",
        description=(
            "Equivalent to the Hann window of N+2 points, with the "
            "endpoints (which are both zero) removed."
        ),
        periodic=False,
    ),
    WindowDefinition(
        "hann_poisson",
        hann_poisson_window,
        parameters=("alpha",),
        display_name="Hann-Poisson",
    ),
    WindowDefinition(
        "kaiser",
        kaiser_window,
        parameters=("beta",),
        aliases=("Kaiser-Bessel",),
        capability="bessel_i0",
    ),
    WindowDefinition(
        "lanczos",
        lanczos_window,
        aliases=("sinc",),
    ),
    WindowDefinition(
        "nuttall",
        nuttall_window,
    ),
    WindowDefinition(
        "nuttall1",
        nuttall1_window,
        display_name="Nuttall (v1)",
        description="A window referred to as the Nuttall window.",
    ),
    WindowDefinition(
        "parzen",
        parzen_window,
        aliases=("Jackson", "Valle-Poussin"),
    ),
    WindowDefinition(
        "parzen_octave",
        parzen_octave_window,
        display_name="Parzen",
        periodic=False,
    ),
    WindowDefinition(
        "poisson",
        poisson_window,
        parameters=("alpha",),
    ),
    WindowDefinition(
        "rectangular",
        rectangular_window,
        aliases=("dirichlet", "boxcar"),
    ),
    WindowDefinition(
        "triangular",
        triangular_window,
    ),
    WindowDefinition(
        "tukey",
        tukey_window,
        parameters=("alpha",),
        aliases=("tapered cosine",),
    ),
    WindowDefinition(
        "welch",
        welch_window,
        aliases=("Riez", "Bochner", "Parzen", "parabolic"),
    ),
)

WINDOW_DEFINITIONS: Mapping[str, WindowDefinition] = MappingProxyType(
    {definition.name: definition for definition in _DEFINITIONS}
)
