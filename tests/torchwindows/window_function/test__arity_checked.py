import pytest
import torch.testing

import torchwindows.window_function as wf
from torchwindows import ArityError, WindowError
from torchwindows.registry import WINDOW_DEFINITIONS

NAMES = sorted(WINDOW_DEFINITIONS)


class TestArityChecked:
    """Argument counting shared by every window generator."""

    @pytest.mark.parametrize("name", NAMES)
    def test_one_argument_too_many(self, name):
        definition = WINDOW_DEFINITIONS[name]
        generator = definition.generator
        expected = len(definition.parameters) + 1
        arguments = [8] + [0.5] * expected
        with pytest.raises(
            ArityError,
            match=(
                f"^{generator.__name__}: {expected} arguments? expected\\. "
                f"Got {expected + 1} arguments\\.$"
            ),
        ):
            generator(*arguments)

    @pytest.mark.parametrize("name", NAMES)
    def test_one_argument_too_few(self, name):
        definition = WINDOW_DEFINITIONS[name]
        generator = definition.generator
        expected = len(definition.parameters) + 1
        arguments = ([8] + [0.5] * (expected - 1))[:-1]
        with pytest.raises(
            ArityError, match=f"Got {expected - 1} arguments\\.$"
        ):
            generator(*arguments)

    def test_messages(self):
        with pytest.raises(
            ArityError,
            match=r"^hann_window: 1 argument expected\. Got 2 arguments\.$",
        ):
            wf.hann_window(8, 3)

        with pytest.raises(
            ArityError,
            match=r"^tukey_window: 2 arguments expected\. Got 1 arguments\.$",
        ):
            wf.tukey_window(8)

    def test_is_a_type_error(self):
        with pytest.raises(TypeError):
            wf.blackman_gen3_window(8, 0.42, 0.5)

        with pytest.raises(WindowError):
            wf.blackman_gen3_window(8, 0.42, 0.5)

    def test_keyword_arguments_count(self):
        torch.testing.assert_close(
            wf.tukey_window(n=10, alpha=0.5), wf.tukey_window(10, 0.5)
        )
        torch.testing.assert_close(
            wf.tukey_window(10, alpha=0.5), wf.tukey_window(10, 0.5)
        )

        with pytest.raises(ArityError, match="Got 1 arguments"):
            wf.tukey_window(n=10)

    def test_keyword_only_options_are_not_counted(self):
        result = wf.tukey_window(8, 0.5, periodic=True, dtype=None)
        assert result.shape == (8,)

    def test_unknown_keyword_is_a_plain_type_error(self):
        with pytest.raises(TypeError) as info:
            wf.chebyshev_window(8, 50.0, periodic=True)
        assert not isinstance(info.value, ArityError)

    def test_preserves_name_and_docstring(self):
        assert wf.hann_window.__name__ == "hann_window"
        assert "Hann window" in wf.hann_window.__doc__
