from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from torch import Tensor


@dataclass(frozen=True)
class WindowDefinition:
    """
    Static catalog entry for one window function.

    Attributes
    ----------
    name : str
        Canonical name, e.g. ``"blackman_harris4"``.
    generator : callable
        Function ``generator(n, *parameters, ...) -> Tensor``.
    parameters : tuple of str
        Names of the positional parameters after ``n``.
    aliases : tuple of str
        Other names the window is known by.
    display_name : str, optional
        Short printable name, without the trailing " window".
    description : str, optional
        Long-form description, used as the title when there is no
        display name.
    periodic : bool
        Whether the window has a periodic form.
    capability : str, optional
        Name of the :class:`Capabilities` field the generator needs.
    """

    name: str
    generator: Callable[..., Tensor]
    parameters: Tuple[str, ...] = ()
    aliases: Tuple[str, ...] = ()
    display_name: Optional[str] = None
    description: Optional[str] = None
    periodic: bool = True
    capability: Optional[str] = field(default=None, compare=False)

    @property
    def title(self) -> str:
        if self.display_name:
            return f"{self.display_name} window"

        if self.description:
            return self.description

        return f"{self.name[:1].upper()}{self.name[1:]} window"
