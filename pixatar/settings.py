"""Image settings: colours, transparency, layout direction and bit order."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace


class Background(enum.Enum):
    """Colour of the pixels for unset bits."""

    BLACK = "black"
    WHITE = "white"


class Opacity(enum.Enum):
    """Whether background pixels are opaque or fully transparent."""

    SOLID = "solid"
    TRANSPARENT = "transparent"


class Orientation(enum.Enum):
    """Direction in which the characters of the text are laid out."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class Endian(enum.Enum):
    """Order in which the bits of each byte are placed."""

    MOST = "most"
    LEAST = "least"


@dataclass(frozen=True)
class Spec:
    """Complete description of how an avatar image is drawn."""

    hue: int = 152
    bg: Background = Background.BLACK
    opacity: Opacity = Opacity.SOLID
    orient: Orientation = Orientation.VERTICAL
    ordering: Endian = Endian.LEAST

    def __post_init__(self) -> None:
        if self.hue < 0:
            raise ValueError(f"hue must not be negative, got {self.hue}")

    def with_hue(self, hue: int) -> Spec:
        """Return a copy with a different hue."""
        return replace(self, hue=hue)

    def with_bg(self, bg: Background) -> Spec:
        """Return a copy with a different background colour."""
        return replace(self, bg=bg)

    def with_opacity(self, opacity: Opacity) -> Spec:
        """Return a copy with a different background opacity."""
        return replace(self, opacity=opacity)

    def with_orient(self, orient: Orientation) -> Spec:
        """Return a copy with a different layout direction."""
        return replace(self, orient=orient)

    def with_ordering(self, ordering: Endian) -> Spec:
        """Return a copy with a different bit ordering."""
        return replace(self, ordering=ordering)