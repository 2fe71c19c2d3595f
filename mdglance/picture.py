"""``<picture>`` elements with light and dark variants of an image."""

from __future__ import annotations

from dataclasses import dataclass

from mdglance.htmlattrs import ColorScheme
from mdglance.images import ImageSize


@dataclass(frozen=True)
class Picture:
    """A finished picture: a fallback source plus optional scheme variants."""

    src: str
    align: str | None = None
    dark_variant: str | None = None
    light_variant: str | None = None
    size: ImageSize | None = None

    def resolve_src(self, scheme: ColorScheme | None) -> str:
        """The source for a colour scheme, falling back to the default source."""
        if scheme is ColorScheme.DARK and self.dark_variant is not None:
            return self.dark_variant
        if scheme is ColorScheme.LIGHT and self.light_variant is not None:
            return self.light_variant
        return self.src


@dataclass
class PictureBuilder:
    """Collects the parts of a picture while its element is being read."""

    align: str | None = None
    dark_variant: str | None = None
    light_variant: str | None = None
    size: ImageSize | None = None
    src: str | None = None

    def set_align(self, align: str) -> None:
        self.align = align

    def set_dark_variant(self, dark: str) -> None:
        self.dark_variant = dark

    def set_light_variant(self, light: str) -> None:
        self.light_variant = light

    def set_size(self, size: ImageSize) -> None:
        self.size = size

    def set_src(self, src: str) -> None:
        self.src = src

    def try_finish(self) -> Picture:
        """Build the picture; raises ``ValueError`` when no source was set."""
        if self.src is None:
            raise ValueError("Missing `src` link for <picture>")
        return Picture(
            src=self.src,
            align=self.align,
            dark_variant=self.dark_variant,
            light_variant=self.light_variant,
            size=self.size,
        )