"""
Module pattern shared between encoders and generators.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from barkit.models.symbology import Symbology


@dataclass(frozen=True)
class ModulePattern:
    """
    Ordered sequence of barcode modules (1 = bar, 0 = space).

    Patterns produced for Code39 are in wide/narrow form: modules alternate
    bar and space element by element and a 1 marks a wide element. Call
    ``expand`` to get the plain bar/space rendition.
    """

    modules: tuple[int, ...]
    symbology: Symbology = Symbology.UNKNOWN
    text: str = ""
    wide_narrow: bool = field(default=False, compare=False)

    def __post_init__(self):
        modules = tuple(self.modules)
        if any(m not in (0, 1) for m in modules):
            raise ValueError("Module values must be 0 or 1")
        object.__setattr__(self, "modules", modules)

    @classmethod
    def from_string(
        cls,
        bits: str,
        symbology: Symbology = Symbology.UNKNOWN,
        text: str = "",
    ) -> "ModulePattern":
        """Build a pattern from a string such as ``"101"``."""
        if any(c not in "01" for c in bits):
            raise ValueError(f"Not a module string: {bits!r}")
        return cls(tuple(int(c) for c in bits), symbology, text)

    def __len__(self) -> int:
        return len(self.modules)

    def __iter__(self) -> Iterator[int]:
        return iter(self.modules)

    def __getitem__(self, index):
        return self.modules[index]

    def __str__(self) -> str:
        return "".join(str(m) for m in self.modules)

    def concat(self, *others: "ModulePattern | Iterable[int]") -> "ModulePattern":
        """Return a new pattern with ``others`` appended."""
        modules = list(self.modules)
        for other in others:
            modules.extend(other)
        return ModulePattern(tuple(modules), self.symbology, self.text, self.wide_narrow)

    def with_quiet_zone(self, width: int) -> "ModulePattern":
        """Pad both ends with ``width`` background modules."""
        if width < 0:
            raise ValueError("Quiet zone width must not be negative")
        pad = (0,) * width
        return ModulePattern(pad + self.modules + pad, self.symbology, self.text, self.wide_narrow)

    def expand(self, ratio: int = 2) -> "ModulePattern":
        """
        Convert a wide/narrow pattern to plain bars and spaces.

        Element ``i`` is a bar when ``i`` is even; wide elements become
        ``ratio`` modules, narrow elements one module.

        Args:
            ratio: Modules per wide element (at least 2)

        Returns:
            Bar/space pattern; ``self`` when already in that form
        """
        if not self.wide_narrow:
            return self
        if ratio < 2:
            raise ValueError("Wide/narrow ratio must be at least 2")

        modules: list[int] = []
        for i, wide in enumerate(self.modules):
            color = 1 if i % 2 == 0 else 0
            modules.extend([color] * (ratio if wide else 1))
        return ModulePattern(tuple(modules), self.symbology, self.text)
