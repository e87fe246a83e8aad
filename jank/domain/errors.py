from __future__ import annotations


class UnknownPresetError(KeyError):
    """Raised when a theme preset name is not one of the built-in presets."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown theme preset: {self.name!r}"


class UnknownViewModeError(ValueError):
    """Raised when a view mode command is not one of the known ViewMode values."""

    def __init__(self, mode: object) -> None:
        super().__init__(f"Unknown view mode: {mode!r}")
        self.mode = mode
