"""Colour themes and their palettes."""

from __future__ import annotations

from enum import Enum

__all__ = ["Theme", "available_themes"]


class Theme(Enum):
    """Available colour themes for logo generation."""

    MESOS = "mesos"
    GOOGLE = "google"
    BLUES = "blues"
    GREENS = "greens"
    REDS = "reds"
    PURPLES = "purples"
    RAINBOW = "rainbow"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> Theme:
        """The theme with the given name, case-insensitive; Mesos if unknown."""
        try:
            return cls(name.lower())
        except ValueError:
            return cls.MESOS

    def palette(self) -> list[str]:
        """The theme's colours as '#RRGGBB' strings."""
        return list(_PALETTES[self])


_PALETTES: dict[Theme, tuple[str, ...]] = {
    Theme.MESOS: (
        "#FFCC09",  # yellow
        "#F68A21",  # orange
        "#E42728",  # red
        "#E81F6F",  # magenta
        "#BD3D93",  # pink
        "#71459B",  # purple
        "#4D499C",  # dark blue
        "#3960A9",  # medium blue
        "#20B7E8",  # light blue
        "#46B78C",  # teal
        "#49B650",  # green
        "#78BF44",  # light green
        "#B3675E",  # rust
        "#3EAF51",  # forest green
        "#5A4FCF",  # royal purple
    ),
    Theme.GOOGLE: (
        "#4285F4",
        "#EA4335",
        "#FBBC05",
        "#34A853",
        "#1A73E8",
        "#D93025",
        "#F9AB00",
        "#1E8E3E",
        "#174EA6",
        "#A50E0E",
        "#E37400",
        "#0D652D",
        "#5BB974",
        "#81C995",
        "#8AB4F8",
    ),
    Theme.BLUES: (
        "#0D47A1",
        "#1565C0",
        "#1976D2",
        "#1E88E5",
        "#2196F3",
        "#42A5F5",
        "#64B5F6",
        "#90CAF9",
        "#BBDEFB",
        "#2962FF",
        "#0277BD",
        "#01579B",
        "#039BE5",
        "#03A9F4",
        "#29B6F6",
    ),
    Theme.GREENS: (
        "#1B5E20",
        "#2E7D32",
        "#388E3C",
        "#43A047",
        "#4CAF50",
        "#66BB6A",
        "#81C784",
        "#A5D6A7",
        "#C8E6C9",
        "#00C853",
        "#00695C",
        "#00796B",
        "#00897B",
        "#009688",
        "#26A69A",
    ),
    Theme.REDS: (
        "#B71C1C",
        "#C62828",
        "#D32F2F",
        "#E53935",
        "#F44336",
        "#EF5350",
        "#E57373",
        "#EF9A9A",
        "#FFCDD2",
        "#DD2C00",
        "#BF360C",
        "#E64A19",
        "#F4511E",
        "#FF5722",
        "#FF7043",
    ),
    Theme.PURPLES: (
        "#4A148C",
        "#6A1B9A",
        "#7B1FA2",
        "#8E24AA",
        "#9C27B0",
        "#AB47BC",
        "#BA68C8",
        "#CE93D8",
        "#E1BEE7",
        "#880E4F",
        "#AD1457",
        "#C2185B",
        "#D81B60",
        "#E91E63",
        "#EC407A",
    ),
    Theme.RAINBOW: (
        "#FF0000",
        "#FF4500",
        "#FF8C00",
        "#FFA500",
        "#FFD700",
        "#FFFF00",
        "#ADFF2F",
        "#32CD32",
        "#008000",
        "#00FF7F",
        "#00FFFF",
        "#1E90FF",
        "#0000FF",
        "#4B0082",
        "#8A2BE2",
        "#FF00FF",
        "#C71585",
    ),
}


def available_themes() -> list[str]:
    """Names of all available themes."""
    return [theme.value for theme in Theme]