"""Color palettes for lead charts."""

from __future__ import annotations

from typing import Final

BAR_COLORS: Final[tuple[str, ...]] = ("#FF6384", "#36A2EB", "#FFCE56")

PIE_COLORS: Final[tuple[str, ...]] = (
    "#FF6384",
    "#36A2EB",
    "#FFCE56",
    "#4BC0C0",
    "#9966FF",
    "#FF9F40",
    "#8E44AD",
    "#2ECC71",
    "#F1C40F",
    "#E74C3C",
    "#3498DB",
    "#1ABC9C",
)

TEAL_FILL: Final[str] = "rgba(75, 192, 192, 0.2)"
TEAL_BORDER: Final[str] = "rgba(75, 192, 192, 1)"
PIE_BORDER: Final[str] = "#ffffff"


def _cycle(colors: tuple[str, ...], count: int) -> list[str]:
    return [colors[index % len(colors)] for index in range(max(count, 0))]


def color_palette(count: int) -> list[str]:
    """Return `count` pie colors, repeating the 12-color table as needed.

    Args:
        count: Number of categories to color.

    Returns:
        A list where element `i` is `PIE_COLORS[i % 12]`.
    """

    return _cycle(PIE_COLORS, count)


def bar_palette(count: int) -> list[str]:
    """Return `count` bar colors cycling the 3-color bar palette."""

    return _cycle(BAR_COLORS, count)
