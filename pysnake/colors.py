"""Named colour palette used by the game's drawing code."""

from __future__ import annotations

from enum import IntEnum, auto
from typing import Union


class ColorName(IntEnum):
    """Index of every colour in the palette, in palette order."""

    def _generate_next_value_(name, start, count, last_values):  # noqa: N805
        return count

    MAROON = auto()
    DARK_RED = auto()
    BROWN = auto()
    FIREBRICK = auto()
    CRIMSON = auto()
    RED = auto()
    TOMATO = auto()
    CORAL = auto()
    INDIAN_RED = auto()
    LIGHT_CORAL = auto()
    DARK_SALMON = auto()
    SALMON = auto()
    LIGHT_SALMON = auto()
    ORANGE_RED = auto()
    DARK_ORANGE = auto()
    ORANGE = auto()
    GOLD = auto()
    DARK_GOLDEN_ROD = auto()
    GOLDEN_ROD = auto()
    PALE_GOLDEN_ROD = auto()
    DARK_KHAKI = auto()
    KHAKI = auto()
    OLIVE = auto()
    YELLOW = auto()
    YELLOW_GREEN = auto()
    DARK_OLIVE_GREEN = auto()
    OLIVE_DRAB = auto()
    LAWN_GREEN = auto()
    CHART_REUSE = auto()
    GREEN_YELLOW = auto()
    DARK_GREEN = auto()
    GREEN = auto()
    FOREST_GREEN = auto()
    LIME = auto()
    LIME_GREEN = auto()
    LIGHT_GREEN = auto()
    PALE_GREEN = auto()
    DARK_SEA_GREEN = auto()
    MEDIUM_SPRING_GREEN = auto()
    SPRING_GREEN = auto()
    SEA_GREEN = auto()
    MEDIUM_AQUA_MARINE = auto()
    MEDIUM_SEA_GREEN = auto()
    LIGHT_SEA_GREEN = auto()
    DARK_SLATE_GRAY = auto()
    TEAL = auto()
    DARK_CYAN = auto()
    AQUA = auto()
    CYAN = auto()
    LIGHT_CYAN = auto()
    DARK_TURQUOISE = auto()
    TURQUOISE = auto()
    MEDIUM_TURQUOISE = auto()
    PALE_TURQUOISE = auto()
    AQUA_MARINE = auto()
    POWDER_BLUE = auto()
    CADET_BLUE = auto()
    STEEL_BLUE = auto()
    CORN_FLOWER_BLUE = auto()
    DEEP_SKY_BLUE = auto()
    DODGER_BLUE = auto()
    LIGHT_BLUE = auto()
    SKY_BLUE = auto()
    LIGHT_SKY_BLUE = auto()
    MIDNIGHT_BLUE = auto()
    NAVY = auto()
    DARK_BLUE = auto()
    MEDIUM_BLUE = auto()
    BLUE = auto()
    ROYAL_BLUE = auto()
    BLUE_VIOLET = auto()
    INDIGO = auto()
    DARK_SLATE_BLUE = auto()
    SLATE_BLUE = auto()
    MEDIUM_SLATE_BLUE = auto()
    MEDIUM_PURPLE = auto()
    DARK_MAGENTA = auto()
    DARK_VIOLET = auto()
    DARK_ORCHID = auto()
    MEDIUM_ORCHID = auto()
    PURPLE = auto()
    THISTLE = auto()
    PLUM = auto()
    VIOLET = auto()
    MAGENTA = auto()
    ORCHID = auto()
    MEDIUM_VIOLET_RED = auto()
    PALE_VIOLET_RED = auto()
    DEEP_PINK = auto()
    HOT_PINK = auto()
    LIGHT_PINK = auto()
    PINK = auto()
    ANTIQUE_WHITE = auto()
    BEIGE = auto()
    BISQUE = auto()
    BLANCHED_ALMOND = auto()
    WHEAT = auto()
    CORN_SILK = auto()
    LEMON_CHIFFON = auto()
    LIGHT_GOLDEN_ROD_YELLOW = auto()
    LIGHT_YELLOW = auto()
    SADDLE_BROWN = auto()
    SIENNA = auto()
    CHOCOLATE = auto()
    PERU = auto()
    SANDY_BROWN = auto()
    BURLY_WOOD = auto()
    TAN = auto()
    ROSY_BROWN = auto()
    MOCCASIN = auto()
    NAVAJO_WHITE = auto()
    PEACH_PUFF = auto()
    MISTY_ROSE = auto()
    LAVENDER_BLUSH = auto()
    LINEN = auto()
    OLD_LACE = auto()
    PAPAYA_WHIP = auto()
    SEA_SHELL = auto()
    MINT_CREAM = auto()
    SLATE_GRAY = auto()
    LIGHT_SLATE_GRAY = auto()
    LIGHT_STEEL_BLUE = auto()
    LAVENDER = auto()
    FLORAL_WHITE = auto()
    ALICE_BLUE = auto()
    GHOST_WHITE = auto()
    HONEYDEW = auto()
    IVORY = auto()
    AZURE = auto()
    SNOW = auto()
    BLACK = auto()
    DIM_GRAY = auto()
    GRAY = auto()
    DARK_GRAY = auto()
    SILVER = auto()
    LIGHT_GRAY = auto()
    GAINSBORO = auto()
    WHITE_SMOKE = auto()
    WHITE = auto()


_C = ColorName

_RGB255: dict[ColorName, tuple[int, int, int]] = {
    _C.MAROON: (128, 0, 0),
    _C.DARK_RED: (139, 0, 0),
    _C.BROWN: (165, 42, 42),
    _C.FIREBRICK: (178, 34, 34),
    _C.CRIMSON: (220, 20, 60),
    _C.RED: (255, 0, 0),
    _C.TOMATO: (255, 99, 71),
    _C.CORAL: (255, 127, 80),
    _C.INDIAN_RED: (205, 92, 92),
    _C.LIGHT_CORAL: (240, 128, 128),
    _C.DARK_SALMON: (233, 150, 122),
    _C.SALMON: (250, 128, 114),
    _C.LIGHT_SALMON: (255, 160, 122),
    _C.ORANGE_RED: (255, 69, 0),
    _C.DARK_ORANGE: (255, 140, 0),
    _C.ORANGE: (255, 165, 0),
    _C.GOLD: (255, 215, 0),
    _C.DARK_GOLDEN_ROD: (184, 134, 11),
    _C.GOLDEN_ROD: (218, 165, 32),
    _C.PALE_GOLDEN_ROD: (238, 232, 170),
    _C.DARK_KHAKI: (189, 183, 107),
    _C.KHAKI: (240, 230, 140),
    _C.OLIVE: (128, 128, 0),
    _C.YELLOW: (255, 255, 0),
    _C.YELLOW_GREEN: (154, 205, 50),
    _C.DARK_OLIVE_GREEN: (85, 107, 47),
    _C.OLIVE_DRAB: (107, 142, 35),
    _C.LAWN_GREEN: (124, 252, 0),
    _C.CHART_REUSE: (127, 255, 0),
    _C.GREEN_YELLOW: (173, 255, 47),
    _C.DARK_GREEN: (0, 100, 0),
    _C.GREEN: (0, 128, 0),
    _C.FOREST_GREEN: (34, 139, 34),
    _C.LIME: (0, 255, 0),
    _C.LIME_GREEN: (50, 205, 50),
    _C.LIGHT_GREEN: (144, 238, 144),
    _C.PALE_GREEN: (152, 251, 152),
    _C.DARK_SEA_GREEN: (143, 188, 143),
    _C.MEDIUM_SPRING_GREEN: (0, 250, 154),
    _C.SPRING_GREEN: (0, 255, 127),
    _C.SEA_GREEN: (46, 139, 87),
    _C.MEDIUM_AQUA_MARINE: (102, 205, 170),
    _C.MEDIUM_SEA_GREEN: (60, 179, 113),
    _C.LIGHT_SEA_GREEN: (32, 178, 170),
    _C.DARK_SLATE_GRAY: (47, 79, 79),
    _C.TEAL: (0, 128, 128),
    _C.DARK_CYAN: (0, 139, 139),
    _C.AQUA: (0, 255, 255),
    _C.CYAN: (0, 255, 255),
    _C.LIGHT_CYAN: (224, 255, 255),
    _C.DARK_TURQUOISE: (0, 206, 209),
    _C.TURQUOISE: (64, 224, 208),
    _C.MEDIUM_TURQUOISE: (72, 209, 204),
    _C.PALE_TURQUOISE: (175, 238, 238),
    _C.AQUA_MARINE: (127, 255, 212),
    _C.POWDER_BLUE: (176, 224, 230),
    _C.CADET_BLUE: (95, 158, 160),
    _C.STEEL_BLUE: (70, 130, 180),
    _C.CORN_FLOWER_BLUE: (100, 149, 237),
    _C.DEEP_SKY_BLUE: (0, 191, 255),
    _C.DODGER_BLUE: (30, 144, 255),
    _C.LIGHT_BLUE: (173, 216, 230),
    _C.SKY_BLUE: (135, 206, 235),
    _C.LIGHT_SKY_BLUE: (135, 206, 250),
    _C.MIDNIGHT_BLUE: (25, 25, 112),
    _C.NAVY: (0, 0, 128),
    _C.DARK_BLUE: (0, 0, 139),
    _C.MEDIUM_BLUE: (0, 0, 205),
    _C.BLUE: (0, 0, 255),
    _C.ROYAL_BLUE: (65, 105, 225),
    _C.BLUE_VIOLET: (138, 43, 226),
    _C.INDIGO: (75, 0, 130),
    _C.DARK_SLATE_BLUE: (72, 61, 139),
    _C.SLATE_BLUE: (106, 90, 205),
    _C.MEDIUM_SLATE_BLUE: (123, 104, 238),
    _C.MEDIUM_PURPLE: (147, 112, 219),
    _C.DARK_MAGENTA: (139, 0, 139),
    _C.DARK_VIOLET: (148, 0, 211),
    _C.DARK_ORCHID: (153, 50, 204),
    _C.MEDIUM_ORCHID: (186, 85, 211),
    _C.PURPLE: (128, 0, 128),
    _C.THISTLE: (216, 191, 216),
    _C.PLUM: (221, 160, 221),
    _C.VIOLET: (238, 130, 238),
    _C.MAGENTA: (255, 0, 255),
    _C.ORCHID: (218, 112, 214),
    _C.MEDIUM_VIOLET_RED: (199, 21, 133),
    _C.PALE_VIOLET_RED: (219, 112, 147),
    _C.DEEP_PINK: (255, 20, 147),
    _C.HOT_PINK: (255, 105, 180),
    _C.LIGHT_PINK: (255, 182, 193),
    _C.PINK: (255, 192, 203),
    _C.ANTIQUE_WHITE: (250, 235, 215),
    _C.BEIGE: (245, 245, 220),
    _C.BISQUE: (255, 228, 196),
    _C.BLANCHED_ALMOND: (255, 235, 205),
    _C.WHEAT: (245, 222, 179),
    _C.CORN_SILK: (255, 248, 220),
    _C.LEMON_CHIFFON: (255, 250, 205),
    _C.LIGHT_GOLDEN_ROD_YELLOW: (250, 250, 210),
    _C.LIGHT_YELLOW: (255, 255, 224),
    _C.SADDLE_BROWN: (139, 69, 19),
    _C.SIENNA: (160, 82, 45),
    _C.CHOCOLATE: (210, 105, 30),
    _C.PERU: (205, 133, 63),
    _C.SANDY_BROWN: (244, 164, 96),
    _C.BURLY_WOOD: (222, 184, 135),
    _C.TAN: (210, 180, 140),
    _C.ROSY_BROWN: (188, 143, 143),
    _C.MOCCASIN: (255, 228, 181),
    _C.NAVAJO_WHITE: (255, 222, 173),
    _C.PEACH_PUFF: (255, 218, 185),
    _C.MISTY_ROSE: (255, 228, 225),
    _C.LAVENDER_BLUSH: (255, 240, 245),
    _C.LINEN: (250, 240, 230),
    _C.OLD_LACE: (253, 245, 230),
    _C.PAPAYA_WHIP: (255, 239, 213),
    _C.SEA_SHELL: (255, 245, 238),
    _C.MINT_CREAM: (245, 255, 250),
    _C.SLATE_GRAY: (112, 128, 144),
    _C.LIGHT_SLATE_GRAY: (119, 136, 153),
    _C.LIGHT_STEEL_BLUE: (176, 196, 222),
    _C.LAVENDER: (230, 230, 250),
    _C.FLORAL_WHITE: (255, 250, 240),
    _C.ALICE_BLUE: (240, 248, 255),
    _C.GHOST_WHITE: (248, 248, 255),
    _C.HONEYDEW: (240, 255, 240),
    _C.IVORY: (255, 255, 240),
    _C.AZURE: (240, 255, 255),
    _C.SNOW: (255, 250, 250),
    _C.BLACK: (0, 0, 0),
    _C.DIM_GRAY: (105, 105, 105),
    _C.GRAY: (128, 128, 128),
    _C.DARK_GRAY: (169, 169, 169),
    _C.SILVER: (192, 192, 192),
    _C.LIGHT_GRAY: (211, 211, 211),
    _C.GAINSBORO: (220, 220, 220),
    _C.WHITE_SMOKE: (245, 245, 245),
    _C.WHITE: (255, 255, 255),
}

ColorLike = Union[ColorName, int, str]


def _resolve(name: ColorLike) -> ColorName:
    if isinstance(name, ColorName):
        return name
    if isinstance(name, str):
        key = name.strip().upper().replace(" ", "_").replace("-", "_")
        try:
            return ColorName[key]
        except KeyError:
            raise ValueError(f"unknown colour name: {name!r}") from None
    if isinstance(name, int) and not isinstance(name, bool):
        try:
            return ColorName(name)
        except ValueError:
            raise ValueError(f"colour index out of range: {name}") from None
    raise TypeError(f"cannot interpret {name!r} as a colour")


def rgb255(name: ColorLike) -> tuple[int, int, int]:
    """Return the colour as red, green and blue components in 0..255."""
    return _RGB255[_resolve(name)]


def rgb(name: ColorLike) -> tuple[float, float, float]:
    """Return the colour as red, green and blue components in 0.0..1.0."""
    red, green, blue = rgb255(name)
    return (red / 255, green / 255, blue / 255)