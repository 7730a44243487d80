import pytest

from pysnake.colors import ColorName, rgb, rgb255


def test_every_colour_has_a_value():
    for name in ColorName:
        components = rgb255(name)
        assert len(components) == 3
        assert all(0 <= c <= 255 for c in components)


def test_palette_order_matches_index():
    assert rgb(0) == rgb(ColorName.MAROON)
    assert rgb(0)[0] == pytest.approx(0.501960784313726)
    assert rgb(5) == (1.0, 0.0, 0.0)
    assert rgb(5) == rgb(ColorName.RED)
    last = len(ColorName) - 1
    assert rgb255(last) == (255, 255, 255)
    assert rgb255(last) == rgb255(ColorName.WHITE)


def test_pinned_values():
    assert rgb(ColorName.RED) == (1.0, 0.0, 0.0)
    assert rgb(ColorName.BLACK) == (0.0, 0.0, 0.0)
    assert rgb(ColorName.WHITE) == (1.0, 1.0, 1.0)
    assert rgb(ColorName.MAROON)[0] == pytest.approx(0.501960784313726)
    assert rgb(ColorName.YELLOW_GREEN) == pytest.approx(
        (0.603921568627451, 0.803921568627451, 0.196078431372549)
    )
    assert rgb(ColorName.MISTY_ROSE) == pytest.approx(
        (1.0, 0.894117647058824, 0.882352941176471)
    )


def test_float_and_byte_forms_agree():
    for name in ColorName:
        as_float = rgb(name)
        assert all(0.0 <= c <= 1.0 for c in as_float)
        assert tuple(round(c * 255) for c in as_float) == rgb255(name)


def test_aqua_and_cyan_are_distinct_names_same_colour():
    assert ColorName.AQUA is not ColorName.CYAN
    assert rgb(ColorName.AQUA) == rgb(ColorName.CYAN)


def test_lookup_by_string_and_index():
    assert rgb255("misty rose") == rgb255(ColorName.MISTY_ROSE)
    assert rgb255("DARK_CYAN") == rgb255(ColorName.DARK_CYAN)
    assert rgb255(int(ColorName.CYAN)) == rgb255(ColorName.CYAN)


def test_unknown_name_raises():
    with pytest.raises(ValueError):
        rgb("not a colour")


def test_index_out_of_range_raises():
    with pytest.raises(ValueError):
        rgb255(len(ColorName))


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        rgb(1.5)