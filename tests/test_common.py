import pytest

from wayedges.common import (
    Anchor,
    ConfigError,
    Curve,
    Layer,
    NumOrRelative,
    parse_curve,
    parse_edge,
    parse_layer,
    parse_num_or_relative,
    parse_optional_edge,
)


@pytest.mark.parametrize(
    "text, curve",
    [
        ("linear", Curve.LINEAR),
        ("ease-quad", Curve.EASE_QUAD),
        ("ease-cubic", Curve.EASE_CUBIC),
        ("ease-expo", Curve.EASE_EXPO),
    ],
)
def test_parse_curve(text, curve):
    assert parse_curve(text) is curve


@pytest.mark.parametrize("value", ["ease_cubic", "Linear", 3, None])
def test_parse_curve_rejects(value):
    with pytest.raises(ConfigError):
        parse_curve(value)


def test_parse_int_is_num():
    v = parse_num_or_relative(42)
    assert not v.is_relative()
    assert v.get_num() == 42.0


def test_parse_float_is_num():
    assert parse_num_or_relative(3.25) == NumOrRelative(3.25)


def test_parse_percentage_is_relative():
    v = parse_num_or_relative("50%")
    assert v.is_relative()
    assert v.get_rel() == pytest.approx(0.5)


def test_parse_percentage_ignores_trailing_text():
    assert parse_num_or_relative("12.5%  of screen") == parse_num_or_relative("12.5%")


@pytest.mark.parametrize("value", ["abc", "50", "%", "-5%", ".5%", True, None, [1]])
def test_parse_num_or_relative_rejects(value):
    with pytest.raises(ConfigError):
        parse_num_or_relative(value)


def test_get_num_on_relative_raises():
    with pytest.raises(ConfigError, match="relative, not num"):
        NumOrRelative(0.3, relative=True).get_num()


def test_get_rel_on_num_raises():
    with pytest.raises(ConfigError, match="num, not relative"):
        NumOrRelative(7.0).get_rel()


def test_calculate_relative_keeps_num():
    v = NumOrRelative(7.0)
    assert v.calculate_relative(1000.0) == v


def test_calculate_relative_scales():
    assert NumOrRelative(0.5, relative=True).calculate_relative(200.0) == NumOrRelative(100.0)


def test_full_percentage_resolves_to_max():
    resolved = parse_num_or_relative("100%").calculate_relative(1920.0)
    assert not resolved.is_relative()
    assert resolved.get_num() == pytest.approx(1920.0)


def test_is_valid_length():
    assert not NumOrRelative(0.0).is_valid_length()
    assert not NumOrRelative(-1.0).is_valid_length()
    assert NumOrRelative(1.0).is_valid_length()
    assert not NumOrRelative(0.0, relative=True).is_valid_length()


def test_default_is_zero_num():
    assert NumOrRelative() == NumOrRelative(0.0)
    assert not NumOrRelative().is_relative()


@pytest.mark.parametrize(
    "name, anchor",
    [
        ("top", Anchor.TOP),
        ("left", Anchor.LEFT),
        ("bottom", Anchor.BOTTOM),
        ("right", Anchor.RIGHT),
    ],
)
def test_parse_edges(name, anchor):
    assert parse_edge(name) is anchor
    assert parse_optional_edge(name) is anchor


def test_optional_edge_none():
    assert parse_optional_edge(None) is None


def test_edge_required():
    with pytest.raises(ConfigError, match="edge is not optional"):
        parse_edge(None)


@pytest.mark.parametrize("value", ["center", "Top", 1])
def test_invalid_edge(value):
    with pytest.raises(ConfigError):
        parse_optional_edge(value)


def test_edges_combine():
    combined = parse_edge("left") | parse_edge("top")
    assert Anchor.LEFT in combined
    assert Anchor.TOP in combined
    assert Anchor.RIGHT not in combined


@pytest.mark.parametrize(
    "name, layer",
    [
        ("background", Layer.BACKGROUND),
        ("bottom", Layer.BOTTOM),
        ("top", Layer.TOP),
        ("overlay", Layer.OVERLAY),
    ],
)
def test_parse_layer(name, layer):
    assert parse_layer(name) is layer


def test_invalid_layer():
    with pytest.raises(ConfigError):
        parse_layer("middle")