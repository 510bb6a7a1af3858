import re

import pytest

from hexlogogen.palette import Theme, available_themes


def test_blues_palette_contents():
    palette = Theme.from_name("blues").palette()
    assert any(c.upper() in {"#1E88E5", "#2196F3", "#0D47A1"} for c in palette)


def test_google_palette_contents():
    palette = Theme.from_name("google").palette()
    assert "#4285F4" in palette


def test_default_mesos_palette_contents():
    palette = Theme.MESOS.palette()
    assert "#FFCC09" in palette
    assert "#E42728" in palette


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("mesos", Theme.MESOS),
        ("google", Theme.GOOGLE),
        ("BLUES", Theme.BLUES),
        ("Greens", Theme.GREENS),
        ("reds", Theme.REDS),
        ("purples", Theme.PURPLES),
        ("rainbow", Theme.RAINBOW),
        ("unknown", Theme.MESOS),
        ("", Theme.MESOS),
    ],
)
def test_from_name(name, expected):
    assert Theme.from_name(name) is expected


def test_str_is_lowercase_name():
    assert str(Theme.from_name("PURPLES")) == "purples"
    assert str(Theme.from_name("Mesos")) == "mesos"
    assert str(Theme.from_name("not-a-theme")) == "mesos"


def test_available_themes_order():
    assert available_themes() == [
        "mesos",
        "google",
        "blues",
        "greens",
        "reds",
        "purples",
        "rainbow",
    ]


def test_every_available_name_round_trips():
    for name in available_themes():
        assert str(Theme.from_name(name)) == name


@pytest.mark.parametrize(
    ("theme", "size"),
    [
        (Theme.MESOS, 15),
        (Theme.GOOGLE, 15),
        (Theme.BLUES, 15),
        (Theme.GREENS, 15),
        (Theme.REDS, 15),
        (Theme.PURPLES, 15),
        (Theme.RAINBOW, 17),
    ],
)
def test_palette_sizes_and_format(theme, size):
    palette = theme.palette()
    assert len(palette) == size
    assert len(set(palette)) == size
    assert all(re.fullmatch(r"#[0-9A-F]{6}", c) for c in palette)


def test_palette_returns_fresh_list():
    palette = Theme.REDS.palette()
    palette.clear()
    assert len(Theme.REDS.palette()) == 15