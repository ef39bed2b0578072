import dataclasses

import pytest

from pixatar.settings import Background, Endian, Opacity, Orientation, Spec


def test_defaults():
    spec = Spec()
    assert spec.hue == 152
    assert spec.bg is Background.BLACK
    assert spec.opacity is Opacity.SOLID
    assert spec.orient is Orientation.VERTICAL
    assert spec.ordering is Endian.LEAST


def test_with_hue_returns_new_spec():
    spec = Spec()
    changed = spec.with_hue(10)
    assert changed.hue == 10
    assert spec.hue == 152
    assert changed.bg is spec.bg


def test_with_bg():
    changed = Spec().with_bg(Background.WHITE)
    assert changed.bg is Background.WHITE
    assert changed == Spec(bg=Background.WHITE)


def test_with_opacity():
    changed = Spec().with_opacity(Opacity.TRANSPARENT)
    assert changed.opacity is Opacity.TRANSPARENT
    assert changed.hue == Spec().hue


def test_with_orient():
    changed = Spec().with_orient(Orientation.HORIZONTAL)
    assert changed.orient is Orientation.HORIZONTAL
    assert changed.ordering is Endian.LEAST


def test_with_ordering():
    changed = Spec().with_ordering(Endian.MOST)
    assert changed.ordering is Endian.MOST
    assert changed.orient is Orientation.VERTICAL


def test_chained_changes():
    spec = (
        Spec()
        .with_hue(200)
        .with_bg(Background.WHITE)
        .with_opacity(Opacity.TRANSPARENT)
        .with_orient(Orientation.HORIZONTAL)
        .with_ordering(Endian.MOST)
    )
    assert spec == Spec(
        hue=200,
        bg=Background.WHITE,
        opacity=Opacity.TRANSPARENT,
        orient=Orientation.HORIZONTAL,
        ordering=Endian.MOST,
    )


def test_spec_is_immutable():
    spec = Spec()
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.hue = 5  # type: ignore[misc]
    assert spec.hue == 152


def test_negative_hue_rejected():
    with pytest.raises(ValueError):
        Spec(hue=-1)
    with pytest.raises(ValueError):
        Spec().with_hue(-20)