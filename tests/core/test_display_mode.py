"""DisplayMode と (PrimitiveKind, DisplayMode) → Topology 表のテスト。"""

from __future__ import annotations

import pytest

from landscape.core.display_mode import DisplayMode, Topology, topology_for
from landscape.core.primitives import PrimitiveKind


@pytest.mark.parametrize("kind", [PrimitiveKind.SQUARE, PrimitiveKind.TRIANGLE, PrimitiveKind.CIRCLE])
def test_filled_shapes(kind: PrimitiveKind) -> None:
    assert topology_for(kind, DisplayMode.SOLID) is Topology.TRIANGLES
    assert topology_for(kind, DisplayMode.WIREFRAME) is Topology.LINE_LOOP
    assert topology_for(kind, DisplayMode.POINT) is Topology.POINTS


def test_rays_are_lines_even_in_solid_mode() -> None:
    assert topology_for(PrimitiveKind.RAY_FAN, DisplayMode.SOLID) is Topology.LINE_STRIP
    assert topology_for(PrimitiveKind.RAY_FAN, DisplayMode.WIREFRAME) is Topology.LINE_STRIP
    assert topology_for(PrimitiveKind.RAY_FAN, DisplayMode.POINT) is Topology.POINTS


def test_blades_use_triangle_fan() -> None:
    assert topology_for(PrimitiveKind.BLADE_FAN, DisplayMode.SOLID) is Topology.TRIANGLE_FAN
    assert topology_for(PrimitiveKind.BLADE_FAN, DisplayMode.WIREFRAME) is Topology.LINE_LOOP


def test_every_combination_is_defined() -> None:
    for kind in PrimitiveKind:
        for mode in DisplayMode:
            assert isinstance(topology_for(kind, mode), Topology)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("solid", DisplayMode.SOLID),
        ("Wireframe", DisplayMode.WIREFRAME),
        (" POINT ", DisplayMode.POINT),
        ("s", DisplayMode.SOLID),
        ("w", DisplayMode.WIREFRAME),
        ("p", DisplayMode.POINT),
        (DisplayMode.POINT, DisplayMode.POINT),
    ],
)
def test_parse(text: object, expected: DisplayMode) -> None:
    assert DisplayMode.parse(text) is expected  # type: ignore[arg-type]


def test_parse_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        DisplayMode.parse("shaded")
