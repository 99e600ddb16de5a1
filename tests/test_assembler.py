import itertools

import hypothesis
import pytest

import printmail
from printmail import assembler
from printmail.util import Vector

import data

toggle_names = ["add_base_plate_and_supports", "add_side_walls", "add_support_joiners"]


@pytest.mark.parametrize("toggles", list(itertools.product([False, True], repeat=3)))
def test_lattice_independent_of_toggles(toggles):
    config = data.default._replace(**dict(zip(toggle_names, toggles)))
    assert assembler.lattice_shape(config).scad() == assembler.lattice_shape(data.default).scad()


def test_disabled_toggles_leave_only_lattice():
    config = data.everything._replace(**{name: False for name in toggle_names})
    assert printmail.assemble(config).scad() == assembler.lattice_shape(config).scad()


def test_summary():
    assert assembler.summary(data.everything) == {
        "cell_ring": 54,
        "linker_ring": 4,
        "base_plate": 1,
        "pillar": 20,
        "angled_brace": 2,
        "wall": 2,
        "joiner_tab": 36,
    }


def test_assembly_contains_everything():
    shape = printmail.assemble(data.everything)
    source = shape.scad()
    assert source.count("rotate_extrude()") == 58
    assert source.count("cube(") == 1 + 2 + 36
    assert source.count("cylinder(") == 20 + 2


def test_assembly_material():
    shape = printmail.assemble(data.everything)
    # Middle of the wire of the first ring
    assert shape.distance(Vector(5.75, 0, 0)) < 0
    # Center of the first ring's hole, well above the plate
    assert shape.distance(Vector(0, 0, 0)) > 0


@pytest.mark.parametrize("config", data.params_empty)
def test_empty_assembly(config):
    shape = printmail.assemble(config)
    assert shape.bounding_box().is_empty()
    assert shape.scad_lines() == ["union() {", "}"]


@hypothesis.settings(max_examples=20, deadline=None)
@hypothesis.given(data.configs)
def test_deterministic(config):
    config = config._replace(add_side_walls=True, add_support_joiners=True)
    first = printmail.assemble(config).scad()
    assert printmail.assemble(config).scad() == first
    assert printmail.assemble(printmail.Config(*config)).scad() == first
