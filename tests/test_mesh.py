import functools
import math

import pytest
import trimesh

import printmail
import printmail.rendering.mesh

import data

shapes = [printmail.shapes.ring(d=10, wire=2),
          printmail.shapes.ring(d=10, wire=2).rotated_x(45).translated(1, 2, 3),
          printmail.shapes.box(4.1, 5.2, 6.1),
          printmail.shapes.cylinder(h=5, d=3).rotated_y(45)]


def to_trimesh(blocks):
    mesh = functools.reduce(trimesh.util.concatenate,
                            (trimesh.Trimesh(vertices=vertices, faces=indices)
                             for vertices, indices in blocks))
    mesh.process()  # Deduplicate vertices
    return mesh


@pytest.mark.parametrize("shape", shapes)
@pytest.mark.parametrize("slab_size", [8, 32])
def test_watertight(shape, slab_size):
    blocks = printmail.rendering.mesh.triangular_mesh(shape, 0.3, slab_size=slab_size)
    assert to_trimesh(blocks).is_watertight


def test_workers_give_same_mesh():
    shape = shapes[1]
    single = list(printmail.rendering.mesh.triangular_mesh(shape, 0.25, slab_size=8))
    threaded = list(printmail.rendering.mesh.triangular_mesh(shape, 0.25, slab_size=8, workers=3))

    assert len(single) == len(threaded)
    for (v1, t1), (v2, t2) in zip(single, threaded):
        assert (v1 == v2).all()
        assert (t1 == t2).all()


def test_ring_volume():
    mesh = to_trimesh(printmail.rendering.mesh.triangular_mesh(shapes[0], 0.15))
    expected = 2 * math.pi**2 * 6 * 1**2
    assert abs(mesh.volume) == pytest.approx(expected, rel=0.05)


def test_empty():
    assert list(printmail.rendering.mesh.triangular_mesh(printmail.shapes.empty(), 0.1)) == []


def test_small_lattice():
    config = data.default._replace(cols=1, rows=1, stacks=2, add_base_plate_and_supports=False)
    shape = printmail.assemble(config)
    box = shape.bounding_box().expanded_additive(0.3)

    blocks = list(printmail.rendering.mesh.triangular_mesh(shape, 0.3, workers=2))
    assert len(blocks) > 0
    for vertices, indices in blocks:
        assert len(indices) > 0
        assert (vertices >= tuple(box.a)).all()
        assert (vertices <= tuple(box.b)).all()
