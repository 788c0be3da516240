import math

import numpy as np
import pytest

from spatialgraph.analysis.node import GraphNode
from spatialgraph.solvers.eades import EadesForceModel


def make_node(payload, position):
    node = GraphNode(payload)
    node.position = np.array(position, dtype=np.float64)
    return node


def linked(a, b):
    a.link(b)
    return a, b


@pytest.mark.parametrize("kwargs", [
    {"repulsion": 0.0, "attraction": 1.0, "ideal_length": 1.0},
    {"repulsion": 1.0, "attraction": -1.0, "ideal_length": 1.0},
    {"repulsion": 1.0, "attraction": 1.0, "ideal_length": 0.0},
])
def test_constants_must_be_positive(kwargs):
    with pytest.raises(ValueError):
        EadesForceModel(**kwargs)


def test_repulsive_force_inverse_square():
    model = EadesForceModel(repulsion=1.0, attraction=1.0, ideal_length=1.0, seed=0)
    a = make_node("a", [0.0, 0.0, 0.0])
    b = make_node("b", [2.0, 0.0, 0.0])
    np.testing.assert_allclose(model.repulsive_force(a, b), [-0.25, 0.0, 0.0])
    np.testing.assert_allclose(model.repulsive_force(b, a), [0.25, 0.0, 0.0])


def test_repulsive_force_for_coincident_nodes_uses_unit_jitter():
    model = EadesForceModel(repulsion=0.5, attraction=1.0, ideal_length=1.0, seed=1)
    a = make_node("a", [1.0, 1.0, 1.0])
    b = make_node("b", [1.0, 1.0, 1.0])
    force = model.repulsive_force(a, b)
    assert np.linalg.norm(force) == pytest.approx(0.5)
    assert np.all(force >= 0.0)


def test_jitter_is_reproducible_with_seed():
    first = EadesForceModel(1.0, 1.0, 1.0, seed=42).jitter(3)
    second = EadesForceModel(1.0, 1.0, 1.0, rng=np.random.default_rng(42)).jitter(3)
    np.testing.assert_array_equal(first, second)
    assert np.linalg.norm(first) == pytest.approx(1.0)


def test_total_repulsive_force_skips_node_itself():
    model = EadesForceModel(repulsion=1.0, attraction=1.0, ideal_length=1.0, seed=0)
    a = make_node("a", [0.0, 0.0, 0.0])
    assert model.total_repulsive_force(a, [a]).tolist() == [0.0, 0.0, 0.0]


def test_total_repulsive_force_with_self_adds_jitter():
    model = EadesForceModel(repulsion=1.0, attraction=1.0, ideal_length=1.0, seed=0, include_self=True)
    a = make_node("a", [0.0, 0.0, 0.0])
    assert np.linalg.norm(model.total_repulsive_force(a, [a])) == pytest.approx(1.0)


def test_total_repulsive_force_sums_all_others():
    model = EadesForceModel(repulsion=1.0, attraction=1.0, ideal_length=1.0)
    a = make_node("a", [0.0, 0.0, 0.0])
    b = make_node("b", [1.0, 0.0, 0.0])
    c = make_node("c", [-2.0, 0.0, 0.0])
    force = model.total_repulsive_force(a, [a, b, c])
    np.testing.assert_allclose(force, [-1.0 + 0.25, 0.0, 0.0])


def test_spring_sign_flips_at_ideal_length():
    model = EadesForceModel(repulsion=1.0, attraction=2.0, ideal_length=2.0)
    a = make_node("a", [0.0, 0.0, 0.0])
    assert model.spring_magnitude(a, make_node("near", [1.0, 0.0, 0.0])) < 0.0
    assert model.spring_magnitude(a, make_node("rest", [2.0, 0.0, 0.0])) == pytest.approx(0.0)
    assert model.spring_magnitude(a, make_node("far", [20.0, 0.0, 0.0])) == pytest.approx(2.0)


def test_attractive_force_removes_pair_repulsion():
    model = EadesForceModel(repulsion=1.0, attraction=1.0, ideal_length=1.0)
    a, b = linked(make_node("a", [0.0, 0.0, 0.0]), make_node("b", [10.0, 0.0, 0.0]))
    # spring pulls towards b with log10(10) = 1, minus repulsion 1/100 pointing away from b
    np.testing.assert_allclose(model.total_attractive_force(a), [1.01, 0.0, 0.0])


def test_linked_pair_at_ideal_length_is_in_balance():
    model = EadesForceModel(repulsion=0.25, attraction=0.25, ideal_length=1.5)
    a, b = linked(make_node("a", [0.0, 0.0, 0.0]), make_node("b", [0.0, 0.0, 1.5]))
    np.testing.assert_allclose(model.total_force(a, [a, b]), [0.0, 0.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(model.total_force(b, [a, b]), [0.0, 0.0, 0.0], atol=1e-12)


def test_linked_pair_closer_than_ideal_is_pushed_apart():
    model = EadesForceModel(repulsion=0.25, attraction=0.25, ideal_length=1.0)
    a, b = linked(make_node("a", [0.0, 0.0, 0.0]), make_node("b", [0.5, 0.0, 0.0]))
    force = model.total_force(a, [a, b])
    assert force[0] == pytest.approx(0.25 * math.log10(0.5))
    assert force[0] < 0.0


def test_force_queries_do_not_mutate_nodes():
    model = EadesForceModel(repulsion=0.25, attraction=0.25, ideal_length=1.0, seed=3)
    a, b = linked(make_node("a", [0.0, 0.0, 0.0]), make_node("b", [0.0, 0.0, 0.0]))
    c = make_node("c", [1.0, 2.0, 3.0])
    model.total_attractive_force(a)
    model.total_repulsive_force(a, [a, b, c])
    assert a.position.tolist() == [0.0, 0.0, 0.0]
    assert b.position.tolist() == [0.0, 0.0, 0.0]
    assert c.position.tolist() == [1.0, 2.0, 3.0]


def test_jitter_is_drawn_only_for_coincident_nodes():
    model = EadesForceModel(repulsion=0.25, attraction=0.25, ideal_length=1.0, rng=np.random.default_rng(5))
    a, b = linked(make_node("a", [0.0, 0.0, 0.0]), make_node("b", [0.5, 0.0, 0.0]))
    c = make_node("c", [1.0, 2.0, 3.0])
    for node in (a, b, c):
        model.total_force(node, [a, b, c])
    np.testing.assert_array_equal(model.rng.random(3), np.random.default_rng(5).random(3))
