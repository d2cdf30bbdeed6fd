"""Tests for topological ordering and the backward pass."""

import logging

import pytest

from scalar_aad import backward, leaf, product, sum, tanh, topo_order, zero_grad


class TestTopoOrder:

    def test_every_node_once(self, diamond):
        order = topo_order(diamond["f"])
        assert len(order) == 5
        assert len(set(order)) == 5
        assert set(order) == set(diamond.values())

    def test_operands_before_users(self, diamond):
        order = topo_order(diamond["f"])
        position = {node: i for i, node in enumerate(order)}
        for node in order:
            for operand in node.operands:
                assert position[operand] < position[node]
        assert order[-1] is diamond["f"]

    def test_post_order_is_depth_first(self, diamond):
        order = topo_order(diamond["f"])
        names = [diamond_name(diamond, n) for n in order]
        assert names == ["a", "b", "d", "e", "f"]

    def test_leaf_alone(self):
        x = leaf(1.0)
        assert topo_order(x) == [x]

    def test_deep_chain_does_not_recurse(self):
        x = leaf(1.0)
        y = x
        for _ in range(5000):
            y = y + 0.5
        order = topo_order(y)
        assert len(order) == 1 + 2 * 5000
        backward(y)
        assert x.grad == 1.0


def diamond_name(graph, node):
    return next(k for k, v in graph.items() if v is node)


class TestBackward:

    def test_diamond(self, diamond):
        backward(diamond["f"])
        assert diamond["f"].grad == 1.0
        assert diamond["d"].grad == 1.0
        assert diamond["e"].grad == -6.0
        assert diamond["a"].grad == -3.0
        assert diamond["b"].grad == -8.0

    def test_neuron(self, neuron):
        backward(neuron["o"])
        assert neuron["o"].val == pytest.approx(0.7071067811865476, abs=1e-6)
        assert neuron["n"].grad == pytest.approx(0.5, abs=1e-6)
        assert neuron["x2"].grad == pytest.approx(0.5, abs=1e-6)
        assert neuron["w2"].grad == pytest.approx(0.0, abs=1e-6)
        assert neuron["x1"].grad == pytest.approx(-1.5, abs=1e-6)
        assert neuron["w1"].grad == pytest.approx(1.0, abs=1e-6)
        assert neuron["b"].grad == pytest.approx(0.5, abs=1e-6)

    def test_fan_out_within_one_expression(self):
        # y = x*x + x  ->  dy/dx = 2x + 1
        x = leaf(3.0)
        y = sum(product(x, x), x)
        backward(y)
        assert x.grad == 7.0

    def test_shared_intermediate(self):
        # u = tanh(x) used twice: y = u*u + u  ->  dy/dx = (2u + 1)(1 - u^2)
        x = leaf(0.7)
        u = tanh(x)
        y = u * u + u
        backward(y)
        expected = (2 * u.val + 1) * (1 - u.val ** 2)
        assert u.grad == pytest.approx(2 * u.val + 1, abs=1e-12)
        assert x.grad == pytest.approx(expected, abs=1e-12)

    def test_seed_overwrites(self):
        a, b = leaf(2.0), leaf(3.0)
        out = product(a, b)
        out.grad = 42.0
        backward(out)
        assert out.grad == 1.0
        assert a.grad == 3.0

    def test_backward_on_leaf(self):
        x = leaf(5.0)
        backward(x)
        assert x.grad == 1.0

    def test_second_call_accumulates(self, diamond):
        backward(diamond["f"])
        backward(diamond["f"])
        assert diamond["f"].grad == 1.0
        assert diamond["d"].grad == 2.0
        assert diamond["e"].grad == -12.0
        assert diamond["a"].grad == -9.0
        assert diamond["b"].grad == -24.0

    def test_zero_grad_then_backward(self, diamond):
        backward(diamond["f"])
        zero_grad(diamond["f"])
        assert all(node.grad == 0.0 for node in diamond.values())
        backward(diamond["f"])
        assert diamond["a"].grad == -3.0
        assert diamond["b"].grad == -8.0

    def test_no_gradient_leakage(self, diamond):
        unrelated = leaf(1.0)
        downstream = diamond["f"] * 2.0
        backward(diamond["f"])
        assert unrelated.grad == 0.0
        assert downstream.grad == 0.0
        assert downstream.operands[1].grad == 0.0

    def test_only_output_subgraph_is_touched(self, diamond):
        backward(diamond["d"])
        assert diamond["d"].grad == 1.0
        assert diamond["a"].grad == 3.0
        assert diamond["b"].grad == -2.0
        assert diamond["e"].grad == 0.0
        assert diamond["f"].grad == 0.0

    def test_rejects_non_node(self):
        with pytest.raises(TypeError):
            backward(1.0)

    def test_logs_graph_size(self, diamond, caplog):
        with caplog.at_level(logging.DEBUG, logger="scalar_aad.core.engine"):
            backward(diamond["f"])
        assert "backward: 5 nodes, 6 edges" in caplog.text
