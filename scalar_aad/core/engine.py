# scalar_aad/core/engine.py
from __future__ import annotations
import logging
from typing import List, Tuple

import numpy as np

from .node import Node, OpTag

logger = logging.getLogger(__name__)


def topo_order(output: Node) -> List[Node]:
    """
    Post-order DFS over everything reachable from `output` through operands.

    A node is appended only after all of its operands, so reading the list in
    reverse puts every node after all of the nodes that use it. Shared
    subgraphs are visited once (visited set on entry).

    Uses an explicit stack instead of recursion so long chains do not hit the
    interpreter recursion limit; the resulting order matches the recursive one.
    """
    order: List[Node] = []
    visited = set()
    stack = [(output, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            order.append(node)
            continue
        if node in visited:
            continue
        visited.add(node)
        stack.append((node, True))
        # reversed so operands[0] is explored first
        for operand in reversed(node.operands):
            if operand not in visited:
                stack.append((operand, False))
    return order


def local_partials(node: Node) -> Tuple[np.float64, ...]:
    """
    Return d(node)/d(operand_i) for every operand slot, evaluated at the
    forward values.

    Supported ops
    -------------
    leaf, sum, product, tanh
    """
    tag = node.op_tag

    if tag is OpTag.LEAF:
        return ()

    if tag is OpTag.SUM:
        # y = a + b  ->  dy/da = dy/db = 1
        return (np.float64(1.0), np.float64(1.0))

    if tag is OpTag.PRODUCT:
        # y = a * b  ->  dy/da = b, dy/db = a
        a, b = node.operands
        return (b.val, a.val)

    if tag is OpTag.TANH:
        # y = tanh(a)  ->  dy/da = 1 - y^2
        return (1.0 - node.val * node.val,)

    raise ValueError(f"no gradient rule for op {tag!r}")


def apply_rule(node: Node) -> None:
    """
    Propagate node.grad into its operands: operand_i.grad += node.grad * partial_i.

    Every partial is computed before any operand is touched, so a node that
    fills several slots (x * x) receives one contribution per slot.
    """
    partials = local_partials(node)
    g = node.grad
    for operand, a in zip(node.operands, partials):
        operand.grad += g * a


def backward(output: Node) -> None:
    """
    Run a single reverse pass from `output`.

    Seeds output.grad = 1 (overwrite), then applies each node's rule once, in
    reverse post-order. Gradients are accumulated, not reset: call
    `zero_grad(output)` before running a second pass over the same graph.
    """
    if not isinstance(output, Node):
        raise TypeError(f"backward expects a Node, but got {type(output)}")

    output.grad = np.float64(1.0)
    order = topo_order(output)
    logger.debug("backward: %d nodes, %d edges",
                 len(order), sum(len(n.operands) for n in order))

    for node in reversed(order):
        rule = node.local_gradient_rule
        if rule is not None:
            rule(node)


def zero_grad(output: Node) -> None:
    """Set grad to zero on every node reachable from `output`."""
    order = topo_order(output)
    for node in order:
        node.grad = np.float64(0.0)
    logger.debug("zero_grad: reset %d nodes", len(order))
