# scalar_aad/core/seeds.py

# Gradient helpers: wrap the inputs as leaves, clear stale gradients on the
# inputs and on everything reachable from f's result, then run backward once.
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List

import numpy as np

from .node import Node, leaf
from .engine import backward, zero_grad


def value(x: Any) -> Any:
    """Return the numeric value of a Node; pass through plain numbers unchanged."""
    return x.val if isinstance(x, Node) else x


def gradient(x: Any) -> Any:
    """Return the accumulated gradient of a Node; plain numbers are constants (0)."""
    return x.grad if isinstance(x, Node) else np.float64(0.0)


def _ensure_node(v: Any, *, name: str) -> Node:
    """Wrap a plain value as a leaf if needed; otherwise return the Node itself."""
    return v if isinstance(v, Node) else leaf(v, name=name)


def _run(y: Any, inputs: Iterable[Node]) -> None:
    for x in inputs:
        x.grad = np.float64(0.0)
    # A plain-number result does not depend on any input: all gradients stay 0.
    if not isinstance(y, Node):
        return
    zero_grad(y)
    backward(y)


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Node], Node], x0: Any) -> np.float64:
    """
    Derivative of a scalar function y=f(x) at x0.
    Builds a fresh graph from a new leaf and runs one backward pass.
    """
    x = _ensure_node(x0, name="x")
    _run(f(x), [x])
    return x.grad


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Node]], Node],
          inputs: Dict[str, Any]) -> Dict[str, np.float64]:
    """
    Partial derivatives of f at a point given as a mapping.

    Plain values in `inputs` become leaves named after their key; Nodes are used
    as they are, with their gradients cleared first. `f` receives a dict with the
    same keys. The result maps each key to d(f)/d(input), in `inputs` order.
    """
    nodes: Dict[str, Node] = {k: _ensure_node(v, name=str(k)) for k, v in inputs.items()}
    _run(f(nodes), nodes.values())
    return {k: nodes[k].grad for k in inputs.keys()}


def grads_list(f: Callable[[List[Node]], Node],
               x0_list: Iterable[Any]) -> List[np.float64]:
    """
    Positional form of `grads`: leaves are named x0, x1, ... and `f` receives
    them as a list. Returns the partial derivatives in input order.

    grads_list(lambda xs: xs[0] * xs[1] + xs[1], [2.0, 5.0]) -> [5.0, 3.0]
    """
    xs: List[Node] = [_ensure_node(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    _run(f(xs), xs)
    return [x.grad for x in xs]
