# scalar_aad/core/__init__.py

"""
Core public API for the scalar AAD package.

Exports:
    Node          : A vertex of the computation graph (value, grad, operands).
    OpTag         : The closed set of operations a Node can come from.
    leaf          : Wrap a numeric constant as a graph leaf.
    backward      : Run a single reverse pass to accumulate gradients.
    zero_grad     : Reset gradients on every node reachable from an output.
    topo_order    : Post-order listing of the nodes reachable from an output.
    grad, grads   : Convenience: build a graph from fresh leaves and differentiate.
    value         : Convenience: extract the primal value from a Node.
    gradient      : Convenience: extract the accumulated gradient from a Node.
"""

from .node import Node, OpTag, leaf
from .engine import backward, zero_grad, topo_order
from .seeds import grad, grads, grads_list, value, gradient
from .config import Config, get_config, use_config

__all__ = [
    "Node", "OpTag", "leaf",
    "backward", "zero_grad", "topo_order",
    "grad", "grads", "grads_list", "value", "gradient",
    "Config", "get_config", "use_config",
]
