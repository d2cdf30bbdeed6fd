# scalar_aad/__init__.py
# Reverse-mode automatic differentiation over scalar values

from .core.node import Node, OpTag, leaf
from .core.engine import backward, zero_grad, topo_order
from .core.seeds import grad, grads, grads_list, value, gradient
from .core.config import Config, get_config, use_config
from .core.checks import GradCheckResult, check_grad
from .core.graph_utils import (
    format_node,
    get_graph_stats,
    print_computation_graph,
    print_graph_summary,
)

from .ops import sum, product, tanh

__all__ = [
    # Graph
    'Node',
    'OpTag',
    'leaf',
    # Operators
    'sum',
    'product',
    'tanh',
    # Engine
    'backward',
    'zero_grad',
    'topo_order',
    # Seeds
    'grad',
    'grads',
    'grads_list',
    'value',
    'gradient',
    # Config
    'Config',
    'get_config',
    'use_config',
    # Debugging
    'check_grad',
    'GradCheckResult',
    'format_node',
    'get_graph_stats',
    'print_computation_graph',
    'print_graph_summary',
]
