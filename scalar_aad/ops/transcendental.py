# scalar_aad/ops/transcendental.py
import numpy as np
from ..core.node import Node, OpTag
from .arithmetic import _as_node


def tanh(x):
    """
    Hyperbolic tangent:
      out.val = tanh(x.val)
      d(out)/dx = 1 - out.val^2   (applied at backward time)
    """
    x = _as_node(x)
    return Node(np.tanh(x.val), OpTag.TANH, (x,))
