# scalar_aad/ops/arithmetic.py
from ..core.node import Node, OpTag, leaf


def _as_node(x):
    """Ensure x is a Node; otherwise wrap it as a fresh leaf."""
    return x if isinstance(x, Node) else leaf(x)


def _binary(x, y, f, tag):
    """
    Generic binary primitive:
      - computes out.val = f(x.val, y.val)
      - records (x, y) as operands; the gradient rule is looked up by `tag`
        at backward time
    Operands are only read, never mutated.
    """
    x = _as_node(x)
    y = _as_node(y)
    return Node(f(x.val, y.val), tag, (x, y))


def sum(x, y): return _binary(x, y, lambda a, b: a + b, OpTag.SUM)
def product(x, y): return _binary(x, y, lambda a, b: a * b, OpTag.PRODUCT)
