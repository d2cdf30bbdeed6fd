# scalar_aad/core/node.py
from __future__ import annotations
import numbers
from enum import Enum
from typing import Optional, Tuple

import numpy as np


class OpTag(str, Enum):
    """Closed set of operations a Node can be produced by."""
    LEAF = ""
    SUM = "+"
    PRODUCT = "*"
    TANH = "tanh"

    def __str__(self):
        return self.value


# Operand count each operation is defined for
ARITY = {
    OpTag.LEAF: 0,
    OpTag.SUM: 2,
    OpTag.PRODUCT: 2,
    OpTag.TANH: 1,
}


def _as_float64(val) -> np.float64:
    # bool is an Integral but never a meaningful graph constant
    if isinstance(val, (bool, np.bool_)) or not isinstance(val, numbers.Real):
        raise TypeError(
            f"Node only accepts real numeric scalars (int, float, numpy real), "
            f"but got {type(val)}"
        )
    return np.float64(val)


class Node:
    """
    One vertex of the computation graph.

    Attributes
    ----------
    val : np.float64
        Forward (primal) value produced by `op_tag` from `operands`,
        or the constant itself for leaves.
    grad : np.float64
        Reverse-mode accumulator for d(output)/d(this node). Starts at 0 and is
        the only field the backward pass mutates.
    op_tag : OpTag
        Operation that produced the node; selects its local gradient rule.
    operands : Tuple[Node, ...]
        Nodes this one was computed from, in slot order. The same Node may sit
        in several slots and in the operands of any number of other Nodes.
    name : Optional[str]
        Optional debug/pretty-print label.

    Nodes compare and hash by identity: two nodes with equal values are
    distinct vertices unless they are the same object.
    """

    __slots__ = ("val", "grad", "op_tag", "operands", "name")

    def __init__(self, val, op_tag: OpTag = OpTag.LEAF,
                 operands: Tuple["Node", ...] = (), *, name: Optional[str] = None):
        self.val = _as_float64(val)
        self.grad = np.float64(0.0)
        self.op_tag = OpTag(op_tag)
        self.operands = tuple(operands)
        if len(self.operands) != ARITY[self.op_tag]:
            raise ValueError(
                f"op {self.op_tag.name} takes {ARITY[self.op_tag]} operand(s), "
                f"but got {len(self.operands)}"
            )
        for operand in self.operands:
            if not isinstance(operand, Node):
                raise TypeError(f"operands must be Nodes, but got {type(operand)}")
        self.name = name

    @property
    def is_leaf(self) -> bool:
        return self.op_tag is OpTag.LEAF

    @property
    def local_gradient_rule(self):
        """The callable propagating this node's grad into its operands; None for leaves."""
        if self.is_leaf:
            return None
        from .engine import apply_rule
        return apply_rule

    def __repr__(self):
        from .graph_utils import format_node
        return format_node(self)

    # Operator overloading for the supported primitives
    def __add__(self, other):
        from ..ops.arithmetic import sum
        return sum(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import sum
        return sum(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import product
        return product(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import product
        return product(other, self)

    def tanh(self):
        from ..ops.transcendental import tanh
        return tanh(self)


def leaf(constant, name: Optional[str] = None) -> Node:
    """Wrap a numeric constant as a graph leaf (grad 0, no operands, no rule)."""
    return Node(constant, OpTag.LEAF, (), name=name)
