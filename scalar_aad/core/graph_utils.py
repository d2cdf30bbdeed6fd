"""
Computation graph utilities.

Text rendering and structural statistics for the DAG reachable from an output
node. Debugging aids only: the formats here are not stable.
"""

from collections import Counter
from typing import Dict, Optional

from .config import get_config
from .engine import topo_order
from .node import Node


def _fmt(x, precision: int) -> str:
    return f"{float(x):.{precision}g}"


def _op_name(node: Node) -> str:
    return node.op_tag.name.lower()


def format_node(node: Node, depth: Optional[int] = None,
                precision: Optional[int] = None) -> str:
    """
    Render a node as `Node(val=..., grad=..., op=..., operands=[...])`.

    Args:
        depth: operand levels to expand; deeper operand lists show as `[...]`.
               Defaults to the active config's `render_depth`.
        precision: significant digits; defaults to the config's `precision`.
    """
    cfg = get_config()
    depth = cfg.render_depth if depth is None else depth
    precision = cfg.precision if precision is None else precision

    if not node.operands:
        operands = "[]"
    elif depth <= 0:
        operands = "[...]"
    else:
        operands = "[" + ", ".join(
            format_node(o, depth - 1, precision) for o in node.operands
        ) + "]"

    label = f"name={node.name!r}, " if node.name is not None else ""
    return (f"Node({label}val={_fmt(node.val, precision)}, "
            f"grad={_fmt(node.grad, precision)}, "
            f"op={str(node.op_tag)!r}, operands={operands})")


def get_graph_stats(output: Node) -> Dict:
    """
    Structural statistics of the graph reachable from `output` (no printing).

    Fan-out counts operand slots, so `x * x` contributes 2 to x's fan-out.

    Returns:
        dict with nodes, edges, leaves, max_fan_in, max_fan_out, operations
    """
    order = topo_order(output)

    fan_outs = Counter()
    for node in order:
        for operand in node.operands:
            fan_outs[operand] += 1

    return {
        'nodes': len(order),
        'edges': sum(len(node.operands) for node in order),
        'leaves': sum(1 for node in order if node.is_leaf),
        'max_fan_in': max(len(node.operands) for node in order),
        'max_fan_out': max(fan_outs.values()) if fan_outs else 0,
        'operations': dict(Counter(_op_name(node) for node in order)),
    }


def print_graph_summary(output: Node) -> Dict:
    """
    Print a summary of the graph reachable from `output`.

    Returns:
        the statistics dict from `get_graph_stats`
    """
    stats = get_graph_stats(output)

    print("\n" + "=" * 70)
    print("COMPUTATION GRAPH SUMMARY")
    print("=" * 70)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common():
        pct = 100.0 * count / stats['nodes']
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")
    print("=" * 70 + "\n")

    return stats


def print_computation_graph(output: Node, max_nodes: int = 20) -> None:
    """
    Print the graph one node per line, operands before their users.

    Args:
        output: node whose ancestry is printed
        max_nodes: how many nodes to print at most
    """
    order = topo_order(output)
    index = {node: i for i, node in enumerate(order)}
    precision = get_config().precision

    print("\n" + "=" * 70)
    print("COMPUTATION GRAPH STRUCTURE")
    print("=" * 70)

    for i, node in enumerate(order[:max_nodes]):
        tag = node.name if node.name is not None else ""
        head = (f"Node {i:4d}: {_op_name(node):8s} {tag:8s} "
                f"val={_fmt(node.val, precision):>12s} grad={_fmt(node.grad, precision):>12s}")
        if node.operands:
            parent_info = ", ".join(f"Node{index[o]}" for o in node.operands)
            print(f"{head} <- [{parent_info}]")
        else:
            print(f"{head} [leaf]")

    if len(order) > max_nodes:
        print(f"... ({len(order) - max_nodes} more nodes)")

    print("=" * 70 + "\n")
