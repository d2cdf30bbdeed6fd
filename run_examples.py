"""
Example driver: a tanh neuron and a diamond-shaped expression.

Builds each graph, runs one backward pass from the output and prints every
node with its value and gradient.
"""

import logging

from scalar_aad import backward, leaf, print_computation_graph


def neuron_example():
    # o = tanh(x1*w1 + x2*w2 + b)
    x1 = leaf(2.0, name="x1")
    x2 = leaf(0.0, name="x2")
    w1 = leaf(-3.0, name="w1")
    w2 = leaf(1.0, name="w2")
    b = leaf(6.8813735870195432, name="b")

    x1w1 = x1 * w1
    x2w2 = x2 * w2
    x1w1x2w2 = x1w1 + x2w2
    n = x1w1x2w2 + b
    o = n.tanh()

    backward(o)

    print("Example 1")
    for label, node in [("x1", x1), ("x2", x2), ("w1", w1), ("w2", w2), ("b", b),
                        ("x1w1", x1w1), ("x2w2", x2w2), ("x1w1x2w2", x1w1x2w2),
                        ("n", n), ("o", o)]:
        print(f"{label}: {node!r}\n")
    return o


def diamond_example():
    # f = (a*b) * (a+b): a and b each feed two downstream nodes
    a = leaf(-2.0, name="a")
    b = leaf(3.0, name="b")
    d = a * b
    e = a + b
    f = d * e

    backward(f)

    print("Example 2")
    for label, node in [("a", a), ("b", b), ("d", d), ("e", e), ("f", f)]:
        print(f"{label}: {node!r}\n")
    return f


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    o = neuron_example()
    print_computation_graph(o)

    f = diamond_example()
    print_computation_graph(f)
