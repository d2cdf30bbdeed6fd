# scalar_aad/ops/__init__.py

# Convenience re-exports so users can do: from scalar_aad.ops import product, tanh
from .arithmetic import sum, product
from .transcendental import tanh

__all__ = [
    "sum", "product",
    "tanh",
]
