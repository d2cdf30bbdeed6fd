"""
Gradient check by bumping.

Compares backward-pass gradients with central finite differences computed from
forward values only:

    dy/dx_k ~ [f(x + eps e_k) - f(x - eps e_k)] / (2 eps)

Two forward evaluations per input, no backward pass on the bumped graphs.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .config import get_config
from .node import Node, leaf
from .seeds import grads, value

logger = logging.getLogger(__name__)


@dataclass
class GradCheckResult:
    """
    Attributes:
        analytic: gradients from the backward pass
        numeric: central-difference estimates
        max_abs_err: largest |analytic - numeric| over all inputs
        ok: max_abs_err <= tol
    """
    analytic: Dict[str, float]
    numeric: Dict[str, float]
    max_abs_err: float
    ok: bool


def _forward(f: Callable[[Dict[str, Node]], Node], point: Dict[str, float]) -> float:
    return float(value(f({k: leaf(v, name=str(k)) for k, v in point.items()})))


def check_grad(f: Callable[[Dict[str, Node]], Node],
               inputs: Dict[str, float],
               eps: Optional[float] = None,
               tol: Optional[float] = None) -> GradCheckResult:
    """
    Check the gradient of y=f(vars) at `inputs`.

    Args:
        f: function taking a dict {name: Node} and returning a Node
        inputs: dict {name: numeric} evaluation point
        eps: bump size; defaults to the active config's `fd_eps`
        tol: absolute tolerance; defaults to the active config's `grad_tol`
    """
    cfg = get_config()
    eps = cfg.fd_eps if eps is None else eps
    tol = cfg.grad_tol if tol is None else tol
    if not eps > 0:
        raise ValueError(f"eps must be positive, got {eps}")
    if not tol > 0:
        raise ValueError(f"tol must be positive, got {tol}")

    point = {k: float(v) for k, v in inputs.items()}
    analytic = {k: float(g) for k, g in grads(f, point).items()}

    numeric = {}
    for k, x0 in point.items():
        up = {**point, k: x0 + eps}
        down = {**point, k: x0 - eps}
        numeric[k] = (_forward(f, up) - _forward(f, down)) / (2.0 * eps)

    errors = {k: abs(analytic[k] - numeric[k]) for k in point}
    max_abs_err = float(max(errors.values())) if errors else 0.0
    ok = bool(max_abs_err <= tol)

    if not ok:
        worst = max(errors, key=errors.get)
        logger.warning(
            "gradient check failed for %r: analytic=%.10g numeric=%.10g (max err %.3g > tol %.3g)",
            worst, analytic[worst], numeric[worst], max_abs_err, tol,
        )
    return GradCheckResult(analytic=analytic, numeric=numeric,
                           max_abs_err=max_abs_err, ok=ok)
