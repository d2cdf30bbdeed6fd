# scalar_aad/core/config.py
from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Config:
    """
    Engine-wide settings.

    Attributes
    ----------
    render_depth : int
        How many operand levels `repr(node)` expands before eliding.
    precision : int
        Significant digits used when rendering floats.
    fd_eps : float
        Central-difference step used by `check_grad`.
    grad_tol : float
        Absolute tolerance used by `check_grad`.
    """
    render_depth: int = 1
    precision: int = 6
    fd_eps: float = 1e-6
    grad_tol: float = 1e-6

    def __post_init__(self):
        if self.render_depth < 0:
            raise ValueError(f"render_depth must be >= 0, got {self.render_depth}")
        if self.precision < 1:
            raise ValueError(f"precision must be >= 1, got {self.precision}")
        if not self.fd_eps > 0:
            raise ValueError(f"fd_eps must be positive, got {self.fd_eps}")
        if not self.grad_tol > 0:
            raise ValueError(f"grad_tol must be positive, got {self.grad_tol}")


# Active configuration (module attribute, swapped by use_config)
active_config = Config()


def get_config() -> Config:
    """Return the configuration currently in effect."""
    return active_config


@contextmanager
def use_config(**overrides):
    """
    Context manager to temporarily override settings:
        with use_config(render_depth=3):
            print(repr(out))
    """
    from . import config as _config_mod  # module access so callers see the swap
    prev = _config_mod.active_config
    try:
        _config_mod.active_config = replace(prev, **overrides)
        yield _config_mod.active_config
    finally:
        _config_mod.active_config = prev
