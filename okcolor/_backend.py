"""Backend dispatch for scalar/numpy/torch compatibility.

Provides unified math operations that work with Python floats, numpy arrays
and torch tensors. Torch is imported lazily on first use to avoid loading it
when not needed.
"""

import numpy as np
from typing import Any

Array = Any  # float, numpy.ndarray or torch.Tensor

# Lazy torch reference - only imported when needed
_torch = None


def _get_torch():
    """Get torch module, importing it on first use."""
    global _torch
    if _torch is None:
        import torch
        _torch = torch
    return _torch


def is_torch(x: Array) -> bool:
    """Check if x is a torch tensor."""
    return type(x).__module__.startswith('torch')


def as_float(x: Array) -> Array:
    """Coerce x to floating point, keeping its backend."""
    if is_torch(x):
        if x.is_floating_point():
            return x
        return x.to(_get_torch().get_default_dtype())
    if isinstance(x, np.ndarray):
        if np.issubdtype(x.dtype, np.floating):
            return x
        return x.astype(np.float64)
    return float(x)


def unwrap(x: Array) -> Array:
    """Collapse 0-d numpy results back to scalars."""
    if isinstance(x, np.ndarray) and x.ndim == 0:
        return x[()]
    return x


# === Dispatched operations ===

def sin(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().sin(x)
    return np.sin(x)


def cos(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().cos(x)
    return np.cos(x)


def sqrt(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().sqrt(x)
    return np.sqrt(x)


def cbrt(x: Array) -> Array:
    """Cube root (sign-preserving)."""
    if is_torch(x):
        torch = _get_torch()
        return torch.sign(x) * torch.abs(x).pow(1/3)
    return np.cbrt(x)


def pow(x: Array, exp: float) -> Array:
    if is_torch(x):
        return _get_torch().pow(x, exp)
    return np.power(x, exp)


def floor(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().floor(x)
    return np.floor(x)


def isnan(x: Array) -> Array:
    if is_torch(x):
        return _get_torch().isnan(x)
    return np.isnan(x)


def clamp_min(x: Array, lo: float) -> Array:
    if is_torch(x):
        return x.clamp(min=lo)
    return np.maximum(x, lo)


def atan2(y: Array, x: Array) -> Array:
    if is_torch(y) or is_torch(x):
        torch = _get_torch()
        return torch.atan2(torch.as_tensor(y), torch.as_tensor(x))
    return np.arctan2(y, x)


def where(cond: Array, true_val: Array, false_val: Array) -> Array:
    if is_torch(cond):
        torch = _get_torch()
        ref = true_val if is_torch(true_val) else false_val
        if not is_torch(ref):
            ref = torch.as_tensor(0.0)
        true_val = torch.as_tensor(true_val, dtype=ref.dtype, device=ref.device)
        false_val = torch.as_tensor(false_val, dtype=ref.dtype, device=ref.device)
        return torch.where(cond, true_val, false_val)
    return np.where(cond, true_val, false_val)
