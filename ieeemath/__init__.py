"""IEEE 754 double-precision helpers, trigonometric kernels, elementary functions and erf."""

__version__ = "0.1.0"
__all__ = ["elementary", "errfunc", "ieee", "kernels"]