"""Arithmetic on Curve25519: prime field, Edwards points, basepoint tables, multiscalar sums and Montgomery ladder."""

__version__ = "0.1.0"
__all__ = ["field", "edwards", "basepoint_table", "multiscalar", "montgomery"]