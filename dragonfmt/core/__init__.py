"""
Core value types, arbitrary-precision arithmetic and IEEE-754 decomposition.

This package contains the foundational building blocks of the converter;
renderers in dragonfmt.render are built on top of it.
"""
