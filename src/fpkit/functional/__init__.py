"""Functional primitives for fpkit.

This package provides the plain-function side of the library: copy-on-write
record updates, function composition, currying and a handful of
higher-order helpers. Utilities are stateless and side-effect-free so they
can be composed into pipelines with each other and with the wrapper types in
``fpkit.core``.
"""
