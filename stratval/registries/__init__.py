"""Validation registries.

New validation schemes are added by registering a factory under a mode name;
callers keep going through :func:`make_validation`.
"""

from .validations import make_validation, register_validation, list_validation_modes
