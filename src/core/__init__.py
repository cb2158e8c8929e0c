"""
Core math primitives, domain models and contracts.

This module contains the building blocks that are independent of the
compiled numeric backend and of the rendering UI.
"""
