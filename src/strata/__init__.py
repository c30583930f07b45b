"""
Strata - layered resource resolution for static sites

Strata discovers content across the system, site and theme layers, merges
it into per-resource dictionaries and renders configurable widgets.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
