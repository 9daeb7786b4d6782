"""SUBSCRIBEANDSAVE

A small file-backed record store for "Subscribe & Save" subscriptions:
a customer's recurring order of a product at a fixed delivery frequency.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
