"""Adapters (infrastructure) for SUBSCRIBEANDSAVE.

Provide concrete implementations of the interfaces: subscription stores
(CSV file, in-memory) and ID generators.

Dependency rule: may import `subscribeandsave.interfaces`; the interfaces must
not import this package.
"""
