"""Entrypoints (inbound adapters) for SUBSCRIBEANDSAVE.

Expose the subscription store to the outside world. Parse and validate inputs,
call the storage adapters, and present results.
"""
