"""Contract tests.

Run one behavioral suite against every storage backend and id generator so the
implementations stay interchangeable. Backends are parametrized via fixtures;
only the public contract is asserted.
"""
