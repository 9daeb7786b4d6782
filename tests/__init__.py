"""SUBSCRIBEANDSAVE test suite.

Folder taxonomy
- unit/         : Fast checks of one module: value types, errors, CLI helpers, logging.
- contract/     : Behavior every SubscriptionStorage / IdGenerator must share.
- integration/  : CSV file format and filesystem behavior of the file store.
- functional/   : The ``subscribeandsave`` CLI driven end to end.
- fixtures/     : Baseline subscriptions and the restore helper (no tests here).

Property-based tests use @pytest.mark.property; directory marks are applied
by the root conftest.
"""
