"""Configuration utilities for SUBSCRIBEANDSAVE.

This module centralizes the environment variables and defaults that decide
where subscriptions are stored and how their ids are generated. The CLI binds
its options to these environment variables.
"""

from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "subscribeandsave"  # pragma: no mutate

SUBSCRIPTIONS_FILE_ENVVAR = "SUBSCRIBEANDSAVE_FILE"
ID_GENERATOR_ENVVAR = "SUBSCRIBEANDSAVE_ID_GENERATOR"

DEFAULT_FILE_NAME = "subscriptions.csv"
DEFAULT_ID_GENERATOR = "uuid4"


def default_subscriptions_path() -> Path:
    """Return the per-user default location of the subscriptions file.

    The directory is not created here; `SubscriptionFileStorage` creates the
    file and its parents on first use.
    """
    return Path(user_data_dir(APP_NAME, appauthor=False)) / DEFAULT_FILE_NAME
