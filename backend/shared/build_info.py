"""Build metadata exposed at runtime.

APP_VERSION can be pinned through the environment in CI; otherwise the
installed distribution version is used, or "dev" from a source checkout.
"""

import os
from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "poker-league"


def _installed_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "dev"


APP_VERSION: str = os.environ.get("APP_VERSION") or _installed_version()
