from __future__ import annotations

import epinetwork


def reset_epinetwork_config() -> None:
    """Reset the default flattener between tests."""
    epinetwork._reset_default_flattener()


import pytest  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_config() -> None:
    reset_epinetwork_config()
