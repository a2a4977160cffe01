import pytest

import tachyons


@pytest.fixture(autouse=True)
def _reset_default_context():
    """Every test starts from an uncompiled process-wide context."""
    tachyons.default_context.reset()
    yield
    tachyons.default_context.reset()
