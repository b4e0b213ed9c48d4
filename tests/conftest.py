"""Global pytest fixtures for SLICEWISE."""

import pytest

pytest_plugins = [
    "tests.fixtures.sources",
]


# Helper to route to an existing source fixture by name
@pytest.fixture
def source(request: pytest.FixtureRequest) -> object:
    """Indirection fixture to parametrize over source-providing fixtures.

    Example:
        ```py
        @pytest.mark.parametrize("source", ["abcde_bytes", "abcde_text"], indirect=True)
        def test_something(source): ...
        ```
    """
    return request.getfixturevalue(request.param)
