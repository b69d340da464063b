import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    # the CLI configures structlog globally, don't let it leak into other tests
    yield
    structlog.reset_defaults()
