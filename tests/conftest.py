import pytest
import structlog

from bmpcanvas.models.canvas import Canvas
from bmpcanvas.services import codec


@pytest.fixture(autouse=True)
def captured_logs():
    """Swallow structlog output for every test and expose the entries."""
    with structlog.testing.capture_logs() as logs:
        yield logs


@pytest.fixture
def red_pair() -> Canvas:
    """The 2x1 solid red canvas used by several scenarios."""
    return Canvas.new(2, 1, 1, 0, 0)


@pytest.fixture
def red_pair_bytes(red_pair) -> bytes:
    return codec.encode(red_pair)
