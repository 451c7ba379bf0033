import io

import pytest

from fexl.interpreter import Runtime
from fexl.types.ns_stack import NSStack


@pytest.fixture
def out():
    """Captures everything `debug` prints."""
    return io.StringIO()


@pytest.fixture
def runtime(out):
    """Fresh runtime with intrinsics registered; debug output goes to `out`."""
    return Runtime(out=out)


@pytest.fixture
def stack():
    """Bare scope stack holding only an empty base frame."""
    return NSStack()
