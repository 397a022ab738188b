import sys
from pathlib import Path

import pytest

# Ensure project root is importable for tests
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


from builders import build_gpx, build_tcx
from utils.formatting import set_locale


@pytest.fixture(autouse=True)
def _reset_locale():
    set_locale("en_US")
    yield
    set_locale("en_US")


@pytest.fixture
def tcx_bytes() -> bytes:
    return build_tcx(
        [
            (0, 0.0, 10.0, 150),
            (20, 50.0, None, None),
            (50, 140.0, 20.0, 160),
        ]
    )


@pytest.fixture
def gpx_bytes() -> bytes:
    return build_gpx(
        [
            (0, 45.0, 5.0, 100.0, 140),
            (30, 45.0, 5.0005, 102.0, 144),
            (65, 45.0, 5.001, 101.0, 150),
        ]
    )
