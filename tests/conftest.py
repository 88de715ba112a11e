import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def lens_config():
    from lenscore.config import LensConfig

    return LensConfig()


@pytest.fixture
def engine(lens_config):
    from passlens.core.engine import PassLensEngine

    return PassLensEngine(lens_config)
