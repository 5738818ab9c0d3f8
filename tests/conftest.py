import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def sample_path() -> Path:
    return DATA_DIR / "sample.ged"


@pytest.fixture
def sample_text(sample_path: Path) -> str:
    # Decode bytes directly so the file's CRLF line endings reach the parser.
    return sample_path.read_bytes().decode("utf-8")
