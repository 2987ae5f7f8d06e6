import sys
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

import pytest

from abnt_references.formatter import ReferenceFormatter


@pytest.fixture()
def fixed_formatter() -> ReferenceFormatter:
    """Formatter whose clock is pinned so website defaults are predictable."""

    return ReferenceFormatter(today=lambda: date(2024, 1, 1))
