"""Root conftest - lets the tests run from a source checkout without installing."""
import sys
from pathlib import Path

_parent = Path(__file__).resolve().parent.parent

# Add repo root so `decision_matrix.X` works
if str(_parent) not in sys.path:
    sys.path.insert(0, str(_parent))
