# Tests import the package as `src.nnkit`; keep the repository root importable.
import sys
from pathlib import Path

ROOT = str(Path(__file__).parent)
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
