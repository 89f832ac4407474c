import os
import sys

import pytest

# The modules live at the repository root, not in an installed package.
REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)


@pytest.fixture
def sample_source() -> str:
    """A small program exercising every statement form."""
    return (
        "// sample\n"
        "const limit = 10;\n"
        "let a = 1, b\n"
        "function add(x, y) {\n"
        "  return + x y;\n"
        "}\n"
        "{ * a limit }\n"
        "add\n"
    )
