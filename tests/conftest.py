import os
import sys

import pytest

# Put the project root on sys.path so `fbi` and `fbidump` import without installing.
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _project_root)


@pytest.fixture
def sample_text() -> str:
    return (
        "// server settings\n"
        "name = demo;\n"
        "[server] {\n"
        "    host = localhost;\n"
        "    port = 8080;\n"
        "    /* nested\n"
        "       block */\n"
        "    [tls] { enabled = yes; }\n"
        "}\n"
        "[client] { retries = 3; }\n"
    )
