"""Root conftest.py: make the local packages importable and keep tests offline."""
import os
import sys

# Insert the project root at the beginning of sys.path so that the local
# backend/ and modeldex/ directories take precedence over installed copies.
_project_root = os.path.dirname(os.path.abspath(__file__))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

# Must be set before backend.config is imported anywhere.
os.environ.setdefault("MODELDEX_RATE_LIMIT_ENABLED", "false")
