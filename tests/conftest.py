"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from handlers import main` to work
when running tests, simulating the Lambda environment where code
is deployed from the src/ directory.
"""

import os
import sys
from pathlib import Path

import boto3
import pytest


def _ensure_paths_on_sys_path() -> None:
    """Add repository root AND src/ to sys.path if missing.

    The src/ directory is added to simulate Lambda's import behavior,
    where Code.from_asset("src") makes src/ the root of the package.
    """
    repo_root = Path(__file__).resolve().parents[1]
    src_root = repo_root / "src"

    # Add repo root first (for imports like infrastructure.*)
    root_str = str(repo_root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)

    # Add src/ for Lambda-style imports (from handlers import ...)
    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_paths_on_sys_path()

# Ensure boto3 has offline-friendly defaults so tests do not require AWS access.
os.environ.setdefault("AWS_REGION", "us-east-2")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-2")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")
os.environ.setdefault("AWS_SESSION_TOKEN", "test")
os.environ.setdefault("ENVIRONMENT", "dev")

# Create a default boto3 session so resources/clients do not error during import.
boto3.setup_default_session(region_name="us-east-2")


@pytest.fixture
def stored_item():
    """Raw item as the boto3 DynamoDB resource returns it."""
    from decimal import Decimal

    return {
        "pk": "USER#123",
        "sk": "PROFILE#123",
        "displayName": "Glenn",
        "foodieBucksAvailable": Decimal("50"),
        "foodieBucksUsed": Decimal("12"),
        "foodieBuckIncrement": Decimal("5"),
    }


@pytest.fixture
def make_event():
    """Build an HTTP API (payload 2.0) event."""
    import json

    def _build(method="GET", body=None, **extra):
        event = {
            "version": "2.0",
            "routeKey": "ANY /profile",
            "rawPath": "/profile",
            "requestContext": {"http": {"method": method, "path": "/profile"}},
            "isBase64Encoded": False,
        }
        if body is not None:
            event["body"] = body if isinstance(body, str) else json.dumps(body)
        event.update(extra)
        return event

    return _build
