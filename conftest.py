"""
Global pytest configuration for test database toggling.

Usage:
- Default: reuse test DB across runs for speed.
- Override quickly via CLI:
    pytest --db-mode=recreate   # drop and re-create test DB
    pytest --db-mode=flush      # keep schema, flush data at session start
    pytest --db-mode=reuse      # reuse existing test DB (default)
- Or via env var (takes effect if CLI option omitted):
    PYTEST_DB_MODE=recreate pytest
"""

import os
import secrets

import pytest
from django.core.management import call_command


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--db-mode",
        action="store",
        default=os.getenv("PYTEST_DB_MODE", "reuse"),
        choices=["reuse", "recreate", "flush"],
        help=(
            "Test DB mode: 'reuse' (default), 'recreate' (drop & re-create), or "
            "'flush' (keep schema, clear data at session start)."
        ),
    )


def pytest_configure(config: pytest.Config) -> None:
    mode = config.getoption("--db-mode")

    if mode == "recreate":
        config.option.reuse_db = False
        config.option.create_db = True
    else:
        # reuse and flush both keep the schema
        config.option.reuse_db = True
        config.option.create_db = False


@pytest.fixture(scope="session", autouse=True)
def _maybe_flush_db(request: pytest.FixtureRequest, django_db_blocker) -> None:
    """Flush DB once at session start if --db-mode=flush."""
    mode = request.config.getoption("--db-mode")
    if mode != "flush":
        return

    with django_db_blocker.unblock():
        call_command("flush", verbosity=0, interactive=False)


@pytest.fixture
def superuser(db):
    """Superuser used to authenticate API tests."""
    from django.contrib.auth import get_user_model

    return get_user_model().objects.create_superuser(
        username="test_superuser",
        email="superuser@test.com",
        password=secrets.token_urlsafe(16),
    )


@pytest.fixture
def api_client(request, superuser):
    """
    DRF APIClient authenticated as a superuser.

    Tests marked with @pytest.mark.unauthenticated receive an anonymous client
    instead, to check that the API rejects them.
    """
    from rest_framework.test import APIClient

    client = APIClient()

    marker_names = {marker.name for marker in request.node.iter_markers()}
    if "unauthenticated" not in marker_names:
        client.force_authenticate(user=superuser)

    return client


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-categorize tests as unit or integration unless explicitly marked."""
    for item in items:
        marker_names = {marker.name for marker in item.iter_markers()}
        if "integration" in marker_names or "unit" in marker_names:
            continue

        is_integration = "test_api" in item.nodeid or "API" in str(item.cls) or "ViewSet" in str(item.cls)
        item.add_marker(pytest.mark.integration if is_integration else pytest.mark.unit)
