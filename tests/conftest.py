# tests/conftest.py
"""
Pytest configuration for the push notification pipeline tests.

- Ensures that the project root is added to sys.path
  so that `import push_notifications.*` works without installing the package.
- Pins the notification environment variables to their defaults
  and clears the cached settings between tests.
"""

import os
import sys
from pathlib import Path

import pytest


def _ensure_project_root_in_sys_path() -> None:
    # This file is located at: <project>/tests/conftest.py
    # parents[1] -> <project>/
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)

    if project_root_str not in sys.path:
        # Insert at the beginning so it has priority over site-packages, etc.
        sys.path.insert(0, project_root_str)


def _ensure_test_env_vars() -> None:
    """
    Set the notification environment variables used in tests.

    Tests rely on the default audit logger name and urgent log level.
    """
    os.environ.setdefault("NOTIFICATIONS_AUDIT_LOGGER", "push_notifications.audit")
    os.environ.setdefault("NOTIFICATIONS_URGENT_LOG_LEVEL", "WARNING")


_ensure_project_root_in_sys_path()
_ensure_test_env_vars()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    from push_notifications.notifications.config import get_notification_settings

    get_notification_settings.cache_clear()
    yield
    get_notification_settings.cache_clear()
