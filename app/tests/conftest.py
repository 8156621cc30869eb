import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection
# regardless of the invocation directory.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from infrastructure.services.providers import (  # noqa: E402
    get_default_translator,
    get_locale_registry,
    get_settings,
)


@pytest.fixture
def clear_provider_caches():
    """Reset application-scoped singletons before and after a test."""
    providers = (get_settings, get_locale_registry, get_default_translator)
    for provider in providers:
        provider.cache_clear()
    yield
    for provider in providers:
        provider.cache_clear()
