# Path: tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for order_config

Provides common test fixtures used across all test modules.
"""

import logging
import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tests.fixtures.sample_data import MANIFEST_LINES, VALUES_LINES


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars(temp_dir):
    """Provide mock environment variables for testing."""
    env_vars = {
        'ORDER_CONFIG_ENVIRONMENT': 'test',
        'ORDER_CONFIG_DEBUG': 'true',
        'ORDER_CONFIG_MANIFEST_FILE': str(temp_dir / 'manifest.csv'),
        'ORDER_CONFIG_VALUES_FILE': str(temp_dir / 'cfgs.csv'),
        'ORDER_CONFIG_STRICT_LOAD': 'false',
        'ORDER_CONFIG_LOG_LEVEL': 'DEBUG',
        'ORDER_CONFIG_LOG_CONSOLE': 'false',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def reset_singletons():
    """Reset the ConfigLoader singleton between tests."""
    from order_config.config_loader import ConfigLoader

    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False


# ==============================================================================
# SAMPLE DATA FIXTURES
# ==============================================================================

@pytest.fixture
def manifest_lines():
    """Reference manifest table lines."""
    return list(MANIFEST_LINES)


@pytest.fixture
def values_lines():
    """Reference values table lines."""
    return list(VALUES_LINES)


@pytest.fixture
def service(manifest_lines, values_lines):
    """ConfigService built from the reference tables."""
    from order_config import ConfigService

    return ConfigService(manifest_lines, values_lines)


# ==============================================================================
# FILE CREATION FIXTURES
# ==============================================================================

@pytest.fixture
def table_files(temp_dir, manifest_lines, values_lines):
    """Write the reference tables to disk and return their paths."""
    manifest_path = temp_dir / 'manifest.csv'
    values_path = temp_dir / 'cfgs.csv'
    manifest_path.write_text('\n'.join(manifest_lines) + '\n', encoding='utf-8')
    values_path.write_text('\n'.join(values_lines) + '\n', encoding='utf-8')
    return manifest_path, values_path


# ==============================================================================
# LOGGING FIXTURES
# ==============================================================================

@pytest.fixture
def restore_logging():
    """Restore root logger handlers replaced by setup_ipo_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield

    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
