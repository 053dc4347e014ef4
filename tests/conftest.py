"""
Pytest configuration and fixtures.
"""

from pathlib import Path

import pytest


SAMPLE_CONFIG = """\
# Sample configuration
worker_processes 4;

events {}

server a b c {
    listen 13;   # trailing comment
}

server {
    listen 12 {
        a {
            b {
                lfjadsf aldsfj;
            }
        }
    }

    location / {
        index index.html;
        allowed_methods GET POST;
    }
}
"""


@pytest.fixture
def sample_config() -> str:
    """Well-formed configuration exercising nesting and comments."""
    return SAMPLE_CONFIG


@pytest.fixture
def config_path(tmp_path: Path, sample_config: str) -> Path:
    """Sample configuration written to a temporary file."""
    path = tmp_path / "nginx.conf"
    path.write_text(sample_config)
    return path
