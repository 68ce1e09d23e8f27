"""Pytest configuration and shared fixtures for the careerdoc test suite."""

import logging
import os

import pytest

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")
    config.addinivalue_line("markers", "docx: Tests that read DOCX output with python-docx")


RESUME_MARKDOWN = """# Jane Doe

Senior Software Engineer with **10 years** of *backend* experience.

## Experience

### Acme Corp

- Built **payment** services in Python
- Led a team of *five* engineers
* Cut latency by 40% & costs by 20%

---

## Skills

- Python, Go, `SQL`
- See [portfolio](https://example.com)
"""


@pytest.fixture
def resume_markdown() -> str:
    """Provide a realistic resume in the supported markdown dialect."""
    return RESUME_MARKDOWN


@pytest.fixture
def clean_env(monkeypatch):
    """Remove CAREERDOC_* variables so host settings cannot leak into tests."""
    for key in list(os.environ):
        if key.startswith("CAREERDOC_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def restore_logging():
    """Undo root logger changes made by the CLI's logging setup."""
    root = logging.getLogger()
    package = logging.getLogger("careerdoc")
    handlers, level, package_level = root.handlers[:], root.level, package.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    package.setLevel(package_level)
