"""Pytest configuration and shared fixtures for the blockdown test suite."""

import os
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import cleanup_test_dir, create_test_temp_dir

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def nested_document_html() -> str:
    """Provide hand-formatted HTML mixing every block construct.

    Returns
    -------
    str
        Indented HTML with lists, quotes, code and inline formatting.

    """
    return """
    <html>
      <head><title></title></head>
      <body>
        <h1>Release notes</h1>
        <p>This release is <em>mostly</em> fixes.</p>
        <ul>
          <li>Parser
            <ul>
              <li>Faster <code>tokenize()</code></li>
            </ul>
          </li>
          <li>Docs
            <blockquote>Now with examples</blockquote>
          </li>
        </ul>
        <pre><code class="lang-python">print("hi")</code></pre>
        <form><input name="q"><button>Go</button></form>
      </body>
    </html>
    """
