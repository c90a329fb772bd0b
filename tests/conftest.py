"""Pytest configuration for the mini_html_fuzz test suite.

Hypothesis profiles:
- dev: local development (200 examples)
- ci: CI runs (50 examples, derandomized)

Profile selection: HYPOTHESIS_PROFILE env var, else "ci" when CI=true, else "dev".
"""

import os
import sys
import textwrap

import pytest
from hypothesis import settings

settings.register_profile("dev", max_examples=200, deadline=None)
settings.register_profile("ci", max_examples=50, deadline=None, derandomize=True, print_blob=True)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit:
        return explicit
    if os.environ.get("CI", "").lower() == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())

SEED = '<html a="value">...</html>'


@pytest.fixture
def seed() -> str:
    return SEED


@pytest.fixture
def make_target_script(tmp_path):
    """Write a small Python target into tmp_path and return (command, workdir).

    The command runs the script with the current interpreter through the shell.
    """

    def _make(body: str, name: str = "target.py"):
        script = tmp_path / name
        script.write_text(textwrap.dedent(body), encoding="utf-8")
        command = f'"{sys.executable}" {name}'
        return command, str(tmp_path)

    return _make
