"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def bind():
    """Match a token that is known to be valid."""
    from fantasticcal import require_operator

    return require_operator


@pytest.fixture
def operator_tokens():
    """One valid literal token per catalog operator, in catalog order."""
    return ["+", "-", "*", "/", "^2", "%", "V[3]", "!", "log[10]", "ln"]
