"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def session():
    """Provide a fresh Session awaiting its first operand."""
    from intcalc import Session

    return Session()


@pytest.fixture
def transcript():
    """Collect protocol lines written by run_session."""
    return []


@pytest.fixture
def boundary_strings():
    """Strings at and just beyond the signed 64-bit limits."""
    return {
        "max": "9223372036854775807",
        "min": "-9223372036854775808",
        "above_max": "9223372036854775808",
        "below_min": "-9223372036854775809",
    }
