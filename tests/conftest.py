"""
Pytest Configuration and Fixtures

This module provides:
- Project root on sys.path
- A fixed clock so timestamps and relative ages are deterministic
- Shared store, session and Flask client fixtures
- Test category markers
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tests.test_config import CONFIG, TEST_DATA, FakeClock, get_seed_ideas


# =============================================================================
# SHARED FIXTURES
# =============================================================================

@pytest.fixture
def clock():
    """A clock frozen at CONFIG['fixed_now']."""
    return FakeClock(CONFIG["fixed_now"])


@pytest.fixture
def store(clock):
    """An empty in-memory store using the fixed clock."""
    from idealog.store.memory import MemoryIdeaStore
    return MemoryIdeaStore(clock=clock)


@pytest.fixture
def seeded_store(store, clock):
    """
    Store holding TEST_DATA['seed_ideas'], created a few minutes apart
    (first = oldest), with TEST_DATA['archived_titles'] archived.

    The clock is left at the creation time of the last idea.
    """
    clock.advance(minutes=-CONFIG["seed_step_minutes"] * len(TEST_DATA["seed_ideas"]))
    for fields in get_seed_ideas():
        clock.advance(minutes=CONFIG["seed_step_minutes"])
        idea_id = store.create(fields)
        if fields["title"] in TEST_DATA["archived_titles"]:
            store.archive(idea_id, True)
    return store


@pytest.fixture
def ids_by_title(seeded_store):
    """Map seed idea titles to their ids."""
    return {idea.title: idea.id for idea in seeded_store.all()}


@pytest.fixture
def session(clock):
    """An empty session using the fixed clock."""
    from idealog.actions import Session
    return Session.create(load_samples=False, clock=clock)


@pytest.fixture
def seeded_session(session, seeded_store):
    """Session whose store holds the seed ideas."""
    from idealog.forms.controller import FormController
    session.store = seeded_store
    session.form = FormController(seeded_store)
    return session


@pytest.fixture
def client(seeded_session):
    """Flask test client bound to the seeded session."""
    from web.app import app, reset_session
    app.config["TESTING"] = True
    reset_session(seeded_session)
    with app.test_client() as client:
        yield client
    reset_session(None)


# =============================================================================
# MARKERS FOR TEST CATEGORIES
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "config_validation: Configuration validation tests"
    )
    config.addinivalue_line(
        "markers", "cli_behavior: CLI interface tests"
    )
    config.addinivalue_line(
        "markers", "system_properties: End-to-end property tests"
    )
