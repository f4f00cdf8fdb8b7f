import os

import pytest


@pytest.fixture(autouse=True)
def isolated_container(monkeypatch):
    """
    Fresh settings, repositories and mediator for every test.

    PYMEDIATOR_* variables from the developer's shell are removed so every
    test starts from the defaults.
    """
    from pymediator.configuration.container import reset_container
    from pymediator.configuration.settings import reset_settings

    for name in list(os.environ):
        if name.startswith("PYMEDIATOR_"):
            monkeypatch.delenv(name)

    reset_settings()
    reset_container()

    yield

    reset_settings()
    reset_container()


@pytest.fixture
def context():
    """Shared context for BDD steps"""
    return {}
