import pytest

import firebase_app


@pytest.fixture
def dotenv_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(firebase_app, "load_dotenv", lambda: calls.append(True))
    return calls


@pytest.mark.parametrize("environment", [None, "development", "staging"])
def test_dotenv_is_loaded_outside_production(monkeypatch, dotenv_calls, environment):
    if environment is None:
        monkeypatch.delenv("ENVIRONMENT", raising=False)
    else:
        monkeypatch.setenv("ENVIRONMENT", environment)

    firebase_app.load_environment()

    assert dotenv_calls == [True]


def test_dotenv_is_skipped_in_production(monkeypatch, dotenv_calls):
    monkeypatch.setenv("ENVIRONMENT", "production")

    firebase_app.load_environment()

    assert dotenv_calls == []


def test_main_uses_the_shared_environment_loader():
    import main

    assert main.load_environment is firebase_app.load_environment
    assert not hasattr(main, "load_dotenv")
