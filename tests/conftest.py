from types import SimpleNamespace

import pytest


@pytest.fixture
def clean_env(tmp_path, monkeypatch):
    """Run from an empty directory with neither setting in the environment.

    setenv first so teardown also removes values merged in from env files.
    """
    monkeypatch.chdir(tmp_path)
    for name in ("OPENAI_API_KEY", "BASE_URL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return tmp_path


class FakeCompletions:
    def __init__(self, owner):
        self._owner = owner

    async def create(self, **kwargs):
        self._owner.calls.append(kwargs)
        if self._owner.error is not None:
            raise self._owner.error
        return self._owner.result


class FakeOpenAI:
    """Stands in for AsyncOpenAI; records constructor args and submitted requests."""

    def __init__(self):
        self.instances = []
        self.calls = []
        self.result = SimpleNamespace(choices=[])
        self.error = None
        self.closed = 0

    def respond(self, *texts):
        self.result = SimpleNamespace(choices=[SimpleNamespace(text=t, index=i) for i, t in enumerate(texts)])

    def __call__(self, api_key=None, base_url=None, **kwargs):
        owner = self
        owner.instances.append({"api_key": api_key, "base_url": base_url})

        async def _close():
            owner.closed += 1

        return SimpleNamespace(completions=FakeCompletions(owner), close=_close)


@pytest.fixture
def fake_openai(monkeypatch):
    fake = FakeOpenAI()
    monkeypatch.setattr("completion_cli.openai_client.AsyncOpenAI", fake)
    return fake
