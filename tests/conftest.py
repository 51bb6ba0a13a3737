import pytest

from mock_kata.constants import EnvVars


@pytest.fixture(autouse=True)
def _isolate_kata_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer MOCK_KATA_* variables out of the tests.

    Tests that exercise environment overrides set the variables they need
    explicitly.
    """
    for name in (EnvVars.ACCEPTED_FORMATS, EnvVars.MAX_AGE_MONTHS, EnvVars.CATALOG):
        monkeypatch.delenv(name, raising=False)
