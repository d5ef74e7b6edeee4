import pytest


@pytest.fixture(autouse=True)
def _reset_global_settings(monkeypatch: pytest.MonkeyPatch):
    from tagcodec.conf.get_settings import CONFIG_YAML_ENV_VAR, reset_global_settings
    monkeypatch.delenv(CONFIG_YAML_ENV_VAR, raising=False)
    reset_global_settings()
    yield
    reset_global_settings()
