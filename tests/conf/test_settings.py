from pathlib import Path

import pytest
from pydantic import ValidationError


def _write(tmp_path: Path, contents: str, name: str = 'settings.yml') -> Path:
    filepath = tmp_path / name
    filepath.write_text(contents)
    return filepath


def test_defaults() -> None:
    from tagcodec.conf.settings import CodecSettings
    from tagcodec.serialization.consts import DEFAULT_MAX_INPUT_BYTES
    settings = CodecSettings()
    assert settings.MAX_INPUT_BYTES == DEFAULT_MAX_INPUT_BYTES == 1024 * 1024
    assert settings.STRICT_SEQUENCE_LENGTH is False


def test_from_yaml(tmp_path: Path) -> None:
    from tagcodec.conf.settings import CodecSettings
    filepath = _write(tmp_path, 'MAX_INPUT_BYTES: 2048\nSTRICT_SEQUENCE_LENGTH: true\n')
    settings = CodecSettings.from_yaml(filepath=filepath)
    assert settings.MAX_INPUT_BYTES == 2048
    assert settings.STRICT_SEQUENCE_LENGTH is True


def test_empty_yaml_uses_defaults(tmp_path: Path) -> None:
    from tagcodec.conf.settings import CodecSettings
    filepath = _write(tmp_path, '')
    assert CodecSettings.from_yaml(filepath=filepath) == CodecSettings()


def test_invalid_yaml_contents(tmp_path: Path) -> None:
    from tagcodec.conf.settings import CodecSettings
    with pytest.raises(ValueError, match='cannot be parsed as a dictionary'):
        CodecSettings.from_yaml(filepath=_write(tmp_path, '- 1\n- 2\n'))
    with pytest.raises(ValueError, match='is not a file'):
        CodecSettings.from_yaml(filepath=tmp_path / 'missing.yml')


def test_validation(tmp_path: Path) -> None:
    from tagcodec.conf.settings import CodecSettings
    with pytest.raises(ValidationError):
        CodecSettings.from_yaml(filepath=_write(tmp_path, 'UNKNOWN_SETTING: 1\n'))
    with pytest.raises(ValidationError):
        CodecSettings(MAX_INPUT_BYTES=0)
    settings = CodecSettings()
    with pytest.raises(ValidationError):
        settings.STRICT_SEQUENCE_LENGTH = True  # type: ignore[misc]


def test_global_settings_without_env() -> None:
    from tagcodec.conf.get_settings import get_global_settings, get_settings_source
    from tagcodec.conf.settings import CodecSettings
    settings = get_global_settings()
    assert settings == CodecSettings()
    assert get_settings_source() is None
    assert get_global_settings() is settings


def test_global_settings_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    from tagcodec.conf.get_settings import CONFIG_YAML_ENV_VAR, get_global_settings, get_settings_source
    filepath = _write(tmp_path, 'STRICT_SEQUENCE_LENGTH: true\n')
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(filepath))
    settings = get_global_settings()
    assert settings.STRICT_SEQUENCE_LENGTH is True
    assert get_settings_source() == str(filepath)

    other_filepath = _write(tmp_path, 'STRICT_SEQUENCE_LENGTH: false\n', name='other.yml')
    monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(other_filepath))
    with pytest.raises(Exception, match='different file'):
        get_global_settings()
