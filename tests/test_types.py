import pytest

from tagcodec.types import URL


@pytest.mark.parametrize('value', [
    'wss://stocks.websocket.demo.cleora.app',
    'https://hathor.network/path?query=1#fragment',
    'http://127.0.0.1:8080',
])
def test_absolute_urls_are_kept_verbatim(value: str) -> None:
    url = URL(value)
    assert url == value
    assert str.__str__(url) == value


@pytest.mark.parametrize('value', ['', 'not a url', '/relative/path', 'stocks.websocket.demo.cleora.app', 'mailto:a'])
def test_relative_urls_are_rejected(value: str) -> None:
    with pytest.raises(ValueError):
        URL(value)


def test_non_str_is_rejected() -> None:
    with pytest.raises(TypeError):
        URL(b'wss://stocks.websocket.demo.cleora.app')  # type: ignore[arg-type]


def test_properties() -> None:
    url = URL('wss://stocks.websocket.demo.cleora.app:443/feed')
    assert url.scheme == 'wss'
    assert url.host == 'stocks.websocket.demo.cleora.app'
    assert repr(url) == "URL('wss://stocks.websocket.demo.cleora.app:443/feed')"
