import io
import sys
import unittest
from contextlib import redirect_stdout
from io import StringIO
from pathlib import Path

import pytest
from structlog.testing import capture_logs

from tagcodec.cli import main

LISTING_JSON = (
    '{"list":["e621e1f8-c36c-495a-93fc-0c247a3e6e5f",[{"name":"Request 1"},{"name":"Request 2"}]]}'
)


class CliMainTest(unittest.TestCase):
    def test_init(self):
        # basically making sure importing works
        cli = main.CliManager()

        # Help method only prints on the screen
        # So just making sure it has no errors
        f = StringIO()
        with capture_logs():
            with redirect_stdout(f):
                cli.help()
        # Transforming prints str in array
        output = f.getvalue().strip().splitlines()

        self.assertTrue(len(output) >= 3)
        self.assertTrue(any('encode_samples' in line for line in output))
        self.assertTrue(any('decode' in line for line in output))


def _run(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr(sys, 'argv', ['tagcodec-cli', *args])
    return main.CliManager().execute_from_command_line()


def test_unknown_command(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(monkeypatch, 'foobar') == -1
    assert 'Unknown command: "foobar"' in capsys.readouterr().out


def test_encode_samples(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(monkeypatch, 'encode_samples', '--disable-logs') == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        '{"empty":true}',
        'Empty()',
        '{"editing":"headers"}',
        "Editing(subview=<EditSubview.HEADERS: 'headers'>)",
        '{"exchangeHistory":{"url":"wss://stocks.websocket.demo.cleora.app","messages":["connected","disconnected"]}}',
        "ExchangeHistory(connection=Connection(url=URL('wss://stocks.websocket.demo.cleora.app'), "
        "messages=('connected', 'disconnected')))",
        LISTING_JSON,
        "Listing(selected_id=UUID('e621e1f8-c36c-495a-93fc-0c247a3e6e5f'), "
        "expanded_items=(Item(name='Request 1'), Item(name='Request 2')))",
    ]


def test_decode_file(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    filepath = tmp_path / 'state.json'
    filepath.write_text('{"editing": "body"}')
    assert _run(monkeypatch, 'decode', '--disable-logs', str(filepath)) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Editing(subview=<EditSubview.BODY: 'body'>)", '{"editing":"body"}']


def test_decode_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, 'stdin', io.TextIOWrapper(io.BytesIO(LISTING_JSON.encode('utf-8'))))
    assert _run(monkeypatch, 'decode', '--disable-logs') == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == LISTING_JSON


@pytest.mark.parametrize('contents', [
    '{}',
    '{"empty": true, "editing": "body"}',
    '{"unknown": true}',
    '{"list": ["e621e1f8-c36c-495a-93fc-0c247a3e6e5f"]}',
    '{"editing": ',
    pytest.param('{"empty": ' + '[' * 200000 + ']' * 200000 + '}', id='deep-nesting'),
    pytest.param('{"empty": ' + '1' * 5000 + '}', id='too-many-digits'),
    '{"editing": "body", "editing": "query"}',
])
def test_decode_failure(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
    contents: str,
) -> None:
    filepath = tmp_path / 'state.json'
    filepath.write_text(contents)
    assert _run(monkeypatch, 'decode', '--disable-logs', str(filepath)) == 1
    assert capsys.readouterr().out == ''


def test_decode_with_config_yaml(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
) -> None:
    filepath = tmp_path / 'state.json'
    filepath.write_text('{"list": ["e621e1f8-c36c-495a-93fc-0c247a3e6e5f", [], "extra"]}')
    config_filepath = tmp_path / 'settings.yml'
    config_filepath.write_text('STRICT_SEQUENCE_LENGTH: true\n')

    assert _run(monkeypatch, 'decode', '--disable-logs', str(filepath)) == 0
    assert _run(monkeypatch, 'decode', '--disable-logs', '--config-yaml', str(config_filepath), str(filepath)) == 1

    small_config_filepath = tmp_path / 'small.yml'
    small_config_filepath.write_text('MAX_INPUT_BYTES: 8\n')
    assert _run(monkeypatch, 'decode', '--disable-logs', '--config-yaml', str(small_config_filepath),
                str(filepath)) == 1
    capsys.readouterr()


if __name__ == '__main__':
    unittest.main()
