import json

import pytest

from copycat import main as cli
from copycat.clipboard import ClipboardUnavailableError

from conftest import FakeClipboard


@pytest.fixture
def fake_clipboard(monkeypatch):
    clipboard = FakeClipboard()
    monkeypatch.setattr("copycat.app.get_clipboard", lambda: clipboard)
    return clipboard


@pytest.fixture
def history(history_path):
    rows = [
        {"id": 30, "content": "third entry " + "x" * 60, "timestamp": 30, "favorite": False},
        {"id": 20, "content": "second", "timestamp": 20, "favorite": True},
        {"id": 10, "content": "first", "timestamp": 10, "favorite": False},
    ]
    history_path.write_text(json.dumps(rows))
    return history_path


def _run(history, *args):
    return cli.main(["--history-file", str(history), *args])


def _contents(history):
    return [row["content"] for row in json.loads(history.read_text())]


def test_list(history, fake_clipboard, capsys):
    assert _run(history, "--list") == 0

    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("  [30] third entry ")
    assert out[0].split(" (")[0].endswith("...")
    assert out[1].startswith("★ [20] second (")
    assert out[-1] == "Total entries: 3/1000"


def test_list_with_filters(history, fake_clipboard, capsys):
    assert _run(history, "--list", "--search", "SEC", "--favorites") == 0

    out = capsys.readouterr().out.splitlines()
    assert len(out) == 2
    assert out[0].startswith("★ [20] second")


def test_list_empty(tmp_path, fake_clipboard, capsys):
    assert _run(tmp_path / "none.json", "--list") == 0

    assert capsys.readouterr().out.splitlines()[0] == "No clipboard entries found"


def test_copy(history, fake_clipboard):
    assert _run(history, "--copy", "10") == 0

    assert fake_clipboard.writes == ["first"]


def test_copy_unknown_id(history, fake_clipboard):
    assert _run(history, "--copy", "99") == 0

    assert fake_clipboard.writes == []


def test_delete(history, fake_clipboard):
    assert _run(history, "--delete", "20") == 0

    assert _contents(history) == ["third entry " + "x" * 60, "first"]


def test_toggle_favorite(history, fake_clipboard):
    assert _run(history, "--toggle-favorite", "10") == 0

    assert json.loads(history.read_text())[2]["favorite"] is True


def test_clear_non_favorites(history, fake_clipboard):
    assert _run(history, "--clear-non-favorites") == 0

    assert _contents(history) == ["second"]


def test_clear(history, fake_clipboard):
    assert _run(history, "--clear") == 0

    assert _contents(history) == []


@pytest.fixture
def no_clipboard(monkeypatch):
    calls = []

    def unavailable():
        calls.append(1)
        raise ClipboardUnavailableError("no clipboard tool")

    monkeypatch.setattr("copycat.app.get_clipboard", unavailable)
    return calls


@pytest.mark.parametrize("args", [
    ("--list",),
    ("--delete", "20"),
    ("--toggle-favorite", "10"),
    ("--clear-non-favorites",),
])
def test_history_commands_work_without_clipboard(history, no_clipboard, args):
    assert _run(history, *args) == 0
    assert no_clipboard == []


@pytest.mark.parametrize("args", [("--copy", "10"), ()])
def test_clipboard_unavailable_exits_1(history, no_clipboard, args):
    assert _run(history, *args) == 1
    assert no_clipboard == [1]


def test_bad_max_history(history, fake_clipboard):
    assert _run(history, "--max-history", "0", "--list") == 2
