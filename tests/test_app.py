import io

import pyperclip
import pytest

from emoji_messenger import app
from emoji_messenger.app import (
    COPIED,
    COPY_FAILED,
    DECODE,
    ENCODE,
    NOTHING_TO_COPY,
    PLACEHOLDER,
    ClipboardUnavailable,
    auto_direction,
    copy_result,
    render,
    run_cli,
)
from emoji_messenger.codec import CodecCondition, decode, encode


def test_render_success_passes_payload_through():
    assert render(encode("hi"), ENCODE) == "😆😉"
    assert render(decode("😆😉"), DECODE) == "hi"


def test_render_conditions():
    assert render(encode(""), ENCODE) == app.MESSAGES[(ENCODE, CodecCondition.EMPTY_INPUT)]
    assert render(decode(""), DECODE) == app.MESSAGES[(DECODE, CodecCondition.EMPTY_INPUT)]
    assert "No supported characters" in render(encode("@#$"), ENCODE)
    assert "Could not decode" in render(decode("🦄"), DECODE)
    for direction, text in [(ENCODE, ""), (ENCODE, "@"), (DECODE, ""), (DECODE, "x")]:
        res = app.run_codec(text, direction)
        assert render(res, direction).startswith(app.WARNING_PREFIX)


def test_run_codec_rejects_unknown_direction():
    with pytest.raises(ValueError):
        app.run_codec("hi", "sideways")


def test_auto_direction():
    assert auto_direction("hello") == ENCODE
    assert auto_direction("😆😉\n") == DECODE


def test_copy_result_success():
    copied = []
    assert copy_result("😆😉", copied.append) == COPIED
    assert copied == ["😆😉"]


@pytest.mark.parametrize("text", ["", PLACEHOLDER, app.MESSAGES[(ENCODE, CodecCondition.EMPTY_INPUT)]])
def test_copy_result_refuses_non_results(text):
    copied = []
    assert copy_result(text, copied.append) == NOTHING_TO_COPY
    assert copied == []


def test_copy_result_failure_is_a_notice():
    def broken(text):
        raise ClipboardUnavailable("no display")

    assert copy_result("😆😉", broken) == COPY_FAILED


def test_system_clipboard_wraps_pyperclip_errors(monkeypatch):
    def fail(text):
        raise pyperclip.PyperclipException("no copy mechanism")

    monkeypatch.setattr(pyperclip, "copy", fail)
    with pytest.raises(ClipboardUnavailable):
        app.system_clipboard_copy("x")


def test_cli_encode_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Hi!\n"))
    assert run_cli(["--encode"]) == 0
    assert capsys.readouterr().out == "😆😉❗\n"


def test_cli_decode_files(tmp_path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_text(encode("cat 2024!").data + "\n", encoding="utf-8")
    assert run_cli(["--decode", "--in", str(src), "--out", str(dst)]) == 0
    assert dst.read_text(encoding="utf-8") == "cat 2024!"


def test_cli_condition_exits_2(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("@#$"))
    assert run_cli(["--encode"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "No supported characters" in captured.err


def test_cli_auto(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("😆😉\n"))
    assert run_cli(["--auto"]) == 0
    assert capsys.readouterr().out == "hi\n"


def test_cli_copy(monkeypatch, capsys):
    copied = []
    monkeypatch.setattr("sys.stdin", io.StringIO("hi"))
    assert run_cli(["--encode", "--copy"], copy=copied.append) == 0
    assert copied == ["😆😉"]
    assert COPIED in capsys.readouterr().err


def test_cli_copy_failure_keeps_exit_code(monkeypatch, capsys):
    def broken(text):
        raise ClipboardUnavailable("no display")

    monkeypatch.setattr("sys.stdin", io.StringIO("hi"))
    assert run_cli(["--encode", "--copy"], copy=broken) == 0
    captured = capsys.readouterr()
    assert captured.out == "😆😉\n"
    assert COPY_FAILED in captured.err


def test_cli_without_direction_launches_gui(monkeypatch):
    launched = []
    monkeypatch.setattr(app, "launch_gui", lambda: launched.append(True))
    assert run_cli([]) == 0
    assert launched == [True]


def test_cli_rejects_conflicting_flags():
    with pytest.raises(SystemExit):
        run_cli(["--encode", "--decode"])
