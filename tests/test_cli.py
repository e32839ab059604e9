from __future__ import annotations

import io

import pytest

from tenji.cli import main


def test_main_text_arguments(capsys):
    main(["KA", "SI"])
    captured = capsys.readouterr()
    assert captured.out == "o- o-\n-- oo\n-o -o\n"
    assert captured.err == ""


def test_main_glyphs(capsys):
    main(["KA", "--raised", "#", "--flat", "."])
    assert capsys.readouterr().out == "#.\n..\n.#\n"


def test_main_unicode(capsys):
    main(["-u", "KYO", "-"])
    assert capsys.readouterr().out == "⠈⠪⠒\n"


def test_main_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("KA\n\nN\n"))
    main(["--unicode"])
    assert capsys.readouterr().out == "⠡\n\n⠴\n"


def test_main_verbose(capsys):
    main(["-v", "GGYA", "N"])
    captured = capsys.readouterr()
    assert captured.err == "Converted 2 mora into 4 cells\n"
    assert len(captured.out.splitlines()) == 3


def test_main_invalid_token(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["KA", "X"])
    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "'X'" in captured.err


def test_main_invalid_glyphs(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["KA", "--raised", "o", "--flat", "o"])
    assert exc_info.value.code == 1
