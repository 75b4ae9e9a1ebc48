import pytest

from wordcount import cli


def test_cli_success(tmp_path, capsys):
    path = tmp_path / "sample.txt"
    path.write_text("hello world\nsecond line here\n", encoding="utf-8")

    code = cli.main(["wordcount", str(path)])

    captured = capsys.readouterr()
    assert code == 0
    assert captured.out == f"{path}: 2 lines, 5 words, 27 bytes\n"
    assert captured.err == ""


def test_cli_missing_argument_prints_usage(capsys, monkeypatch):
    def _should_not_run(*args, **kwargs):
        raise AssertionError("no file should be counted")

    monkeypatch.setattr(cli, "count_file", _should_not_run)

    code = cli.main(["wc-prog"])

    captured = capsys.readouterr()
    assert code == 2
    assert captured.out == ""
    assert captured.err == "Usage: wc-prog <filename>\n"


def test_cli_uses_sys_argv_by_default(tmp_path, capsys, monkeypatch):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    monkeypatch.setattr(cli.sys, "argv", ["prog", str(path), "ignored"])

    assert cli.main() == 0
    assert capsys.readouterr().out == f"{path}: 0 lines, 0 words, 0 bytes\n"


def test_cli_open_error(capsys):
    code = cli.main(["wordcount", "/no/such/file"])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert captured.err == (
        "Error processing file /no/such/file: No such file or directory\n"
    )


def test_cli_decode_error(tmp_path, capsys):
    path = tmp_path / "data.bin"
    path.write_bytes(b"text\n\x80\x81\x82\n")

    code = cli.main(["wordcount", str(path)])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert captured.err.startswith(f"Error processing file {path}: line 2 is not valid utf-8")


@pytest.mark.parametrize(
    "raw,message",
    [
        ("{not json", "WORDCOUNT_CONFIG_JSON is not valid JSON"),
        ('{"encoding": "klingon-8"}', "unknown encoding 'klingon-8'"),
        ('{"encoding": "rot13"}', "'rot13' is not a text encoding"),
    ],
)
def test_cli_reports_config_errors(tmp_path, capsys, monkeypatch, raw, message):
    path = tmp_path / "sample.txt"
    path.write_text("x\n", encoding="utf-8")
    monkeypatch.setenv("WORDCOUNT_CONFIG_JSON", raw)

    code = cli.main(["wordcount", str(path)])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert captured.err.startswith(f"Error processing file {path}: {message}")
