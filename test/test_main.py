import io
import json
import logging

import pytest

from vme_decoder.decoder.record_formatter import RecordFormatter
from vme_decoder.main import main, run


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    # keep load_dotenv away from any .env in the working tree
    monkeypatch.chdir(tmp_path)


def test_run_reference_block(reference_words, reference_lines):
    out = io.StringIO()
    lines = [" ".join(f"0x{w:08x}" for w in reference_words)]
    count = run(lines, RecordFormatter(), out)

    assert count == 8
    assert out.getvalue().splitlines() == reference_lines


def test_main_with_arguments(capsys):
    assert main(["0x40010c07", "0x20000000"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "0x40010c07 module_header, module_id=0x01, module_setting=0x3, data_length=7 words",
        "0x20000000 unrecognized",
    ]


def test_main_reads_stdin(monkeypatch, capsys, reference_words, reference_lines):
    text = "\n".join(f"0x{w:08x}" for w in reference_words) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))

    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == reference_lines


def test_main_stops_at_bad_token(capsys):
    assert main(["0x0", "oops", "0x40010c07"]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["0x00000000 fill_word"]


def test_main_json_with_index(capsys):
    assert main(["--format", "json", "--index", "0x04800057"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"index": 0, "word": "0x04800057", "kind": "extended_ts", "high_stamp": 87}


def test_main_config_file(tmp_path, capsys):
    config_path = tmp_path / "decoder.yml"
    config_path.write_text("OUTPUT:\n  UNRECOGNIZED_LABEL: no mask matched\n", encoding="utf-8")

    assert main(["--config", str(config_path), "0x20000000"]) == 0
    assert capsys.readouterr().out == "0x20000000 no mask matched\n"


def test_main_missing_config_returns_error(tmp_path, capsys, caplog):
    with caplog.at_level(logging.ERROR, logger="VmeDecodeMain"):
        assert main(["--config", str(tmp_path / "missing.yml"), "0x0"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[ERROR]" in captured.err
    assert "Cannot read config file" in caplog.text


def test_main_invalid_log_level_returns_error(capsys):
    assert main(["--log-level", "LOUD", "0x0"]) == 2
    assert "[ERROR]" in capsys.readouterr().err
