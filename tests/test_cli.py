import logging
import os
import sys

import pytest

# Add the project root to sys.path to resolve module imports correctly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sqidcodec.cli import main
from sqidcodec.config import Config


@pytest.fixture(autouse=True)
def reset_logger():
    """Drops handlers the CLI attaches so each test starts from a clean logger."""
    yield
    logger = logging.getLogger("sqidcodec")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_encode_command(capsys):
    assert main(["encode", "1", "2", "3"]) == 0
    assert capsys.readouterr().out == "86Rf07\n"


def test_decode_command(capsys):
    assert main(["decode", "86Rf07"]) == 0
    assert capsys.readouterr().out == "1 2 3\n"


def test_decode_foreign_id_prints_nothing(capsys):
    assert main(["decode", "86Rf07*"]) == 0
    assert capsys.readouterr().out == "\n"


def test_min_length_option(capsys):
    assert main(["--min-length", "10", "encode", "1"]) == 0
    id_ = capsys.readouterr().out.strip()
    assert len(id_) == 10

    assert main(["--min-length", "10", "decode", id_]) == 0
    assert capsys.readouterr().out == "1\n"


def test_invalid_alphabet_exits_with_error(capsys):
    assert main(["--alphabet", "aab", "encode", "1"]) == 2
    assert "unique characters" in capsys.readouterr().err


def test_negative_number_is_a_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        main(["encode", "-1"])
    assert exc_info.value.code == 2


def test_log_file_option(tmp_path, capsys):
    log_file = tmp_path / "sqidcodec.log"
    assert main(["--verbose", "--log-file", str(log_file), "encode", "5"]) == 0
    assert capsys.readouterr().out.strip()
    assert "Sqids configured" in log_file.read_text()


def test_invalid_log_level_exits_with_error(monkeypatch, capsys):
    monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")
    assert main(["encode", "1"]) == 2
    assert "SQIDS_LOG_LEVEL" in capsys.readouterr().err


def test_verbose_ignores_configured_log_level(monkeypatch, capsys):
    monkeypatch.setattr(Config, "LOG_LEVEL", "LOUD")
    assert main(["--verbose", "encode", "1"]) == 0
    assert capsys.readouterr().out == "Uk\n"
