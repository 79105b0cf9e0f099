"""Tests for the fastdeck and fastdeck-data command line tools"""

import pytest

from fastdeck import cli, data_cli
from fastdeck.config import TRIGGERS_FILE
from fastdeck.utils.logging import FastDeckLogger

DECK = """\
------- FAST TOWER PROPERTY FILE ----------------------------------------------
Tower file for a test turbine.
    2       NTwInpSt    - Number of input stations to specify tower geometry
HtFract     TMassDen
(-)         (kg/m)
0.000       5590.87
1.000       2932.52
OutList             - The next line(s) contains a list of output parameters.
"TwHt1TPxi"  tower gage 1
END
"""


@pytest.fixture
def deck(tmp_path):
    path = tmp_path / "Tower.dat"
    path.write_text(DECK, encoding="latin-1")
    return path


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    FastDeckLogger.cleanup()


class TestFastdeckCli:
    def test_summary(self, deck, capsys):
        assert cli.main([str(deck), "--hdr-lines", "2", "--no-log", "--outlist"]) == 0
        out = capsys.readouterr().out

        assert "Tower file for a test turbine." in out
        assert "1 parameters" in out
        assert "[TowProp] 2 rows x 2 columns" in out
        assert "OutList: 1 variables" in out
        assert '"TwHt1TPxi"  tower gage 1' in out

    def test_full_tables(self, deck, capsys):
        assert cli.main([str(deck), "--hdr-lines", "2", "--no-log", "--tables"]) == 0
        out = capsys.readouterr().out
        assert "[TowProp] numeric, 2 x 2" in out
        assert "1  2932.52" in out

    def test_get_parameter(self, deck, capsys):
        assert cli.main([str(deck), "--hdr-lines", "2", "--no-log", "--get", "ntwinpst"]) == 0
        assert "ntwinpst = 2" in capsys.readouterr().out

    def test_get_missing_parameter(self, deck):
        assert cli.main([str(deck), "--hdr-lines", "2", "--no-log", "--get", "TipRad"]) == 1

    def test_missing_file(self, tmp_path, capsys):
        assert cli.main([str(tmp_path / "nope.fst")]) == 1
        assert "does not exist" in capsys.readouterr().out

    def test_unresolved_table_size(self, tmp_path):
        path = tmp_path / "Broken.dat"
        path.write_text("HtFract  TMassDen\n(-) (kg/m)\n0.0 1.0\n")
        assert cli.main([str(path), "--no-log"]) == 1

    def test_negative_header_count_is_a_usage_error(self, deck, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main([str(deck), "--hdr-lines", "-1", "--no-log"])
        assert exc.value.code == 2
        assert "must not be negative" in capsys.readouterr().err

    def test_non_integer_header_count_is_a_usage_error(self, deck, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main([str(deck), "--hdr-lines", "two", "--no-log"])
        assert exc.value.code == 2
        assert "whole number" in capsys.readouterr().err

    def test_writes_log_file(self, deck, capsys):
        assert cli.main([str(deck), "--hdr-lines", "2"]) == 0
        assert "Log file:" in capsys.readouterr().out
        assert list((deck.parent / "logs").glob("fastdeck_Tower_*.log"))


class TestDataCli:
    @pytest.fixture(autouse=True)
    def user_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FASTDECK_DATA_DIR", str(tmp_path / "user"))
        monkeypatch.setattr("fastdeck.config._data_manager", None)
        return tmp_path / "user"

    def test_no_command(self, capsys):
        assert data_cli.main([]) == 1

    def test_path(self, user_dir, capsys):
        assert data_cli.main(["path"]) == 0
        assert str(user_dir) in capsys.readouterr().out

    def test_triggers(self, capsys):
        assert data_cli.main(["triggers"]) == 0
        out = capsys.readouterr().out
        assert '"HtFract"' in out
        assert "rows from NTwInpSt" in out

    def test_copy_then_info_then_reset(self, user_dir, capsys):
        assert data_cli.main(["copy", TRIGGERS_FILE]) == 0
        assert (user_dir / TRIGGERS_FILE).exists()
        assert data_cli.main(["copy", TRIGGERS_FILE]) == 1

        assert data_cli.main(["info"]) == 0
        assert "(overridden)" in capsys.readouterr().out

        assert data_cli.main(["reset", "--all"]) == 0
        assert not (user_dir / TRIGGERS_FILE).exists()

    def test_reset_needs_target(self):
        assert data_cli.main(["reset"]) == 1
