"""Tests for the numeric, mixed, file list and OutList parsers"""

import warnings

import pytest

from fastdeck import NumberCell, TextCell
from fastdeck.parsers.cursor import LineCursor
from fastdeck.parsers.table_parsers import (
    parse_file_list,
    parse_mixed_table,
    parse_numeric_table,
    parse_output_list,
)

TOWER_HEADER = "HtFract     TMassDen    TwFAStif    TwSSStif"
TOWER_BODY = """\
(-)         (kg/m)      (Nm^2)      (Nm^2)
0.000       5590.87     6.14E+11    6.14E+11
0.200       4998.84     4.93E+11    4.93E+11
0.400       4376.65     3.83E+11    3.83E+11
0.600       3829.62     2.89E+11    2.89E+11
0.800       3318.61     2.12E+11    2.12E+11
1.000       2932.52     1.51E+11    1.51E+11
"""


def cursor_for(text: str) -> LineCursor:
    return LineCursor(text.splitlines())


class TestNumericTable:
    """Tower/blade/DLL style float tables"""

    def test_reads_requested_rows(self):
        """Six rows requested, six well-formed rows available"""
        table = parse_numeric_table(TOWER_HEADER, cursor_for(TOWER_BODY), 6)

        assert table.headers == ["HtFract", "TMassDen", "TwFAStif", "TwSSStif"]
        assert table.n_rows == 6
        assert table.n_cols == 4
        assert all(len(row) == 4 for row in table.rows)
        assert table.rows[1] == [0.2, 4998.84, 4.93e11, 4.93e11]
        assert table.is_complete is True

    def test_units_line_is_skipped(self):
        table = parse_numeric_table(TOWER_HEADER, cursor_for(TOWER_BODY), 1)
        assert table.rows == [[0.0, 5590.87, 6.14e11, 6.14e11]]

    def test_stops_at_end_of_input(self):
        """Fewer lines than requested gives a short table, no error"""
        short = "\n".join(TOWER_BODY.splitlines()[:4])
        table = parse_numeric_table(TOWER_HEADER, cursor_for(short), 6)

        assert table.n_rows == 3
        assert table.requested_rows == 6
        assert table.is_complete is False

    def test_stops_at_non_numeric_line(self):
        """A divider inside the table ends it early and is consumed"""
        text = """\
(-)         (kg/m)      (Nm^2)      (Nm^2)
0.000       5590.87     6.14E+11    6.14E+11
---------------------- TOWER FORE-AFT MODE SHAPES ----------
0.7004      TwFAM1Sh(2) - Mode 1, coefficient of x^2 term
"""
        cursor = cursor_for(text)
        table = parse_numeric_table(TOWER_HEADER, cursor, 6)

        assert table.n_rows == 1
        assert cursor.readline().startswith("0.7004")

    def test_short_row_stops(self):
        """A row with fewer values than headers ends the table"""
        text = "(-) (-) (-) (-)\n0.0 1.0 2.0 3.0\n0.5 1.0\n"
        table = parse_numeric_table(TOWER_HEADER, cursor_for(text), 3)
        assert table.n_rows == 1

    def test_extra_columns_are_ignored(self):
        text = "(rpm) (Nm)\n0.0 0.0 99\n"
        table = parse_numeric_table("GenSpd_TLU   GenTrq_TLU", cursor_for(text), 1)
        assert table.rows == [[0.0, 0.0]]

    def test_zero_rows(self):
        """A zero-size table still consumes its units line"""
        cursor = cursor_for("(rpm) (Nm)\n1.0  Next  - record\n")
        table = parse_numeric_table("GenSpd_TLU   GenTrq_TLU", cursor, 0)

        assert table.n_rows == 0
        assert table.is_complete is True
        assert cursor.readline() == "1.0  Next  - record"

    def test_column_lookup(self):
        table = parse_numeric_table(TOWER_HEADER, cursor_for(TOWER_BODY), 6)
        assert table.column("htfract") == [0.0, 0.2, 0.4, 0.6, 0.8, 1.0]
        with pytest.raises(KeyError):
            table.column("BMassDen")


class TestMixedTable:
    """AeroDyn blade node table: numbers and text per cell"""

    HEADER = "RNodes   AeroTwst  DRNodes  Chord  NFoil  PrnElm"
    BODY = """\
2.8667   13.308    2.7333   3.542  1      NOPRINT
5.6000   13.308    2.7333   3.854  1      PRINT
8.3333   13.308    2.7333   4.167  2      NOPRINT
"""

    def test_cells_are_tagged(self):
        table = parse_mixed_table(self.HEADER, cursor_for(self.BODY), 3, units_line=False)

        assert table.n_rows == 3
        assert table.n_cols == 6
        assert table.rows[0][0] == NumberCell(2.8667)
        assert table.rows[0][4] == NumberCell(1.0)
        assert table.rows[0][5] == TextCell("NOPRINT")
        assert table.rows[1][5] == TextCell("PRINT")

    def test_units_line_skipped_by_default(self):
        text = "(m) (deg) (m) (m) (-) (-)\n" + self.BODY
        table = parse_mixed_table(self.HEADER, cursor_for(text), 3)
        assert table.rows[0][0] == NumberCell(2.8667)

    def test_quoted_token_is_one_cell(self):
        text = '1.0  "Airfoil A.dat"\n'
        table = parse_mixed_table("Span  FileName", cursor_for(text), 1, units_line=False)
        assert table.rows[0] == [NumberCell(1.0), TextCell('"Airfoil A.dat"')]

    def test_stops_at_end_of_input(self):
        table = parse_mixed_table(self.HEADER, cursor_for(self.BODY), 17, units_line=False)
        assert table.n_rows == 3
        assert table.is_complete is False

    def test_column_of_cells(self):
        table = parse_mixed_table(self.HEADER, cursor_for(self.BODY), 3, units_line=False)
        assert [cell.value for cell in table.column("NFoil")] == [1.0, 1.0, 2.0]


class TestFileList:
    """Airfoil file name lists"""

    def test_first_entry_comes_from_trigger_line(self):
        cursor = cursor_for('"AeroData\\DU40_A17.dat"\n"AeroData\\NACA64_A17.dat"\n')
        file_list = parse_file_list(
            '"AeroData\\Cylinder1.dat"   FoilNm  - Names of the airfoil files', cursor, 3
        )

        assert file_list.entries == [
            '"AeroData\\Cylinder1.dat"',
            '"AeroData\\DU40_A17.dat"',
            '"AeroData\\NACA64_A17.dat"',
        ]
        assert file_list.is_complete is True

    def test_does_not_read_past_count(self):
        cursor = cursor_for('"b.dat"\n"c.dat"\n')
        file_list = parse_file_list('"a.dat" FoilNm', cursor, 2)

        assert file_list.entries == ['"a.dat"', '"b.dat"']
        assert cursor.readline() == '"c.dat"'

    def test_single_entry_reads_nothing_more(self):
        cursor = cursor_for('"next.dat"\n')
        file_list = parse_file_list('"a.dat" FoilNm', cursor, 1)
        assert file_list.entries == ['"a.dat"']
        assert cursor.line_no == 0

    def test_stops_at_end_of_input(self):
        file_list = parse_file_list('"a.dat" FoilNm', cursor_for('"b.dat"\n'), 4)
        assert file_list.entries == ['"a.dat"', '"b.dat"']
        assert file_list.is_complete is False

    def test_zero_count_keeps_no_entries(self):
        """With a count of zero even the trigger line's file name is left out"""
        cursor = cursor_for('"next.dat"\n')
        file_list = parse_file_list('"a.dat" FoilNm', cursor, 0)
        assert file_list.entries == []
        assert file_list.is_complete is True
        assert cursor.line_no == 0


class TestOutputList:
    """Trailing OutList section"""

    def test_entries_and_comments(self):
        text = '''\
"Wind1VelX"  X-direction wind
"Wind1VelY"  Y-direction wind
END of list
"NeverRead"  after the terminator
'''
        out_list = parse_output_list(cursor_for(text))

        assert [(e.name, e.comment) for e in out_list.entries] == [
            ('"Wind1VelX"', "  X-direction wind"),
            ('"Wind1VelY"', "  Y-direction wind"),
        ]

    def test_blank_lines_are_skipped(self):
        """Blank lines neither add entries nor end the list"""
        text = '"RotSpeed"\n\n   \n"GenPwr"  - generator power\nEND\n'
        out_list = parse_output_list(cursor_for(text))

        assert out_list.names == ['"RotSpeed"', '"GenPwr"']

    def test_bare_names_are_quoted(self):
        """Only the first bare word is the name; the rest is the comment"""
        out_list = parse_output_list(cursor_for("TipDxc1, TipDyc1   tip deflections\nEND\n"))
        assert out_list.names == ['"TipDxc1,"']
        assert out_list.comments == [" TipDyc1   tip deflections"]

    def test_quoted_list_of_channels_is_one_entry(self):
        out_list = parse_output_list(cursor_for('"TipDxc1, TipDyc1"   tip deflections\nEND\n'))
        assert out_list.entries[0].name == '"TipDxc1, TipDyc1"'
        assert out_list.entries[0].comment == "   tip deflections"

    def test_name_alone_gets_single_space_comment(self):
        out_list = parse_output_list(cursor_for('"RotSpeed"\nEND\n'))
        assert out_list.comments == [" "]

    def test_end_is_case_insensitive(self):
        out_list = parse_output_list(cursor_for('"RotSpeed"\nend of list\n"GenPwr"\n'))
        assert len(out_list) == 1

    def test_end_only_counts_at_start_of_line(self):
        out_list = parse_output_list(cursor_for('"RotSpeed"  the end\n"GenPwr"\n'))
        assert len(out_list) == 2

    def test_end_of_input_terminates(self):
        out_list = parse_output_list(cursor_for('"RotSpeed"\n"GenPwr"'))
        assert len(out_list) == 2

    def test_empty_list(self):
        """An empty section gives an empty list without raising a warning"""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            out_list = parse_output_list(cursor_for("END of list\n"))
        assert out_list.entries == []
        assert out_list.names == []

    def test_non_empty_list_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            parse_output_list(cursor_for('"RotSpeed"\nEND\n'))
