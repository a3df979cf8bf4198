"""Tests for the romantic command-line interface."""

import logging
import runpy
import sys

import pytest

from romantic.api.cli import create_parser, main


class TestEncodeCommand:
    def test_single_value(self, capsys):
        assert main(["encode", "2022"]) == 0
        assert capsys.readouterr().out == "MMXXII\n"

    def test_multiple_values(self, capsys):
        assert main(["encode", "1", "4", "3999"]) == 0
        assert capsys.readouterr().out.split() == ["I", "IV", "MMMCMXCIX"]

    def test_custom_alphabet(self, capsys):
        assert main(["--alphabet", "AB", "encode", "6"]) == 0
        assert capsys.readouterr().out == "BA\n"

    def test_out_of_range_reports_and_continues(self, capsys):
        assert main(["encode", "4000", "5"]) == 1
        captured = capsys.readouterr()
        assert captured.out == "V\n"
        assert "ERROR: Value must be 1-3999, got 4000" in captured.err

    def test_non_integer_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["encode", "ten"])
        assert excinfo.value.code == 2


class TestDecodeCommand:
    def test_single_numeral(self, capsys):
        assert main(["decode", "MMXXII"]) == 0
        assert capsys.readouterr().out == "2022\n"

    def test_invalid_numeral(self, capsys):
        assert main(["decode", "IIII", "X"]) == 1
        captured = capsys.readouterr()
        assert captured.out == "10\n"
        assert "ERROR: Malformed numeral 'IIII'" in captured.err

    def test_bits_overflow(self, capsys):
        assert main(["decode", "--bits", "8", "CC"]) == 1
        assert "overflows a 8-bit" in capsys.readouterr().err

    @pytest.mark.parametrize("bits", ["0", "-3"])
    def test_bits_below_one_is_usage_error(self, capsys, bits):
        """Widths below 1 are rejected by argparse, not with a traceback."""
        with pytest.raises(SystemExit) as excinfo:
            main(["decode", "--bits", bits, "X"])
        assert excinfo.value.code == 2
        assert "must be >= 1" in capsys.readouterr().err

    def test_bits_not_integer_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["decode", "--bits", "wide", "X"])
        assert excinfo.value.code == 2


class TestRangeCommand:
    def test_default(self, capsys):
        assert main(["range"]) == 0
        out = capsys.readouterr().out
        assert "SYMBOL" in out
        assert "1,000" in out
        assert "Range: 1-3,999" in out

    def test_empty_alphabet(self, capsys):
        assert main(["--alphabet", "", "range"]) == 0
        out = capsys.readouterr().out
        assert "(no symbols)" in out
        assert "Range: (empty)" in out


class TestParser:
    def test_duplicate_alphabet(self, capsys):
        assert main(["-a", "ABA", "range"]) == 1
        assert "ERROR: Duplicate symbol 'A'" in capsys.readouterr().err

    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])

    def test_verbose_logs_alphabet(self, caplog, capsys):
        """-v turns on the DEBUG record written when an alphabet is built."""
        assert main(["-v", "-a", "AB", "range"]) == 0
        messages = [r.getMessage() for r in caplog.records
                    if r.name == "romantic.core.numerals" and r.levelno == logging.DEBUG]
        assert "Built 2-symbol alphabet 'AB', range 1-8" in messages

    def test_quiet_by_default(self, caplog, capsys):
        assert main(["-a", "AB", "range"]) == 0
        assert not [r for r in caplog.records if r.levelno == logging.DEBUG]

    def test_module_entry_point(self, monkeypatch, capsys):
        """python -m romantic runs the same CLI."""
        monkeypatch.setattr(sys, "argv", ["romantic", "encode", "9"])
        with pytest.raises(SystemExit) as excinfo:
            runpy.run_module("romantic", run_name="__main__")
        assert excinfo.value.code == 0
        assert capsys.readouterr().out == "IX\n"

    def test_defaults(self):
        args = create_parser().parse_args(["decode", "X"])
        assert args.alphabet == "IVXLCDM"
        assert args.bits is None
        assert args.verbose is False
