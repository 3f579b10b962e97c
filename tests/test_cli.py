"""Tests for the corp-finance command line."""

import io
import json

import pytest

from corp_finance import __version__
from corp_finance.cli import main
from corp_finance.config import SAMPLE_INPUT
from corp_finance.constants import METHODOLOGY


@pytest.fixture
def input_file(tmp_path):
    """Write the reference scenario to a JSON file."""
    path = tmp_path / "model.json"
    path.write_text(json.dumps(SAMPLE_INPUT))
    return str(path)


class TestThreeStatementCommand:
    """Test the three-statement subcommand."""

    def test_json_output(self, input_file, capsys):
        assert main(['three-statement', '--input', input_file]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload['methodology'] == METHODOLOGY
        assert len(payload['result']['income_statements']) == 3
        assert payload['result']['income_statements'][0]['revenue'] == pytest.approx(1100.0)
        assert payload['warnings'] == []
        assert payload['metadata']['version'] == __version__

    def test_table_output(self, input_file, capsys):
        assert main(['--output', 'table', 'three-statement', '--input', input_file]) == 0

        out = capsys.readouterr().out
        assert "INCOME STATEMENT" in out
        assert "BALANCE SHEET" in out
        assert "CASH FLOW STATEMENT" in out
        assert "Year 3" in out
        assert f"Methodology: {METHODOLOGY}" in out

    def test_csv_output_after_subcommand(self, input_file, capsys):
        """Global options are also accepted after the subcommand."""
        assert main(['three-statement', '--input', input_file, '--output', 'csv']) == 0

        out = capsys.readouterr().out
        assert "# income_statements" in out
        assert "# balance_sheets" in out
        assert "# cash_flow_statements" in out
        assert "# summary" in out

    def test_yaml_input(self, tmp_path, capsys):
        path = tmp_path / "model.yaml"
        path.write_text("\n".join(
            f"{key}: {json.dumps(value)}" for key, value in SAMPLE_INPUT.items()
        ))

        assert main(['three-statement', '--input', str(path)]) == 0
        assert json.loads(capsys.readouterr().out)['result']['summary']['total_years'] == 3

    def test_stdin_input(self, monkeypatch, capsys):
        monkeypatch.setattr('sys.stdin', io.StringIO(json.dumps(SAMPLE_INPUT)))

        assert main(['three-statement']) == 0
        assert len(json.loads(capsys.readouterr().out)['result']['balance_sheets']) == 3

    def test_invalid_input(self, tmp_path, capsys):
        data = dict(SAMPLE_INPUT, cogs_pct=0.9, sga_pct=0.2)
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(data))

        assert main(['three-statement', '--input', str(path)]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("error: ")

    def test_missing_file(self, tmp_path, capsys):
        assert main(['three-statement', '--input', str(tmp_path / "nope.json")]) == 1
        assert capsys.readouterr().err.startswith("error: ")

    def test_undecodable_file(self, tmp_path, capsys):
        path = tmp_path / "model.yaml"
        path.write_bytes(b"base_revenue: \xff\xfe1000\n")

        assert main(['three-statement', '--input', str(path)]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("error: ")


class TestOtherCommands:
    """Test the helper subcommands."""

    def test_sample_input(self, capsys):
        assert main(['sample-input']) == 0
        assert json.loads(capsys.readouterr().out) == SAMPLE_INPUT

    def test_version(self, capsys):
        assert main(['version']) == 0
        assert capsys.readouterr().out.strip() == f"corp-finance {__version__}"

    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])

    def test_unknown_output_format(self, input_file):
        with pytest.raises(SystemExit):
            main(['--output', 'xml', 'three-statement', '--input', input_file])
