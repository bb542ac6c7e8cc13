# tests/unit/test_interfaces.py

import io
import json
import pytest
from unittest.mock import patch

from chandas.interface.base_interface import format_text
from chandas.interface.cli_interface import CLIInterface
from chandas.interface.file_interface import FileInterface


class TestCLIInterface:

    def run_cli(self, text, output_format="text"):
        output = io.StringIO()
        cli = CLIInterface(output_format=output_format,
                           input_stream=io.StringIO(text), output_stream=output)
        cli.run()
        return cli, output.getvalue()

    def test_blank_line_separates_verses(self, anushtubh_verse):
        cli, output = self.run_cli(anushtubh_verse + "\n\nका\n")

        assert cli.verses_analyzed == 2
        assert cli.is_completed()
        assert "Meter:   अनुष्टुप् (Anuṣṭubh)" in output
        assert "Meter:   Unknown 1-syllable meter." in output

    def test_pending_verse_at_end_of_input(self):
        cli, output = self.run_cli("का")
        assert cli.verses_analyzed == 1
        assert "Pattern: G" in output

    def test_empty_input(self):
        cli, output = self.run_cli("")
        assert cli.verses_analyzed == 0
        assert cli.is_completed()
        assert output == ""

    def test_json_output(self):
        _, output = self.run_cli("कि\n", output_format="json")
        data = json.loads(output)
        assert data["pattern"] == "L"
        assert data["result"]["kind"] == "unknown_length"

    def test_keyboard_interrupt(self):
        output = io.StringIO()
        cli = CLIInterface(input_stream=io.StringIO("का\n"), output_stream=output)
        with patch.object(cli, "analyze_and_print", side_effect=KeyboardInterrupt):
            cli.run()
        assert not cli.is_completed()
        assert "Interrupted" in output.getvalue()

    def test_unknown_output_format(self):
        with pytest.raises(ValueError):
            CLIInterface(output_format="xml")


class TestFormatText:

    def test_report(self, analyzer, anushtubh_verse):
        report = format_text(analyzer.analyze(anushtubh_verse))
        lines = report.splitlines()

        assert lines[0] == "Pattern: L G L G L G L G | L G L G L G L G"
        assert lines[1] == "Meter:   अनुष्टुप् (Anuṣṭubh)"
        assert "ja ra la ga; 8 syllables, 12 matras" in report

    def test_report_for_line_without_syllables(self, analyzer):
        report = format_text(analyzer.analyze("abc"))
        assert "     -  (0 syllables, 0 matras)" in report


class TestFileInterface:

    def test_text_file(self, tmp_path, anushtubh_verse):
        source = tmp_path / "verses.txt"
        source.write_text(anushtubh_verse + "\n\n\nका\nकि\n", encoding="utf-8")
        target = tmp_path / "out" / "results.json"

        interface = FileInterface(source, target)
        assert interface.total_items == 2
        interface.run()

        results = json.loads(target.read_text(encoding="utf-8"))
        assert [item["id"] for item in results] == [1, 2]
        assert results[0]["meter_name"] == "अनुष्टुप् (Anuṣṭubh)"
        assert results[1]["pattern"] == "G | L"
        assert interface.is_completed()
        assert interface.get_progress()["identified_count"] == 1

    def test_json_file(self, tmp_path):
        source = tmp_path / "verses.json"
        source.write_text(json.dumps(["का", {"id": "v2", "text": "कि"}], ensure_ascii=False), encoding="utf-8")
        target = tmp_path / "results.json"

        FileInterface(source, target).run()

        results = json.loads(target.read_text(encoding="utf-8"))
        assert [item["id"] for item in results] == [1, "v2"]

    def test_invalid_json_entry(self, tmp_path):
        source = tmp_path / "verses.json"
        source.write_text(json.dumps([42]), encoding="utf-8")
        with pytest.raises(ValueError):
            FileInterface(source)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            FileInterface(tmp_path / "missing.txt")

    def test_stdout_output(self, tmp_path, capsys):
        source = tmp_path / "verses.txt"
        source.write_text("का\n", encoding="utf-8")

        FileInterface(source).run()

        results = json.loads(capsys.readouterr().out)
        assert results[0]["pattern"] == "G"

    def test_failed_verse_is_recorded(self, tmp_path):
        source = tmp_path / "verses.txt"
        source.write_text("का\n\nकि\n", encoding="utf-8")
        target = tmp_path / "results.json"

        interface = FileInterface(source, target)
        original = interface.analyzer.analyze
        calls = []

        def flaky(text):
            calls.append(text)
            if len(calls) == 1:
                raise RuntimeError("boom")
            return original(text)

        with patch.object(interface.analyzer, "analyze", side_effect=flaky):
            interface.run()

        results = json.loads(target.read_text(encoding="utf-8"))
        assert results[0]["error"] == "boom"
        assert results[1]["pattern"] == "L"
