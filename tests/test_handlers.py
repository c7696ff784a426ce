import asyncio
import json
import os
from pathlib import Path

from json_excel_extractor.export import read_grid
from json_excel_extractor.handlers import extract_handler, field_specs_from_table, upload_message
from json_excel_extractor.models import FieldSpec, SourceFile


class _FakeFrame:
    """Stands in for the pandas DataFrame the Gradio grid hands over."""

    def __init__(self, rows):
        self._rows = rows

    @property
    def values(self):
        return self

    def tolist(self):
        return [list(r) for r in self._rows]


class TestUploadMessage:
    def test_counts_files(self) -> None:
        assert upload_message(["a", "b"]) == "2 file(s) uploaded successfully."

    def test_empty_upload(self) -> None:
        assert upload_message(None) == ""


class TestFieldSpecsFromTable:
    def test_reads_list_rows(self) -> None:
        assert field_specs_from_table([["a.b", "B"], ["c", "C"]]) == [FieldSpec("a.b", "B"), FieldSpec("c", "C")]

    def test_reads_dataframe_like(self) -> None:
        assert field_specs_from_table(_FakeFrame([("a", "A")])) == [FieldSpec("a", "A")]

    def test_skips_blank_rows_but_keeps_partial_ones(self) -> None:
        rows = [["a", "A"], ["", ""], [None, float("nan")], ["b", ""]]
        assert field_specs_from_table(rows) == [FieldSpec("a", "A"), FieldSpec("b", "")]

    def test_none(self) -> None:
        assert field_specs_from_table(None) == []


class TestExtractHandler:
    def _write(self, tmp_path: Path, name: str, content) -> str:
        path = tmp_path / name
        path.write_text(json.dumps(content), encoding="utf-8")
        return str(path)

    def test_exports_workbook(self, tmp_path: Path) -> None:
        files = [
            self._write(tmp_path, "a.json", {"Steps": {"Params": {"x": 1}}}),
            self._write(tmp_path, "b.json", {"Steps": {"Params": {}}}),
        ]

        path, status, preview = asyncio.run(extract_handler(files, [["Steps.Params.x", "X"]], "XLSX"))

        assert os.path.basename(path) == "extracted_data.xlsx"
        with open(path, "rb") as f:
            assert read_grid(f.read()) == [["File Name", "X"], ["a.json", 1], ["b.json", "N/A"]]
        assert status == "Extraction successful! 2 row(s) exported."
        assert preview == [{"File Name": "a.json", "X": 1}, {"File Name": "b.json", "X": "N/A"}]

    def test_no_files_is_blocking_notice(self) -> None:
        path, status, preview = asyncio.run(extract_handler(None, [["a", "A"]]))

        assert path is None
        assert preview is None
        assert status == "Please upload JSON files and specify paths and aliases for all fields."

    def test_missing_alias_is_blocking_notice(self, tmp_path: Path) -> None:
        files = [self._write(tmp_path, "a.json", {})]

        path, status, _ = asyncio.run(extract_handler(files, [["a", ""]]))

        assert path is None
        assert "Field 1" in status

    def test_parse_error_reported(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text("not json", encoding="utf-8")

        path, status, _ = asyncio.run(extract_handler([str(bad)], [["a", "A"]]))

        assert path is None
        assert status.startswith("Error parsing JSON in bad.json")

    def test_missing_file_reported(self, tmp_path: Path) -> None:
        path, status, _ = asyncio.run(extract_handler([str(tmp_path / "gone.json")], [["a", "A"]]))

        assert path is None
        assert status.startswith("Error reading uploaded files")

    def test_control_characters_do_not_break_export(self) -> None:
        files = [SourceFile(name="a.json", raw='{"x": "bell\\u0007"}')]

        path, status, preview = asyncio.run(extract_handler(files, [["x", "X"]]))

        with open(path, "rb") as f:
            assert read_grid(f.read())[1] == ["a.json", "bell"]
        assert status == "Extraction successful! 1 row(s) exported."
        assert preview == [{"File Name": "a.json", "X": "bell\u0007"}]

    def test_overlong_value_reported(self) -> None:
        files = [SourceFile(name="big.json", raw=json.dumps({"x": "y" * 40000}))]

        path, status, _ = asyncio.run(extract_handler(files, [["x", "X"]]))

        assert path is None
        assert "'X' in big.json" in status

    def test_empty_upload_slots_are_ignored(self) -> None:
        files = [None, SourceFile(name="a.json", raw='{"x": 1}'), None]

        path, status, _ = asyncio.run(extract_handler(files, [["x", "X"]]))

        assert os.path.basename(path) == "extracted_data.xlsx"
        assert status == "Extraction successful! 1 row(s) exported."

    def test_only_empty_upload_slots_is_blocking_notice(self) -> None:
        path, status, _ = asyncio.run(extract_handler([None], [["x", "X"]]))

        assert path is None
        assert status.startswith("Please upload JSON files")
