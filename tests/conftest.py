import json
from pathlib import Path

import pytest

from json_excel_extractor.models import FieldSpec, SourceFile


def make_source(name: str, content) -> SourceFile:
    return SourceFile(name=name, raw=json.dumps(content))


@pytest.fixture()
def step_sources() -> list[SourceFile]:
    """Two workflow documents, the second missing the extracted key."""
    return [
        make_source("a.json", {"Steps": {"Params": {"x": 1}}}),
        make_source("b.json", {"Steps": {"Params": {}}}),
    ]


@pytest.fixture()
def x_field() -> list[FieldSpec]:
    return [FieldSpec(path="Steps.Params.x", alias="X")]


@pytest.fixture()
def json_files(tmp_path: Path) -> list[str]:
    """Three JSON files on disk, in upload order."""
    paths = []
    for idx, name in enumerate(["first.json", "second.json", "third.json"], start=1):
        path = tmp_path / name
        path.write_text(json.dumps({"meta": {"id": idx, "tags": ["t", str(idx)]}}), encoding="utf-8")
        paths.append(str(path))
    return paths
