import json
from textwrap import dedent

import pytest

from codesense.analyzer import AnalysisPipeline, analyze_document
from codesense.exceptions import CodesenseError, ErrorCode, ParseError
from codesense.parser.classes import Program
from codesense.parser.tokens import TokenKind
from codesense.symbols.scope_manager import ScopeManager

SOURCE = dedent(
    """
    const greeting = 'hello';
    greeting.to
    """
).strip()


def create_source_file(tmp_path, filename, content):
    path = tmp_path / filename
    path.write_text(content)
    return str(path)


def test_full_pipeline_produces_every_artifact():
    # --- ARRANGE ---
    pipeline = AnalysisPipeline(SOURCE)

    # --- ACT ---
    items = pipeline.run()

    # --- ASSERT ---
    assert list(pipeline.artifacts) == ["tokens", "ast", "scopes", "completions"]
    assert pipeline.artifacts["tokens"][0].type == TokenKind.CONST
    assert isinstance(pipeline.artifacts["ast"], Program)
    assert isinstance(pipeline.artifacts["scopes"], ScopeManager)
    assert [item.label for item in items] == ["toLocaleLowerCase", "toLocaleUpperCase", "toLowerCase", "toString", "toUpperCase"]
    assert pipeline.parse_error is None


@pytest.mark.parametrize(
    "stage, expected_type",
    [
        pytest.param("tokens", list, id="tokens"),
        pytest.param("ast", Program, id="ast"),
        pytest.param("scopes", ScopeManager, id="scopes"),
    ],
)
def test_stop_after_stage(stage, expected_type):
    pipeline = AnalysisPipeline("const a = 1;", stop_after_stage=stage)
    assert isinstance(pipeline.run(), expected_type)
    assert list(pipeline.artifacts)[-1] == stage
    assert "completions" not in pipeline.artifacts


def test_parse_error_does_not_stop_completion():
    # --- ARRANGE ---
    text = "const user = {name: 'Ann'};\nuser."
    pipeline = AnalysisPipeline(text)

    # --- ACT ---
    items = pipeline.run()

    # --- ASSERT ---
    assert pipeline.parse_error is not None
    assert "ast" not in pipeline.artifacts
    assert "scopes" not in pipeline.artifacts
    assert [item.label for item in items] == ["name"]


def test_parse_error_is_raised_when_stopping_at_ast():
    with pytest.raises(ParseError) as exc_info:
        analyze_document("let x = [1, 2", stop_after_stage="ast")
    assert exc_info.value.code == ErrorCode.UNEXPECTED_END_OF_INPUT


def test_invalid_offset_is_reported():
    with pytest.raises(CodesenseError) as exc_info:
        analyze_document("abc", offset=10)
    assert exc_info.value.code == ErrorCode.INVALID_POSITION


@pytest.mark.parametrize(
    "language, text, expected_label",
    [
        pytest.param("html", "<butt", "button", id="html"),
        pytest.param("css", "a { backg", "background", id="css"),
    ],
)
def test_markup_goes_straight_to_completion(language, text, expected_label):
    pipeline = AnalysisPipeline(text, language=language)
    items = pipeline.run()
    assert list(pipeline.artifacts) == ["completions"]
    assert expected_label in [item.label for item in items]


def test_artifact_path_follows_input_file(tmp_path):
    path = create_source_file(tmp_path, "app.js", SOURCE)
    assert AnalysisPipeline(SOURCE, file_path=path).artifact_path("ast") == str(tmp_path / "app.ast.json")
    assert AnalysisPipeline(SOURCE).artifact_path("ast") == "stdin_output.ast.json"


def test_dumped_stages_are_written_as_json(tmp_path):
    # --- ARRANGE ---
    path = create_source_file(tmp_path, "app.js", SOURCE)

    # --- ACT ---
    analyze_document(SOURCE, file_path=path, dump_stages=["scopes", "completions"])

    # --- ASSERT ---
    scopes = json.loads((tmp_path / "app.scopes.json").read_text())
    assert scopes["kind"] == "global"
    assert "greeting" in [symbol["name"] for symbol in scopes["symbols"]]

    completions = json.loads((tmp_path / "app.completions.json").read_text())
    assert completions[0]["label"] == "toLocaleLowerCase"
    assert completions[0]["insertText"] == "toLocaleLowerCase"
    assert not (tmp_path / "app.tokens.json").exists()
