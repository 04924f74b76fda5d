import json
from pathlib import Path

import pandas as pd
from typer.testing import CliRunner

from readability_checker.cli import app

runner = CliRunner()


def test_cli_analyze_outputs_summary(tmp_path: Path):
    """CLI analyze command returns a JSON summary for every .txt document."""
    corpus_dir = _create_sample_corpus(tmp_path)
    result = runner.invoke(app, ["analyze", "--input-path", str(corpus_dir)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    doc_ids = [doc["doc_id"] for doc in payload["documents"]]
    assert doc_ids == ["chapter1.txt", "nested/memo.txt"]
    memo = payload["documents"][1]
    assert [issue["type"] for issue in memo["issues"]] == ["jargon"]
    assert set(memo["scores"]) >= {"flesch_reading_ease", "average_grade_level"}
    assert memo["grade_band"] in {"easy", "standard", "difficult", "very difficult"}


def test_cli_analyze_inline_text():
    """analyze --text scores inline text as a single document."""
    result = runner.invoke(app, ["analyze", "--text", "Run fast."])
    assert result.exit_code == 0
    doc = json.loads(result.stdout)["documents"][0]
    assert doc["statistics"]["word_count"] == 2
    assert doc["scores"]["flesch_reading_ease"] == 100
    assert doc["reading_ease_description"] == "Very Easy - 5th Grade"


def test_cli_analyze_rejects_blank_text():
    """Whitespace-only inline text is rejected as a usage error."""
    result = runner.invoke(app, ["analyze", "--text", "   "])
    assert result.exit_code != 0


def test_cli_analyze_requires_input():
    """analyze fails when neither a path nor inline text is given."""
    result = runner.invoke(app, ["analyze"])
    assert result.exit_code != 0


def test_cli_analyze_honours_config(tmp_path: Path):
    """Thresholds from a YAML config change which issues are reported."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "thresholds:\n  max_jargon_matches: 10\n", encoding="utf-8"
    )
    result = runner.invoke(
        app,
        ["analyze", "--text", "We leverage synergy.", "--config", str(config_path)],
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout)["documents"][0]["issues"] == []


def test_cli_report_writes_csv(tmp_path: Path):
    """report command writes one CSV row per document in doc_id order."""
    corpus_dir = _create_sample_corpus(tmp_path)
    output = tmp_path / "out" / "report.csv"
    result = runner.invoke(
        app, ["report", "--input-path", str(corpus_dir), "--output", str(output)]
    )
    assert result.exit_code == 0
    df = pd.read_csv(output, keep_default_na=False)
    assert list(df["doc_id"]) == ["chapter1.txt", "nested/memo.txt"]
    assert list(df["issue_types"]) == ["", "jargon"]
    assert "flesch_kincaid_grade" in df.columns


def test_cli_report_rejects_corpus_without_text(tmp_path: Path):
    """A corpus with only blank files fails without writing a report."""
    corpus_dir = tmp_path / "empty"
    corpus_dir.mkdir()
    (corpus_dir / "blank.txt").write_text("  \n", encoding="utf-8")
    result = runner.invoke(
        app,
        ["report", "--input-path", str(corpus_dir), "--output", str(tmp_path / "r.csv")],
    )
    assert result.exit_code != 0
    assert not (tmp_path / "r.csv").exists()


def test_cli_analyze_strips_byte_order_mark(tmp_path: Path):
    """A UTF-8 BOM at the start of a file is not counted as a character."""
    path = tmp_path / "bom.txt"
    path.write_text("\ufeffRun fast.", encoding="utf-8")
    result = runner.invoke(app, ["analyze", "--input-path", str(path)])
    assert result.exit_code == 0
    stats = json.loads(result.stdout)["documents"][0]["statistics"]
    assert stats["character_count"] == 8
    assert stats["word_count"] == 2


def test_cli_rejects_unknown_log_level():
    """An unknown --log-level is a usage error rather than a crash."""
    result = runner.invoke(app, ["--log-level", "NOPE", "print-config"])
    assert result.exit_code == 2
    assert result.exception is None or isinstance(result.exception, SystemExit)


def test_cli_accepts_lowercase_log_level():
    """Log level names are case-insensitive."""
    result = runner.invoke(app, ["--log-level", "debug", "print-config"])
    assert result.exit_code == 0


def test_cli_print_config():
    """print-config command dumps the current configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "max_average_sentence_length" in result.stdout


def _create_sample_corpus(tmp_path: Path) -> Path:
    """Create a small corpus with a nested directory and a non-text file."""
    corpus_dir = tmp_path / "corpus"
    (corpus_dir / "nested").mkdir(parents=True)
    (corpus_dir / "chapter1.txt").write_text(
        "The storm clouds rolled over the bay. Sailors watched the winds.",
        encoding="utf-8",
    )
    (corpus_dir / "nested" / "memo.txt").write_text(
        "We must leverage our tools. Ship it soon.", encoding="utf-8"
    )
    (corpus_dir / "notes.md").write_text("Ignored file.", encoding="utf-8")
    return corpus_dir
