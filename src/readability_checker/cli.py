from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, TypedDict

import pandas as pd
import typer
import yaml

from .config import ReadabilityConfig, load_config
from .models import Document, ReadabilityReport
from .pipeline import EmptyTextError, analyze_corpus, analyze_readability, validate_text
from .scoring import describe_reading_ease, grade_band

LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="Readability Checker CLI.", no_args_is_help=True)

# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt"}

INLINE_DOC_ID = "<text>"


class DocumentSummary(TypedDict):
    doc_id: str
    statistics: Dict[str, Any]
    scores: Dict[str, Any]
    issues: List[Dict[str, Any]]
    reading_ease_description: str
    grade_band: str


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Analyze prose for readability scores and common style problems."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(
            f"Unknown log level '{log_level}'.", param_hint="--log-level"
        )
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def analyze(
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    text: str | None = typer.Option(
        None, "--text", "-t", help="Analyze this text instead of reading files."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Analyze text or files and emit a JSON summary."""
    cfg = load_config(config)
    if text is not None:
        # Inline text is a single document, so validation failures are fatal.
        try:
            validate_text(text, cfg.min_characters)
            text_report = analyze_readability(text, cfg)
        except EmptyTextError as exc:
            raise typer.BadParameter(str(exc), param_hint="--text") from exc
        summary = [_document_summary(INLINE_DOC_ID, text_report)]
    elif input_path is not None:
        summary = _build_summary(_analyze_path(input_path, cfg))
    else:
        raise typer.BadParameter("Provide either --input-path or --text.")
    typer.echo(json.dumps({"documents": summary}, indent=2))


@app.command()
def report(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    output: Path = typer.Option(..., dir_okay=False, help="CSV or JSON destination."),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Write a per-document readability table for a corpus."""
    cfg = load_config(config)
    results = _analyze_path(input_path, cfg)
    rows = [_report_row(doc_id, rep) for doc_id, rep in sorted(results.items())]

    df = pd.DataFrame(rows)
    output.parent.mkdir(parents=True, exist_ok=True)
    if output.suffix.lower() == ".csv":
        df.to_csv(output, index=False)
    else:
        df.to_json(output, orient="records", indent=2)
    typer.echo(f"Wrote readability report for {len(rows)} documents to {output}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ReadabilityConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _analyze_path(
    input_path: Path, config: ReadabilityConfig
) -> Dict[str, ReadabilityReport]:
    """Load documents from input_path and analyze them, failing when none qualify."""
    documents = _load_documents(input_path)
    results = analyze_corpus(documents, config)
    if not results:
        raise typer.BadParameter(
            f"No analyzable text found under {input_path}.", param_hint="--input-path"
        )
    skipped = len(documents) - len(results)
    if skipped:
        LOGGER.info("Skipped %d document(s) without enough text.", skipped)
    return results


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    # Directory input: gather all supported files in a deterministic order.
    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [
        _document_from_file(file, file.relative_to(input_path).as_posix())
        for file in files
    ]


def _document_from_file(path: Path, doc_id: str) -> Document:
    """Read a text file from disk and wrap it in a Document."""
    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8 text.") from exc
    return Document(doc_id=doc_id, text=text)


def _build_summary(results: Dict[str, ReadabilityReport]) -> List[DocumentSummary]:
    """Create a JSON-serializable summary for each analyzed document."""
    return [
        _document_summary(doc_id, rep) for doc_id, rep in sorted(results.items())
    ]


def _document_summary(doc_id: str, rep: ReadabilityReport) -> DocumentSummary:
    payload = rep.to_dict()
    return {
        "doc_id": doc_id,
        "statistics": payload["statistics"],
        "scores": payload["scores"],
        "issues": payload["issues"],
        "reading_ease_description": describe_reading_ease(
            rep.scores.flesch_reading_ease
        ),
        "grade_band": grade_band(rep.scores.average_grade_level),
    }


def _report_row(doc_id: str, rep: ReadabilityReport) -> Dict[str, Any]:
    """Flatten a report into a single table row."""
    row: Dict[str, Any] = {"doc_id": doc_id}
    row.update(rep.statistics.to_dict())
    row.update(rep.scores.to_dict())
    row["issue_count"] = len(rep.issues)
    row["issue_types"] = ";".join(issue.type for issue in rep.issues)
    return row


if __name__ == "__main__":
    main()
