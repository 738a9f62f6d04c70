"""CLI entrypoint for qa-lint — typer app with one command per check."""

import asyncio
import logging
import sys
from enum import StrEnum
from pathlib import Path

import structlog
import typer

from qa_lint.cli.output.report import build_json, build_text_lines, summary_line
from qa_lint.config.domain.config import LintConfig
from qa_lint.config.domain.roots import RootsConfig
from qa_lint.config.infrastructure.observer import StructlogConfigObserver
from qa_lint.config.infrastructure.yaml_loader import YamlConfigLoader
from qa_lint.core.errors import QaLintError, UsageError
from qa_lint.corpus.infrastructure.fs_loader import FileSystemCorpusLoader
from qa_lint.lint.application.runner import LintRunner
from qa_lint.lint.domain.observer import LintObserver
from qa_lint.lint.domain.report import LintReport
from qa_lint.lint.domain.violation import Checker
from qa_lint.lint.infrastructure.composite_observer import CompositeLintObserver
from qa_lint.lint.infrastructure.observer import StructlogLintObserver
from qa_lint.lint.infrastructure.progress_observer import ProgressLintObserver

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_USAGE = 2

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Validate an interview question/answer corpus and its example scripts.",
)


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"


_QUESTIONS = typer.Option(
    None, "--questions", help="Questions root (default from config: questions/)"
)
_ANSWERS = typer.Option(
    None, "--answers", help="Answers root (default from config: answers/)"
)
_EXAMPLES = typer.Option(
    None, "--examples", help="Examples root (default from config: examples/)"
)
_FORMAT = typer.Option("text", "--format", help="Report format: 'text' or 'json'")
_CONFIG = typer.Option(
    None, "--config", "-c", help="Path to a qa-lint YAML config file"
)
_LOG_FORMAT = typer.Option(
    "console", "--log-format", help="Log format: 'console' or 'json'"
)
_LOG_LEVEL = typer.Option(
    "warning", "--log-level", help="Log level: debug, info, warning or error"
)


def _configure_structlog(log_format: str, log_level: str) -> None:
    """Configure structlog to write to stderr so stdout carries only the report."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty()
        )
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        raise UsageError(
            argument="--log-format",
            reason=f"invalid value {log_format!r}; must be 'console' or 'json'",
        )

    level = logging.getLevelNamesMapping().get(log_level.upper())
    if level is None:
        raise UsageError(
            argument="--log-level",
            reason=f"invalid value {log_level!r}; must be a logging level name",
        )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _parse_format(output_format: str) -> OutputFormat:
    try:
        return OutputFormat(output_format)
    except ValueError as exc:
        raise UsageError(
            argument="--format",
            reason=f"invalid value {output_format!r}; must be 'text' or 'json'",
        ) from exc


def _resolve_roots(
    config: LintConfig,
    questions: Path | None,
    answers: Path | None,
    examples: Path | None,
) -> RootsConfig:
    """Command-line roots win over the config file's roots."""
    return RootsConfig(
        questions=questions if questions is not None else config.roots.questions,
        answers=answers if answers is not None else config.roots.answers,
        examples=examples if examples is not None else config.roots.examples,
    )


def _require_directories(checks: list[Checker], roots: RootsConfig) -> None:
    """Fail fast, before any scanning, if a root a check needs is missing."""
    needed: list[tuple[str, Path]] = []
    if Checker.SCHEMA in checks or Checker.PAIRING in checks:
        needed += [("--questions", roots.questions), ("--answers", roots.answers)]
    if Checker.REFERENCES in checks and ("--answers", roots.answers) not in needed:
        needed.append(("--answers", roots.answers))
    if Checker.EXAMPLES in checks or Checker.REFERENCES in checks:
        needed.append(("--examples", roots.examples))

    for argument, path in needed:
        if not path.is_dir():
            raise UsageError(
                argument=argument, reason=f"directory does not exist: {path}"
            )


def _emit(report: LintReport, output_format: OutputFormat) -> None:
    if output_format == OutputFormat.JSON:
        typer.echo(build_json(report=report))
        typer.echo(summary_line(report=report), err=True)
        return
    for line in build_text_lines(report=report):
        typer.echo(line)
    typer.echo(summary_line(report=report))


def _execute(
    checks: list[Checker],
    questions: Path | None,
    answers: Path | None,
    examples: Path | None,
    output_format: str,
    config_path: Path | None,
    log_format: str,
    log_level: str,
) -> None:
    """Shared body of every check command; always exits via typer.Exit."""
    try:
        fmt = _parse_format(output_format=output_format)
        _configure_structlog(log_format=log_format, log_level=log_level)

        loader = YamlConfigLoader(observer=StructlogConfigObserver())
        config = loader.load(path=config_path)
        roots = _resolve_roots(
            config=config, questions=questions, answers=answers, examples=examples
        )
        _require_directories(checks=checks, roots=roots)

        observers: list[LintObserver] = [StructlogLintObserver()]
        if log_format == "console" and sys.stderr.isatty():
            observers.append(ProgressLintObserver())

        runner = LintRunner(
            config=config,
            loader=FileSystemCorpusLoader(config=config),
            observer=CompositeLintObserver(observers=observers),
        )
        report = asyncio.run(runner.run(checks=checks, roots=roots))

    except KeyboardInterrupt:
        typer.echo("Scan interrupted.", err=True)
        sys.exit(EXIT_VIOLATIONS)
    except QaLintError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=EXIT_USAGE) from exc
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.", err=True)
        sys.exit(EXIT_VIOLATIONS)

    _emit(report=report, output_format=fmt)
    raise typer.Exit(code=EXIT_VIOLATIONS if report.has_errors else EXIT_OK)


@app.command("check-schema")
def check_schema(
    questions: Path | None = _QUESTIONS,
    answers: Path | None = _ANSWERS,
    output_format: str = _FORMAT,
    config_path: Path | None = _CONFIG,
    log_format: str = _LOG_FORMAT,
    log_level: str = _LOG_LEVEL,
) -> None:
    """Check that every question and answer file has a heading and numbered items."""
    _execute(
        checks=[Checker.SCHEMA],
        questions=questions,
        answers=answers,
        examples=None,
        output_format=output_format,
        config_path=config_path,
        log_format=log_format,
        log_level=log_level,
    )


@app.command("check-pairing")
def check_pairing(
    questions: Path | None = _QUESTIONS,
    answers: Path | None = _ANSWERS,
    output_format: str = _FORMAT,
    config_path: Path | None = _CONFIG,
    log_format: str = _LOG_FORMAT,
    log_level: str = _LOG_LEVEL,
) -> None:
    """Check that questions and answers pair up by level, topic and prompt number."""
    _execute(
        checks=[Checker.PAIRING],
        questions=questions,
        answers=answers,
        examples=None,
        output_format=output_format,
        config_path=config_path,
        log_format=log_format,
        log_level=log_level,
    )


@app.command("check-examples")
def check_examples(
    examples: Path | None = _EXAMPLES,
    output_format: str = _FORMAT,
    config_path: Path | None = _CONFIG,
    log_format: str = _LOG_FORMAT,
    log_level: str = _LOG_LEVEL,
) -> None:
    """Check the dependency-free / framework-dependent example split."""
    _execute(
        checks=[Checker.EXAMPLES],
        questions=None,
        answers=None,
        examples=examples,
        output_format=output_format,
        config_path=config_path,
        log_format=log_format,
        log_level=log_level,
    )


@app.command("check-references")
def check_references(
    answers: Path | None = _ANSWERS,
    examples: Path | None = _EXAMPLES,
    output_format: str = _FORMAT,
    config_path: Path | None = _CONFIG,
    log_format: str = _LOG_FORMAT,
    log_level: str = _LOG_LEVEL,
) -> None:
    """Check that example scripts referenced from answers exist."""
    _execute(
        checks=[Checker.REFERENCES],
        questions=None,
        answers=answers,
        examples=examples,
        output_format=output_format,
        config_path=config_path,
        log_format=log_format,
        log_level=log_level,
    )


@app.command("check-all")
def check_all(
    questions: Path | None = _QUESTIONS,
    answers: Path | None = _ANSWERS,
    examples: Path | None = _EXAMPLES,
    output_format: str = _FORMAT,
    config_path: Path | None = _CONFIG,
    log_format: str = _LOG_FORMAT,
    log_level: str = _LOG_LEVEL,
) -> None:
    """Run every check."""
    _execute(
        checks=[
            Checker.SCHEMA,
            Checker.PAIRING,
            Checker.EXAMPLES,
            Checker.REFERENCES,
        ],
        questions=questions,
        answers=answers,
        examples=examples,
        output_format=output_format,
        config_path=config_path,
        log_format=log_format,
        log_level=log_level,
    )


if __name__ == "__main__":
    app()
