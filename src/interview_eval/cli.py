from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from interview_eval.config.loader import CONFIG_ENV_VAR, get_config, get_summary_max_items
from interview_eval.pipeline.evaluator import AnswerEvaluator, build_answer
from interview_eval.pipeline.session import evaluate_batch
from interview_eval.utils.error_handler import (
    EvaluationError,
    InvalidInputError,
    exit_with_error,
)
from interview_eval.utils.log_config import configure_logging


logger = logging.getLogger(__name__)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--output",
        dest="output_path",
        default="",
        help="Optional output JSON file path. If not set, prints to stdout.",
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        default="",
        help=f"Evaluation config YAML (default: ${CONFIG_ENV_VAR} or the shipped config)",
    )
    parser.add_argument(
        "--dotenv",
        dest="dotenv_path",
        default=".env",
        help="Path to .env file to load (default: .env in the working directory)",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=os.getenv("INTERVIEW_EVAL_LOG_LEVEL", "WARNING"),
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )


def build_evaluate_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="interview-eval evaluate",
        description="Score a single interview answer",
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--answer", dest="answer", help="Answer text")
    source.add_argument(
        "--answer-file",
        dest="answer_file",
        help="Path to a UTF-8 text file holding the answer",
    )

    parser.add_argument(
        "--keywords",
        dest="keywords",
        default="",
        help="Comma-separated expected keywords",
    )
    parser.add_argument(
        "--ideal-word-count",
        dest="ideal_word_count",
        type=int,
        default=100,
        help="Target answer length in words (default: 100)",
    )
    _add_common_arguments(parser)
    return parser


def build_batch_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="interview-eval batch",
        description="Score a session of answers and summarize it",
    )
    parser.add_argument(
        "--input",
        dest="input_path",
        required=True,
        help="JSON file: array of {answer, keywords, idealWordCount} objects",
    )
    _add_common_arguments(parser)
    return parser


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="interview-eval",
        description="Heuristic interview answer evaluation",
    )
    parser.add_argument(
        "command",
        choices=["evaluate", "batch"],
        help="'evaluate' scores one answer; 'batch' scores and summarizes a session",
    )
    return parser


def parse_keywords(raw: str) -> list[str]:
    return [k.strip() for k in raw.split(",") if k.strip()]


def load_batch_answers(input_path: str) -> list[Any]:
    """Read batch input and validate each entry into an ``Answer``."""
    path = Path(input_path)
    if not path.exists():
        raise InvalidInputError(f"Input file not found: {input_path}")

    try:
        items = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"Input is not valid JSON: {e}") from e

    if not isinstance(items, list):
        raise InvalidInputError("Answers must be an array")

    answers = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise InvalidInputError(f"answers[{index}] must be an object")
        answers.append(build_answer(
            item.get("answer"),
            item.get("keywords") or [],
            item.get("idealWordCount") or 100,
        ))
    return answers


def _write_payload(payload: dict[str, Any], output_path: str) -> None:
    text = json.dumps(payload, indent=2)
    if not output_path:
        print(text)
        return
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(text, encoding="utf-8")
    logger.info("[output] wrote=%s", str(output_file))


def run_evaluate(
    answer: Optional[str],
    answer_file: Optional[str],
    keywords: list[str],
    ideal_word_count: int = 100,
    output_path: str = "",
    config_path: str = "",
) -> int:
    try:
        if answer_file:
            path = Path(answer_file)
            if not path.exists():
                raise InvalidInputError(f"Answer file not found: {answer_file}")
            answer = path.read_text(encoding="utf-8")

        evaluator = AnswerEvaluator.from_config(get_config(config_path or None))
        logger.info("[run] keywords=%s ideal_word_count=%s", len(keywords), ideal_word_count)

        evaluation = evaluator.evaluate(answer, keywords, ideal_word_count)
    except EvaluationError as e:
        return exit_with_error(e, context="evaluate")

    logger.info("[evaluate] overall=%s word_count=%s", evaluation.scores.overall, evaluation.word_count)
    _write_payload(evaluation.to_dict(), output_path)
    return 0


def run_batch(input_path: str, output_path: str = "", config_path: str = "") -> int:
    try:
        config = get_config(config_path or None)
        answers = load_batch_answers(input_path)
        logger.info("[run] input=%s answers=%s", input_path, len(answers))

        evaluator = AnswerEvaluator.from_config(config)
        result = evaluate_batch(
            evaluator,
            answers,
            max_items=get_summary_max_items(config_path or None),
        )
    except EvaluationError as e:
        return exit_with_error(e, context="batch")

    logger.info(
        "[batch] evaluations=%s overall=%s",
        len(result.evaluations),
        result.summary.overall_score,
    )
    _write_payload(result.to_dict(), output_path)
    return 0


def _configure(args: argparse.Namespace) -> None:
    configure_logging(args.log_level)
    load_dotenv(args.dotenv_path)


def main(argv: Optional[list[str]] = None) -> int:
    argv_list = list(argv) if argv is not None else sys.argv[1:]

    if argv_list and argv_list[0] == "evaluate":
        parser = build_evaluate_parser()
        args = parser.parse_args(argv_list[1:])
        _configure(args)

        return run_evaluate(
            answer=args.answer,
            answer_file=args.answer_file,
            keywords=parse_keywords(args.keywords),
            ideal_word_count=int(args.ideal_word_count),
            output_path=args.output_path,
            config_path=args.config_path,
        )

    if argv_list and argv_list[0] == "batch":
        parser = build_batch_parser()
        args = parser.parse_args(argv_list[1:])
        _configure(args)

        return run_batch(
            input_path=args.input_path,
            output_path=args.output_path,
            config_path=args.config_path,
        )

    build_parser().parse_args(argv_list)
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
