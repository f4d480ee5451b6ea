import argparse
import json
import sys
from pathlib import Path

from formease.config.settings import Settings
from formease.ingestion.file_loader import FileLoader
from formease.logging.logger import Log
from formease.processor.models import ExtractionOutcome, ProcessorResult
from formease.processor.processor import build_processor
from formease.reconciler.merger import FormState


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build pipeline -> pre-fill an empty form from a file."""
    parser = argparse.ArgumentParser(
        description="Extract personal details from a PDF or text document."
    )
    parser.add_argument("path", type=Path, help="Document to extract details from")
    args = parser.parse_args(argv)

    settings = Settings()
    Log.configure(settings.log_level)

    form_state: dict[str, object] = {}
    try:
        document = FileLoader().load(args.path)
    except OSError as exc:
        Log.error(f"Could not read {args.path}: {exc}")
        result = ProcessorResult(
            outcome=ExtractionOutcome.UNREADABLE_DOCUMENT,
            error_message=str(exc),
        )
    else:
        result = build_processor(settings).process(document, form_state)

    _print_result(result, form_state)
    return 1 if result.outcome.is_failure else 0


def _print_result(result: ProcessorResult, form_state: FormState) -> None:
    print(
        json.dumps(
            {
                "outcome": result.outcome.value,
                "title": result.title,
                "message": result.message,
                "fieldsFilled": result.fields_filled,
                "form": dict(form_state),
            },
            indent=2,
        )
    )


if __name__ == "__main__":
    sys.exit(main())
