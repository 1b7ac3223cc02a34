"""Generate one QR code per line of a text file."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from qr_forge.config import Settings
from qr_forge.errors import QRForgeError, ValidationError
from qr_forge.generate import write_qr_file
from qr_forge.logger import get_logger
from qr_forge.options import GenerationRequest, build_request
from qr_forge.paths import batch_item_filename, ensure_directory, resolve_batch_output_dir
from qr_forge.reporter import ConsoleReporter, truncate
from qr_forge.validators import validate_batch_file


@dataclass
class BatchJob:
    source_lines: List[str]
    output_directory: Path
    template: GenerationRequest


@dataclass
class ItemOutcome:
    index: int
    data: str
    path: Optional[Path] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchResult:
    success_count: int
    failed_count: int
    output_directory: Path
    outcomes: List[ItemOutcome] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        return 0 if self.failed_count == 0 else 1


def prepare_batch(
    batch_file: Union[str, Path],
    options: Any,
    settings: Settings,
    timestamp: Optional[int] = None,
) -> BatchJob:
    """Read and check *batch_file*, then work out where its outputs go."""

    check = validate_batch_file(batch_file)
    if not check.valid:
        raise ValidationError([check.error or "Invalid batch file"])

    output_directory = resolve_batch_output_dir(
        getattr(options, "output", None),
        Path(batch_file).stem,
        settings.export_dir,
        timestamp,
    )
    try:
        ensure_directory(output_directory)
    except OSError as exc:
        raise QRForgeError(f"Failed to create output directory: {output_directory}") from exc

    return BatchJob(check.lines, output_directory, build_request(options))


def process_item(job: BatchJob, index: int, data: str) -> ItemOutcome:
    """Write the QR code for one line. Errors are returned, never raised."""

    request = job.template.with_data(data)
    output = job.output_directory / batch_item_filename(index, request.format)
    try:
        write_qr_file(request, output)
    except (QRForgeError, OSError, ValueError) as exc:
        get_logger("batch").debug("batch item %d failed", index, exc_info=True)
        return ItemOutcome(index, data, error=str(exc) or exc.__class__.__name__)
    return ItemOutcome(index, data, path=output)


def run_batch(job: BatchJob, reporter: ConsoleReporter) -> BatchResult:
    total = len(job.source_lines)
    outcomes: List[ItemOutcome] = []
    for index, data in enumerate(job.source_lines, start=1):
        reporter.progress(index, total, truncate(data))
        outcome = process_item(job, index, data)
        if not outcome.ok:
            reporter.error(f'Failed to generate QR for: "{truncate(data)}" - {outcome.error}')
        outcomes.append(outcome)

    success = sum(1 for outcome in outcomes if outcome.ok)
    return BatchResult(success, total - success, job.output_directory, outcomes)


def process_batch(
    batch_file: Union[str, Path],
    options: Any,
    settings: Optional[Settings] = None,
    reporter: Optional[ConsoleReporter] = None,
    timestamp: Optional[int] = None,
) -> BatchResult:
    settings = settings or Settings()
    reporter = reporter or ConsoleReporter()

    job = prepare_batch(batch_file, options, settings, timestamp)

    reporter.header(f"Batch Processing: {len(job.source_lines)} QR codes")
    reporter.info(f"Output directory: {job.output_directory}")
    reporter.info(f"Format: {job.template.format.upper()}")
    reporter.divider()

    result = run_batch(job, reporter)

    reporter.divider()
    reporter.header("Batch Processing Complete")
    reporter.success(f"Generated: {result.success_count} QR codes")
    if result.failed_count:
        reporter.error(f"Failed: {result.failed_count} QR codes")
    reporter.saved(result.output_directory)
    return result


def create_batch_file(items: Iterable[str], output: Union[str, Path], reporter: Optional[ConsoleReporter] = None) -> Path:
    """Write *items* one per line so they can be fed back with ``--batch``."""

    path = Path(output)
    path.write_text("\n".join(items), encoding="utf-8")
    (reporter or ConsoleReporter()).success(f"Batch file created: {path}")
    return path
