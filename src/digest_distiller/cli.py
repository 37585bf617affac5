"""Command-line interface for digest-distiller."""

import argparse
import logging
import sys
from pathlib import Path

from schemas.extraction import ExportManifest, ExportRecord, ExtractionResult

from digest_distiller.exceptions import DistillerError
from digest_distiller.exporters import EXPORTERS
from digest_distiller.extractor import ArticleExtractor
from digest_distiller.readers import PDFTextReader

DEFAULT_OUTPUT_DIR = Path("./workspace/articles")
DEFAULT_FORMAT = "json"
MANIFEST_NAME = "export-manifest.json"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def _log_result(logger: logging.Logger, name: str, result: ExtractionResult) -> None:
    logger.info(f"Extracted {name}")
    logger.info(f"  Pages: {result.page_count}")
    if result.used_fallback:
        logger.info("  Index: recovered from page 1")
    else:
        logger.info(f"  Index pages: {', '.join(str(n) for n in result.index_pages)}")
    logger.info(f"  Articles: {len(result.articles)}")
    if result.discarded_count:
        logger.warning(f"  Discarded: {result.discarded_count}")


def extract(args: argparse.Namespace) -> int:
    """Execute the extract command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    if (args.pdf is None) == (args.text is None):
        logger.error("Must specify exactly one of --pdf or --text")
        return 1

    source = (args.pdf or args.text).resolve()
    if not source.exists():
        logger.error(f"Source document not found: {source}")
        return 1

    try:
        if args.pdf is not None:
            full_text = PDFTextReader().read(source)
        else:
            full_text = source.read_text(encoding="utf-8")

        result = ArticleExtractor().extract(full_text)
        exporter = EXPORTERS[args.format]()

        if args.output is None:
            sys.stdout.write(exporter.serialize(result).decode("utf-8"))
            sys.stdout.write("\n")
        else:
            exporter.export(result, args.output)
            logger.info(f"  Output: {args.output}")

        _log_result(logger, source.name, result)
        return 0

    except (DistillerError, OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to extract articles: {e}")
        return 1


def batch(args: argparse.Namespace) -> int:
    """Execute the batch command.

    Every PDF in the input directory is extracted and exported on its own;
    a document that cannot be read is recorded as failed and the batch
    continues.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 when every document was extracted, 1 otherwise)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    input_dir = args.input.resolve()
    if not input_dir.is_dir():
        logger.error(f"Input directory not found: {input_dir}")
        return 1

    pdf_paths = sorted(input_dir.glob("*.pdf"))
    if not pdf_paths:
        logger.error(f"No PDF files found in {input_dir}")
        return 1

    output_dir = args.output
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Cannot create output directory {output_dir}: {e}")
        return 1

    reader = PDFTextReader()
    extractor = ArticleExtractor()
    exporter = EXPORTERS[args.format]()
    manifest = ExportManifest(format=args.format)

    for pdf_path in pdf_paths:
        try:
            result = extractor.extract(reader.read(pdf_path))
            export_path = exporter.export(
                result, output_dir / f"{pdf_path.stem}{exporter.suffix}"
            )
        except DistillerError as e:
            logger.error(f"Failed to process {pdf_path.name}: {e}")
            manifest.documents.append(
                ExportRecord(source_path=str(pdf_path), status="failed", error=str(e))
            )
            continue

        _log_result(logger, pdf_path.name, result)
        manifest.documents.append(
            ExportRecord(
                source_path=str(pdf_path),
                export_path=str(export_path),
                article_count=len(result.articles),
                discarded_count=result.discarded_count,
            )
        )

    manifest_path = output_dir / MANIFEST_NAME
    try:
        manifest_path.write_text(manifest.model_dump_json(indent=2, exclude_none=True))
    except OSError as e:
        logger.error(f"Failed to write manifest {manifest_path}: {e}")
        return 1

    imported = sum(record.article_count for record in manifest.documents)
    discarded = sum(record.discarded_count for record in manifest.documents)
    logger.info(f"Batch complete: {len(manifest.documents)} documents")
    logger.info(f"  Articles imported: {imported}")
    logger.info(f"  Articles discarded: {discarded}")
    logger.info(f"  Manifest: {manifest_path}")

    if manifest.failed_count:
        logger.warning(f"  Failed documents: {manifest.failed_count}")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="digest-distiller",
        description="Recover individual articles from aggregated news digests",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    extract_parser = subparsers.add_parser(
        "extract",
        help="Extract articles from a single digest",
        description="Extract the articles listed in a digest's index from a PDF or from its extracted text.",
    )
    extract_parser.add_argument(
        "--pdf",
        type=Path,
        help="Path to a digest PDF",
    )
    extract_parser.add_argument(
        "--text",
        type=Path,
        help="Path to a UTF-8 text file holding the digest's extracted text",
    )
    extract_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="File to write the export to (default: standard output)",
    )
    extract_parser.add_argument(
        "--format",
        choices=sorted(EXPORTERS),
        default=DEFAULT_FORMAT,
        help=f"Export format (default: {DEFAULT_FORMAT})",
    )
    extract_parser.set_defaults(func=extract)

    batch_parser = subparsers.add_parser(
        "batch",
        help="Extract articles from every digest PDF in a directory",
        description="Extract articles from every PDF in a directory, writing one export per document and an export manifest.",
    )
    batch_parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Directory containing digest PDFs",
    )
    batch_parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory for exports (default: {DEFAULT_OUTPUT_DIR})",
    )
    batch_parser.add_argument(
        "--format",
        choices=sorted(EXPORTERS),
        default=DEFAULT_FORMAT,
        help=f"Export format (default: {DEFAULT_FORMAT})",
    )
    batch_parser.set_defaults(func=batch)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
