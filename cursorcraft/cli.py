"""Command-line interface for CursorCraft.

Examples::

    cursorcraft generate "My Cool App" -p web -f Next.js --package auth --package zod
    cursorcraft generate "My Cool App" -p web -f Next.js -o ./output
    cursorcraft generate "Acme" --document cursor-rules
    cursorcraft catalog --platform mobile --framework react-native
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from rich.table import Table

from cursorcraft.catalog import (
    PLATFORMS,
    find_framework,
    get_frameworks_by_platform,
    get_packages_by_platform_and_framework,
)
from cursorcraft.config import Settings
from cursorcraft.errors import CursorCraftError
from cursorcraft.generator.engine import DocumentEngine
from cursorcraft.generator.exporter import DocumentExporter
from cursorcraft.generator.models import (
    DocumentKind,
    GeneratedDocumentSet,
    Platform,
    ProjectConfig,
)
from cursorcraft.service import ProjectService, validate_config
from cursorcraft.store import create_document_store, create_project_store
from cursorcraft.utils import (
    console,
    print_document,
    print_error,
    print_header,
    print_success,
    print_summary_table,
    save_json,
)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cursorcraft",
        description="CursorCraft -- generate starter documents for a new project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            '  cursorcraft generate "My Cool App" -p web -f Next.js --package auth\n'
            '  cursorcraft generate "My Cool App" -o ./output\n'
            "  cursorcraft catalog --platform api\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen = subparsers.add_parser("generate", help="Render the project documents")
    gen.add_argument("name", help="Project name")
    gen.add_argument("--description", "-d", default="", help="Short project description")
    gen.add_argument(
        "--platform", "-p",
        choices=[p.value for p in Platform],
        default=None,
        help="Target platform",
    )
    gen.add_argument("--framework", "-f", default=None, help="Framework name, e.g. Next.js")
    gen.add_argument(
        "--package",
        dest="packages",
        action="append",
        default=[],
        help="Package id to include (repeatable)",
    )
    gen.add_argument("--template", default="", help="Template label")
    gen.add_argument(
        "--document",
        choices=[k.slug for k in DocumentKind],
        default=None,
        help="Print only this document (default: all five)",
    )
    gen.add_argument(
        "--output", "-o",
        nargs="?",
        const="",
        default=None,
        help=(
            "Write the documents into OUTPUT/<project-slug>/ instead of printing "
            "(without a value: CURSORCRAFT_OUTPUT_DIR, default ./output)"
        ),
    )
    gen.add_argument(
        "--json",
        dest="json_path",
        default=None,
        help="Write the documents as one JSON object (camelCase keys) to this file",
    )
    gen.add_argument("--pretty", action="store_true", help="Render Markdown in the terminal")
    gen.add_argument("--strict", action="store_true", help="Reject a blank project name")
    gen.add_argument("--save", action="store_true", help="Also persist the project")
    gen.add_argument("--user", default=None, help="Owner id used with --save")

    cat = subparsers.add_parser("catalog", help="List platforms, frameworks and packages")
    cat.add_argument("--platform", "-p", choices=[p.value for p in Platform], default=None)
    cat.add_argument(
        "--framework", "-f", default=None, help="Framework id or name to filter packages"
    )

    return parser


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _cmd_generate(args: argparse.Namespace, settings: Settings) -> None:
    config = ProjectConfig(
        name=args.name,
        description=args.description,
        platform=args.platform,
        framework=args.framework,
        selected_packages=args.packages,
        template=args.template,
    )
    strict = args.strict or settings.strict_validation

    if args.save:
        service = ProjectService(
            create_project_store(settings),
            create_document_store(settings),
            strict=strict,
        )
        created = asyncio.run(service.create_project(config, user_id=args.user))
        documents = created.documents
        print_success(f"Saved project {created.record.name!r} ({created.record.id})")
    else:
        validate_config(config, strict=strict)
        documents = DocumentEngine().generate_all(config)

    if args.output is not None:
        output_dir = Path(args.output) if args.output else settings.export.output_dir
        _export(documents, config.name, output_dir)
    if args.json_path:
        path = save_json(documents.as_dict(), args.json_path)
        print_success(f"Wrote {path}")
    if args.output is None and not args.json_path:
        _print_documents(documents, args.document, args.pretty)


def _export(documents: GeneratedDocumentSet, project_name: str, output_dir: Path) -> None:
    paths = asyncio.run(DocumentExporter().export(documents, project_name, output_dir))
    print_summary_table(
        {kind.display_title: str(path) for kind, path in zip(DocumentKind, paths)},
        title=f"Documents for {project_name or 'untitled project'}",
    )
    print_success(f"Wrote {len(paths)} documents")


def _print_documents(
    documents: GeneratedDocumentSet, only: str | None, pretty: bool
) -> None:
    if only:
        print_document(documents.get(DocumentKind.from_slug(only)), pretty=pretty)
        return
    for kind, content in documents.items():
        print_header(f"{kind.display_title} ({kind.filename})")
        print_document(content, pretty=pretty)


def _cmd_catalog(args: argparse.Namespace) -> None:
    if args.platform is None:
        table = Table(title="Platforms", header_style="bold cyan")
        table.add_column("Id", no_wrap=True)
        table.add_column("Name")
        table.add_column("Frameworks")
        for info in PLATFORMS:
            table.add_row(info.id.value, info.name, ", ".join(f.name for f in info.frameworks))
        console.print(table)
        return

    frameworks = Table(title=f"Frameworks for {args.platform}", header_style="bold cyan")
    frameworks.add_column("Id", no_wrap=True)
    frameworks.add_column("Name")
    frameworks.add_column("Category")
    for fw in get_frameworks_by_platform(args.platform):
        frameworks.add_row(fw.id, fw.name, fw.category)
    console.print(frameworks)

    if args.framework:
        match = find_framework(args.framework, args.platform)
        framework_id = match.id if match else args.framework.strip().lower()
        packages = Table(
            title=f"Packages for {args.platform} / {framework_id}", header_style="bold cyan"
        )
        packages.add_column("Id", no_wrap=True)
        packages.add_column("Name")
        packages.add_column("Category")
        for pkg in get_packages_by_platform_and_framework(args.platform, framework_id):
            packages.add_row(pkg.id, pkg.name, pkg.category)
        console.print(packages)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``cursorcraft`` / ``python -m cursorcraft``."""
    args = build_parser().parse_args(argv)

    try:
        if args.command == "generate":
            _cmd_generate(args, Settings.from_env())
        elif args.command == "catalog":
            _cmd_catalog(args)
    except CursorCraftError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
