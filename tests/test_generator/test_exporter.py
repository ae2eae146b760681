"""Unit tests for DocumentExporter (cursorcraft.generator.exporter)."""

from __future__ import annotations

from pathlib import Path

import pytest

from cursorcraft.generator import DocumentExporter, generate_all_document_set


class TestProjectDir:
    @pytest.mark.unit
    def test_sanitized_name(self, tmp_path: Path):
        assert DocumentExporter().project_dir(tmp_path, "My Cool App") == tmp_path / "my-cool-app"

    @pytest.mark.unit
    def test_blank_name_falls_back(self, tmp_path: Path):
        assert DocumentExporter().project_dir(tmp_path, "  ") == tmp_path / "untitled-project"


class TestExport:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_writes_all_documents(self, tmp_path: Path, acme_config):
        documents = generate_all_document_set(acme_config)
        paths = await DocumentExporter().export(documents, acme_config.name, tmp_path)

        assert [p.name for p in paths] == [
            "PRD.md",
            "CODE_STYLE.md",
            ".cursorrules",
            "PROGRESS.md",
            "README.md",
        ]
        assert all(p.parent == tmp_path / "acme" for p in paths)

        cursorrules = (tmp_path / "acme" / ".cursorrules").read_text(encoding="utf-8")
        assert cursorrules == documents.cursor_rules + "\n"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_overwrites_existing_files(self, tmp_path: Path, acme_config, minimal_config):
        exporter = DocumentExporter()
        await exporter.export(generate_all_document_set(acme_config), "Acme", tmp_path)
        await exporter.export(generate_all_document_set(minimal_config), "Acme", tmp_path)

        prd = (tmp_path / "acme" / "PRD.md").read_text(encoding="utf-8")
        assert "Dependencies:" not in prd
