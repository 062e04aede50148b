"""Boundary tests for the side-effect-free diff and safety core."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_safety_core_does_not_import_io_or_orchestration_modules() -> None:
    package_dir = _project_root() / "src" / "prisma_safety"
    core_modules = (
        *sorted((package_dir / "schema_diff").glob("*.py")),
        *sorted((package_dir / "safety_evaluation").glob("*.py")),
    )
    forbidden_import_fragments = (
        "prisma_safety.run_execution",
        "prisma_safety.revision_retrieval",
        "prisma_safety.configuration",
        "prisma_safety.cli",
        "import subprocess",
        "import logging",
    )

    assert core_modules
    for module_path in core_modules:
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
