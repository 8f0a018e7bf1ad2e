"""Verify that the initial migration creates every mapped table."""

import ast
from pathlib import Path

from hulltrack.core.database import Base
import hulltrack.models  # noqa: F401  (registers every table on Base.metadata)

MIGRATION_FILE = (
    Path(__file__).resolve().parent.parent
    / "alembic"
    / "versions"
    / "001_initial_schema.py"
)


def _parse_module() -> ast.Module:
    return ast.parse(MIGRATION_FILE.read_text())


def _op_table_names(tree: ast.Module, op_name: str) -> list[str]:
    names = []
    for node in ast.walk(tree):
        if (
            isinstance(node, ast.Call)
            and isinstance(node.func, ast.Attribute)
            and node.func.attr == op_name
            and node.args
            and isinstance(node.args[0], ast.Constant)
        ):
            names.append(node.args[0].value)
    return names


def test_migration_001_revision():
    tree = _parse_module()
    assignments: dict[str, object] = {}
    for node in ast.walk(tree):
        if isinstance(node, ast.AnnAssign) and isinstance(node.target, ast.Name):
            if node.target.id in ("revision", "down_revision") and node.value:
                assignments[node.target.id] = ast.literal_eval(node.value)
    assert assignments["revision"] == "001_initial_schema"
    assert assignments["down_revision"] is None


def test_migration_001_creates_all_model_tables():
    created = _op_table_names(_parse_module(), "create_table")
    assert sorted(created) == sorted(Base.metadata.tables)


def test_migration_001_downgrade_drops_everything():
    tree = _parse_module()
    assert sorted(_op_table_names(tree, "drop_table")) == sorted(_op_table_names(tree, "create_table"))
