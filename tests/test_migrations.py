# /tests/test_migrations.py

import importlib.util
from pathlib import Path

from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import create_engine, inspect, text

MIGRATION = Path(__file__).resolve().parent.parent / "alembic" / "versions" / "create_templates_table.py"


def _load_migration():
    spec = importlib.util.spec_from_file_location("create_templates_table", MIGRATION)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_templates_migration_runs_on_sqlite():
    migration = _load_migration()
    engine = create_engine("sqlite://")

    with engine.begin() as connection:
        with Operations.context(MigrationContext.configure(connection)):
            migration.upgrade()
        connection.execute(text("INSERT INTO templates (id, prompt) VALUES ('tpl_1', 'go, gin')"))
        row = connection.execute(text("SELECT s3_url, downloads, created_at FROM templates")).one()

    assert row.s3_url == ""
    assert row.downloads == 1
    assert row.created_at is not None
    assert {index["name"] for index in inspect(engine).get_indexes("templates")} == {
        "ix_templates_id", "ix_templates_prompt", "ix_templates_user_id",
    }


def test_templates_migration_downgrade_drops_the_table():
    migration = _load_migration()
    engine = create_engine("sqlite://")

    with engine.begin() as connection:
        with Operations.context(MigrationContext.configure(connection)):
            migration.upgrade()
            migration.downgrade()

    assert "templates" not in inspect(engine).get_table_names()
