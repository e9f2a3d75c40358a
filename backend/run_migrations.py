#!/usr/bin/env python3
"""
Apply the SQL files in migrations/ to the monitoring database.

Each file runs once, in name order, inside its own transaction. Applied
files are recorded with a checksum in the _migrations ledger so an edited
migration is reported instead of silently re-run.

Usage:
    python run_migrations.py            # apply pending files
    python run_migrations.py --status   # ledger vs. files on disk
    python run_migrations.py --dry-run  # list pending files only

Needs SUPABASE_DB_URL (direct Postgres connection string, not the REST URL).
"""

import argparse
import hashlib
import sys
from pathlib import Path
from typing import NamedTuple

import psycopg2
from psycopg2 import sql
from rich.console import Console
from rich.table import Table

from shared.config import get_settings

console = Console()

MIGRATIONS_DIR = Path(__file__).parent / "migrations"
MIGRATIONS_TABLE = "_migrations"

LEDGER_DDL = sql.SQL(
    "CREATE TABLE IF NOT EXISTS {} ("
    " id SERIAL PRIMARY KEY,"
    " name VARCHAR(255) NOT NULL UNIQUE,"
    " checksum VARCHAR(64) NOT NULL,"
    " applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW())"
)


class Migration(NamedTuple):
    name: str
    path: Path
    checksum: str


def checksum_of(content: str) -> str:
    """Short content hash used to detect edited migrations."""
    return hashlib.sha256(content.encode()).hexdigest()[:16]


def discover(migrations_dir: Path = MIGRATIONS_DIR) -> list[Migration]:
    """SQL files in migrations_dir, sorted by name."""
    if not migrations_dir.is_dir():
        console.print(f"[yellow]No migrations directory at {migrations_dir}[/yellow]")
        return []
    return [
        Migration(path.name, path, checksum_of(path.read_text()))
        for path in sorted(migrations_dir.glob("*.sql"))
    ]


def find_pending(applied: dict[str, dict], migrations_dir: Path = MIGRATIONS_DIR) -> list[Migration]:
    """
    Migrations on disk that the ledger does not list.

    Files whose checksum differs from the recorded one are reported and
    left alone.
    """
    pending = []
    for migration in discover(migrations_dir):
        recorded = applied.get(migration.name)
        if recorded is None:
            pending.append(migration)
        elif recorded["checksum"] != migration.checksum:
            console.print(f"[yellow]{migration.name} was edited after being applied[/yellow]")
    return pending


def connect():
    """Open a psycopg2 connection to SUPABASE_DB_URL or exit."""
    dsn = get_settings().supabase_db_url
    if not dsn:
        console.print("[red]SUPABASE_DB_URL is not set[/red]")
        sys.exit(1)
    try:
        return psycopg2.connect(dsn)
    except psycopg2.Error as e:
        console.print(f"[red]Cannot connect to the database:[/red] {e}")
        sys.exit(1)


def load_ledger(conn) -> dict[str, dict]:
    """Create the ledger table if needed and return its rows keyed by file name."""
    table = sql.Identifier(MIGRATIONS_TABLE)
    with conn.cursor() as cur:
        cur.execute(LEDGER_DDL.format(table))
        cur.execute(sql.SQL("SELECT name, checksum, applied_at FROM {}").format(table))
        rows = cur.fetchall()
    conn.commit()
    return {name: {"checksum": checksum, "applied_at": applied_at} for name, checksum, applied_at in rows}


def apply(conn, migration: Migration) -> None:
    """Run one file and record it, both in the same transaction."""
    console.print(f"[blue]Applying[/blue] {migration.name}")
    try:
        with conn.cursor() as cur:
            cur.execute(migration.path.read_text())
            cur.execute(
                sql.SQL("INSERT INTO {} (name, checksum) VALUES (%s, %s)").format(
                    sql.Identifier(MIGRATIONS_TABLE)
                ),
                (migration.name, migration.checksum),
            )
        conn.commit()
    except psycopg2.Error as e:
        conn.rollback()
        console.print(f"[red]{migration.name} failed:[/red] {e}")
        raise


def print_status(applied: dict[str, dict], pending: list[Migration]) -> None:
    if not applied and not pending:
        console.print("[dim]No migrations found.[/dim]")
        return

    table = Table(title="Migrations")
    table.add_column("File", style="cyan")
    table.add_column("State")
    table.add_column("Applied at")
    table.add_column("Checksum")

    for name in sorted(applied):
        applied_at = applied[name]["applied_at"]
        when = f"{applied_at:%Y-%m-%d %H:%M:%S}" if applied_at else ""
        table.add_row(name, "[green]applied[/green]", when, applied[name]["checksum"])
    for migration in pending:
        table.add_row(migration.name, "[yellow]pending[/yellow]", "", migration.checksum)

    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="Apply monitoring database migrations")
    parser.add_argument("--status", action="store_true", help="show ledger and pending files")
    parser.add_argument("--dry-run", action="store_true", help="list pending files without running them")
    args = parser.parse_args()

    conn = connect()
    try:
        applied = load_ledger(conn)
        pending = find_pending(applied)

        if args.status:
            print_status(applied, pending)
            return
        if not pending:
            console.print("[green]Database is up to date[/green]")
            return

        for migration in pending:
            if args.dry_run:
                console.print(f"[cyan]pending[/cyan] {migration.name}")
            else:
                apply(conn, migration)

        if not args.dry_run:
            console.print(f"[green]Applied {len(pending)} migration(s)[/green]")
    finally:
        conn.close()


if __name__ == "__main__":
    main()
