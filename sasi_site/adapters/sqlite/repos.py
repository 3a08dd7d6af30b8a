import json
import sqlite3
from datetime import datetime
from typing import Any
from uuid import UUID

from sasi_site.domain.entities import Program, ProgramImage, ProgramStat


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


class SQLiteProgramRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        return conn

    def save(self, program: Program) -> Program:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO programs (
                    id, title, slug, category, icon,
                    short_description, full_description,
                    highlights_json, stats_json, image_json,
                    is_active, sort_order, page_url, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    title=excluded.title,
                    slug=excluded.slug,
                    category=excluded.category,
                    icon=excluded.icon,
                    short_description=excluded.short_description,
                    full_description=excluded.full_description,
                    highlights_json=excluded.highlights_json,
                    stats_json=excluded.stats_json,
                    image_json=excluded.image_json,
                    is_active=excluded.is_active,
                    sort_order=excluded.sort_order,
                    page_url=excluded.page_url,
                    updated_at=excluded.updated_at
            """,
                (
                    str(program.id),
                    program.title,
                    program.slug,
                    program.category,
                    program.icon,
                    program.short_description,
                    program.full_description,
                    json.dumps(program.highlights),
                    json.dumps([s.model_dump() for s in program.stats]),
                    json.dumps(program.image.model_dump()),
                    1 if program.is_active else 0,
                    program.order,
                    program.page_url,
                    program.created_at.isoformat(),
                    program.updated_at.isoformat(),
                ),
            )
            conn.commit()
            return program
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def get_by_id(self, program_id: UUID) -> Program | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT * FROM programs WHERE id = ?", (str(program_id),)
            ).fetchone()
            return self._map_row(row) if row else None
        finally:
            conn.close()

    def get_by_slug(self, slug: str) -> Program | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM programs WHERE slug = ?", (slug,)).fetchone()
            return self._map_row(row) if row else None
        finally:
            conn.close()

    def delete(self, program_id: UUID) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM programs WHERE id = ?", (str(program_id),))
            conn.commit()
        finally:
            conn.close()

    def list_all(self) -> list[Program]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT * FROM programs ORDER BY sort_order ASC, created_at DESC"
            ).fetchall()
            return [self._map_row(r) for r in rows]
        finally:
            conn.close()

    def clear(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM programs")
            conn.commit()
        finally:
            conn.close()

    def _map_row(self, row: dict[str, Any]) -> Program:
        return Program(
            id=UUID(row["id"]),
            title=row["title"],
            slug=row["slug"],
            category=row["category"],
            icon=row["icon"],
            short_description=row["short_description"],
            full_description=row["full_description"],
            highlights=json.loads(row["highlights_json"]),
            stats=[ProgramStat(**s) for s in json.loads(row["stats_json"])],
            image=ProgramImage(**json.loads(row["image_json"])),
            is_active=bool(row["is_active"]),
            order=row["sort_order"],
            page_url=row["page_url"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )
