import os
from collections.abc import Iterator
from pathlib import Path
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from sasi_site.adapters.sqlite.migrator import SQLiteMigrator
from sasi_site.api.deps import get_program_repo, get_rules
from sasi_site.api.main import app
from sasi_site.domain.entities import Program
from sasi_site.rules.loader import load_rules
from sasi_site.rules.models import SiteRules

PROJECT_ROOT = Path(__file__).parent.parent


class InMemoryProgramRepo:
    """In-memory program repository for API tests."""

    def __init__(self) -> None:
        self._programs: dict[UUID, Program] = {}

    def get_by_id(self, program_id: UUID) -> Program | None:
        return self._programs.get(program_id)

    def get_by_slug(self, slug: str) -> Program | None:
        for program in self._programs.values():
            if program.slug == slug:
                return program
        return None

    def save(self, program: Program) -> Program:
        self._programs[program.id] = program
        return program

    def delete(self, program_id: UUID) -> None:
        self._programs.pop(program_id, None)

    def list_all(self) -> list[Program]:
        return list(self._programs.values())

    def clear(self) -> None:
        self._programs.clear()


@pytest.fixture
def site_rules() -> SiteRules:
    """The real rules file from the project root."""
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def program_repo() -> InMemoryProgramRepo:
    return InMemoryProgramRepo()


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    """Temporary SQLite database with all migrations applied."""
    path = os.path.join(str(tmp_path), "sasi.db")
    SQLiteMigrator(path).run_migrations()
    return path


@pytest.fixture
def client(program_repo: InMemoryProgramRepo, site_rules: SiteRules) -> Iterator[TestClient]:
    """
    Client for the full app with the program store in memory.

    The lifespan is not run, so the middleware uses the site route table
    with the default preferred host.
    """
    app.dependency_overrides[get_program_repo] = lambda: program_repo
    app.dependency_overrides[get_rules] = lambda: site_rules
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()
