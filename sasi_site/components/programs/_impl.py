"""
ProgramService - admin CRUD for program entries.

Backs the programs pages (education, health, nutrition, events, ...) with
entries managed from the admin panel.

Key behaviors:
- Slugs are derived from titles and must be unique
- Slugs only change when the title changes
- page_url follows the category and only changes when the category changes
- New programs get the default image, empty highlights/stats, and are active
- Listing order: ``order`` ascending, newest first within the same order
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID, uuid4

from sasi_site.domain.entities import (
    PROGRAM_CATEGORIES,
    Program,
    ProgramImage,
)

from .models import ProgramValidationError
from .ports import ProgramRepoPort, TimePort

logger = logging.getLogger(__name__)

SHORT_DESCRIPTION_MAX = 250

_SLUG_SEPARATORS = re.compile(r"[^a-z0-9]+")


# --- Configuration ---


@dataclass(frozen=True)
class ProgramConfig:
    """Program configuration from rules."""

    default_icon: str = "fas fa-heart"
    default_image_url: str = (
        "https://ik.imagekit.io/l15cczdgu/Assets/logo.png?updatedAt=1761389196069"
    )
    default_order: int = 1


DEFAULT_CONFIG = ProgramConfig()


# --- Helpers ---


def slugify(title: str) -> str:
    """Lower-case slug with runs of other characters collapsed to '-'."""
    return _SLUG_SEPARATORS.sub("-", title.lower()).strip("-")


def page_url_for(category: str) -> str:
    """Public page a program category lives on."""
    return f"/programs/{category}"


def sort_programs(programs: list[Program]) -> list[Program]:
    """Order ascending, newest first within an order."""
    return sorted(programs, key=lambda p: (p.order, -p.created_at.timestamp()))


# --- Validation ---


def validate_program_fields(
    title: str | None,
    description: str | None,
    short_description: str | None,
    category: str | None,
    icon: str | None,
) -> list[ProgramValidationError]:
    """Validate the admin form fields."""
    errors: list[ProgramValidationError] = []

    if not title or not title.strip():
        errors.append(
            ProgramValidationError(
                code="title_required",
                message="Title is required",
                field="title",
            )
        )
    elif not slugify(title):
        errors.append(
            ProgramValidationError(
                code="slug_required",
                message="Title must contain at least one letter or digit",
                field="title",
            )
        )

    if not description or not description.strip():
        errors.append(
            ProgramValidationError(
                code="description_required",
                message="Description is required",
                field="description",
            )
        )

    if not short_description or not short_description.strip():
        errors.append(
            ProgramValidationError(
                code="short_description_required",
                message="Short description is required",
                field="short_description",
            )
        )
    elif len(short_description) > SHORT_DESCRIPTION_MAX:
        errors.append(
            ProgramValidationError(
                code="short_description_too_long",
                message=f"Short description must be at most {SHORT_DESCRIPTION_MAX} characters",
                field="short_description",
            )
        )

    if category not in PROGRAM_CATEGORIES:
        errors.append(
            ProgramValidationError(
                code="invalid_category",
                message=f"Category must be one of: {', '.join(PROGRAM_CATEGORIES)}",
                field="category",
            )
        )

    if not icon or not icon.strip():
        errors.append(
            ProgramValidationError(
                code="icon_required",
                message="Icon is required",
                field="icon",
            )
        )

    return errors


# --- Program Service ---


class ProgramService:
    """Manages program entries with validation."""

    def __init__(
        self,
        repo: ProgramRepoPort,
        time_port: TimePort | None = None,
        config: ProgramConfig | None = None,
    ) -> None:
        self._repo = repo
        self._time_port = time_port
        self._config = config or DEFAULT_CONFIG

    def _now(self) -> datetime:
        if self._time_port:
            return self._time_port.now_utc()
        return datetime.now(UTC)

    def _slug_taken(self, slug: str, program_id: UUID | None = None) -> bool:
        existing = self._repo.get_by_slug(slug)
        return existing is not None and existing.id != program_id

    def get(self, program_id: UUID) -> Program | None:
        """Get program by ID."""
        return self._repo.get_by_id(program_id)

    def get_by_slug(self, slug: str) -> Program | None:
        """Get program by slug."""
        return self._repo.get_by_slug(slug.lower())

    def list_all(self) -> list[Program]:
        """All programs in display order."""
        return sort_programs(self._repo.list_all())

    def list_active(self) -> list[Program]:
        """Active programs in display order."""
        return [p for p in self.list_all() if p.is_active]

    def create(
        self,
        title: str,
        description: str,
        short_description: str,
        category: str,
        icon: str | None = None,
        order: int | None = None,
    ) -> tuple[Program | None, list[ProgramValidationError]]:
        """
        Create a program from the admin form.

        Returns:
            Tuple of (program, errors). Program is None if validation fails.
        """
        icon = icon or self._config.default_icon
        errors = validate_program_fields(title, description, short_description, category, icon)
        if errors:
            return None, errors

        title = title.strip()
        slug = slugify(title)
        if self._slug_taken(slug):
            return None, [
                ProgramValidationError(
                    code="slug_taken",
                    message=f"A program with slug '{slug}' already exists",
                    field="title",
                )
            ]

        now = self._now()
        program = Program(
            id=uuid4(),
            title=title,
            slug=slug,
            category=category,  # type: ignore[arg-type]  # validated above
            icon=icon,
            short_description=short_description,
            full_description=description,
            highlights=[],
            stats=[],
            image=ProgramImage(url=self._config.default_image_url, alt=title),
            is_active=True,
            order=order or self._config.default_order,
            page_url=page_url_for(category),
            created_at=now,
            updated_at=now,
        )

        saved = self._repo.save(program)
        logger.info("Created program %s (%s)", saved.slug, saved.category)
        return saved, []

    def update(
        self,
        program_id: UUID,
        title: str | None,
        description: str | None,
        short_description: str | None,
        category: str | None,
        icon: str | None,
        order: int | None = None,
    ) -> tuple[Program | None, list[ProgramValidationError]]:
        """
        Update a program from the admin form.

        Every text field must be resubmitted.
        """
        existing = self._repo.get_by_id(program_id)
        if existing is None:
            return None, [
                ProgramValidationError(
                    code="not_found",
                    message=f"Program {program_id} not found",
                )
            ]

        errors = validate_program_fields(title, description, short_description, category, icon)
        if errors:
            return existing, errors

        assert title is not None and category is not None
        title = title.strip()
        slug = slugify(title) if title != existing.title else existing.slug
        if slug != existing.slug and self._slug_taken(slug, program_id):
            return existing, [
                ProgramValidationError(
                    code="slug_taken",
                    message=f"A program with slug '{slug}' already exists",
                    field="title",
                )
            ]

        page_url = page_url_for(category) if category != existing.category else existing.page_url

        updated = existing.model_copy(
            update={
                "title": title,
                "slug": slug,
                "full_description": description,
                "short_description": short_description,
                "category": category,
                "icon": icon,
                "order": order or self._config.default_order,
                "page_url": page_url,
                "updated_at": self._now(),
            }
        )

        saved = self._repo.save(updated)
        logger.info("Updated program %s", saved.slug)
        return saved, []

    def delete(self, program_id: UUID) -> bool:
        """Delete a program."""
        program = self._repo.get_by_id(program_id)
        if program is None:
            return False

        self._repo.delete(program_id)
        logger.info("Deleted program %s", program.slug)
        return True


# --- Factory ---


def create_program_service(
    repo: ProgramRepoPort,
    time_port: TimePort | None = None,
    config: ProgramConfig | None = None,
) -> ProgramService:
    """Create a ProgramService."""
    return ProgramService(repo=repo, time_port=time_port, config=config)
