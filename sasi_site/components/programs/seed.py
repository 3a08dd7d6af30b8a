"""
Seed data for the programs pages.
"""

from __future__ import annotations

import logging

from sasi_site.domain.entities import Program, ProgramImage, ProgramStat

from .ports import ProgramRepoPort

logger = logging.getLogger(__name__)


def _program(
    *,
    title: str,
    slug: str,
    icon: str,
    short_description: str,
    full_description: str,
    highlights: list[str],
    stats: list[tuple[str, str, str]],
    image_url: str,
    order: int,
) -> Program:
    return Program(
        title=title,
        slug=slug,
        category=slug,  # type: ignore[arg-type]  # seed slugs are categories
        icon=icon,
        short_description=short_description,
        full_description=full_description,
        highlights=highlights,
        stats=[ProgramStat(icon=i, value=v, label=label) for i, v, label in stats],
        image=ProgramImage(url=image_url, alt=title),
        is_active=True,
        order=order,
        page_url=f"/programs/{slug}",
    )


def seed_data() -> list[Program]:
    """The programs shown on the live site."""
    return [
        _program(
            title="Education Support",
            slug="education",
            icon="fas fa-book",
            short_description=(
                "Helping street children transition from begging to learning through "
                "mainstream school enrollment, academic support, and skill development programs."
            ),
            full_description=(
                "Our education program focuses on breaking the cycle of poverty through "
                "education. We provide comprehensive support including school admissions, "
                "academic tutoring, and vocational training to ensure every child has access "
                "to quality education."
            ),
            highlights=[
                "School Admission Assistance",
                "Academic Programs (3rd-12th Grade)",
                "Computer & Skill Training",
            ],
            stats=[
                ("fas fa-users", "170+", "Students"),
                ("fas fa-chart-line", "85%", "Retention"),
            ],
            image_url=(
                "https://images.unsplash.com/photo-1503676260728-1c00da094a0b"
                "?w=800&h=500&fit=crop"
            ),
            order=1,
        ),
        _program(
            title="Health & Wellness",
            slug="health",
            icon="fas fa-stethoscope",
            short_description=(
                "Comprehensive healthcare services including regular check-ups, dental care, "
                "and wellness programs for holistic development."
            ),
            full_description=(
                "We provide essential healthcare services to street children and their "
                "families, ensuring they receive regular medical check-ups, dental care, and "
                "preventive health education."
            ),
            highlights=["Monthly Health Camps", "Dental Check-ups", "Preventive Care"],
            stats=[
                ("fas fa-heartbeat", "180+", "Tests"),
                ("fas fa-procedures", "54", "ECGs"),
            ],
            image_url=(
                "https://images.unsplash.com/photo-1576091160399-112ba8d25d1d"
                "?w=600&h=400&fit=crop"
            ),
            order=2,
        ),
        _program(
            title="Food & Nutrition",
            slug="nutrition",
            icon="fas fa-utensils",
            short_description=(
                "Daily nutritious meals and emergency food support ensuring no child goes "
                "hungry while focusing on their education."
            ),
            full_description=(
                "Our nutrition program ensures that no child goes hungry. We provide daily "
                "meals, emergency food relief, and nutrition education to families in need."
            ),
            highlights=["Daily Meal Programs", "Thursday Langar Day", "Emergency Food Relief"],
            stats=[
                ("fas fa-users-cog", "600+", "Families"),
                ("fas fa-utensils", "Daily", "Meals"),
            ],
            image_url=(
                "https://images.unsplash.com/photo-1488521787991-ed7bbaae773c"
                "?w=600&h=400&fit=crop"
            ),
            order=3,
        ),
        _program(
            title="Special Events",
            slug="events",
            icon="fas fa-calendar-star",
            short_description=(
                "Cultural celebrations, festivals, and special occasions bringing joy and "
                "building community among children and families."
            ),
            full_description=(
                "We organize regular events, festivals, and cultural celebrations to bring "
                "joy, build community, and create memorable experiences for the children we "
                "serve."
            ),
            highlights=["Festival Celebrations", "Birthday Parties", "Cultural Programs"],
            stats=[
                ("fas fa-calendar-check", "12+", "Events"),
                ("fas fa-child", "300+", "Kids"),
            ],
            image_url=(
                "https://images.unsplash.com/photo-1511632765486-a01980e01a18"
                "?w=600&h=400&fit=crop"
            ),
            order=4,
        ),
    ]


def seed_programs(repo: ProgramRepoPort) -> list[Program]:
    """Replace every stored program with the seed data."""
    repo.clear()
    logger.info("Cleared existing programs")

    saved = [repo.save(program) for program in seed_data()]
    for program in saved:
        logger.info("Seeded %s (%s)", program.title, program.category)
    return saved
