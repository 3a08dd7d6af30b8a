"""
Programs component - program content management.

Handles program creation, update, deletion and listing for the admin panel
and the public programs pages.

Invariants:
- I1: Slug is unique across programs
- I2: Category is one of the known program categories
- I3: Short description is at most 250 characters
- I4: page_url is /programs/<category>
"""

from __future__ import annotations

from ._impl import ProgramConfig, ProgramService
from .models import (
    CreateProgramInput,
    DeleteProgramInput,
    GetProgramInput,
    ListProgramsInput,
    ProgramListOutput,
    ProgramOutput,
    ProgramValidationError,
    UpdateProgramInput,
)
from .ports import ProgramRepoPort, RulesPort, TimePort


def _build_config(rules: RulesPort | None) -> ProgramConfig:
    """Build program config from rules port."""
    if rules is None:
        return ProgramConfig()

    return ProgramConfig(
        default_icon=rules.default_icon,
        default_image_url=rules.default_image_url,
        default_order=rules.default_order,
    )


def _create_service(
    repo: ProgramRepoPort,
    time_port: TimePort | None,
    rules: RulesPort | None,
) -> ProgramService:
    """Create program service from ports."""
    return ProgramService(repo=repo, time_port=time_port, config=_build_config(rules))


# --- Component Entry Points ---


def run_create(
    inp: CreateProgramInput,
    *,
    repo: ProgramRepoPort,
    time_port: TimePort | None = None,
    rules: RulesPort | None = None,
) -> ProgramOutput:
    """
    Create a new program.

    Args:
        inp: Admin form fields.
        repo: Program repository port.
        time_port: Optional time port.
        rules: Optional rules port for defaults.

    Returns:
        ProgramOutput with the created program or errors.
    """
    service = _create_service(repo, time_port, rules)

    program, errors = service.create(
        title=inp.title,
        description=inp.description,
        short_description=inp.short_description,
        category=inp.category,
        icon=inp.icon,
        order=inp.order,
    )

    return ProgramOutput(program=program, errors=errors, success=not errors)


def run_update(
    inp: UpdateProgramInput,
    *,
    repo: ProgramRepoPort,
    time_port: TimePort | None = None,
    rules: RulesPort | None = None,
) -> ProgramOutput:
    """
    Update an existing program.

    Returns:
        ProgramOutput with the updated program or errors.
    """
    service = _create_service(repo, time_port, rules)

    program, errors = service.update(
        program_id=inp.program_id,
        title=inp.title,
        description=inp.description,
        short_description=inp.short_description,
        category=inp.category,
        icon=inp.icon,
        order=inp.order,
    )

    return ProgramOutput(program=program, errors=errors, success=not errors)


def run_delete(
    inp: DeleteProgramInput,
    *,
    repo: ProgramRepoPort,
    time_port: TimePort | None = None,
    rules: RulesPort | None = None,
) -> ProgramOutput:
    """Delete a program."""
    service = _create_service(repo, time_port, rules)

    if not service.delete(inp.program_id):
        return ProgramOutput(
            program=None,
            errors=[
                ProgramValidationError(
                    code="not_found",
                    message=f"Program {inp.program_id} not found",
                )
            ],
            success=False,
        )

    return ProgramOutput(program=None, errors=[], success=True)


def run_get(
    inp: GetProgramInput,
    *,
    repo: ProgramRepoPort,
    time_port: TimePort | None = None,
    rules: RulesPort | None = None,
) -> ProgramOutput:
    """Get a program by ID or slug."""
    service = _create_service(repo, time_port, rules)

    if inp.program_id is not None:
        program = service.get(inp.program_id)
    elif inp.slug is not None:
        program = service.get_by_slug(inp.slug)
    else:
        return ProgramOutput(
            program=None,
            errors=[
                ProgramValidationError(
                    code="invalid_input",
                    message="Either program_id or slug must be provided",
                )
            ],
            success=False,
        )

    if program is None:
        return ProgramOutput(
            program=None,
            errors=[ProgramValidationError(code="not_found", message="Program not found")],
            success=False,
        )

    return ProgramOutput(program=program, errors=[], success=True)


def run_list(
    inp: ListProgramsInput,
    *,
    repo: ProgramRepoPort,
    time_port: TimePort | None = None,
    rules: RulesPort | None = None,
) -> ProgramListOutput:
    """List programs in display order."""
    service = _create_service(repo, time_port, rules)

    programs = service.list_active() if inp.active_only else service.list_all()
    return ProgramListOutput(programs=tuple(programs), errors=[], success=True)
