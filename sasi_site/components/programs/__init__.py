"""
Programs component - program content management.
"""

from ._impl import (
    SHORT_DESCRIPTION_MAX,
    ProgramConfig,
    ProgramService,
    create_program_service,
    page_url_for,
    slugify,
    sort_programs,
    validate_program_fields,
)
from .component import (
    run_create,
    run_delete,
    run_get,
    run_list,
    run_update,
)
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
from .seed import seed_data, seed_programs

__all__ = [
    # Entry points
    "run_create",
    "run_delete",
    "run_get",
    "run_list",
    "run_update",
    # Input models
    "CreateProgramInput",
    "DeleteProgramInput",
    "GetProgramInput",
    "ListProgramsInput",
    "UpdateProgramInput",
    # Output models
    "ProgramListOutput",
    "ProgramOutput",
    "ProgramValidationError",
    # Ports
    "ProgramRepoPort",
    "RulesPort",
    "TimePort",
    # _impl re-exports
    "SHORT_DESCRIPTION_MAX",
    "ProgramConfig",
    "ProgramService",
    "create_program_service",
    "page_url_for",
    "slugify",
    "sort_programs",
    "validate_program_fields",
    # Seeding
    "seed_data",
    "seed_programs",
]
