import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from sasi_site.adapters.clock import SystemClock
from sasi_site.adapters.sqlite.repos import SQLiteProgramRepo
from sasi_site.components.programs import ProgramConfig, ProgramService
from sasi_site.rules.loader import load_rules
from sasi_site.rules.models import SiteRules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("SASI_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "sasi.db")
        self.rules_path = Path(os.environ.get("SASI_RULES_PATH", "./rules.yaml"))


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
def get_rules(settings: Settings = Depends(get_settings)) -> SiteRules:
    return _load_rules_cached(settings.rules_path)


@lru_cache
def _load_rules_cached(path: Path) -> SiteRules:
    return load_rules(path)


# --- Repos ---
def get_program_repo(settings: Settings = Depends(get_settings)) -> SQLiteProgramRepo:
    return SQLiteProgramRepo(settings.db_path)


# --- Component Services ---
def get_program_service(
    repo: SQLiteProgramRepo = Depends(get_program_repo),
    rules: SiteRules = Depends(get_rules),
) -> ProgramService:
    """Get programs component service."""
    return ProgramService(
        repo=repo,
        time_port=SystemClock(),
        config=ProgramConfig(
            default_icon=rules.programs.default_icon,
            default_image_url=rules.programs.default_image_url,
            default_order=rules.programs.default_order,
        ),
    )
