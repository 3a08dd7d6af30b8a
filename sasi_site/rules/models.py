from pydantic import BaseModel, Field


class SiteInfoRules(BaseModel):
    name: str

class SeoRules(BaseModel):
    preferred_host: str

class ProgramRules(BaseModel):
    default_icon: str = "fas fa-heart"
    default_image_url: str
    default_order: int = 1

class OpsRules(BaseModel):
    log_level: str = "INFO"
    required_env: list[str] = Field(default_factory=list)

class SiteRules(BaseModel):
    site: SiteInfoRules
    seo: SeoRules
    programs: ProgramRules
    ops: OpsRules = Field(default_factory=OpsRules)
