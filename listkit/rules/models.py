from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class EqualityRules(BaseModel):
    mode: Literal["value", "identity"] = "value"

class FlattenRules(BaseModel):
    max_depth: int | None = Field(default=None, ge=0)
    detect_cycles: bool = True

class RandomRules(BaseModel):
    seed: int | None = None

class LoggingRules(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

class Rules(BaseModel):
    project: ProjectRules
    equality: EqualityRules = Field(default_factory=EqualityRules)
    flatten: FlattenRules = Field(default_factory=FlattenRules)
    random: RandomRules = Field(default_factory=RandomRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)

    model_config = ConfigDict(extra="forbid")


def default_rules() -> Rules:
    """Rules used when no rules file is given."""
    return Rules(project=ProjectRules(slug="listkit", rules_version="1.0"))
