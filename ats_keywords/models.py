from __future__ import annotations
from pydantic import BaseModel, Field, ConfigDict
from typing import Dict, List


class CategorizedResult(BaseModel):
    all: List[str] = Field(default_factory=list)
    high_priority: List[str] = Field(default_factory=list)
    medium_priority: List[str] = Field(default_factory=list)
    low_priority: List[str] = Field(default_factory=list)
    total: int = 0

    @classmethod
    def empty(cls) -> "CategorizedResult":
        return cls()


class MatchResult(BaseModel):
    matched: List[str] = Field(default_factory=list)
    missing: List[str] = Field(default_factory=list)
    match_score: int = Field(default=0, ge=0, le=100)
    match_count: int = 0
    total_keywords: int = 0


class ParsedJobDescription(BaseModel):
    model_config = ConfigDict(frozen=True)
    text: str = ""
    structure: str = "raw_text"
    sections: Dict[str, str] = Field(default_factory=dict)
