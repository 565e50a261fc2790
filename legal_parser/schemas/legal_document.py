from __future__ import annotations
"""Canonical parsed-statute JSON contract.

Field names and ``sectionType`` values are consumed as-is downstream, so
they keep their camelCase spelling.
"""

import json
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class DocumentType(str, Enum):
    """Document classification declared in the head."""
    PERUBAHAN = "PERUBAHAN"
    PENETAPAN = "PENETAPAN"
    PENCABUTAN = "PENCABUTAN"


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class SubNumber(_Node):
    sectionType: Literal["subNumber"] = "subNumber"
    number: str
    content: str


class Letter(_Node):
    sectionType: Literal["letter"] = "letter"
    letter: str
    content: str
    children: Optional[List[SubNumber]] = None


class Paragraph(_Node):
    sectionType: Literal["paragraph"] = "paragraph"
    paragraph: str
    content: str
    children: Optional[List[Letter]] = None


class Article(_Node):
    sectionType: Literal["article"] = "article"
    article: str = Field(min_length=1)
    header: str = Field(min_length=1)
    content: str
    listOfFacts: Optional[List[str]] = None
    children: Optional[List[Paragraph]] = None


class LegalBody(_Node):
    content: str
    children: List[Article] = Field(default_factory=list)


class LegalHead(_Node):
    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str
    menimbang: str
    mengingat: str
    menetapkan: str
    type: DocumentType


class LegalDocument(_Node):
    title: str
    head: LegalHead
    body: LegalBody
    penjelasan: LegalBody

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)


class DiagnosticKind(str, Enum):
    """Degraded-parse conditions surfaced to callers."""
    ANCHOR_NOT_FOUND = "anchor_not_found"
    NO_ROMAN_SECTIONS = "no_roman_sections"
    NO_ARTICLE_EXPLANATION_SECTION = "no_article_explanation_section"
    NO_ARTICLES_FOUND = "no_articles_found"
    FACT_GENERATION_FAILED = "fact_generation_failed"
    UNRECOGNIZED_DOCUMENT_TYPE = "unrecognized_document_type"
    TITLE_NOT_FOUND = "title_not_found"


class ParseDiagnostic(_Node):
    kind: DiagnosticKind
    location: str
    message: str
    offset: Optional[int] = None
    article: Optional[str] = None


class ParseResult(_Node):
    document: LegalDocument
    diagnostics: List[ParseDiagnostic] = Field(default_factory=list)

    @property
    def degraded(self) -> bool:
        return bool(self.diagnostics)

    def diagnostics_of(self, kind: DiagnosticKind) -> List[ParseDiagnostic]:
        return [d for d in self.diagnostics if d.kind == kind]
