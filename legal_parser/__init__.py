"""
Legal Parser
Structural parsing of Indonesian statutory documents into a typed tree.
"""

from .schemas.legal_document import (
    Article,
    DocumentType,
    LegalBody,
    LegalDocument,
    LegalHead,
    Letter,
    Paragraph,
    ParseDiagnostic,
    ParseResult,
    SubNumber,
)
from .services.parser.orchestrator import LegalDocumentParser, parse_legal_document

__all__ = [
    'Article',
    'DocumentType',
    'LegalBody',
    'LegalDocument',
    'LegalHead',
    'Letter',
    'Paragraph',
    'ParseDiagnostic',
    'ParseResult',
    'SubNumber',
    'LegalDocumentParser',
    'parse_legal_document',
]
