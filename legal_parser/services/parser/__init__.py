"""
Statute parsing services: section splitting, head extraction, type-aware
article segmentation, fact delegation, reconstruction and assembly.
"""

from .classifier import SegmentationPlan, SegmentationStrategy, classify
from .diagnostics import Diagnostics
from .errors import HeadExtractionError, LegalParserError, StructuredOutputError
from .orchestrator import LegalDocumentParser, parse_legal_document

__all__ = [
    'SegmentationPlan',
    'SegmentationStrategy',
    'classify',
    'Diagnostics',
    'HeadExtractionError',
    'LegalParserError',
    'StructuredOutputError',
    'LegalDocumentParser',
    'parse_legal_document',
]
