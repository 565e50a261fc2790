"""Document type → segmentation strategy mapping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ...schemas.legal_document import DiagnosticKind, DocumentType
from .diagnostics import Diagnostics


class SegmentationStrategy(Enum):
    ENACTMENT = "enactment"                        # Pasal 1, Pasal 2, ...
    AMENDMENT_BODY = "amendment_body"              # Pasal I, Pasal II, ...
    AMENDMENT_PENJELASAN = "amendment_penjelasan"  # II. PASAL DEMI PASAL → Pasal 1, ...


@dataclass(frozen=True)
class SegmentationPlan:
    """Strategies for the body (batang tubuh) and the annex (penjelasan)."""
    document_type: DocumentType
    body: SegmentationStrategy
    penjelasan: SegmentationStrategy


_PLANS = {
    DocumentType.PERUBAHAN: (
        SegmentationStrategy.AMENDMENT_BODY,
        SegmentationStrategy.AMENDMENT_PENJELASAN,
    ),
    DocumentType.PENETAPAN: (SegmentationStrategy.ENACTMENT, SegmentationStrategy.ENACTMENT),
    DocumentType.PENCABUTAN: (SegmentationStrategy.ENACTMENT, SegmentationStrategy.ENACTMENT),
}


def classify(
    doc_type: Union[DocumentType, str, None],
    diagnostics: Diagnostics,
) -> Optional[SegmentationPlan]:
    """
    Select the segmentation strategies for a document type.

    There is no default strategy: an unrecognized type yields ``None`` and a
    diagnostic, and the caller produces empty bodies.
    """
    try:
        resolved = DocumentType(doc_type)
    except ValueError:
        diagnostics.warn(
            DiagnosticKind.UNRECOGNIZED_DOCUMENT_TYPE,
            "classifier",
            f"Jenis dokumen tidak dikenali: {doc_type!r}",
        )
        return None

    body, penjelasan = _PLANS[resolved]
    return SegmentationPlan(document_type=resolved, body=body, penjelasan=penjelasan)
