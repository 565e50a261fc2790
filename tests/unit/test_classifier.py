import pytest

from legal_parser.schemas.legal_document import DiagnosticKind, DocumentType
from legal_parser.services.parser.classifier import SegmentationStrategy, classify


@pytest.mark.parametrize("doc_type, body, penjelasan", [
    (DocumentType.PERUBAHAN, SegmentationStrategy.AMENDMENT_BODY, SegmentationStrategy.AMENDMENT_PENJELASAN),
    (DocumentType.PENETAPAN, SegmentationStrategy.ENACTMENT, SegmentationStrategy.ENACTMENT),
    (DocumentType.PENCABUTAN, SegmentationStrategy.ENACTMENT, SegmentationStrategy.ENACTMENT),
    ("PENCABUTAN", SegmentationStrategy.ENACTMENT, SegmentationStrategy.ENACTMENT),
])
def test_known_types(diagnostics, doc_type, body, penjelasan):
    plan = classify(doc_type, diagnostics)
    assert plan.body is body
    assert plan.penjelasan is penjelasan
    assert plan.document_type == DocumentType(doc_type)
    assert len(diagnostics) == 0


@pytest.mark.parametrize("doc_type", ["PERATURAN", "penetapan", "", None])
def test_unrecognized_type_has_no_plan(diagnostics, doc_type):
    assert classify(doc_type, diagnostics) is None
    [diag] = diagnostics.items
    assert diag.kind == DiagnosticKind.UNRECOGNIZED_DOCUMENT_TYPE
    assert diag.location == "classifier"
