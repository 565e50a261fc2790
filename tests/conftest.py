"""
Pytest configuration and shared fixtures for the legal parser.

This module provides:
- Environment configuration for tests (set before any package import)
- Fake head-field and fact collaborators (no network calls)
- Sample statute texts for enactment and amendment documents
"""

import asyncio
import os
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

# Set test environment variables before any imports
os.environ.update({
    "LLM_PROVIDER": "openai",
    "LLM_MODEL": "gpt-4o-mini",
    "OPENAI_API_KEY": "test-key",
    "GEMINI_API_KEY": "test-key",
    "ANTHROPIC_API_KEY": "test-key",
    "LOG_LEVEL": "WARNING",  # Reduce noise during tests
    "GENERATE_FACTS": "true",
    "DECOMPOSE_CLAUSES": "false",
    "FACT_CONCURRENCY": "1",
})

# Import after environment setup
from legal_parser.schemas.legal_document import DocumentType, LegalHead  # noqa: E402
from legal_parser.services.parser.diagnostics import Diagnostics  # noqa: E402


# ================================
# FAKE COLLABORATORS
# ================================

class FakeHeadCollaborator:
    """Returns a fixed head, or raises ``error`` when given."""

    def __init__(self, head: Optional[LegalHead] = None, error: Optional[Exception] = None):
        self.head = head
        self.error = error
        self.intros: List[str] = []

    async def extract_head(self, intro: str) -> LegalHead:
        self.intros.append(intro)
        if self.error is not None:
            raise self.error
        return self.head


class FakeFactCollaborator:
    """
    Returns one fact per article, failing for the article headers listed in
    ``fail_on``. ``delays`` (header -> seconds) lets tests reorder completion.
    """

    def __init__(
        self,
        fail_on: Iterable[str] = (),
        delays: Optional[Dict[str, float]] = None,
        error: Optional[Exception] = None,
    ):
        self.fail_on = set(fail_on)
        self.delays = delays or {}
        self.error = error or RuntimeError("fact service unavailable")
        self.calls: List[tuple] = []
        self.max_in_flight = 0
        self._in_flight = 0

    async def generate_facts(self, article_text: str, doc_type: str, menetapkan: str) -> List[str]:
        header = article_text.split("\n", 1)[0]
        self.calls.append((article_text, doc_type, menetapkan))
        self._in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self._in_flight)
        try:
            await asyncio.sleep(self.delays.get(header, 0))
            if header in self.fail_on:
                raise self.error
            return [f"{header} mengatur ketentuan."]
        finally:
            self._in_flight -= 1


def make_head(doc_type=DocumentType.PENETAPAN, menetapkan: str = "PERATURAN PEMERINTAH TENTANG PENGELOLAAN SAMPAH.") -> LegalHead:
    return LegalHead(
        title="PERATURAN PEMERINTAH REPUBLIK INDONESIA NOMOR 12 TAHUN 2020 TENTANG PENGELOLAAN SAMPAH",
        menimbang="bahwa untuk melaksanakan ketentuan Pasal 5 perlu menetapkan Peraturan Pemerintah;",
        mengingat="Pasal 5 ayat (2) Undang-Undang Dasar Negara Republik Indonesia Tahun 1945;",
        menetapkan=menetapkan,
        type=doc_type,
    )


# ================================
# TEST DATA
# ================================

SIMPLE_PENETAPAN_TEXT = (
    "Menimbang: ...\n"
    "Mengingat: ...\n"
    "Menetapkan:\n"
    "Pasal 1\n"
    "Ketentuan umum.\n"
    "Pasal 2\n"
    "Ketentuan penutup.\n"
    "PENJELASAN\n"
    "Cukup jelas."
)

PENETAPAN_TEXT = (
    "www.hukumonline.com/pusatdata\n"
    "PERATURAN PEMERINTAH REPUBLIK INDONESIA\n"
    "NOMOR 12 TAHUN 2020\n"
    "TENTANG\n"
    "PENGELOLAAN SAMPAH\n"
    "DENGAN RAHMAT TUHAN YANG MAHA ESA\n"
    "PRESIDEN REPUBLIK INDONESIA,\n"
    "Menimbang: bahwa untuk melaksanakan ketentuan Pasal 5 perlu menetapkan Peraturan Pemerintah;\n"
    "Mengingat: Pasal 5 ayat (2) Undang-Undang Dasar Negara Republik Indonesia Tahun 1945;\n"
    "MEMUTUSKAN:\n"
    "Menetapkan: PERATURAN PEMERINTAH TENTANG PENGELOLAAN SAMPAH.\n"
    "BAB I\n"
    "KETENTUAN UMUM\n"
    "Pasal 1\n"
    "Dalam Peraturan Pemerintah ini yang dimaksud dengan:\n"
    "1. Sampah adalah sisa kegiatan sehari-hari manusia.\n"
    "2. Pengelolaan sampah adalah kegiatan yang sistematis.\n"
    "Pasal 2\n"
    "(1) Pengelolaan sampah dilaksanakan oleh Pemerintah Daerah.\n"
    "(2) Pengelolaan sebagaimana dimaksud pada ayat (1) meliputi:\n"
    "a. pengurangan sampah; dan\n"
    "b. penanganan sampah yang terdiri atas:\n"
    "1. pemilahan;\n"
    "2. pengumpulan.\n"
    "www.hukumonline.com/pusatdata\n"
    "BAB II\n"
    "KETENTUAN PENUTUP\n"
    "Pasal 4\n"
    "Peraturan Pemerintah ini mulai berlaku pada tanggal diundangkan.\n"
    "PENJELASAN\n"
    "ATAS\n"
    "PERATURAN PEMERINTAH REPUBLIK INDONESIA\n"
    "NOMOR 12 TAHUN 2020\n"
    "I. UMUM\n"
    "Sampah merupakan permasalahan nasional.\n"
    "II. PASAL DEMI PASAL\n"
    "Pasal 1\n"
    "Cukup jelas.\n"
    "Pasal 2\n"
    "Ayat (1)\n"
    "Cukup jelas.\n"
    "Pasal 4\n"
    "Cukup jelas."
)

PERUBAHAN_TEXT = (
    "UNDANG-UNDANG REPUBLIK INDONESIA\n"
    "NOMOR 3 TAHUN 2020\n"
    "TENTANG\n"
    "PERUBAHAN ATAS UNDANG-UNDANG NOMOR 4 TAHUN 2009\n"
    "TENTANG PERTAMBANGAN MINERAL DAN BATUBARA\n"
    "Menimbang: bahwa Undang-Undang Nomor 4 Tahun 2009 perlu diubah;\n"
    "Mengingat: Pasal 5 ayat (1) dan Pasal 20 Undang-Undang Dasar Negara Republik Indonesia Tahun 1945;\n"
    "MEMUTUSKAN:\n"
    "Menetapkan: UNDANG-UNDANG TENTANG PERUBAHAN ATAS UNDANG-UNDANG NOMOR 4 TAHUN 2009.\n"
    "Pasal I\n"
    "Beberapa ketentuan dalam Undang-Undang Nomor 4 Tahun 2009 diubah sebagai berikut:\n"
    "1. Ketentuan Pasal 5 diubah sehingga berbunyi sebagai berikut:\n"
    "Pasal 5\n"
    "(1) Pemerintah menetapkan kebijakan pengutamaan mineral.\n"
    "(2) Kebijakan sebagaimana dimaksud pada ayat (1) meliputi:\n"
    "a. pengendalian produksi; dan\n"
    "b. pengendalian ekspor.\n"
    "Pasal 6\n"
    "Dihapus.\n"
    "Pasal II\n"
    "Undang-Undang ini mulai berlaku pada tanggal diundangkan.\n"
    "PENJELASAN\n"
    "ATAS\n"
    "UNDANG-UNDANG REPUBLIK INDONESIA NOMOR 3 TAHUN 2020\n"
    "I.UMUM\n"
    "Pertambangan mineral merupakan kegiatan strategis.\n"
    "Pasal 9\n"
    "Teks umum ini bukan penjelasan per pasal.\n"
    "II.PENJELASAN PASAL DEMI PASAL\n"
    "Pasal I\n"
    "Angka 1\n"
    "Pasal 5\n"
    "Cukup jelas.\n"
    "Pasal 6\n"
    "Cukup jelas."
)


@pytest.fixture
def diagnostics() -> Diagnostics:
    return Diagnostics()


@pytest.fixture
def penetapan_head() -> LegalHead:
    return make_head()


@pytest.fixture
def perubahan_head() -> LegalHead:
    return make_head(
        DocumentType.PERUBAHAN,
        menetapkan="UNDANG-UNDANG TENTANG PERUBAHAN ATAS UNDANG-UNDANG NOMOR 4 TAHUN 2009.",
    )


@pytest.fixture
def fact_collaborator() -> FakeFactCollaborator:
    return FakeFactCollaborator()
