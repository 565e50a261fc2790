#!/usr/bin/env python3
"""
llm/prompt/prompt.py
Prompt template untuk ekstraksi kepala dokumen dan fakta hukum per pasal.
Semua template memakai format .format() (kurung kurawal JSON di-escape).
"""

# Ekstraksi pembukaan: kutip apa adanya, lima field
HEAD_EXTRACTION = (
    "Anda adalah asisten hukum. Tugas Anda adalah mengekstraksi bagian-bagian penting "
    "dari pembukaan dokumen hukum Indonesia.\n\n"
    "PERINGATAN PENTING:\n"
    "- Jangan mengubah, menyusun ulang, atau menyunting satu kata pun dari teks yang diberikan.\n"
    "- Jangan menyimpulkan atau menambahkan apapun di luar yang ada di dalam teks.\n"
    "- Gunakan teks apa adanya dari dokumen.\n\n"
    "Ambil bagian berikut dari teks:\n"
    "- \"title\": Judul lengkap peraturan (termasuk jenis dokumen, nomor, tahun, dan topik)\n"
    "- \"menimbang\": Bagian pertimbangan yang biasanya dimulai dengan \"Menimbang:\"\n"
    "- \"mengingat\": Bagian dasar hukum yang biasanya dimulai dengan \"Mengingat:\"\n"
    "- \"menetapkan\": Kalimat setelah kata \"Menetapkan:\" atau \"MEMUTUSKAN:\"\n"
    "- \"type\": Tentukan jenis dokumen berdasarkan kata kunci di title atau menetapkan, "
    "bisa \"PERUBAHAN\", \"PENCABUTAN\", atau \"PENETAPAN\"\n\n"
    "Teks:\n"
    "\"\"\"\n"
    "{intro}\n"
    "\"\"\"\n\n"
    "Kembalikan HANYA JSON valid dengan format berikut:\n"
    "{{\n"
    "  \"title\": \"...\",\n"
    "  \"menimbang\": \"...\",\n"
    "  \"mengingat\": \"...\",\n"
    "  \"menetapkan\": \"...\",\n"
    "  \"type\": \"PERUBAHAN\" | \"PENCABUTAN\" | \"PENETAPAN\"\n"
    "}}"
)

# Instruksi tambahan per jenis dokumen untuk daftar fakta
FACT_INSTRUCTIONS = {
    "PERUBAHAN": (
        "Jika dokumen adalah PERUBAHAN:\n"
        "- Tulis perubahan terhadap setiap ayat atau pasal yang disebut saja secara terpisah.\n"
        "- Hindari menulis pasal atau ayat yang tidak mengalami perubahan.\n"
        "- Gunakan format seperti:\n"
        "  - \"Pasal 26 ayat (3) mengatur bahwa ...\",\n"
        "  - \"Pasal 26 ayat (4) mengatur bahwa ...\"\n"
    ),
    "PENETAPAN": (
        "Jika dokumen adalah PENETAPAN:\n"
        "- Tulis ketentuan utama per Pasal dan Ayat secara mandiri.\n"
    ),
    "PENCABUTAN": (
        "Jika dokumen adalah PENCABUTAN:\n"
        "- Sebutkan bagian mana yang dicabut secara jelas dan spesifik.\n"
    ),
}

# Fakta hukum per pasal
LIST_OF_FACTS = (
    "Anda adalah asisten hukum. Bacalah teks hukum berikut ini, lalu buatlah daftar fakta "
    "hukum **yang relevan dan spesifik**.\n"
    "Tiap fakta harus ditulis dalam Bahasa Indonesia formal dan disusun per pasal dan ayat "
    "secara eksplisit (jika tersedia).\n\n"
    "Jika dalam satu bagian terdapat beberapa ayat atau perubahan, maka buatlah satu fakta "
    "terpisah untuk masing-masing ayat.\n"
    "Gunakan kalimat lengkap yang menyebutkan Pasal dan Ayat.\n\n"
    "{type_instructions}\n"
    "Konteks dokumen:\n"
    "- Jenis: {doc_type}\n"
    "- Menetapkan: {menetapkan}\n\n"
    "Teks hukum:\n"
    "\"\"\"\n"
    "{content}\n"
    "\"\"\"\n\n"
    "Buat daftar fakta hukum terstruktur dalam JSON dengan format:\n"
    "{{\n"
    "  \"facts\": [\n"
    "    \"Fakta hukum 1...\",\n"
    "    \"Fakta hukum 2...\"\n"
    "  ]\n"
    "}}"
)


def build_head_prompt(intro: str) -> str:
    return HEAD_EXTRACTION.format(intro=intro)


def build_facts_prompt(content: str, doc_type: str, menetapkan: str) -> str:
    return LIST_OF_FACTS.format(
        type_instructions=FACT_INSTRUCTIONS.get(doc_type, ""),
        doc_type=doc_type,
        menetapkan=(menetapkan or "").strip(),
        content=content,
    )
