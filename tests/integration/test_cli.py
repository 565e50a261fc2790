import json

import pytest

from conftest import SIMPLE_PENETAPAN_TEXT, make_head
from legal_parser.cli import main as cli
from legal_parser.services.parser.head_extractor import LLMHeadFieldCollaborator


@pytest.fixture
def statute_file(tmp_path):
    path = tmp_path / "uu-4-2009.txt"
    path.write_text(SIMPLE_PENETAPAN_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def fake_head(monkeypatch):
    async def extract_head(self, intro):
        return make_head()

    monkeypatch.setattr(LLMHeadFieldCollaborator, "extract_head", extract_head)


def test_parse_prints_document(statute_file, fake_head, capsys):
    exit_code = cli.main(["parse", str(statute_file), "--no-facts"])

    assert exit_code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["title"] == "UU-4-2009"
    assert [a["article"] for a in data["body"]["children"]] == ["1", "2"]
    assert data["penjelasan"]["content"] == "Cukup jelas."


def test_parse_with_diagnostics(statute_file, fake_head, capsys):
    exit_code = cli.main(["parse", str(statute_file), "--no-facts", "--with-diagnostics", "--name", "PP 5.pdf"])

    assert exit_code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["document"]["title"] == "PP 5"
    assert [d["kind"] for d in data["diagnostics"]] == ["no_articles_found"]


def test_missing_file(tmp_path):
    assert cli.main(["parse", str(tmp_path / "tidak-ada.txt")]) == 1


def test_head_failure_exit_code(statute_file, monkeypatch, capsys):
    async def extract_head(self, intro):
        raise RuntimeError("quota exceeded")

    monkeypatch.setattr(LLMHeadFieldCollaborator, "extract_head", extract_head)
    assert cli.main(["parse", str(statute_file), "--no-facts"]) == 1
    assert capsys.readouterr().out == ""


def test_providers_listing(capsys):
    assert cli.main(["providers"]) == 0
    out = capsys.readouterr().out
    assert "openai" in out and "available" in out


def test_no_command_prints_help():
    assert cli.main([]) == 1
