"""Rebuild normalized body text from article nodes."""

from typing import List

from ...schemas.legal_document import Article


def _article_lines(article: Article) -> List[str]:
    lines = [article.header]
    if article.content:
        lines.append(article.content)

    for paragraph in article.children or []:
        lines.append(f"  ({paragraph.paragraph}) {paragraph.content}")

        for letter in paragraph.children or []:
            lines.append(f"    {letter.letter}. {letter.content}")

            for sub_number in letter.children or []:
                lines.append(f"      {sub_number.number}. {sub_number.content}")
    return lines


def render_article(article: Article) -> str:
    """Heading, own content and every ayat/huruf/angka child of one article."""
    return "\n".join(_article_lines(article))


def rebuild_body_content(articles: List[Article]) -> str:
    """
    Render articles as indented text.

    Header line, article content, ``  (n) ...`` per paragraph,
    ``    a. ...`` per letter, ``      1. ...`` per sub-number, and a blank
    separator after every article.
    """
    lines: List[str] = []

    for article in articles:
        lines.extend(_article_lines(article))
        lines.append("")  # spacer antara pasal

    return "\n".join(lines)
