from bs4 import BeautifulSoup

from auditor.config import TEXT_MIN_LENGTH, TEXT_TAGS


def extract_text(soup: BeautifulSoup) -> list[str]:
    """Visible text of headings, paragraphs, buttons and labels, in document order."""
    segments: list[str] = []
    for tag in soup.find_all(TEXT_TAGS):
        text = tag.get_text(" ", strip=True)
        if len(text) > TEXT_MIN_LENGTH:
            segments.append(f"{tag.name.upper()}: {text}")
    return segments
