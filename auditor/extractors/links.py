from bs4 import BeautifulSoup

from auditor.config import LINK_MAX_MATCHES


def extract_links(soup: BeautifulSoup) -> list[str]:
    segments: list[str] = []
    for a in soup.find_all("a", href=True):
        text = a.get_text(" ", strip=True)
        if not text:
            continue
        segments.append(f"LINK: {text} -> {a['href'].strip()}")
        if len(segments) >= LINK_MAX_MATCHES:
            break
    return segments
