from bs4 import BeautifulSoup

from auditor.config import SCRIPT_MAX_LENGTH, SCRIPT_MAX_MATCHES


def extract_scripts(soup: BeautifulSoup) -> list[str]:
    segments: list[str] = []
    # Only the first matches count towards the cap, kept or not
    for script in soup.find_all("script", limit=SCRIPT_MAX_MATCHES):
        body = (script.string or "").strip()
        if not body or len(body) > SCRIPT_MAX_LENGTH:
            continue
        segments.append(f"SCRIPT:\n{body}\n/SCRIPT")
    return segments
