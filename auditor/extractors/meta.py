from bs4 import BeautifulSoup


def extract_meta(soup: BeautifulSoup) -> list[str]:
    return [f"META: {tag}" for tag in soup.find_all("meta")]
