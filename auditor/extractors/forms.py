from bs4 import BeautifulSoup


def extract_forms(soup: BeautifulSoup) -> list[str]:
    return [f"FORM:\n{form}\n/FORM" for form in soup.find_all("form")]


def extract_inputs(soup: BeautifulSoup) -> list[str]:
    return [f"INPUT: {tag}" for tag in soup.find_all("input")]
