import re

from auditor.config import FALLBACK_MAX_LENGTH

SCRIPT_RE = re.compile(r"<script\b[^>]*>.*?</script\s*>", re.IGNORECASE | re.DOTALL)
STYLE_RE = re.compile(r"<style\b[^>]*>.*?</style\s*>", re.IGNORECASE | re.DOTALL)
COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)


def build_fallback(html: str) -> str:
    """Raw markup minus scripts, styles and comments, as a single block."""
    stripped = SCRIPT_RE.sub("", html)
    stripped = STYLE_RE.sub("", stripped)
    stripped = COMMENT_RE.sub("", stripped)
    stripped = stripped.strip()[:FALLBACK_MAX_LENGTH]
    if not stripped:
        return ""
    return f"HTML CONTENT:\n{stripped}\n/HTML CONTENT"
