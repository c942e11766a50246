from .scripts import extract_scripts
from .meta import extract_meta
from .links import extract_links
from .forms import extract_forms, extract_inputs
from .text import extract_text
from .fallback import build_fallback

__all__ = [
    "extract_scripts",
    "extract_meta",
    "extract_links",
    "extract_forms",
    "extract_inputs",
    "extract_text",
    "build_fallback",
]
