import os

REQUEST_TIMEOUT = 20
MIN_BODY_LENGTH = 100
DOWNLOAD_CHUNK_SIZE = 1024

# Extraction budget
MAX_CONTENT_LENGTH = 100_000
FALLBACK_TRIGGER_LENGTH = 500
FALLBACK_MAX_LENGTH = 30_000
SCRIPT_MAX_MATCHES = 10
SCRIPT_MAX_LENGTH = 2000
LINK_MAX_MATCHES = 50
TEXT_MIN_LENGTH = 3
TEXT_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6", "p", "button", "label"]

# Preview model first, then progressively more stable ones
DEFAULT_MODELS = [
    "gemini-3-flash-preview",
    "gemini-2.5-flash-lite",
    "gemini-2.5-flash",
]

GEMINI_API_KEY = os.getenv("GOOGLE_GENERATIVE_AI_API_KEY") or os.getenv("GEMINI_API_KEY", "")

AUDIT_MODELS = [
    m.strip() for m in os.getenv("AUDIT_MODELS", "").split(",") if m.strip()
] or DEFAULT_MODELS

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
)

# Many sites reject requests that don't look like a desktop browser
BROWSER_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9,es;q=0.8",
    "Accept-Encoding": "gzip, deflate",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "none",
    "Sec-Fetch-User": "?1",
    "Referer": "https://www.google.com/",
}

EXHAUSTION_REMEDIATION = (
    "Every configured Gemini model refused or failed the request. This usually "
    "means the API key has no remaining quota. Check the key's usage and billing "
    "settings in Google AI Studio, or retry later."
)
