"""Audit prompt assembly.

The prompt fixes the finding taxonomy and the exact JSON contract the
response parser validates against.
"""

from __future__ import annotations

from auditor.config import MAX_CONTENT_LENGTH

CONTENT_LABELS = {
    "url": "extracted website content",
    "code": "code snippet",
}

TAXONOMY = """\
Focus on CRITICAL VULNERABILITIES and BUSINESS FRICTION, not on plain HTML/DOM structure.

1. TRUST & SECURITY (defect ids prefixed "SEC-"):
   - API keys, tokens or credentials hardcoded in scripts or markup
   - Sensitive endpoints or environment configuration exposed to the client
   - Comments revealing confidential information or business logic
   - Forms without CSRF protection (missing hidden token fields)
   - XSS entry points (unsanitized innerHTML, eval(), document.write)
   - Outdated third-party libraries with known vulnerabilities
   - Client-side-only validation of authentication or permissions

2. CONVERSION & UX FRICTION (defect ids prefixed "CONV-"):
   - Critical calls to action (checkout, signup) hidden, ambiguous or missing
   - Forms that block the conversion flow (excessive fields, missing labels)
   - Broken, empty or misleading links and buttons
   - Missing trust signals (contact details, privacy policy, secure checkout cues)
   - Inaccessible interactive elements

3. TECHNICAL ARCHITECTURE (defect ids prefixed "ARCH-"):
   - Business logic that can be bypassed or manipulated from the client
   - Insecure transport (http:// resources, mixed content)
   - Missing security or SEO-critical meta tags (viewport, CSP, robots)
   - Fragile or duplicated script logic, blocking inline scripts"""

SCHEMA = """\
{
  "business_impact": "one-paragraph summary of the overall business risk",
  "severity_score": 1-100 (optional, 100 = most severe),
  "passedTests": [{"category": "string", "test": "string", "status": "passed"}],
  "defects": [
    {
      "id": "SEC-001 | CONV-001 | ARCH-001",
      "category": "Security | Conversion | Architecture",
      "title": "string",
      "description": "string",
      "priority": "Critical" | "Medium" | "Low",
      "location": "string (optional: selector, line or URL)",
      "impact_translation": "what this defect costs the business, in plain language"
    }
  ],
  "testScript": "automated test script that verifies the defects found"
}"""


def _prepare_content(content: str) -> tuple[str, bool]:
    if len(content) > MAX_CONTENT_LENGTH:
        return content[:MAX_CONTENT_LENGTH], True
    return content, len(content) == MAX_CONTENT_LENGTH


def build_prompt(content_type: str, content: str) -> str:
    label = CONTENT_LABELS.get(content_type, content_type)
    body, truncated = _prepare_content(content)
    note = ""
    if truncated:
        note = (
            f"\n[NOTE: the content was truncated to {MAX_CONTENT_LENGTH} characters; "
            "do not report the truncation itself as a defect.]"
        )

    return f"""You are a senior QA and security auditor. Analyze the following {label}.

--- BEGIN CONTENT ---
{body}
--- END CONTENT ---{note}

{TAXONOMY}

RULES:
- Analyze ONLY the content provided above. Do not invent pages, endpoints, files or behavior that it does not show.
- If the content is insufficient to perform an audit, respond with {{"error": "<reason>"}} instead of inventing findings.
- Every defect id must be unique and use the prefix of its category (SEC-, CONV-, ARCH-).
- Every defect must include "impact_translation".
- Prioritize "Critical" for security vulnerabilities and exposed logic.

Respond with a JSON object that follows EXACTLY this schema:
{SCHEMA}

IMPORTANT: Reply with nothing but the JSON object. No markdown, no explanations."""
