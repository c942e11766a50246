import logging

from auditor.errors import EmptySubmissionError
from auditor.fetcher import fetch_content
from auditor.models import AuditRequest, AuditResult
from auditor.orchestrator import ModelOrchestrator
from auditor.parser import parse_response
from auditor.prompt import build_prompt

logger = logging.getLogger(__name__)


def run_audit(request: AuditRequest, orchestrator: ModelOrchestrator) -> AuditResult:
    """Fetch or take the submitted content, ask the models, parse the reply."""
    if not request.content.strip():
        raise EmptySubmissionError(
            "Please provide a URL to audit." if request.type == "url"
            else "Please paste the code snippet to audit."
        )

    if request.type == "url":
        content = fetch_content(request.content)
    else:
        content = request.content
    logger.info("Auditing %s content (%d chars)", request.type, len(content))

    prompt = build_prompt(request.type, content)
    raw = orchestrator.generate(prompt)
    result = parse_response(raw)
    logger.info("Audit finished: %d defects, %d passed tests", len(result.defects), len(result.passedTests))
    return result
