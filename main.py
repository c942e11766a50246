import logging

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from auditor import config
from auditor.errors import AuditError, ModelExhaustionError
from auditor.models import AuditRequest, AuditResult, ErrorResponse, ModelFailure
from auditor.orchestrator import ModelOrchestrator
from auditor.pipeline import run_audit

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("auditor.api")

app = FastAPI(title="AI QA Auditor", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_orchestrator() -> ModelOrchestrator:
    return ModelOrchestrator(api_key=config.GEMINI_API_KEY, model_ids=config.AUDIT_MODELS)


@app.exception_handler(AuditError)
async def audit_error_handler(request: Request, exc: AuditError) -> JSONResponse:
    body = ErrorResponse(error=exc.message)
    if isinstance(exc, ModelExhaustionError):
        body.remediation = config.EXHAUSTION_REMEDIATION
        body.attempts = [ModelFailure(model=a.model_id, reason=a.reason or "") for a in exc.attempts]
    logger.error("Audit failed (%s): %s", type(exc).__name__, exc.message)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(exclude_none=True))


@app.get("/api/health")
async def health():
    return {"status": "ok"}


@app.post("/api/audit", response_model=AuditResult, response_model_exclude_none=True)
@app.post("/audit", response_model=AuditResult, response_model_exclude_none=True, include_in_schema=False)
def audit(req: AuditRequest, orchestrator: ModelOrchestrator = Depends(get_orchestrator)):
    return run_audit(req, orchestrator)


@app.get("/api/audit")
@app.get("/audit", include_in_schema=False)
async def audit_method_not_allowed():
    return JSONResponse(status_code=405, content={"error": "POST only"})
