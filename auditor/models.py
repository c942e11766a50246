from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Literal, Optional


class AuditRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["url", "code"]
    content: str


class TestResult(BaseModel):
    category: str
    test: str
    status: Literal["passed"] = "passed"


class Defect(BaseModel):
    id: str
    category: str
    title: str
    description: str
    priority: Literal["Critical", "Medium", "Low"]
    location: Optional[str] = None
    impact_translation: Optional[str] = None


REQUIRED_FINDINGS = ("passedTests", "defects", "testScript")


class AuditResult(BaseModel):
    business_impact: Optional[str] = None
    severity_score: Optional[float] = None
    passedTests: list[TestResult] = Field(default_factory=list)
    defects: list[Defect] = Field(default_factory=list)
    testScript: str = ""
    error: Optional[str] = None

    @field_validator("severity_score", mode="before")
    @classmethod
    def _clamp_severity(cls, value):
        # out-of-range scores are clamped, unreadable ones dropped
        if value is None:
            return None
        try:
            score = float(value)
        except (TypeError, ValueError):
            return None
        return min(100.0, max(1.0, score))

    @model_validator(mode="before")
    @classmethod
    def _require_findings(cls, data):
        if isinstance(data, dict) and not data.get("error"):
            missing = [k for k in REQUIRED_FINDINGS if k not in data]
            if missing:
                raise ValueError(f"missing required fields: {', '.join(missing)}")
        return data

    @model_validator(mode="after")
    def _clear_findings_on_error(self) -> "AuditResult":
        if self.error:
            self.passedTests = []
            self.defects = []
            self.testScript = ""
        return self


# --- Error responses ---

class ModelFailure(BaseModel):
    model: str
    reason: str


class ErrorResponse(BaseModel):
    error: str
    passedTests: list[TestResult] = Field(default_factory=list)
    defects: list[Defect] = Field(default_factory=list)
    testScript: str = ""
    remediation: Optional[str] = None
    attempts: Optional[list[ModelFailure]] = None
