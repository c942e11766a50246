"""Recovery of the JSON object embedded in a model reply."""

from __future__ import annotations

import json
from typing import Iterator

from pydantic import ValidationError

from auditor.errors import MalformedResponseError
from auditor.models import AuditResult


def _balanced_spans(text: str) -> Iterator[tuple[int, int]]:
    """Yield (start, end) of balanced {...} spans, tracking string and escape state."""
    start = text.find("{")
    while start != -1:
        depth = 0
        in_string = False
        escaped = False
        end = None
        for i in range(start, len(text)):
            ch = text[i]
            if in_string:
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == '"':
                    in_string = False
                continue
            if ch == '"':
                in_string = True
            elif ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    end = i + 1
                    break
        if end is not None:
            yield start, end
        start = text.find("{", start + 1)


def extract_json_object(text: str) -> dict:
    for start, end in _balanced_spans(text):
        try:
            value = json.loads(text[start:end])
        except json.JSONDecodeError:
            continue
        if isinstance(value, dict):
            return value
    raise MalformedResponseError("The model reply did not contain a valid JSON object")


def parse_response(raw_text: str) -> AuditResult:
    data = extract_json_object(raw_text)
    try:
        return AuditResult.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'response'}: {err['msg']}"
            for err in e.errors()
        )
        raise MalformedResponseError(
            f"The model reply does not match the audit schema ({problems})"
        ) from e
