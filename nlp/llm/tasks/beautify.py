from __future__ import annotations

import json
import re
from typing import Any

from interfaces.errors import ResponseFormatError
from interfaces.llm.client import LlmClient
from interfaces.llm.tasks import BeautifyRequest, BeautifyResult, Change

SYSTEM = (
    "You are an expert Python code formatter. Your task is to take Python code, beautify it "
    "according to PEP 8 standards, and explain the changes you made.\n"
    "You MUST return a valid JSON object that adheres to the provided schema.\n"
    "The JSON object must contain:\n"
    "1.  \"formattedText\": A string containing the fully formatted Python code.\n"
    "2.  \"changes\": An array of objects, where each object details a specific correction. "
    "Each object must contain:\n"
    "    - \"lineNumber\": The line number in the *formatted code* where the change was made.\n"
    "    - \"explanation\": A brief, clear explanation of the correction, referencing PEP 8 where applicable.\n"
    "\n"
    "- Do not add any new logic or comments to the code itself.\n"
    "- Ensure the 'formattedText' is raw Python, without any markdown formatting.\n"
    "- If no changes are needed, return the original code and an empty 'changes' array.\n"
)

SCHEMA = {
    "type": "object",
    "properties": {
        "formattedText": {"type": "string"},
        "changes": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "lineNumber": {"type": "number"},
                    "explanation": {"type": "string"},
                },
                "required": ["lineNumber", "explanation"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["formattedText", "changes"],
    "additionalProperties": False,
}

_FENCED = re.compile(r"\A```(?:json)?[ \t]*\n(.*?)\n?```\Z", flags=re.S | re.I)


def build_request(source_text: str, *, max_tokens: int, temperature: float = 0.2) -> BeautifyRequest:
    # Blank input is the caller's concern; pass the text through untouched.
    return BeautifyRequest(
        system=SYSTEM,
        user=source_text,
        schema=SCHEMA,
        temperature=temperature,
        max_tokens=max_tokens,
    )


def _line_number(value: Any, idx: int) -> int:
    # bool is an int subclass; true/false is never a line number.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ResponseFormatError(f"changes[{idx}].lineNumber must be a number, got {type(value).__name__}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ResponseFormatError(f"changes[{idx}].lineNumber must be a whole number, got {value}")
        value = int(value)
    if value < 1:
        raise ResponseFormatError(f"changes[{idx}].lineNumber must be >= 1, got {value}")
    return value


def _change(item: Any, idx: int) -> Change:
    if not isinstance(item, dict):
        raise ResponseFormatError(f"changes[{idx}] must be an object")
    if "lineNumber" not in item:
        raise ResponseFormatError(f"changes[{idx}] is missing lineNumber")
    if "explanation" not in item:
        raise ResponseFormatError(f"changes[{idx}] is missing explanation")
    explanation = item["explanation"]
    if not isinstance(explanation, str) or not explanation.strip():
        raise ResponseFormatError(f"changes[{idx}].explanation must be a non-empty string")
    return Change(line_number=_line_number(item["lineNumber"], idx), explanation=explanation)


def parse_response(raw: str) -> BeautifyResult:
    """
    Parse the model reply into a BeautifyResult.

    Both fields are required; a reply without `changes` is malformed, while
    `"changes": []` is the normal no-op answer. Change order is kept as sent.
    """
    text = (raw or "").strip()
    fenced = _FENCED.match(text)
    if fenced:
        text = fenced.group(1).strip()
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise ResponseFormatError(f"Reply is not valid JSON: {e}") from e

    if not isinstance(obj, dict):
        raise ResponseFormatError(f"Reply must be a JSON object, got {type(obj).__name__}")
    if "formattedText" not in obj:
        raise ResponseFormatError("Reply is missing formattedText")
    if "changes" not in obj:
        raise ResponseFormatError("Reply is missing changes")

    formatted = obj["formattedText"]
    if not isinstance(formatted, str):
        raise ResponseFormatError("formattedText must be a string")
    changes = obj["changes"]
    if not isinstance(changes, list):
        raise ResponseFormatError("changes must be an array")

    return BeautifyResult(
        formatted_text=formatted,
        changes=tuple(_change(item, i) for i, item in enumerate(changes)),
    )


def beautify_source(client: LlmClient, source_text: str, max_tokens: int, temperature: float = 0.2) -> BeautifyResult:
    req = build_request(source_text, max_tokens=max_tokens, temperature=temperature)
    raw = client.json_schema_chat(
        req.system,
        req.user,
        max_tokens=req.max_tokens,
        schema=req.schema,
        temperature=req.temperature,
    )
    return parse_response(raw)
