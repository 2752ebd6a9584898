"""
Free-text expense parsing with Gemini.

The result is only a draft: it goes through the same validation as an
expense typed in by hand.
"""

import json
import logging
from typing import Dict, Optional, Sequence

import requests
from fastapi.concurrency import run_in_threadpool

from app.core.config import settings
from app.models.trip import Member
from app.schemas.parser import ParsedExpense
from app.schemas.trip import ExpenseDraft

logger = logging.getLogger(__name__)

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

PROMPT = """
Phân tích chi tiêu từ văn bản tiếng Việt sau: "{text}".
Danh sách thành viên hiện có: {members}.
Nếu tên người trả không có trong danh sách, hãy chọn người có tên gần giống nhất hoặc để trống nếu không xác định được.
Amount phải là số nguyên (VND).
"""

RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "description": {"type": "STRING", "description": "Mô tả khoản chi (ví dụ: Ăn tối, Cafe)"},
        "amount": {"type": "NUMBER", "description": "Số tiền VNĐ"},
        "payerName": {"type": "STRING", "description": "Tên người trả tiền"},
    },
    "required": ["description", "amount", "payerName"],
}


class ExpenseParserError(Exception):
    pass


def _gemini_generate_json(prompt: str) -> str:
    url = GEMINI_URL.format(model=settings.GEMINI_MODEL)
    payload = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": RESPONSE_SCHEMA
        }
    }

    try:
        response = requests.post(
            url,
            params={"key": settings.GEMINI_API_KEY},
            json=payload,
            timeout=settings.GEMINI_TIMEOUT
        )
    except requests.RequestException as e:
        raise ExpenseParserError(f"Gemini request failed: {e}") from e

    if response.status_code != 200:
        raise ExpenseParserError(f"Gemini request failed ({response.status_code}): {response.text}")

    data = response.json()
    if not isinstance(data, dict):
        raise ExpenseParserError(f"Unexpected Gemini response: {data!r}")
    candidates = data.get("candidates") or []
    if not isinstance(candidates, list):
        raise ExpenseParserError(f"Unexpected Gemini candidates: {candidates!r}")
    if not candidates:
        return ""

    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        raise ExpenseParserError(f"Unexpected Gemini candidate: {candidates[0]!r}")
    return "".join(part.get("text", "") for part in parts if isinstance(part, dict))


def parse_expense_sync(text: str, member_names: Sequence[str]) -> Optional[ParsedExpense]:
    if not settings.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY not set, expense parsing unavailable")
        return None

    prompt = PROMPT.format(text=text, members=", ".join(member_names))
    try:
        json_text = _gemini_generate_json(prompt)
        if not json_text:
            return None
        return ParsedExpense.model_validate(json.loads(json_text))
    except (ExpenseParserError, ValueError) as e:
        # json.JSONDecodeError and ValidationError are both ValueErrors
        logger.warning("Gemini parse error: %s", e)
        return None


async def parse_expense(text: str, member_names: Sequence[str]) -> Optional[ParsedExpense]:
    """Best-effort guess at {description, amount, payerName}, or None."""
    return await run_in_threadpool(parse_expense_sync, text, list(member_names))


def draft_from_parsed(parsed: ParsedExpense, members: Sequence[Member]) -> ExpenseDraft:
    """
    Turn a parser guess into an expense draft for the trip.
    Payer is matched by exact name ignoring case; everyone is involved.
    """
    by_name: Dict[str, str] = {}
    for member in members:
        by_name.setdefault(member.name.lower(), member.id)

    return ExpenseDraft(
        description=parsed.description,
        amount=parsed.amount,
        payer_id=by_name.get((parsed.payer_name or "").lower()),
        involved_member_ids=None
    )
