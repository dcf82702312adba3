"""
세션 처리 REST API 엔드포인트
"""

from fastapi import APIRouter, Body, HTTPException
from typing import Any, Dict
import logging

from transit_db.core.exceptions import RequestParseException
from transit_db.models.responses import SessionResponse
from transit_db.services.session_service import run_json_session

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=SessionResponse)
async def process_session(document: Dict[str, Any] = Body(...)):
    """
    JSON 문서 한 건 = 독립된 세션 하나

    - **base_requests**: 정류장 / 버스 노선 정의
    - **stat_requests**: 버스 / 정류장 조회

    Example:
        POST /api/v1/sessions
        {"base_requests": [...], "stat_requests": [...]}
    """
    try:
        responses, rejected = run_json_session(document)
    except RequestParseException as e:
        logger.warning(f"세션 요청 파싱 실패: {e.message}")
        raise HTTPException(status_code=400, detail={"error": e.message, "code": e.code})

    return {"responses": responses, "rejected": rejected}
