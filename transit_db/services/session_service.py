# 프로토콜별 세션 실행 => 파싱 -> 요청 처리 -> 응답 직렬화

import logging
from typing import Any, Dict, List, Tuple, Union

from transit_db.core.config import SUPPORTED_PROTOCOLS
from transit_db.models.responses import RejectedRequest
from transit_db.services.json_protocol import JsonProtocol
from transit_db.services.request_processor import RequestProcessor
from transit_db.services.text_protocol import TextProtocol

logger = logging.getLogger(__name__)


def run_text_session(text: str) -> str:
    """텍스트 입력 한 세션 처리 후 텍스트 응답 반환"""
    protocol = TextProtocol()
    mutations, reads = protocol.read_requests(text.splitlines())
    logger.info(f"텍스트 요청 파싱 완료: 변경 {len(mutations)}개, 조회 {len(reads)}개")

    responses, _ = RequestProcessor().process(mutations, reads)
    return protocol.format_responses(responses)


def run_json_session(
    document: Union[str, Dict[str, Any]]
) -> Tuple[List[Dict[str, Any]], List[RejectedRequest]]:
    """JSON 문서 한 세션 처리 후 (응답 dict 리스트, 거부된 요청) 반환"""
    protocol = JsonProtocol()
    mutations, reads = protocol.read_requests(document)
    logger.info(f"JSON 요청 파싱 완료: 변경 {len(mutations)}개, 조회 {len(reads)}개")

    responses, rejected = RequestProcessor().process(mutations, reads)
    return protocol.responses_to_json(responses), rejected


def run_session(text: str, protocol: str) -> str:
    if protocol not in SUPPORTED_PROTOCOLS:
        raise ValueError(f"지원하지 않는 프로토콜: {protocol}")

    if protocol == "json":
        responses, _ = run_json_session(text)
        return JsonProtocol.format_json(responses)
    return run_text_session(text)
