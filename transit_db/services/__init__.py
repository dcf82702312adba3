"""
Business logic services
"""

from transit_db.services.request_processor import RequestProcessor, SessionState
from transit_db.services.text_protocol import TextProtocol
from transit_db.services.json_protocol import JsonProtocol
from transit_db.services.session_service import (
    run_session,
    run_text_session,
    run_json_session,
)

__all__ = [
    "RequestProcessor",
    "SessionState",
    "TextProtocol",
    "JsonProtocol",
    "run_session",
    "run_text_session",
    "run_json_session",
]
