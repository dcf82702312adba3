"""
Transit Catalogue DB - CLI
==========================
stdin으로 한 세션(변경 요청 + 조회 요청)을 읽어 stdout으로 응답 출력

Usage:
    transit-db process [--format text|json] [--input FILE]
    transit-db serve [--host HOST] [--port PORT]

Examples:
    transit-db process < requests.txt
    transit-db process --format json --input requests.json
"""

import argparse
import logging
import sys
from typing import List, Optional

from transit_db.core.config import SUPPORTED_PROTOCOLS, settings
from transit_db.core.exceptions import TransitDBException

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    # stdout은 응답 전용 => 로그는 stderr
    logging.basicConfig(
        level=level.upper(),
        format=settings.LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def cmd_process(args) -> int:
    """요청 처리"""
    from transit_db.services.session_service import run_session

    if args.input:
        with open(args.input, "r", encoding="utf-8") as f:
            text = f.read()
    else:
        text = sys.stdin.read()

    try:
        output = run_session(text, args.format)
    except TransitDBException as e:
        logger.error(f"요청 처리 실패: [{e.code}] {e.message}")
        return 1

    sys.stdout.write(output)
    if output and not output.endswith("\n"):
        sys.stdout.write("\n")
    return 0


def cmd_serve(args) -> int:
    """HTTP 서버 실행"""
    import uvicorn

    logger.info(f"서버 시작: http://{args.host}:{args.port}")
    uvicorn.run("transit_db.main:app", host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transit-db",
        description="Transit Catalogue DB - bus route statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--log-level", default=settings.LOG_LEVEL, help="Logging level (default: %(default)s)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Process command
    process_parser = subparsers.add_parser("process", help="Process one session from stdin")
    process_parser.add_argument(
        "--format",
        choices=SUPPORTED_PROTOCOLS,
        default=settings.DEFAULT_PROTOCOL,
        help="Request/response protocol (default: %(default)s)",
    )
    process_parser.add_argument("--input", help="Read requests from file instead of stdin")
    process_parser.set_defaults(func=cmd_process)

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Serve the HTTP API")
    serve_parser.add_argument("--host", default=settings.HOST, help="Host (default: %(default)s)")
    serve_parser.add_argument(
        "--port", type=int, default=settings.PORT, help="Port (default: %(default)s)"
    )
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    setup_logging(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
