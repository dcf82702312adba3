# custom exception 정의 및 관리


class TransitDBException(Exception):  # 예외 구조 정의
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class StopNotFoundException(TransitDBException):
    def __init__(self, message: str = "정류장을 찾을 수 없습니다"):
        super().__init__(message, code="STOP_NOT_FOUND")


class BusNotFoundException(TransitDBException):
    def __init__(self, message: str = "버스 노선을 찾을 수 없습니다"):
        super().__init__(message, code="BUS_NOT_FOUND")


class DuplicateBusException(TransitDBException):
    def __init__(self, message: str = "이미 등록된 버스입니다"):
        super().__init__(message, code="DUPLICATE_BUS")


# 이름만 참조되고 좌표가 정의되지 않은 정류장
class UndefinedStopException(TransitDBException):
    def __init__(self, message: str = "좌표가 정의되지 않은 정류장입니다"):
        super().__init__(message, code="UNDEFINED_STOP")


class MissingDistanceException(TransitDBException):
    def __init__(self, message: str = "도로 거리 정보가 없습니다"):
        super().__init__(message, code="MISSING_DISTANCE")


# 통계 계산 전에 조회 => 호출 순서 오류
class StatisticsNotComputedException(TransitDBException):
    def __init__(self, message: str = "노선 통계가 아직 계산되지 않았습니다"):
        super().__init__(message, code="STATS_NOT_COMPUTED")


class SessionStateException(TransitDBException):
    def __init__(self, message: str = "현재 세션 단계에서 허용되지 않는 요청입니다"):
        super().__init__(message, code="INVALID_SESSION_STATE")


class RequestParseException(TransitDBException):
    def __init__(self, message: str = "요청을 해석할 수 없습니다"):
        super().__init__(message, code="INVALID_REQUEST")
