
class GatecoinError(Exception):
    """Gatecoin 클라이언트 예외의 공통 부모"""
    def __init__(self, message="Gatecoin request failed", cause=None):
        self.message = message
        self.cause = cause
        super().__init__(self.message)

class TransportError(GatecoinError):
    """연결 실패 또는 HTTP 상태 코드 오류 시 발생하는 예외"""
    def __init__(self, message="HTTP transport failed", cause=None):
        super().__init__(message, cause)

class APIRequestError(GatecoinError):
    """API 응답이 기대한 형태가 아닐 때 발생하는 예외"""
    def __init__(self, message="API request failed", cause=None):
        super().__init__(message, cause)

class CreateOrderError(GatecoinError):
    """주문 생성 실패 시"""
    def __init__(self, message="Order placement failed", cause=None):
        super().__init__(message, cause)

class CancelOrderError(GatecoinError):
    """주문 취소 실패 시"""
    def __init__(self, message="Order cancellation failed", cause=None):
        super().__init__(message, cause)

class WithdrawalError(GatecoinError):
    """출금 요청 실패 시"""
    def __init__(self, message="Withdrawal failed", cause=None):
        super().__init__(message, cause)

class PreconditionError(GatecoinError, ValueError):
    """요청 전 인자 검증 실패 (네트워크 호출 없음)"""
    def __init__(self, message="Invalid argument"):
        super().__init__(message)

class ConfigurationError(GatecoinError):
    """설정(API 키 등)이 비어 있거나 잘못된 경우"""
    def __init__(self, message="Invalid configuration"):
        super().__init__(message)
