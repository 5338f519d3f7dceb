import enum
import json
import time
from typing import Any, Callable, Optional

import requests
from pydantic import BaseModel, ConfigDict, SecretStr

from gatecoin.api.gatecoin_http import get_gatecoin_session
from gatecoin.api.gatecoin_response import Err, check_status, require_field
from gatecoin.api.gatecoin_sign import JSON_CONTENT_TYPE, request_timestamp, sign
from gatecoin.core.config import DEFAULT_API_URL, Settings, settings as default_settings
from gatecoin.core.logger import logger
from gatecoin.core.exceptions import (
    APIRequestError,
    CancelOrderError,
    ConfigurationError,
    CreateOrderError,
    PreconditionError,
    TransportError,
    WithdrawalError,
)


class OrderSide(enum.Enum):
    BUY = "buy"
    SELL = "sell"


# Gatecoin 주문 방향 표기
_WAYS = {OrderSide.BUY: "Bid", OrderSide.SELL: "Ask"}


def _way(side) -> str:
    """OrderSide 또는 "buy"/"sell" 문자열을 Gatecoin 의 Way 값으로 변환합니다."""
    try:
        return _WAYS[OrderSide(side)]
    except ValueError:
        raise PreconditionError(f"알 수 없는 주문 방향: {side!r}. 'buy' 또는 'sell'을 사용하세요.") from None


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    public_key: str
    secret_key: SecretStr
    url: str = DEFAULT_API_URL


class GatecoinClient:
    """Gatecoin 인증 REST API 클라이언트.

    생성 후 내부 상태가 바뀌지 않으므로, 세션이 허용하는 한 여러 호출자가 공유해도 됩니다.
    모든 호출은 한 번의 HTTP 왕복이며 재시도하지 않습니다.
    """

    def __init__(
        self,
        key: str,
        secret: str,
        url: str = DEFAULT_API_URL,
        *,
        session: Optional[requests.Session] = None,
        clock: Callable[[], float] = time.time,
    ):
        self._credentials = Credentials(public_key=key, secret_key=secret, url=url)
        self._session = session if session is not None else get_gatecoin_session()
        self._clock = clock

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None, **kwargs) -> "GatecoinClient":
        """환경 변수(.env) 설정으로 클라이언트를 생성합니다."""
        config = config or default_settings
        if not config.has_credentials:
            raise ConfigurationError("GATECOIN_PUBLIC_KEY / GATECOIN_SECRET_KEY 가 설정되지 않았습니다.")
        return cls(
            config.GATECOIN_PUBLIC_KEY.strip(),
            config.GATECOIN_SECRET_KEY.strip(),
            url=config.GATECOIN_API_URL,
            **kwargs,
        )

    @property
    def key(self) -> str:
        return self._credentials.public_key

    @property
    def url(self) -> str:
        return self._credentials.url

    def __repr__(self):
        return f"GatecoinClient(key={self.key!r}, url={self.url!r})"

    # --- Operations ---

    def balances(self):
        """잔고 목록을 조회합니다."""
        result = require_field(self._get("/Balance/Balances"), "balances")
        if isinstance(result, Err):
            raise APIRequestError(f"잔고 조회 실패: {result.reason}")
        return result.payload

    def order(self, order_id):
        """주문 상세를 조회합니다."""
        return self._get(f"/Trade/Orders/{order_id}")

    def create_order(self, side, size, price, pair: str):
        """지정가 주문을 생성합니다. 실패는 모두 CreateOrderError 로 전달됩니다."""
        way = _way(side)

        try:
            body = {
                "Code": pair,
                "Way": way,
                "Amount": str(float(size)),
                "Price": str(float(price)),
            }
            order = self._post("/Trade/Orders", body)
            result = require_field(order, "clOrderId")
            if isinstance(result, Err):
                logger.debug(f"주문 생성 거부: {result.reason}")
                raise CreateOrderError(result.reason)
            logger.debug(f"주문 생성 성공: {result.payload}")
            return order
        except CreateOrderError:
            raise
        except Exception as e:
            logger.debug(f"주문 생성 중 에러 발생: {e}")
            raise CreateOrderError(str(e), cause=e) from e

    def cancel_order(self, order_id):
        """주문을 취소합니다. 실패는 모두 CancelOrderError 로 전달됩니다."""
        try:
            status = self._delete(f"/Trade/Orders/{order_id}")
            result = check_status(status)
            if isinstance(result, Err):
                logger.debug(f"주문 취소 거부 ({order_id}): {result.reason}")
                raise CancelOrderError(result.reason)
            return status
        except CancelOrderError:
            raise
        except Exception as e:
            logger.debug(f"주문 취소 중 에러 발생 ({order_id}): {e}")
            raise CancelOrderError(str(e), cause=e) from e

    def deposit_wallets(self):
        """입금 주소 목록을 조회합니다."""
        result = require_field(self._get("/ElectronicWallet/DepositWallets"), "addresses")
        if isinstance(result, Err):
            raise APIRequestError(result.reason)
        return result.payload

    def withdrawal(self, currency: str, address: str, amount, comment: Optional[str] = None,
                   validation: Optional[str] = None):
        """출금을 요청합니다. comment / validation 은 값이 있을 때만 전송합니다."""
        body = {
            "AddressName": address,
            "Amount": amount,
        }
        if comment is not None:
            body["Comment"] = comment
        if validation is not None:
            body["ValidationCode"] = validation

        status = self._post(f"/ElectronicWallet/withdrawals/{currency}", body)
        result = check_status(status)
        if isinstance(result, Err):
            logger.debug(f"출금 거부 ({currency}): {result.reason}")
            raise WithdrawalError(result.reason)
        return status

    # --- Request pipeline ---

    def auth_headers(self, path: str, verb: str) -> dict:
        """인증 헤더 4개를 만듭니다. 서명과 API_REQUEST_DATE 는 같은 타임스탬프를 사용합니다."""
        timestamp = request_timestamp(self._clock)
        signature = sign(
            self._credentials.secret_key.get_secret_value(),
            self.url,
            timestamp,
            verb,
            JSON_CONTENT_TYPE,
            path,
        )
        return {
            "Content-Type": JSON_CONTENT_TYPE,
            "API_PUBLIC_KEY": self.key,
            "API_REQUEST_DATE": timestamp,
            "API_REQUEST_SIGNATURE": signature,
        }

    def _get(self, path: str, params: Optional[dict] = None, skip_json: bool = False) -> Any:
        # 쿼리 문자열은 서명에 포함하지 않음 (path 만 서명)
        headers = self.auth_headers(path, "GET")
        return self._send(self._session.get, "GET", path, skip_json, headers=headers, params=params)

    def _post(self, path: str, payload, skip_json: bool = False) -> Any:
        data = json.dumps(payload, separators=(",", ":"))
        headers = self.auth_headers(path, "POST")
        return self._send(self._session.post, "POST", path, skip_json, data=data, headers=headers)

    def _delete(self, path: str, skip_json: bool = False) -> Any:
        headers = self.auth_headers(path, "DELETE")
        return self._send(self._session.delete, "DELETE", path, skip_json, headers=headers)

    def _send(self, method, verb: str, path: str, skip_json: bool, **kwargs) -> Any:
        logger.debug(f"{verb} {path}")
        try:
            response = method(f"{self.url}{path}", **kwargs)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.debug(f"{verb} {path} 전송 실패: {e}")
            raise TransportError(str(e), cause=e) from e

        if skip_json:
            return response.text
        try:
            return response.json()
        except ValueError as e:
            raise APIRequestError(f"JSON 응답 파싱 실패 ({verb} {path}): {response.text[:200]}", cause=e) from e
