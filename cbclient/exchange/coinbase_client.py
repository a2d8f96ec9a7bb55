"""코인베이스 v1 REST API 엔드포인트 클라이언트."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, StrictStr, TypeAdapter, ValidationError

from ..utils.converters import NumberLike, format_quantity
from ..utils.exceptions import DecodeError
from .models import (
    AddressesResponse,
    Amount,
    ContactsResponse,
    OrdersResponse,
    PriceQuote,
    ReceiveAddress,
    SellPriceQuote,
    TransferResponse,
    TransfersResponse,
    UsersResponse,
)
from .transport import HttpTransport, Timeout, Transport

ModelT = TypeVar("ModelT", bound=BaseModel)

_CURRENCIES_ADAPTER: TypeAdapter[List[List[StrictStr]]] = TypeAdapter(List[List[StrictStr]])
_EXCHANGE_RATES_ADAPTER: TypeAdapter[Dict[str, StrictStr]] = TypeAdapter(Dict[str, StrictStr])


class CoinbaseEndpoint(str, Enum):
    """코인베이스 REST API v1 리소스 경로."""

    ACCOUNT_BALANCE = "account/balance"
    ACCOUNT_RECEIVE_ADDRESS = "account/receive_address"
    ACCOUNT_GENERATE_RECEIVE_ADDRESS = "account/generate_receive_address"
    ADDRESSES = "addresses"
    BUYS = "buys"
    CONTACTS = "contacts"
    CURRENCIES = "currencies"
    CURRENCIES_EXCHANGE_RATES = "currencies/exchange_rates"
    ORDERS = "orders"
    PRICES_BUY = "prices/buy"
    PRICES_SELL = "prices/sell"
    PRICES_SPOT_RATE = "prices/spot_rate"
    PRICES_HISTORICAL = "prices/historical"
    SELLS = "sells"
    TRANSFERS = "transfers"
    USERS = "users"


def build_query(
    *,
    page: Optional[int] = None,
    limit: Optional[int] = None,
    query: Optional[str] = None,
) -> Dict[str, str]:
    """페이지 파라미터를 생성한다. 0 과 빈 문자열은 '지정 안 함'으로 보고 생략한다."""

    params: Dict[str, str] = {}
    if page:
        params["page"] = str(int(page))
    if limit:
        params["limit"] = str(int(limit))
    if query:
        params["query"] = query
    return params


def decode_model(model: Type[ModelT], body: bytes) -> ModelT:
    """응답 본문을 결과 모델로 해석한다."""

    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError(f"{model.__name__} 응답 해석 실패: {exc}", body=body) from exc


def _decode_with(adapter: TypeAdapter[Any], body: bytes, name: str) -> Any:
    try:
        return adapter.validate_json(body)
    except ValidationError as exc:
        raise DecodeError(f"{name} 응답 해석 실패: {exc}", body=body) from exc


class CoinbaseClient:
    """리소스별 메서드를 제공하는 코인베이스 API 클라이언트.

    각 메서드는 전송 계층을 정확히 한 번 호출하고 응답을 결과 모델로 변환한다.
    전송 계층 예외(:class:`TransportError`)는 그대로 전파되며, 응답 해석 실패는
    :class:`DecodeError` 로 보고된다. 재시도나 캐시는 하지 않는다.
    """

    def __init__(self, transport: Optional[Transport] = None, **transport_options: Any) -> None:
        if transport is not None and transport_options:
            raise ValueError("transport 를 지정한 경우 전송 옵션을 함께 전달할 수 없습니다.")
        self._owns_transport = transport is None
        self._transport: Transport = transport if transport is not None else HttpTransport(**transport_options)

    @property
    def transport(self) -> Transport:
        """내부 전송 계층."""

        return self._transport

    def close(self) -> None:
        """직접 생성한 전송 계층만 종료한다."""

        if self._owns_transport and isinstance(self._transport, HttpTransport):
            self._transport.close()

    def __enter__(self) -> "CoinbaseClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Account
    # ------------------------------------------------------------------
    def account_balance(self, *, timeout: Optional[Timeout] = None) -> Amount:
        body = self._transport.get(CoinbaseEndpoint.ACCOUNT_BALANCE.value, None, timeout=timeout)
        return decode_model(Amount, body)

    def account_receive_address(self, *, timeout: Optional[Timeout] = None) -> ReceiveAddress:
        body = self._transport.get(CoinbaseEndpoint.ACCOUNT_RECEIVE_ADDRESS.value, None, timeout=timeout)
        return decode_model(ReceiveAddress, body)

    def account_generate_receive_address(
        self,
        callback_url: Optional[str] = None,
        label: Optional[str] = None,
        *,
        timeout: Optional[Timeout] = None,
    ) -> ReceiveAddress:
        """새 수신 주소를 생성한다. 빈 값은 요청 본문에서 완전히 생략된다."""

        address: Dict[str, str] = {}
        if callback_url:
            address["callback_url"] = callback_url
        if label:
            address["label"] = label
        payload: Dict[str, Any] = {}
        if address:
            payload["address"] = address

        body = self._transport.post_json(
            CoinbaseEndpoint.ACCOUNT_GENERATE_RECEIVE_ADDRESS.value, payload, timeout=timeout
        )
        return decode_model(ReceiveAddress, body)

    # ------------------------------------------------------------------
    # Addresses / Contacts
    # ------------------------------------------------------------------
    def addresses(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        query: Optional[str] = None,
        *,
        timeout: Optional[Timeout] = None,
    ) -> AddressesResponse:
        params = build_query(page=page, limit=limit, query=query)
        body = self._transport.get(CoinbaseEndpoint.ADDRESSES.value, params, timeout=timeout)
        return decode_model(AddressesResponse, body)

    def contacts(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        query: Optional[str] = None,
        *,
        timeout: Optional[Timeout] = None,
    ) -> ContactsResponse:
        params = build_query(page=page, limit=limit, query=query)
        body = self._transport.get(CoinbaseEndpoint.CONTACTS.value, params, timeout=timeout)
        return decode_model(ContactsResponse, body)

    # ------------------------------------------------------------------
    # Buys / Sells
    # ------------------------------------------------------------------
    def buys(
        self,
        quantity: NumberLike,
        agree_btc_amount_varies: bool = False,
        *,
        timeout: Optional[Timeout] = None,
    ) -> TransferResponse:
        """BTC 매수 주문. 수량은 소수점 8자리 문자열로 전송된다."""

        data = {"qty": format_quantity(quantity)}
        if agree_btc_amount_varies:
            data["agree_btc_amount_varies"] = "true"
        body = self._transport.post_form(CoinbaseEndpoint.BUYS.value, data, timeout=timeout)
        return decode_model(TransferResponse, body)

    def sells(self, quantity: NumberLike, *, timeout: Optional[Timeout] = None) -> TransferResponse:
        data = {"qty": format_quantity(quantity)}
        body = self._transport.post_form(CoinbaseEndpoint.SELLS.value, data, timeout=timeout)
        return decode_model(TransferResponse, body)

    # ------------------------------------------------------------------
    # Currencies
    # ------------------------------------------------------------------
    def currencies(self, *, timeout: Optional[Timeout] = None) -> List[List[str]]:
        """``[통화 이름, ISO 코드]`` 쌍의 목록."""

        body = self._transport.get(CoinbaseEndpoint.CURRENCIES.value, None, timeout=timeout)
        return _decode_with(_CURRENCIES_ADAPTER, body, "currencies")

    def currencies_exchange_rates(self, *, timeout: Optional[Timeout] = None) -> Dict[str, str]:
        body = self._transport.get(CoinbaseEndpoint.CURRENCIES_EXCHANGE_RATES.value, None, timeout=timeout)
        return _decode_with(_EXCHANGE_RATES_ADAPTER, body, "exchange_rates")

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------
    def orders(self, page: Optional[int] = None, *, timeout: Optional[Timeout] = None) -> OrdersResponse:
        params = build_query(page=page)
        body = self._transport.get(CoinbaseEndpoint.ORDERS.value, params, timeout=timeout)
        return decode_model(OrdersResponse, body)

    # ------------------------------------------------------------------
    # Prices
    # ------------------------------------------------------------------
    def prices_buy(self, *, timeout: Optional[Timeout] = None) -> PriceQuote:
        body = self._transport.get(CoinbaseEndpoint.PRICES_BUY.value, None, timeout=timeout)
        return decode_model(PriceQuote, body)

    def prices_sell(self, *, timeout: Optional[Timeout] = None) -> SellPriceQuote:
        body = self._transport.get(CoinbaseEndpoint.PRICES_SELL.value, None, timeout=timeout)
        return decode_model(SellPriceQuote, body)

    def prices_spot_rate(self, *, timeout: Optional[Timeout] = None) -> Amount:
        body = self._transport.get(CoinbaseEndpoint.PRICES_SPOT_RATE.value, None, timeout=timeout)
        return decode_model(Amount, body)

    def prices_historical(self, page: Optional[int] = None, *, timeout: Optional[Timeout] = None) -> str:
        """과거 시세 원문을 그대로 반환한다. JSON 해석은 하지 않는다."""

        params = build_query(page=page)
        body = self._transport.get(CoinbaseEndpoint.PRICES_HISTORICAL.value, params, timeout=timeout)
        return body.decode("utf-8", errors="replace")

    # ------------------------------------------------------------------
    # Transfers / Users
    # ------------------------------------------------------------------
    def transfers(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        *,
        timeout: Optional[Timeout] = None,
    ) -> TransfersResponse:
        params = build_query(page=page, limit=limit)
        body = self._transport.get(CoinbaseEndpoint.TRANSFERS.value, params, timeout=timeout)
        return decode_model(TransfersResponse, body)

    def users(self, *, timeout: Optional[Timeout] = None) -> UsersResponse:
        body = self._transport.get(CoinbaseEndpoint.USERS.value, None, timeout=timeout)
        return decode_model(UsersResponse, body)


__all__ = [
    "CoinbaseClient",
    "CoinbaseEndpoint",
    "build_query",
    "decode_model",
]
