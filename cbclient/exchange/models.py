"""코인베이스 API 응답을 표현하는 결과 모델.

모든 모델은 불변이며 응답 JSON의 키 이름(snake_case)을 그대로 따른다.
알 수 없는 필드는 무시하고, 누락되거나 ``null`` 인 필드는 기본값(빈 문자열, 0,
빈 컬렉션, 빈 하위 모델)으로 채운다. 스칼라 필드는 엄격 타입이라 ``"14"`` 를 정수로,
``"yes"`` 를 불리언으로 바꾸지 않고 해석 오류로 처리한다.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, model_validator

from ..utils.converters import to_decimal


class WireModel(BaseModel):
    """응답 디코딩에 공통으로 사용하는 기반 모델."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # null 은 누락된 필드와 동일하게 기본값으로 처리한다.
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Amount(WireModel):
    """통화 금액. ``value`` 는 응답의 ``amount`` 문자열을 그대로 보존한다."""

    value: StrictStr = Field(default="", alias="amount")
    currency: StrictStr = ""

    def as_decimal(self) -> Decimal:
        """금액을 Decimal로 변환한다."""
        return to_decimal(self.value)


class CentsAmount(WireModel):
    """최소 통화 단위(센트) 정수로 표현된 금액."""

    cents: StrictInt = 0
    currency_iso: StrictStr = ""


class Transfer(WireModel):
    """매수/매도 및 이체 내역."""

    id: StrictStr = ""
    type: StrictStr = ""
    code: StrictStr = ""
    created_at: StrictStr = ""
    fees: Dict[str, CentsAmount] = Field(default_factory=dict)
    status: StrictStr = ""
    payout_date: StrictStr = ""
    transaction_id: StrictStr = ""
    btc: Amount = Field(default_factory=Amount)
    subtotal: Amount = Field(default_factory=Amount)
    total: Amount = Field(default_factory=Amount)
    description: StrictStr = ""


class TransferResponse(WireModel):
    """``buys`` / ``sells`` 응답."""

    success: StrictBool = False
    errors: List[StrictStr] = Field(default_factory=list)
    transfer: Transfer = Field(default_factory=Transfer)


class PaginatedResponse(WireModel):
    """페이지 정보가 포함된 목록 응답의 공통 필드."""

    total_count: StrictInt = 0
    num_pages: StrictInt = 0
    current_page: StrictInt = 0


class ReceiveAddress(WireModel):
    success: StrictBool = False
    address: StrictStr = ""
    callback_url: StrictStr = ""


class Address(WireModel):
    address: StrictStr = ""
    callback_url: StrictStr = ""
    label: StrictStr = ""
    created_at: StrictStr = ""


class AddressEntry(WireModel):
    address: Address = Field(default_factory=Address)


class AddressesResponse(PaginatedResponse):
    addresses: List[AddressEntry] = Field(default_factory=list)

    @property
    def items(self) -> List[AddressEntry]:
        return self.addresses


class Contact(WireModel):
    email: StrictStr = ""


class ContactEntry(WireModel):
    contact: Contact = Field(default_factory=Contact)


class ContactsResponse(PaginatedResponse):
    contacts: List[ContactEntry] = Field(default_factory=list)

    @property
    def items(self) -> List[ContactEntry]:
        return self.contacts


class Button(WireModel):
    type: StrictStr = ""
    name: StrictStr = ""
    description: StrictStr = ""
    id: StrictStr = ""


class OrderTransaction(WireModel):
    id: StrictStr = ""
    hash: StrictStr = ""
    confirmations: StrictInt = 0


class Order(WireModel):
    """머천트 주문."""

    id: StrictStr = ""
    created_at: StrictStr = ""
    status: StrictStr = ""
    total_btc: CentsAmount = Field(default_factory=CentsAmount)
    total_native: CentsAmount = Field(default_factory=CentsAmount)
    custom: StrictStr = ""
    button: Button = Field(default_factory=Button)
    transaction: OrderTransaction = Field(default_factory=OrderTransaction)


class OrderEntry(WireModel):
    order: Order = Field(default_factory=Order)


class OrdersResponse(PaginatedResponse):
    orders: List[OrderEntry] = Field(default_factory=list)

    @property
    def items(self) -> List[OrderEntry]:
        return self.orders


class TransfersResponse(PaginatedResponse):
    """이체 목록. 각 항목은 ``{"transfer": {...}}`` 형태의 단일 키 매핑이다."""

    transfers: List[Dict[str, Transfer]] = Field(default_factory=list)

    @property
    def items(self) -> List[Dict[str, Transfer]]:
        return self.transfers


class PriceQuote(WireModel):
    """매수 가격 견적. 수수료는 라벨별 금액 매핑의 목록이다."""

    subtotal: Amount = Field(default_factory=Amount)
    fees: List[Dict[str, Amount]] = Field(default_factory=list)
    total: Amount = Field(default_factory=Amount)


class SellPriceQuote(PriceQuote):
    amount: StrictStr = ""
    currency: StrictStr = ""


class User(WireModel):
    id: StrictStr = ""
    name: StrictStr = ""
    email: StrictStr = ""
    time_zone: StrictStr = ""
    native_currency: StrictStr = ""
    balance: Amount = Field(default_factory=Amount)
    buy_level: StrictInt = 0
    sell_level: StrictInt = 0
    buy_limit: Amount = Field(default_factory=Amount)
    sell_limit: Amount = Field(default_factory=Amount)


class UserEntry(WireModel):
    user: User = Field(default_factory=User)


class UsersResponse(WireModel):
    users: List[UserEntry] = Field(default_factory=list)


__all__ = [
    "Address",
    "AddressEntry",
    "AddressesResponse",
    "Amount",
    "Button",
    "CentsAmount",
    "Contact",
    "ContactEntry",
    "ContactsResponse",
    "Order",
    "OrderEntry",
    "OrderTransaction",
    "OrdersResponse",
    "PaginatedResponse",
    "PriceQuote",
    "ReceiveAddress",
    "SellPriceQuote",
    "Transfer",
    "TransferResponse",
    "TransfersResponse",
    "User",
    "UserEntry",
    "UsersResponse",
    "WireModel",
]
