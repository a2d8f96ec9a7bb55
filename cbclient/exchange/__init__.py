"""코인베이스 API 연동 래퍼 패키지."""

from .coinbase_client import CoinbaseClient, CoinbaseEndpoint, build_query, decode_model
from .models import (
    Address,
    AddressEntry,
    AddressesResponse,
    Amount,
    Button,
    CentsAmount,
    Contact,
    ContactEntry,
    ContactsResponse,
    Order,
    OrderEntry,
    OrderTransaction,
    OrdersResponse,
    PaginatedResponse,
    PriceQuote,
    ReceiveAddress,
    SellPriceQuote,
    Transfer,
    TransferResponse,
    TransfersResponse,
    User,
    UserEntry,
    UsersResponse,
)
from .transport import HttpMethod, HttpTransport, Timeout, Transport

__all__ = [
    "Address",
    "AddressEntry",
    "AddressesResponse",
    "Amount",
    "Button",
    "CentsAmount",
    "CoinbaseClient",
    "CoinbaseEndpoint",
    "Contact",
    "ContactEntry",
    "ContactsResponse",
    "HttpMethod",
    "HttpTransport",
    "Order",
    "OrderEntry",
    "OrderTransaction",
    "OrdersResponse",
    "PaginatedResponse",
    "PriceQuote",
    "ReceiveAddress",
    "SellPriceQuote",
    "Timeout",
    "Transfer",
    "TransferResponse",
    "TransfersResponse",
    "Transport",
    "User",
    "UserEntry",
    "UsersResponse",
    "build_query",
    "decode_model",
]
