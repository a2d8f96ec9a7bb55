"""데이터 변환 관련 헬퍼 함수."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Union

NumberLike = Union[str, int, float, Decimal]

# 코인베이스가 기대하는 암호화폐 수량 정밀도
QUANTITY_PRECISION = 8


def to_decimal(value: NumberLike) -> Decimal:
    """숫자형 또는 문자열 값을 Decimal로 변환한다."""
    if isinstance(value, bool):
        raise ValueError(f"Decimal 변환 실패: {value}")
    if isinstance(value, Decimal):
        decimal_value = value
    else:
        try:
            decimal_value = Decimal(str(value).strip())
        except (InvalidOperation, ValueError, TypeError) as exc:
            raise ValueError(f"Decimal 변환 실패: {value}") from exc
    if not decimal_value.is_finite():
        raise ValueError(f"유한한 숫자가 아닙니다: {value}")
    return decimal_value


def format_decimal(value: NumberLike, precision: int = 2, rounding: str = ROUND_HALF_EVEN) -> str:
    """지정된 소수점 자리수로 고정소수점 문자열을 생성한다."""
    quantizer = Decimal(10) ** (-precision)
    try:
        decimal_value = to_decimal(value).quantize(quantizer, rounding=rounding)
    except InvalidOperation as exc:
        raise ValueError(f"정밀도 범위를 벗어난 값입니다: {value}") from exc
    return f"{decimal_value:f}"


def format_quantity(value: NumberLike) -> str:
    """암호화폐 수량을 소수점 8자리 문자열로 변환한다 (round-half-even)."""
    return format_decimal(value, QUANTITY_PRECISION)


__all__ = [
    "NumberLike",
    "QUANTITY_PRECISION",
    "format_decimal",
    "format_quantity",
    "to_decimal",
]
