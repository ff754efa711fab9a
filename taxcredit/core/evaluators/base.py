"""판정 함수 공통 유틸리티"""

from decimal import Decimal, ROUND_DOWN
from typing import Union


Number = Union[int, float, Decimal]


def apply_rate(amount: Number, rate: Decimal) -> int:
    """금액 × 비율 (원 미만 절사)"""
    result = Decimal(str(amount)) * rate
    return int(result.to_integral_value(rounding=ROUND_DOWN))


def manwon(amount: Number) -> str:
    """만원 단위 표기 (예: 12000000 -> "1200만원")"""
    return f"{amount / 10000:.0f}만원"


def eok(amount: Number) -> str:
    """억원 단위 표기 (예: 150000000 -> "1.50억원")"""
    return f"{amount / 100000000:.2f}억원"


def percent(rate: Decimal) -> str:
    return f"{rate * 100:.0f}%"
