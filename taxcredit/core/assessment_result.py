"""AssessmentOutcome / AssessmentSession: 세액공제 판정 결과"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class AssessmentOutcome:
    """규칙 1건의 판정 결과

    적용 불가(eligible=False)이면 credit_amount는 항상 0입니다.
    업무용 차량 한도 검증(19번)은 공제가 아닌 손금 한도 검증이므로
    적용 여부와 관계없이 credit_amount가 0입니다.

    Attributes:
        eligible: 적용 가능 여부
        credit_amount: 공제 가능액 (원 단위 정수)
        reasons: 판정 사유
        details: 상세 계산 내역
        rule_id: 세액공제 규칙 ID
        rule_name: 세액공제명
    """

    eligible: bool
    credit_amount: int
    reasons: str
    details: Dict[str, Any] = field(default_factory=dict)
    rule_id: int = 0
    rule_name: str = ""

    @classmethod
    def ineligible(cls, reasons: str, details: Optional[Dict[str, Any]] = None) -> "AssessmentOutcome":
        """적용 불가 결과 생성"""
        return cls(
            eligible=False,
            credit_amount=0,
            reasons=reasons,
            details=details or {}
        )

    def to_dict(self) -> dict:
        """딕셔너리로 변환 (저장/응답용)

        Returns:
            판정 결과 딕셔너리
        """
        return {
            'credit_rule_id': self.rule_id,
            'credit_rule_name': self.rule_name,
            'is_eligible': self.eligible,
            'credit_amount': self.credit_amount,
            'reasons': self.reasons,
            'details': _serialize(self.details),
        }

    def __str__(self) -> str:
        status = "적용" if self.eligible else "미적용"
        return f"[{self.rule_id}] {self.rule_name}: {status}, {self.credit_amount:,}원"


@dataclass(frozen=True)
class AssessmentSession:
    """판정 1회(19개 규칙 전체)의 집계 결과

    Attributes:
        outcomes: 규칙별 판정 결과 (카탈로그 순서)
        total_credit_amount: 적용 가능 규칙의 공제액 합계
        eligible_count: 적용 가능 규칙 수
    """

    outcomes: List[AssessmentOutcome]
    total_credit_amount: int
    eligible_count: int

    def eligible_outcomes(self) -> List[AssessmentOutcome]:
        return [outcome for outcome in self.outcomes if outcome.eligible]

    def to_dict(self) -> dict:
        return {
            'total_credit_amount': self.total_credit_amount,
            'eligible_count': self.eligible_count,
            'results': [outcome.to_dict() for outcome in self.outcomes],
        }

    def get_summary(self) -> str:
        """판정 결과 요약

        Returns:
            사람이 읽기 쉬운 형태의 요약
        """
        lines = ["=== 세액공제 판정 결과 ===", ""]
        for outcome in self.eligible_outcomes():
            lines.append(f"{outcome.rule_name:<24} {outcome.credit_amount:>15,}원")
            lines.append(f"  사유: {outcome.reasons}")
        lines.append("─────────────────────────────────")
        lines.append(f"적용 가능 항목:  {self.eligible_count:>15}개 / {len(self.outcomes)}개")
        lines.append(f"총 공제 가능액:  {self.total_credit_amount:>15,}원")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.get_summary()


def _serialize(value: Any) -> Any:
    """값을 직렬화 가능한 형태로 변환"""
    if isinstance(value, Decimal):
        return float(value)
    elif isinstance(value, dict):
        return {key: _serialize(item) for key, item in value.items()}
    elif isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    elif isinstance(value, Enum):
        return value.value
    return value
