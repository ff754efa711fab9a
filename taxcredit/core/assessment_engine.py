"""판정 집계: 전체 규칙 카탈로그를 한 컨텍스트에 대해 판정"""

from typing import Iterable, List

from .assessment_result import AssessmentOutcome, AssessmentSession
from .dispatcher import evaluate
from .models import EvaluationContext
from .rule_catalog import RuleDefinition


def run_assessment(
    catalog: Iterable[RuleDefinition],
    ctx: EvaluationContext
) -> AssessmentSession:
    """전체 규칙 판정 및 집계

    카탈로그 순서대로 모든 규칙을 판정하며, 중간에 멈추지 않습니다.
    규칙 간 상호작용(합산 한도 등)은 없습니다.

    Args:
        catalog: 규칙 정의 목록 (RuleCatalog 또는 RuleDefinition 리스트)
        ctx: 판정 컨텍스트

    Returns:
        규칙별 결과, 총 공제 가능액, 적용 가능 항목 수
    """
    outcomes: List[AssessmentOutcome] = [evaluate(rule, ctx) for rule in catalog]

    eligible = [outcome for outcome in outcomes if outcome.eligible]

    return AssessmentSession(
        outcomes=outcomes,
        total_credit_amount=sum(outcome.credit_amount for outcome in eligible),
        eligible_count=len(eligible)
    )
