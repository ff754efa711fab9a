"""규칙 디스패처: 규칙 ID로 판정 함수를 선택"""

from dataclasses import replace
from typing import Callable, Dict

from .assessment_result import AssessmentOutcome
from .models import EvaluationContext
from .rule_catalog import RuleDefinition
from .evaluators import (
    assess_employment_increase,
    assess_youth_employment,
    assess_disabled_employment,
    assess_career_break_women,
    assess_social_insurance,
    assess_sme_special_reduction,
    assess_startup_sme_reduction,
    assess_manufacturing_relocation,
    assess_social_enterprise_reduction,
    assess_youth_startup_reduction,
    assess_productivity_facilities,
    assess_energy_environment_facilities,
    assess_safety_facilities,
    assess_smart_factory,
    assess_rnd_expense,
    assess_design_expense,
    assess_new_technology_expense,
    assess_donation,
    assess_business_vehicle,
)


UNIMPLEMENTED_REASON = '미구현 규칙'

# 규칙 ID(1~19) -> 컨텍스트에서 필요한 번들을 꺼내 판정 함수 호출
RULE_EVALUATORS: Dict[int, Callable[[EvaluationContext], AssessmentOutcome]] = {
    1: lambda ctx: assess_employment_increase(ctx.company, ctx.employment),
    2: lambda ctx: assess_youth_employment(ctx.company, ctx.employment),
    3: lambda ctx: assess_disabled_employment(ctx.company, ctx.employment),
    4: lambda ctx: assess_career_break_women(ctx.company, ctx.employment),
    5: lambda ctx: assess_social_insurance(ctx.company, ctx.employment),
    6: lambda ctx: assess_sme_special_reduction(ctx.company, ctx.other),
    7: lambda ctx: assess_startup_sme_reduction(ctx.company, ctx.other, ctx.year),
    8: lambda ctx: assess_manufacturing_relocation(ctx.company, ctx.other),
    9: lambda ctx: assess_social_enterprise_reduction(ctx.company, ctx.other),
    10: lambda ctx: assess_youth_startup_reduction(ctx.company, ctx.other, ctx.year),
    11: lambda ctx: assess_productivity_facilities(ctx.company, ctx.investments),
    12: lambda ctx: assess_energy_environment_facilities(ctx.company, ctx.investments),
    13: lambda ctx: assess_safety_facilities(ctx.company, ctx.investments),
    14: lambda ctx: assess_smart_factory(ctx.company, ctx.investments),
    15: lambda ctx: assess_rnd_expense(ctx.company, ctx.rnd_items),
    16: lambda ctx: assess_design_expense(ctx.company, ctx.rnd_items),
    17: lambda ctx: assess_new_technology_expense(ctx.company, ctx.rnd_items),
    18: lambda ctx: assess_donation(ctx.company, ctx.other),
    19: lambda ctx: assess_business_vehicle(ctx.company, ctx.other),
}


def evaluate(rule: RuleDefinition, ctx: EvaluationContext) -> AssessmentOutcome:
    """규칙 1건 판정

    1~19 이외의 ID는 예외 없이 '미구현 규칙' 결과를 반환합니다.

    Args:
        rule: 규칙 정의
        ctx: 판정 컨텍스트

    Returns:
        규칙 ID와 이름이 기록된 판정 결과
    """
    evaluator = RULE_EVALUATORS.get(rule.id)
    if evaluator is None:
        outcome = AssessmentOutcome.ineligible(UNIMPLEMENTED_REASON)
    else:
        outcome = evaluator(ctx)

    return replace(outcome, rule_id=rule.id, rule_name=rule.name)
