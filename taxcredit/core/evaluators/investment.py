"""시설 투자 세액공제 판정 (규칙 11~14)

규칙마다 대상 시설 종류, 최소 투자금액, 규모별 공제율이 다릅니다.
"""

from decimal import Decimal
from typing import Callable, Dict, List, Sequence

from ..assessment_result import AssessmentOutcome
from ..models import CompanyProfile, CompanySize, InvestmentItem
from .base import apply_rate, eok, percent


PRODUCTIVITY_FACILITIES = frozenset({"자동화설비", "정보시스템", "계측장비"})
ENERGY_ENVIRONMENT_FACILITIES = frozenset({"에너지절약시설", "온실가스감축시설", "환경보전시설"})
SAFETY_FACILITIES = frozenset({"화재예방설비", "안전보호장구", "작업환경개선설비"})
SMART_FACTORY_KEYWORD = "스마트공장"

MIN_FACILITY_INVESTMENT = 10000000
MIN_SMART_FACTORY_INVESTMENT = 100000000

PRODUCTIVITY_RATES = {
    CompanySize.SME: Decimal('0.10'),
    CompanySize.MID_SIZED: Decimal('0.05'),
    CompanySize.LARGE: Decimal('0.03'),
}
ENERGY_ENVIRONMENT_RATES = {
    CompanySize.SME: Decimal('0.10'),
    CompanySize.MID_SIZED: Decimal('0.05'),
    CompanySize.LARGE: Decimal('0.03'),
}
SAFETY_RATES = {
    CompanySize.SME: Decimal('0.10'),
    CompanySize.MID_SIZED: Decimal('0.07'),
    CompanySize.LARGE: Decimal('0.03'),
}
SMART_FACTORY_RATES = {
    CompanySize.SME: Decimal('0.15'),
    CompanySize.MID_SIZED: Decimal('0.10'),
    CompanySize.LARGE: Decimal('0.05'),
}


def _assess_facility_investment(
    company: CompanyProfile,
    investments: Sequence[InvestmentItem],
    matches: Callable[[str], bool],
    rates: Dict[CompanySize, Decimal],
    min_investment: int,
    label: str,
    no_data_reason: str,
    no_match_reason: str,
    below_min_reason: str
) -> AssessmentOutcome:
    """시설 종류로 필터링 → 합산 → 최소금액 확인 → 규모별 공제율 적용"""
    if not investments:
        return AssessmentOutcome.ineligible(no_data_reason)

    relevant: List[InvestmentItem] = [
        item for item in investments
        if item.facility_type and matches(item.facility_type)
    ]
    if not relevant:
        return AssessmentOutcome.ineligible(no_match_reason)

    total_investment = sum(item.investment_amount or 0 for item in relevant)
    if total_investment < min_investment:
        return AssessmentOutcome.ineligible(
            below_min_reason,
            {'total_investment': total_investment, 'min_investment': min_investment}
        )

    credit_rate = rates[company.company_type]
    total_credit = apply_rate(total_investment, credit_rate)

    return AssessmentOutcome(
        eligible=True,
        credit_amount=total_credit,
        reasons=f"{label} 투자 {eok(total_investment)}, {percent(credit_rate)} 공제",
        details={
            'facility_types': sorted({item.facility_type for item in relevant}),
            'total_investment': total_investment,
            'credit_rate': credit_rate,
            'total_credit': total_credit
        }
    )


def assess_productivity_facilities(
    company: CompanyProfile,
    investments: Sequence[InvestmentItem]
) -> AssessmentOutcome:
    """11. 생산성향상시설 투자 세액공제"""
    return _assess_facility_investment(
        company,
        investments,
        matches=lambda facility_type: facility_type in PRODUCTIVITY_FACILITIES,
        rates=PRODUCTIVITY_RATES,
        min_investment=MIN_FACILITY_INVESTMENT,
        label='생산성향상시설',
        no_data_reason='생산성향상시설 투자 실적이 없습니다',
        no_match_reason='해당 시설 투자가 없습니다',
        below_min_reason='투자금액이 1천만원 미만입니다'
    )


def assess_energy_environment_facilities(
    company: CompanyProfile,
    investments: Sequence[InvestmentItem]
) -> AssessmentOutcome:
    """12. 에너지절약·환경개선시설 투자 세액공제"""
    return _assess_facility_investment(
        company,
        investments,
        matches=lambda facility_type: facility_type in ENERGY_ENVIRONMENT_FACILITIES,
        rates=ENERGY_ENVIRONMENT_RATES,
        min_investment=MIN_FACILITY_INVESTMENT,
        label='에너지·환경시설',
        no_data_reason='에너지절약·환경개선시설 투자 실적이 없습니다',
        no_match_reason='해당 시설 투자가 없습니다',
        below_min_reason='투자금액이 1천만원 미만입니다'
    )


def assess_safety_facilities(
    company: CompanyProfile,
    investments: Sequence[InvestmentItem]
) -> AssessmentOutcome:
    """13. 안전시설 투자 세액공제"""
    return _assess_facility_investment(
        company,
        investments,
        matches=lambda facility_type: facility_type in SAFETY_FACILITIES,
        rates=SAFETY_RATES,
        min_investment=MIN_FACILITY_INVESTMENT,
        label='안전시설',
        no_data_reason='안전시설 투자 실적이 없습니다',
        no_match_reason='해당 시설 투자가 없습니다',
        below_min_reason='투자금액이 1천만원 미만입니다'
    )


def assess_smart_factory(
    company: CompanyProfile,
    investments: Sequence[InvestmentItem]
) -> AssessmentOutcome:
    """14. 스마트공장 자동화설비 투자 세액공제

    시설 종류에 "스마트공장"이 포함된 투자만 대상입니다.
    """
    return _assess_facility_investment(
        company,
        investments,
        matches=lambda facility_type: SMART_FACTORY_KEYWORD in facility_type,
        rates=SMART_FACTORY_RATES,
        min_investment=MIN_SMART_FACTORY_INVESTMENT,
        label='스마트공장 설비',
        no_data_reason='스마트공장 설비 투자 실적이 없습니다',
        no_match_reason='스마트공장 설비 투자가 없습니다',
        below_min_reason='투자금액이 1억원 미만입니다'
    )
