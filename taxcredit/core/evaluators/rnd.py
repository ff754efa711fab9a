"""연구개발비 세액공제 판정 (규칙 15~17)"""

from decimal import Decimal
from typing import Dict, List, Sequence

from ..assessment_result import AssessmentOutcome
from ..models import CompanyProfile, CompanySize, RndItem
from .base import apply_rate, manwon, percent


GENERAL_RND = "일반연구개발비"
NEW_GROWTH_RND = "신성장동력연구개발비"
DESIGN_RND = "디자인개발비"
NEW_TECHNOLOGY_RND = "신기술개발비"

MIN_DEVELOPMENT_EXPENSE = 1000000

# 연구개발 유형 -> 규모별 공제율 (항목마다 따로 적용)
RND_EXPENSE_RATES = {
    GENERAL_RND: {
        CompanySize.SME: Decimal('0.25'),
        CompanySize.MID_SIZED: Decimal('0.15'),
        CompanySize.LARGE: Decimal('0.05'),
    },
    NEW_GROWTH_RND: {
        CompanySize.SME: Decimal('0.30'),
        CompanySize.MID_SIZED: Decimal('0.20'),
        CompanySize.LARGE: Decimal('0.10'),
    },
}
DESIGN_RATES = {
    CompanySize.SME: Decimal('0.25'),
    CompanySize.MID_SIZED: Decimal('0.15'),
    CompanySize.LARGE: Decimal('0.05'),
}
NEW_TECHNOLOGY_RATES = {
    CompanySize.SME: Decimal('0.30'),
    CompanySize.MID_SIZED: Decimal('0.20'),
    CompanySize.LARGE: Decimal('0.10'),
}


def assess_rnd_expense(
    company: CompanyProfile,
    rnd_items: Sequence[RndItem]
) -> AssessmentOutcome:
    """15. 연구인력개발비 세액공제

    일반/신성장동력 항목이 섞여 있을 수 있으므로 공제율을 항목별로 적용합니다.
    """
    if not rnd_items:
        return AssessmentOutcome.ineligible('연구개발비 지출 실적이 없습니다')

    relevant = [item for item in rnd_items if item.rnd_type in RND_EXPENSE_RATES]
    if not relevant:
        return AssessmentOutcome.ineligible('해당 연구개발비가 없습니다')

    total_credit = 0
    total_expense = 0
    items: List[Dict] = []
    for item in relevant:
        expense = item.expense_amount or 0
        credit_rate = RND_EXPENSE_RATES[item.rnd_type][company.company_type]
        credit = apply_rate(expense, credit_rate)

        total_expense += expense
        total_credit += credit
        items.append({
            'rnd_type': item.rnd_type,
            'expense_amount': expense,
            'credit_rate': credit_rate,
            'credit': credit
        })

    return AssessmentOutcome(
        eligible=True,
        credit_amount=total_credit,
        reasons='연구개발비 세액공제 적용',
        details={
            'items': items,
            'total_expense': total_expense,
            'total_credit': total_credit
        }
    )


def _assess_single_type_expense(
    company: CompanyProfile,
    rnd_items: Sequence[RndItem],
    rnd_type: str,
    rates: Dict[CompanySize, Decimal],
    label: str,
    no_data_reason: str,
    no_match_reason: str
) -> AssessmentOutcome:
    if not rnd_items:
        return AssessmentOutcome.ineligible(no_data_reason)

    relevant = [item for item in rnd_items if item.rnd_type == rnd_type]
    if not relevant:
        return AssessmentOutcome.ineligible(no_match_reason)

    total_expense = sum(item.expense_amount or 0 for item in relevant)
    if total_expense < MIN_DEVELOPMENT_EXPENSE:
        return AssessmentOutcome.ineligible(
            '개발비가 100만원 미만입니다',
            {'total_expense': total_expense}
        )

    credit_rate = rates[company.company_type]
    total_credit = apply_rate(total_expense, credit_rate)

    return AssessmentOutcome(
        eligible=True,
        credit_amount=total_credit,
        reasons=f"{label} {manwon(total_expense)}, {percent(credit_rate)} 공제",
        details={
            'total_expense': total_expense,
            'credit_rate': credit_rate,
            'total_credit': total_credit
        }
    )


def assess_design_expense(
    company: CompanyProfile,
    rnd_items: Sequence[RndItem]
) -> AssessmentOutcome:
    """16. 디자인 개발비 세액공제"""
    return _assess_single_type_expense(
        company,
        rnd_items,
        rnd_type=DESIGN_RND,
        rates=DESIGN_RATES,
        label='디자인 개발비',
        no_data_reason='디자인 개발비 지출 실적이 없습니다',
        no_match_reason='디자인 개발비가 없습니다'
    )


def assess_new_technology_expense(
    company: CompanyProfile,
    rnd_items: Sequence[RndItem]
) -> AssessmentOutcome:
    """17. 데이터·AI·IoT 기술 개발비 공제"""
    return _assess_single_type_expense(
        company,
        rnd_items,
        rnd_type=NEW_TECHNOLOGY_RND,
        rates=NEW_TECHNOLOGY_RATES,
        label='데이터·AI·IoT 개발비',
        no_data_reason='신기술 개발비 지출 실적이 없습니다',
        no_match_reason='신기술 개발비가 없습니다'
    )
