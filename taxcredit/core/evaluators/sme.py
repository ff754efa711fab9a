"""중소기업 세액감면 판정 (규칙 6~10)

감면액은 호출 측이 제공한 산출세액(calculated_tax)에 감면율을 곱해 계산합니다.
창업 경과 연수는 판정 대상 과세연도 기준입니다.
"""

from decimal import Decimal
from typing import Optional

from ..assessment_result import AssessmentOutcome
from ..models import CompanyProfile, CompanySize, Industry, OtherData
from .base import apply_rate, percent


SME_DESIGNATED_INDUSTRIES = frozenset({
    Industry.MANUFACTURING,
    Industry.MINING,
    Industry.CONSTRUCTION,
    Industry.WHOLESALE,
    Industry.RETAIL,
})
SME_DESIGNATED_RATE = Decimal('0.10')
SME_DEFAULT_RATE = Decimal('0.05')
# 산출세액 미제공 시 사업소득의 10%로 근사 (실제 세액 계산이 아님)
ESTIMATED_TAX_RATE = Decimal('0.10')

STARTUP_PERIOD_YEARS = 5
FUTURE_STARTUP_REASON = '창업일이 과세연도 이후입니다'
YOUTH_STARTUP_RATE = Decimal('1.0')
GENERAL_STARTUP_RATE = Decimal('0.5')

RELOCATION_RATE = Decimal('1.0')

SOCIAL_ENTERPRISE = "사회적기업"
COOPERATIVE = "협동조합"
SOCIAL_ENTERPRISE_RATE = Decimal('1.0')
COOPERATIVE_RATE = Decimal('0.5')

YOUTH_FOUNDER_MAX_AGE = 34
YOUTH_STARTUP_REDUCTION_RATE = Decimal('1.0')
YOUTH_STARTUP_ANNUAL_CAP = 200000000


def _calculated_tax(data: OtherData) -> int:
    return data.calculated_tax or 0


def assess_sme_special_reduction(
    company: CompanyProfile,
    data: Optional[OtherData]
) -> AssessmentOutcome:
    """6. 중소기업 특별세액감면

    제조업·광업·건설업·도매업·소매업은 10%, 그 밖의 업종은 5%.
    """
    if company.company_type != CompanySize.SME:
        return AssessmentOutcome.ineligible('중소기업만 해당됩니다')

    if not data or not data.business_income:
        return AssessmentOutcome.ineligible('사업소득 정보가 없습니다')

    income = data.business_income
    tax = data.calculated_tax or apply_rate(income, ESTIMATED_TAX_RATE)

    if company.industry in SME_DESIGNATED_INDUSTRIES:
        reduction_rate = SME_DESIGNATED_RATE
    else:
        reduction_rate = SME_DEFAULT_RATE

    total_credit = apply_rate(tax, reduction_rate)

    return AssessmentOutcome(
        eligible=True,
        credit_amount=total_credit,
        reasons=f"중소기업 특별세액감면 {percent(reduction_rate)} 적용",
        details={
            'industry': company.industry.value,
            'business_income': income,
            'calculated_tax': tax,
            'reduction_rate': reduction_rate,
            'total_credit': total_credit
        }
    )


def assess_startup_sme_reduction(
    company: CompanyProfile,
    data: Optional[OtherData],
    year: int
) -> AssessmentOutcome:
    """7. 창업중소기업 세액감면 (창업 후 5년 이내)"""
    if not data or not data.startup_date:
        return AssessmentOutcome.ineligible('창업 정보가 없습니다')

    startup_year = data.startup_date.year
    years_from_startup = year - startup_year

    if years_from_startup < 0:
        return AssessmentOutcome.ineligible(
            FUTURE_STARTUP_REASON,
            {'startup_year': startup_year, 'years_from_startup': years_from_startup}
        )

    if years_from_startup > STARTUP_PERIOD_YEARS:
        return AssessmentOutcome.ineligible(
            '창업 후 5년이 경과했습니다',
            {'startup_year': startup_year, 'years_from_startup': years_from_startup}
        )

    tax = _calculated_tax(data)
    is_youth_startup = data.is_youth_startup
    reduction_rate = YOUTH_STARTUP_RATE if is_youth_startup else GENERAL_STARTUP_RATE
    total_credit = apply_rate(tax, reduction_rate)

    startup_kind = '청년' if is_youth_startup else '일반'
    return AssessmentOutcome(
        eligible=True,
        credit_amount=total_credit,
        reasons=(
            f"{startup_kind}창업 {percent(reduction_rate)} 감면 "
            f"({years_from_startup + 1}년차)"
        ),
        details={
            'startup_year': startup_year,
            'years_from_startup': years_from_startup,
            'calculated_tax': tax,
            'reduction_rate': reduction_rate,
            'total_credit': total_credit
        }
    )


def assess_manufacturing_relocation(
    company: CompanyProfile,
    data: Optional[OtherData]
) -> AssessmentOutcome:
    """8. 제조업 지방 이전 세액감면

    수도권에서 지방으로 이전을 마친 제조업만 해당하므로 현재 소재지가 지방이어야 합니다.
    """
    if not data or not data.relocation_completed:
        return AssessmentOutcome.ineligible('지방 이전 정보가 없습니다')

    if company.industry != Industry.MANUFACTURING:
        return AssessmentOutcome.ineligible('제조업만 해당됩니다')

    if company.is_capital_area:
        return AssessmentOutcome.ineligible('수도권에서 지방으로 이전한 경우만 해당됩니다')

    tax = _calculated_tax(data)
    total_credit = apply_rate(tax, RELOCATION_RATE)

    return AssessmentOutcome(
        eligible=True,
        credit_amount=total_credit,
        reasons='제조업 지방 이전 100% 감면 (7년간)',
        details={
            'calculated_tax': tax,
            'reduction_rate': RELOCATION_RATE,
            'total_credit': total_credit
        }
    )


def assess_social_enterprise_reduction(
    company: CompanyProfile,
    data: Optional[OtherData]
) -> AssessmentOutcome:
    """9. 사회적기업 및 협동조합 세액감면"""
    if not data or not data.certification:
        return AssessmentOutcome.ineligible('사회적기업 또는 협동조합 인증 정보가 없습니다')

    tax = _calculated_tax(data)
    certification_type = data.certification_type or COOPERATIVE
    if certification_type == SOCIAL_ENTERPRISE:
        reduction_rate = SOCIAL_ENTERPRISE_RATE
    else:
        reduction_rate = COOPERATIVE_RATE
    total_credit = apply_rate(tax, reduction_rate)

    return AssessmentOutcome(
        eligible=True,
        credit_amount=total_credit,
        reasons=f"{certification_type} {percent(reduction_rate)} 감면",
        details={
            'certification_type': certification_type,
            'calculated_tax': tax,
            'reduction_rate': reduction_rate,
            'total_credit': total_credit
        }
    )


def assess_youth_startup_reduction(
    company: CompanyProfile,
    data: Optional[OtherData],
    year: int
) -> AssessmentOutcome:
    """10. 청년창업 세액감면 (연 2억원 한도)"""
    if not data or not data.founder_age or data.founder_age > YOUTH_FOUNDER_MAX_AGE:
        return AssessmentOutcome.ineligible('창업자가 34세 이하가 아닙니다')

    if not data.startup_date:
        return AssessmentOutcome.ineligible('창업 정보가 없습니다')

    years_from_startup = year - data.startup_date.year
    if years_from_startup < 0:
        return AssessmentOutcome.ineligible(
            FUTURE_STARTUP_REASON,
            {'years_from_startup': years_from_startup}
        )

    if years_from_startup > STARTUP_PERIOD_YEARS:
        return AssessmentOutcome.ineligible(
            '창업 후 5년이 경과했습니다',
            {'years_from_startup': years_from_startup}
        )

    tax = _calculated_tax(data)
    total_credit = min(
        apply_rate(tax, YOUTH_STARTUP_REDUCTION_RATE),
        YOUTH_STARTUP_ANNUAL_CAP
    )

    return AssessmentOutcome(
        eligible=True,
        credit_amount=total_credit,
        reasons=f"청년창업 100% 감면 (연 2억원 한도, {years_from_startup + 1}년차)",
        details={
            'founder_age': data.founder_age,
            'years_from_startup': years_from_startup,
            'calculated_tax': tax,
            'max_amount': YOUTH_STARTUP_ANNUAL_CAP,
            'total_credit': total_credit
        }
    )
