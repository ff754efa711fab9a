"""고용 관련 세액공제 판정 (규칙 1~5)

증가 인원 등 전년 대비 수치는 호출 측에서 계산해 전달합니다.
"""

from decimal import Decimal
from typing import Optional

from ..assessment_result import AssessmentOutcome
from ..models import CompanyProfile, CompanySize, EmploymentData
from .base import apply_rate, manwon


# (기업 규모, 수도권 여부) -> 1인당 공제액
EMPLOYMENT_INCREASE_CREDITS = {
    (CompanySize.SME, False): 12000000,
    (CompanySize.SME, True): 11000000,
    (CompanySize.MID_SIZED, False): 10000000,
    (CompanySize.MID_SIZED, True): 9000000,
    (CompanySize.LARGE, False): 5000000,
    (CompanySize.LARGE, True): 4500000,
}

YOUTH_EMPLOYMENT_CREDITS = {
    CompanySize.SME: 12000000,
    CompanySize.MID_SIZED: 10000000,
    CompanySize.LARGE: 5000000,
}

DISABLED_EMPLOYEE_CREDIT = 9600000  # 월 80만원 × 12개월
CAREER_BREAK_WOMEN_CREDIT = 11000000
CAREER_BREAK_MAX_YEARS = 2

SOCIAL_INSURANCE_RATE = Decimal('0.25')
SOCIAL_INSURANCE_MAX_PER_PERSON = 1000000


def assess_employment_increase(
    company: CompanyProfile,
    data: Optional[EmploymentData]
) -> AssessmentOutcome:
    """1. 고용증대 세액공제

    1인당 공제액은 기업 규모와 수도권 여부에 따라 결정됩니다.
    """
    increase = data.employee_increase if data else 0
    if increase < 1:
        return AssessmentOutcome.ineligible(
            '전년 대비 상시근로자 증가 인원이 없습니다',
            {'employee_increase': increase}
        )

    per_person_credit = EMPLOYMENT_INCREASE_CREDITS[
        (company.company_type, company.is_capital_area)
    ]
    total_credit = per_person_credit * increase

    return AssessmentOutcome(
        eligible=True,
        credit_amount=total_credit,
        reasons=(
            f"{company.company_type.value} {increase}명 증가, "
            f"1인당 {manwon(per_person_credit)} 공제"
        ),
        details={
            'company_type': company.company_type.value,
            'is_capital_area': company.is_capital_area,
            'employee_increase': increase,
            'per_person_credit': per_person_credit,
            'total_credit': total_credit
        }
    )


def assess_youth_employment(
    company: CompanyProfile,
    data: Optional[EmploymentData]
) -> AssessmentOutcome:
    """2. 청년 정규직 고용 추가 공제 (지역 무관)"""
    youth_increase = data.youth_employees if data else 0
    if youth_increase < 1:
        return AssessmentOutcome.ineligible('청년(15-34세) 정규직 근로자 증가가 없습니다')

    additional_credit = YOUTH_EMPLOYMENT_CREDITS[company.company_type]
    total_credit = additional_credit * youth_increase

    return AssessmentOutcome(
        eligible=True,
        credit_amount=total_credit,
        reasons=(
            f"청년 정규직 {youth_increase}명 증가, "
            f"1인당 추가 {manwon(additional_credit)} 공제"
        ),
        details={
            'company_type': company.company_type.value,
            'youth_increase': youth_increase,
            'additional_credit': additional_credit,
            'total_credit': total_credit
        }
    )


def assess_disabled_employment(
    company: CompanyProfile,
    data: Optional[EmploymentData]
) -> AssessmentOutcome:
    """3. 장애인 고용 세액공제"""
    disabled_count = data.disabled_employees if data else 0
    if disabled_count < 1:
        return AssessmentOutcome.ineligible('장애인 근로자 고용 실적이 없습니다')

    total_credit = DISABLED_EMPLOYEE_CREDIT * disabled_count

    return AssessmentOutcome(
        eligible=True,
        credit_amount=total_credit,
        reasons=f"장애인 근로자 {disabled_count}명, 1인당 연 960만원 공제",
        details={
            'disabled_count': disabled_count,
            'per_person_credit': DISABLED_EMPLOYEE_CREDIT,
            'total_credit': total_credit
        }
    )


def assess_career_break_women(
    company: CompanyProfile,
    data: Optional[EmploymentData]
) -> AssessmentOutcome:
    """4. 경력단절여성 재고용 세액공제

    2년 한도는 details에 기록만 하며, 연도별 사용 이력은 호출 측에서 관리합니다.
    """
    count = data.career_break_women if data else 0
    if count < 1:
        return AssessmentOutcome.ineligible('경력단절여성 재고용 실적이 없습니다')

    total_credit = CAREER_BREAK_WOMEN_CREDIT * count

    return AssessmentOutcome(
        eligible=True,
        credit_amount=total_credit,
        reasons=f"경력단절여성 {count}명 재고용, 1인당 연 1,100만원 공제 (최대 2년)",
        details={
            'count': count,
            'per_person_credit': CAREER_BREAK_WOMEN_CREDIT,
            'total_credit': total_credit,
            'max_years': CAREER_BREAK_MAX_YEARS
        }
    )


def assess_social_insurance(
    company: CompanyProfile,
    data: Optional[EmploymentData]
) -> AssessmentOutcome:
    """5. 사회보험료 세액공제 (중소기업 한정)

    공제액 = 납부액 × 25%, 한도 = 100만원 × (증가 인원 + 청년 증가 인원)
    """
    if company.company_type != CompanySize.SME:
        return AssessmentOutcome.ineligible('중소기업만 해당됩니다')

    insurance_paid = data.insurance_paid if data else 0
    if insurance_paid < 1:
        return AssessmentOutcome.ineligible('사회보험료 납부 실적이 없습니다')

    raw_credit = apply_rate(insurance_paid, SOCIAL_INSURANCE_RATE)

    new_employees = data.employee_increase + data.youth_employees
    max_credit = SOCIAL_INSURANCE_MAX_PER_PERSON * new_employees
    total_credit = max(min(raw_credit, max_credit), 0)

    return AssessmentOutcome(
        eligible=True,
        credit_amount=total_credit,
        reasons="사업주 부담 사회보험료의 25% 공제 (인당 연 100만원 한도)",
        details={
            'insurance_paid': insurance_paid,
            'credit_rate': SOCIAL_INSURANCE_RATE,
            'new_employees': new_employees,
            'raw_credit': raw_credit,
            'max_credit': max_credit,
            'total_credit': total_credit
        }
    )
