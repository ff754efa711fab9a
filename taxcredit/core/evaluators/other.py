"""기타 판정 (규칙 18~19): 기부금 세액공제, 업무용 차량 비용 한도 검증"""

from decimal import Decimal
from typing import Optional

from ..assessment_result import AssessmentOutcome
from ..models import CompanyProfile, OtherData
from .base import apply_rate, manwon


STATUTORY_DONATION = "법정기부금"
DESIGNATED_DONATION = "지정기부금"
STATUTORY_LIMIT_RATE = Decimal('1.0')
DESIGNATED_LIMIT_RATE = Decimal('0.30')
DONATION_CREDIT_RATE = Decimal('0.15')

DEPRECIATION_LIMIT_PER_VEHICLE = 8000000
RENTAL_LIMIT_PER_VEHICLE = 12000000


def assess_donation(
    company: CompanyProfile,
    data: Optional[OtherData]
) -> AssessmentOutcome:
    """18. 기부금 세액공제

    공제 대상 기부금 = min(기부금, 사업소득 × 한도율), 공제액 = 대상 기부금 × 15%
    """
    if not data or not data.donation_amount:
        return AssessmentOutcome.ineligible('기부금 지출 실적이 없습니다')

    donation_amount = data.donation_amount
    donation_type = data.donation_type or DESIGNATED_DONATION
    income = data.business_income or 0

    if donation_type == STATUTORY_DONATION:
        limit_rate = STATUTORY_LIMIT_RATE
    else:
        limit_rate = DESIGNATED_LIMIT_RATE

    limit = apply_rate(income, limit_rate)
    eligible_amount = max(min(donation_amount, limit), 0)
    total_credit = apply_rate(eligible_amount, DONATION_CREDIT_RATE)

    return AssessmentOutcome(
        eligible=True,
        credit_amount=total_credit,
        reasons=f"{donation_type} {manwon(eligible_amount)}, 15% 공제",
        details={
            'donation_type': donation_type,
            'donation_amount': donation_amount,
            'business_income': income,
            'limit_rate': limit_rate,
            'limit': limit,
            'eligible_amount': eligible_amount,
            'credit_rate': DONATION_CREDIT_RATE,
            'total_credit': total_credit
        }
    )


def assess_business_vehicle(
    company: CompanyProfile,
    data: Optional[OtherData]
) -> AssessmentOutcome:
    """19. 업무용 차량 비용 한도 검증

    세액공제가 아니라 손금 인정 한도를 검증하므로 credit_amount는 항상 0입니다.
    감가상각비는 대당 800만원, 임차료는 대당 1,200만원 한도이며 유류비는 한도가 없습니다.
    """
    if not data or data.vehicle_count < 1:
        return AssessmentOutcome.ineligible('업무용 차량이 없습니다')

    vehicle_count = data.vehicle_count
    depreciation = data.depreciation_expense or 0
    rental = data.rental_expense or 0
    fuel = data.fuel_expense or 0

    depreciation_limit = DEPRECIATION_LIMIT_PER_VEHICLE * vehicle_count
    rental_limit = RENTAL_LIMIT_PER_VEHICLE * vehicle_count

    eligible_depreciation = min(depreciation, depreciation_limit)
    eligible_rental = min(rental, rental_limit)
    eligible_fuel = fuel

    total_eligible = eligible_depreciation + eligible_rental + eligible_fuel
    total_expense = depreciation + rental + fuel
    limit_exceeded = total_expense - total_eligible

    return AssessmentOutcome(
        eligible=True,
        credit_amount=0,
        reasons=f"업무용 차량 {vehicle_count}대, 손금인정액 {manwon(total_eligible)}",
        details={
            'vehicle_count': vehicle_count,
            'depreciation': {
                'expense': depreciation,
                'limit': depreciation_limit,
                'eligible': eligible_depreciation,
                'excess': depreciation - eligible_depreciation
            },
            'rental': {
                'expense': rental,
                'limit': rental_limit,
                'eligible': eligible_rental,
                'excess': rental - eligible_rental
            },
            'fuel': {'expense': fuel, 'eligible': eligible_fuel},
            'total_expense': total_expense,
            'total_eligible': total_eligible,
            'limit_exceeded': limit_exceeded
        }
    )
