"""고용 관련 세액공제 판정 테스트 (규칙 1~5)"""

import pytest

from taxcredit.core import CompanyProfile, EmploymentData
from taxcredit.core.evaluators import (
    assess_employment_increase,
    assess_youth_employment,
    assess_disabled_employment,
    assess_career_break_women,
    assess_social_insurance,
)


def make_company(company_type="중소기업", industry="제조업", is_capital_area=False):
    return CompanyProfile(
        id=1,
        business_number="123-45-67890",
        company_name="한빛정밀",
        ceo_name="김대표",
        company_type=company_type,
        industry=industry,
        location="경상남도 창원시",
        is_capital_area=is_capital_area
    )


class TestEmploymentIncrease:
    """1. 고용증대 세액공제"""

    def test_sme_non_capital(self):
        """중소기업 지방 3명 증가: 1인당 1,200만원"""
        outcome = assess_employment_increase(
            make_company(), EmploymentData(employee_increase=3)
        )

        assert outcome.eligible
        assert outcome.credit_amount == 36000000
        assert outcome.details['per_person_credit'] == 12000000

    def test_large_capital(self):
        """대기업 수도권 2명 증가: 1인당 450만원"""
        outcome = assess_employment_increase(
            make_company("대기업", is_capital_area=True),
            EmploymentData(employee_increase=2)
        )

        assert outcome.eligible
        assert outcome.credit_amount == 9000000

    @pytest.mark.parametrize("company_type,is_capital_area,expected", [
        ("중소기업", True, 11000000),
        ("중견기업", False, 10000000),
        ("중견기업", True, 9000000),
        ("대기업", False, 5000000),
    ])
    def test_per_person_table(self, company_type, is_capital_area, expected):
        """규모·수도권별 1인당 공제액"""
        outcome = assess_employment_increase(
            make_company(company_type, is_capital_area=is_capital_area),
            EmploymentData(employee_increase=1)
        )

        assert outcome.credit_amount == expected

    def test_no_increase(self):
        """증가 인원이 없으면 적용 불가"""
        outcome = assess_employment_increase(make_company(), EmploymentData(employee_increase=0))

        assert not outcome.eligible
        assert outcome.credit_amount == 0
        assert outcome.details == {'employee_increase': 0}

    def test_decrease(self):
        """감소(음수)도 적용 불가"""
        outcome = assess_employment_increase(make_company(), EmploymentData(employee_increase=-2))

        assert not outcome.eligible

    def test_missing_data(self):
        """고용 정보가 없으면 적용 불가"""
        outcome = assess_employment_increase(make_company(), None)

        assert not outcome.eligible
        assert outcome.credit_amount == 0


class TestYouthEmployment:
    """2. 청년 정규직 고용 추가 공제"""

    def test_sme(self):
        outcome = assess_youth_employment(make_company(), EmploymentData(youth_employees=2))

        assert outcome.eligible
        assert outcome.credit_amount == 24000000

    def test_capital_area_same_amount(self):
        """지역과 무관하게 동일한 금액"""
        local = assess_youth_employment(
            make_company("중견기업"), EmploymentData(youth_employees=1)
        )
        capital = assess_youth_employment(
            make_company("중견기업", is_capital_area=True), EmploymentData(youth_employees=1)
        )

        assert local.credit_amount == capital.credit_amount == 10000000

    def test_no_youth(self):
        outcome = assess_youth_employment(make_company(), EmploymentData())

        assert not outcome.eligible


class TestDisabledEmployment:
    """3. 장애인 고용 세액공제"""

    def test_two_employees(self):
        outcome = assess_disabled_employment(
            make_company("대기업"), EmploymentData(disabled_employees=2)
        )

        assert outcome.eligible
        assert outcome.credit_amount == 19200000

    def test_none(self):
        outcome = assess_disabled_employment(make_company(), None)

        assert not outcome.eligible
        assert outcome.reasons == '장애인 근로자 고용 실적이 없습니다'


class TestCareerBreakWomen:
    """4. 경력단절여성 재고용 세액공제"""

    def test_rehired(self):
        outcome = assess_career_break_women(make_company(), EmploymentData(career_break_women=1))

        assert outcome.eligible
        assert outcome.credit_amount == 11000000
        assert outcome.details['max_years'] == 2

    def test_none(self):
        outcome = assess_career_break_women(make_company(), EmploymentData())

        assert not outcome.eligible


class TestSocialInsurance:
    """5. 사회보험료 세액공제"""

    def test_capped_by_new_employees(self):
        """25% 공제액이 인당 100만원 한도로 제한됨"""
        data = EmploymentData(employee_increase=2, youth_employees=1, insurance_paid=20000000)

        outcome = assess_social_insurance(make_company(), data)

        assert outcome.eligible
        assert outcome.details['raw_credit'] == 5000000
        assert outcome.details['max_credit'] == 3000000
        assert outcome.credit_amount == 3000000

    def test_below_cap(self):
        """한도 이내이면 납부액의 25%"""
        data = EmploymentData(employee_increase=2, youth_employees=1, insurance_paid=10000000)

        outcome = assess_social_insurance(make_company(), data)

        assert outcome.eligible
        assert outcome.details['max_credit'] == 3000000
        assert outcome.credit_amount == 2500000

    def test_no_new_employees(self):
        """신규 인원이 없으면 한도가 0원이지만 적용 가능으로 판정"""
        data = EmploymentData(insurance_paid=10000000)

        outcome = assess_social_insurance(make_company(), data)

        assert outcome.eligible
        assert outcome.credit_amount == 0

    @pytest.mark.parametrize("company_type", ["중견기업", "대기업"])
    def test_non_sme(self, company_type):
        """중소기업이 아니면 항상 적용 불가"""
        data = EmploymentData(employee_increase=3, insurance_paid=10000000)

        outcome = assess_social_insurance(make_company(company_type), data)

        assert not outcome.eligible
        assert outcome.reasons == '중소기업만 해당됩니다'

    def test_no_insurance_paid(self):
        outcome = assess_social_insurance(make_company(), EmploymentData(employee_increase=3))

        assert not outcome.eligible
