"""중소기업 세액감면 판정 테스트 (규칙 6~10)"""

from datetime import date
from decimal import Decimal

import pytest

from taxcredit.core import CompanyProfile, OtherData
from taxcredit.core.evaluators import (
    assess_sme_special_reduction,
    assess_startup_sme_reduction,
    assess_manufacturing_relocation,
    assess_social_enterprise_reduction,
    assess_youth_startup_reduction,
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


class TestSmeSpecialReduction:
    """6. 중소기업 특별세액감면"""

    def test_designated_industry_with_tax(self):
        """제조업: 산출세액의 10%"""
        data = OtherData(business_income=300000000, calculated_tax=40000000)

        outcome = assess_sme_special_reduction(make_company(), data)

        assert outcome.eligible
        assert outcome.credit_amount == 4000000
        assert outcome.details['reduction_rate'] == Decimal('0.10')

    def test_other_industry_estimated_tax(self):
        """서비스업, 산출세액 미제공: 사업소득 10% 근사치의 5%"""
        data = OtherData(business_income=300000000)

        outcome = assess_sme_special_reduction(make_company(industry="서비스업"), data)

        assert outcome.eligible
        assert outcome.details['calculated_tax'] == 30000000
        assert outcome.credit_amount == 1500000

    @pytest.mark.parametrize("industry", ["광업", "건설업", "도매업", "소매업"])
    def test_designated_industries(self, industry):
        data = OtherData(business_income=100000000, calculated_tax=10000000)

        outcome = assess_sme_special_reduction(make_company(industry=industry), data)

        assert outcome.credit_amount == 1000000

    def test_non_sme(self):
        data = OtherData(business_income=300000000)

        outcome = assess_sme_special_reduction(make_company("중견기업"), data)

        assert not outcome.eligible

    def test_missing_income(self):
        outcome = assess_sme_special_reduction(make_company(), OtherData())

        assert not outcome.eligible
        assert outcome.reasons == '사업소득 정보가 없습니다'


class TestStartupSmeReduction:
    """7. 창업중소기업 세액감면"""

    def test_general_startup(self):
        """일반 창업: 50% 감면"""
        data = OtherData(startup_date=date(2021, 3, 1), calculated_tax=20000000)

        outcome = assess_startup_sme_reduction(make_company(), data, 2024)

        assert outcome.eligible
        assert outcome.credit_amount == 10000000
        assert outcome.details['years_from_startup'] == 3

    def test_youth_startup(self):
        """청년 창업: 100% 감면"""
        data = OtherData(
            startup_date=date(2022, 1, 1),
            is_youth_startup=True,
            calculated_tax=20000000
        )

        outcome = assess_startup_sme_reduction(make_company(), data, 2024)

        assert outcome.credit_amount == 20000000

    def test_fifth_year_boundary(self):
        """연도 차이 5년까지는 적용"""
        data = OtherData(startup_date=date(2019, 12, 31), calculated_tax=1000000)

        assert assess_startup_sme_reduction(make_company(), data, 2024).eligible
        assert not assess_startup_sme_reduction(make_company(), data, 2025).eligible

    def test_startup_in_tax_year(self):
        """창업 연도 자체는 1년차로 적용"""
        data = OtherData(startup_date=date(2024, 11, 1), calculated_tax=1000000)

        outcome = assess_startup_sme_reduction(make_company(), data, 2024)

        assert outcome.eligible
        assert outcome.details['years_from_startup'] == 0

    def test_startup_after_tax_year(self):
        """과세연도 이후 창업이면 적용 불가"""
        data = OtherData(startup_date=date(2026, 1, 1), calculated_tax=10000000)

        outcome = assess_startup_sme_reduction(make_company(), data, 2024)

        assert not outcome.eligible
        assert outcome.credit_amount == 0
        assert outcome.reasons == '창업일이 과세연도 이후입니다'
        assert outcome.details['years_from_startup'] == -2

    def test_string_startup_date(self):
        """YYYY-MM-DD 문자열도 허용"""
        data = OtherData(startup_date="2023-06-15", calculated_tax=1000000)

        outcome = assess_startup_sme_reduction(make_company(), data, 2024)

        assert outcome.eligible
        assert outcome.details['startup_year'] == 2023

    def test_missing_tax(self):
        """산출세액이 없으면 적용 가능이지만 0원"""
        data = OtherData(startup_date=date(2023, 1, 1))

        outcome = assess_startup_sme_reduction(make_company(), data, 2024)

        assert outcome.eligible
        assert outcome.credit_amount == 0

    def test_no_startup_info(self):
        outcome = assess_startup_sme_reduction(make_company(), OtherData(), 2024)

        assert not outcome.eligible
        assert outcome.reasons == '창업 정보가 없습니다'


class TestManufacturingRelocation:
    """8. 제조업 지방 이전 세액감면"""

    def test_relocated(self):
        data = OtherData(relocation_completed=True, calculated_tax=15000000)

        outcome = assess_manufacturing_relocation(make_company(), data)

        assert outcome.eligible
        assert outcome.credit_amount == 15000000

    def test_still_in_capital_area(self):
        """수도권 소재이면 적용 불가"""
        data = OtherData(relocation_completed=True, calculated_tax=15000000)

        outcome = assess_manufacturing_relocation(make_company(is_capital_area=True), data)

        assert not outcome.eligible

    def test_non_manufacturing(self):
        data = OtherData(relocation_completed=True, calculated_tax=15000000)

        outcome = assess_manufacturing_relocation(make_company(industry="IT업"), data)

        assert not outcome.eligible
        assert outcome.reasons == '제조업만 해당됩니다'

    def test_not_relocated(self):
        outcome = assess_manufacturing_relocation(make_company(), OtherData())

        assert not outcome.eligible


class TestSocialEnterpriseReduction:
    """9. 사회적기업 및 협동조합 세액감면"""

    def test_social_enterprise(self):
        data = OtherData(certification=True, certification_type="사회적기업", calculated_tax=8000000)

        outcome = assess_social_enterprise_reduction(make_company(), data)

        assert outcome.eligible
        assert outcome.credit_amount == 8000000

    def test_cooperative_default(self):
        """인증 유형이 없으면 협동조합(50%)으로 판정"""
        data = OtherData(certification=True, calculated_tax=8000000)

        outcome = assess_social_enterprise_reduction(make_company(), data)

        assert outcome.credit_amount == 4000000
        assert outcome.details['certification_type'] == "협동조합"

    def test_not_certified(self):
        outcome = assess_social_enterprise_reduction(make_company(), OtherData())

        assert not outcome.eligible


class TestYouthStartupReduction:
    """10. 청년창업 세액감면"""

    def test_young_founder(self):
        data = OtherData(founder_age=29, startup_date=date(2022, 5, 1), calculated_tax=30000000)

        outcome = assess_youth_startup_reduction(make_company(), data, 2024)

        assert outcome.eligible
        assert outcome.credit_amount == 30000000

    def test_annual_cap(self):
        """연 2억원 한도"""
        data = OtherData(founder_age=30, startup_date=date(2022, 5, 1), calculated_tax=500000000)

        outcome = assess_youth_startup_reduction(make_company(), data, 2024)

        assert outcome.credit_amount == 200000000

    @pytest.mark.parametrize("founder_age", [0, 35, 50])
    def test_founder_age(self, founder_age):
        """나이 미입력 또는 34세 초과는 적용 불가"""
        data = OtherData(founder_age=founder_age, startup_date=date(2022, 5, 1), calculated_tax=1000000)

        outcome = assess_youth_startup_reduction(make_company(), data, 2024)

        assert not outcome.eligible

    def test_age_boundary(self):
        data = OtherData(founder_age=34, startup_date=date(2022, 5, 1), calculated_tax=1000000)

        assert assess_youth_startup_reduction(make_company(), data, 2024).eligible

    def test_startup_after_tax_year(self):
        """과세연도 이후 창업이면 적용 불가"""
        data = OtherData(founder_age=28, startup_date=date(2025, 2, 1), calculated_tax=10000000)

        outcome = assess_youth_startup_reduction(make_company(), data, 2024)

        assert not outcome.eligible
        assert outcome.credit_amount == 0
        assert outcome.reasons == '창업일이 과세연도 이후입니다'

    def test_startup_window_elapsed(self):
        data = OtherData(founder_age=30, startup_date=date(2015, 1, 1), calculated_tax=1000000)

        outcome = assess_youth_startup_reduction(make_company(), data, 2024)

        assert not outcome.eligible
        assert outcome.details['years_from_startup'] == 9
