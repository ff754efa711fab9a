"""세액공제 판정 엔진 사용 예제"""

from taxcredit.core import (
    CompanyProfile,
    EvaluationContext,
    get_default_catalog,
    run_assessment
)


def example_manufacturing_sme():
    """지방 제조 중소기업: 고용 증가 + 설비 투자 + 연구개발"""
    print("=" * 60)
    print("예제 1: 지방 제조 중소기업 (고용 증가, 설비 투자, 연구개발)")
    print("=" * 60)

    # 1. 사업자 정보
    company = CompanyProfile(
        id=1,
        business_number="123-45-67890",
        company_name="한빛정밀",
        ceo_name="김대표",
        company_type="중소기업",
        industry="제조업",
        location="경상남도 창원시",
        is_capital_area=False
    )

    # 2. 과세연도 입력 데이터
    ctx = EvaluationContext.create(
        company=company,
        year=2024,
        employment_data={
            "total_employees": 42,
            "employee_increase": 3,
            "youth_employees": 1,
            "insurance_paid": 10000000
        },
        investment_data=[
            {"facility_type": "자동화설비", "investment_amount": 120000000},
            {"facility_type": "스마트공장 MES", "investment_amount": 150000000}
        ],
        rnd_data=[
            {"rnd_type": "일반연구개발비", "expense_amount": 10000000},
            {"rnd_type": "신성장동력연구개발비", "expense_amount": 5000000}
        ],
        other_data={
            "business_income": 300000000,
            "calculated_tax": 40000000
        }
    )

    # 3. 판정
    session = run_assessment(get_default_catalog(), ctx)

    # 4. 결과 출력
    print(session.get_summary())


def example_youth_startup():
    """수도권 청년 창업 IT 기업"""
    print("\n" + "=" * 60)
    print("예제 2: 수도권 청년 창업 IT 기업 (창업 3년차)")
    print("=" * 60)

    company = CompanyProfile(
        id=2,
        business_number="220-81-12345",
        company_name="새싹랩스",
        ceo_name="이청년",
        company_type="중소기업",
        industry="IT업",
        location="서울특별시 성동구",
        is_capital_area=True
    )

    ctx = EvaluationContext.create(
        company=company,
        year=2024,
        employment_data={"employee_increase": 2, "youth_employees": 2},
        rnd_data=[{"rnd_type": "신기술개발비", "expense_amount": 30000000}],
        other_data={
            "startup_date": "2022-03-02",
            "is_youth_startup": True,
            "founder_age": 29,
            "business_income": 80000000,
            "calculated_tax": 9000000
        }
    )

    session = run_assessment(get_default_catalog(), ctx)

    print(session.get_summary())


def example_business_vehicle():
    """대기업 업무용 차량 비용 한도 검증"""
    print("\n" + "=" * 60)
    print("예제 3: 업무용 차량 비용 한도 검증 (공제액 없음)")
    print("=" * 60)

    company = CompanyProfile(
        id=3,
        business_number="110-81-00001",
        company_name="대한물산",
        ceo_name="박사장",
        company_type="대기업",
        industry="도매업",
        location="서울특별시 중구",
        is_capital_area=True
    )

    ctx = EvaluationContext.create(
        company=company,
        year=2024,
        other_data={
            "vehicle_count": 2,
            "depreciation_expense": 20000000,
            "rental_expense": 10000000,
            "fuel_expense": 3000000
        }
    )

    session = run_assessment(get_default_catalog(), ctx)
    vehicle = session.outcomes[-1]

    print(vehicle)
    print(f"  사유: {vehicle.reasons}")
    print(f"  손금인정액: {vehicle.details['total_eligible']:,}원")
    print(f"  한도초과액: {vehicle.details['limit_exceeded']:,}원")


if __name__ == "__main__":
    example_manufacturing_sme()
    example_youth_startup()
    example_business_vehicle()
