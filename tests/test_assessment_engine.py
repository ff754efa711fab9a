"""규칙 카탈로그, 디스패처, 판정 집계 테스트"""

from datetime import date

import pytest

from taxcredit.core import (
    AssessmentOutcome,
    CompanyProfile,
    EvaluationContext,
    RuleCatalog,
    RuleCategory,
    RuleDefinition,
    RULE_EVALUATORS,
    evaluate,
    get_default_catalog,
    reset_default_catalog,
    run_assessment,
)


def make_company(company_type="중소기업", is_capital_area=False):
    return CompanyProfile(
        id=1,
        business_number="123-45-67890",
        company_name="한빛정밀",
        ceo_name="김대표",
        company_type=company_type,
        industry="제조업",
        location="경상남도 창원시",
        is_capital_area=is_capital_area
    )


def make_context(**kwargs):
    """모든 입력 번들을 채운 판정 컨텍스트"""
    params = dict(
        company=make_company(),
        year=2024,
        employment_data={
            "total_employees": 25,
            "employee_increase": 3,
            "youth_employees": 1,
            "disabled_employees": 1,
            "insurance_paid": 10000000
        },
        investment_data=[
            {"facility_type": "자동화설비", "investment_amount": 50000000},
            {"facility_type": "스마트공장 MES", "investment_amount": 150000000},
        ],
        rnd_data=[
            {"rnd_type": "일반연구개발비", "expense_amount": 10000000},
            {"rnd_type": "신성장동력연구개발비", "expense_amount": 5000000},
        ],
        other_data={
            "startup_date": "2021-04-01",
            "business_income": 300000000,
            "calculated_tax": 40000000,
            "donation_amount": 5000000,
            "vehicle_count": 2,
            "depreciation_expense": 20000000,
            "rental_expense": 10000000,
            "fuel_expense": 3000000
        }
    )
    params.update(kwargs)
    return EvaluationContext.create(**params)


class TestRuleCatalog:
    """RuleCatalog 테스트"""

    def test_load_rules(self):
        """기본 규칙 파일 로드"""
        catalog = RuleCatalog()

        assert catalog.version == "2024.1"
        assert len(catalog) == 19
        assert [rule.id for rule in catalog] == list(range(1, 20))

    def test_lookup(self):
        catalog = RuleCatalog()

        assert catalog.get(1).name == "고용증대 세액공제"
        assert catalog.get_by_key("business_vehicle").id == 19
        assert catalog.get(99) is None
        assert catalog.get_by_key("unknown") is None

    def test_list_by_category(self):
        catalog = RuleCatalog()

        employment = catalog.list_by_category(RuleCategory.EMPLOYMENT)
        assert [rule.id for rule in employment] == [1, 2, 3, 4, 5]
        assert len(catalog.list_by_category("연구개발")) == 3

    def test_default_catalog_singleton(self):
        reset_default_catalog()
        first = get_default_catalog()

        assert get_default_catalog() is first

        reset_default_catalog()
        assert get_default_catalog() is not first

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuleCatalog(tmp_path / "missing.yaml")

    def test_invalid_format(self, tmp_path):
        rules_file = tmp_path / "rules.yaml"
        rules_file.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(ValueError):
            RuleCatalog(rules_file)

    def test_missing_required_field(self, tmp_path):
        rules_file = tmp_path / "rules.yaml"
        rules_file.write_text(
            'version: "test"\n'
            'rules:\n'
            '  employment_increase:\n'
            '    id: 1\n'
            '    category: "고용"\n',
            encoding="utf-8"
        )

        with pytest.raises(ValueError, match="name"):
            RuleCatalog(rules_file)

    def test_unknown_category(self, tmp_path):
        rules_file = tmp_path / "rules.yaml"
        rules_file.write_text(
            'rules:\n'
            '  employment_increase:\n'
            '    id: 1\n'
            '    name: "고용증대 세액공제"\n'
            '    category: "부동산"\n',
            encoding="utf-8"
        )

        with pytest.raises(ValueError, match="category"):
            RuleCatalog(rules_file)

    def test_duplicate_id(self, tmp_path):
        rules_file = tmp_path / "rules.yaml"
        rules_file.write_text(
            'rules:\n'
            '  first:\n'
            '    id: 1\n'
            '    name: "A"\n'
            '    category: "고용"\n'
            '  second:\n'
            '    id: 1\n'
            '    name: "B"\n'
            '    category: "고용"\n',
            encoding="utf-8"
        )

        with pytest.raises(ValueError, match="already exists"):
            RuleCatalog(rules_file)


class TestDispatcher:
    """디스패처 테스트"""

    def test_all_rules_registered(self):
        assert sorted(RULE_EVALUATORS) == list(range(1, 20))

    def test_unimplemented_rule(self):
        """1~19 이외의 ID는 예외 없이 미구현 결과"""
        rule = RuleDefinition(id=20, key="future_rule", name="신규 규칙", category=RuleCategory.OTHER)

        outcome = evaluate(rule, make_context())

        assert not outcome.eligible
        assert outcome.credit_amount == 0
        assert outcome.reasons == '미구현 규칙'
        assert outcome.rule_id == 20
        assert outcome.rule_name == "신규 규칙"

    def test_rule_identity_attached(self):
        """판정 결과에 규칙 ID와 이름이 기록됨"""
        rule = RuleCatalog().get(1)

        outcome = evaluate(rule, make_context())

        assert outcome.rule_id == 1
        assert outcome.rule_name == "고용증대 세액공제"
        assert outcome.credit_amount == 36000000


class TestRunAssessment:
    """판정 집계 테스트"""

    def test_one_outcome_per_rule(self):
        catalog = RuleCatalog()

        session = run_assessment(catalog, make_context())

        assert len(session.outcomes) == 19
        assert [outcome.rule_id for outcome in session.outcomes] == list(range(1, 20))

    def test_totals(self):
        """총 공제액은 적용 가능 규칙 공제액의 합"""
        session = run_assessment(RuleCatalog(), make_context())

        eligible = [outcome for outcome in session.outcomes if outcome.eligible]
        assert session.eligible_count == len(eligible)
        assert session.total_credit_amount == sum(outcome.credit_amount for outcome in eligible)
        assert session.eligible_outcomes() == eligible

    def test_ineligible_outcomes_have_zero_credit(self):
        session = run_assessment(RuleCatalog(), make_context())

        for outcome in session.outcomes:
            assert outcome.credit_amount >= 0
            if not outcome.eligible:
                assert outcome.credit_amount == 0

    def test_vehicle_rule_contributes_nothing(self):
        session = run_assessment(RuleCatalog(), make_context())

        vehicle = session.outcomes[18]
        assert vehicle.eligible
        assert vehicle.credit_amount == 0
        assert vehicle.details['total_eligible'] == 29000000

    def test_deterministic(self):
        """동일 입력이면 동일 결과"""
        catalog = RuleCatalog()
        ctx = make_context()

        first = run_assessment(catalog, ctx)
        second = run_assessment(catalog, ctx)

        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_empty_context(self):
        """입력 데이터가 없으면 공제 가능액 0원"""
        ctx = EvaluationContext.create(company=make_company(), year=2024)

        session = run_assessment(RuleCatalog(), ctx)

        assert len(session.outcomes) == 19
        assert session.eligible_count == 0
        assert session.total_credit_amount == 0

    def test_startup_window_uses_assessment_year(self):
        """창업 경과 연수는 과세연도 기준"""
        catalog = RuleCatalog()
        other = {"startup_date": "2021-04-01", "calculated_tax": 10000000}

        recent = run_assessment(catalog, make_context(year=2024, other_data=other))
        later = run_assessment(catalog, make_context(year=2027, other_data=other))

        assert recent.outcomes[6].eligible
        assert not later.outcomes[6].eligible

    def test_rule_list_input(self):
        """RuleDefinition 리스트도 카탈로그로 사용 가능"""
        rules = [
            RuleDefinition(id=1, key="employment_increase", name="고용증대 세액공제", category=RuleCategory.EMPLOYMENT),
            RuleDefinition(id=42, key="future_rule", name="신규 규칙", category=RuleCategory.OTHER),
        ]

        session = run_assessment(rules, make_context())

        assert session.eligible_count == 1
        assert session.total_credit_amount == 36000000
        assert session.outcomes[1].reasons == '미구현 규칙'

    def test_outcome_serialization(self):
        """Decimal 공제율은 float으로 직렬화"""
        session = run_assessment(RuleCatalog(), make_context())

        result = session.outcomes[14].to_dict()
        assert result['credit_rule_id'] == 15
        assert result['is_eligible'] is True
        assert result['details']['items'][0]['credit_rate'] == 0.25

    def test_summary(self):
        session = run_assessment(RuleCatalog(), make_context())

        summary = session.get_summary()
        assert "고용증대 세액공제" in summary
        assert f"{session.total_credit_amount:,}원" in summary


class TestAssessmentOutcome:
    def test_ineligible_factory(self):
        outcome = AssessmentOutcome.ineligible('사유')

        assert outcome.eligible is False
        assert outcome.credit_amount == 0
        assert outcome.details == {}


class TestEvaluationContext:
    def test_none_values_use_defaults(self):
        ctx = EvaluationContext.create(
            company=make_company(),
            year=2024,
            employment_data={"employee_increase": 2, "youth_employees": None},
            other_data={"startup_date": None, "calculated_tax": None}
        )

        assert ctx.employment.youth_employees == 0
        assert ctx.other.startup_date is None
        assert ctx.other.calculated_tax is None

    def test_startup_date_parsed(self):
        ctx = make_context()

        assert ctx.other.startup_date == date(2021, 4, 1)

    def test_unknown_company_type(self):
        with pytest.raises(ValueError):
            make_company(company_type="소기업")
