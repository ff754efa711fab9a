"""핵심 비즈니스 로직: 세액공제 판정 엔진"""

from .models import (
    CompanySize,
    Industry,
    RuleCategory,
    CompanyProfile,
    EmploymentData,
    InvestmentItem,
    RndItem,
    OtherData,
    EvaluationContext,
)
from .assessment_result import AssessmentOutcome, AssessmentSession
from .rule_catalog import (
    RuleDefinition,
    RuleCatalog,
    get_default_catalog,
    reset_default_catalog,
)
from .dispatcher import evaluate, RULE_EVALUATORS
from .assessment_engine import run_assessment

__all__ = [
    'CompanySize',
    'Industry',
    'RuleCategory',
    'CompanyProfile',
    'EmploymentData',
    'InvestmentItem',
    'RndItem',
    'OtherData',
    'EvaluationContext',
    'AssessmentOutcome',
    'AssessmentSession',
    'RuleDefinition',
    'RuleCatalog',
    'get_default_catalog',
    'reset_default_catalog',
    'evaluate',
    'RULE_EVALUATORS',
    'run_assessment',
]
