"""규칙별 판정 함수"""

from .employment import (
    assess_employment_increase,
    assess_youth_employment,
    assess_disabled_employment,
    assess_career_break_women,
    assess_social_insurance,
)
from .sme import (
    assess_sme_special_reduction,
    assess_startup_sme_reduction,
    assess_manufacturing_relocation,
    assess_social_enterprise_reduction,
    assess_youth_startup_reduction,
)
from .investment import (
    assess_productivity_facilities,
    assess_energy_environment_facilities,
    assess_safety_facilities,
    assess_smart_factory,
)
from .rnd import (
    assess_rnd_expense,
    assess_design_expense,
    assess_new_technology_expense,
)
from .other import (
    assess_donation,
    assess_business_vehicle,
)

__all__ = [
    'assess_employment_increase',
    'assess_youth_employment',
    'assess_disabled_employment',
    'assess_career_break_women',
    'assess_social_insurance',
    'assess_sme_special_reduction',
    'assess_startup_sme_reduction',
    'assess_manufacturing_relocation',
    'assess_social_enterprise_reduction',
    'assess_youth_startup_reduction',
    'assess_productivity_facilities',
    'assess_energy_environment_facilities',
    'assess_safety_facilities',
    'assess_smart_factory',
    'assess_rnd_expense',
    'assess_design_expense',
    'assess_new_technology_expense',
    'assess_donation',
    'assess_business_vehicle',
]
