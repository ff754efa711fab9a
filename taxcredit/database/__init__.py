"""데이터베이스 모듈"""

from .models import (
    Base,
    CompanyDB,
    EmploymentDataDB,
    InvestmentDataDB,
    RndDataDB,
    OtherDataDB,
    AssessmentResultDB,
    AssessmentSessionDB
)
from .connection import (
    engine,
    SessionLocal,
    get_db,
    init_db
)

__all__ = [
    'Base',
    'CompanyDB',
    'EmploymentDataDB',
    'InvestmentDataDB',
    'RndDataDB',
    'OtherDataDB',
    'AssessmentResultDB',
    'AssessmentSessionDB',
    'engine',
    'SessionLocal',
    'get_db',
    'init_db'
]
