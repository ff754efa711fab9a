"""API 요청/응답 스키마 (Pydantic)"""

from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List
from datetime import date, datetime

from ..core import CompanySize, Industry


# ============================================================================
# 세액공제 규칙 관련 스키마
# ============================================================================

class RuleResponse(BaseModel):
    """세액공제 규칙 응답"""
    id: int
    key: str
    name: str
    category: str
    article: str
    description: str
    requirements: Dict[str, Any] = Field(default_factory=dict)
    credit_amount: Dict[str, Any] = Field(default_factory=dict)


class RuleListResponse(BaseModel):
    """세액공제 규칙 목록 응답"""
    version: str
    total: int
    rules: List[RuleResponse]


# ============================================================================
# 사업자 관련 스키마
# ============================================================================

class CompanyCreateRequest(BaseModel):
    """사업자 등록 요청"""
    business_number: str = Field(..., description="사업자등록번호", min_length=1, max_length=20)
    company_name: str = Field(..., description="회사명", min_length=1)
    ceo_name: str = Field(..., description="대표자명", min_length=1)
    company_type: CompanySize = Field(..., description="기업 규모 (중소기업, 중견기업, 대기업)")
    industry: Industry = Field(..., description="업종")
    location: str = Field(..., description="소재지")
    is_capital_area: bool = Field(default=True, description="수도권 여부")

    class Config:
        json_schema_extra = {
            "example": {
                "business_number": "123-45-67890",
                "company_name": "한빛정밀",
                "ceo_name": "김대표",
                "company_type": "중소기업",
                "industry": "제조업",
                "location": "경상남도 창원시",
                "is_capital_area": False
            }
        }


class CompanyResponse(BaseModel):
    """사업자 정보 응답"""
    id: int
    business_number: str
    company_name: str
    ceo_name: str
    company_type: str
    industry: str
    location: str
    is_capital_area: bool
    created_at: datetime


class CompanyRegisterResponse(BaseModel):
    """사업자 등록 응답 (이미 등록된 경우 기존 정보 반환)"""
    company: CompanyResponse
    created: bool
    message: str


# ============================================================================
# 판정 입력 스키마
# ============================================================================

class EmploymentDataInput(BaseModel):
    """고용 정보 입력"""
    total_employees: int = Field(default=0, ge=0, description="총 상시근로자 수")
    employee_increase: int = Field(default=0, description="전년 대비 증가 인원")
    youth_employees: int = Field(default=0, ge=0, description="청년 정규직 증가 인원")
    disabled_employees: int = Field(default=0, ge=0, description="장애인 근로자 수")
    career_break_women: int = Field(default=0, ge=0, description="경력단절여성 재고용 수")
    total_salary: int = Field(default=0, ge=0, description="연간 총급여액")
    insurance_paid: int = Field(default=0, ge=0, description="사회보험료 납부액")


class InvestmentInput(BaseModel):
    """시설 투자 입력"""
    facility_type: str = Field(..., description="시설 종류 (예: 자동화설비)")
    investment_amount: int = Field(..., ge=0, description="투자 금액")
    description: Optional[str] = None


class RndInput(BaseModel):
    """연구개발비 입력"""
    rnd_type: str = Field(..., description="연구개발 유형 (예: 일반연구개발비)")
    expense_amount: int = Field(..., ge=0, description="연구개발비")
    personnel_count: int = Field(default=0, ge=0, description="연구전담인력 수")
    description: Optional[str] = None


class OtherDataInput(BaseModel):
    """기타 정보 입력 (창업, 인증, 기부금, 업무용 차량)"""
    startup_date: Optional[date] = Field(None, description="창업일")
    is_youth_startup: bool = False
    founder_age: int = Field(default=0, ge=0)
    relocation_completed: bool = False
    certification: bool = False
    certification_type: Optional[str] = Field(None, description="사회적기업 또는 협동조합")
    donation_amount: int = Field(default=0, ge=0)
    donation_type: Optional[str] = Field(None, description="법정기부금 또는 지정기부금")
    business_income: int = Field(default=0, ge=0, description="사업소득")
    calculated_tax: Optional[int] = Field(None, ge=0, description="산출세액")
    vehicle_count: int = Field(default=0, ge=0)
    depreciation_expense: int = Field(default=0, ge=0)
    rental_expense: int = Field(default=0, ge=0)
    fuel_expense: int = Field(default=0, ge=0)


class AssessRequest(BaseModel):
    """판정 실행 요청"""
    company_id: int
    year: int = Field(..., ge=2000, le=2100, description="과세연도")
    employment_data: Optional[EmploymentDataInput] = None
    investment_data: List[InvestmentInput] = Field(default_factory=list)
    rnd_data: List[RndInput] = Field(default_factory=list)
    other_data: Optional[OtherDataInput] = None

    class Config:
        json_schema_extra = {
            "example": {
                "company_id": 1,
                "year": 2024,
                "employment_data": {"employee_increase": 3, "youth_employees": 1, "insurance_paid": 10000000},
                "investment_data": [{"facility_type": "자동화설비", "investment_amount": 50000000}],
                "rnd_data": [{"rnd_type": "일반연구개발비", "expense_amount": 10000000}],
                "other_data": {"business_income": 300000000}
            }
        }


# ============================================================================
# 판정 결과 스키마
# ============================================================================

class AssessmentResultItem(BaseModel):
    """규칙별 판정 결과"""
    credit_rule_id: int
    credit_rule_name: str
    is_eligible: bool
    credit_amount: int
    reasons: Optional[str] = None
    details: Dict[str, Any] = Field(default_factory=dict)


class AssessResponse(BaseModel):
    """판정 실행 응답"""
    session_id: int
    company_id: int
    year: int
    total_credit_amount: int
    eligible_count: int
    results: List[AssessmentResultItem]
    message: str


class AssessmentSessionResponse(BaseModel):
    """판정 세션 정보"""
    id: int
    company_id: int
    year: int
    total_credit_amount: int
    eligible_count: int
    rule_version: Optional[str] = None
    created_at: datetime


class ResultsResponse(BaseModel):
    """판정 결과 조회 응답 (가장 최근 세션)"""
    session: Optional[AssessmentSessionResponse] = None
    results: List[AssessmentResultItem]


# ============================================================================
# 에러 응답
# ============================================================================

class ErrorResponse(BaseModel):
    """에러 응답"""
    error: str
    detail: Optional[str] = None
    field: Optional[str] = None
