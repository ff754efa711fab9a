"""판정 입력 모델: 사업자 정보와 과세연도별 입력 데이터

엔진은 이 객체들을 읽기만 하며 수정하지 않습니다.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class CompanySize(str, Enum):
    """기업 규모"""
    SME = "중소기업"
    MID_SIZED = "중견기업"
    LARGE = "대기업"


class Industry(str, Enum):
    """업종"""
    MANUFACTURING = "제조업"
    MINING = "광업"
    CONSTRUCTION = "건설업"
    WHOLESALE = "도매업"
    RETAIL = "소매업"
    SERVICE = "서비스업"
    IT = "IT업"
    OTHER = "기타"


class RuleCategory(str, Enum):
    """세액공제 규칙 분류"""
    EMPLOYMENT = "고용"
    SME = "중소기업"
    INVESTMENT = "투자"
    RND = "연구개발"
    OTHER = "기타"


@dataclass(frozen=True)
class CompanyProfile:
    """사업자 정보

    사업자등록번호 기준으로 한 번 등록되며, 판정 엔진에는 읽기 전용으로 전달됩니다.

    Attributes:
        id: 사업자 ID
        business_number: 사업자등록번호 (고유)
        company_name: 회사명
        ceo_name: 대표자명
        company_type: 기업 규모
        industry: 업종
        location: 소재지
        is_capital_area: 수도권 여부

    Example:
        >>> company = CompanyProfile(
        ...     id=1,
        ...     business_number="123-45-67890",
        ...     company_name="한빛정밀",
        ...     ceo_name="김대표",
        ...     company_type="중소기업",
        ...     industry="제조업",
        ...     location="경상남도 창원시",
        ...     is_capital_area=False
        ... )
    """

    id: Optional[int]
    business_number: str
    company_name: str
    ceo_name: str
    company_type: CompanySize
    industry: Industry
    location: str
    is_capital_area: bool = True

    def __post_init__(self):
        """문자열로 전달된 규모/업종을 열거형으로 변환"""
        # 알 수 없는 값이면 ValueError 발생
        object.__setattr__(self, 'company_type', CompanySize(self.company_type))
        object.__setattr__(self, 'industry', Industry(self.industry))
        object.__setattr__(self, 'is_capital_area', bool(self.is_capital_area))

    @classmethod
    def from_record(cls, record: Any) -> "CompanyProfile":
        """DB 레코드(속성 접근 가능한 객체)에서 생성"""
        return cls(
            id=record.id,
            business_number=record.business_number,
            company_name=record.company_name,
            ceo_name=record.ceo_name,
            company_type=record.company_type,
            industry=record.industry,
            location=record.location,
            is_capital_area=record.is_capital_area
        )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'business_number': self.business_number,
            'company_name': self.company_name,
            'ceo_name': self.ceo_name,
            'company_type': self.company_type.value,
            'industry': self.industry.value,
            'location': self.location,
            'is_capital_area': self.is_capital_area,
        }


@dataclass(frozen=True)
class EmploymentData:
    """고용 정보 (전년 대비 증감은 호출 측에서 계산하여 전달)

    Attributes:
        total_employees: 총 상시근로자 수
        employee_increase: 전년 대비 증가 인원
        youth_employees: 청년(15-34세) 정규직 증가 인원
        disabled_employees: 장애인 근로자 수
        career_break_women: 경력단절여성 재고용 수
        total_salary: 연간 총급여액
        insurance_paid: 사업주 부담 사회보험료 납부액
    """

    total_employees: int = 0
    employee_increase: int = 0
    youth_employees: int = 0
    disabled_employees: int = 0
    career_break_women: int = 0
    total_salary: int = 0
    insurance_paid: int = 0


@dataclass(frozen=True)
class InvestmentItem:
    """시설 투자 내역"""
    facility_type: str
    investment_amount: int = 0
    description: Optional[str] = None


@dataclass(frozen=True)
class RndItem:
    """연구개발비 지출 내역"""
    rnd_type: str
    expense_amount: int = 0
    personnel_count: int = 0
    description: Optional[str] = None


@dataclass(frozen=True)
class OtherData:
    """기타 정보 (창업, 이전, 인증, 기부금, 업무용 차량 등)

    Attributes:
        startup_date: 창업일
        is_youth_startup: 청년 창업 여부
        founder_age: 창업자 나이
        relocation_completed: 수도권 밖 이전 완료 여부
        certification: 사회적기업/협동조합 인증 여부
        certification_type: 인증 유형 ("사회적기업" 또는 "협동조합")
        donation_amount: 기부금 지출액
        donation_type: 기부금 유형 ("법정기부금" 또는 "지정기부금")
        business_income: 사업소득
        calculated_tax: 산출세액 (호출 측 제공)
        vehicle_count: 업무용 차량 대수
        depreciation_expense: 감가상각비
        rental_expense: 임차료
        fuel_expense: 유류비
    """

    startup_date: Optional[date] = None
    is_youth_startup: bool = False
    founder_age: int = 0
    relocation_completed: bool = False
    certification: bool = False
    certification_type: Optional[str] = None
    donation_amount: int = 0
    donation_type: Optional[str] = None
    business_income: int = 0
    calculated_tax: Optional[int] = None
    vehicle_count: int = 0
    depreciation_expense: int = 0
    rental_expense: int = 0
    fuel_expense: int = 0

    def __post_init__(self):
        # "YYYY-MM-DD" 문자열 허용
        if isinstance(self.startup_date, str):
            startup = date.fromisoformat(self.startup_date) if self.startup_date else None
            object.__setattr__(self, 'startup_date', startup)


@dataclass(frozen=True)
class EvaluationContext:
    """판정 컨텍스트

    판정 1회마다 새로 구성되며, 판정이 끝나면 버려집니다.

    Attributes:
        company: 사업자 정보
        year: 과세연도
        employment: 고용 정보 (없으면 None)
        investments: 시설 투자 목록
        rnd_items: 연구개발비 목록
        other: 기타 정보 (없으면 None)
    """

    company: CompanyProfile
    year: int
    employment: Optional[EmploymentData] = None
    investments: List[InvestmentItem] = field(default_factory=list)
    rnd_items: List[RndItem] = field(default_factory=list)
    other: Optional[OtherData] = None

    @classmethod
    def create(
        cls,
        company: CompanyProfile,
        year: int,
        employment_data: Optional[Dict[str, Any]] = None,
        investment_data: Optional[List[Dict[str, Any]]] = None,
        rnd_data: Optional[List[Dict[str, Any]]] = None,
        other_data: Optional[Dict[str, Any]] = None
    ) -> "EvaluationContext":
        """딕셔너리 입력으로 컨텍스트 생성

        None 값은 해당 필드의 기본값(0 등)으로 대체됩니다.

        Args:
            company: 사업자 정보
            year: 과세연도
            employment_data: 고용 정보 딕셔너리
            investment_data: 투자 내역 딕셔너리 리스트
            rnd_data: 연구개발비 딕셔너리 리스트
            other_data: 기타 정보 딕셔너리

        Returns:
            생성된 EvaluationContext
        """
        return cls(
            company=company,
            year=year,
            employment=_build(EmploymentData, employment_data),
            investments=[_build(InvestmentItem, item) for item in investment_data or []],
            rnd_items=[_build(RndItem, item) for item in rnd_data or []],
            other=_build(OtherData, other_data)
        )


BundleType = Union[EmploymentData, InvestmentItem, RndItem, OtherData]


def _build(bundle_cls, data: Optional[Dict[str, Any]]) -> Optional[BundleType]:
    """알려진 필드만 골라 번들 객체 생성"""
    if data is None:
        return None

    known = bundle_cls.__dataclass_fields__
    values = {
        key: value for key, value in data.items()
        if key in known and value is not None
    }
    return bundle_cls(**values)
