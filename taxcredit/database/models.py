"""데이터베이스 모델 정의"""

from sqlalchemy import (
    Column, Integer, String, DateTime, Boolean, BigInteger,
    Text, ForeignKey, JSON, Index
)
from sqlalchemy.orm import declarative_base, relationship
from datetime import datetime

Base = declarative_base()


class CompanyDB(Base):
    """사업자 정보 테이블

    사업자등록번호 기준으로 한 번만 등록됩니다.
    """
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, index=True)
    business_number = Column(String(20), unique=True, nullable=False, index=True, comment="사업자등록번호")
    company_name = Column(String(200), nullable=False, comment="회사명")
    ceo_name = Column(String(100), nullable=False, comment="대표자명")
    company_type = Column(String(20), nullable=False, comment="중소기업, 중견기업, 대기업")
    industry = Column(String(50), nullable=False, comment="업종")
    location = Column(String(200), nullable=False, comment="소재지")
    is_capital_area = Column(Boolean, default=True, nullable=False, comment="수도권 여부")

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # 관계
    employment_data = relationship("EmploymentDataDB", back_populates="company", cascade="all, delete-orphan")
    investment_data = relationship("InvestmentDataDB", back_populates="company", cascade="all, delete-orphan")
    rnd_data = relationship("RndDataDB", back_populates="company", cascade="all, delete-orphan")
    other_data = relationship("OtherDataDB", back_populates="company", cascade="all, delete-orphan")
    assessment_results = relationship("AssessmentResultDB", back_populates="company", cascade="all, delete-orphan")
    assessment_sessions = relationship("AssessmentSessionDB", back_populates="company", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Company(id={self.id}, business_number={self.business_number}, name={self.company_name})>"


class EmploymentDataDB(Base):
    """고용 정보 테이블 (과세연도별)"""
    __tablename__ = "employment_data"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False)
    year = Column(Integer, nullable=False, comment="과세연도")

    total_employees = Column(Integer, default=0, comment="총 상시근로자 수")
    employee_increase = Column(Integer, default=0, comment="전년 대비 증가 인원")
    youth_employees = Column(Integer, default=0, comment="청년(15-34세) 정규직 수")
    disabled_employees = Column(Integer, default=0, comment="장애인 근로자 수")
    career_break_women = Column(Integer, default=0, comment="경력단절여성 재고용 수")
    total_salary = Column(BigInteger, default=0, comment="연간 총급여액")
    insurance_paid = Column(BigInteger, default=0, comment="사회보험료 납부액")

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    company = relationship("CompanyDB", back_populates="employment_data")

    __table_args__ = (Index("idx_employment_company_year", "company_id", "year"),)


class InvestmentDataDB(Base):
    """투자 정보 테이블"""
    __tablename__ = "investment_data"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False)
    year = Column(Integer, nullable=False)

    facility_type = Column(String(100), nullable=False, comment="시설 종류")
    investment_amount = Column(BigInteger, nullable=False, comment="투자 금액")
    description = Column(Text, nullable=True, comment="투자 설명")

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    company = relationship("CompanyDB", back_populates="investment_data")

    __table_args__ = (Index("idx_investment_company_year", "company_id", "year"),)


class RndDataDB(Base):
    """연구개발 정보 테이블"""
    __tablename__ = "rnd_data"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False)
    year = Column(Integer, nullable=False)

    rnd_type = Column(String(50), nullable=False, comment="일반/신성장동력/디자인/신기술")
    expense_amount = Column(BigInteger, nullable=False, comment="연구개발비")
    personnel_count = Column(Integer, default=0, comment="연구전담인력 수")
    description = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    company = relationship("CompanyDB", back_populates="rnd_data")

    __table_args__ = (Index("idx_rnd_company_year", "company_id", "year"),)


class OtherDataDB(Base):
    """기타 정보 테이블 (창업정보, 기부금, 차량비용 등)"""
    __tablename__ = "other_data"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False)
    year = Column(Integer, nullable=False)

    data_type = Column(String(50), nullable=False, comment="데이터 유형")
    data_json = Column(JSON, nullable=False, comment="입력 데이터")

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    company = relationship("CompanyDB", back_populates="other_data")

    __table_args__ = (Index("idx_other_company_year", "company_id", "year"),)


class AssessmentResultDB(Base):
    """판정 결과 테이블 (판정 1회당 규칙별 1행)"""
    __tablename__ = "assessment_results"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False)
    session_id = Column(Integer, ForeignKey("assessment_sessions.id", ondelete="CASCADE"), nullable=True, index=True)
    year = Column(Integer, nullable=False)

    credit_rule_id = Column(Integer, nullable=False, comment="세액공제 규칙 ID")
    credit_rule_name = Column(String(200), nullable=False, comment="세액공제명")
    is_eligible = Column(Boolean, nullable=False, comment="적용 가능 여부")
    credit_amount = Column(BigInteger, default=0, comment="공제 가능액")
    reasons = Column(Text, nullable=True, comment="판정 사유")
    details_json = Column(JSON, nullable=True, comment="상세 계산 내역")

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    company = relationship("CompanyDB", back_populates="assessment_results")
    session = relationship("AssessmentSessionDB", back_populates="results")

    __table_args__ = (Index("idx_results_company_year", "company_id", "year"),)

    def __repr__(self):
        return (
            f"<AssessmentResult(id={self.id}, rule={self.credit_rule_id}, "
            f"eligible={self.is_eligible}, amount={self.credit_amount})>"
        )


class AssessmentSessionDB(Base):
    """판정 세션 테이블 (전체 판정 이력)"""
    __tablename__ = "assessment_sessions"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False)
    year = Column(Integer, nullable=False)

    total_credit_amount = Column(BigInteger, default=0, comment="총 공제 가능액")
    eligible_count = Column(Integer, default=0, comment="적용 가능 항목 수")
    rule_version = Column(String(20), nullable=True, comment="사용된 규칙 카탈로그 버전")

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    company = relationship("CompanyDB", back_populates="assessment_sessions")
    results = relationship("AssessmentResultDB", back_populates="session", order_by="AssessmentResultDB.credit_rule_id")

    __table_args__ = (Index("idx_sessions_company_year", "company_id", "year"),)

    def __repr__(self):
        return (
            f"<AssessmentSession(id={self.id}, company_id={self.company_id}, year={self.year}, "
            f"total={self.total_credit_amount})>"
        )
