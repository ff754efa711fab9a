"""사업자 등록/조회 API 라우터"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ...audit import AuditEntry, AuditEventType, audit_service
from ...database import get_db, CompanyDB
from ..schemas import (
    CompanyCreateRequest,
    CompanyResponse,
    CompanyRegisterResponse,
    ErrorResponse
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(company: CompanyDB) -> CompanyResponse:
    return CompanyResponse(
        id=company.id,
        business_number=company.business_number,
        company_name=company.company_name,
        ceo_name=company.ceo_name,
        company_type=company.company_type,
        industry=company.industry,
        location=company.location,
        is_capital_area=company.is_capital_area,
        created_at=company.created_at
    )


def _find_by_business_number(db: Session, business_number: str):
    return db.query(CompanyDB).filter(
        CompanyDB.business_number == business_number
    ).first()


@router.post("", response_model=CompanyRegisterResponse)
async def register_company(
    request: CompanyCreateRequest,
    db: Session = Depends(get_db)
):
    """사업자 등록

    이미 등록된 사업자등록번호이면 오류 대신 기존 정보를 반환합니다.
    """
    existing = _find_by_business_number(db, request.business_number)
    if existing:
        return CompanyRegisterResponse(
            company=_to_response(existing),
            created=False,
            message="이미 등록된 사업자입니다"
        )

    company = CompanyDB(
        business_number=request.business_number,
        company_name=request.company_name,
        ceo_name=request.ceo_name,
        company_type=request.company_type.value,
        industry=request.industry.value,
        location=request.location,
        is_capital_area=request.is_capital_area
    )

    try:
        db.add(company)
        db.commit()
        db.refresh(company)
    except IntegrityError:
        # 동시 등록: 먼저 저장된 레코드 반환
        db.rollback()
        existing = _find_by_business_number(db, request.business_number)
        if existing is None:
            raise
        return CompanyRegisterResponse(
            company=_to_response(existing),
            created=False,
            message="이미 등록된 사업자입니다"
        )
    except SQLAlchemyError:
        db.rollback()
        logger.exception("사업자 등록 실패: %s", request.business_number)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="사업자 등록에 실패했습니다"
        )

    logger.info("사업자 등록 완료: id=%s business_number=%s", company.id, company.business_number)
    await audit_service.log_entry(AuditEntry(
        event_type=AuditEventType.COMPANY_REGISTERED,
        timestamp=datetime.now(),
        company_id=company.id,
        metadata={"business_number": company.business_number}
    ))

    return CompanyRegisterResponse(
        company=_to_response(company),
        created=True,
        message="사업자 등록 완료"
    )


@router.get(
    "/{business_number}",
    response_model=CompanyResponse,
    responses={404: {"model": ErrorResponse}}
)
async def get_company(business_number: str, db: Session = Depends(get_db)):
    """사업자등록번호로 사업자 조회"""
    company = _find_by_business_number(db, business_number)
    if not company:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="사업자를 찾을 수 없습니다"
        )
    return _to_response(company)
