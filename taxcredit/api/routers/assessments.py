"""세액공제 판정 API 라우터"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...audit import AssessmentAuditor
from ...core import (
    AssessmentSession,
    CompanyProfile,
    EvaluationContext,
    RuleCatalog,
    run_assessment
)
from ...database import (
    get_db,
    CompanyDB,
    EmploymentDataDB,
    InvestmentDataDB,
    RndDataDB,
    OtherDataDB,
    AssessmentResultDB,
    AssessmentSessionDB
)
from ..schemas import (
    AssessRequest,
    AssessResponse,
    AssessmentResultItem,
    AssessmentSessionResponse,
    ResultsResponse,
    ErrorResponse
)
from .rules import get_catalog

logger = logging.getLogger(__name__)

router = APIRouter()

OTHER_DATA_TYPE = "기타정보"


def _build_context(company: CompanyDB, request: AssessRequest) -> EvaluationContext:
    """요청 데이터로 판정 컨텍스트 구성"""
    return EvaluationContext.create(
        company=CompanyProfile.from_record(company),
        year=request.year,
        employment_data=request.employment_data.model_dump() if request.employment_data else None,
        investment_data=[item.model_dump() for item in request.investment_data],
        rnd_data=[item.model_dump() for item in request.rnd_data],
        other_data=request.other_data.model_dump() if request.other_data else None
    )


def _store_inputs(db: Session, request: AssessRequest) -> None:
    """판정 입력 데이터를 과세연도별로 저장"""
    company_id, year = request.company_id, request.year

    if request.employment_data:
        db.add(EmploymentDataDB(
            company_id=company_id,
            year=year,
            **request.employment_data.model_dump()
        ))

    for item in request.investment_data:
        db.add(InvestmentDataDB(company_id=company_id, year=year, **item.model_dump()))

    for item in request.rnd_data:
        db.add(RndDataDB(company_id=company_id, year=year, **item.model_dump()))

    if request.other_data:
        db.add(OtherDataDB(
            company_id=company_id,
            year=year,
            data_type=OTHER_DATA_TYPE,
            data_json=request.other_data.model_dump(mode="json")
        ))


def _store_session(
    db: Session,
    request: AssessRequest,
    session: AssessmentSession,
    rule_version: str
) -> AssessmentSessionDB:
    """판정 세션 1행과 규칙별 결과 행 저장"""
    session_db = AssessmentSessionDB(
        company_id=request.company_id,
        year=request.year,
        total_credit_amount=session.total_credit_amount,
        eligible_count=session.eligible_count,
        rule_version=rule_version
    )
    db.add(session_db)
    db.flush()

    for outcome in session.outcomes:
        result = outcome.to_dict()
        db.add(AssessmentResultDB(
            company_id=request.company_id,
            session_id=session_db.id,
            year=request.year,
            credit_rule_id=result['credit_rule_id'],
            credit_rule_name=result['credit_rule_name'],
            is_eligible=result['is_eligible'],
            credit_amount=result['credit_amount'],
            reasons=result['reasons'],
            details_json=result['details']
        ))

    return session_db


def _result_item(result: AssessmentResultDB) -> AssessmentResultItem:
    return AssessmentResultItem(
        credit_rule_id=result.credit_rule_id,
        credit_rule_name=result.credit_rule_name,
        is_eligible=result.is_eligible,
        credit_amount=result.credit_amount or 0,
        reasons=result.reasons,
        details=result.details_json or {}
    )


@router.post(
    "/assess",
    response_model=AssessResponse,
    responses={404: {"model": ErrorResponse}}
)
async def assess(
    request: AssessRequest,
    db: Session = Depends(get_db),
    catalog: RuleCatalog = Depends(get_catalog)
):
    """세액공제 판정 실행

    전체 규칙을 판정하고 입력 데이터, 규칙별 결과, 세션 요약을 저장합니다.
    """
    company = db.query(CompanyDB).filter(CompanyDB.id == request.company_id).first()
    if not company:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="회사 정보를 찾을 수 없습니다"
        )

    ctx = _build_context(company, request)
    session = run_assessment(catalog, ctx)

    try:
        _store_inputs(db, request)
        session_db = _store_session(db, request, session, catalog.version)
        db.commit()
        db.refresh(session_db)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("판정 결과 저장 실패: company_id=%s year=%s", request.company_id, request.year)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="판정 실행에 실패했습니다"
        )

    logger.info(
        "판정 완료: company_id=%s year=%s eligible=%s total=%s",
        request.company_id, request.year, session.eligible_count, session.total_credit_amount
    )

    auditor = AssessmentAuditor(company_id=request.company_id, year=request.year)
    await auditor.log_session(ctx, session, session_db.id)

    return AssessResponse(
        session_id=session_db.id,
        company_id=request.company_id,
        year=request.year,
        total_credit_amount=session.total_credit_amount,
        eligible_count=session.eligible_count,
        results=[AssessmentResultItem(**outcome.to_dict()) for outcome in session.outcomes],
        message=f"{len(session.outcomes)}개 규칙 판정이 완료되었습니다."
    )


@router.get("/results/{company_id}/{year}", response_model=ResultsResponse)
async def get_results(company_id: int, year: int, db: Session = Depends(get_db)):
    """판정 결과 조회

    해당 과세연도의 가장 최근 판정 세션과 규칙별 결과를 반환합니다.
    """
    session_db = db.query(AssessmentSessionDB).filter(
        AssessmentSessionDB.company_id == company_id,
        AssessmentSessionDB.year == year
    ).order_by(
        AssessmentSessionDB.created_at.desc(),
        AssessmentSessionDB.id.desc()
    ).first()

    if not session_db:
        return ResultsResponse(session=None, results=[])

    results = db.query(AssessmentResultDB).filter(
        AssessmentResultDB.session_id == session_db.id
    ).order_by(AssessmentResultDB.credit_rule_id).all()

    return ResultsResponse(
        session=AssessmentSessionResponse(
            id=session_db.id,
            company_id=session_db.company_id,
            year=session_db.year,
            total_credit_amount=session_db.total_credit_amount,
            eligible_count=session_db.eligible_count,
            rule_version=session_db.rule_version,
            created_at=session_db.created_at
        ),
        results=[_result_item(result) for result in results]
    )
