"""세액공제 규칙 조회 API 라우터"""

from fastapi import APIRouter, Depends, HTTPException, status

from ...core import RuleCatalog, RuleDefinition, get_default_catalog
from ..schemas import RuleResponse, RuleListResponse, ErrorResponse

router = APIRouter()


def get_catalog() -> RuleCatalog:
    """규칙 카탈로그 의존성"""
    return get_default_catalog()


def _to_response(rule: RuleDefinition) -> RuleResponse:
    return RuleResponse(**rule.to_dict())


@router.get("", response_model=RuleListResponse)
async def list_rules(catalog: RuleCatalog = Depends(get_catalog)):
    """세액공제 규칙 전체 조회 (카탈로그 순서)"""
    return RuleListResponse(
        version=catalog.version,
        total=len(catalog),
        rules=[_to_response(rule) for rule in catalog]
    )


@router.get(
    "/{rule_key}",
    response_model=RuleResponse,
    responses={404: {"model": ErrorResponse}}
)
async def get_rule(rule_key: str, catalog: RuleCatalog = Depends(get_catalog)):
    """규칙 상세 조회"""
    rule = catalog.get_by_key(rule_key)
    if rule is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="규칙을 찾을 수 없습니다"
        )
    return _to_response(rule)
