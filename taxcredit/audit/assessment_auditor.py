"""판정 과정 감사 추적"""

from datetime import datetime
from typing import Dict, Any, List, Optional

from .audit_service import AuditService, AuditEntry, AuditEventType, audit_service
from ..core import AssessmentOutcome, AssessmentSession, EvaluationContext


class AssessmentAuditor:
    """세액공제 판정 과정 추적

    판정 1회의 입력, 규칙별 결과, 집계를 기록하여
    나중에 판정 과정을 재현할 수 있도록 합니다.
    """

    def __init__(
        self,
        company_id: int,
        year: int,
        audit_service: AuditService = audit_service
    ):
        """
        Args:
            company_id: 사업자 ID
            year: 과세연도
            audit_service: 감사 서비스
        """
        self.company_id = company_id
        self.year = year
        self.audit_service = audit_service
        self.rule_evaluations: List[Dict[str, Any]] = []

    def _entry(self, event_type: AuditEventType, **kwargs) -> AuditEntry:
        return AuditEntry(
            event_type=event_type,
            timestamp=datetime.now(),
            company_id=self.company_id,
            year=self.year,
            **kwargs
        )

    async def log_assessment_start(self, ctx: EvaluationContext):
        """판정 시작 로깅

        Args:
            ctx: 판정 컨텍스트
        """
        await self.audit_service.log_entry(self._entry(
            AuditEventType.ASSESSMENT_STARTED,
            request_data={
                "company": ctx.company.to_dict(),
                "has_employment_data": ctx.employment is not None,
                "investment_count": len(ctx.investments),
                "rnd_count": len(ctx.rnd_items),
                "has_other_data": ctx.other is not None
            }
        ))

    async def log_rule_evaluation(self, outcome: AssessmentOutcome):
        """규칙별 판정 결과 로깅"""
        evaluation = {
            "rule_id": outcome.rule_id,
            "rule_name": outcome.rule_name,
            "eligible": outcome.eligible,
            "credit_amount": outcome.credit_amount,
            "reasons": outcome.reasons
        }
        self.rule_evaluations.append(evaluation)

        await self.audit_service.log_entry(self._entry(
            AuditEventType.RULE_EVALUATED,
            metadata=evaluation
        ))

    async def log_assessment_complete(self, session: AssessmentSession, session_id: Optional[int] = None):
        """판정 완료 로깅"""
        await self.audit_service.log_entry(self._entry(
            AuditEventType.ASSESSMENT_COMPLETED,
            response_data={
                "session_id": session_id,
                "total_credit_amount": session.total_credit_amount,
                "eligible_count": session.eligible_count,
                "total_rules": len(session.outcomes)
            }
        ))

    async def log_session(self, ctx: EvaluationContext, session: AssessmentSession, session_id: Optional[int] = None):
        """판정 1회 전체를 순서대로 기록"""
        await self.log_assessment_start(ctx)
        for outcome in session.outcomes:
            await self.log_rule_evaluation(outcome)
        await self.log_assessment_complete(session, session_id)

    async def generate_assessment_report(self) -> Dict[str, Any]:
        """판정 보고서 생성

        Returns:
            전체 판정 과정 보고서
        """
        audit_trail = await self.audit_service.get_assessment_audit_trail(
            self.company_id, self.year
        )

        return {
            "company_id": self.company_id,
            "year": self.year,
            "total_rules": len(self.rule_evaluations),
            "eligible_rules": [e["rule_id"] for e in self.rule_evaluations if e["eligible"]],
            "rule_evaluations": self.rule_evaluations,
            "audit_events": [entry.to_dict() for entry in audit_trail],
            "generated_at": datetime.now().isoformat()
        }
