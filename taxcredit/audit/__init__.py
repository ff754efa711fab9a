"""감사 추적 모듈"""

from .audit_middleware import AuditMiddleware
from .audit_service import AuditService, AuditEntry, AuditEventType, audit_service
from .assessment_auditor import AssessmentAuditor

__all__ = [
    'AuditMiddleware',
    'AuditService',
    'AuditEntry',
    'AuditEventType',
    'AssessmentAuditor',
    'audit_service'
]
