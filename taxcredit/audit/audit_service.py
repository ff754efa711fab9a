"""감사 로그 서비스"""

import json
import logging
import os
from collections import deque
from dataclasses import dataclass, asdict
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Deque, Dict, Any, List, Optional


logger = logging.getLogger(__name__)

TRAIL_LOGGER_NAME = "taxcredit.audit.trail"

DEFAULT_MAX_ENTRIES = 10000


class AuditEventType(Enum):
    """감사 이벤트 유형"""
    API_REQUEST = "API_REQUEST"
    API_RESPONSE = "API_RESPONSE"
    COMPANY_REGISTERED = "COMPANY_REGISTERED"
    ASSESSMENT_STARTED = "ASSESSMENT_STARTED"
    RULE_EVALUATED = "RULE_EVALUATED"
    ASSESSMENT_COMPLETED = "ASSESSMENT_COMPLETED"
    ERROR_OCCURRED = "ERROR_OCCURRED"


ASSESSMENT_EVENTS = frozenset({
    AuditEventType.ASSESSMENT_STARTED,
    AuditEventType.RULE_EVALUATED,
    AuditEventType.ASSESSMENT_COMPLETED,
})


@dataclass
class AuditEntry:
    """감사 로그 엔트리"""
    event_type: AuditEventType
    timestamp: datetime
    company_id: Optional[int] = None
    year: Optional[int] = None
    request_data: Optional[Dict[str, Any]] = None
    response_data: Optional[Dict[str, Any]] = None
    error_data: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        data = asdict(self)
        data['event_type'] = self.event_type.value
        data['timestamp'] = self.timestamp.isoformat()
        return data

    def to_json(self) -> str:
        """JSON 문자열로 변환 (한 줄)"""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)


class AuditService:
    """감사 로그 서비스

    사업자 등록과 판정 실행 등 중요한 이벤트를 기록하고 추적합니다.
    메모리에는 최근 max_entries건만 보관하며, 전체 이력은 로그 파일에 남습니다.
    """

    def __init__(
        self,
        log_file: Optional[str] = None,
        max_entries: int = DEFAULT_MAX_ENTRIES
    ):
        """
        Args:
            log_file: 로그 파일 경로 (None이면 로거로만 출력)
            max_entries: 메모리에 보관할 최대 엔트리 수
        """
        self.entries: Deque[AuditEntry] = deque(maxlen=max_entries)
        self._file_handler: Optional[logging.FileHandler] = None
        self._log_file: Optional[str] = None
        self.log_file = log_file

    @property
    def log_file(self) -> Optional[str]:
        return self._log_file

    @log_file.setter
    def log_file(self, log_file: Optional[str]):
        """파일 기록 대상 변경 (None이면 파일 기록 안 함)"""
        self.close()
        self._log_file = log_file or None

    def _get_file_handler(self) -> Optional[logging.FileHandler]:
        """첫 기록 시 파일 핸들러 생성"""
        if self._file_handler is None and self._log_file:
            try:
                Path(self._log_file).parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                logger.warning("Failed to create audit log directory for %s: %s", self._log_file, e)
                self._log_file = None
                return None

            handler = logging.FileHandler(self._log_file, encoding='utf-8', delay=True)
            handler.setFormatter(logging.Formatter("%(message)s"))
            self._file_handler = handler

        return self._file_handler

    def close(self):
        """파일 핸들러 닫기"""
        if self._file_handler is not None:
            self._file_handler.close()
            self._file_handler = None

    async def log_entry(self, entry: AuditEntry):
        """감사 엔트리 기록

        Args:
            entry: 기록할 감사 엔트리
        """
        self.entries.append(entry)

        logger.info(
            "[AUDIT] %s company_id=%s year=%s",
            entry.event_type.value, entry.company_id, entry.year
        )

        handler = self._get_file_handler()
        if handler is not None:
            # 파일 기록 오류는 핸들러의 handleError가 처리
            handler.handle(logging.makeLogRecord({
                "name": TRAIL_LOGGER_NAME,
                "levelno": logging.INFO,
                "levelname": "INFO",
                "msg": entry.to_json(),
            }))

    async def get_company_audit_trail(
        self,
        company_id: int,
        year: Optional[int] = None
    ) -> List[AuditEntry]:
        """특정 사업자의 감사 추적 조회

        Args:
            company_id: 사업자 ID
            year: 과세연도 (None이면 전체)

        Returns:
            해당 사업자의 감사 엔트리
        """
        return [
            entry for entry in self.entries
            if entry.company_id == company_id
            and (year is None or entry.year == year)
        ]

    async def get_assessment_audit_trail(
        self,
        company_id: int,
        year: int
    ) -> List[AuditEntry]:
        """판정 과정 감사 추적 조회

        Returns:
            판정 관련 감사 엔트리만
        """
        trail = await self.get_company_audit_trail(company_id, year)
        return [entry for entry in trail if entry.event_type in ASSESSMENT_EVENTS]

    async def generate_audit_report(self, company_id: int) -> Dict[str, Any]:
        """감사 보고서 생성

        Args:
            company_id: 사업자 ID

        Returns:
            전체 감사 보고서
        """
        trail = await self.get_company_audit_trail(company_id)

        if not trail:
            return {
                "company_id": company_id,
                "message": "No audit trail found"
            }

        return {
            "company_id": company_id,
            "total_events": len(trail),
            "start_time": trail[0].timestamp.isoformat(),
            "end_time": trail[-1].timestamp.isoformat(),
            "events": [entry.to_dict() for entry in trail],
            "summary": self._generate_summary(trail)
        }

    def _generate_summary(self, trail: List[AuditEntry]) -> Dict[str, Any]:
        """감사 추적 요약 생성"""
        event_counts = {}
        for entry in trail:
            event_type = entry.event_type.value
            event_counts[event_type] = event_counts.get(event_type, 0) + 1

        return {
            "event_counts": event_counts,
            "has_errors": any(
                entry.event_type == AuditEventType.ERROR_OCCURRED
                for entry in trail
            )
        }


# 전역 감사 서비스 인스턴스 (AUDIT_LOG_FILE="" 이면 파일 기록 안 함, AUDIT_MAX_ENTRIES: 메모리 보관 건수)
audit_service = AuditService(
    log_file=os.getenv("AUDIT_LOG_FILE", "logs/audit.log") or None,
    max_entries=int(os.getenv("AUDIT_MAX_ENTRIES", str(DEFAULT_MAX_ENTRIES)))
)
