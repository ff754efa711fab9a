"""RuleCatalog: 조세특례제한법 세액공제 규칙 카탈로그

YAML 파일에서 19개 세액공제 규칙 정의를 로드합니다.
규칙 정의는 프로세스 시작 시 한 번 로드되며 이후 변경되지 않습니다.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

import yaml

from .models import RuleCategory


DEFAULT_RULES_FILE = Path(__file__).parent.parent / "rules" / "tax_credit_rules.yaml"


@dataclass(frozen=True)
class RuleDefinition:
    """세액공제 규칙 정의

    판정 로직은 id로만 결정되며, 나머지 필드는 화면 표시용입니다.

    Attributes:
        id: 규칙 ID (1~19)
        key: 규칙 키 (예: "employment_increase")
        name: 세액공제명
        category: 분류
        article: 근거 법조문
        description: 규칙 설명
        requirements: 적용 요건 (표시용)
        credit_amount: 공제 금액/율 설명 (표시용)
    """

    id: int
    key: str
    name: str
    category: RuleCategory
    article: str = ""
    description: str = ""
    requirements: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)
    credit_amount: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'key': self.key,
            'name': self.name,
            'category': self.category.value,
            'article': self.article,
            'description': self.description,
            'requirements': self.requirements,
            'credit_amount': self.credit_amount,
        }

    def __str__(self) -> str:
        return f"RuleDefinition({self.id}: {self.name})"


class RuleCatalog:
    """세액공제 규칙 카탈로그

    Attributes:
        rules_file: 규칙 YAML 파일 경로
        version: 규칙 파일 버전
        rules: 파일 순서대로 정렬된 규칙 리스트
    """

    def __init__(self, rules_file: Optional[Union[str, Path]] = None):
        """
        Args:
            rules_file: 규칙 파일 경로 (기본값: TAXCREDIT_RULES_FILE 환경 변수 또는 패키지 내장 파일)
        """
        self.rules_file = Path(
            rules_file or os.getenv("TAXCREDIT_RULES_FILE") or DEFAULT_RULES_FILE
        )
        data = self._load_rules()
        self.version = str(data.get('version', 'unknown'))
        self.rules: List[RuleDefinition] = []
        self._by_id: Dict[int, RuleDefinition] = {}
        self._by_key: Dict[str, RuleDefinition] = {}

        for key, rule_data in (data.get('rules') or {}).items():
            self._register(self._parse_rule_data(key, rule_data))

    def _load_rules(self) -> Dict[str, Any]:
        """YAML 파일에서 규칙 로드

        Raises:
            FileNotFoundError: 규칙 파일이 없는 경우
            ValueError: 파일 형식이 잘못된 경우
        """
        if not self.rules_file.exists():
            raise FileNotFoundError(f"규칙 파일을 찾을 수 없습니다: {self.rules_file}")

        with open(self.rules_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Invalid rule file format: {self.rules_file}")

        return data

    def _parse_rule_data(self, key: str, data: Dict[str, Any]) -> RuleDefinition:
        """딕셔너리에서 RuleDefinition 생성

        Raises:
            ValueError: 필수 필드 누락 또는 알 수 없는 분류
        """
        if not isinstance(data, dict):
            raise ValueError(f"Invalid rule entry: {key}")

        for required in ('id', 'name', 'category'):
            if required not in data:
                raise ValueError(f"Missing required field '{required}' in rule {key}")

        try:
            category = RuleCategory(data['category'])
        except ValueError:
            raise ValueError(f"Unknown category '{data['category']}' in rule {key}") from None

        return RuleDefinition(
            id=int(data['id']),
            key=key,
            name=data['name'],
            category=category,
            article=data.get('article', ''),
            description=data.get('description', ''),
            requirements=data.get('requirements') or {},
            credit_amount=data.get('credit_amount') or {}
        )

    def _register(self, rule: RuleDefinition) -> None:
        if rule.id in self._by_id:
            raise ValueError(f"Rule id {rule.id} already exists")
        if rule.key in self._by_key:
            raise ValueError(f"Rule key {rule.key} already exists")

        self.rules.append(rule)
        self._by_id[rule.id] = rule
        self._by_key[rule.key] = rule

    def get(self, rule_id: int) -> Optional[RuleDefinition]:
        """ID로 규칙 조회"""
        return self._by_id.get(rule_id)

    def get_by_key(self, key: str) -> Optional[RuleDefinition]:
        """키로 규칙 조회"""
        return self._by_key.get(key)

    def list_by_category(self, category: Union[RuleCategory, str]) -> List[RuleDefinition]:
        """분류별 규칙 목록 (카탈로그 순서 유지)"""
        category = RuleCategory(category)
        return [rule for rule in self.rules if rule.category == category]

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """키 -> 규칙 딕셔너리"""
        return {rule.key: rule.to_dict() for rule in self.rules}

    def __iter__(self) -> Iterator[RuleDefinition]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __str__(self) -> str:
        return f"RuleCatalog({len(self)} rules, version {self.version})"


_default_catalog: Optional[RuleCatalog] = None


def get_default_catalog() -> RuleCatalog:
    """기본 규칙 카탈로그 가져오기

    애플리케이션 전역에서 사용할 단일 카탈로그 인스턴스를 반환합니다.
    """
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = RuleCatalog()
    return _default_catalog


def reset_default_catalog() -> None:
    """기본 규칙 카탈로그 초기화 (주로 테스트용)"""
    global _default_catalog
    _default_catalog = None
