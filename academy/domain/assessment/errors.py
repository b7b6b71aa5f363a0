"""
평가 도메인 오류 — 순수 파이썬

설정/연동 오류만 예외로 던진다.
마감/중복 제출은 정상 흐름이므로 예외가 아니라 GateDecision 값으로 돌려준다.
"""
from __future__ import annotations


class AssessmentDomainError(Exception):
    """평가 도메인 규칙 위반 등."""
    code = "assessment_error"


class AssessmentConfigError(AssessmentDomainError):
    """설정/연동 버그. 부분 채점 없이 즉시 중단."""
    code = "config_error"


class UnknownCategoryError(AssessmentConfigError):
    code = "unknown_category"


class AnswerLengthMismatchError(AssessmentConfigError):
    """답안 길이 != 정답 길이."""
    code = "answer_length_mismatch"


class MissingWeightConfigError(AssessmentConfigError):
    """배점형 카테고리인데 배점 설정이 없음."""
    code = "missing_weight_config"


class InvalidAnswerKeyError(AssessmentConfigError):
    """정답 길이/선택지 범위/배점 인덱스 위반."""
    code = "invalid_answer_key"


class WeightTotalError(InvalidAnswerKeyError):
    """모의고사 배점 합계가 만점(100)과 다름."""
    code = "invalid_weight_total"


class TargetRequiredError(AssessmentConfigError):
    """퀘스트 id로 구분해야 하는 카테고리인데 target_id 없음."""
    code = "target_required"


class AnswerKeyNotFoundError(AssessmentDomainError):
    code = "answer_key_not_found"


class AnswerKeyLockedError(AssessmentDomainError):
    """이미 제출 기록이 참조하는 정답은 수정 불가."""
    code = "LOCKED"
