"""
정답 대조 자동 채점 — 순수 함수

✅ 책임
- 답안 길이 검증 (불일치 = 연동 버그 → 예외)
- 문항별 정오 판정 (미응답 0은 항상 오답)
- 카테고리 규칙에 따른 점수 계산 (정수 누적 + 마지막 1회 반올림)

🚫 책임 아님
- 정답/배점 자체의 유효성 (AnswerKey.validate, 작성 시점 책임)
- 제출 가능 여부 (gate)
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from academy.domain.assessment.categories import ScoringRule, question_number
from academy.domain.assessment.entities import (
    NO_ANSWER,
    AnswerKey,
    GradedResult,
    QuestionDetail,
)
from academy.domain.assessment.errors import (
    AnswerLengthMismatchError,
    AssessmentConfigError,
    InvalidAnswerKeyError,
)
from academy.domain.shared.numbers import percent


def grade(
    answers: Sequence[int],
    key: AnswerKey,
    weight_overrides: Optional[Sequence[int]] = None,
) -> GradedResult:
    """
    answers × key → GradedResult

    weight_overrides가 주어지면 key.weighted_indices 대신 사용한다 (모의고사 3점 문항).
    """
    spec = key.category.spec
    if spec.scoring_rule is ScoringRule.NONE:
        raise AssessmentConfigError(f"{key.category.value} is not a graded category")

    if len(answers) != len(key.answers):
        raise AnswerLengthMismatchError(
            f"{key.category.value}: answer length {len(answers)} "
            f"!= key length {len(key.answers)}"
        )

    if weight_overrides is not None:
        key = AnswerKey(
            category=key.category,
            answers=key.answers,
            weighted_indices=frozenset(int(i) for i in weight_overrides),
            target_id=key.target_id,
        )

    if spec.scoring_rule is ScoringRule.WEIGHTED and key.weighted_indices is not None:
        bad = sorted(i for i in key.weighted_indices if not 0 <= i < len(key.answers))
        if bad:
            raise InvalidAnswerKeyError(f"weighted indices out of range: {bad}")

    details: List[QuestionDetail] = []
    correct_count = 0
    earned = 0

    for index, (raw, expected) in enumerate(zip(answers, key.answers)):
        chosen = int(raw) if raw is not None else NO_ANSWER
        points = key.points_for(index)
        is_correct = chosen != NO_ANSWER and chosen == expected

        if is_correct:
            correct_count += 1
            earned += points

        details.append(
            QuestionDetail(
                index=index,
                question_number=question_number(key.category, index),
                chosen=chosen,
                correct=expected,
                is_correct=is_correct,
                points=points,
            )
        )

    total = len(key.answers)
    if spec.scoring_rule is ScoringRule.WEIGHTED:
        score = earned
    else:
        score = percent(correct_count, total) if total else 0

    return GradedResult(
        category=key.category,
        score=score,
        max_score=key.max_score(),
        correct_count=correct_count,
        question_count=total,
        details=tuple(details),
    )
