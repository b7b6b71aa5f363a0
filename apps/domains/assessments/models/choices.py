# PATH: apps/domains/assessments/models/choices.py

from django.db import models

from academy.domain.assessment.categories import CATEGORY_LABELS, AssessmentCategory


class CategoryChoices(models.TextChoices):
    """AssessmentCategory와 1:1 동기화 (DB 저장값 = enum value)."""
    EASY = AssessmentCategory.EASY.value, CATEGORY_LABELS[AssessmentCategory.EASY]
    LISTENING = AssessmentCategory.LISTENING.value, CATEGORY_LABELS[AssessmentCategory.LISTENING]
    LISTENING_FULL = (
        AssessmentCategory.LISTENING_FULL.value,
        CATEGORY_LABELS[AssessmentCategory.LISTENING_FULL],
    )
    MOCK_EXAM = AssessmentCategory.MOCK_EXAM.value, CATEGORY_LABELS[AssessmentCategory.MOCK_EXAM]
    VOCAB = AssessmentCategory.VOCAB.value, CATEGORY_LABELS[AssessmentCategory.VOCAB]
