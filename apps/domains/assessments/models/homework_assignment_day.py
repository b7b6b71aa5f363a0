# PATH: apps/domains/assessments/models/homework_assignment_day.py
from __future__ import annotations

from django.db import models

from apps.api.common.models import BaseModel
from .choices import CategoryChoices


class HomeworkAssignmentDay(BaseModel):
    """
    학생별 숙제 배정일 (이행률 분모)

    배정되지 않은 날은 놓친 숙제로 세지 않는다.
    """

    student_id = models.PositiveIntegerField(db_index=True)
    category = models.CharField(max_length=20, choices=CategoryChoices.choices)
    homework_date = models.DateField()

    class Meta:
        db_table = "assessments_homework_assignment_day"
        ordering = ["-homework_date", "category"]
        constraints = [
            models.UniqueConstraint(
                fields=["student_id", "category", "homework_date"],
                name="uniq_assessment_assignment_student_category_date",
            )
        ]

    def __str__(self) -> str:
        return f"HomeworkAssignmentDay(student={self.student_id}, {self.category}, {self.homework_date})"
