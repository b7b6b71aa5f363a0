# PATH: apps/domains/assessments/admin.py

from django.contrib import admin

from apps.domains.assessments.models import (
    AnswerKey,
    HomeworkAssignmentDay,
    SubmissionAttempt,
)


@admin.register(AnswerKey)
class AnswerKeyAdmin(admin.ModelAdmin):
    list_display = ("id", "category", "target_id", "title", "updated_at")
    list_filter = ("category",)
    search_fields = ("target_id", "title")


@admin.register(SubmissionAttempt)
class SubmissionAttemptAdmin(admin.ModelAdmin):
    list_display = ("id", "student_id", "category", "target_id", "logical_date", "score")
    list_filter = ("category", "logical_date")
    search_fields = ("student_id", "target_id")
    readonly_fields = [f.name for f in SubmissionAttempt._meta.fields]


@admin.register(HomeworkAssignmentDay)
class HomeworkAssignmentDayAdmin(admin.ModelAdmin):
    list_display = ("id", "student_id", "category", "homework_date")
    list_filter = ("category",)
