# PATH: apps/domains/assessments/filters.py
import django_filters

from apps.domains.assessments.models import AnswerKey, SubmissionAttempt
from apps.domains.assessments.models.choices import CategoryChoices


class SubmissionAttemptFilter(django_filters.FilterSet):
    category = django_filters.ChoiceFilter(choices=CategoryChoices.choices)
    target_id = django_filters.CharFilter(field_name="target_id")
    date_from = django_filters.DateFilter(field_name="logical_date", lookup_expr="gte")
    date_to = django_filters.DateFilter(field_name="logical_date", lookup_expr="lte")

    class Meta:
        model = SubmissionAttempt
        fields = ["category", "target_id", "date_from", "date_to"]


class AnswerKeyFilter(django_filters.FilterSet):
    category = django_filters.ChoiceFilter(choices=CategoryChoices.choices)
    target_id = django_filters.CharFilter(field_name="target_id")

    class Meta:
        model = AnswerKey
        fields = ["category", "target_id"]
