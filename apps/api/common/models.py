# PATH: apps/api/common/models.py
from django.db import models


class TimestampModel(models.Model):
    """
    생성 / 수정 시간 자동 기록 추상 모델

    ⚠️ 제출 시각(submitted_at)과 다르다.
    숙제 날짜 판단에는 created_at을 쓰지 않는다.
    """
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class BaseModel(TimestampModel):
    """
    assessments 모델 공통 베이스 (정답 / 제출 기록 / 숙제 배정일)
    """
    class Meta:
        abstract = True
