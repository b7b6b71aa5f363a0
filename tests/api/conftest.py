from __future__ import annotations

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient


@pytest.fixture
def student(db):
    return get_user_model().objects.create_user(username="student", password="pw-12345")


@pytest.fixture
def other_student(db):
    return get_user_model().objects.create_user(username="other", password="pw-12345")


@pytest.fixture
def staff(db):
    return get_user_model().objects.create_user(username="staff", password="pw-12345", is_staff=True)


@pytest.fixture
def api() -> APIClient:
    return APIClient()


@pytest.fixture
def student_api(api, student) -> APIClient:
    api.force_authenticate(user=student)
    return api


@pytest.fixture
def staff_api(staff) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=staff)
    return client
