"""
Pytest fixtures for the IOU preview test suite.

Provides:
- The bundled English translator and default preview config
- The viewer session and a personal-details directory
- Log context cleanup between tests

Factories for domain objects live in ``tests.factories``.
"""

import pytest

from iou_config import PreviewConfig, get_localizer
from iou_kernel.domain.personal_details import PersonalDetail, Session
from iou_kernel.logging_config import LogContext, reset_logging
from tests.factories import MANAGER_ID, OWNER_ID, THIRD_ID


@pytest.fixture
def translate():
    return get_localizer("en")


@pytest.fixture
def config():
    return PreviewConfig()


@pytest.fixture
def session():
    return Session(account_id=OWNER_ID)


@pytest.fixture
def personal_details():
    return {
        MANAGER_ID: PersonalDetail(account_id=MANAGER_ID, display_name="Manager", avatar="manager.png"),
        OWNER_ID: PersonalDetail(account_id=OWNER_ID, display_name="Owner", avatar="owner.png"),
        THIRD_ID: PersonalDetail(account_id=THIRD_ID, display_name="Third", avatar="third.png"),
    }


@pytest.fixture(autouse=True)
def _clean_log_context():
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()
