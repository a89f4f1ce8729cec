"""
Pytest configuration and fixtures for Better Heart tests.
"""

from concurrent.futures import Executor, Future

import pytest

from betterheart.core.types import AnswerSet, Gender, Identity, Results
from betterheart.persistence.record import AssessmentRecord
from betterheart.scoring.engine import RiskEngine


class RecordingStore:
    """Store double that keeps every saved record in memory."""

    def __init__(self) -> None:
        self.records: list[AssessmentRecord] = []

    def save_assessment(self, record: AssessmentRecord) -> None:
        self.records.append(record)


class FailingStore:
    """Store double whose saves always fail."""

    def save_assessment(self, record: AssessmentRecord) -> None:
        raise ConnectionError("store unavailable")


class CountingEngine(RiskEngine):
    """Engine that counts scoring passes."""

    def __init__(self) -> None:
        self.calls = 0

    def calculate(self, answers: AnswerSet) -> Results:
        self.calls += 1
        return super().calculate(answers)


class ImmediateExecutor(Executor):
    """Executor that runs each task on the calling thread."""

    def submit(self, fn, /, *args, **kwargs) -> Future:
        future: Future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as e:
            future.set_exception(e)
        return future


@pytest.fixture
def identity() -> Identity:
    """Signed-in test user."""
    return Identity(user_id="user-1", full_name="Jordan Lee", email="jordan@example.com")


@pytest.fixture
def recording_store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def failing_store() -> FailingStore:
    return FailingStore()


@pytest.fixture
def counting_engine() -> CountingEngine:
    return CountingEngine()


@pytest.fixture
def immediate_executor() -> ImmediateExecutor:
    return ImmediateExecutor()


@pytest.fixture
def scenario_a() -> AnswerSet:
    """Older obese male with three conditions (BMI 30.9)."""
    return AnswerSet(
        name="Scenario A",
        age=70,
        height=180,
        weight=100,
        gender=Gender.MALE,
        family_history=True,
        diabetes=True,
        hypertension=True,
        dyslipidemia=False,
    )


@pytest.fixture
def scenario_b() -> AnswerSet:
    """Young healthy female, no flags (BMI 22.5)."""
    return AnswerSet(
        name="Scenario B",
        age=30,
        height=170,
        weight=65,
        gender=Gender.FEMALE,
    )


@pytest.fixture
def scenario_a_form() -> dict:
    """Scenario A as the host submits it (text fields, host names)."""
    return {
        "name": "Scenario A",
        "age": "70",
        "gender": "Male",
        "height": "180",
        "weight": "100",
        "familyHistory": True,
        "familyHistoryDetails": "Father, heart attack at 60",
        "diabetes": True,
        "hypertension": True,
        "dyslipidemia": False,
    }
