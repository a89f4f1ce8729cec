"""
Assessment session for Better Heart.

Owns the answer set, the current step and the results of the scoring
pass, and enforces the step gates:

    WELCOME -> PERSONAL_INFO -> BODY_METRICS -> MEDICAL_HISTORY -> RESULTS -> RESOURCES

Only PERSONAL_INFO and BODY_METRICS gate forward navigation. Leaving
MEDICAL_HISTORY runs the scoring engine exactly once and, when an identity
is present, submits a background save of a frozen record snapshot.
"""

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor, wait
from typing import Any, Callable

from betterheart.core.config import MessagesConfig, Settings, get_settings
from betterheart.core.constants import PROGRESS_STEPS, TOTAL_STEPS
from betterheart.core.exceptions import (
    InvalidMeasurementError,
    NavigationError,
    ValidationError,
)
from betterheart.core.types import AnswerSet, Identity, Results, Step
from betterheart.persistence.record import AssessmentRecord
from betterheart.persistence.store import AssessmentStore, IdentityProvider
from betterheart.scoring.bmi import parse_leading_number
from betterheart.scoring.engine import RiskEngine
from betterheart.session.events import Notice, NoticeLevel, SessionEvent


logger = logging.getLogger(__name__)

Listener = Callable[[SessionEvent, "AssessmentSession"], None]
Notifier = Callable[[Notice], None]


class AssessmentSession:
    """
    State machine for one assessment attempt.

    The host calls set_answer/advance/retreat/reset from a single thread
    and re-renders on the events delivered to subscribed listeners.
    """

    def __init__(
        self,
        identity_provider: IdentityProvider | None = None,
        store: AssessmentStore | None = None,
        engine: RiskEngine | None = None,
        notifier: Notifier | None = None,
        messages: MessagesConfig | None = None,
        executor: Executor | None = None,
        settings: Settings | None = None,
    ) -> None:
        """
        Initialize a session and look up the current identity once.

        Args:
            identity_provider: Source of the signed-in identity
            store: Persistence collaborator for completed assessments
            engine: Scoring engine (created if not provided)
            notifier: Receives user-facing notices
            messages: Notice texts (built-in defaults if not provided)
            executor: Runs background saves (a thread pool is created if needed)
            settings: Application settings
        """
        self.settings = settings or get_settings()
        self.store = store
        self.engine = engine or RiskEngine()
        self.notifier = notifier
        self.messages = messages or MessagesConfig()

        self._executor = executor
        self._owns_executor = executor is None
        self._pending: list[Future] = []
        self._listeners: list[Listener] = []

        self.identity = self._lookup_identity(identity_provider)
        self._answers = self._fresh_answers()
        self._results: Results | None = None
        self._current_step = Step.WELCOME

    # =========================================================================
    # Read models
    # =========================================================================

    @property
    def current_step(self) -> Step:
        return self._current_step

    @property
    def answers(self) -> AnswerSet:
        return self._answers

    @property
    def results(self) -> Results | None:
        return self._results

    @property
    def progress(self) -> tuple[int, int] | None:
        """(current, total) for the progress bar, None outside steps 1..4."""
        if Step.PERSONAL_INFO <= self._current_step <= Step.RESULTS:
            return int(self._current_step), PROGRESS_STEPS
        return None

    # =========================================================================
    # Operations
    # =========================================================================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener for session mutations.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_answer(self, field: str, value: Any) -> None:
        """
        Set one answer field. No validation at write time.

        Args:
            field: Attribute name or host name (e.g. "familyHistory")
            value: New value, stored as given
        """
        setattr(self._answers, AnswerSet.resolve_field(field), value)
        self._emit(SessionEvent.ANSWER_CHANGED)

    def missing_fields(self, step: Step | int | None = None) -> tuple[str, ...]:
        """
        Fields that keep a step from being left.

        Args:
            step: Step about to be left (default: current step)

        Returns:
            Names of the failing fields, empty when the step may be left
        """
        step = self._current_step if step is None else Step(step)
        answers = self._answers
        missing: list[str] = []

        if step == Step.PERSONAL_INFO:
            if not str(answers.name or "").strip():
                missing.append("name")
            if not answers.age:
                missing.append("age")
            if not answers.gender:
                missing.append("gender")
        elif step == Step.BODY_METRICS:
            for name in ("height", "weight"):
                value = getattr(answers, name)
                number = parse_leading_number(value)
                if not value or number is None or number <= 0:
                    missing.append(name)

        return tuple(missing)

    def can_advance(self, step: Step | int | None = None) -> bool:
        """Whether the given step (default: current) may be left."""
        return not self.missing_fields(step)

    def advance(self) -> Step:
        """
        Move one step forward.

        Returns:
            The new current step

        Raises:
            ValidationError: If the current step's gate refuses; state unchanged
            NavigationError: If already on the last step
        """
        step = self._current_step
        if step + 1 >= TOTAL_STEPS:
            raise NavigationError("Already on the last step", step=int(step))

        missing = self.missing_fields(step)
        if missing:
            self._notify(NoticeLevel.ERROR, self.messages.validation_failed)
            logger.info(f"Cannot leave {step.title}: missing {', '.join(missing)}")
            raise ValidationError(
                self.messages.validation_failed,
                step=int(step),
                missing=missing,
            )

        if step == Step.MEDICAL_HISTORY:
            self._complete_assessment()

        self._current_step = Step(step + 1)
        logger.debug(f"Step {step.title} -> {self._current_step.title}")
        self._emit(SessionEvent.STEP_CHANGED)
        return self._current_step

    def retreat(self) -> Step:
        """
        Move one step back, never below WELCOME. No validation.

        Raises:
            NavigationError: On RESOURCES, which only offers reset
        """
        if self._current_step == Step.RESOURCES:
            raise NavigationError(
                "Cannot go back from resources; start a new assessment instead",
                step=int(self._current_step),
            )

        previous = Step(max(self._current_step - 1, Step.WELCOME))
        if previous != self._current_step:
            self._current_step = previous
            self._emit(SessionEvent.STEP_CHANGED)
        return self._current_step

    def reset(self) -> None:
        """Discard answers and results and return to WELCOME."""
        self._answers = self._fresh_answers()
        self._results = None
        self._current_step = Step.WELCOME
        logger.debug("Session reset")
        self._emit(SessionEvent.RESET)

    def wait_for_saves(self, timeout: float | None = None) -> bool:
        """
        Block until in-flight saves finish.

        Returns:
            True if nothing is left pending
        """
        if self._pending:
            wait(list(self._pending), timeout=timeout)
        self._pending = [f for f in self._pending if not f.done()]
        return not self._pending

    def close(self) -> None:
        """Finish pending saves and release the owned thread pool."""
        self.wait_for_saves()
        if self._owns_executor and self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self) -> "AssessmentSession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # =========================================================================
    # Internals
    # =========================================================================

    def _lookup_identity(
        self,
        provider: IdentityProvider | None,
    ) -> Identity | None:
        """Query the identity provider; any failure means no identity."""
        if provider is None:
            return None
        try:
            return provider.get_current_identity()
        except Exception as e:
            logger.info(f"No identity available: {e}")
            return None

    def _fresh_answers(self) -> AnswerSet:
        name = self.identity.full_name if self.identity else ""
        return AnswerSet(name=name or "")

    def _complete_assessment(self) -> None:
        """Run the scoring pass and hand a snapshot to the store."""
        try:
            results = self.engine.calculate(self._answers)
        except InvalidMeasurementError as e:
            # Body metrics were edited after their gate was passed
            self._notify(NoticeLevel.ERROR, self.messages.validation_failed)
            raise ValidationError(
                str(e),
                step=int(Step.BODY_METRICS),
                missing=(e.field,) if e.field else (),
            ) from e

        self._results = results
        logger.info(
            f"Assessment complete: BMI {results.bmi} ({results.bmi_category.value}), "
            f"cardiovascular={results.risk_level.value}, "
            f"sleep_apnea={results.sleep_apnea_risk.value}, "
            f"heart_attack={results.heart_attack_risk.value}"
        )
        self._emit(SessionEvent.RESULTS_READY)

        if self.identity is not None:
            self._submit_save(results)

    def _submit_save(self, results: Results) -> None:
        """Fire-and-forget save; the outcome only produces a notice."""
        if self.store is None or not self.settings.save_assessments:
            logger.debug("Assessment saving disabled, skipping")
            return

        record = AssessmentRecord.build(self._answers, results, self.identity)

        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.settings.save_workers,
                thread_name_prefix="betterheart-save",
            )

        self._pending = [f for f in self._pending if not f.done()]
        self._pending.append(self._executor.submit(self._save, self.store, record))

    def _save(self, store: AssessmentStore, record: AssessmentRecord) -> bool:
        """Runs on a worker; reports the outcome before the future completes."""
        try:
            store.save_assessment(record)
        except Exception as e:
            logger.error(f"Failed to save assessment: {e}")
            self._notify(NoticeLevel.ERROR, self.messages.save_failed)
            return False
        self._notify(NoticeLevel.SUCCESS, self.messages.save_succeeded)
        return True

    def _notify(self, level: NoticeLevel, message: str) -> None:
        if self.notifier is None:
            return
        try:
            self.notifier(Notice(level=level, message=message))
        except Exception:
            logger.exception("Notifier failed")

    def _emit(self, event: SessionEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, self)
            except Exception:
                logger.exception(f"Listener failed on {event.value}")
