from dataclasses import dataclass, field
import logging
from typing import Any, Optional, Tuple

from spicalc.core.errors import CourseInputError, MinimumCourseViolation
from spicalc.core.grades import GradeTable, default_grade_table
from spicalc.core.spi import CalculationResult, PriorHistory, calculate
from spicalc.state.course_list import CourseList


logger = logging.getLogger(__name__)


@dataclass
class CalculatorState:
    """
    One session's calculator: course rows, prior history, and the last
    output. Output is stored with the revision it was produced for and is
    only visible while that revision is current, so any edit hides it.
    """

    grade_table: GradeTable = field(default_factory=default_grade_table)
    enable_cpi: bool = True
    max_cpi: float = 10
    courses: CourseList = field(default_factory=CourseList)
    prior: PriorHistory = field(default_factory=PriorHistory)

    _prior_revision: int = field(default=0, init=False, repr=False)
    _result: Optional[Tuple[int, CalculationResult]] = field(default=None, init=False, repr=False)
    _error: Optional[Tuple[int, str]] = field(default=None, init=False, repr=False)

    @property
    def revision(self) -> int:
        return self.courses.revision + self._prior_revision

    @property
    def result(self) -> Optional[CalculationResult]:
        if self._result is None or self.courses.is_pristine:
            return None
        stamp, result = self._result
        return result if stamp == self.revision else None

    @property
    def error(self) -> Optional[str]:
        if self._error is None:
            return None
        stamp, message = self._error
        return message if stamp == self.revision else None

    def add_course(self) -> str:
        return self.courses.add().id

    def update_course(self, entry_id: str, field_name: str, value: Any) -> None:
        self.courses.update(entry_id, field_name, value)

    def remove_course(self, entry_id: str) -> None:
        try:
            self.courses.remove(entry_id)
        except MinimumCourseViolation as exc:
            self._error = (self.revision, str(exc))

    def set_prior_cpi(self, value: Optional[str]) -> None:
        self.prior = PriorHistory(value or "", self.prior.prior_semesters)
        self._prior_revision += 1

    def set_prior_semesters(self, value: Optional[str]) -> None:
        self.prior = PriorHistory(self.prior.prior_cpi, value or "")
        self._prior_revision += 1

    def reset(self) -> None:
        self.courses.clear()
        self.prior = PriorHistory()
        self._prior_revision += 1

    def calculate(self) -> Optional[CalculationResult]:
        revision = self.revision
        self._error = None
        self._result = None
        try:
            result = calculate(
                self.courses.entries(),
                self.grade_table,
                self.prior if self.enable_cpi else None,
                max_cpi=self.max_cpi,
            )
        except CourseInputError as exc:
            self._error = (revision, str(exc))
            return None

        self._result = (revision, result)
        if result.error_text:
            self._error = (revision, result.error_text)
        logger.info("Calculated SPI %s over %g credits (CPI %s)", result.spi, result.total_credits, result.cpi or "-")
        return result
