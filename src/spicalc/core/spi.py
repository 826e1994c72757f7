from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
import math
import re
from typing import List, Optional, Protocol, Sequence, Tuple

from spicalc.core.errors import (
    CombinationFailed,
    EmptyInput,
    InvalidCredit,
    InvalidGrade,
    InvalidPriorAggregate,
    InvalidPriorUnitCount,
    MismatchedPriorFields,
    MissingGrade,
    ZeroCredits,
)
from spicalc.core.grades import GradeTable

_WHOLE_NUMBER = re.compile(r"^\d+$")


class CourseInput(Protocol):
    grade: str
    credit: str


@dataclass(frozen=True)
class PriorHistory:
    prior_cpi: str = ""
    prior_semesters: str = ""


@dataclass(frozen=True)
class CalculationResult:
    spi: str
    spi_value: float
    total_credits: float
    cpi: Optional[str] = None
    cpi_value: Optional[float] = None
    errors: Tuple[str, ...] = ()

    @property
    def error_text(self) -> Optional[str]:
        return " ".join(self.errors) if self.errors else None


def format_index(value: float) -> str:
    """Two decimals, half-up on the shortest decimal form of the float."""
    return str(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def _parse_credit(raw: str) -> float:
    try:
        credit = float(str(raw).strip())
    except ValueError as exc:
        raise InvalidCredit() from exc
    if not math.isfinite(credit) or credit <= 0:
        raise InvalidCredit()
    return credit


def calculate_spi(courses: Sequence[CourseInput], table: GradeTable) -> Tuple[float, float]:
    """
    courses: sequence of objects with raw-text `grade` and `credit`
    SPI = Σ(credit * grade_point) / Σ(credit)

    Returns the unrounded SPI and the total credits. The first invalid row
    raises and nothing is returned.
    """
    if not courses or (len(courses) == 1 and is_blank(courses[0].grade) and is_blank(courses[0].credit)):
        raise EmptyInput()

    weighted_sum = 0.0
    total_credits = 0.0

    for course in courses:
        if is_blank(course.grade):
            raise MissingGrade()
        credit = _parse_credit(course.credit)
        grade = course.grade.strip()
        point = table.points(grade)
        if point is None:
            raise InvalidGrade(grade)
        weighted_sum += point * credit
        total_credits += credit

    if total_credits == 0:
        raise ZeroCredits()

    spi = weighted_sum / total_credits
    # Credits large enough to overflow the sums.
    if not (math.isfinite(weighted_sum) and math.isfinite(total_credits) and math.isfinite(spi)):
        raise InvalidCredit()

    return spi, total_credits


def combine_cpi(spi_value: float, prior: PriorHistory, *, max_cpi: float = 10) -> Tuple[Optional[float], List[str]]:
    """
    CPI = (prior_cpi * prior_semesters + spi) / (prior_semesters + 1)

    The current semester counts as one more semester. Validation problems are
    collected and returned, not raised.
    """
    cpi_blank = is_blank(prior.prior_cpi)
    semesters_blank = is_blank(prior.prior_semesters)

    if cpi_blank and semesters_blank:
        return None, []
    if cpi_blank or semesters_blank:
        return None, [str(MismatchedPriorFields())]

    errors: List[str] = []

    prior_cpi: Optional[float]
    try:
        prior_cpi = float(prior.prior_cpi.strip())
    except ValueError:
        prior_cpi = None
    if prior_cpi is None or not math.isfinite(prior_cpi) or not 0 <= prior_cpi <= max_cpi:
        prior_cpi = None
        errors.append(str(InvalidPriorAggregate(max_cpi)))

    semesters_text = prior.prior_semesters.strip()
    semesters = float(semesters_text) if _WHOLE_NUMBER.match(semesters_text) else None
    if semesters is None:
        errors.append(str(InvalidPriorUnitCount()))

    if prior_cpi is None or semesters is None:
        return None, errors

    # Counts past the float range become inf and fail the finiteness check.
    cpi = (prior_cpi * semesters + spi_value) / (semesters + 1)
    if not math.isfinite(cpi):
        return None, [str(CombinationFailed())]
    return cpi, errors


def calculate(
    courses: Sequence[CourseInput],
    table: GradeTable,
    prior: Optional[PriorHistory] = None,
    *,
    max_cpi: float = 10,
) -> CalculationResult:
    spi_value, total_credits = calculate_spi(courses, table)

    cpi_value: Optional[float] = None
    errors: List[str] = []
    if prior is not None:
        cpi_value, errors = combine_cpi(spi_value, prior, max_cpi=max_cpi)

    return CalculationResult(
        spi=format_index(spi_value),
        spi_value=spi_value,
        total_credits=total_credits,
        cpi=format_index(cpi_value) if cpi_value is not None else None,
        cpi_value=cpi_value,
        errors=tuple(errors),
    )
