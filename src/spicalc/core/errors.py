class CalculatorError(ValueError):
    """Base class for every user-facing validation failure."""

    message = "Invalid input."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class MinimumCourseViolation(CalculatorError):
    message = "You must have at least one course."


# Course-row errors abort the whole calculation.
class CourseInputError(CalculatorError):
    pass


class EmptyInput(CourseInputError):
    message = "Please add at least one course."


class MissingGrade(CourseInputError):
    message = "Please select a grade for all courses."


class InvalidCredit(CourseInputError):
    message = "Please enter a valid positive credit for all courses."


class InvalidGrade(CourseInputError):
    def __init__(self, grade: str) -> None:
        self.grade = grade
        super().__init__(f"Invalid grade '{grade}' selected. Please choose from the list.")


class ZeroCredits(CourseInputError):
    message = "Total credits cannot be zero. Please enter valid credits."


# Prior-history errors are collected, never raised by the aggregator.
class PriorHistoryError(CalculatorError):
    pass


class MismatchedPriorFields(PriorHistoryError):
    message = "Please enter both previous CPI and number of previous semesters, or leave both empty."


class InvalidPriorAggregate(PriorHistoryError):
    def __init__(self, max_cpi: float) -> None:
        self.max_cpi = max_cpi
        super().__init__(f"Previous CPI must be a number between 0 and {max_cpi:g}.")


class InvalidPriorUnitCount(PriorHistoryError):
    message = "Number of previous semesters must be a non-negative whole number."


class CombinationFailed(PriorHistoryError):
    message = "Could not calculate the new CPI. Please check your inputs."
