from dataclasses import dataclass, field

from spicalc.config.settings import settings
from spicalc.core.grades import GradeTable, load_grade_table
from spicalc.state.calculator_state import CalculatorState


grade_table: GradeTable = load_grade_table(settings.grade_points, scale_max=settings.grade_scale_max)


def new_calculator() -> CalculatorState:
    return CalculatorState(
        grade_table=grade_table,
        enable_cpi=settings.enable_cpi,
        max_cpi=settings.grade_scale_max,
    )


@dataclass
class AppState:
    calculator: CalculatorState = field(default_factory=new_calculator)
