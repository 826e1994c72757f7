from typing import Dict, Iterable, Iterator, Optional, Tuple


DEFAULT_GRADE_POINTS: Tuple[Tuple[str, int], ...] = (
    ("A+", 10),
    ("A", 10),
    ("A-", 9),
    ("B", 8),
    ("B-", 7),
    ("C", 6),
    ("C-", 5),
    ("F", 0),
)


class GradeTable:
    """
    Ordered, read-only mapping of grade label -> grade point.
    Iteration yields (label, points) pairs in display order.
    """

    def __init__(self, pairs: Iterable[Tuple[str, int]], *, scale_max: float = 10) -> None:
        points: Dict[str, int] = {}
        for label, value in pairs:
            label = label.strip()
            if not label:
                raise ValueError("Grade labels must not be empty")
            if label in points:
                raise ValueError(f"Duplicate grade label: {label}")
            if not 0 <= value <= scale_max:
                raise ValueError(f"Grade point for {label} must be between 0 and {scale_max}, got {value}")
            points[label] = value
        if not points:
            raise ValueError("Grade table must contain at least one grade")
        self._points = points
        self.scale_max = scale_max

    def points(self, label: str) -> Optional[int]:
        return self._points.get(label)

    def labels(self) -> Tuple[str, ...]:
        return tuple(self._points)

    def __contains__(self, label: object) -> bool:
        return label in self._points

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        return iter(self._points.items())

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return f"GradeTable({list(self)!r})"


def default_grade_table(scale_max: float = 10) -> GradeTable:
    return GradeTable(DEFAULT_GRADE_POINTS, scale_max=scale_max)


def load_grade_table(raw: str, *, scale_max: float = 10) -> GradeTable:
    """
    raw: "A+:10,A:10,A-:9,..." in display order.
    An empty string yields the default table.
    """
    if not raw.strip():
        return default_grade_table(scale_max)

    pairs = []
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        label, sep, value = chunk.rpartition(":")
        if not sep:
            raise ValueError(f"Invalid grade entry '{chunk}', expected LABEL:POINTS")
        try:
            pairs.append((label, int(value)))
        except ValueError as exc:
            raise ValueError(f"Invalid grade point in '{chunk}'") from exc

    return GradeTable(pairs, scale_max=scale_max)
