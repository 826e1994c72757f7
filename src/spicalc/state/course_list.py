from dataclasses import dataclass, field, replace
import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple
import uuid

from spicalc.core.errors import MinimumCourseViolation
from spicalc.core.spi import is_blank


logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("grade", "credit")


def _new_id() -> str:
    return uuid.uuid4().hex


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class CourseEntry:
    id: str = field(default_factory=_new_id)
    grade: str = ""
    credit: str = ""

    @property
    def is_empty(self) -> bool:
        return is_blank(self.grade) and is_blank(self.credit)


class CourseList:
    """
    Entries live in a dict keyed by id; `_order` keeps display order.
    The list never drops below one entry.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, CourseEntry] = {}
        self._order: List[str] = []
        self.revision = 0
        self._append(CourseEntry())

    def _append(self, entry: CourseEntry) -> None:
        self._entries[entry.id] = entry
        self._order.append(entry.id)

    def _touch(self) -> None:
        self.revision += 1

    def add(self) -> CourseEntry:
        entry = CourseEntry()
        self._append(entry)
        self._touch()
        logger.debug("Added course %s (now %d)", entry.id, len(self))
        return entry

    def update(self, entry_id: str, field_name: str, value: Any) -> bool:
        if field_name not in EDITABLE_FIELDS:
            raise ValueError(f"Unsupported course field: {field_name}")
        entry = self._entries.get(entry_id)
        if entry is None:
            return False
        self._entries[entry_id] = replace(entry, **{field_name: _as_text(value)})
        self._touch()
        return True

    def remove(self, entry_id: str) -> None:
        if len(self._order) <= 1:
            raise MinimumCourseViolation()
        if entry_id not in self._entries:
            return
        del self._entries[entry_id]
        self._order.remove(entry_id)
        self._touch()
        logger.debug("Removed course %s (now %d)", entry_id, len(self))

    def clear(self) -> None:
        self._entries.clear()
        self._order.clear()
        self._append(CourseEntry())
        self._touch()

    def get(self, entry_id: str) -> Optional[CourseEntry]:
        return self._entries.get(entry_id)

    def entries(self) -> Tuple[CourseEntry, ...]:
        return tuple(self._entries[entry_id] for entry_id in self._order)

    @property
    def is_pristine(self) -> bool:
        return len(self._order) == 1 and self._entries[self._order[0]].is_empty

    def __iter__(self) -> Iterator[CourseEntry]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._order)
