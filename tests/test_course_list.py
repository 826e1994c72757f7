import unittest

from spicalc.core.errors import MinimumCourseViolation
from spicalc.state.course_list import CourseList


class CourseListTests(unittest.TestCase):
    def test_starts_with_one_pristine_entry(self):
        course_list = CourseList()
        self.assertEqual(len(course_list), 1)
        self.assertTrue(course_list.is_pristine)

    def test_add_appends_empty_entry(self):
        course_list = CourseList()
        first = course_list.entries()[0]
        added = course_list.add()
        self.assertEqual([e.id for e in course_list], [first.id, added.id])
        self.assertEqual((added.grade, added.credit), ("", ""))
        self.assertFalse(course_list.is_pristine)

    def test_update_only_touches_target_field(self):
        course_list = CourseList()
        first = course_list.entries()[0]
        second = course_list.add()
        self.assertTrue(course_list.update(second.id, "grade", "A"))
        self.assertTrue(course_list.update(second.id, "credit", 3))
        self.assertEqual(course_list.get(second.id).grade, "A")
        self.assertEqual(course_list.get(second.id).credit, "3")
        self.assertEqual(course_list.get(first.id), first)

    def test_update_unknown_id_is_ignored(self):
        course_list = CourseList()
        revision = course_list.revision
        self.assertFalse(course_list.update("missing", "grade", "A"))
        self.assertEqual(course_list.revision, revision)

    def test_update_rejects_unknown_field(self):
        course_list = CourseList()
        with self.assertRaises(ValueError):
            course_list.update(course_list.entries()[0].id, "name", "Maths")

    def test_remove_keeps_order(self):
        course_list = CourseList()
        a = course_list.entries()[0]
        b = course_list.add()
        c = course_list.add()
        course_list.remove(b.id)
        self.assertEqual([e.id for e in course_list], [a.id, c.id])

    def test_cannot_remove_last_entry(self):
        course_list = CourseList()
        only = course_list.entries()[0]
        revision = course_list.revision
        with self.assertRaises(MinimumCourseViolation):
            course_list.remove(only.id)
        self.assertEqual(len(course_list), 1)
        self.assertEqual(course_list.revision, revision)

    def test_every_mutation_bumps_revision(self):
        course_list = CourseList()
        start = course_list.revision
        entry = course_list.add()
        course_list.update(entry.id, "credit", "4")
        course_list.remove(entry.id)
        self.assertEqual(course_list.revision, start + 3)

    def test_ids_are_unique(self):
        course_list = CourseList()
        for _ in range(20):
            course_list.add()
        ids = [e.id for e in course_list]
        self.assertEqual(len(ids), len(set(ids)))

    def test_whitespace_entry_is_pristine(self):
        course_list = CourseList()
        course_list.update(course_list.entries()[0].id, "credit", "  ")
        self.assertTrue(course_list.is_pristine)

    def test_clear_returns_to_pristine(self):
        course_list = CourseList()
        entry = course_list.add()
        course_list.update(entry.id, "grade", "B")
        course_list.clear()
        self.assertTrue(course_list.is_pristine)


if __name__ == "__main__":
    unittest.main()
