import unittest

from classgrades.core.averages import calc_points_percentage, calc_student_average
from classgrades.core.grade_scale import GradeScale
from classgrades.core.weighting import graded_pairs
from classgrades.models.entities import Assignment, GradeBand, GradeEntry


QUIZ = Assignment("quiz", 50, 20)
EXAM = Assignment("exam", 100, 80)


def _average(entries, assignments=(QUIZ, EXAM)):
    return calc_student_average("s1", graded_pairs(assignments, entries))


class StudentAverageTests(unittest.TestCase):
    def test_weighted_average(self):
        result = _average([GradeEntry("s1", "quiz", 45), GradeEntry("s1", "exam", 70)])
        self.assertAlmostEqual(result.percentage, 74.0, places=6)
        self.assertEqual(result.letter_grade, "C")
        self.assertEqual(result.gpa, 2.0)
        self.assertEqual(result.earned_points, 115)
        self.assertEqual(result.total_points, 150)
        self.assertAlmostEqual(result.total_weight, 1.0)
        self.assertEqual(result.graded_count, 2)

    def test_ungraded_work_does_not_count_as_zero(self):
        result = _average([GradeEntry("s1", "quiz", 45)])
        self.assertAlmostEqual(result.percentage, 90.0, places=6)
        self.assertEqual(result.letter_grade, "A")
        self.assertAlmostEqual(result.total_weight, 0.2)
        self.assertEqual(result.total_points, 50)

    def test_no_grades_is_zero(self):
        result = _average([])
        self.assertEqual(result.percentage, 0.0)
        self.assertEqual(result.total_weight, 0.0)
        self.assertEqual(result.graded_count, 0)
        self.assertEqual(result.letter_grade, "F")
        self.assertEqual(calc_points_percentage(result), 0.0)

    def test_full_marks_are_exactly_100(self):
        for total, weight in ((25, 20), (3, 7), (100, 33.3), (7, 0.1)):
            assignment = Assignment("a", total, weight)
            result = calc_student_average("s1", [(assignment, GradeEntry("s1", "a", total))])
            self.assertEqual(result.percentage, 100.0)

    def test_mixed_full_marks_are_exactly_100(self):
        result = _average([GradeEntry("s1", "quiz", 50), GradeEntry("s1", "exam", 100)])
        self.assertEqual(result.percentage, 100.0)

    def test_weights_need_not_sum_to_100(self):
        a = Assignment("a", 10, 30)
        b = Assignment("b", 10, 30)
        result = calc_student_average(
            "s1", [(a, GradeEntry("s1", "a", 8)), (b, GradeEntry("s1", "b", 6))]
        )
        self.assertAlmostEqual(result.percentage, 70.0, places=6)

    def test_idempotent(self):
        entries = [GradeEntry("s1", "quiz", 33), GradeEntry("s1", "exam", 71.5)]
        self.assertEqual(_average(entries), _average(entries))

    def test_points_view(self):
        result = _average([GradeEntry("s1", "quiz", 45), GradeEntry("s1", "exam", 70)])
        self.assertAlmostEqual(calc_points_percentage(result), 76.666666667, places=6)

    def test_custom_scale(self):
        scale = GradeScale([GradeBand(0, 74, "NP", 0.0), GradeBand(75, 100, "P", 1.0)])
        result = calc_student_average(
            "s1", [(QUIZ, GradeEntry("s1", "quiz", 45))], scale
        )
        self.assertEqual(result.letter_grade, "P")
        self.assertEqual(result.gpa, 1.0)


if __name__ == "__main__":
    unittest.main()
