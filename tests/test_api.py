import unittest

from fastapi.testclient import TestClient

from spicalc.app import app


class APITests(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)

    def test_health(self):
        self.assertEqual(self.client.get("/health").json(), {"status": "ok"})

    def test_grades_in_display_order(self):
        grades = self.client.get("/grades").json()
        self.assertEqual(grades[0], {"label": "A+", "points": 10})
        self.assertEqual([g["label"] for g in grades][-1], "F")

    def test_calculate_spi_and_cpi(self):
        response = self.client.post(
            "/calculate",
            json={
                "courses": [{"grade": "A", "credit": "3"}, {"grade": "B", "credit": 4}],
                "prior_cpi": "8.00",
                "prior_semesters": "2",
            },
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {"spi": "8.86", "cpi": "8.29", "total_credits": 7.0, "error": None},
        )

    def test_prior_history_error_keeps_spi(self):
        response = self.client.post(
            "/calculate",
            json={"courses": [{"grade": "A", "credit": "3"}], "prior_semesters": "2.5", "prior_cpi": "9"},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["spi"], "10.00")
        self.assertIsNone(body["cpi"])
        self.assertEqual(body["error"], "Number of previous semesters must be a non-negative whole number.")

    def test_huge_semester_count_is_reported_not_raised(self):
        response = self.client.post(
            "/calculate",
            json={"courses": [{"grade": "A", "credit": "3"}], "prior_cpi": "8", "prior_semesters": "1" + "0" * 400},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["spi"], "10.00")
        self.assertEqual(response.json()["error"], "Could not calculate the new CPI. Please check your inputs.")

    def test_course_error_is_422(self):
        response = self.client.post("/calculate", json={"courses": [{"grade": "A", "credit": "0"}]})
        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["detail"], "Please enter a valid positive credit for all courses.")

    def test_empty_course_list(self):
        response = self.client.post("/calculate", json={"courses": []})
        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["detail"], "Please add at least one course.")


if __name__ == "__main__":
    unittest.main()
