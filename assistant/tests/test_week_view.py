import unittest
from datetime import date, timedelta
from assistant.domain.PlanEntry import PlanEntry
from assistant.logic.week.week_view import render_week, shift_week
from assistant.logic.week.plan_list import visible_plans, plan_rows


def _plan(pid, d, item):
    return PlanEntry(pid, d, item, "2025-07-01T00:00:00.000Z")


class TestRenderWeek(unittest.TestCase):

    def setUp(self):
        self.plans = [
            _plan("a", "2025-07-22", "Dinner with Zhang"),
            _plan("b", "2025-07-22", "Gym"),
            _plan("c", "2025-07-27", "Call mum"),
            _plan("d", "2025-07-28", "Next week thing"),
            _plan("e", "待定", "Someday"),
        ]

    def test_week_runs_monday_to_sunday(self):
        view = render_week(date(2025, 7, 23), self.plans, today=date(2025, 7, 23))
        self.assertEqual(len(view.days), 7)
        self.assertEqual(view.days[0].date, "2025-07-21")
        self.assertEqual(view.days[0].weekday, "Monday")
        self.assertEqual(view.days[6].date, "2025-07-27")
        self.assertEqual(view.days[6].weekday, "Sunday")

    def test_reference_in_correct_column_and_today(self):
        view = render_week(date(2025, 7, 23), self.plans, today=date(2025, 7, 23))
        wednesday = view.days[2]
        self.assertEqual(wednesday.date, "2025-07-23")
        self.assertTrue(wednesday.is_today)
        self.assertEqual(sum(1 for c in view.days if c.is_today), 1)
        self.assertIs(view.today_cell(), wednesday)

    def test_no_today_outside_current_week(self):
        view = render_week(date(2025, 7, 30), self.plans, today=date(2025, 7, 23))
        self.assertFalse(any(c.is_today for c in view.days))

    def test_events_bucketed_by_exact_date(self):
        view = render_week(date(2025, 7, 21), self.plans, today=date(2025, 7, 21))
        self.assertEqual(view.days[1].events, ["Dinner with Zhang", "Gym"])
        self.assertEqual(view.days[6].events, ["Call mum"])
        all_events = [e for c in view.days for e in c.events]
        self.assertNotIn("Someday", all_events)
        self.assertNotIn("Next week thing", all_events)

    def test_idempotent(self):
        first = render_week(date(2025, 7, 24), self.plans, today=date(2025, 7, 24)).to_dict()
        second = render_week(date(2025, 7, 24), self.plans, today=date(2025, 7, 24)).to_dict()
        self.assertEqual(first, second)

    def test_label_uses_monday_month(self):
        # Week of Monday 2025-07-28 runs into August but is titled after July
        view = render_week(date(2025, 8, 1), [], today=date(2025, 8, 1))
        self.assertEqual(view.start, date(2025, 7, 28))
        self.assertEqual(view.label, "July 2025, week 4")

    def test_current_real_date_is_today_by_default(self):
        view = render_week(date.today(), [])
        self.assertIsNotNone(view.today_cell())
        self.assertEqual(view.today_cell().date, date.today().isoformat())

    def test_shift_week_unbounded(self):
        self.assertEqual(shift_week(date(2025, 7, 23), 1), date(2025, 7, 30))
        self.assertEqual(shift_week(date(2025, 7, 23), -1), date(2025, 7, 16))
        self.assertEqual(shift_week(date(2025, 7, 23), -520), date(2025, 7, 23) - timedelta(weeks=520))


class TestPlanList(unittest.TestCase):

    def test_visible_plans_drops_entries_before_last_monday(self):
        today = date(2025, 7, 23)  # last week's Monday is 2025-07-14
        plans = [
            _plan("old", "2025-07-13", "Too old"),
            _plan("edge", "2025-07-14", "Last Monday"),
            _plan("new", "2025-08-01", "Future"),
            _plan("tbd", "待定", "Someday"),
        ]
        ids = [p.id for p in visible_plans(plans, today)]
        self.assertEqual(ids, ["edge", "new", "tbd"])

    def test_plan_rows_countdown(self):
        today = date(2025, 7, 21)
        rows = plan_rows([_plan("a", "2025-07-22", "Dinner"), _plan("b", "待定", "Someday")], today)
        self.assertEqual(rows[0]["display_date"], "July 22, 2025")
        self.assertEqual(rows[0]["countdown"]["bucket"], "future")
        self.assertEqual(rows[0]["countdown"]["text"], "in 1 day")
        self.assertIsNone(rows[1]["countdown"])
        self.assertEqual(rows[1]["display_date"], "待定")


if __name__ == '__main__':
    unittest.main()
