from django.test import SimpleTestCase

from utils.duration_estimator import estimate_duration, format_duration


class EstimateDurationTests(SimpleTestCase):

    def test_no_history(self):
        estimate = estimate_duration([], [], None)

        self.assertEqual(estimate.estimated_minutes, 60)
        self.assertEqual(estimate.estimated_hours, 1.0)
        self.assertEqual(estimate.formatted_duration, '1h')
        self.assertEqual(estimate.confidence, 'none')
        self.assertEqual(estimate.message, 'No history available. Estimated 1 hour.')

    def test_history_at_this_parking(self):
        user = [{'parking_id': 1, 'duration_minutes': 60}, {'parking_id': 2, 'duration_minutes': 120}]
        parking = [{'parking_id': 1, 'duration_minutes': 90}]

        estimate = estimate_duration(user, parking, 1)

        # 60 * 0.6 + 90 * 0.3 + 90 * 0.1
        self.assertEqual(estimate.estimated_minutes, 72)
        self.assertEqual(estimate.estimated_hours, 1.2)
        self.assertEqual(estimate.confidence, 'high')
        self.assertEqual(estimate.message, 'You usually park for 1h 12m here.')

    def test_user_history_elsewhere(self):
        user = [{'parking_id': 1, 'duration_minutes': 60}, {'parking_id': 2, 'duration_minutes': 120}]
        parking = [{'parking_id': 3, 'duration_minutes': 30}]

        estimate = estimate_duration(user, parking, 3)

        self.assertEqual(estimate.estimated_minutes, 72)
        self.assertEqual(estimate.confidence, 'medium')
        self.assertEqual(estimate.message, 'You usually park for 1h 12m.')

    def test_parking_history_only(self):
        parking = [{'duration_minutes': 30}, {'duration_minutes': 45}, {'duration_minutes': 0}]

        estimate = estimate_duration([], parking, 5)

        self.assertEqual(estimate.estimated_minutes, 38)
        self.assertEqual(estimate.confidence, 'low')
        self.assertEqual(estimate.message, 'Most people park for 38m here.')

    def test_non_positive_durations_are_ignored(self):
        user = [{'parking_id': 1, 'duration_minutes': 0}, {'parking_id': 1, 'duration_minutes': -5}]
        self.assertEqual(estimate_duration(user, [], 1).confidence, 'none')


class FormatDurationTests(SimpleTestCase):

    def test_formats(self):
        self.assertEqual(format_duration(90), '1h 30m')
        self.assertEqual(format_duration(120), '2h')
        self.assertEqual(format_duration(45), '45m')
        self.assertEqual(format_duration(0), '0m')
