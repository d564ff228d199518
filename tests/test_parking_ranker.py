from django.test import SimpleTestCase

from utils.parking_ranker import best_alternative, explain_alternative, score_parkings
from utils.records import ParkingLotRecord, round_half_up


def record(lot_id, name, distance, price, total=10, occupied=0):
    return ParkingLotRecord(id=lot_id, name=name, total_slots=total, occupied_slots=occupied,
                            distance_km=distance, dynamic_price_per_hour=price)


class ScoreParkingsTests(SimpleTestCase):

    def setUp(self):
        self.half_full = record(1, 'Forum Mall', 1, 20, occupied=5)
        self.cheap = record(2, 'Brigade Road', 2, 10)
        self.full = record(3, 'MG Road Metro', 0.5, 30, occupied=10)
        self.lots = [self.half_full, self.cheap, self.full]

    def test_sorted_by_score(self):
        ranked = score_parkings(self.lots)

        self.assertEqual([lot.id for lot in ranked], [2, 1, 3])
        self.assertEqual([lot.score for lot in ranked], [0.2, 0.25, 0.4])
        self.assertEqual([lot.available_slots for lot in ranked], [10, 5, 0])

    def test_tags(self):
        ranked = {lot.id: lot.tags for lot in score_parkings(self.lots)}

        self.assertEqual(ranked[2], ('Best Overall', 'Cheapest'))
        self.assertEqual(ranked[1], ())
        self.assertEqual(ranked[3], ('Closest',))

    def test_exactly_one_best_overall(self):
        ranked = score_parkings(self.lots)
        best = [lot for lot in ranked if 'Best Overall' in lot.tags]

        self.assertEqual(len(best), 1)
        self.assertEqual(best[0].score, min(lot.score for lot in ranked))

    def test_single_lot_takes_every_tag(self):
        ranked = score_parkings([self.cheap])
        self.assertEqual(ranked[0].tags, ('Best Overall', 'Cheapest', 'Closest'))

    def test_empty(self):
        self.assertEqual(score_parkings([]), [])

    def test_all_zero_columns_do_not_divide_by_zero(self):
        ranked = score_parkings([
            record(1, 'Free Lot', 0, 0, total=4, occupied=4),
            record(2, 'Other Free Lot', 0, 0, total=6, occupied=6),
        ])

        self.assertEqual(
            [(lot.id, lot.score, lot.tags) for lot in ranked],
            [(1, 0.0, ('Best Overall', 'Cheapest', 'Closest')), (2, 0.0, ())],
        )

    def test_equal_scores_keep_input_order(self):
        ranked = score_parkings([
            record(7, 'Second Street', 1, 20),
            record(4, 'First Street', 1, 20),
        ])

        self.assertEqual(ranked[0].score, ranked[1].score)
        self.assertEqual([lot.id for lot in ranked], [7, 4])
        self.assertEqual(ranked[0].tags, ('Best Overall', 'Cheapest', 'Closest'))
        self.assertEqual(ranked[1].tags, ())

    def test_negative_scores_round_half_away_from_zero(self):
        self.assertEqual(round_half_up(-0.0125, 3), -0.013)
        self.assertEqual(round_half_up(0.0125, 3), 0.013)

    def test_explanations_relative_to_selected(self):
        ranked = {lot.id: lot.explanation for lot in score_parkings(self.lots, selected=self.half_full)}

        self.assertIsNone(ranked[1])
        self.assertEqual(ranked[2], 'Brigade Road is ₹10 cheaper and 10 slots available.')
        self.assertEqual(ranked[3], 'MG Road Metro is 0.5km closer.')

    def test_no_explanations_without_selection(self):
        self.assertTrue(all(lot.explanation is None for lot in score_parkings(self.lots)))

    def test_accepts_plain_dicts(self):
        ranked = score_parkings([
            {'id': 1, 'name': 'A', 'distance_km': 1, 'dynamic_price_per_hour': 20, 'total_slots': 4},
            {'id': 2, 'name': 'B', 'distance_km': 3, 'dynamic_price_per_hour': 20, 'total_slots': 4},
        ])
        self.assertEqual(ranked[0].id, 1)

    def test_inputs_are_not_modified(self):
        score_parkings(self.lots, selected=self.half_full)
        self.assertIsNone(self.cheap.score)
        self.assertEqual(self.cheap.tags, ())


class ExplainAlternativeTests(SimpleTestCase):

    def test_fallback_when_nothing_is_better(self):
        lot = record(1, 'A', 1, 20)
        self.assertEqual(explain_alternative(record(2, 'B', 1, 20), lot), 'A good alternative nearby.')

    def test_distance_uses_one_decimal(self):
        selected = record(1, 'A', 3, 20)
        self.assertEqual(explain_alternative(record(2, 'B', 1, 20), selected), 'B is 2.0km closer.')


class BestAlternativeTests(SimpleTestCase):

    def setUp(self):
        self.ranked = score_parkings([
            record(1, 'Forum Mall', 1, 20, occupied=5),
            record(2, 'Brigade Road', 2, 10),
            record(3, 'MG Road Metro', 0.5, 30, occupied=10),
        ])

    def test_skips_excluded_lot(self):
        self.assertEqual(best_alternative(self.ranked, 2).id, 1)
        self.assertEqual(best_alternative(self.ranked, 1).id, 2)

    def test_skips_full_lots(self):
        ranked = [record(3, 'Full', 0.5, 30, occupied=10), record(1, 'Open', 1, 20)]
        self.assertEqual(best_alternative(ranked, 1), None)

    def test_empty(self):
        self.assertIsNone(best_alternative([], 1))
