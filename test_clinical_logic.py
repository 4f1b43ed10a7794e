import unittest

from clinical_logic import DoseEvaluator, round_half_up
from models import Antibiotic, DoseStatus


class TestDoseEvaluator(unittest.TestCase):

    def test_round_half_up(self):
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(round_half_up(9.6), 10)
        self.assertEqual(round_half_up(9.4), 9)

    def test_intermittent_vancomycin_adequate(self):
        evaluator = DoseEvaluator(Antibiotic.VANCOMYCIN_INTERMITTENT)
        result = evaluator.evaluate(cmax=30, cmin=15, auc=500, dose=1000, interval=12, vd=0.7, ke=0.1, weight=70)
        self.assertEqual(result.status, DoseStatus.ADEQUATE)
        self.assertEqual(result.suggestion, "")

    def test_intermittent_vancomycin_low_auc(self):
        evaluator = DoseEvaluator(Antibiotic.VANCOMYCIN_INTERMITTENT)
        result = evaluator.evaluate(30, 15, 350, 1000, 12, 0.7, 0.1, 70)
        self.assertEqual(result.status, DoseStatus.INSUFFICIENT)
        self.assertEqual(result.suggestion, "Aumentar dose para 1143 mg ou reduzir intervalo para 10 h")

    def test_intermittent_vancomycin_low_trough(self):
        evaluator = DoseEvaluator(Antibiotic.VANCOMYCIN_INTERMITTENT)
        result = evaluator.evaluate(30, 8, 500, 1000, 12, 0.7, 0.1, 70)
        self.assertEqual(result.status, DoseStatus.INSUFFICIENT)

    def test_intermittent_vancomycin_excessive(self):
        evaluator = DoseEvaluator(Antibiotic.VANCOMYCIN_INTERMITTENT)
        high_auc = evaluator.evaluate(30, 15, 650, 1000, 12, 0.7, 0.1, 70)
        self.assertEqual(high_auc.status, DoseStatus.EXCESSIVE)
        self.assertEqual(high_auc.suggestion, "Reduzir dose para 923 mg ou aumentar intervalo para 14 h")

        high_trough = evaluator.evaluate(30, 25, 500, 1000, 12, 0.7, 0.1, 70)
        self.assertEqual(high_trough.status, DoseStatus.EXCESSIVE)

    def test_continuous_vancomycin_branches(self):
        evaluator = DoseEvaluator(Antibiotic.VANCOMYCIN_CONTINUOUS)

        low = evaluator.evaluate(12.5, 12.5, 300, 2000, 24, 0.7, 0.1, 70)
        self.assertEqual(low.status, DoseStatus.INSUFFICIENT)
        self.assertEqual(low.suggestion, "Aumentar dose diária para 2667 mg/dia")

        high = evaluator.evaluate(29, 29, 700, 2000, 24, 0.7, 0.1, 70)
        self.assertEqual(high.status, DoseStatus.EXCESSIVE)
        self.assertEqual(high.suggestion, "Reduzir dose diária para 1714 mg/dia")

        adequate = evaluator.evaluate(500 / 24, 500 / 24, 500, 2000, 24, 0.7, 0.1, 70)
        self.assertEqual(adequate.status, DoseStatus.ADEQUATE)

    def test_continuous_vancomycin_outside_steady_band(self):
        evaluator = DoseEvaluator(Antibiotic.VANCOMYCIN_CONTINUOUS)
        result = evaluator.evaluate(18, 18, 450, 2000, 24, 0.7, 0.1, 70)
        self.assertEqual(result.status, DoseStatus.OUT_OF_STEADY_RANGE)
        self.assertEqual(result.status.value, "Fora da faixa estável")
        # 20 µg/mL * 0.7 L/kg * 0.1 hr⁻¹ * 70 kg * 24 hr
        self.assertEqual(result.suggestion, "Ajustar dose para 2352 mg/dia para atingir 20–25 µg/mL")

    def test_auc_checked_before_steady_band(self):
        evaluator = DoseEvaluator(Antibiotic.VANCOMYCIN_CONTINUOUS)
        result = evaluator.evaluate(30, 30, 350, 2000, 24, 0.7, 0.1, 70)
        self.assertEqual(result.status, DoseStatus.INSUFFICIENT)

    def test_gentamicin_adequate(self):
        evaluator = DoseEvaluator(Antibiotic.GENTAMICIN)
        result = evaluator.evaluate(7, 1, 0, 300, 8, 0.25, 0.2, 70)
        self.assertEqual(result.status, DoseStatus.ADEQUATE)

    def test_gentamicin_low_peak(self):
        evaluator = DoseEvaluator(Antibiotic.GENTAMICIN)
        result = evaluator.evaluate(4, 1, 0, 300, 8, 0.25, 0.2, 70)
        self.assertEqual(result.status, DoseStatus.INSUFFICIENT)
        self.assertEqual(result.suggestion, "Aumentar dose para 750 mg ou reduzir intervalo para 6 h")

    def test_tobramycin_high_peak(self):
        evaluator = DoseEvaluator(Antibiotic.TOBRAMYCIN)
        result = evaluator.evaluate(12, 1, 0, 300, 8, 0.25, 0.2, 70)
        self.assertEqual(result.status, DoseStatus.EXCESSIVE)
        self.assertEqual(result.suggestion, "Reduzir dose para 125 mg ou aumentar intervalo para 10 h")

    def test_amikacin_high_trough(self):
        evaluator = DoseEvaluator(Antibiotic.AMIKACIN)
        result = evaluator.evaluate(25, 6, 0, 300, 8, 0.25, 0.2, 70)
        self.assertEqual(result.status, DoseStatus.EXCESSIVE)
        self.assertTrue(result.suggestion.startswith("Reduzir dose para 240 mg"))


if __name__ == '__main__':
    unittest.main()
