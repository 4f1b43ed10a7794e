# clinical_logic.py
import logging
import math

from config import THERAPEUTIC_RANGES
from models import Antibiotic, DoseAssessment, DoseStatus

logger = logging.getLogger(__name__)

# Interval scaling applied when suggesting a shorter / longer interval
SHORTER_INTERVAL_FACTOR = 0.8
LONGER_INTERVAL_FACTOR = 1.2


def round_half_up(value):
    """Nearest integer, halves rounded up."""
    return int(math.floor(value + 0.5))


class DoseEvaluator:
    def __init__(self, antibiotic):
        self.antibiotic = antibiotic
        self.targets = THERAPEUTIC_RANGES[antibiotic.value]

    def evaluate(self, cmax, cmin, auc, dose, interval, vd, ke, weight):
        """
        Classify the current regimen and suggest an adjustment.

        Parameters:
        - cmax, cmin: Peak / trough (mg/L); steady-state level for continuous infusion
        - auc: AUC24 (mg·hr/L)
        - dose: Current dose (mg, or mg/day for continuous infusion)
        - interval: Current interval (hr)
        - vd: Volume of distribution (L/kg)
        - ke: Elimination rate constant (hr⁻¹)
        - weight: Body weight (kg)

        Returns:
        - DoseAssessment
        """
        if self.antibiotic is Antibiotic.VANCOMYCIN_CONTINUOUS:
            assessment = self._evaluate_continuous(cmax, auc, dose, vd, ke, weight)
        elif self.antibiotic is Antibiotic.VANCOMYCIN_INTERMITTENT:
            assessment = self._evaluate_intermittent_vancomycin(cmin, auc, dose, interval)
        else:
            assessment = self._evaluate_aminoglycoside(cmax, cmin, dose, interval)

        logger.debug("%s assessed as %s", self.antibiotic.value, assessment.status.value)
        return assessment

    def _evaluate_continuous(self, css, auc, dose, vd, ke, weight):
        auc_min, auc_max = self.targets["auc"]
        steady_min, steady_max = self.targets["steady"]

        if auc < auc_min:
            return DoseAssessment(
                DoseStatus.INSUFFICIENT,
                f"Aumentar dose diária para {round_half_up(dose * (auc_min / auc))} mg/dia"
            )
        if auc > auc_max:
            return DoseAssessment(
                DoseStatus.EXCESSIVE,
                f"Reduzir dose diária para {round_half_up(dose * (auc_max / auc))} mg/dia"
            )
        if css < steady_min or css > steady_max:
            # Linear-response approximation using the Ke/Vd of the current regimen
            target_dose = steady_min * vd * ke * weight * 24
            return DoseAssessment(
                DoseStatus.OUT_OF_STEADY_RANGE,
                f"Ajustar dose para {round_half_up(target_dose)} mg/dia para atingir {steady_min}–{steady_max} µg/mL"
            )
        return DoseAssessment(DoseStatus.ADEQUATE)

    def _evaluate_intermittent_vancomycin(self, cmin, auc, dose, interval):
        auc_min, auc_max = self.targets["auc"]
        trough_min, trough_max = self.targets["trough"]

        if auc < auc_min or cmin < trough_min:
            return DoseAssessment(
                DoseStatus.INSUFFICIENT,
                f"Aumentar dose para {round_half_up(dose * (auc_min / auc))} mg ou reduzir intervalo "
                f"para {round_half_up(interval * SHORTER_INTERVAL_FACTOR)} h"
            )
        if auc > auc_max or cmin > trough_max:
            return DoseAssessment(
                DoseStatus.EXCESSIVE,
                f"Reduzir dose para {round_half_up(dose * (auc_max / auc))} mg ou aumentar intervalo "
                f"para {round_half_up(interval * LONGER_INTERVAL_FACTOR)} h"
            )
        return DoseAssessment(DoseStatus.ADEQUATE)

    def _evaluate_aminoglycoside(self, cmax, cmin, dose, interval):
        peak_min, peak_max = self.targets["peak"]
        trough_min, trough_max = self.targets["trough"]

        if cmax < peak_min or cmin < trough_min:
            return DoseAssessment(
                DoseStatus.INSUFFICIENT,
                f"Aumentar dose para {round_half_up(dose * (peak_max / cmax))} mg ou reduzir intervalo "
                f"para {round_half_up(interval * SHORTER_INTERVAL_FACTOR)} h"
            )
        if cmax > peak_max or cmin > trough_max:
            return DoseAssessment(
                DoseStatus.EXCESSIVE,
                f"Reduzir dose para {round_half_up(dose * (peak_min / cmax))} mg ou aumentar intervalo "
                f"para {round_half_up(interval * LONGER_INTERVAL_FACTOR)} h"
            )
        return DoseAssessment(DoseStatus.ADEQUATE)
