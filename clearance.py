# clearance.py
import logging

from config import DAYS_PER_MONTH, DAYS_PER_YEAR, RENAL_FUNCTION_TIERS
from models import AgeUnit, InvalidInputError, coerce_enum, require_positive

logger = logging.getLogger(__name__)

# Schwartz-family k coefficients by age band
K_NEONATE_FIRST_WEEK = 0.33
K_NEONATE = 0.45
K_INFANT = 0.55
K_CHILD = 0.413

# Approximate height growth per age unit (cm), from a 50 cm birth length
HEIGHT_PER_UNIT_CM = {
    AgeUnit.DAYS: 0.1,
    AgeUnit.MONTHS: 1,
    AgeUnit.YEARS: 12,
}


class ClearanceEstimator:
    @staticmethod
    def age_in_days(age_value, age_unit):
        if age_unit is AgeUnit.DAYS:
            return age_value
        if age_unit is AgeUnit.MONTHS:
            return age_value * DAYS_PER_MONTH
        return age_value * DAYS_PER_YEAR

    @staticmethod
    def age_in_years(age_value, age_unit):
        if age_unit is AgeUnit.YEARS:
            return age_value
        if age_unit is AgeUnit.MONTHS:
            return age_value / 12
        return age_value / DAYS_PER_YEAR

    @staticmethod
    def is_pediatric(age_value, age_unit):
        age_days = ClearanceEstimator.age_in_days(age_value, age_unit)
        return (
            age_days <= 28
            or age_unit is AgeUnit.MONTHS
            or (age_unit is AgeUnit.YEARS and age_value < 18)
        )

    @staticmethod
    def schwartz_k(age_value, age_unit):
        age_days = ClearanceEstimator.age_in_days(age_value, age_unit)
        if age_days <= 7:
            return K_NEONATE_FIRST_WEEK
        if age_days <= 28:
            return K_NEONATE
        if age_unit is AgeUnit.MONTHS:
            return K_INFANT
        return K_CHILD

    @staticmethod
    def estimate_height(age_value, age_unit):
        """Rough height (cm) for the Schwartz formula when none is measured."""
        return 50 + age_value * HEIGHT_PER_UNIT_CM[age_unit]

    @staticmethod
    def calculate_clearance(weight, age_value, age_unit, creatinine):
        """
        Estimate creatinine clearance (mL/min).

        Pediatric patients (≤28 days, any age in months, or <18 years) use a
        Schwartz-type formula with an estimated height; everyone else uses
        Cockcroft-Gault. The result is never negative.

        Parameters:
        - weight: Body weight (kg)
        - age_value: Age in age_unit
        - age_unit: AgeUnit (or its string value)
        - creatinine: Serum creatinine (mg/dL)
        """
        require_positive("Peso e creatinina devem ser maiores que 0.", weight, creatinine)
        if not isinstance(age_unit, AgeUnit):
            age_unit = coerce_enum(AgeUnit, age_unit, "unidade de idade")
        if age_value is None or age_value < 0:
            raise InvalidInputError("Idade não pode ser negativa.")

        if ClearanceEstimator.is_pediatric(age_value, age_unit):
            k = ClearanceEstimator.schwartz_k(age_value, age_unit)
            height = ClearanceEstimator.estimate_height(age_value, age_unit)
            crcl = (k * height) / creatinine
            logger.debug("Schwartz clearance: k=%.3f height=%.1f cm", k, height)
        else:
            age_years = ClearanceEstimator.age_in_years(age_value, age_unit)
            crcl = ((140 - age_years) * weight) / (72 * creatinine)
            logger.debug("Cockcroft-Gault clearance: age=%.1f years", age_years)

        return max(0.0, crcl)

    @staticmethod
    def classify_renal_function(crcl):
        for lower_bound, label in RENAL_FUNCTION_TIERS:
            if crcl >= lower_bound:
                return label
        return RENAL_FUNCTION_TIERS[-1][1]
