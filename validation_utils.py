# validation_utils.py
import logging

from config import DRUG_CONFIGS
from models import Antibiotic, AgeUnit, InvalidInputError, LevelType, PatientInput, coerce_enum

logger = logging.getLogger(__name__)


class ValidationUtils:
    @staticmethod
    def build_patient_input(weight, age_value, age_unit, creatinine, antibiotic, dose, interval,
                            measured_level=None, level_type=None, random_time=None):
        """
        Build a PatientInput from parsed form values.

        Empty level type strings and non-positive levels are treated as "no level".
        """
        if level_type in ("", None) or not measured_level or measured_level <= 0:
            measured_level = None
            level_type = None
        else:
            level_type = coerce_enum(LevelType, level_type, "tipo de doseamento")

        return PatientInput(
            weight=weight,
            age_value=age_value,
            age_unit=coerce_enum(AgeUnit, age_unit, "unidade de idade"),
            creatinine=creatinine,
            antibiotic=coerce_enum(Antibiotic, antibiotic, "antibiótico"),
            dose=dose,
            interval=interval,
            measured_level=measured_level,
            level_type=level_type,
            random_time=random_time
        )

    @staticmethod
    def validate_results(patient, simulation):
        """
        Check calculated values for clinical plausibility.

        Parameters:
        - patient: PatientInput
        - simulation: PKSimulation with full-precision parameters

        Returns:
        - List of warnings (never blocks the calculation)
        """
        warnings = []
        antibiotic = patient.antibiotic

        max_dose_mg_kg = DRUG_CONFIGS[antibiotic.value]["max_dose_mg_kg"]
        if patient.dose_per_kg > max_dose_mg_kg:
            warnings.append(
                f"Dose ({patient.dose:.0f} mg, {patient.dose_per_kg:.1f} mg/kg) excede {max_dose_mg_kg} mg/kg"
            )

        t_half = simulation.half_life
        if t_half is not None:
            if antibiotic is Antibiotic.VANCOMYCIN_INTERMITTENT:
                if t_half < 4:
                    warnings.append(f"Meia-vida invulgarmente curta para vancomicina (t½ = {t_half:.1f}h)")
                elif t_half > 150:
                    warnings.append(f"Meia-vida extremamente longa (t½ = {t_half:.1f}h). Verifique a função renal.")
            else:
                if t_half < 1:
                    warnings.append(f"Meia-vida invulgarmente curta (t½ = {t_half:.1f}h)")
                elif t_half > 50:
                    warnings.append(f"Meia-vida extremamente longa (t½ = {t_half:.1f}h). Verifique a função renal.")

        if antibiotic in (Antibiotic.VANCOMYCIN_INTERMITTENT, Antibiotic.VANCOMYCIN_CONTINUOUS):
            if simulation.auc > 800:
                warnings.append(f"AUC calculada ({simulation.auc:.0f} mg·h/L) muito elevada. Risco de nefrotoxicidade.")
            elif simulation.auc < 200:
                warnings.append(f"AUC calculada ({simulation.auc:.0f} mg·h/L) muito baixa. Risco de falência terapêutica.")
        elif antibiotic is Antibiotic.AMIKACIN:
            if simulation.cmin > 10:
                warnings.append(f"Vale calculado ({simulation.cmin:.1f} mg/L) elevado. Risco de toxicidade.")
        elif simulation.cmin > 4:
            warnings.append(f"Vale calculado ({simulation.cmin:.1f} mg/L) elevado. Risco de toxicidade.")

        if patient.level_type is LevelType.RANDOM and patient.random_time is not None:
            interval = 24 if antibiotic is Antibiotic.VANCOMYCIN_CONTINUOUS else patient.interval
            if patient.random_time > interval + 2:
                warnings.append(
                    f"Tempo desde a dose ({patient.random_time:.1f}h) excede o intervalo ({interval}h). Verifique o horário."
                )

        for warning in warnings:
            logger.warning("Plausibility check for %s: %s", antibiotic.value, warning)

        return warnings

    @staticmethod
    def calculate_with_error_handling(func, *args, **kwargs):
        """
        Wrapper for calculation functions used by the UI

        Returns:
        - Result from the function (or None if error)
        - Error message (or None if successful)
        """
        try:
            result = func(*args, **kwargs)
            return result, None
        except InvalidInputError as e:
            return None, str(e)
        except ZeroDivisionError:
            logger.exception("Division by zero during PK calculation")
            return None, "Erro de cálculo: divisão por zero. Verifique os valores introduzidos."
        except OverflowError:
            logger.exception("Numerical overflow during PK calculation")
            return None, "Erro de cálculo: overflow numérico. Verifique valores extremos."
