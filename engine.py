# engine.py
import logging

from clearance import ClearanceEstimator
from clinical_logic import DoseEvaluator
from models import PKResult
from pk_calculations import PKCalculator
from validation_utils import ValidationUtils

logger = logging.getLogger(__name__)


def evaluate_patient(patient):
    """
    Run clearance estimation, PK simulation and dose evaluation for one form submission.

    Parameters:
    - patient: PatientInput

    Returns:
    - PKResult with parameters rounded to 2 decimals

    Raises:
    - InvalidInputError if weight, creatinine, dose or interval are not positive
    """
    crcl = ClearanceEstimator.calculate_clearance(
        patient.weight, patient.age_value, patient.age_unit, patient.creatinine
    )

    calculator = PKCalculator(patient.antibiotic, patient.weight, crcl)
    simulation = calculator.simulate(
        patient.dose,
        patient.interval,
        patient.measured_level,
        patient.level_type,
        patient.random_time
    )

    assessment = DoseEvaluator(patient.antibiotic).evaluate(
        simulation.cmax,
        simulation.cmin,
        simulation.auc,
        patient.dose,
        patient.interval,
        simulation.vd,
        simulation.ke,
        patient.weight
    )
    warnings = ValidationUtils.validate_results(patient, simulation)

    logger.info("Evaluated %s: CrCl=%.1f mL/min status=%s",
                patient.antibiotic.value, crcl, assessment.status.value)

    return PKResult(
        antibiotic=patient.antibiotic,
        time_points=simulation.time_points,
        concentrations=simulation.concentrations,
        cmax=round(simulation.cmax, 2),
        cmin=round(simulation.cmin, 2),
        auc=round(simulation.auc, 2),
        half_life=round(simulation.half_life, 2) if simulation.half_life is not None else None,
        status=assessment.status,
        suggestion=assessment.suggestion,
        infusion_time=simulation.infusion_time,
        clearance=crcl,
        renal_function=ClearanceEstimator.classify_renal_function(crcl),
        measured_point=simulation.measured_point,
        warnings=tuple(warnings)
    )
