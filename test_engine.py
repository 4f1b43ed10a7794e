import unittest
from types import MappingProxyType, ModuleType

import clearance
import clinical_logic
import engine
import models
import pk_calculations
import validation_utils
from config import DRUG_CONFIGS, THERAPEUTIC_RANGES
from engine import evaluate_patient
from models import Antibiotic, AgeUnit, DoseStatus, InvalidInputError, LevelType, PatientInput
from validation_utils import ValidationUtils


class TestEvaluatePatient(unittest.TestCase):

    def setUp(self):
        """Adult on gentamicin: 70 kg, 40 years, creatinine 1.0 mg/dL, 420 mg q8h."""
        self.patient = PatientInput(
            weight=70,
            age_value=40,
            age_unit=AgeUnit.YEARS,
            creatinine=1.0,
            antibiotic=Antibiotic.GENTAMICIN,
            dose=420,
            interval=8
        )

    def test_gentamicin_regression_fixture(self):
        result = evaluate_patient(self.patient)
        self.assertAlmostEqual(result.clearance, 97.22, places=2)
        self.assertEqual(result.cmax, 4698.75)
        self.assertEqual(result.cmin, 4351.34)
        self.assertEqual(result.auc, 7030.11)
        self.assertEqual(result.half_life, 67.68)
        self.assertEqual(result.status, DoseStatus.EXCESSIVE)
        self.assertEqual(result.suggestion, "Reduzir dose para 0 mg ou aumentar intervalo para 10 h")
        self.assertEqual(result.formatted(), {
            "Cmax": "4698.75",
            "Cmin": "4351.34",
            "auc": "7030.11",
            "t1_2": "67.68",
        })

    def test_curve_points_exclude_overlay(self):
        patient = ValidationUtils.build_patient_input(
            70, 40, "years", 1.0, "gentamicin", 420, 8, measured_level=8.0, level_type="peak"
        )
        result = evaluate_patient(patient)
        self.assertEqual(result.measured_point, (0.5, 8.0))
        self.assertEqual(len(result.time_points), 17)
        self.assertEqual(len(result.curve_points()), 16)
        self.assertEqual(result.curve_points()[-1][0], 7.5)

    def test_continuous_vancomycin_has_no_half_life(self):
        patient = PatientInput(70, 40, AgeUnit.YEARS, 1.0, Antibiotic.VANCOMYCIN_CONTINUOUS, 2000, 24)
        result = evaluate_patient(patient)
        self.assertIsNone(result.half_life)
        self.assertEqual(result.formatted()["t1_2"], "N/A")
        self.assertEqual(result.cmax, result.cmin)

    def test_vancomycin_in_target_is_adequate(self):
        patient = PatientInput(70, 20, AgeUnit.YEARS, 0.0003, Antibiotic.VANCOMYCIN_INTERMITTENT, 3430, 12)
        result = evaluate_patient(patient)
        self.assertTrue(400 < result.auc < 600)
        self.assertTrue(10 < result.cmin < 20)
        self.assertEqual(result.status, DoseStatus.ADEQUATE)
        self.assertEqual(result.suggestion, "")

    def test_warnings_are_immutable(self):
        result = evaluate_patient(self.patient)
        self.assertIsInstance(result.warnings, tuple)

    def test_plausibility_warnings_do_not_block(self):
        result = evaluate_patient(self.patient)
        self.assertTrue(any("Meia-vida" in w for w in result.warnings))

    def test_invalid_inputs(self):
        for field_values in [
            dict(weight=0),
            dict(creatinine=0),
            dict(dose=0),
            dict(interval=-8),
        ]:
            values = dict(weight=70, age_value=40, age_unit=AgeUnit.YEARS, creatinine=1.0,
                          antibiotic=Antibiotic.GENTAMICIN, dose=420, interval=8)
            values.update(field_values)
            with self.assertRaises(InvalidInputError):
                evaluate_patient(PatientInput(**values))

    def test_error_wrapper_returns_message(self):
        patient = PatientInput(70, 40, AgeUnit.YEARS, 1.0, Antibiotic.AMIKACIN, 0, 8)
        result, error = ValidationUtils.calculate_with_error_handling(evaluate_patient, patient)
        self.assertIsNone(result)
        self.assertEqual(error, "Dose e intervalo devem ser maiores que 0.")


class TestBuildPatientInput(unittest.TestCase):

    def test_coerces_form_strings(self):
        patient = ValidationUtils.build_patient_input(
            12, 3, "months", 0.4, "vancomycin_intermittent", 180, 6,
            measured_level=11.0, level_type="random", random_time=2.0
        )
        self.assertIs(patient.age_unit, AgeUnit.MONTHS)
        self.assertIs(patient.antibiotic, Antibiotic.VANCOMYCIN_INTERMITTENT)
        self.assertIs(patient.level_type, LevelType.RANDOM)
        self.assertEqual(patient.dose_per_kg, 15)

    def test_missing_level_drops_level_type(self):
        patient = ValidationUtils.build_patient_input(70, 40, "years", 1.0, "amikacin", 1000, 24,
                                                      measured_level=None, level_type="trough")
        self.assertIsNone(patient.level_type)
        self.assertIsNone(patient.measured_level)

        empty = ValidationUtils.build_patient_input(70, 40, "years", 1.0, "amikacin", 1000, 24,
                                                    measured_level=20.0, level_type="")
        self.assertIsNone(empty.level_type)

    def test_unknown_antibiotic(self):
        with self.assertRaises(InvalidInputError):
            ValidationUtils.build_patient_input(70, 40, "years", 1.0, "meropenem", 1000, 8)


class TestConfig(unittest.TestCase):

    def test_every_antibiotic_has_profile_and_range(self):
        for antibiotic in Antibiotic:
            self.assertIn(antibiotic.value, DRUG_CONFIGS)
            self.assertIn(antibiotic.value, THERAPEUTIC_RANGES)

    def test_vancomycin_auc_band(self):
        self.assertEqual(THERAPEUTIC_RANGES["vancomycin_intermittent"]["auc"], (400, 600))
        self.assertEqual(THERAPEUTIC_RANGES["vancomycin_continuous"]["auc"], (400, 600))
        self.assertEqual(THERAPEUTIC_RANGES["vancomycin_continuous"]["steady"], (20, 25))

    def test_ranges_are_read_only(self):
        self.assertIsInstance(THERAPEUTIC_RANGES, MappingProxyType)
        with self.assertRaises(TypeError):
            THERAPEUTIC_RANGES["gentamicin"]["peak"] = (1, 2)
        with self.assertRaises(TypeError):
            DRUG_CONFIGS["amikacin"]["pk_parameters"]["Vd_L_kg"] = 0.3


class TestCoreModules(unittest.TestCase):

    def test_engine_does_not_load_streamlit(self):
        for module in (models, clearance, pk_calculations, clinical_logic, engine, validation_utils):
            imported = [value.__name__ for value in vars(module).values() if isinstance(value, ModuleType)]
            self.assertFalse(any(name.split(".")[0] == "streamlit" for name in imported), module.__name__)


if __name__ == '__main__':
    unittest.main()
