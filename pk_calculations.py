# pk_calculations.py
import logging
import math

import numpy as np

from config import DRUG_CONFIGS, SAMPLING_STEP_HR
from models import DrugProfile, LevelType, PKSimulation, require_positive

logger = logging.getLogger(__name__)


def get_drug_profile(antibiotic):
    """Look up the population PK profile for an antibiotic."""
    params = DRUG_CONFIGS[antibiotic.value]["pk_parameters"]
    return DrugProfile(
        vd_l_kg=params["Vd_L_kg"],
        infusion_time=params["infusion_time"],
        ke_slope=params["ke_slope"],
        ke_intercept=params["ke_intercept"],
        continuous=params["continuous"]
    )


class PKCalculator:
    def __init__(self, antibiotic, weight, crcl):
        """
        Parameters:
        - antibiotic: Antibiotic
        - weight: Body weight (kg)
        - crcl: Estimated creatinine clearance (mL/min)
        """
        require_positive("Peso deve ser maior que 0.", weight)
        self.antibiotic = antibiotic
        self.weight = weight
        self.crcl = crcl
        self.profile = get_drug_profile(antibiotic)

    def calculate_initial_parameters(self):
        """Population Vd (L/kg), Ke (hr⁻¹) and half-life (hr) from clearance."""
        crcl_l_h_kg = (self.crcl / 1000) * 60 / self.weight
        vd = self.profile.vd_l_kg
        ke = self.profile.elimination_rate(crcl_l_h_kg)

        # No terminal half-life is reported for a steady infusion
        t_half = None if self.profile.continuous else math.log(2) / ke

        logger.debug("%s: CrCl=%.4f L/hr/kg Vd=%.2f L/kg Ke=%.5f hr⁻¹",
                     self.antibiotic.value, crcl_l_h_kg, vd, ke)
        return {
            "crcl_l_h_kg": crcl_l_h_kg,
            "vd": vd,
            "ke": ke,
            "t_half": t_half
        }

    def predict_levels(self, dose, tau, pk_params=None):
        """Cmax, Cmin (mg/L) and AUC24 (mg·hr/L) for one dosing interval."""
        if pk_params is None:
            pk_params = self.calculate_initial_parameters()
        vd, ke = pk_params["vd"], pk_params["ke"]
        dose_per_kg = dose / self.weight

        if self.profile.continuous:
            auc = (dose_per_kg / 24) / (ke * vd) * 24
            css = auc / 24
            return {"peak": css, "trough": css, "auc": auc}

        infusion_time = self.profile.infusion_time
        peak = dose_per_kg / (vd * (1 - math.exp(-ke * infusion_time)))
        trough = peak * math.exp(-ke * (tau - infusion_time))
        auc = (dose_per_kg / tau) / (ke * vd) * 24
        return {"peak": peak, "trough": trough, "auc": auc}

    def generate_curve(self, dose, tau, pk_params=None, levels=None):
        """
        Sample one dosing interval every SAMPLING_STEP_HR hours.

        Rising phase (t ≤ infusion time) uses the infusion formula; the decay
        phase is first-order elimination from Cmax. A continuous infusion is
        flat at the steady-state concentration over 24 hours.

        Returns:
        - (time_points, concentrations) as numpy arrays
        """
        if pk_params is None:
            pk_params = self.calculate_initial_parameters()
        if levels is None:
            levels = self.predict_levels(dose, tau, pk_params)
        if self.profile.continuous:
            tau = 24

        n_points = math.ceil(tau / SAMPLING_STEP_HR)
        times = np.arange(n_points) * SAMPLING_STEP_HR

        if self.profile.continuous:
            return times, np.full(n_points, levels["peak"], dtype=float)

        vd, ke = pk_params["vd"], pk_params["ke"]
        infusion_time = self.profile.infusion_time
        dose_per_kg = dose / self.weight

        concentrations = np.zeros(n_points)
        rising = (times > 0) & (times <= infusion_time)
        decay = times > infusion_time
        concentrations[rising] = dose_per_kg / (vd * (1 - np.exp(-ke * times[rising])))
        concentrations[decay] = levels["peak"] * np.exp(-ke * (times[decay] - infusion_time))
        return times, concentrations

    def measured_level_time(self, tau, level_type, random_time=None):
        """Time (hr) at which a measured level is plotted, or None if it cannot be placed."""
        if level_type is LevelType.PEAK:
            return self.profile.infusion_time
        if level_type is LevelType.TROUGH:
            return tau - 0.1
        if level_type is LevelType.RANDOM and random_time is not None and random_time >= 0:
            return random_time
        return None

    def simulate(self, dose, tau, measured_level=None, level_type=None, random_time=None):
        """
        Run the one-compartment model for a single dosing interval.

        A measured level is appended to the curve as an overlay point only; it
        does not feed back into Ke, Cmax or AUC.
        """
        require_positive("Dose e intervalo devem ser maiores que 0.", dose, tau)

        pk_params = self.calculate_initial_parameters()
        levels = self.predict_levels(dose, tau, pk_params)
        times, concentrations = self.generate_curve(dose, tau, pk_params, levels)
        time_points = [float(t) for t in times]
        conc_points = [float(c) for c in concentrations]

        measured_point = None
        if measured_level and level_type is not None:
            measured_time = self.measured_level_time(tau, level_type, random_time)
            if measured_time is None:
                logger.debug("Measured %s level has no valid time; overlay point omitted", level_type.value)
            else:
                measured_point = (measured_time, measured_level)
                time_points.append(measured_time)
                conc_points.append(measured_level)

        return PKSimulation(
            antibiotic=self.antibiotic,
            vd=pk_params["vd"],
            ke=pk_params["ke"],
            infusion_time=self.profile.infusion_time,
            cmax=levels["peak"],
            cmin=levels["trough"],
            auc=levels["auc"],
            half_life=pk_params["t_half"],
            time_points=tuple(time_points),
            concentrations=tuple(conc_points),
            measured_point=measured_point
        )


def simulate_pk(antibiotic, dose, interval, weight, crcl, measured_level=None, level_type=None, random_time=None):
    """Functional entry point: PKCalculator(antibiotic, weight, crcl).simulate(...)."""
    calculator = PKCalculator(antibiotic, weight, crcl)
    return calculator.simulate(dose, interval, measured_level, level_type, random_time)
