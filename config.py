# config.py
from types import MappingProxyType

# Concentration curve sampling step (hr)
SAMPLING_STEP_HR = 0.5

# Therapeutic ranges (mg/L for peak/trough/steady, mg·hr/L for AUC)
THERAPEUTIC_RANGES = MappingProxyType({
    "vancomycin_intermittent": MappingProxyType({
        "peak": (25, 40),
        "trough": (10, 20),
        "auc": (400, 600),
        "source": "IDSA 2020"
    }),
    "vancomycin_continuous": MappingProxyType({
        "steady": (20, 25),
        "auc": (400, 600),
        "source": "IDSA 2020"
    }),
    "gentamicin": MappingProxyType({
        "peak": (5, 10),
        "trough": (0, 2),
        "source": "ASHP guidelines"
    }),
    "amikacin": MappingProxyType({
        "peak": (20, 30),
        "trough": (0, 5),
        "source": "ASHP guidelines"
    }),
    "tobramycin": MappingProxyType({
        "peak": (5, 10),
        "trough": (0, 2),
        "source": "ASHP guidelines"
    }),
})

# Population PK profiles. Ke (hr⁻¹) = CrCl (L/hr/kg) * ke_slope + ke_intercept
DRUG_CONFIGS = MappingProxyType({
    "vancomycin_intermittent": MappingProxyType({
        "display_name": "Vancomicina (intermitente)",
        "pk_parameters": MappingProxyType({
            "Vd_L_kg": 0.7,
            "infusion_time": 1.0,
            "ke_slope": 0.00083,
            "ke_intercept": 0.0044,
            "continuous": False
        }),
        "max_dose_mg_kg": 25  # Loading doses up to 25-30 mg/kg
    }),
    "vancomycin_continuous": MappingProxyType({
        "display_name": "Vancomicina (contínua)",
        "pk_parameters": MappingProxyType({
            "Vd_L_kg": 0.7,
            "infusion_time": 24.0,
            "ke_slope": 0.00083,
            "ke_intercept": 0.0044,
            "continuous": True
        }),
        "max_dose_mg_kg": 60  # mg/kg/day
    }),
    "gentamicin": MappingProxyType({
        "display_name": "Gentamicina",
        "pk_parameters": MappingProxyType({
            "Vd_L_kg": 0.25,
            "infusion_time": 0.5,
            "ke_slope": 0.0029,
            "ke_intercept": 0.01,
            "continuous": False
        }),
        "max_dose_mg_kg": 8
    }),
    "tobramycin": MappingProxyType({
        "display_name": "Tobramicina",
        "pk_parameters": MappingProxyType({
            "Vd_L_kg": 0.25,
            "infusion_time": 0.5,
            "ke_slope": 0.0029,
            "ke_intercept": 0.01,
            "continuous": False
        }),
        "max_dose_mg_kg": 8
    }),
    "amikacin": MappingProxyType({
        "display_name": "Amicacina",
        "pk_parameters": MappingProxyType({
            "Vd_L_kg": 0.25,
            "infusion_time": 0.5,
            "ke_slope": 0.0029,
            "ke_intercept": 0.01,
            "continuous": False
        }),
        "max_dose_mg_kg": 25
    }),
})

# Age conversion factors
DAYS_PER_MONTH = 30.42
DAYS_PER_YEAR = 365.25

# Renal function tiers (lower CrCl bound in mL/min, label)
RENAL_FUNCTION_TIERS = (
    (90, "Normal (≥90 mL/min)"),
    (60, "Disfunção leve (60-89 mL/min)"),
    (30, "Disfunção moderada (30-59 mL/min)"),
    (15, "Disfunção grave (15-29 mL/min)"),
    (0, "Falência renal (<15 mL/min)"),
)

REPORT_TITLE = "PedMedMonitor - Relatório"
REPORT_NOTE = "Nota: Valide com diretrizes locais antes de ajustar doses."
