# ui_components.py
import streamlit as st
from datetime import datetime

from config import DRUG_CONFIGS, REPORT_NOTE, REPORT_TITLE
from models import Antibiotic, AgeUnit, LevelType

AGE_UNIT_LABELS = {
    AgeUnit.DAYS: "dias",
    AgeUnit.MONTHS: "meses",
    AgeUnit.YEARS: "anos",
}

LEVEL_TYPE_LABELS = {
    None: "Sem doseamento",
    LevelType.PEAK: "Pico",
    LevelType.TROUGH: "Vale",
    LevelType.RANDOM: "Aleatório",
}

STATUS_STYLES = {
    "Adequada": st.success,
    "Insuficiente": st.warning,
    "Excessiva": st.error,
    "Fora da faixa estável": st.warning,
}


class UIComponents:
    @staticmethod
    def create_patient_form():
        """
        Collect patient identification and dosing inputs in the sidebar.

        Returns:
        - patient_meta: name and id, used only by the report
        - form_values: keyword arguments for ValidationUtils.build_patient_input
        """
        st.sidebar.title("🩺 Dados do Doente")
        patient_meta = {}

        col1, col2 = st.sidebar.columns(2)
        with col1:
            patient_meta['name'] = st.text_input("Nome", value="")
        with col2:
            patient_meta['id'] = st.text_input("ID", value="")

        form_values = {}
        form_values['weight'] = st.sidebar.number_input("Peso (kg)", min_value=0.0, value=70.0, step=0.1)

        col1, col2 = st.sidebar.columns(2)
        with col1:
            form_values['age_value'] = st.number_input("Idade", min_value=0.0, value=40.0, step=1.0)
        with col2:
            form_values['age_unit'] = st.selectbox(
                "Unidade",
                list(AGE_UNIT_LABELS),
                index=2,
                format_func=AGE_UNIT_LABELS.get
            )

        form_values['creatinine'] = st.sidebar.number_input(
            "Creatinina (mg/dL)",
            min_value=0.0, value=1.0, step=0.1,
            help="Valor sérico em mg/dL"
        )

        st.sidebar.title("💊 Antibiótico")
        form_values['antibiotic'] = st.sidebar.selectbox(
            "Antibiótico",
            list(Antibiotic),
            format_func=lambda a: DRUG_CONFIGS[a.value]["display_name"]
        )
        continuous = form_values['antibiotic'] is Antibiotic.VANCOMYCIN_CONTINUOUS

        col1, col2 = st.sidebar.columns(2)
        with col1:
            form_values['dose'] = st.number_input(
                "Dose (mg/dia)" if continuous else "Dose (mg)",
                min_value=0.0, value=1000.0, step=10.0
            )
        with col2:
            form_values['interval'] = st.number_input(
                "Intervalo (h)",
                min_value=0.0, value=24.0 if continuous else 8.0, step=1.0,
                help="Ignorado em perfusão contínua" if continuous else None
            )

        st.sidebar.title("🧪 Doseamento (opcional)")
        form_values['level_type'] = st.sidebar.selectbox(
            "Tipo de doseamento",
            list(LEVEL_TYPE_LABELS),
            format_func=LEVEL_TYPE_LABELS.get
        )
        form_values['measured_level'] = None
        form_values['random_time'] = None
        if form_values['level_type'] is not None:
            form_values['measured_level'] = st.sidebar.number_input(
                "Nível medido (µg/mL)", min_value=0.0, value=0.0, step=0.1
            )
            if form_values['level_type'] is LevelType.RANDOM:
                form_values['random_time'] = st.sidebar.number_input(
                    "Tempo desde o início da dose (h)", min_value=0.0, value=0.0, step=0.5
                )

        return patient_meta, form_values

    @staticmethod
    def display_validation_results(warnings, errors):
        """
        Display validation warnings and errors with proper formatting

        Returns:
        - Boolean indicating whether validation passed (True) or failed (False)
        """
        if errors:
            st.error("Corrija os seguintes erros antes de continuar:")
            for error in errors:
                st.error(f"• {error}")
            return False

        if warnings:
            st.warning("Reveja os seguintes avisos:")
            for warning in warnings:
                st.warning(f"• {warning}")

        return True

    @staticmethod
    def display_results(patient, result):
        """Show status, suggestion and PK parameters."""
        formatted = result.formatted()

        st.markdown("### 🎯 Avaliação da Dose")
        show_status = STATUS_STYLES.get(result.status.value, st.info)
        show_status(f"Status: {result.status.value}")
        if result.suggestion:
            st.info(f"Sugestão: {result.suggestion}")

        st.markdown("### 📊 Parâmetros Farmacocinéticos")
        col1, col2, col3, col4 = st.columns(4)
        col1.metric("Cmax (µg/mL)", formatted['Cmax'])
        col2.metric("Cmin (µg/mL)", formatted['Cmin'])
        col3.metric("AUC (mg·h/L)", formatted['auc'])
        col4.metric("T1/2 (h)", formatted['t1_2'])

        st.caption(
            f"CrCl estimada: {result.clearance:.1f} mL/min ({result.renal_function}) | "
            f"Dose: {patient.dose:.0f} mg ({patient.dose_per_kg:.2f} mg/kg)"
        )

    @staticmethod
    def generate_report(patient_meta, patient, result):
        """Generate a printable report with patient data, parameters and dose assessment."""
        current_time = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        formatted = result.formatted()
        age_unit = AGE_UNIT_LABELS[patient.age_unit]
        antibiotic = patient.antibiotic.value.replace('_', ' ')

        report = f"""
# {REPORT_TITLE}

## Doente
- **Nome**: {patient_meta.get('name') or 'N/A'}
- **ID**: {patient_meta.get('id') or 'N/A'}
- **Peso**: {patient.weight} kg
- **Idade**: {patient.age_value} {age_unit}
- **Creatinina**: {patient.creatinine} mg/dL
- **CrCl estimada**: {result.clearance:.1f} mL/min ({result.renal_function})

## Posologia
- **Antibiótico**: {antibiotic}
- **Dose**: {patient.dose} mg ({patient.dose_per_kg:.2f} mg/kg), Intervalo: {patient.interval} h

## Parâmetros
- Cmax={formatted['Cmax']} µg/mL, Cmin={formatted['Cmin']} µg/mL, AUC={formatted['auc']} mg·h/L, T1/2={formatted['t1_2']} h
"""
        if result.measured_point is not None:
            measured_time, measured_level = result.measured_point
            report += f"- **Doseamento**: {measured_level} µg/mL às {measured_time:.1f} h\n"

        report += f"\n## Avaliação\n- **Status**: {result.status.value}\n"
        report += f"- **Sugestão**: {result.suggestion or 'N/A'}\n"

        if result.warnings:
            report += "\n## Avisos\n"
            for warning in result.warnings:
                report += f"- {warning}\n"

        report += f"\n{REPORT_NOTE}\n"
        report += f"\n---\nRelatório gerado em: {current_time}\n"

        return report

    @staticmethod
    def create_print_button(report_content):
        """Create a button to download the report as a text file."""
        timestamp = datetime.now().strftime('%Y%m%d_%H%M')
        st.download_button(
            label="📄 Descarregar Relatório",
            data=report_content,
            file_name=f"PedMedMonitor_Report_{timestamp}.txt",
            mime="text/plain",
            help="Versão imprimível desta avaliação"
        )
