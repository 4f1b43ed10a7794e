# app.py
import logging
import os

import streamlit as st

from engine import evaluate_patient
from ui_components import UIComponents
from validation_utils import ValidationUtils
from visualization import PKVisualizer

logging.basicConfig(
    level=os.environ.get("PEDMED_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger("pedmedmonitor")

# Set page configuration
st.set_page_config(
    page_title="PedMedMonitor",
    page_icon="💊",
    layout="wide"
)


def main():
    """Main application entry point"""
    patient_meta, form_values = UIComponents.create_patient_form()

    st.title("PedMedMonitor")
    st.markdown("Monitorização farmacocinética de vancomicina e aminoglicosídeos")
    st.markdown("---")

    if not st.sidebar.button("Calcular", type="primary"):
        st.info("Preencha os dados do doente e clique em **Calcular**.")
        return

    patient, error = ValidationUtils.calculate_with_error_handling(
        ValidationUtils.build_patient_input, **form_values
    )
    if error is None:
        result, error = ValidationUtils.calculate_with_error_handling(evaluate_patient, patient)
    if error is not None:
        logger.info("Rejected form submission: %s", error)
        UIComponents.display_validation_results([], [f"Erro: {error}"])
        return

    UIComponents.display_validation_results(result.warnings, [])
    UIComponents.display_results(patient, result)
    PKVisualizer.display_pk_chart(result)

    report = UIComponents.generate_report(patient_meta, patient, result)
    UIComponents.create_print_button(report)

    # Display footer
    st.markdown("---")
    st.markdown("""
    <div style="text-align: center; color: #666;">
        <p><small>Ferramenta de apoio à decisão clínica.<br>
        Não substitui o julgamento clínico profissional.</small></p>
    </div>
    """, unsafe_allow_html=True)


if __name__ == "__main__":
    main()
