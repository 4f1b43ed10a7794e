# visualization.py
import altair as alt
import pandas as pd
import streamlit as st

from config import THERAPEUTIC_RANGES
from models import Antibiotic

# (range key, label for min line, label for max line, colour)
REFERENCE_LINES = {
    "peak": ("Pico Mín.", "Pico Máx.", "#2ecc71"),
    "trough": ("Vale Mín.", "Vale Máx.", "#e67e22"),
    "steady": ("Estável Mín.", "Estável Máx.", "#2ecc71"),
}


class PKVisualizer:
    @staticmethod
    def plot_concentration_curve(result):
        """
        Build a concentration-time chart for one evaluation.

        A new chart object is created on every call.

        Parameters:
        - result: PKResult

        Returns:
        - Altair chart object
        """
        df = pd.DataFrame(result.curve_points(), columns=['Tempo (h)', 'Concentração (µg/mL)'])

        line = alt.Chart(df).mark_line(color='#3498db').encode(
            x=alt.X('Tempo (h)', title='Tempo (h)'),
            y=alt.Y('Concentração (µg/mL)',
                    title='Concentração (µg/mL)',
                    scale=alt.Scale(zero=True)),
            tooltip=['Tempo (h)', alt.Tooltip('Concentração (µg/mL)', format=".2f")]
        )

        layers = [line]
        reference_lines = PKVisualizer._create_reference_lines(result.antibiotic)
        if reference_lines is not None:
            layers.append(reference_lines)

        if result.measured_point is not None:
            layers.append(PKVisualizer._create_measured_point(*result.measured_point))

        return alt.layer(*layers).properties(
            height=400,
            title='Perfil Concentração-Tempo'
        ).interactive()

    @staticmethod
    def reference_lines_data(antibiotic):
        """Horizontal reference lines (label, level, colour) for an antibiotic's range bands."""
        ranges = THERAPEUTIC_RANGES[antibiotic.value]
        keys = ["steady"] if antibiotic is Antibiotic.VANCOMYCIN_CONTINUOUS else ["peak", "trough"]

        rows = []
        for key in keys:
            low, high = ranges[key]
            min_label, max_label, colour = REFERENCE_LINES[key]
            rows.append({'Referência': min_label, 'Nível': low, 'Cor': colour})
            rows.append({'Referência': max_label, 'Nível': high, 'Cor': colour})
        return rows

    @staticmethod
    def _create_reference_lines(antibiotic):
        rows = PKVisualizer.reference_lines_data(antibiotic)
        if not rows:
            return None

        return alt.Chart(pd.DataFrame(rows)).mark_rule(strokeWidth=2, strokeDash=[4, 4]).encode(
            y='Nível',
            color=alt.Color('Cor', scale=None),
            tooltip=['Referência', 'Nível']
        )

    @staticmethod
    def _create_measured_point(time, level):
        df = pd.DataFrame({'Tempo (h)': [time], 'Concentração (µg/mL)': [level]})
        return alt.Chart(df).mark_point(
            color='#e74c3c', filled=True, size=150
        ).encode(
            x='Tempo (h)',
            y='Concentração (µg/mL)',
            tooltip=[alt.Tooltip('Tempo (h)', format=".1f"),
                     alt.Tooltip('Concentração (µg/mL)', title='Doseamento', format=".2f")]
        )

    @staticmethod
    def display_pk_chart(result):
        """Render the concentration-time chart, keeping the form usable if it fails."""
        try:
            chart = PKVisualizer.plot_concentration_curve(result)
            st.altair_chart(chart, use_container_width=True)
        except (ValueError, TypeError) as e:
            st.warning(f"Não foi possível apresentar a curva: {e}")
