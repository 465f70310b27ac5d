"""
Vinifera - Wine Fermentation Simulator.
A Streamlit form that estimates alcohol, residual sugar and style of a wine
from its fermentation parameters.
"""

import sys
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

# Load environment variables before config is read
load_dotenv()

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from vinifera import get_flavor_table, simulate
from vinifera.constants import UIConstants

# Page configuration
st.set_page_config(
    page_title="Wine Fermentation Simulator",
    page_icon="🍷",
    layout="centered",
)


@st.cache_resource
def load_flavor_table():
    """Load the flavor dataset once per server process."""
    return get_flavor_table()


def main():
    st.title("Wine Fermentation Simulator")

    flavor_table = load_flavor_table()
    if len(flavor_table) == 0:
        st.warning("⚠️ Flavor dataset unavailable - flavor notes will be unknown")

    with st.form("fermentation_form"):
        grape = st.selectbox("Grape Type:", UIConstants.GRAPES)
        days = st.text_input(UIConstants.DAYS_LABEL)
        container = st.selectbox("Container Type:", UIConstants.CONTAINERS)
        climate = st.selectbox("Climate:", UIConstants.CLIMATES)
        sugar_content = st.text_input(UIConstants.SUGAR_LABEL)
        temperature = st.text_input(UIConstants.TEMPERATURE_LABEL)

        submitted = st.form_submit_button("Simulate Wine Fermentation", type="primary")

    if submitted:
        st.session_state["result_text"] = simulate(
            grape=grape,
            days=days,
            container=container,
            sugar_content=sugar_content,
            temperature_c=temperature,
            climate=climate,
            flavor_table=flavor_table,
        )

    st.divider()
    st.text_area("Results:", value=st.session_state.get("result_text", ""), height=320)


if __name__ == "__main__":
    main()
