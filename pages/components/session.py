"""Session state shared by the Streamlit pages."""

import streamlit as st

from lift_tracker.config import DEFAULT_SELECTED_CYCLE
from lift_tracker.lift_store import get_store


def init_session_state():
    """Create the lift store and UI selections on first run of a session.

    The store, the unit toggle and the selected cycle all live in
    ``st.session_state``; the calculator itself keeps no state.
    """
    if 'store' not in st.session_state:
        store = get_store()
        store.init()
        st.session_state.store = store
    if 'is_kg' not in st.session_state:
        st.session_state.is_kg = False
    if 'selected_cycle' not in st.session_state:
        st.session_state.selected_cycle = DEFAULT_SELECTED_CYCLE
    if 'current_lift_index' not in st.session_state:
        st.session_state.current_lift_index = 0

    # Widget-bound keys are dropped on pages that don't render the widget;
    # reassigning keeps the selections when switching pages.
    st.session_state.is_kg = st.session_state.is_kg
    st.session_state.selected_cycle = st.session_state.selected_cycle


def current_unit() -> str:
    return "kg" if st.session_state.is_kg else "lbs"


def flash(message: str):
    """Queue a success message to show after the next ``st.rerun()``."""
    st.session_state["flash_message"] = message


def show_flash():
    """Show and clear the queued success message, if any."""
    message = st.session_state.pop("flash_message", None)
    if message:
        st.success(message)
