"""
Web UI module for the Fire Risk Monitor.

This module provides a Streamlit-based web interface for the Fire Risk
Monitor. The user enters a location and searches for it; the page then shows
the live readings, the fire risk status and the observation history, and
refreshes on a fixed interval while live monitoring is switched on.
Thresholds can be edited from the sidebar.
"""

import sys
from pathlib import Path
from typing import Optional

# Add project root to Python path to enable imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pandas as pd
import streamlit as st
from streamlit_autorefresh import st_autorefresh

from firerisk import config
from firerisk.display import (
    ERROR_STATUS_COLOR,
    ERROR_STATUS_TEXT,
    INITIAL_STATUS_TEXT,
    format_status,
    format_triggered_factors,
)
from firerisk.errors import FireRiskError, InvalidInput
from firerisk.fire_risk_monitor import CycleResult, FireRiskMonitor, MonitorStatus
from firerisk.logging_config import configure_logging


def _queue_critical_alert(result: CycleResult) -> None:
    """Alert hook: remembers the critical cycle so the next render shows the alert once."""
    st.session_state.pending_alert = result.location


def get_monitor() -> FireRiskMonitor:
    """
    Returns the monitor stored in session state, creating it on first use.

    The monitor is the application state; keeping one instance per session
    preserves thresholds and history across Streamlit re-runs.
    """
    if "monitor" not in st.session_state:
        configure_logging()
        st.session_state.monitor = FireRiskMonitor(on_critical=_queue_critical_alert)
    return st.session_state.monitor


def run_cycle(monitor: FireRiskMonitor, location: str) -> Optional[CycleResult]:
    """Runs one poll cycle and reports failures as a message instead of crashing the page."""
    try:
        return monitor.run_cycle(location)
    except InvalidInput as e:
        st.warning(e.message)
    except FireRiskError as e:
        st.error(f"Error accessing weather data: {e}")
    return None


def render_settings(monitor: FireRiskMonitor) -> None:
    """Sidebar form for editing the risk thresholds."""
    current = monitor.thresholds

    with st.sidebar.form("threshold_settings"):
        st.subheader("Risk Threshold Settings")
        temperature = st.text_input("Temperature Threshold (°C)", value=str(current.temperature_threshold_c))
        humidity = st.text_input("Humidity Threshold (%)", value=str(current.humidity_threshold_pct))
        wind = st.text_input("Wind Speed Threshold (m/s)", value=str(current.wind_threshold_ms))
        pm25 = st.text_input("PM2.5 Threshold (µg/m³)", value=str(current.pm25_threshold))
        submitted = st.form_submit_button("Save")

    if submitted:
        try:
            monitor.update_thresholds(temperature, humidity, wind, pm25)
            st.sidebar.success("Thresholds updated")
        except InvalidInput as e:
            # Previous thresholds remain in effect
            st.sidebar.error(e.message)


def render_status(monitor: FireRiskMonitor) -> None:
    """Shows the readings and the coloured status line."""
    result = monitor.last_result

    if result is not None:
        for line in result.labels.as_lines():
            st.write(line)
    else:
        st.write("Temperature: Loading...")
        st.write("Humidity: Loading...")
        st.write("Wind Speed: Loading...")
        st.write("Air Quality: Loading...")

    if monitor.status == MonitorStatus.ERROR:
        status_text, color = ERROR_STATUS_TEXT, ERROR_STATUS_COLOR
    elif result is not None:
        status_text, color = format_status(result.assessment), result.assessment.level.color
    else:
        status_text, color = INITIAL_STATUS_TEXT, "gray"

    st.markdown(f"<h2 style='color: {color};'>{status_text}</h2>", unsafe_allow_html=True)

    if result is not None:
        st.caption(f"⚠️ Active risk factors: {format_triggered_factors(result.assessment)}")
        st.caption(f"Last updated: {result.history_entry.timestamp:%Y-%m-%d %H:%M:%S}")

    if monitor.last_error:
        st.caption(monitor.last_error)


def render_history(monitor: FireRiskMonitor) -> None:
    """Shows the observation history, oldest first, as in the original text area."""
    st.header("Historical Data")

    if len(monitor.history) == 0:
        st.caption("No observations yet.")
        return

    st.text_area("History", value=monitor.history.as_text(), height=300, disabled=True)

    with st.expander("View as table"):
        st.dataframe(pd.DataFrame(monitor.history.to_records()), use_container_width=True)


def main() -> None:
    """
    Main function that runs the Streamlit web interface.

    Sets up the layout, handles manual searches and periodic refreshes,
    and renders readings, status, alerts and history.
    """
    st.set_page_config(page_title="Forest Fire Detector", layout="wide")
    st.title("Forest Fire Detector")

    monitor = get_monitor()
    render_settings(monitor)

    live = st.sidebar.toggle("Live monitoring", value=True)
    refresh_count = 0
    if live:
        refresh_count = st_autorefresh(interval=config.POLL_INTERVAL_MS, limit=None, key="fire_risk_refresh")
        st.sidebar.info(f"🔄 Live monitoring: updates every {config.POLL_INTERVAL_MS // 60000} minutes")

    location = st.text_input("Location:", value=st.session_state.get("location", config.DEFAULT_LOCATION))
    search = st.button("Search")

    if search:
        st.session_state.location = location
        run_cycle(monitor, location)
    elif live and location.strip() and refresh_count != st.session_state.get("last_refresh_count"):
        # A new auto-refresh tick (or the first render) triggers a scheduled cycle
        st.session_state.location = location
        run_cycle(monitor, location)
    st.session_state.last_refresh_count = refresh_count

    pending_alert = st.session_state.pop("pending_alert", None)
    if pending_alert is not None:
        st.toast("Critical Fire Risk Detected!", icon="🔥")
        st.error(f"Critical Fire Risk Detected at {pending_alert}!")

    left_col, right_col = st.columns(2)
    with left_col:
        render_status(monitor)
    with right_col:
        render_history(monitor)


if __name__ == "__main__":
    main()
