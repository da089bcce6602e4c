"""Configuration Panel - Main Entry Point.

Wires one ``ConfigurationPanel`` into each browser session and renders it.
Run with ``streamlit run config_panel/Home.py`` or ``python run_panel.py``.
"""

from __future__ import annotations

import logging
import weakref
from typing import Callable, MutableMapping, Optional

import streamlit as st

from .api_client import PanelApiClient
from .log import configure_logging
from .panel_state import ConfigurationPanel
from .panel_ui import ConfigurationPanelUI

logger = logging.getLogger(__name__)

SESSION_KEY = "config_panel"


def ensure_panel(
    session_state: MutableMapping,
    client_factory: Callable[[], PanelApiClient] = PanelApiClient,
) -> tuple[ConfigurationPanel, bool]:
    """Return the session's panel, creating and mounting it on first use.

    The second element is True when the panel was created by this call.
    """
    panel: Optional[ConfigurationPanel] = session_state.get(SESSION_KEY)
    if panel is not None:
        return panel, False
    panel = ConfigurationPanel(client_factory())
    session_state[SESSION_KEY] = panel
    # Streamlit drops session_state when the browser session ends.
    weakref.finalize(panel, panel.client.close)
    logger.info("Mounting configuration panel against %s", panel.client.base_url)
    panel.mount()
    return panel, True


def main() -> None:
    """Render the configuration management page."""
    configure_logging()
    st.set_page_config(page_title="Configuration Management", page_icon="⚙️", layout="wide")
    if SESSION_KEY in st.session_state:
        panel, _ = ensure_panel(st.session_state)
    else:
        with st.spinner("Loading configurations..."):
            panel, _ = ensure_panel(st.session_state)

    ConfigurationPanelUI(panel).render()
