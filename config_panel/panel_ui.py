"""Streamlit rendering for the configuration panel.

The UI only reads from ``ConfigurationPanel`` and calls its handlers; all
state transitions live in ``panel_state``.
"""

from __future__ import annotations

import streamlit as st

from .notifications import ERROR
from .panel_state import ConfigurationPanel
from .resource_types import RESOURCE_TYPES

EDITOR_HEIGHT = 420


class ConfigurationPanelUI:
    """Page layout: category selector, name list, editor and notification banner."""

    def __init__(self, panel: ConfigurationPanel):
        self.panel = panel

    def render(self) -> None:
        st.title("⚙️ Configuration Management")
        self.render_notification()
        self.render_category_selector()

        col_names, col_editor = st.columns([1, 3], gap="large")
        with col_names:
            self.render_name_list()
        with col_editor:
            self.render_editor()

    # Category selector -------------------------------------------------------

    def render_category_selector(self) -> None:
        choice = st.radio(
            "Resource type",
            options=list(range(len(RESOURCE_TYPES))),
            index=self.panel.active_category_index,
            format_func=lambda index: RESOURCE_TYPES[index].label,
            horizontal=True,
            label_visibility="collapsed",
        )
        if choice != self.panel.active_category_index:
            with st.spinner("Loading configurations..."):
                self.panel.select_category(choice)
            st.rerun()

    # Name list -----------------------------------------------------------------

    def render_name_list(self) -> None:
        panel = self.panel
        st.subheader("Configurations")

        if not panel.available_names:
            st.caption("No configurations in this category.")
        for name in panel.available_names:
            selected = name == panel.selected_name
            if st.button(
                name,
                key=f"config_name_{panel.active_category.key}_{name}",
                type="primary" if selected else "secondary",
                use_container_width=True,
            ):
                with st.spinner(f"Loading {name}..."):
                    panel.select_name(name)
                st.rerun()

        col_add, col_delete = st.columns(2)
        with col_add:
            if st.button("➕ Add", use_container_width=True):
                st.info(panel.add_config())
        with col_delete:
            if st.button("🗑️ Delete", use_container_width=True, disabled=panel.selected_name is None):
                st.info(panel.delete_config())

    # Editor ----------------------------------------------------------------------

    def render_editor(self) -> None:
        panel = self.panel
        st.subheader("Content")

        if panel.selected_name is None:
            st.info("Select a configuration to view its content.")
            return

        # A new key per load so the widget picks up freshly fetched text.
        editor_key = f"config_editor_{panel.active_category.key}_{panel.selected_name}_{panel.content_revision}"
        text = st.text_area(
            panel.selected_name,
            value=panel.edited_content,
            height=EDITOR_HEIGHT,
            key=editor_key,
            disabled=not panel.is_editing,
            label_visibility="collapsed",
        )
        if panel.is_editing and text != panel.edited_content:
            panel.set_content(text)

        col_edit, col_save, col_cancel = st.columns(3)
        with col_edit:
            if st.button("✏️ Edit", use_container_width=True, disabled=panel.is_editing):
                panel.start_editing()
                st.rerun()
        with col_save:
            if st.button("💾 Save", type="primary", use_container_width=True, disabled=not panel.is_editing):
                with st.spinner("Saving..."):
                    panel.save(text)
                st.rerun()
        with col_cancel:
            if st.button("↩️ Cancel", use_container_width=True, disabled=not panel.is_editing):
                with st.spinner("Reloading..."):
                    panel.cancel_editing()
                st.rerun()

    # Notification ----------------------------------------------------------------

    def render_notification(self) -> None:
        _notification_fragment(self)

    def render_notification_banner(self) -> None:
        notification = self.panel.notification
        if notification is None:
            return
        col_message, col_close = st.columns([12, 1])
        with col_message:
            if notification.severity == ERROR:
                st.error(notification.message)
            else:
                st.success(notification.message)
        with col_close:
            if st.button("✕", key="close_notification", help="Dismiss"):
                self.panel.close_notification()
                st.rerun(scope="fragment")


@st.fragment(run_every=1)
def _notification_fragment(ui: ConfigurationPanelUI) -> None:
    # Re-run every second so an expired notification disappears on its own.
    ui.render_notification_banner()
