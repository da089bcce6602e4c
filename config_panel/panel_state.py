"""View state and controller for the configuration panel.

``ConfigurationPanel`` owns every mutable field the page shows. The page never
writes to it directly; it calls the handlers below, which run the dependent
loads in a fixed order:

* selecting a category clears the selection and loads that category's names;
* a successful names load selects the first name and loads its content;
* selecting a name drops edit mode and loads that name's content.

Each load is tagged with a generation number. A response that arrives after a
newer load of the same stage was started is discarded, so a slow answer for a
category the user already left cannot overwrite the current view.
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from .api_client import ContentValidationError, PanelApiClient, PanelApiError
from .notifications import ERROR, SUCCESS, Notification, NotificationCenter
from .resource_types import RESOURCE_TYPES, CategoryLike, ResourceType, category_at, resolve_category

logger = logging.getLogger(__name__)

NAMES_LOAD_FAILED = "Failed to load configuration list"
CONTENT_LOAD_FAILED = "Failed to load configuration content"
SAVE_SUCCEEDED = "Configuration saved"
SAVE_FAILED = "Failed to save configuration"
INVALID_JSON = "Configuration content is not valid JSON"

ADD_NOT_IMPLEMENTED = "Adding a configuration is not implemented yet"
DELETE_NOT_IMPLEMENTED = "Deleting configuration {name} is not implemented yet"
DELETE_NEEDS_SELECTION = "Select a configuration to delete first"


def format_content(data: Any) -> str:
    """Pretty-print a fetched document with two-space indentation."""
    return json.dumps(data, indent=2, ensure_ascii=False)


@dataclass
class ViewState:
    """Read-only copy of what the panel currently shows."""

    active_category_index: int = 0
    available_names: List[str] = field(default_factory=list)
    selected_name: Optional[str] = None
    edited_content: str = ""
    is_loading: bool = False
    is_editing: bool = False
    notification: Optional[Notification] = None

    @property
    def active_category(self) -> ResourceType:
        return RESOURCE_TYPES[self.active_category_index]


class ConfigurationPanel:
    """Category selection, loading, editing and saving for one page session."""

    def __init__(self, client: PanelApiClient, notifications: Optional[NotificationCenter] = None) -> None:
        self.client = client
        self.notifications = notifications or NotificationCenter()

        self.active_category_index = 0
        self.available_names: List[str] = []
        self.selected_name: Optional[str] = None
        self.edited_content = ""
        self.is_editing = False
        # Last successful names result per category
        self.loaded_names: Dict[ResourceType, List[str]] = {}

        self._outstanding = 0
        self._names_generation = 0
        self._content_generation = 0

    # Derived state -----------------------------------------------------------

    @property
    def active_category(self) -> ResourceType:
        return RESOURCE_TYPES[self.active_category_index]

    @property
    def is_loading(self) -> bool:
        return self._outstanding > 0

    @property
    def content_revision(self) -> int:
        """Changes whenever the editor text is replaced by a load or a clear."""
        return self._content_generation

    @property
    def notification(self) -> Optional[Notification]:
        return self.notifications.current

    def snapshot(self) -> ViewState:
        return ViewState(
            active_category_index=self.active_category_index,
            available_names=list(self.available_names),
            selected_name=self.selected_name,
            edited_content=self.edited_content,
            is_loading=self.is_loading,
            is_editing=self.is_editing,
            notification=self.notification,
        )

    # Category selector -------------------------------------------------------

    def mount(self) -> None:
        """Run the initial load for the first category."""
        self._category_changed()

    def select_category(self, index: int) -> None:
        category_at(index)
        self.active_category_index = index
        self.selected_name = None
        self._category_changed()

    def _category_changed(self) -> None:
        # The editor belongs to the previous selection; drop it before loading.
        self.is_editing = False
        self._clear_content()
        self.load_names(self.active_category)

    # Loaders -----------------------------------------------------------------

    def load_names(self, category: Optional[CategoryLike] = None) -> None:
        """Load the names of ``category`` (the active one by default).

        Only a load for the active category touches the visible list and
        selection; any load refreshes ``loaded_names``.
        """
        category = resolve_category(category) if category is not None else self.active_category
        self._names_generation += 1
        generation = self._names_generation

        with self._loading():
            try:
                names = self.client.list_names(category)
            except PanelApiError:
                logger.exception("Failed to fetch config names for %s", category.key)
                self.loaded_names.pop(category, None)
                if not self._names_current(generation, category):
                    return
                self.available_names = []
                self.selected_name = None
                self.notifications.notify(NAMES_LOAD_FAILED, ERROR)
            else:
                self.loaded_names[category] = list(names)
                if not self._names_current(generation, category):
                    return
                self.available_names = list(names)
                self.selected_name = names[0] if names else None

        self._selection_changed()

    def load_content(self, category: CategoryLike, name: Optional[str]) -> None:
        """Load ``name`` into the editor as pretty-printed JSON."""
        if name is None:
            self._clear_content()
            return
        category = resolve_category(category)
        self._content_generation += 1
        generation = self._content_generation

        with self._loading():
            try:
                data = self.client.get_content(category, name)
            except PanelApiError:
                logger.exception("Failed to fetch config content %s/%s", category.key, name)
                if generation != self._content_generation:
                    return
                self.edited_content = ""
                self.notifications.notify(CONTENT_LOAD_FAILED, ERROR)
                return
            if generation != self._content_generation:
                logger.debug("Discarding stale content for %s/%s", category.key, name)
                return
            self.edited_content = format_content(data)

    def _selection_changed(self) -> None:
        if self.selected_name is None:
            self._clear_content()
        else:
            self.load_content(self.active_category, self.selected_name)

    def _clear_content(self) -> None:
        # Any content load still in flight is now stale.
        self._content_generation += 1
        self.edited_content = ""

    def _names_current(self, generation: int, category: ResourceType) -> bool:
        if generation == self._names_generation and category is self.active_category:
            return True
        logger.debug("Discarding stale names for %s", category.key)
        return False

    @contextmanager
    def _loading(self) -> Iterator[None]:
        self._outstanding += 1
        try:
            yield
        finally:
            self._outstanding -= 1

    # Editor ------------------------------------------------------------------

    def select_name(self, name: str) -> None:
        """Select ``name``, discarding any unsaved edits without asking."""
        if name not in self.available_names:
            raise ValueError(f"{name!r} is not a {self.active_category.key} configuration")
        self.is_editing = False
        self.selected_name = name
        self._selection_changed()

    def start_editing(self) -> None:
        if self.selected_name is not None:
            self.is_editing = True

    def set_content(self, text: str) -> None:
        self.edited_content = text
        if self.selected_name is not None:
            self.is_editing = True

    def cancel_editing(self) -> None:
        """Leave edit mode and reload the stored document."""
        self.is_editing = False
        self._selection_changed()

    def save(self, content: Optional[str] = None) -> bool:
        """Post the editor text for the selected name.

        Without a selection this does nothing. On failure edit mode is left as
        it was so the user can fix the text and retry.
        """
        if self.selected_name is None:
            return False
        if content is not None:
            self.edited_content = content
        category, name = self.active_category, self.selected_name

        with self._loading():
            try:
                self.client.save_content(category, name, self.edited_content)
            except ContentValidationError:
                logger.exception("Refusing to save %s/%s", category.key, name)
                self.notifications.notify(INVALID_JSON, ERROR)
                return False
            except PanelApiError:
                logger.exception("Failed to save config %s/%s", category.key, name)
                self.notifications.notify(SAVE_FAILED, ERROR)
                return False

        logger.info("Saved config %s/%s", category.key, name)
        self.notifications.notify(SAVE_SUCCEEDED, SUCCESS)
        self.is_editing = False
        return True

    # Placeholders --------------------------------------------------------------

    def add_config(self) -> str:
        # TODO: prompt for a name and open an empty editor once the backend can create resources
        return ADD_NOT_IMPLEMENTED

    def delete_config(self) -> str:
        if self.selected_name is None:
            return DELETE_NEEDS_SELECTION
        return DELETE_NOT_IMPLEMENTED.format(name=self.selected_name)

    # Notifications -------------------------------------------------------------

    def close_notification(self, reason: Optional[str] = None) -> bool:
        return self.notifications.close(reason)
