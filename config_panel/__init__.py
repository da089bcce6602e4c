"""Top-level package for the Configuration Panel.

A browser page for listing, viewing and editing the JSON configuration
resources served by the configuration backend. The primary modules are:

* ``resource_types`` - the fixed list of resource categories
* ``api_client`` - the HTTP client for the backend endpoints
* ``panel_state`` - the view state and the handlers that change it
* ``app`` - the Streamlit page that ties everything together

To run the panel from the command line you can execute:

```bash
streamlit run config_panel/Home.py
```
"""

from .api_client import PanelApiClient  # noqa: F401  # re-exported for convenience
from .panel_state import ConfigurationPanel, ViewState  # noqa: F401
from .resource_types import RESOURCE_TYPES, ResourceType  # noqa: F401

__all__ = ["PanelApiClient", "ConfigurationPanel", "ViewState", "RESOURCE_TYPES", "ResourceType"]
