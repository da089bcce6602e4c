#!/usr/bin/env python3
"""Print the configuration names the backend serves for each resource type."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from config_panel.api_client import PanelApiClient, PanelApiError
from config_panel.resource_types import RESOURCE_TYPES, ResourceType


def main(base_url: Optional[str] = None, category: Optional[str] = None, client: Optional[PanelApiClient] = None) -> int:
    categories: List[ResourceType] = (
        [ResourceType.from_key(category)] if category else list(RESOURCE_TYPES)
    )
    client = client or PanelApiClient(base_url)
    failures = 0
    with client:
        for resource_type in categories:
            try:
                names = client.list_names(resource_type)
            except PanelApiError as exc:
                failures += 1
                print(f"{resource_type.key}: failed ({exc})")
                continue
            print(f"{resource_type.key} ({resource_type.label}): {len(names)}")
            for name in names:
                print(f"  • {name}")
    return 1 if failures else 0


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='List configuration names per resource type.')
    parser.add_argument('--base-url', default=None, help='Backend base URL (defaults to CONFIG_PANEL_API_URL)')
    parser.add_argument(
        '--category',
        choices=[resource_type.key for resource_type in RESOURCE_TYPES],
        help='Only list this resource type',
    )
    args = parser.parse_args()
    raise SystemExit(main(base_url=args.base_url, category=args.category))
