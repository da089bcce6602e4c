#!/usr/bin/env python3
"""Direct launcher for the Configuration Panel.

Runs Streamlit on ``config_panel/Home.py`` from the project root.
"""

import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent.resolve()
home_page = project_root / "config_panel" / "Home.py"

if __name__ == "__main__":
    sys.exit(subprocess.run([
        sys.executable, "-m", "streamlit", "run",
        str(home_page),
        *sys.argv[1:],
    ]).returncode)
