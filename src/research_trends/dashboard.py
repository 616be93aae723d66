"""
Research Trends Dashboard
=========================

Launches the interactive Streamlit dashboard over a paper corpus.
"""

import argparse
import os
import sys

from research_trends import config


def run_dashboard() -> None:
    """Launch the Streamlit dashboard."""
    parser = argparse.ArgumentParser(
        prog="research-trends-dashboard",
        description="Launch the Research Trends interactive dashboard"
    )
    parser.add_argument(
        "--data", "-d",
        type=str,
        default=str(config.DATA_PATH),
        help="Paper corpus JSON file"
    )
    parser.add_argument(
        "--port", "-p",
        type=int,
        default=config.DASHBOARD_PORT,
        help="Port to run the dashboard on"
    )

    args = parser.parse_args()

    try:
        import streamlit.web.cli as stcli
    except ImportError:
        print("Error: streamlit is not installed.")
        print("Install it with: pip install research-trends[dashboard]")
        sys.exit(1)

    dashboard_file = os.path.join(os.path.dirname(__file__), "_dashboard_app.py")

    sys.argv = [
        "streamlit", "run",
        dashboard_file,
        "--server.port", str(args.port),
        "--",
        "--data", args.data
    ]

    stcli.main()


if __name__ == "__main__":
    run_dashboard()
