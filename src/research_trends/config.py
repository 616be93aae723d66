"""Configuration settings for Research Trends."""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Paths
DATA_PATH = Path(os.getenv("RESEARCH_TRENDS_DATA", "data/papers.json"))
OUTPUT_DIR = Path(os.getenv("RESEARCH_TRENDS_OUTPUT", "research_output"))

# Logging
LOG_LEVEL = os.getenv("RESEARCH_TRENDS_LOG_LEVEL", "WARNING").upper()

# Dashboard
DASHBOARD_PORT = int(os.getenv("RESEARCH_TRENDS_DASHBOARD_PORT", "8501"))
