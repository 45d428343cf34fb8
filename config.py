"""Orchestrator configuration — server, logging, paths."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
ROOT_DIR = Path(__file__).parent
SAMPLE_INPUT_PATH = ROOT_DIR / os.getenv("SAMPLE_INPUT_PATH", "sample_input.json")

# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------
APP_NAME = os.getenv("APP_NAME", "Go To Market AI Orchestrator")
APP_VERSION = "1.0.0"

# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------
SERVER_HOST = os.getenv("SERVER_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("SERVER_PORT", "8000"))

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
