"""Vercel serverless entry point for Stylesweep."""
import sys
import os

# Add src to path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from stylesweep.config import StylesweepConfig
from stylesweep.web.app import create_app

app = create_app(config=StylesweepConfig.from_env())
