from __future__ import annotations

import os

from landing_blueprint.api import create_app
from landing_blueprint.logging_config import setup_logging

# Environment configuration
ENVIRONMENT = os.getenv("ENVIRONMENT", "dev")
PROJECT_ID = os.getenv("PROJECT_ID")

# Setup logging
setup_logging(environment=ENVIRONMENT, project_id=PROJECT_ID)

# Fails fast when neither GEMINI_API_KEY nor PROJECT_ID is configured.
app = create_app()
