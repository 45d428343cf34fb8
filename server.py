"""Go To Market AI Orchestrator — Web Server.

FastAPI backend behind the intake form. Validates the posted product
context and returns the synthesized go-to-market plan.

Usage:
    python server.py
    # Then POST to http://localhost:8000/api/agent
"""

from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Body, FastAPI
from fastapi.responses import JSONResponse

import config
from pipeline import gtm_playbook as playbook
from pipeline.gtm_agent import GoToMarketAgent, PlanValidationError

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s v%s ready", config.APP_NAME, config.APP_VERSION)
    if not config.SAMPLE_INPUT_PATH.exists():
        logger.warning("Sample input not found at %s", config.SAMPLE_INPUT_PATH)
    yield


app = FastAPI(title=config.APP_NAME, version=config.APP_VERSION, lifespan=lifespan)

agent = GoToMarketAgent()


def _validation_error(missing: list[str]) -> JSONResponse:
    return JSONResponse(
        {
            "error": "validation_error",
            "message": "Missing required fields.",
            "missing": missing,
        },
        status_code=400,
    )


# ---------------------------------------------------------------------------
# Plan synthesis
# ---------------------------------------------------------------------------

@app.post("/api/agent")
async def api_agent(payload: dict[str, Any] = Body(...)):
    """Validate the intake and return the go-to-market plan."""
    try:
        plan = agent.run(payload)
    except PlanValidationError as e:
        return _validation_error(e.missing)
    return plan.to_payload()


# ---------------------------------------------------------------------------
# Form support
# ---------------------------------------------------------------------------

@app.get("/api/form-defaults")
async def api_form_defaults():
    """Initial form values plus the brand-voice and horizon pickers."""
    return {
        "defaults": dict(playbook.FORM_DEFAULTS),
        "brandVoicePresets": list(playbook.BRAND_VOICE_PRESETS),
        "launchHorizonPresets": list(playbook.LAUNCH_HORIZON_PRESETS),
    }


@app.get("/api/sample-input")
async def api_sample_input():
    """Return the bundled sample intake, or {} when it is missing."""
    path = config.SAMPLE_INPUT_PATH
    if path.exists():
        try:
            return json.loads(path.read_text("utf-8"))
        except json.JSONDecodeError as e:
            logger.warning("Sample input at %s is not valid JSON: %s", path, e)
    return {}


@app.get("/api/health")
async def api_health():
    return {
        "ok": True,
        "app": config.APP_NAME,
        "version": config.APP_VERSION,
    }


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    import uvicorn
    print(f"\n  {config.APP_NAME}")
    print(f"  http://localhost:{config.SERVER_PORT}\n")
    uvicorn.run(app, host=config.SERVER_HOST, port=config.SERVER_PORT, log_level="info")
