"""level-dictionary — adaptive log-level dictionary stage.

This is the application entry point.  It builds the DictionaryPolicy from
settings, wraps it in the packet builder, and exposes it over HTTP.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from level_dictionary.api.dictionary import create_dictionary_router
from level_dictionary.config import settings
from level_dictionary.core.policy import DictionaryPolicy, PolicyConfig
from level_dictionary.transport.dictionary_builder import DictionaryPacketBuilder

# ── Logging ──────────────────────────────────────────────────────────────────

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

# ── Policy ───────────────────────────────────────────────────────────────────

policy = DictionaryPolicy(
    config=PolicyConfig.from_settings(settings),
    strict=settings.strict_validation,
)
builder = DictionaryPacketBuilder(policy)

logger.info(
    "Dictionary policy ready: window=%d ms, min_rate=%s/s, strict=%s",
    policy.config.window_size_millis,
    policy.config.min_rate_per_second,
    policy.strict,
)

# ── App ──────────────────────────────────────────────────────────────────────

app = FastAPI(
    title=settings.app_name,
    description="Adaptive log-level dictionary driven by the ERROR/WARN rate",
    version="0.1.0",
    debug=settings.debug,
)

# ── Routes ───────────────────────────────────────────────────────────────────

app.include_router(create_dictionary_router(builder))


# ── Health ───────────────────────────────────────────────────────────────────

@app.get("/health")
async def health() -> dict:
    return {
        "status": "ok",
        "window_size_millis": policy.config.window_size_millis,
        "min_rate_per_second": policy.config.min_rate_per_second,
        "strict_validation": policy.strict,
        "builder": builder.name,
    }
