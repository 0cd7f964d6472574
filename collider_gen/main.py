"""FastAPI app factory.

    uvicorn collider_gen.main:app
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv

# .env must be in os.environ before Settings is instantiated at import time
load_dotenv()

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from collider_gen import __version__  # noqa: E402
from collider_gen.config import settings  # noqa: E402
from collider_gen.engine.registry import get_registry  # noqa: E402

logging.basicConfig(
    level=getattr(logging, settings.collider_gen_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    # Importing the builders package registers every shape kind
    import collider_gen.engine.builders  # noqa: F401
    from collider_gen.api.router import api_router

    app = FastAPI(
        title="collider-gen",
        description="Collision geometry from sprite transparency",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.include_router(api_router)

    logger.info(
        "collider-gen %s (%s): %d shape builders, max_workers=%s",
        __version__,
        settings.collider_gen_env,
        get_registry().count,
        settings.max_workers,
    )
    return app


app = create_app()
