import logging
import os
from contextlib import asynccontextmanager
from logging.config import dictConfig
from pathlib import Path

import yaml
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from orgchart.core.config import get_settings
from orgchart.core.db.engine import get_engine
from orgchart.core.errors import register_exception_handlers
from orgchart.core.router_loader import discover_routers
from orgchart.core.version import __version__

logger = logging.getLogger(__name__)
config = get_settings()
prefix = config.api_prefix


@asynccontextmanager
async def lifespan(app: FastAPI):
	"""Application lifespan handler for startup/shutdown events."""
	logger.info("Starting orgchart API server...")

	yield

	logger.info("Shutting down orgchart API server...")
	await get_engine().dispose()


app = FastAPI(
	title="Employees and Departments REST API",
	version=__version__,
	lifespan=lifespan,
)

app.add_middleware(
	CORSMiddleware,
	allow_origins=config.cors_origins,
	allow_credentials=True,
	allow_methods=["*"],
	allow_headers=["*"],
)

register_exception_handlers(app)

# Auto-discover and register all feature routers
features_path = Path(__file__).parent / "core"
routers = discover_routers(features_path)

for router, feature_name in routers:
	app.include_router(router, prefix=prefix)


logging_config_path = Path(
	os.environ.get("ORGCHART__MAIN__LOGGING_CFG", config.log_config or "")
)

if logging_config_path.exists() and logging_config_path.is_file():
	with open(logging_config_path, "r") as stream:
		logging_config = yaml.load(stream, Loader=yaml.FullLoader)

	dictConfig(logging_config)
