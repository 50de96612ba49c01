# (c) Copyright Datacraft, 2026
"""Discovery of feature routers."""
import importlib
import logging
from pathlib import Path

from fastapi import APIRouter

logger = logging.getLogger(__name__)


def discover_routers(core_path: Path) -> list[tuple[APIRouter, str]]:
	"""Import ``features/<name>/router.py`` modules below ``core_path``.

	Returns (router, feature name) pairs sorted by feature name.
	"""
	found = []
	for router_file in sorted((core_path / "features").glob("*/router.py")):
		feature_name = router_file.parent.name
		module = importlib.import_module(f"orgchart.core.features.{feature_name}.router")
		router = getattr(module, "router", None)
		if not isinstance(router, APIRouter):
			logger.warning(f"Feature {feature_name} has no APIRouter named 'router'")
			continue
		logger.debug(f"Registered router of feature {feature_name}")
		found.append((router, feature_name))
	return found
