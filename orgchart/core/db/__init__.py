# (c) Copyright Datacraft, 2026
from .base import Base
from .engine import get_db

__all__ = [
	"Base",
	"get_db",
]
