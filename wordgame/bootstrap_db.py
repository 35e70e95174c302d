"""
Dev convenience: create the games/guesses tables if they don't exist.
Call this at startup in local/dev only.
"""

from . import models  # noqa: F401  (registers the tables on Base.metadata)
from .db import Base, engine

def create_all() -> None:
    Base.metadata.create_all(bind=engine)
