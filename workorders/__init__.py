"""Work order tracking service (FastAPI + SQLAlchemy)."""

__version__ = "1.0.0"
