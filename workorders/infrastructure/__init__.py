"""Infrastructure layer: persistence (SQLAlchemy) and security (JWT, bcrypt)."""
