"""
Infrastructure layer.

SQLAlchemy repositories, FastAPI routers and other adapters.
"""
