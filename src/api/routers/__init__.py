"""One FastAPI router per Carriage entity, all mounted under ``/api``."""
