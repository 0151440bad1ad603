"""In-memory product catalog with a FastAPI front end."""
