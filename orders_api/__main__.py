"""
Run the API with uvicorn: python -m orders_api
"""
import uvicorn

from orders_api.core.config import settings


if __name__ == "__main__":
    uvicorn.run("orders_api.main:app", host=settings.API_HOST, port=settings.API_PORT, log_level=settings.LOG_LEVEL.lower())
