"""
Main entry point for the chat room server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn chatroom.fastapi_app:app --host 0.0.0.0 --port 5000 --reload
"""

import uvicorn

# Loads .env on import
from chatroom.config.settings import Config

if __name__ == "__main__":
    print(f"Starting chat room server in {Config.APP_ENV} mode...")
    print(f"Server running on http://{Config.HOST}:{Config.PORT}")
    print(f"API docs available at http://{Config.HOST}:{Config.PORT}/docs")

    uvicorn.run(
        "chatroom.fastapi_app:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=Config.DEBUG,
        log_level="info" if Config.DEBUG else "warning",
    )
