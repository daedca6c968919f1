"""
Main entrypoint: run the reputation API with uvicorn.

Env: API_HOST, API_PORT, ETH_RPC_URL / INFURA_API_KEY, ALCHEMY_API_KEY,
SNAPSHOT_URL, SCORING_SERVICE_URL, AGGREGATION_TIMEOUT_SEC, LOG_LEVEL.

Equivalent: uvicorn backend_reputation.api_server.app:app --host 0.0.0.0 --port 30008
"""

import os

# Configure structured JSON logging before other imports that may log
from backend_reputation.reputation_logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Run the FastAPI server in the main thread."""
    api_host = os.getenv("API_HOST", "0.0.0.0").strip()
    api_port = int(os.getenv("API_PORT", "30008").strip() or "30008")

    from backend_reputation.api_server.app import app
    import uvicorn

    logger.info("main_server_starting", host=api_host, port=api_port)
    uvicorn.run(app, host=api_host, port=api_port, log_level=os.getenv("LOG_LEVEL", "info").lower())


if __name__ == "__main__":
    main()
