import argparse
import uvicorn
from config import ApplicationConfig
from src.api.app import create_app

app = create_app(ApplicationConfig)


def main():
    parser = argparse.ArgumentParser(description="Invoicing API server")
    parser.add_argument("--host", default=ApplicationConfig.API_HOST, help="Bind address")
    parser.add_argument("--port", type=int, default=ApplicationConfig.API_PORT, help="Bind port")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    uvicorn.run(
        "api:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=ApplicationConfig.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
