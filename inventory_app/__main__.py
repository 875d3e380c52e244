import uvicorn

from inventory_app.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "inventory_app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
    )


if __name__ == "__main__":
    main()
