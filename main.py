# main.py

from uvicorn import run

from bloglist.configs import settings


def main() -> None:
    run(
        "bloglist.main:app",
        host="127.0.0.1",
        port=8000,
        log_level="info",
        reload=settings.DEBUG,
        workers=None if settings.DEBUG else 4,
    )


if __name__ == "__main__":
    main()
