import uvicorn

from barbershop.core.config import PORT


def main() -> None:
    uvicorn.run("barbershop.main:app", host="0.0.0.0", port=PORT, log_config=None)


if __name__ == "__main__":
    main()
