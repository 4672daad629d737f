import uvicorn

from ebookstore.config import settings


def main():
    uvicorn.run("ebookstore.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
