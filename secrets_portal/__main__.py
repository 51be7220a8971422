# secrets_portal/__main__.py

import uvicorn


def main() -> None:
    uvicorn.run("secrets_portal.main:app", host="0.0.0.0", port=3000)


if __name__ == "__main__":
    main()
