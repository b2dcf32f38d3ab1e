import uvicorn

from app.core.observability import emit
from app.main import HOST, PORT, app


def main() -> None:
    emit("info", "server.start", f"Server running on http://{HOST}:{PORT}", None, __name__)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
