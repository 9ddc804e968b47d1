import uvicorn

from wordmonster.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "wordmonster.app:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
