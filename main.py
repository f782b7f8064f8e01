"""VisaPilot - run the API with uvicorn."""

import uvicorn

from visapilot.config import settings


if __name__ == "__main__":
    uvicorn.run(
        "visapilot.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
    )
