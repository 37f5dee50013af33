"""FastAPI application entry - Markdown to Notion blocks."""

from . import config
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api.routes import router
from .logging_config import configure_logging

configure_logging()

app = FastAPI(
    title="Markdown to Notion",
    description="Convert Markdown text into Notion API blocks",
    version=__version__,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(router)


@app.get("/")
async def root():
    return {"service": "md-to-notion", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT, log_config=None)
