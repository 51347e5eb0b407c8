"""
MoodTunes REST API Server

Run the server with:
    python api.py

Or with uvicorn directly:
    uvicorn api:app --reload --host 0.0.0.0 --port 8000

Set MOODTUNES_CONFIG to use a configuration file other than the packaged default.
"""
from moodtunes.api.app import create_app
from moodtunes.api.dependencies import get_app_state


app = create_app()


@app.on_event("startup")
async def startup_event():
    """Initialize the application on startup."""
    state = get_app_state()
    if len(state.catalog) > 0:
        state.logger.info("MoodTunes API is ready", tracks_loaded=len(state.catalog))
    else:
        state.logger.warning(
            "Catalog is empty; /generate-track will answer 503",
            catalog_path=state.config.catalog.path
        )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
