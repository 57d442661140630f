import os

if __name__ == "__main__":
    import uvicorn

    from sparkler.config import load_settings
    from sparkler.logging_config import configure_logging
    from sparkler.server import create_app

    configure_logging()
    settings = load_settings()
    open_studio = os.getenv("SPARKLER_STUDIO", "1").lower() in {"1", "true", "yes", "on"}
    print(f"[Sparkler] Listening on {settings.server_name}:{settings.port}")
    uvicorn.run(
        create_app(settings, mount_studio=open_studio),
        host=settings.server_name,
        port=settings.port,
    )
