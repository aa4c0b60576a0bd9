import yaml
from fastapi import FastAPI
from seatlocker.infrastructure.database import Base, engine
from seatlocker.infrastructure.logging import get_logger, setup_logging
from seatlocker.presentation.routers import router

app = FastAPI()


# Use the contractual schema
def custom_openapi():
    from seatlocker.infrastructure.config import settings
    with open(settings.openapi_path) as f:
        return yaml.safe_load(f)


@app.on_event("startup")
def _configure_logging_on_startup() -> None:
    setup_logging()
    get_logger(__name__).info("application_starting", database=engine.url.render_as_string(hide_password=True))


app.openapi = custom_openapi
Base.metadata.create_all(bind=engine)
app.include_router(router)
