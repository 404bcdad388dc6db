import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from errors import MSG_VALIDATION_FAILED, DeskError, describe_errors
from api.loans import router as loans_router
from api.sanctions import router as sanctions_router
from scripts.seed_sample_data import seed_sample_data
from services.record_store import RecordStore

logging.basicConfig(level=settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = RecordStore(settings.database_url, echo=settings.debug)
    await store.init()
    if settings.seed_sample_data:
        await seed_sample_data(store)
    app.state.store = store
    try:
        yield
    finally:
        await store.close()


app = FastAPI(
    title=settings.app_name,
    description="Gold loan support desk: loan details and manual approval overrides",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DeskError)
async def desk_error_handler(request: Request, exc: DeskError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": MSG_VALIDATION_FAILED, "errors": describe_errors(exc.errors())},
    )


app.include_router(loans_router)
app.include_router(sanctions_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
