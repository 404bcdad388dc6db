from fastapi import Request

from services.record_store import RecordStore


def get_store(request: Request) -> RecordStore:
    """The store built by the app lifespan."""
    return request.app.state.store
