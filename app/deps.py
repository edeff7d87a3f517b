# app/deps.py
from fastapi import Request

from app.services import ExtractionClient, UploadHandler


def get_extraction_client(request: Request) -> ExtractionClient:
    return request.app.state.extraction_client


def get_upload_handler(request: Request) -> UploadHandler:
    return request.app.state.upload_handler
