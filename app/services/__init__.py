from .extraction import ExtractionClient
from .uploads import StoredUpload, UploadHandler

__all__ = ["ExtractionClient", "StoredUpload", "UploadHandler"]
