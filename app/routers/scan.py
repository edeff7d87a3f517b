import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, File, UploadFile

from app.deps import get_extraction_client, get_upload_handler
from app.errors import CardScannerError, ExtractionError
from app.normalizers import normalize_response
from app.services import ExtractionClient, UploadHandler

log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="/api", tags=["scan"])


@router.post("/scan-cards")
def scan_cards(
    image: Optional[UploadFile] = File(None),
    uploads: UploadHandler = Depends(get_upload_handler),
    extractor: ExtractionClient = Depends(get_extraction_client),
) -> Dict[str, Any]:
    """
    Upload one image and get back the business cards found in it.

    Flow:
        upload checks -> vision model -> normalizer

    Returns:
        {
          "success": True,
          "cards": [ {name, position, email, phone, companyName,
                      companyAddress, category}, ... ],
          "count": <len(cards)>,
          "rawResponse": <model text, kept even when nothing parsed>
        }
    """
    stored = uploads.save(image)  # ValidationError -> 400
    try:
        raw = extractor.extract(stored.data, stored.content_type)
        result = normalize_response(raw)
    except CardScannerError:
        raise
    except Exception as e:
        log.exception("scan failed for %s", stored.filename)
        raise ExtractionError("Business card recognition failed", str(e)) from e
    finally:
        uploads.discard(stored)

    if not result.cards:
        log.warning("no cards parsed from model output for %s", stored.filename)
    return {
        "success": True,
        "cards": result.cards,
        "count": len(result.cards),
        "rawResponse": result.raw_text,
    }
