"""API routes for bundle import and export."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse

from flashdeck.application.learning.use_cases.transfer import (
    ExportBundleUseCase,
    ImportBundleUseCase,
)
from flashdeck.config import Settings
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.learning.services import ImportStrategy
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.learning.schemas import (
    ImportRequest,
    ImportResponse,
    ImportStatusResponse,
    RemoteImportRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["transfer"])

ImportUseCase = Depends(inject_use_case(container.import_bundle_use_case))
AppSettings = Depends(inject_use_case(container.settings))


@router.get("/export", status_code=status.HTTP_200_OK)
def export_bundle(
    deck_id: str | None = Query(None, description="Export only this deck and its cards"),
    use_case: ExportBundleUseCase = Depends(inject_use_case(container.export_bundle_use_case)),
) -> JSONResponse:
    """
    Download the collection, or one deck, as a JSON bundle.

    The suggested filename is sent in Content-Disposition.
    """
    try:
        bundle, filename = use_case.export_bundle(deck_id)
        return JSONResponse(
            content=bundle,
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to export bundle: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/import", response_model=ImportResponse, status_code=status.HTTP_200_OK)
def import_bundle(
    request: ImportRequest,
    use_case: ImportBundleUseCase = ImportUseCase,
    settings: Settings = AppSettings,
) -> ImportResponse:
    """
    Import an uploaded bundle.

    Raises:
        HTTPException: 422 with a field-level message if the bundle is
            malformed; nothing is applied in that case
    """
    strategy = request.strategy or ImportStrategy(settings.DEFAULT_IMPORT_STRATEGY)
    try:
        return ImportResponse.from_domain(use_case.import_payload(request.bundle, strategy))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to import bundle: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/import/remote", response_model=ImportResponse, status_code=status.HTTP_200_OK)
async def import_remote_bundle(
    request: RemoteImportRequest,
    use_case: ImportBundleUseCase = ImportUseCase,
    settings: Settings = AppSettings,
) -> ImportResponse:
    """
    Download a bundle from a URL and import it.

    Raises:
        HTTPException: 502 if the download fails or times out, 422 if the
            bundle is malformed
    """
    strategy = request.strategy or ImportStrategy(settings.DEFAULT_IMPORT_STRATEGY)
    try:
        outcome = await use_case.import_from_url(request.url, strategy, request.timeout)
        return ImportResponse.from_domain(outcome)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to import bundle from {request.url}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/import/status", response_model=ImportStatusResponse, status_code=status.HTTP_200_OK)
def get_import_status(use_case: ImportBundleUseCase = ImportUseCase) -> ImportStatusResponse:
    """State of the most recent import attempt."""
    return ImportStatusResponse.from_domain(use_case.last_outcome)
