# 📄 File: garden_assistant/modules/plant_assistant/presentation/api/v1/identification.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for plant photos: pick a photo, ask the AI what plant it is, check
# what was recognized, and get a ready-made message to share the plant with friends.
#
# 🧪 Purpose (Technical Summary):
# FastAPI identification endpoints over IdentificationFlow and ShareService with multipart
# image upload. Domain exceptions propagate to the application exception handler.
#
# 🔗 Dependencies:
# - FastAPI router, File/UploadFile (python-multipart), Depends
# - IdentificationFlow, ShareService, ReminderStore (via shared.core.dependencies)
# - assistant_schemas (request/response schemas)
#
# 🔄 Connected Modules / Calls From:
# - garden_assistant.api.v1.router (mounted at /identification)

"""
Identification API Endpoints

Endpoints:
- POST /image: Select an image (clears the chat and the current plant name)
- POST /analyze: Analyze the selected image
- POST /: Select and analyze in one call
- GET /: Current selection and identified plant
- GET /share: Share payload for the identified plant
"""

from fastapi import APIRouter, Depends, File, UploadFile, status

from garden_assistant.modules.plant_assistant.domain.models.chat import IdentificationResult
from garden_assistant.modules.plant_assistant.domain.services.identification_flow import (
    IdentificationFlow,
)
from garden_assistant.modules.plant_assistant.domain.services.share_service import ShareService
from garden_assistant.modules.plant_assistant.presentation.api.schemas.assistant_schemas import (
    IdentificationResponse,
    IdentificationStateResponse,
    ImageSelectionResponse,
    SharePayloadResponse,
)
from garden_assistant.modules.reminders.domain.services.reminder_store import ReminderStore
from garden_assistant.shared.core.dependencies import (
    get_identification_flow,
    get_reminder_store,
    get_share_service,
)
from garden_assistant.shared.core.exceptions import NotFoundError

identification_router = APIRouter()


def _identification_response(result: IdentificationResult, share_service: ShareService) -> IdentificationResponse:
    return IdentificationResponse(
        plant_name=result.plant_name,
        reply=result.first_reply,
        can_set_reminder=result.has_plant_name,
        can_share=share_service.build_payload(result.plant_name, result.first_reply) is not None,
    )


async def _select_upload(image: UploadFile, identification: IdentificationFlow) -> ImageSelectionResponse:
    content = await image.read()
    selection = identification.select_image(content, image.content_type, filename=image.filename)
    return ImageSelectionResponse(
        mime_type=selection.mime_type,
        size_bytes=selection.size,
        filename=selection.filename,
    )


@identification_router.post(
    "/image",
    response_model=ImageSelectionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Select a plant image",
    responses={
        400: {"description": "Not an image"},
        413: {"description": "Image too large"},
        422: {"description": "Empty upload"},
    },
)
async def select_image(
    image: UploadFile = File(..., description="Plant photo"),
    identification: IdentificationFlow = Depends(get_identification_flow),
) -> ImageSelectionResponse:
    return await _select_upload(image, identification)


@identification_router.post(
    "/analyze",
    response_model=IdentificationResponse,
    summary="Identify the plant in the selected image",
    responses={
        422: {"description": "No image selected"},
        502: {"description": "Model service failed; the selection is kept for retry"},
    },
)
async def analyze_selected_image(
    identification: IdentificationFlow = Depends(get_identification_flow),
    share_service: ShareService = Depends(get_share_service),
) -> IdentificationResponse:
    result = await identification.analyze_selected()
    return _identification_response(result, share_service)


@identification_router.post(
    "",
    response_model=IdentificationResponse,
    summary="Upload and identify a plant image",
)
async def upload_and_identify(
    image: UploadFile = File(..., description="Plant photo"),
    identification: IdentificationFlow = Depends(get_identification_flow),
    share_service: ShareService = Depends(get_share_service),
) -> IdentificationResponse:
    await _select_upload(image, identification)
    result = await identification.analyze_selected()
    return _identification_response(result, share_service)


@identification_router.get(
    "",
    response_model=IdentificationStateResponse,
    summary="Current identification state",
)
async def get_identification_state(
    identification: IdentificationFlow = Depends(get_identification_flow),
    store: ReminderStore = Depends(get_reminder_store),
) -> IdentificationStateResponse:
    selection = identification.selection
    return IdentificationStateResponse(
        has_selection=selection is not None,
        mime_type=selection.mime_type if selection else None,
        plant_name=identification.plant_name,
        has_reminder=store.has_reminder(identification.plant_name),
        is_analyzing=identification.is_analyzing,
    )


@identification_router.get(
    "/share",
    response_model=SharePayloadResponse,
    summary="Share text for the identified plant",
    responses={404: {"description": "No identified plant to share"}},
)
async def get_share_payload(
    identification: IdentificationFlow = Depends(get_identification_flow),
    share_service: ShareService = Depends(get_share_service),
) -> SharePayloadResponse:
    payload = share_service.build_payload(identification.plant_name, identification.first_reply)
    if payload is None:
        raise NotFoundError(
            "No identified plant to share",
            resource_type="share_payload",
        )
    return SharePayloadResponse.from_domain(payload)
