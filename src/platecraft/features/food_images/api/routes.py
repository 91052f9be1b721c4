from __future__ import annotations
import logging
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from .schemas import DishImagePayload
from platecraft.features.food_images.app.use_cases import check_auth, generate_food_image, preview_prompt
from platecraft.features.food_images.infra.vertex_imagen import ImagenClient

log = logging.getLogger("food_images.api")

router = APIRouter(tags=["food-images"])

GENERATE_FAILED = "Failed to generate image"


def get_imagen_client(request: Request) -> ImagenClient:
    return request.app.state.imagen_client


def get_credentials(request: Request):
    return request.app.state.credentials


def _fail(status_code: int, error: str, details=None) -> JSONResponse:
    body = {"success": False, "error": error}
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body)


def _missing_dish_name(payload: DishImagePayload) -> bool:
    return not (payload.dishName or "").strip()


@router.post("/generate-food-image")
async def create_food_image(payload: DishImagePayload, imagen: ImagenClient = Depends(get_imagen_client)):
    if _missing_dish_name(payload):
        return _fail(400, "Dish name is required")
    try:
        return await generate_food_image(
            imagen, payload.dishName.strip(), payload.description, payload.cuisineType, payload.plating
        )
    except Exception as e:
        log.error("Error generating food image", exc_info=True)
        return _fail(500, f"{GENERATE_FAILED}: {e}", getattr(e, "details", str(e)))


@router.options("/generate-food-image")
async def food_image_options():
    return Response(status_code=200)


@router.api_route("/generate-food-image", methods=["GET", "PUT", "PATCH", "DELETE"])
async def food_image_method_not_allowed():
    return _fail(405, "Method not allowed")


@router.post("/food-image-prompt")
async def create_food_image_prompt(payload: DishImagePayload):
    if _missing_dish_name(payload):
        return _fail(400, "Dish name is required")
    return preview_prompt(payload.dishName.strip(), payload.description, payload.cuisineType, payload.plating)


@router.get("/test-auth")
async def auth_check(credentials=Depends(get_credentials)):
    try:
        return await check_auth(credentials)
    except Exception as e:
        log.error("Auth test failed", exc_info=True)
        return _fail(500, str(e))
