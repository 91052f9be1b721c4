from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

from platecraft.features.food_images.domain.categories import classify
from platecraft.features.food_images.domain.prompts import (
    DEFAULT_CUISINE_TYPE,
    DEFAULT_PLATING,
    DishRequest,
    build_food_prompt,
    compose,
)
from platecraft.features.food_images.infra.vertex_imagen import ImagenClient, to_data_url

log = logging.getLogger("food_images")


def preview_prompt(
    dish_name: str,
    description: Optional[str] = None,
    cuisine_type: Optional[str] = None,
    plating: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build the prompt for a dish without calling the image model.
    """
    category = classify(dish_name, description)
    request = DishRequest(
        dish_name=dish_name,
        description=description,
        cuisine_type=cuisine_type or DEFAULT_CUISINE_TYPE,
        plating=plating or DEFAULT_PLATING,
    )
    return {
        "success": True,
        "dishName": dish_name,
        "category": category.value,
        "prompt": compose(request, category),
    }


async def generate_food_image(
    imagen: ImagenClient,
    dish_name: str,
    description: Optional[str] = None,
    cuisine_type: Optional[str] = None,
    plating: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Compose the photography prompt for a dish, render it with Imagen and
    return the image as a PNG data URL.
    """
    log.info("Generating image for: %s", dish_name)
    prompt = build_food_prompt(dish_name, description, cuisine_type, plating)
    log.debug("Generated prompt: %s", prompt)

    image_b64 = await imagen.predict(prompt)
    log.info("Image generated successfully for: %s", dish_name)
    return {
        "success": True,
        "imageUrl": to_data_url(image_b64),
        "dishName": dish_name,
        "prompt": prompt,
    }


async def check_auth(credentials) -> Dict[str, Any]:
    await asyncio.to_thread(credentials.access_token)
    project_id = await asyncio.to_thread(credentials.project_id)
    return {
        "success": True,
        "projectId": project_id,
        "message": "Authentication successful",
    }
