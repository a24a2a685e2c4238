from functools import lru_cache
from typing import List

from fastapi import APIRouter, Depends, HTTPException
import logging

from ..core.config import get_settings
from ..core.errors import FormatError
from ..core.repository import RecipeRepository
from ..models.recipe import Recipe

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1")


@lru_cache()
def get_repository() -> RecipeRepository:
    """Return the process-wide repository for the configured recipe file."""
    settings = get_settings()
    return RecipeRepository(settings.recipes_file)


def _raise_for(error: Exception) -> None:
    status = 422 if isinstance(error, FormatError) else 500
    raise HTTPException(status_code=status, detail=str(error))


@router.get("/recipes", response_model=List[Recipe])
def list_recipes(repository: RecipeRepository = Depends(get_repository)):
    return repository.get_all()


@router.get("/recipes/status")
def recipes_status(repository: RecipeRepository = Depends(get_repository)):
    return {
        "count": len(repository),
        "is_modified": repository.is_modified,
        "path": str(repository.path),
    }


@router.get("/recipes/{index}", response_model=Recipe)
def get_recipe(index: int, repository: RecipeRepository = Depends(get_repository)):
    try:
        return repository.get_at(index)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/recipes/{index}", status_code=204)
def delete_recipe(index: int, repository: RecipeRepository = Depends(get_repository)):
    try:
        repository.delete_at(index)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    log.info(f"🗑️ Recipe {index} deleted, unsaved changes pending")


@router.post("/recipes/load")
def load_recipes(repository: RecipeRepository = Depends(get_repository)):
    result = repository.load()
    if not result.ok:
        _raise_for(result.error)
    return {"recipes": result.recipes}


@router.post("/recipes/save")
def save_recipes(repository: RecipeRepository = Depends(get_repository)):
    result = repository.save()
    if not result.ok:
        _raise_for(result.error)
    return {"written": result.written, "recipes": result.recipes}
