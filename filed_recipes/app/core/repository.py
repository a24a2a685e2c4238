"""
File-backed recipe collection.

The repository owns the only list of recipes. Callers get deep copies, so
nothing they do to a returned ``Recipe`` reaches the stored one. Loading and
saving never raise for file or format problems: the outcome comes back as a
``LoadResult`` / ``SaveResult`` and is logged, and the caller decides what to
do with it.
"""

import logging
import threading
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from ..models.recipe import Recipe
from ..services.recipe_parser import RecipeParser
from .errors import FormatError, RecipeNotFoundError
from .events import ChangeSignal

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    recipes: int = 0
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


@dataclass(frozen=True)
class SaveResult:
    written: bool = False
    recipes: int = 0
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


class RecipeRepository:
    """Holder for recipes read from and written to a single text file."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path).resolve()
        self._recipes: List[Recipe] = []
        self._is_modified = False
        self._lock = threading.RLock()
        self.changed = ChangeSignal()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_modified(self) -> bool:
        """True when the collection has changed since it was last loaded or saved."""
        return self._is_modified

    def __len__(self) -> int:
        return len(self._recipes)

    def get_all(self) -> List[Recipe]:
        with self._lock:
            return [recipe.clone() for recipe in self._recipes]

    def get_at(self, index: int) -> Recipe:
        with self._lock:
            self._check_index(index)
            return self._recipes[index].clone()

    def delete(self, recipe: Union[Recipe, int, None]) -> None:
        """
        Delete a recipe.

        Accepts a stored recipe, a copy from ``get_all``/``get_at`` or an
        index. Copies are matched by their key first and by content after
        that, so a recipe built by hand with the same name, ingredients and
        instructions deletes the stored one too.

        Raises:
            IndexError: if an index is out of range.
            RecipeNotFoundError: if the recipe matches nothing stored.
        """
        if isinstance(recipe, int) and not isinstance(recipe, bool):
            self.delete_at(recipe)
            return

        with self._lock:
            index = self._resolve(recipe)
            self._remove(index)

    def delete_at(self, index: int) -> None:
        with self._lock:
            self._check_index(index)
            self._remove(index)

    def load(self) -> LoadResult:
        with self._lock:
            try:
                with open(self._path, "r", encoding="utf-8-sig", newline="") as f:
                    raw = f.read()
                parsed = RecipeParser.parse(raw)
            except (OSError, UnicodeDecodeError, FormatError) as e:
                log.error(f"Failed to load recipes from {self._path}: {e}")
                return LoadResult(error=e)

            for recipe in parsed:
                recipe.key = uuid.uuid4().hex
            self._recipes = sorted(parsed, key=lambda r: r.name)
            self._is_modified = False
            log.info(f"Loaded {len(self._recipes)} recipe(s) from {self._path}")

            self.changed.emit()
            return LoadResult(recipes=len(self._recipes))

    def save(self) -> SaveResult:
        with self._lock:
            if not self._is_modified:
                log.debug("Recipes unchanged, nothing to save")
                return SaveResult()

            try:
                # Serialize before opening so a bad record never truncates the file.
                text = RecipeParser.serialize(self._recipes)
                with open(self._path, "w", encoding="utf-8", newline="") as f:
                    f.write(text)
            except (OSError, FormatError) as e:
                log.error(f"Failed to save recipes to {self._path}: {e}")
                return SaveResult(error=e)

            self._is_modified = False
            log.info(f"Saved {len(self._recipes)} recipe(s) to {self._path}")
            return SaveResult(written=True, recipes=len(self._recipes))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._recipes):
            raise IndexError(f"recipe index {index} out of range (0..{len(self._recipes) - 1})")

    def _resolve(self, recipe: Optional[Recipe]) -> int:
        if not isinstance(recipe, Recipe):
            raise RecipeNotFoundError()

        for i, stored in enumerate(self._recipes):
            if stored is recipe:
                return i

        if recipe.key is not None:
            for i, stored in enumerate(self._recipes):
                if stored.key == recipe.key:
                    return i

        for i, stored in enumerate(self._recipes):
            if stored == recipe:
                return i

        raise RecipeNotFoundError(recipe.name)

    def _remove(self, index: int) -> None:
        removed = self._recipes.pop(index)
        self._is_modified = True
        log.info(f"Deleted recipe '{removed.name}'")
        self.changed.emit()
