from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import List


@dataclass
class RecipeNutrition:
    """Free-text nutrition facts, exactly as exported."""

    serving: str = ""
    calories: str = ""
    total_fat: str = ""
    saturated_fat: str = ""
    sodium: str = ""
    total_carbohydrate: str = ""
    dietary_fiber: str = ""
    sugars: str = ""
    protein: str = ""


@dataclass
class RecipeMetadata:
    uuid: str = ""
    favorited: bool = False
    rating: int = 0
    source: str = ""
    category_list: List[str] = field(default_factory=list)
    collection_list: List[str] = field(default_factory=list)
    course_list: List[str] = field(default_factory=list)
    recipe_yield: str = ""
    cook_time: timedelta = field(default_factory=timedelta)
    prep_time: timedelta = field(default_factory=timedelta)


@dataclass
class Recipe:
    """Structured representation of one exported recipe."""

    title: str = ""
    metadata: RecipeMetadata = field(default_factory=RecipeMetadata)
    nutrition: RecipeNutrition = field(default_factory=RecipeNutrition)
    photo_paths: List[str] = field(default_factory=list)
    ingredient_lines: List[str] = field(default_factory=list)
    instruction_lines: List[str] = field(default_factory=list)
    notes_lines: List[str] = field(default_factory=list)

    @property
    def output_name(self) -> str:
        # An empty UUID still yields ".md"
        return f"{self.metadata.uuid}.md"


@dataclass
class ConversionReport:
    """Outcome of converting one export: files written and UUIDs that failed."""

    written: List[Path] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
