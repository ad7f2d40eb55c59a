import argparse
import logging
import os
from pathlib import Path
from typing import List, Union

from bs4 import BeautifulSoup
from dotenv import load_dotenv

from constants import DEFAULT_OUT_DIR, NUTRITION_PROPERTIES, RECIPE_CONTAINER_SELECTOR
from recipe_extractor import extract_recipe
from recipe_models import ConversionReport, Recipe
from recipe_node import RecipeNode
from recipe_parser import format_duration

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _nutrition_lines(recipe: Recipe) -> List[str]:
    lines = []
    for field_name, _, label in NUTRITION_PROPERTIES:
        value = getattr(recipe.nutrition, field_name)
        if value:
            lines.append(f"- {label}: {value}")
    return lines


def render_markdown(recipe: Recipe, with_nutrition: bool = False) -> str:
    """Render the fixed layout. Blank separator lines are kept even when the
    block between them is empty."""
    meta = recipe.metadata
    md = [f"# {recipe.title}", ""]

    if meta.rating != 0:
        md.append(f"Rating: {meta.rating}-star")
    if meta.collection_list:
        md.append(f"Collections: {', '.join(meta.collection_list)}")
    if meta.course_list:
        md.append(f"Course: {', '.join(meta.course_list)}")
    md.append("")

    if meta.source:
        md.append(f"Source: {meta.source}")
    md.append("")

    if meta.cook_time.total_seconds() > 0:
        md.append(f"Cook Time: {format_duration(meta.cook_time)}")
    if meta.prep_time.total_seconds() > 0:
        md.append(f"Prep Time: {format_duration(meta.prep_time)}")
    md.append("")

    if meta.category_list:
        md.append(f"*{', '.join(meta.category_list)}*")
    md.append("")

    if meta.recipe_yield:
        md.append(f"**{meta.recipe_yield}**")
    md.extend(["", "---", ""])

    for ing in recipe.ingredient_lines:
        md.append(f"- {ing}")
    md.extend(["", "---", ""])

    md.extend(["### Instructions", ""])
    md.append("\n".join(recipe.instruction_lines))

    if recipe.notes_lines:
        md.extend(["", "### Notes", ""])
        md.append("\n".join(recipe.notes_lines))

    if with_nutrition:
        nutrition = _nutrition_lines(recipe)
        if nutrition:
            md.extend(["", "### Nutrition", ""])
            md.extend(nutrition)

    return "\n".join(md) + "\n"


def load_recipe_nodes(export_path: PathLike) -> List[RecipeNode]:
    with open(export_path, "r", encoding="utf-8") as f:
        soup = BeautifulSoup(f.read(), "lxml")
    return [RecipeNode(tag) for tag in soup.select(RECIPE_CONTAINER_SELECTOR)]


def write_recipe_markdown(recipe: Recipe, out_dir: PathLike, with_nutrition: bool = False) -> Path:
    md_path = Path(out_dir) / recipe.output_name
    with open(md_path, "w", encoding="utf-8") as f:
        f.write(render_markdown(recipe, with_nutrition))
    return md_path


def convert_export(export_path: PathLike, out_dir: PathLike, with_nutrition: bool = False) -> ConversionReport:
    """Write one Markdown file per recipe container.

    A failed write is logged and skipped; the remaining recipes are still
    converted. Errors reading the export itself propagate.
    """
    report = ConversionReport()
    for node in load_recipe_nodes(export_path):
        recipe = extract_recipe(node)
        try:
            md_path = write_recipe_markdown(recipe, out_dir, with_nutrition)
        except OSError:
            logger.exception("Could not write recipe %r (%s)", recipe.title, recipe.metadata.uuid)
            report.failed.append(recipe.metadata.uuid)
            continue
        logger.debug("Wrote %s", md_path)
        report.written.append(md_path)
    return report


def main():
    load_dotenv()
    ap = argparse.ArgumentParser(description="Convert a Recipe Keeper HTML export into one Markdown file per recipe.")
    ap.add_argument("export", nargs="?", default=os.getenv("RECIPEKEEPER_EXPORT"),
                    help="Path to the exported recipes.html (default: $RECIPEKEEPER_EXPORT)")
    ap.add_argument("--out-dir", default=os.getenv("RECIPES_OUT_DIR", DEFAULT_OUT_DIR),
                    help="Output directory for Markdown files")
    ap.add_argument("--with-nutrition", action="store_true", help="Append the nutrition facts to each recipe")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log every written file")
    args = ap.parse_args()

    if not args.export:
        ap.error("Missing export path. Pass it as an argument or set RECIPEKEEPER_EXPORT in .env or environment.")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    try:
        report = convert_export(args.export, out_dir, args.with_nutrition)
    except OSError as e:
        raise SystemExit(f"Could not read export {args.export}: {e}")

    print("Done.")
    print(f"Recipes written: {len(report.written)} to {out_dir}")
    if report.failed:
        print(f"Failed: {len(report.failed)}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
