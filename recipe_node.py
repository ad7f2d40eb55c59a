from typing import Any, List, Optional

from constants import PHOTO_CLASS, PROPERTY_ATTR
from recipe_parser import convert_fractions


class RecipeNode:
    """Read-only property lookups over one recipe container.

    The wrapped node only needs ``find_all(name, attrs=..., recursive=...)``,
    ``get(attr, default)``, ``get_text()`` and ``name``, which is what a
    BeautifulSoup ``Tag`` provides. A missing property is never an error: every
    lookup falls back to an empty or default value.
    """

    def __init__(self, node: Any):
        self.node = node

    def item_prop(self, prop_name: str, elem_name: Optional[str] = None) -> List[Any]:
        return list(self.node.find_all(elem_name or True, attrs={PROPERTY_ATTR: prop_name}))

    def item_prop_attr_or(self, elem_name: Optional[str], prop_name: str, attr: str, default: str) -> str:
        matches = self.item_prop(prop_name, elem_name)
        if not matches:
            return default
        value = matches[0].get(attr, None)
        return default if value is None else value

    def item_prop_text(self, prop_name: str) -> str:
        matches = self.item_prop(prop_name)
        return matches[0].get_text() if matches else ""

    def item_prop_content_or(self, prop_name: str, default: str) -> str:
        return self.item_prop_attr_or("meta", prop_name, "content", default)

    def item_prop_content_list(self, prop_name: str) -> List[str]:
        contents: List[str] = []
        for meta in self.item_prop(prop_name, "meta"):
            content = meta.get("content", "")
            if content:
                contents.append(content)
        return contents

    def item_prop_children_text(self, prop_name: str) -> List[str]:
        """One normalized line per direct child of the property container."""
        matches = self.item_prop(prop_name)
        if not matches:
            return []

        lines: List[str] = []
        for child in matches[0].find_all(True, recursive=False):
            text = convert_fractions(child.get_text().strip())
            if text:
                lines.append(text)
        return lines

    def extract_courses(self) -> List[str]:
        # The export puts the first course in a span and any extra ones in metas
        courses: List[str] = []
        for elem in self.item_prop("recipeCourse"):
            if elem.name == "span":
                course = elem.get_text()
            elif elem.name == "meta":
                course = elem.get("content", "")
            else:
                continue
            if course:
                courses.append(course)
        return courses

    def extract_photos(self) -> List[str]:
        photos: List[str] = []
        for img in self.node.find_all("img", attrs={"class": PHOTO_CLASS}):
            src = img.get("src", "")
            if src:
                photos.append(src)
        return photos
