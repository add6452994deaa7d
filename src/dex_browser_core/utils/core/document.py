"""
In-memory HTML document the renderers write into.

The Document wraps a BeautifulSoup tree built from a page shell with fixed
mount points. Renderers replace a mount point's contents wholesale; the
hydrator patches individual `types-{id}` containers inside the grid.
"""

from typing import Optional

from bs4 import BeautifulSoup, Tag

GRID_CONTAINER_ID = "pokemon-grid"
TYPE_FILTER_ID = "type-filter"
MODAL_ROOT_ID = "modal-root"

DEFAULT_SHELL = f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Pokédex</title>
</head>
<body class="bg-background text-white">
<select id="{TYPE_FILTER_ID}" class="bg-surface border border-border rounded-lg px-3 py-2"></select>
<main id="{GRID_CONTAINER_ID}" class="grid grid-cols-2 md:grid-cols-4 lg:grid-cols-6 gap-4"></main>
<div id="{MODAL_ROOT_ID}"></div>
</body>
</html>
"""


def set_inner_html(element: Tag, markup: str) -> None:
    """Replace an element's children with the parsed markup.

    Args:
        element (Tag): The element to overwrite.
        markup (str): HTML fragment to insert.
    """
    element.clear()
    fragment = BeautifulSoup(markup, "html.parser")
    for child in list(fragment.contents):
        element.append(child.extract())


def has_element_children(element: Tag) -> bool:
    """Check whether an element has child elements (text nodes are ignored).

    Args:
        element (Tag): The element to inspect.

    Returns:
        bool: True if at least one child is an element.
    """
    return any(isinstance(child, Tag) for child in element.children)


class Document:
    """An HTML page with the browser's mount points."""

    def __init__(self, html: str = DEFAULT_SHELL):
        """Parse the page shell.

        Args:
            html (str, optional): Page HTML. Defaults to DEFAULT_SHELL.
        """
        self.soup = BeautifulSoup(html, "html.parser")

    def get_element_by_id(self, element_id: str) -> Optional[Tag]:
        """Find an element by its id attribute.

        Args:
            element_id (str): The id to look up.

        Returns:
            Optional[Tag]: The element, or None if it is not in the document.
        """
        return self.soup.find(id=element_id)

    @property
    def grid(self) -> Optional[Tag]:
        return self.get_element_by_id(GRID_CONTAINER_ID)

    @property
    def type_filter(self) -> Optional[Tag]:
        return self.get_element_by_id(TYPE_FILTER_ID)

    @property
    def modal_root(self) -> Optional[Tag]:
        return self.get_element_by_id(MODAL_ROOT_ID)

    def to_html(self) -> str:
        """Serialize the document.

        Returns:
            str: The page HTML.
        """
        return str(self.soup)
