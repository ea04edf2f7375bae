"""
Profile image injection for rendered HTML.

Themes such as jsonresume-theme-even render a masthead like:

    <header class="masthead">
      <h1>Name</h1>
      <h2>Label</h2>
      ...
    </header>

When the resume has a basics.image, the two headings are moved into a flex
container next to a round 80x80 profile picture. Pages without that masthead
are returned unchanged.

A rewritten page is re-serialized by BeautifulSoup as a whole, so markup
outside the masthead may be normalized too (e.g. `<meta ...>` becomes
`<meta .../>`). The rendered content itself is not altered.
"""

from typing import Optional, Tuple

from bs4 import BeautifulSoup, NavigableString, Tag

from vitae.contexts.publishing.logger import _log_debug

MASTHEAD_CLASS = "masthead"
PROFILE_IMAGE_CLASS = "profile-image"
IMAGE_SIZE_PX = 80

CONTAINER_STYLE = "display: flex; align-items: center; gap: 1em;"
IMAGE_STYLE = (
    f"width: {IMAGE_SIZE_PX}px; height: {IMAGE_SIZE_PX}px; "
    "border-radius: 50%; object-fit: cover; flex-shrink: 0;"
)


def find_masthead_headings(soup: BeautifulSoup) -> Optional[Tuple[Tag, Tag]]:
    """
    Locate the name and title headings of the masthead.

    Matches the first <header class="masthead"> whose leading children are an
    <h1> followed by an <h2>, with only whitespace around them.

    Returns:
        (h1, h2) tags, or None if the page has no such masthead
    """
    header = soup.find("header", class_=MASTHEAD_CLASS)
    if header is None:
        return None

    leading = []
    for child in header.children:
        if isinstance(child, Tag):
            leading.append(child)
            if len(leading) == 2:
                break
        elif isinstance(child, NavigableString) and child.strip():
            return None

    if len(leading) < 2 or leading[0].name != "h1" or leading[1].name != "h2":
        return None

    return leading[0], leading[1]


def inject_profile_image(html: str, image_url: str, name: str) -> str:
    """
    Insert a profile image into the masthead of a rendered resume page.

    Args:
        html: Rendered HTML document
        image_url: Image source URL (basics.image)
        name: Person's name, used as alt text (basics.name)

    Returns:
        The rewritten HTML, or the input string itself if no masthead matched
    """
    soup = BeautifulSoup(html, "html.parser")

    headings = find_masthead_headings(soup)
    if headings is None:
        _log_debug("No masthead heading found; profile image not inserted")
        return html

    h1, h2 = headings
    header = h1.parent

    container = soup.new_tag("div", style=CONTAINER_STYLE)
    image = soup.new_tag(
        "img",
        attrs={
            "src": image_url,
            "alt": name,
            "class": PROFILE_IMAGE_CLASS,
            "style": IMAGE_STYLE,
        },
    )
    headings_box = soup.new_tag("div")

    # Drop whitespace between the opening tag and the headings
    for child in list(header.children):
        if child is h1:
            break
        child.extract()

    h1.insert_before(container)
    headings_box.append(h1.extract())
    headings_box.append(h2.extract())
    container.append(image)
    container.append(headings_box)

    return str(soup)
