"""Landing page component and rendering."""

from platewise.home.page import HomePage, restaurant_path
from platewise.home.render import (
    author_name,
    render_home_page,
    render_stars,
    review_image_urls,
)

__all__ = [
    "HomePage",
    "author_name",
    "render_home_page",
    "render_stars",
    "restaurant_path",
    "review_image_urls",
]
