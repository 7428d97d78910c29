"""HTML rendering for the landing page."""

import logging
from html import escape

from platewise.home.page import HomePage, restaurant_path
from platewise.models import Restaurant, Review, Toast
from platewise.services.storage import StorageUrlResolver

logger = logging.getLogger(__name__)

MAX_RATING = 5
FILLED_STAR = "★"
EMPTY_STAR = "☆"
ANONYMOUS = "Anonymous"
REVIEW_IMAGES_BUCKET = "review_images"

_STYLES = """
body { margin: 0; font-family: system-ui, sans-serif; background: #f9fafb; }
.container { max-width: 72rem; margin: 0 auto; padding: 3rem 1rem; }
.hero { background: linear-gradient(to right, #f97316, #dc2626); color: #fff; }
.hero h1 { font-size: 3rem; margin: 0 0 1rem; }
.hero p { font-size: 1.25rem; opacity: 0.9; margin: 0; }
.grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(18rem, 1fr)); gap: 1.5rem; }
.card { background: #fff; border-radius: 0.5rem; padding: 1.5rem; box-shadow: 0 1px 3px rgba(0,0,0,0.1); }
.card.clickable { cursor: pointer; }
.card.clickable:hover { box-shadow: 0 10px 15px rgba(0,0,0,0.1); }
.muted { color: #6b7280; font-size: 0.875rem; }
.stars { color: #eab308; }
.thumbs { display: flex; gap: 0.5rem; margin-top: 1rem; }
.thumbs img { width: 6rem; height: 6rem; object-fit: cover; border-radius: 0.25rem; }
.reviews { background: #fff; }
.reviews .card { margin-bottom: 1.5rem; }
.toast { position: fixed; right: 1rem; bottom: 1rem; padding: 1rem; border-radius: 0.5rem; background: #fff; }
.toast.destructive { background: #dc2626; color: #fff; }
"""


def render_stars(rating: int) -> str:
    """Render a rating as filled stars followed by empty stars.

    Ratings outside 0-5 are clamped.
    """
    clamped = max(0, min(MAX_RATING, rating))
    if clamped != rating:
        logger.warning(f"Rating {rating} outside 0-{MAX_RATING}, clamped to {clamped}")
    return FILLED_STAR * clamped + EMPTY_STAR * (MAX_RATING - clamped)


def author_name(review: Review) -> str:
    """Display name of the review's author."""
    if review.profile and review.profile.username:
        return review.profile.username
    return ANONYMOUS


def review_image_urls(
    review: Review,
    storage: StorageUrlResolver,
    bucket: str = REVIEW_IMAGES_BUCKET,
) -> list[str]:
    """Public URLs for a review's images, in order."""
    return [storage.get_public_url(bucket, key) for key in review.images or []]


def _render_restaurant(restaurant: Restaurant) -> str:
    href = escape(restaurant_path(restaurant.id))
    price = ""
    if restaurant.price_range:
        price = f'<p class="muted">Price Range: {escape(restaurant.price_range)}</p>'
    return (
        f'<div class="card clickable" data-href="{href}" '
        f"onclick=\"window.location.href=this.dataset.href\">"
        f"<h3>{escape(restaurant.name)}</h3>"
        f'<p class="muted">{escape(restaurant.cuisine_type)}</p>'
        f'<p class="muted">{escape(restaurant.address)}</p>'
        f"{price}"
        "</div>"
    )


def _render_review(review: Review, image_urls: list[str]) -> str:
    thumbs = ""
    if image_urls:
        images = "".join(
            f'<img src="{escape(url)}" alt="Review image {index}">'
            for index, url in enumerate(image_urls, start=1)
        )
        thumbs = f'<div class="thumbs">{images}</div>'
    return (
        '<div class="card">'
        f"<strong>{escape(author_name(review))}</strong> "
        f'<span class="stars">{render_stars(review.rating)}</span>'
        f'<p class="muted">{escape(review.content)}</p>'
        f"{thumbs}"
        "</div>"
    )


def _render_toast(toast: Toast) -> str:
    description = f"<div>{escape(toast.description)}</div>" if toast.description else ""
    return (
        f'<div class="toast {toast.variant.value}" role="status" data-toast-id="{escape(toast.id)}">'
        f"<strong>{escape(toast.title)}</strong>{description}"
        "</div>"
    )


def render_home_page(page: HomePage, bucket: str = REVIEW_IMAGES_BUCKET) -> str:
    """Render the full landing page document from the page's current state."""
    restaurants = "".join(_render_restaurant(r) for r in page.restaurants)
    reviews = "".join(
        _render_review(r, review_image_urls(r, page.storage, bucket))
        for r in page.latest_reviews
    )
    toasts = "".join(_render_toast(t) for t in page.toaster.toasts)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Platewise</title>
<style>{_STYLES}</style>
</head>
<body>
<section class="hero">
  <div class="container">
    <h1>Find Your Next Favorite Spot</h1>
    <p>Discover and share the best restaurants in your area</p>
  </div>
</section>
<section class="container">
  <h2>Featured Restaurants</h2>
  <div class="grid">{restaurants}</div>
</section>
<section class="reviews">
  <div class="container">
    <h2>Latest Reviews</h2>
    {reviews}
  </div>
</section>
{toasts}
</body>
</html>
"""
