"""Tests for landing page rendering."""

import pytest

from platewise.home import (
    HomePage,
    author_name,
    render_home_page,
    render_stars,
    review_image_urls,
)
from platewise.models import Review, ToastVariant

from tests.helpers import FakeDataService, make_restaurant, make_review


class RecordingStorage:
    """Storage resolver that remembers every lookup."""

    def __init__(self) -> None:
        self.calls = []

    def get_public_url(self, bucket: str, key: str) -> str:
        self.calls.append((bucket, key))
        return f"https://cdn.test/{bucket}/{key}"


class TestRenderStars:
    """Tests for the star rating display."""

    @pytest.mark.parametrize(
        ("rating", "expected"),
        [(0, "☆☆☆☆☆"), (3, "★★★☆☆"), (5, "★★★★★")],
    )
    def test_stars(self, rating, expected):
        """Test filled stars followed by empty stars."""
        assert render_stars(rating) == expected

    def test_out_of_range_clamped(self):
        """Test that ratings outside 0-5 are clamped."""
        assert render_stars(-2) == "☆☆☆☆☆"
        assert render_stars(9) == "★★★★★"


class TestAuthorName:
    """Tests for the author display name."""

    def test_username(self):
        """Test that the profile username is shown."""
        review = Review.model_validate(make_review(1, username="chef_anna"))

        assert author_name(review) == "chef_anna"

    def test_null_username_is_anonymous(self):
        """Test that a missing username shows Anonymous."""
        review = Review.model_validate(make_review(1, username=None))

        assert author_name(review) == "Anonymous"

    def test_missing_profile_is_anonymous(self):
        """Test that a review without a joined profile shows Anonymous."""
        review = Review.model_validate(make_review(1, profiles=None))

        assert author_name(review) == "Anonymous"


class TestReviewImages:
    """Tests for review image resolution."""

    def test_two_images_resolved(self):
        """Test that each image key is resolved through the storage bucket."""
        storage = RecordingStorage()
        review = Review.model_validate(make_review(1, images=["a.jpg", "b.jpg"]))

        urls = review_image_urls(review, storage)

        assert urls == [
            "https://cdn.test/review_images/a.jpg",
            "https://cdn.test/review_images/b.jpg",
        ]
        assert storage.calls == [("review_images", "a.jpg"), ("review_images", "b.jpg")]

    @pytest.mark.parametrize("images", [None, []])
    def test_no_images(self, images):
        """Test that absent or empty image lists resolve nothing."""
        storage = RecordingStorage()
        review = Review.model_validate(make_review(1, images=images))

        assert review_image_urls(review, storage) == []
        assert storage.calls == []


class TestRenderHomePage:
    """Tests for the full HTML document."""

    @pytest.fixture
    def storage(self):
        return RecordingStorage()

    async def _rendered(self, data, storage, toaster, navigator) -> str:
        page = HomePage(data, storage, toaster, navigator)
        page.mount()
        await page.settled()
        return render_home_page(page)

    @pytest.mark.asyncio
    async def test_sections_and_cards(self, data_service, storage, toaster, navigator):
        """Test hero, restaurant cards and review cards."""
        html = await self._rendered(data_service, storage, toaster, navigator)

        assert "Find Your Next Favorite Spot" in html
        assert "Featured Restaurants" in html
        assert "Latest Reviews" in html
        assert html.count('class="card clickable"') == 6
        assert 'data-href="/restaurant/rest-7"' in html
        assert "Price Range: $$" in html
        assert html.count("★★★★☆") == 3

    @pytest.mark.asyncio
    async def test_thumbnails(self, storage, toaster, navigator):
        """Test that only reviews with images get a thumbnail block."""
        data = FakeDataService(
            {
                "reviews": [
                    make_review(1, images=["x.png", "y.png"]),
                    make_review(2, images=[]),
                ]
            }
        )

        html = await self._rendered(data, storage, toaster, navigator)

        assert html.count('class="thumbs"') == 1
        assert html.count("<img ") == 2
        assert 'alt="Review image 1"' in html
        assert 'alt="Review image 2"' in html
        assert 'src="https://cdn.test/review_images/x.png"' in html

    @pytest.mark.asyncio
    async def test_anonymous_author(self, storage, toaster, navigator):
        """Test that a null username renders as Anonymous."""
        data = FakeDataService({"reviews": [make_review(1, username=None)]})

        html = await self._rendered(data, storage, toaster, navigator)

        assert "<strong>Anonymous</strong>" in html

    @pytest.mark.asyncio
    async def test_price_range_omitted(self, storage, toaster, navigator):
        """Test that a restaurant without a price range has no price line."""
        data = FakeDataService({"restaurants": [make_restaurant(1, price_range=None)]})

        html = await self._rendered(data, storage, toaster, navigator)

        assert "Price Range" not in html

    @pytest.mark.asyncio
    async def test_text_escaped(self, storage, toaster, navigator):
        """Test that user content is HTML-escaped."""
        data = FakeDataService(
            {"reviews": [make_review(1, content="<script>alert(1)</script>")]}
        )

        html = await self._rendered(data, storage, toaster, navigator)

        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html

    @pytest.mark.asyncio
    async def test_failure_toast_rendered(self, data_service, storage, toaster, navigator):
        """Test that a failed load shows a destructive toast."""
        data_service.failures.add("restaurants")

        html = await self._rendered(data_service, storage, toaster, navigator)

        assert toaster.toasts[0].variant == ToastVariant.DESTRUCTIVE
        assert 'class="toast destructive"' in html
        assert "Failed to load restaurants" in html
        assert html.count('class="card clickable"') == 0
