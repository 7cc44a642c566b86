"""
Tests for the python-pptx deck writer and the image fetcher it relies on.
"""

import httpx
import pytest
from pptx import Presentation
from pptx.enum.shapes import MSO_SHAPE_TYPE
from pptx.util import Inches

from deckstudio.application.services.presentation_builder import PresentationBuilder
from deckstudio.domain.exceptions import ExternalServiceError, ValidationError
from deckstudio.domain.value_objects.slide_content import parse_slides
from deckstudio.domain.value_objects.slide_data import SlideData
from deckstudio.infra.assets.master_registry import get_master_registry
from deckstudio.infra.images.http_image_fetcher import HttpImageFetcher
from deckstudio.infra.rendering.deck_writer import PptxDeckWriter


def mock_client(png_bytes, status_code=200):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("missing.png"):
            return httpx.Response(404)
        return httpx.Response(status_code, content=png_bytes)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def builder():
    return PresentationBuilder(get_master_registry())


class TestHttpImageFetcher:
    @pytest.mark.asyncio
    async def test_decodes_data_uri(self, png_bytes, png_data_uri):
        fetcher = HttpImageFetcher()

        assert await fetcher.fetch(png_data_uri) == png_bytes

    @pytest.mark.asyncio
    async def test_decodes_upper_case_data_uri(self, png_bytes, png_data_uri):
        header, payload = png_data_uri.split(",", 1)

        data = await HttpImageFetcher().fetch(f"{header.upper()},{payload}")

        assert data == png_bytes

    @pytest.mark.asyncio
    async def test_downloads_remote_image(self, png_bytes):
        async with mock_client(png_bytes) as client:
            fetcher = HttpImageFetcher(client=client)
            data = await fetcher.fetch("https://cdn.example.com/chart.png")

        assert data == png_bytes

    @pytest.mark.asyncio
    async def test_http_error_is_external_service_error(self, png_bytes):
        async with mock_client(png_bytes) as client:
            fetcher = HttpImageFetcher(client=client)
            with pytest.raises(ExternalServiceError):
                await fetcher.fetch("https://cdn.example.com/missing.png")

    @pytest.mark.asyncio
    async def test_rejects_unsupported_references(self):
        fetcher = HttpImageFetcher()

        with pytest.raises(ValidationError):
            await fetcher.fetch("ftp://example.com/a.png")
        with pytest.raises(ValidationError):
            await fetcher.fetch("data:image/png,notbase64")


class TestPptxDeckWriter:
    @pytest.mark.asyncio
    async def test_writes_placeholder_deck(self, builder, png_bytes, tmp_path):
        deck = builder.bind_from_placeholder_data(
            [
                SlideData.from_raw(
                    "TITLE_MASTER",
                    {"titlePlaceholder": "Welcome", "subtitlePlaceholder": "Line 1\nLine 2"},
                ),
                SlideData.from_raw(
                    "IMAGE_MASTER",
                    {
                        "headerPlaceholder": "Chart",
                        "imagePlaceholder": "https://cdn.example.com/chart.png",
                    },
                ),
            ]
        )
        path = tmp_path / "out" / "deck.pptx"

        async with mock_client(png_bytes) as client:
            writer = PptxDeckWriter(HttpImageFetcher(client=client))
            await writer.write(deck, path)

        prs = Presentation(str(path))
        assert prs.slide_width == Inches(10)
        assert len(prs.slides) == 2

        title_shapes = {shape.name: shape for shape in prs.slides[0].shapes}
        assert title_shapes["titlePlaceholder"].text_frame.text == "Welcome"
        assert [
            p.text for p in title_shapes["subtitlePlaceholder"].text_frame.paragraphs
        ] == ["Line 1", "Line 2"]

        image_shapes = {shape.name: shape for shape in prs.slides[1].shapes}
        picture = image_shapes["imagePlaceholder"]
        assert picture.shape_type == MSO_SHAPE_TYPE.PICTURE
        assert picture.left == Inches(1.0)
        assert picture.width == Inches(8.0)

    @pytest.mark.asyncio
    async def test_upper_case_data_uri_becomes_picture(
        self, builder, png_data_uri, tmp_path
    ):
        header, payload = png_data_uri.split(",", 1)
        deck = builder.bind_from_placeholder_data(
            [
                SlideData.from_raw(
                    "IMAGE_MASTER", {"imagePlaceholder": f"{header.upper()},{payload}"}
                )
            ]
        )
        path = tmp_path / "upper.pptx"

        await PptxDeckWriter(HttpImageFetcher()).write(deck, path)

        shapes = {shape.name: shape for shape in Presentation(str(path)).slides[0].shapes}
        assert shapes["imagePlaceholder"].shape_type == MSO_SHAPE_TYPE.PICTURE

    @pytest.mark.asyncio
    async def test_writes_content_tree_deck(
        self, builder, sample_content, tmp_path
    ):
        deck = builder.bind_from_content_tree(parse_slides(sample_content))
        path = tmp_path / "tree.pptx"

        await PptxDeckWriter(HttpImageFetcher()).write(deck, path)

        prs = Presentation(str(path))
        first = list(prs.slides[0].shapes)
        assert first[0].shape_type == MSO_SHAPE_TYPE.PICTURE
        assert first[0].top == Inches(1.0)
        assert first[-1].name == "bodyPlaceholder"
        assert first[-1].text_frame.text == "Quarterly review\nRevenue grew"

    @pytest.mark.asyncio
    async def test_failed_image_download_leaves_no_file(
        self, builder, png_bytes, tmp_path
    ):
        deck = builder.bind_from_placeholder_data(
            [
                SlideData.from_raw(
                    "IMAGE_MASTER",
                    {"imagePlaceholder": "https://cdn.example.com/missing.png"},
                )
            ]
        )
        path = tmp_path / "broken.pptx"

        async with mock_client(png_bytes) as client:
            writer = PptxDeckWriter(HttpImageFetcher(client=client))
            with pytest.raises(ExternalServiceError):
                await writer.write(deck, path)

        assert not path.exists()

    @pytest.mark.asyncio
    async def test_render_failure_removes_partial_file(self, builder, tmp_path):
        # Valid base64 that is not an image: python-pptx cannot place it.
        deck = builder.bind_from_placeholder_data(
            [
                SlideData.from_raw(
                    "IMAGE_MASTER", {"imagePlaceholder": "data:image/png;base64,AAAA"}
                )
            ]
        )
        path = tmp_path / "bad-image.pptx"

        with pytest.raises(ExternalServiceError, match="Could not write presentation"):
            await PptxDeckWriter(HttpImageFetcher()).write(deck, path)

        assert not path.exists()
