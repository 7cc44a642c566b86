"""
Integration tests for the document store, upload and export use cases.
"""

from unittest.mock import patch

import pytest
from pptx import Presentation
from sqlalchemy.exc import IntegrityError

from deckstudio.application.services.presentation_builder import PresentationBuilder
from deckstudio.application.unit_of_work import UnitOfWork
from deckstudio.application.use_cases import (
    CreateEmptyPresentationUseCase,
    CreatePresentationUseCase,
    DeletePresentationsUseCase,
    DuplicatePresentationUseCase,
    ExportPresentationUseCase,
    GeneratePresentationFromTemplateUseCase,
    GetPresentationContentUseCase,
    GetPresentationUseCase,
    ListPresentationsUseCase,
    UpdatePresentationUseCase,
    UploadTemplateUseCase,
)
from deckstudio.domain.validators.template_validators import PPTX_MIME_TYPE
from deckstudio.domain.value_objects.listing import ListScope
from deckstudio.domain.value_objects.uploaded_file import UploadedFile
from deckstudio.infra.assets.master_registry import get_master_registry
from deckstudio.infra.auth.access_policy import OpenAccessPolicy, OwnerAccessPolicy
from deckstudio.infra.images.http_image_fetcher import HttpImageFetcher
from deckstudio.infra.rendering.deck_writer import PptxDeckWriter


async def create(uow, **fields):
    fields.setdefault("content", {"slides": []})
    result = await CreatePresentationUseCase(uow).execute(**fields)
    assert result.success, result.error
    return result.data["presentation"]


@pytest.mark.integration
class TestDocumentStore:
    async def test_create_applies_defaults(self, uow):
        document = await create(uow, title="", theme="")

        assert document.title == "Untitled Presentation"
        assert document.presentation.theme == "default"

    async def test_create_rejects_malformed_content(self, uow):
        result = await CreatePresentationUseCase(uow).execute(
            content={"slides": [{"content": [{"type": "table"}]}]}
        )

        assert result.success is False
        assert result.error_code == "VALIDATION_ERROR"

    async def test_create_empty(self, uow):
        result = await CreateEmptyPresentationUseCase(uow).execute(title="Blank")

        assert result.data["presentation"].presentation.content == {"slides": []}

    async def test_get_and_get_content(self, uow, sample_content):
        document = await create(uow, content=sample_content, outline=["Intro"])

        fetched = await GetPresentationUseCase(uow, OpenAccessPolicy()).execute(
            document.id
        )
        content = await GetPresentationContentUseCase(uow, OpenAccessPolicy()).execute(
            document.id
        )

        assert fetched.data["presentation"].id == document.id
        assert content.data == {
            "id": document.id,
            "content": sample_content,
            "theme": "default",
            "outline": ["Intro"],
        }

    async def test_get_missing(self, uow):
        result = await GetPresentationUseCase(uow, OpenAccessPolicy()).execute("nope")

        assert result.success is False
        assert result.error == "Presentation not found"
        assert result.error_code == "NOT_FOUND"

    async def test_update_replaces_only_given_fields(self, uow):
        document = await create(uow, title="Deck", theme="dark", language="en")

        result = await UpdatePresentationUseCase(uow, OpenAccessPolicy()).execute(
            document.id, title="Renamed", outline=["A", "B"]
        )

        updated = result.data["presentation"]
        assert updated.title == "Renamed"
        assert updated.presentation.outline == ["A", "B"]
        assert updated.presentation.theme == "dark"
        assert updated.presentation.language == "en"
        assert updated.updated_at >= document.updated_at

    async def test_update_missing(self, uow):
        result = await UpdatePresentationUseCase(uow, OpenAccessPolicy()).execute(
            "nope", title="x"
        )

        assert result.error_code == "NOT_FOUND"

    async def test_owner_policy_blocks_foreign_update(self, uow):
        document = await create(uow, owner_id="alice")

        result = await UpdatePresentationUseCase(uow, OwnerAccessPolicy()).execute(
            document.id, requester_id="mallory", title="pwned"
        )

        assert result.success is False
        assert result.error_code == "ACCESS_DENIED"

    async def test_delete_partial_success(self, uow):
        document = await create(uow)

        result = await DeletePresentationsUseCase(uow, OpenAccessPolicy()).execute(
            [document.id, "missing-id"]
        )

        assert result.success is True
        assert result.data["partial_success"] is True
        assert result.data["deleted_count"] == 1
        assert result.data["failed_count"] == 1
        assert result.message == (
            "Deleted 1 presentations, failed to delete 1 presentations"
        )

    async def test_delete_messages(self, uow):
        policy = OpenAccessPolicy()
        one = await create(uow)
        two = await create(uow)
        three = await create(uow)

        single = await DeletePresentationsUseCase(uow, policy).execute([one.id])
        many = await DeletePresentationsUseCase(uow, policy).execute([two.id, three.id])
        none = await DeletePresentationsUseCase(uow, policy).execute(["missing"])

        assert single.message == "Presentation deleted successfully"
        assert many.message == "2 presentations deleted successfully"
        assert none.success is False
        assert none.error == "Failed to delete presentations"

    async def test_delete_requires_ids(self, uow):
        result = await DeletePresentationsUseCase(uow, OpenAccessPolicy()).execute([])

        assert result.error_code == "VALIDATION_ERROR"

    async def test_duplicate(self, uow, sample_content):
        original = await create(
            uow, content=sample_content, title="Roadmap", theme="dark", is_public=True
        )

        result = await DuplicatePresentationUseCase(uow, OpenAccessPolicy()).execute(
            original.id, requester_id="owner-2"
        )

        copy = result.data["presentation"]
        assert copy.id != original.id
        assert copy.title == "Roadmap (Copy)"
        assert copy.presentation.content == sample_content
        assert copy.presentation.theme == "dark"
        assert copy.is_public is False

        stored = await GetPresentationUseCase(uow, OpenAccessPolicy()).execute(copy.id)
        assert stored.data["presentation"].owner_id == "owner-2"


@pytest.mark.integration
class TestListPresentations:
    async def test_public_pages_use_exact_count(self, uow):
        for index in range(25):
            await create(uow, title=f"Public {index}", is_public=True)
        await create(uow, title="Private")
        use_case = ListPresentationsUseCase(uow, page_size=10)

        pages = [
            (await use_case.execute(page=n, scope=ListScope.PUBLIC)).data["page"]
            for n in range(3)
        ]

        assert [page.has_more for page in pages] == [True, True, False]
        assert [len(page.items) for page in pages] == [10, 10, 5]

    async def test_owner_scope_uses_page_fullness(self, uow):
        for _ in range(10):
            await create(uow, owner_id="alice")

        relaxed = ListPresentationsUseCase(uow, page_size=10)
        exact = ListPresentationsUseCase(uow, page_size=10, exact_pagination=True)

        # A full last page reports another page under the relaxed rule.
        relaxed_page = (await relaxed.execute(owner_id="alice")).data["page"]
        exact_page = (await exact.execute(owner_id="alice")).data["page"]
        assert relaxed_page.has_more is True
        assert exact_page.has_more is False

    async def test_by_owner_requires_owner(self, uow):
        result = await ListPresentationsUseCase(uow).execute(scope=ListScope.BY_OWNER)

        assert result.error_code == "VALIDATION_ERROR"

    async def test_owner_policy_limits_owner_scope_to_requester(self, uow):
        await create(uow, title="Private", owner_id="alice")
        use_case = ListPresentationsUseCase(uow, OwnerAccessPolicy())

        other = await use_case.execute(owner_id="alice", requester_id="mallory")
        everyone = await use_case.execute(owner_id=None, requester_id=None)
        own = await use_case.execute(owner_id="alice", requester_id="alice")

        assert other.error_code == "ACCESS_DENIED"
        assert everyone.error_code == "ACCESS_DENIED"
        assert [doc.title for doc in own.data["page"].items] == ["Private"]


@pytest.mark.integration
class TestUploadTemplate:
    def pptx(self, **overrides):
        fields = {
            "filename": "Corporate Deck.pptx",
            "content_type": PPTX_MIME_TYPE,
            "data": b"PK\x03\x04 fake pptx",
        }
        fields.update(overrides)
        return UploadedFile(**fields)

    async def test_upload_stores_file_and_record(self, uow, file_store):
        result = await UploadTemplateUseCase(uow, file_store).execute(
            self.pptx(), name="  Corporate  ", description="Blue"
        )

        assert result.success is True
        template = result.data["template"]
        assert template.name == "Corporate"
        assert template.stored_file.endswith("-Corporate_Deck.pptx")
        stored = file_store.templates_dir / template.stored_file
        assert stored.read_bytes() == b"PK\x03\x04 fake pptx"

        loaded = await uow.template_repo.get_by_id(template.id)
        assert loaded.stored_file == template.stored_file

    async def test_wrong_mime_writes_nothing(self, uow, file_store):
        result = await UploadTemplateUseCase(uow, file_store).execute(
            self.pptx(content_type="application/zip"), name="Corporate"
        )

        assert result.success is False
        assert result.error == "Invalid file type. Only .pptx files are allowed."
        assert not file_store.templates_dir.exists()

    async def test_oversize_is_rejected(self, uow, file_store):
        result = await UploadTemplateUseCase(uow, file_store, max_size=8).execute(
            self.pptx(data=b"x" * 9), name="Corporate"
        )

        assert result.success is False
        assert result.error.startswith("File is too large.")
        assert not file_store.templates_dir.exists()

    async def test_failed_insert_removes_file(self, session, file_store):
        uow = UnitOfWork(session)

        with patch.object(
            uow.template_repo,
            "create",
            side_effect=IntegrityError("INSERT", {}, Exception("duplicate")),
        ):
            result = await UploadTemplateUseCase(uow, file_store).execute(
                self.pptx(), name="Corporate"
            )

        assert result.success is False
        assert result.error_code == "PERSISTENCE_ERROR"
        assert result.error.startswith("Failed to upload template: ")
        assert list(file_store.templates_dir.iterdir()) == []


@pytest.mark.integration
class TestGenerateAndExport:
    @pytest.fixture
    def collaborators(self, file_store):
        return {
            "builder": PresentationBuilder(get_master_registry()),
            "writer": PptxDeckWriter(HttpImageFetcher()),
            "file_store": file_store,
        }

    async def test_export_content_tree(self, uow, collaborators, sample_content):
        document = await create(uow, content=sample_content)

        result = await ExportPresentationUseCase(uow, **collaborators).execute(
            document.id
        )

        assert result.success is True
        prs = Presentation(result.data["file_path"])
        assert len(prs.slides) == 2
        body = [s for s in prs.slides[1].shapes if s.name == "bodyPlaceholder"]
        assert body[0].text_frame.text == "Next steps"

    async def test_export_missing(self, uow, collaborators):
        result = await ExportPresentationUseCase(uow, **collaborators).execute("nope")

        assert result.success is False
        assert result.error == "Presentation not found"
        assert result.error_code == "NOT_FOUND"

    async def test_generated_document_can_be_exported(
        self, uow, collaborators, png_data_uri
    ):
        generated = await GeneratePresentationFromTemplateUseCase(
            uow, **collaborators
        ).execute(
            slides_data=[
                {"master_name": "TITLE_MASTER", "data": {"titlePlaceholder": "Hello"}},
                {"master_name": "IMAGE_MASTER", "data": {"imagePlaceholder": png_data_uri}},
            ],
            new_presentation_title="From template",
        )
        assert generated.success, generated.error

        exported = await ExportPresentationUseCase(uow, **collaborators).execute(
            generated.data["presentation_id"]
        )

        assert exported.success, exported.error
        assert exported.data["file_path"] != generated.data["file_path"]
        prs = Presentation(exported.data["file_path"])
        assert len(prs.slides) == 2
        assert [s.name for s in prs.slides[1].shapes] == ["imagePlaceholder"]
