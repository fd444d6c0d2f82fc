"""Unit tests for the document model and page allocator."""

import pytest

from formpress.core.config import LayoutConfig
from formpress.exceptions import PageAllocationError
from formpress.layout.metrics import TextRole
from formpress.layout.pages import Document, DrawInstruction, PageAllocator


class TestPageAllocator:
    def test_new_page_is_letter_size(self):
        doc = Document()
        page = PageAllocator().new_page(doc)
        assert (page.width, page.height) == (612.0, 792.0)

    def test_pages_appended_in_order(self):
        doc = Document()
        alloc = PageAllocator()
        first = alloc.new_page(doc)
        second = alloc.new_page(doc)
        assert [p.index for p in doc.pages] == [0, 1]
        assert doc.page(0) is first
        assert doc.page(1) is second
        assert doc.page_count == 2

    def test_page_limit_raises(self):
        doc = Document()
        alloc = PageAllocator(LayoutConfig(max_pages=2))
        alloc.new_page(doc)
        alloc.new_page(doc)
        with pytest.raises(PageAllocationError, match="2-page limit"):
            alloc.new_page(doc)
        assert doc.page_count == 2

    def test_memory_error_wrapped(self, monkeypatch):
        import formpress.layout.pages as pages_mod

        def _boom(*args, **kwargs):
            raise MemoryError

        monkeypatch.setattr(pages_mod, "Page", _boom)
        with pytest.raises(PageAllocationError, match="out of memory"):
            PageAllocator().new_page(Document())


class TestDocument:
    def test_iter_instructions_in_reading_order(self):
        doc = Document()
        alloc = PageAllocator()
        p0 = alloc.new_page(doc)
        p1 = alloc.new_page(doc)
        p1.draw(DrawInstruction("second", 50, 700, 10, "#000000", TextRole.FIELD_LABEL))
        p0.draw(DrawInstruction("first", 50, 700, 10, "#000000", TextRole.FIELD_LABEL))
        assert [(i, ins.text) for i, ins in doc.iter_instructions()] == [(0, "first"), (1, "second")]
        assert doc.texts() == ["first", "second"]
