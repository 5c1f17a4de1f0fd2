"""Tests for PptxHandler, including a deck produced by python-pptx."""

import io

import pytest

from xgen_pptx2text.core.errors import InvalidArchiveError
from xgen_pptx2text.core.functions import NullFileConverter, NullPreprocessor
from xgen_pptx2text.core.functions.page_tag_processor import SlideTagProcessor
from xgen_pptx2text.core.processor import BaseHandler, PptxHandler
from xgen_pptx2text.core.processor.pptx_helper import PptxFileConverter, PptxPreprocessor

from tests.conftest import build_pptx, slide_xml


def as_current_file(data: bytes) -> dict:
    return {'file_path': 'deck.pptx', 'file_data': data, 'file_stream': io.BytesIO(data), 'file_size': len(data)}


class TestPptxHandler:
    def test_lazy_components(self):
        handler = PptxHandler()
        assert isinstance(handler.file_converter, PptxFileConverter)
        assert isinstance(handler.preprocessor, PptxPreprocessor)
        assert handler.file_converter is handler.file_converter

    def test_slide_tag_processor_from_config(self):
        tagger = SlideTagProcessor(slide_prefix='# ', slide_suffix='')
        handler = PptxHandler(config={'slide_tag_processor': tagger})
        assert handler.create_slide_tag(4) == '# 4'

    def test_extract_text(self):
        data = build_pptx({
            'ppt/slides/slide2.xml': slide_xml('Second'),
            'ppt/slides/slide1.xml': slide_xml('First', 'More'),
        })
        text = PptxHandler().extract_text(as_current_file(data))
        assert text == '--- Slide 1 ---\nFirst \nMore \n\n\n--- Slide 2 ---\nSecond \n\n\n'

    def test_extract_text_without_stream(self):
        data = build_pptx({'ppt/slides/slide1.xml': slide_xml('x')})
        assert PptxHandler().extract_text({'file_data': data}) == '--- Slide 1 ---\nx \n\n\n'

    def test_invalid_archive_propagates(self):
        with pytest.raises(InvalidArchiveError):
            PptxHandler().extract_text(as_current_file(b'garbage'))


def test_deck_built_with_python_pptx():
    pptx = pytest.importorskip('pptx')

    prs = pptx.Presentation()
    title_slide = prs.slides.add_slide(prs.slide_layouts[0])
    title_slide.shapes.title.text = 'Quarterly Review'
    title_slide.placeholders[1].text = 'R&D <update>'

    prs.slides.add_slide(prs.slide_layouts[6])  # blank layout, no text

    content = prs.slides.add_slide(prs.slide_layouts[1])
    content.shapes.title.text = 'Highlights'
    content.placeholders[1].text = 'Revenue up\nCosts down'

    buffer = io.BytesIO()
    prs.save(buffer)

    text = PptxHandler().extract_text(as_current_file(buffer.getvalue()))

    assert text.startswith('--- Slide 1 ---\nQuarterly Review \n')
    assert 'R&D <update> ' in text
    assert '--- Slide 2 ---\nHighlights \n' in text
    assert 'Revenue up \nCosts down ' in text
    assert '--- Slide 3 ---' not in text


class RawHandler(BaseHandler):
    """Handler with no format-specific converter or preprocessor."""

    def _create_file_converter(self):
        return None

    def extract_text(self, current_file, **kwargs) -> str:
        converted = self.convert_file(current_file)
        return self.preprocess(converted).clean_content.decode('utf-8')


def test_base_handler_null_fallbacks():
    handler = RawHandler()

    assert isinstance(handler.file_converter, NullFileConverter)
    assert isinstance(handler.preprocessor, NullPreprocessor)
    assert handler.extract_text({'file_data': b'plain'}) == 'plain'
    assert handler.create_slide_tag(1) == '--- Slide 1 ---'
