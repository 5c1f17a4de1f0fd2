"""Tests for per-slide text collection and slide markers."""

import pytest

from xgen_pptx2text.core.errors import EntryReadError
from xgen_pptx2text.core.functions.page_tag_processor import SlideTagProcessor
from xgen_pptx2text.core.processor.pptx_helper import (
    PptxFileConverter,
    collect_slide_text,
    select_slide_entries,
)

from tests.conftest import build_pptx, slide_xml


def collect(entries, tagger=None):
    with PptxFileConverter().convert(build_pptx(entries)) as archive:
        return collect_slide_text(archive, select_slide_entries(archive.names()), tagger)


def test_single_slide_block():
    # The paragraph newline from the scanner plus the block's blank line
    # gives three trailing newlines, not two.
    text = collect({'ppt/slides/slide1.xml': '<a:t>Hello</a:t><a:t>World</a:t></a:p>'})
    assert text == '--- Slide 1 ---\nHello World \n\n\n'


def test_slides_follow_numeric_order():
    text = collect({
        'ppt/slides/slide2.xml': slide_xml('two'),
        'ppt/slides/slide10.xml': slide_xml('ten'),
        'ppt/slides/slide1.xml': slide_xml('one'),
    })
    assert text == (
        '--- Slide 1 ---\none \n\n\n'
        '--- Slide 2 ---\ntwo \n\n\n'
        '--- Slide 3 ---\nten \n\n\n'
    )


def test_blank_slides_leave_no_numbering_gaps():
    text = collect({
        'ppt/slides/slide1.xml': slide_xml('first'),
        'ppt/slides/slide2.xml': slide_xml('   '),
        'ppt/slides/slide3.xml': '<p:sld><p:pic/></p:sld>',
        'ppt/slides/slide4.xml': slide_xml('last'),
    })
    assert text == '--- Slide 1 ---\nfirst \n\n\n--- Slide 2 ---\nlast \n\n\n'


def test_no_text_returns_empty_string():
    assert collect({'ppt/slides/slide1.xml': '<p:sld/>'}) == ''
    assert collect({}) == ''


def test_notes_and_layouts_are_not_collected():
    text = collect({
        'ppt/slides/slide1.xml': slide_xml('body'),
        'ppt/notesSlides/notesSlide1.xml': slide_xml('speaker notes'),
        'ppt/slideLayouts/slideLayout1.xml': slide_xml('layout placeholder'),
    })
    assert text == '--- Slide 1 ---\nbody \n\n\n'


def test_custom_slide_markers():
    tagger = SlideTagProcessor(slide_prefix='<slide n=', slide_suffix='>')
    assert collect({'ppt/slides/slide1.xml': slide_xml('x')}, tagger) == '<slide n=1>\nx \n\n\n'


def test_undecodable_slide_fails_whole_collection():
    with pytest.raises(EntryReadError) as exc_info:
        collect({
            'ppt/slides/slide1.xml': slide_xml('fine'),
            'ppt/slides/slide2.xml': b'<a:t>\xff\xfe</a:t>',
        })
    assert 'ppt/slides/slide2.xml' in exc_info.value.message


def test_utf8_text_is_preserved():
    text = collect({'ppt/slides/slide1.xml': slide_xml('발표 자료 ✓')})
    assert text == '--- Slide 1 ---\n발표 자료 ✓ \n\n\n'
