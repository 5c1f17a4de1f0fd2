"""Tests for slide part selection and ordering."""

import pytest

from xgen_pptx2text.core.processor.pptx_helper import (
    PptxFileConverter,
    PptxPreprocessor,
    SlideEntry,
    is_slide_part,
    parse_slide_ordinal,
    select_slide_entries,
)

from tests.conftest import build_pptx, slide_xml


class TestIsSlidePart:
    @pytest.mark.parametrize('name', [
        'ppt/slides/slide1.xml',
        'ppt/slides/slide10.xml',
        'ppt/slides/slide.xml',
        'ppt/slides/slideIntro.xml',
    ])
    def test_slide_parts(self, name):
        assert is_slide_part(name)

    @pytest.mark.parametrize('name', [
        'ppt/slideLayouts/slideLayout1.xml',
        'ppt/notesSlides/notesSlide1.xml',
        'ppt/slideMasters/slideMaster1.xml',
        'ppt/slides/_rels/slide1.xml.rels',
        'ppt/slides/nested/slide1.xml',
        'ppt/Slides/slide1.xml',
        'ppt/slides/Slide1.xml',
        'ppt/slides/slide1.XML',
        'other/ppt/slides/slide1.xml',
        'ppt/slides/notslide1.xml',
    ])
    def test_non_slide_parts(self, name):
        assert not is_slide_part(name)


class TestParseSlideOrdinal:
    def test_numbered(self):
        assert parse_slide_ordinal('ppt/slides/slide7.xml') == 7
        assert parse_slide_ordinal('ppt/slides/slide007.xml') == 7

    @pytest.mark.parametrize('name', [
        'ppt/slides/slide.xml',
        'ppt/slides/slideIntro.xml',
        'ppt/slides/slide1a.xml',
        'ppt/slides/slide-1.xml',
        'ppt/slides/slide 1.xml',
    ])
    def test_unparsed(self, name):
        assert parse_slide_ordinal(name) is None


class TestSelectSlideEntries:
    def test_numeric_not_lexicographic_order(self):
        names = ['ppt/slides/slide2.xml', 'ppt/slides/slide10.xml', 'ppt/slides/slide1.xml']
        assert [e.ordinal for e in select_slide_entries(names)] == [1, 2, 10]

    def test_unparsed_ordinal_sorts_as_zero(self):
        names = ['ppt/slides/slide2.xml', 'ppt/slides/slideIntro.xml', 'ppt/slides/slide1.xml']
        assert [e.name for e in select_slide_entries(names)] == [
            'ppt/slides/slideIntro.xml',
            'ppt/slides/slide1.xml',
            'ppt/slides/slide2.xml',
        ]

    def test_ties_keep_enumeration_order(self):
        names = ['ppt/slides/slideB.xml', 'ppt/slides/slide0.xml', 'ppt/slides/slideA.xml']
        assert [e.name for e in select_slide_entries(names)] == names

    def test_non_slide_entries_are_dropped(self):
        names = [
            '[Content_Types].xml',
            'ppt/notesSlides/notesSlide1.xml',
            'ppt/slides/slide1.xml',
            'ppt/slideLayouts/slideLayout1.xml',
        ]
        assert select_slide_entries(names) == [SlideEntry('ppt/slides/slide1.xml', 1, 2)]

    def test_empty(self):
        assert select_slide_entries([]) == []


class TestPptxPreprocessor:
    def test_preprocess_returns_ordered_entries_and_metadata(self):
        data = build_pptx({
            'ppt/slides/slide3.xml': slide_xml('c'),
            'ppt/slides/slide1.xml': slide_xml('a'),
            'ppt/slides/slideX.xml': slide_xml('x'),
            'ppt/notesSlides/notesSlide1.xml': slide_xml('note'),
        })
        with PptxFileConverter().convert(data) as archive:
            preprocessed = PptxPreprocessor().preprocess(archive)

        assert preprocessed.raw_content is archive
        assert [e.name for e in preprocessed.clean_content] == [
            'ppt/slides/slideX.xml',
            'ppt/slides/slide1.xml',
            'ppt/slides/slide3.xml',
        ]
        assert preprocessed.metadata == {'entry_count': 5, 'slide_count': 3, 'unnumbered_slides': 1}
