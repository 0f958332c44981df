"""Unit tests for path extraction."""

from stencilbridge.core.extractor import (
    PathExtractor,
    extract_subpaths,
    find_path_tags,
    read_attributes,
    read_path_data,
)
from stencilbridge.domain import Bounds


def _svg(*paths: str) -> str:
    body = "\n".join(paths)
    return f'<svg xmlns="http://www.w3.org/2000/svg" width="200" height="200">\n{body}\n</svg>'


class TestFindPathTags:
    """Tests for locating path elements."""

    def test_finds_tags_in_order(self):
        doc = _svg('<path d="M0 0 L1 1"/>', '<path id="b" d="M2 2 L3 3"></path>')
        tags = find_path_tags(doc)
        assert tags == ['<path d="M0 0 L1 1"/>', '<path id="b" d="M2 2 L3 3">']

    def test_quoted_gt_does_not_end_tag(self):
        """Test that ">" inside an attribute value stays in the tag."""
        doc = _svg('<path data-note="a > b" d="M0 0 L5 5"/>')
        assert find_path_tags(doc) == ['<path data-note="a > b" d="M0 0 L5 5"/>']

    def test_ignores_similar_element_names(self):
        """Test that elements such as clipPath are not paths."""
        doc = _svg('<clipPath id="c"><rect/></clipPath>', '<pathology d="M0 0"/>')
        assert find_path_tags(doc) == []


class TestReadPathData:
    """Tests for reading the d attribute."""

    def test_double_quotes(self):
        assert read_path_data('<path d="M0 0 L1 1"/>') == "M0 0 L1 1"

    def test_single_quotes(self):
        assert read_path_data("<path d='M0 0 L1 1'/>") == "M0 0 L1 1"

    def test_missing_d(self):
        assert read_path_data('<path id="x"/>') is None

    def test_d_inside_another_value_is_skipped(self):
        """Test that quoted text resembling d= inside another attribute is not read."""
        tag = """<path class="a d='M0 0'" d="M5 5 L9 9 Z"/>"""
        assert read_path_data(tag) == "M5 5 L9 9 Z"

    def test_d_only_inside_another_value(self):
        assert read_path_data("""<path title="d='M0 0'"/>""") is None

    def test_read_attributes(self):
        tag = """<path id='p1' class="a d='x'" d = "M1 1" d="M2 2"/>"""
        assert read_attributes(tag) == {"id": "p1", "class": "a d='x'", "d": "M1 1"}

    def test_other_attribute_ending_in_d(self):
        """Test that attributes like "id" are not read as "d"."""
        assert read_path_data('<path id="x" d="M1 1"/>') == "M1 1"
        assert read_path_data('<path id="x"/>') is None


class TestPathExtractor:
    """Tests for PathExtractor."""

    def test_single_contour(self):
        """Test one element with one contour."""
        subpaths = extract_subpaths(_svg('<path d="M0 0 L10 0 L10 10 L0 10 Z"/>'))
        assert len(subpaths) == 1
        assert subpaths[0].id == "0_0"
        assert subpaths[0].bounds == Bounds(0, 0, 10, 10)
        assert subpaths[0].drawable_index == 0
        assert subpaths[0].contour_index == 0
        assert subpaths[0].is_inner is False

    def test_ids_encode_element_and_contour(self):
        doc = _svg(
            '<path d="M0 0 L100 0 L100 100 Z M10 10 L20 10 L20 20 Z"/>',
            '<path d="M0 0 L5 0 L5 5 Z"/>',
        )
        assert [s.id for s in extract_subpaths(doc)] == ["0_0", "0_1", "1_0"]

    def test_path_data_is_verbatim(self):
        doc = _svg('<path d="M0,0 L10,0 L10,10 Z m2,2 l1,0 l0,1 z"/>')
        subpaths = extract_subpaths(doc)
        assert [s.path_data for s in subpaths] == ["M0,0 L10,0 L10,10 Z", "m2,2 l1,0 l0,1 z"]

    def test_relative_contour_is_offset_by_cursor(self):
        """Test that a relative contour moves by the preceding absolute origin."""
        doc = _svg('<path d="M10 10 L110 10 L110 110 L10 110 Z m30 30 l20 0 l0 20 l-20 0 z"/>')
        outer, hole = extract_subpaths(doc)
        assert outer.bounds == Bounds(10, 10, 100, 100)
        assert hole.is_relative is True
        # pairs (30,30) (20,0) (0,20) (-20,0) span x -20..30 and y 0..30
        assert hole.bounds == Bounds(-10, 10, 50, 30)

    def test_cursor_only_follows_absolute_contours(self):
        """Test that a relative contour does not move the cursor."""
        doc = _svg(
            '<path d="M100 100 L200 100 L200 200 Z m-30 -30 l5 0 l0 5 z m20 20 l5 0 l0 5 z"/>'
        )
        _, first, second = extract_subpaths(doc)
        assert first.bounds == Bounds(70, 70, 35, 35)
        assert second.bounds == Bounds(100, 100, 20, 20)

    def test_absolute_contour_moves_cursor(self):
        doc = _svg(
            '<path d="M0 0 L50 0 L50 50 Z M100 100 L150 100 L150 150 Z m10 10 l5 0 l0 5 z"/>'
        )
        subpaths = extract_subpaths(doc)
        assert subpaths[2].bounds == Bounds(100, 100, 10, 10)

    def test_cursor_resets_per_element(self):
        """Test that each element starts with the cursor at the origin."""
        doc = _svg(
            '<path d="M100 100 L200 100 L200 200 Z"/>',
            '<path d="m10 10 l5 0 l0 5 z"/>',
        )
        subpaths = extract_subpaths(doc)
        # a first relative contour is not offset
        assert subpaths[1].bounds == Bounds(0, 0, 10, 10)
        assert subpaths[1].is_relative is True

    def test_skips_elements_without_d(self):
        """Test that elements without drawing commands do not take an index."""
        doc = _svg(
            '<path id="empty"/>',
            '<path d="M0 0 L5 0 L5 5 Z"/>',
        )
        subpaths = extract_subpaths(doc)
        assert [s.id for s in subpaths] == ["0_0"]

    def test_no_paths(self):
        assert PathExtractor().extract(_svg()) == []

    def test_garbage_input(self):
        """Test that malformed input gives an empty result without raising."""
        assert PathExtractor().extract("not a document <<<>>>") == []

    def test_contour_without_coordinates(self):
        """Test that a contour without pairs has zero bounds."""
        subpaths = extract_subpaths(_svg('<path d="M5"/>'))
        assert len(subpaths) == 1
        assert subpaths[0].bounds == Bounds.empty()
        assert subpaths[0].is_degenerate()

    def test_trailing_relative_move_without_coordinates(self):
        """Test that a bare relative move after a close keeps zero bounds."""
        subpaths = extract_subpaths(_svg('<path d="M5 5 L50 5 L50 50 Z m"/>'))
        assert [s.id for s in subpaths] == ["0_0", "0_1"]
        assert subpaths[0].bounds == Bounds(5, 5, 45, 45)
        assert subpaths[1].is_relative is True
        assert subpaths[1].bounds == Bounds.empty()
        assert subpaths[1].is_degenerate()

    def test_relative_contour_with_letter_only(self):
        """Test that "m7 z" has a single number and so no coordinate pairs."""
        subpaths = extract_subpaths(_svg('<path d="M5 5 L50 5 L50 50 Z m7 z"/>'))
        assert subpaths[1].bounds == Bounds.empty()
