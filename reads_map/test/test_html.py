from reads_map.reconstruct import AlignmentSet, ReadProjection
from reads_map.render.html import colorize, render_html, ruler

def test_colorize():
    assert colorize('AC-GTN') == (
        '<span class="base base-A">A</span>'
        '<span class="base base-C">C</span>'
        '<span class="base base-gap">-</span>'
        '<span class="base base-G">G</span>'
        '<span class="base base-T">T</span>'
        '<span class="base">N</span>'
    )

def test_ruler():
    assert ruler(9) == ''
    assert ruler(25) == '<span class="marker">10</span><span class="marker">20</span>'

def test_document_structure(small_set):
    document = render_html(small_set)

    assert document.startswith('<!DOCTYPE html>')
    assert document.rstrip().endswith('</html>')
    assert 'max="12"' in document
    assert 'width: 8px;' in document
    assert 'width: 80px;' in document
    assert document.count('class="read-row"') == 3
    assert document.count('class="read-label"') == 3
    assert 'CIGAR: 2M3D2M' in document
    assert '<div class="reference-sequence">' + colorize('ACGTACGTACGT') + '</div>' in document

def test_marker_width_follows_base_width(small_set):
    document = render_html(small_set, base_width=12)
    assert 'width: 12px;' in document
    assert 'width: 120px;' in document
    assert '* 12;' in document

def test_rows_keep_input_order(small_set):
    document = render_html(small_set)
    positions = [document.index(f'title="{name}') for name in ['zeta', 'alpha', 'mid']]
    assert positions == sorted(positions)

def test_names_are_escaped():
    reads = (ReadProjection('<b>&read', 1, 'A---', '1M'),)
    document = render_html(AlignmentSet('ACGT', reads))

    assert '<b>&read' not in document
    assert '&lt;b&gt;&amp;read (1):' in document

def test_label_titles_omit_colon(small_set):
    document = render_html(small_set)
    assert 'title="zeta (3)"' in document
    assert 'title="zeta (3):"' not in document
    assert '>zeta (3):</div>' in document
