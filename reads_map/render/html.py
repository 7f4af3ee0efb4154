''' Self-contained HTML document with colorized bases.

Every base is an inline-block of base_width pixels and every ruler marker
spans 10 bases, so markers stay over the columns they number.
'''

import html

document_template = '''\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{title}</title>
<style>
body {{
    font-family: monospace;
    margin: 0;
    padding: 0;
    height: 100vh;
    display: flex;
    flex-direction: column;
    overflow: hidden;
}}
.page-header {{
    padding: 10px 15px;
    background-color: #f5f5f5;
    box-shadow: 0 2px 4px rgba(0,0,0,0.1);
}}
.page-title {{
    margin-top: 0;
    margin-bottom: 10px;
    font-size: 1.5em;
}}
.controls {{
    margin-bottom: 10px;
    font-size: 0.9em;
}}
.main-container {{
    display: flex;
    flex-direction: column;
    height: calc(100vh - 100px);
    border: 1px solid #ccc;
}}
.reads-container {{
    flex-grow: 1;
    overflow: auto;
    position: relative;
    display: flex;
    flex-direction: column;
}}
.horizontal-layout {{
    display: flex;
    min-width: max-content;
}}
.reference-section {{
    position: sticky;
    top: 0;
    background-color: white;
    z-index: 10;
    border-bottom: 2px solid #ddd;
}}
.labels-column {{
    position: sticky;
    left: 0;
    min-width: 300px;
    max-width: 300px;
    background-color: white;
    border-right: 1px solid #eee;
    z-index: 5;
}}
.sequences-column {{
    flex: 1;
}}
.read-row {{
    display: flex;
}}
.read-label, .reference-label {{
    height: 20px;
    line-height: 20px;
    padding: 1px 5px;
    white-space: nowrap;
    overflow: hidden;
    text-overflow: ellipsis;
    font-size: 0.85em;
}}
.read-label {{
    min-width: 290px;
    max-width: 290px;
}}
.reference-label {{
    font-weight: bold;
}}
.position-row {{
    height: 18px;
    font-size: 0.75em;
    color: #777;
    white-space: nowrap;
}}
.marker {{
    display: inline-block;
    width: {marker_width}px;
    text-align: center;
}}
.read-sequence, .reference-sequence {{
    height: 20px;
    line-height: 20px;
    padding: 1px 0;
    white-space: nowrap;
    font-size: 0.85em;
}}
.reference-sequence {{
    font-weight: bold;
}}
.read-info {{
    font-size: 0.75em;
    color: #555;
    margin-left: 10px;
}}
.base {{
    display: inline-block;
    width: {base_width}px;
    text-align: center;
}}
.base-A {{ background-color: #ffcccc; color: red; }}
.base-C {{ background-color: #ccffcc; color: green; }}
.base-G {{ background-color: #ccccff; color: blue; }}
.base-T {{ background-color: #ffffcc; color: #b0b000; }}
.base-gap {{ background-color: #eeeeee; color: gray; }}
.status-bar {{
    position: fixed;
    bottom: 0;
    left: 0;
    right: 0;
    padding: 5px 10px;
    background: #f5f5f5;
    border-top: 1px solid #ddd;
    font-size: 12px;
    display: flex;
    justify-content: space-between;
}}
</style>
<script>
function scrollToPosition() {{
    const position = document.getElementById('position-input').value;
    if (position) {{
        document.querySelector('.reads-container').scrollLeft = (position - 1) * {base_width};
    }}
}}
</script>
</head>
<body>
<div class="page-header">
<h1 class="page-title">{title}</h1>
<div class="controls">
<label for="position-input">Jump to position: </label>
<input type="number" id="position-input" min="1" max="{reference_length}" value="1" />
<button onclick="scrollToPosition()">Go</button>
</div>
</div>

<div class="main-container">
<div class="reads-container">
<div class="horizontal-layout reference-section">
<div class="labels-column">
<div class="read-label reference-label">Reference:</div>
</div>
<div class="sequences-column">
<div class="position-row">{ruler}</div>
<div class="reference-sequence">{reference}</div>
</div>
</div>

<div class="horizontal-layout sequences-section">
<div class="labels-column">
{labels}
</div>
<div class="sequences-column">
{rows}
</div>
</div>
</div>
</div>

<div class="status-bar">
<span id="status-info">{num_reads} reads, {reference_length} reference positions</span>
<span>ReadsMap Alignment Tool</span>
</div>
</body>
</html>
'''.format

label_template = '<div class="read-label" title="{title}" data-index="{index}">{label}</div>'.format

row_template = '''\
<div class="read-row" data-index="{index}">
<div class="read-sequence">{sequence} <span class="read-info">CIGAR: {cigar}</span></div>
</div>'''.format

base_classes = {
    'A': 'base base-A',
    'C': 'base base-C',
    'G': 'base base-G',
    'T': 'base base-T',
    '-': 'base base-gap',
}

def colorize(sequence):
    spans = []
    for base in sequence:
        css_class = base_classes.get(base, 'base')
        spans.append(f'<span class="{css_class}">{html.escape(base)}</span>')
    return ''.join(spans)

def ruler(reference_length):
    return ''.join(f'<span class="marker">{position}</span>' for position in range(10, reference_length + 1, 10))

def render_html(alignment_set,
                base_width=8,
                title='Reads Alignment Visualization',
               ):
    labels = []
    rows = []

    for index, read in enumerate(alignment_set.reads):
        labels.append(label_template(title=html.escape(f'{read.name} ({read.start})'),
                                     label=html.escape(read.label),
                                     index=index,
                                    ))
        rows.append(row_template(index=index,
                                 sequence=colorize(read.aligned_sequence),
                                 cigar=html.escape(read.edit_script_text),
                                ))

    return document_template(title=html.escape(title),
                             base_width=base_width,
                             marker_width=10 * base_width,
                             reference_length=alignment_set.reference_length,
                             ruler=ruler(alignment_set.reference_length),
                             reference=colorize(alignment_set.reference),
                             labels='\n'.join(labels),
                             rows='\n'.join(rows),
                             num_reads=len(alignment_set.reads),
                            )
