import logging

from reads_map.render.fasta import render_fasta
from reads_map.render.html import render_html
from reads_map.render.text import render_text

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = 'text'

renderers = {
    'text': render_text,
    'html': render_html,
    'fasta': render_fasta,
}

format_aliases = {
    'txt': 'text',
}

default_output_fns = {
    'text': 'output.txt',
    'html': 'output.html',
    'fasta': 'output.fasta',
}

def normalize_format(format_tag):
    ''' Resolves a user-supplied format tag to one of the keys of renderers.
    None and unrecognized tags fall back to DEFAULT_FORMAT.
    '''
    if format_tag is None:
        return DEFAULT_FORMAT

    tag = format_aliases.get(format_tag.lower(), format_tag.lower())

    if tag not in renderers:
        logger.warning(f'Unrecognized format {format_tag!r}, falling back to {DEFAULT_FORMAT}')
        tag = DEFAULT_FORMAT

    return tag

def render(format_tag, alignment_set, **options):
    return renderers[normalize_format(format_tag)](alignment_set, **options)
