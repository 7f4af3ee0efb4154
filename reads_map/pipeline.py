import logging
from pathlib import Path

import reads_map.config
import reads_map.render
import reads_map.sources
from reads_map.reconstruct import build_alignment_set
from reads_map.sources import InputError

logger = logging.getLogger(__name__)

def renderer_options(format_tag, config, alignment_fn, reference_fn):
    options = dict(config[format_tag])

    if format_tag == 'text':
        options['alignment_fn'] = alignment_fn
        options['reference_fn'] = reference_fn

    return options

def process(alignment_fn,
            reference_fn,
            output_fn=None,
            format_tag=None,
            config=None,
            progress=None,
            num_processes=1,
           ):
    ''' Loads reference_fn and the forward-strand records of alignment_fn,
    renders them in the requested format, and writes the result to
    output_fn (or a format-specific default name). Returns the path written.
    '''
    if config is None:
        config = reads_map.config.load_config()

    if format_tag is None:
        format_tag = config['format']

    format_tag = reads_map.render.normalize_format(format_tag)

    if output_fn is None:
        output_fn = reads_map.render.default_output_fns[format_tag]

    output_fn = Path(output_fn)

    reference = reads_map.sources.load_reference(reference_fn)
    records = reads_map.sources.load_alignments(alignment_fn)
    records = reads_map.sources.forward_records(records)

    alignment_set = build_alignment_set(reference,
                                        records,
                                        progress=progress,
                                        num_processes=num_processes,
                                       )

    options = renderer_options(format_tag, config, alignment_fn, reference_fn)
    content = reads_map.render.render(format_tag, alignment_set, **options)

    try:
        output_fn.write_text(content)
    except OSError as e:
        raise InputError(f'Failed to write output file: {e}') from e

    logger.info(f'Wrote {format_tag} output for {len(alignment_set.reads):,} reads to {output_fn}')

    return output_fn
